import pytest

from cityscale.cities import CITIES
from cityscale.geometry import centroid
from cityscale.server import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_list_cities(client):
    resp = client.get("/api/cities")
    assert resp.status_code == 200
    keys = [c["key"] for c in resp.get_json()]
    assert keys == list(CITIES)


def test_city_detail_and_unknown_city(client):
    resp = client.get("/api/cities/nyc")
    assert resp.status_code == 200
    assert len(resp.get_json()["coords"]) == 3

    resp = client.get("/api/cities/atlantis")
    assert resp.status_code == 404
    assert "atlantis" in resp.get_json()["error"]


def test_basemap(client):
    resp = client.get("/api/basemap")
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "carto_light"
    assert client.get("/api/basemap?source=osm").get_json()["name"] == "osm"
    assert client.get("/api/basemap?source=nope").status_code == 400


def test_compare_places_overlay_on_base_center(client):
    resp = client.post("/api/compare", json={"base": "london", "overlay": "nyc"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["base"]["key"] == "london"

    overlay = body["overlay"]
    base_lat, base_lng = CITIES["london"].center
    assert overlay["handle"] == pytest.approx([base_lat, base_lng], abs=1e-6)
    assert centroid(overlay["coords"]) == pytest.approx((base_lat, base_lng), abs=1e-6)
    assert overlay["geojson"]["type"] == "MultiPolygon"
    assert [len(r) for r in overlay["coords"]] == [8, 6, 12]


def test_relocate_keeps_area(client):
    a = client.post("/api/relocate", json={"overlay": "amsterdam", "lat": 0.0, "lng": 0.0}).get_json()
    b = client.post("/api/relocate", json={"overlay": "amsterdam", "lat": 60.0, "lng": 10.0}).get_json()
    assert a["area_km2"] == pytest.approx(b["area_km2"], rel=1e-4)
    assert b["handle"] == pytest.approx([60.0, 10.0], abs=1e-6)


@pytest.mark.parametrize("payload", [
    {"overlay": "amsterdam", "lat": 0.0},
    {"overlay": "amsterdam", "lat": "north", "lng": 0.0},
    {"overlay": "amsterdam", "lat": 91.0, "lng": 0.0},
    {"lat": 0.0, "lng": 0.0},
])
def test_relocate_rejects_bad_parameters(client, payload):
    resp = client.post("/api/relocate", json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_relocate_unknown_city(client):
    resp = client.post("/api/relocate", json={"overlay": "atlantis", "lat": 0.0, "lng": 0.0})
    assert resp.status_code == 404


def test_compare_without_body(client):
    resp = client.post("/api/compare", data="not json", content_type="text/plain")
    assert resp.status_code == 400
