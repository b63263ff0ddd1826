"""Flask application exposing city data and overlay relocation."""

import logging
import math

from flask import Flask, jsonify, request

from .basemap import DEFAULT_SOURCE, TILE_SOURCES, get_source
from .cities import CITIES, CityRecord, get_city
from .geometry import GeometryError, centroid, to_geojson
from .projection import ground_area_km2, relocate

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _overlay_payload(city: CityRecord, lat: float, lng: float) -> dict:
    # Always relocate the city's original coords, never a previous overlay.
    moved = relocate(city.coords, lat, lng)
    handle = centroid(moved)
    logger.debug("Relocated %s to (%.5f, %.5f)", city.key, lat, lng)
    return {
        "key": city.key,
        "name": city.name,
        "color": city.color,
        "description": city.description,
        "coords": moved.to_coords(),
        "geojson": to_geojson(moved),
        "handle": list(handle),
        "area_km2": round(ground_area_km2(moved), 3),
    }


def _parse_target(data: dict) -> tuple[float, float]:
    lat = float(data["lat"])
    lng = float(data["lng"])
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"lat must be within [-90, 90], got {lat}")
    if not math.isfinite(lng):
        raise ValueError("lng must be a finite number")
    return lat, lng


def _city_or_404(key: str):
    if key not in CITIES:
        logger.warning("Unknown city %r", key)
        return None, (jsonify({"error": f"Unknown city: {key}"}), 404)
    return get_city(key), None


@app.errorhandler(GeometryError)
def geometry_error(exc):
    logger.warning("Rejected geometry: %s", exc)
    return jsonify({"error": f"Invalid geometry: {exc}"}), 422


@app.route("/api/cities")
def list_cities():
    return jsonify([c.to_dict() for c in CITIES.values()])


@app.route("/api/cities/<key>")
def city_detail(key):
    city, error = _city_or_404(key)
    if error:
        return error
    return jsonify(city.to_dict())


@app.route("/api/basemap")
def basemap():
    source = request.args.get("source", DEFAULT_SOURCE)
    if source not in TILE_SOURCES:
        return jsonify({"error": f"source must be one of {list(TILE_SOURCES.keys())}"}), 400
    return jsonify(get_source(source))


@app.route("/api/compare", methods=["POST"])
def compare():
    """Place the overlay city on the base city's map center."""
    data = request.get_json(force=True, silent=True)
    try:
        base_key = str(data["base"])
        overlay_key = str(data["overlay"])
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Bad compare request: %s", exc)
        return jsonify({"error": f"Invalid parameters: {exc}"}), 400

    base, error = _city_or_404(base_key)
    if error:
        return error
    overlay, error = _city_or_404(overlay_key)
    if error:
        return error

    lat, lng = base.center
    return jsonify({
        "base": base.to_dict(),
        "overlay": _overlay_payload(overlay, lat, lng),
    })


@app.route("/api/relocate", methods=["POST"])
def relocate_overlay():
    """Move the overlay city to an arbitrary point, e.g. a drag position."""
    data = request.get_json(force=True, silent=True)
    try:
        overlay_key = str(data["overlay"])
        lat, lng = _parse_target(data)
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Bad relocate request: %s", exc)
        return jsonify({"error": f"Invalid parameters: {exc}"}), 400

    overlay, error = _city_or_404(overlay_key)
    if error:
        return error
    return jsonify(_overlay_payload(overlay, lat, lng))
