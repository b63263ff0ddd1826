"""Tile sources the map client can draw underneath the overlays."""

# Tile sources the user can choose from
TILE_SOURCES = {
    "carto_light": {
        "url": "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
        "label": "CartoDB Positron",
        "attribution": (
            '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
            'contributors &copy; <a href="https://carto.com/attributions">CARTO</a>'
        ),
        "subdomains": "abcd",
        "max_zoom": 19,
    },
    "osm": {
        "url": "https://tile.openstreetmap.org/{z}/{x}/{y}.png",
        "label": "OpenStreetMap",
        "attribution": (
            '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> '
            'contributors'
        ),
        "subdomains": "",
        "max_zoom": 19,
    },
}

DEFAULT_SOURCE = "carto_light"


def get_source(name: str = DEFAULT_SOURCE) -> dict:
    return {"name": name, **TILE_SOURCES[name]}
