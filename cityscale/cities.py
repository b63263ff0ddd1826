"""Simplified city boundaries used for comparison overlays."""

from dataclasses import dataclass

from .geometry import Geometry, Point, parse_geometry


@dataclass(frozen=True)
class CityRecord:
    key: str
    name: str
    color: str        # CSS hex
    center: Point     # map view center (lat, lng)
    zoom: int         # default map zoom level
    description: str
    coords: Geometry

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "color": self.color,
            "center": list(self.center),
            "zoom": self.zoom,
            "description": self.description,
            "coords": self.coords.to_coords(),
        }


CITIES: dict[str, CityRecord] = {
    "amsterdam": CityRecord(
        key="amsterdam",
        name="Amsterdam",
        color="#e67e22",
        center=(52.3676, 4.9041),
        zoom=11,
        description="Municipality (~219 km²)",
        # A10 ring plus Noord
        coords=parse_geometry([
            [52.424, 4.885], [52.428, 4.920], [52.415, 4.965], [52.395, 5.000], [52.380, 5.015],
            [52.360, 5.020], [52.340, 5.000], [52.325, 4.970], [52.310, 4.930], [52.295, 4.880],
            [52.305, 4.830], [52.325, 4.790], [52.345, 4.760], [52.370, 4.755], [52.390, 4.775],
            [52.405, 4.820], [52.415, 4.850],
        ]),
    ),
    "london": CityRecord(
        key="london",
        name="London",
        color="#e74c3c",
        center=(51.5072, -0.1276),
        zoom=9,
        description="Greater London (~1,572 km²)",
        coords=parse_geometry([
            [51.669, -0.040], [51.625, 0.160], [51.590, 0.230], [51.550, 0.280], [51.500, 0.310],
            [51.450, 0.220], [51.380, 0.150], [51.320, 0.100], [51.290, -0.120], [51.310, -0.250],
            [51.360, -0.380], [51.410, -0.480], [51.500, -0.510], [51.550, -0.480], [51.620, -0.300],
            [51.660, -0.150],
        ]),
    ),
    "nyc": CityRecord(
        key="nyc",
        name="New York City",
        color="#3498db",
        center=(40.7128, -74.0060),
        zoom=10,
        description="Five Boroughs (~783 km²)",
        coords=parse_geometry([
            # Manhattan
            [[40.875, -73.910], [40.820, -73.960], [40.750, -74.010], [40.700, -74.020],
             [40.705, -73.970], [40.740, -73.965], [40.800, -73.930], [40.840, -73.910]],
            # Staten Island
            [[40.640, -74.060], [40.650, -74.200], [40.560, -74.250], [40.500, -74.240],
             [40.520, -74.150], [40.590, -74.050]],
            # Bronx, Queens and Brooklyn as one landmass
            [[40.910, -73.900], [40.870, -73.780], [40.780, -73.750], [40.750, -73.700],
             [40.600, -73.740], [40.570, -73.850], [40.570, -74.020], [40.650, -74.040],
             [40.720, -73.940], [40.800, -73.900], [40.840, -73.880], [40.880, -73.920]],
        ]),
    ),
}


def get_city(key: str) -> CityRecord:
    return CITIES[key]
