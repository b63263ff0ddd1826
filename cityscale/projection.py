"""Latitude-corrected relocation of polygons, plus a local metric frame.

Shapes are moved with a flat-earth approximation that is only meant for
city-sized polygons: latitude offsets are carried over unchanged, longitude
offsets are rescaled by cos(origin) / cos(target) so the east-west ground
width stays the same.
"""

import math

from shapely.geometry import MultiPolygon, Polygon

from .geometry import (
    Geometry,
    MultiGeometry,
    Point,
    RelocatedGeometry,
    Ring,
    SimpleGeometry,
    as_geometry,
    centroid,
)

METERS_PER_DEGREE_LAT = 111_319.49  # at the equator

# Lower bound on cos(target latitude).  Above roughly 84 degrees the shape is
# no longer size-true; it is only kept finite.
COS_FLOOR = 0.1


def _project_point(point: Point, origin_lat: float, origin_lng: float,
                   target_lat: float, target_lng: float) -> Point:
    lat, lng = point
    lat_offset = lat - origin_lat
    lng_offset = lng - origin_lng

    metric_width = lng_offset * math.cos(math.radians(origin_lat))
    target_factor = max(COS_FLOOR, math.cos(math.radians(target_lat)))
    new_lng_offset = metric_width / target_factor

    return (target_lat + lat_offset, target_lng + new_lng_offset)


def _project_ring(ring: Ring, *args: float) -> Ring:
    return tuple(_project_point(p, *args) for p in ring)


def project(geometry, origin_lat: float, origin_lng: float,
            target_lat: float, target_lng: float) -> Geometry:
    """Move every vertex from the origin reference to the target reference.

    The result has the same variant, ring order and per-ring point counts as
    the input.  A RelocatedGeometry is refused for the same reason as in
    relocate().
    """
    if isinstance(geometry, RelocatedGeometry):
        raise TypeError("project() needs the original geometry, "
                        "not the result of a previous relocation")
    shape = as_geometry(geometry)
    args = (origin_lat, origin_lng, target_lat, target_lng)
    if shape.is_multi:
        return MultiGeometry(tuple(_project_ring(r, *args) for r in shape.rings))
    return SimpleGeometry(_project_ring(shape.ring, *args))


def relocate(source, target_lat: float, target_lng: float) -> RelocatedGeometry:
    """Move a shape so its vertex centroid sits on (target_lat, target_lng).

    ``source`` must be the original geometry.  Relocations are not meant to be
    chained, so a RelocatedGeometry is refused; relocate the original again
    with the new target instead.
    """
    if isinstance(source, RelocatedGeometry):
        raise TypeError("relocate() needs the original geometry, "
                        "not the result of a previous relocation")
    shape = as_geometry(source)
    origin_lat, origin_lng = centroid(shape)
    moved = project(shape, origin_lat, origin_lng, target_lat, target_lng)
    return RelocatedGeometry(shape=moved, target=(target_lat, target_lng))


class Projector:
    """Projects WGS84 coordinates to a local Cartesian frame.

    Origin is the given center.  X = east, Y = north.
    """

    def __init__(self, center_lat: float, center_lng: float):
        self.center_lat = center_lat
        self.center_lng = center_lng
        self.cos_lat = math.cos(math.radians(center_lat))

    def project(self, lat: float, lng: float) -> tuple[float, float]:
        """Return (x, y) in meters."""
        x = (lng - self.center_lng) * METERS_PER_DEGREE_LAT * self.cos_lat
        y = (lat - self.center_lat) * METERS_PER_DEGREE_LAT
        return (x, y)


def ground_area_km2(geometry) -> float:
    """Approximate ground area of the shape in square kilometres."""
    if isinstance(geometry, RelocatedGeometry):
        geometry = geometry.shape
    shape = as_geometry(geometry)
    projector = Projector(*centroid(shape))
    polygons = [Polygon([projector.project(lat, lng) for lat, lng in ring])
                for ring in shape.rings if len(ring) >= 3]
    return MultiPolygon(polygons).area / 1e6
