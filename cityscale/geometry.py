"""Polygon and multi-polygon geometry in (lat, lng) degrees."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real

from shapely.geometry import MultiPolygon, Polygon, mapping

Point = tuple[float, float]  # (lat, lng)
Ring = tuple[Point, ...]


class GeometryError(ValueError):
    """Base class for rejected geometry input."""


class InvalidGeometry(GeometryError):
    """Geometry has no usable vertices."""


class MalformedPoint(GeometryError):
    """A terminal element is not a (lat, lng) pair of finite numbers."""


@dataclass(frozen=True)
class SimpleGeometry:
    ring: Ring

    def __post_init__(self):
        object.__setattr__(self, "ring", _parse_ring(self.ring))

    @property
    def rings(self) -> tuple[Ring, ...]:
        return (self.ring,)

    @property
    def is_multi(self) -> bool:
        return False

    @property
    def point_count(self) -> int:
        return len(self.ring)

    def to_coords(self) -> list[list[float]]:
        return [[lat, lng] for lat, lng in self.ring]


@dataclass(frozen=True)
class MultiGeometry:
    rings: tuple[Ring, ...]

    def __post_init__(self):
        if not _is_sequence(self.rings):
            raise MalformedPoint(f"Expected a list of rings, got {self.rings!r}")
        object.__setattr__(self, "rings", tuple(_parse_ring(r) for r in self.rings))

    @property
    def is_multi(self) -> bool:
        return True

    @property
    def point_count(self) -> int:
        return sum(len(r) for r in self.rings)

    def to_coords(self) -> list[list[list[float]]]:
        return [[[lat, lng] for lat, lng in ring] for ring in self.rings]


Geometry = SimpleGeometry | MultiGeometry


@dataclass(frozen=True)
class RelocatedGeometry:
    """A shape moved to ``target`` by ``projection.relocate``.

    Kept distinct from Geometry so that a relocated shape cannot be passed
    back in as the source of another relocation.
    """

    shape: Geometry
    target: Point

    def to_coords(self):
        return self.shape.to_coords()


def _unwrap(value):
    if isinstance(value, RelocatedGeometry):
        return value.shape
    return value


def _is_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def is_multi(coords) -> bool:
    """True when raw coordinates nest three deep (a list of rings)."""
    if not _is_sequence(coords) or not coords:
        return False
    first = coords[0]
    if not _is_sequence(first):
        return False
    return not first or _is_sequence(first[0])


def parse_point(value) -> Point:
    if not _is_sequence(value) or len(value) != 2:
        raise MalformedPoint(f"Expected a [lat, lng] pair, got {value!r}")
    lat, lng = value
    for v in (lat, lng):
        if isinstance(v, bool) or not isinstance(v, Real) or not math.isfinite(v):
            raise MalformedPoint(f"Expected finite numbers, got {value!r}")
    return (float(lat), float(lng))


def _parse_ring(points) -> Ring:
    if not _is_sequence(points):
        raise MalformedPoint(f"Expected a list of points, got {points!r}")
    return tuple(parse_point(p) for p in points)


def parse_geometry(coords) -> Geometry:
    """Build a Geometry from nested lists of [lat, lng] pairs.

    Depth 2 is a single ring, depth 3 a list of rings.  Anything deeper fails
    on the first element that should have been a point.
    """
    if not _is_sequence(coords):
        raise MalformedPoint(f"Expected a list of coordinates, got {coords!r}")
    if is_multi(coords):
        return MultiGeometry(coords)
    return SimpleGeometry(coords)


def as_geometry(value) -> Geometry:
    if isinstance(value, (SimpleGeometry, MultiGeometry)):
        return value
    return parse_geometry(value)


def centroid(geometry) -> Point:
    """Return the unweighted mean of every vertex across all rings.

    Rings with more vertices pull the result toward themselves; this is not
    an area centroid.
    """
    shape = as_geometry(_unwrap(geometry))

    lat_sum = 0.0
    lng_sum = 0.0
    count = 0
    for ring in shape.rings:
        for lat, lng in ring:
            lat_sum += lat
            lng_sum += lng
            count += 1

    if count == 0:
        raise InvalidGeometry("Cannot compute the centroid of an empty geometry")
    return (lat_sum / count, lng_sum / count)


def _shapely_ring(ring: Ring) -> list[tuple[float, float]]:
    if len(ring) < 3:
        raise InvalidGeometry(f"A ring needs at least 3 points, got {len(ring)}")
    return [(lng, lat) for lat, lng in ring]


def to_shapely(geometry) -> Polygon | MultiPolygon:
    """Convert to shapely, which uses (x, y) = (lng, lat)."""
    shape = as_geometry(_unwrap(geometry))
    if shape.is_multi:
        return MultiPolygon([Polygon(_shapely_ring(r)) for r in shape.rings])
    return Polygon(_shapely_ring(shape.ring))


def to_geojson(geometry) -> dict:
    return mapping(to_shapely(geometry))
