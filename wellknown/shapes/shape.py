"""Core shape data structures and their Well-Known Text rendering."""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Dict, Iterable, Sequence, Tuple, Type, Union

import numpy as np

from ..errors import UnsupportedGeometryTypeError


class GeometryType(IntEnum):
    """Shape kinds, valued by their Well-Known Binary type code."""
    POINT = 1
    LINESTRING = 2
    POLYGON = 3
    MULTIPOINT = 4
    MULTILINESTRING = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7

    @classmethod
    def from_code(cls, code: int, offset: int = 0) -> "GeometryType":
        """Look up a type code read from a binary header at the given offset."""
        try:
            return cls(code)
        except ValueError:
            raise UnsupportedGeometryTypeError(code, offset) from None

    @property
    def keyword(self) -> str:
        """The Well-Known Text keyword introducing this kind of shape."""
        return self.name


def format_coordinate(value: float) -> str:
    """
    Render a coordinate as the shortest decimal that reads back exactly.

    Always positional (never exponent notation) and without a trailing
    ".0", so 1.0 renders as "1" and 1e-05 as "0.00001".
    """
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class Point:
    """A pair of double-precision coordinates."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __str__(self) -> str:
        return f"{format_coordinate(self.x)} {format_coordinate(self.y)}"


PointLike = Union[Point, Sequence[float]]


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


def _as_points(values: Iterable[PointLike]) -> Tuple[Point, ...]:
    return tuple(_as_point(value) for value in values)


def _format_points(points: Sequence[Point]) -> str:
    """Render points as "x1 y1,x2 y2,..."."""
    return ",".join(str(point) for point in points)


def _format_rings(rings: Sequence["LinearRing"]) -> str:
    """Render rings as "(pts),(pts),..."."""
    return ",".join(f"({_format_points(ring.points)})" for ring in rings)


@dataclass(frozen=True)
class LinearRing:
    """
    An ordered sequence of points bounding a polygon component.

    Closure is not enforced: the first and last points are stored exactly
    as supplied.
    """
    points: Tuple[Point, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "points", _as_points(self.points))

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class PointShape:
    """A single point as a standalone shape."""
    point: Point
    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    def __post_init__(self):
        object.__setattr__(self, "point", _as_point(self.point))

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y

    def is_empty(self) -> bool:
        """A point shape always holds exactly one point."""
        return False

    def to_wkt(self) -> str:
        return f"{self.geometry_type.keyword}( {self.point} )"

    def __str__(self) -> str:
        return self.to_wkt()


def _as_point_shape(value: Union[PointShape, PointLike]) -> PointShape:
    if isinstance(value, PointShape):
        return value
    return PointShape(_as_point(value))


@dataclass(frozen=True)
class LineString:
    """An ordered, possibly empty, sequence of points."""
    points: Tuple[Point, ...] = ()
    geometry_type: ClassVar[GeometryType] = GeometryType.LINESTRING

    def __post_init__(self):
        object.__setattr__(self, "points", _as_points(self.points))

    def is_empty(self) -> bool:
        return not self.points

    def to_wkt(self) -> str:
        if not self.points:
            return f"{self.geometry_type.keyword} EMPTY"
        return f"{self.geometry_type.keyword}({_format_points(self.points)})"

    def __str__(self) -> str:
        return self.to_wkt()


@dataclass(frozen=True)
class Polygon:
    """
    An ordered sequence of rings.

    By convention the first ring is the exterior and the rest are holes;
    nothing here checks it.
    """
    rings: Tuple[LinearRing, ...] = ()
    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    def __post_init__(self):
        rings = tuple(
            ring if isinstance(ring, LinearRing) else LinearRing(ring)
            for ring in self.rings
        )
        object.__setattr__(self, "rings", rings)

    def is_empty(self) -> bool:
        return not self.rings

    def to_wkt(self) -> str:
        if not self.rings:
            return f"{self.geometry_type.keyword} EMPTY"
        return f"{self.geometry_type.keyword}({_format_rings(self.rings)})"

    def __str__(self) -> str:
        return self.to_wkt()


@dataclass(frozen=True)
class MultiPoint:
    """An ordered sequence of point shapes."""
    points: Tuple[PointShape, ...] = ()
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOINT

    def __post_init__(self):
        object.__setattr__(
            self, "points", tuple(_as_point_shape(p) for p in self.points)
        )

    def is_empty(self) -> bool:
        return not self.points

    def to_wkt(self) -> str:
        # Members are always written as bare coordinate pairs.
        if not self.points:
            return f"{self.geometry_type.keyword} EMPTY"
        body = _format_points([p.point for p in self.points])
        return f"{self.geometry_type.keyword}({body})"

    def __str__(self) -> str:
        return self.to_wkt()


@dataclass(frozen=True)
class MultiLineString:
    """An ordered sequence of line strings."""
    line_strings: Tuple[LineString, ...] = ()
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING

    def __post_init__(self):
        line_strings = tuple(
            ls if isinstance(ls, LineString) else LineString(ls)
            for ls in self.line_strings
        )
        object.__setattr__(self, "line_strings", line_strings)

    def is_empty(self) -> bool:
        return not self.line_strings

    def to_wkt(self) -> str:
        if not self.line_strings:
            return f"{self.geometry_type.keyword} EMPTY"
        body = ",".join(f"({_format_points(ls.points)})" for ls in self.line_strings)
        return f"{self.geometry_type.keyword}({body})"

    def __str__(self) -> str:
        return self.to_wkt()


@dataclass(frozen=True)
class MultiPolygon:
    """An ordered sequence of polygons."""
    polygons: Tuple[Polygon, ...] = ()
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON

    def __post_init__(self):
        polygons = tuple(
            poly if isinstance(poly, Polygon) else Polygon(poly)
            for poly in self.polygons
        )
        object.__setattr__(self, "polygons", polygons)

    def is_empty(self) -> bool:
        return not self.polygons

    def to_wkt(self) -> str:
        if not self.polygons:
            return f"{self.geometry_type.keyword} EMPTY"
        body = ",".join(f"({_format_rings(poly.rings)})" for poly in self.polygons)
        return f"{self.geometry_type.keyword}({body})"

    def __str__(self) -> str:
        return self.to_wkt()


@dataclass(frozen=True)
class GeometryCollection:
    """An ordered sequence of shapes of any kind, collections included."""
    shapes: Tuple["Shape", ...] = ()
    geometry_type: ClassVar[GeometryType] = GeometryType.GEOMETRYCOLLECTION

    def __post_init__(self):
        shapes = tuple(self.shapes)
        for shape in shapes:
            if not isinstance(shape, SHAPE_CLASSES):
                raise TypeError(f"Not a shape: {shape!r}")
        object.__setattr__(self, "shapes", shapes)

    def is_empty(self) -> bool:
        return not self.shapes

    def to_wkt(self) -> str:
        # Collections are walked with an explicit stack.
        parts = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif not isinstance(item, GeometryCollection):
                parts.append(item.to_wkt())
            elif not item.shapes:
                parts.append(f"{item.geometry_type.keyword} EMPTY")
            else:
                pending = [f"{item.geometry_type.keyword}("]
                for index, member in enumerate(item.shapes):
                    if index:
                        pending.append(",")
                    pending.append(member)
                pending.append(")")
                stack.extend(reversed(pending))
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_wkt()


Shape = Union[
    PointShape,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]

SHAPE_TYPES: Dict[GeometryType, Type] = {
    GeometryType.POINT: PointShape,
    GeometryType.LINESTRING: LineString,
    GeometryType.POLYGON: Polygon,
    GeometryType.MULTIPOINT: MultiPoint,
    GeometryType.MULTILINESTRING: MultiLineString,
    GeometryType.MULTIPOLYGON: MultiPolygon,
    GeometryType.GEOMETRYCOLLECTION: GeometryCollection,
}

SHAPE_CLASSES = tuple(SHAPE_TYPES.values())

# Deepest chain of nested geometry collections the decoders accept.
MAX_NESTING_DEPTH = 100


def is_shape(value: object) -> bool:
    """Check whether a value is one of the seven shape variants."""
    return isinstance(value, SHAPE_CLASSES)


def to_wkt(shape: Shape) -> str:
    """Render any shape to Well-Known Text."""
    if not is_shape(shape):
        raise NotImplementedError(f"Cannot render {type(shape).__name__} as WKT")
    return shape.to_wkt()
