"""Shape model: the seven geometry kinds and their building blocks."""

from .shape import (
    GeometryType,
    Point,
    LinearRing,
    PointShape,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
    Shape,
    SHAPE_TYPES,
    MAX_NESTING_DEPTH,
    format_coordinate,
    is_shape,
    to_wkt,
)

__all__ = [
    "GeometryType",
    "Point",
    "LinearRing",
    "PointShape",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "Shape",
    "SHAPE_TYPES",
    "MAX_NESTING_DEPTH",
    "format_coordinate",
    "is_shape",
    "to_wkt",
]
