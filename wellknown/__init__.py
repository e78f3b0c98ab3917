"""Conversion of 2D geometries between shapes, Well-Known Text and Well-Known Binary."""

import logging

from .errors import (
    WellKnownError,
    WktSyntaxError,
    WkbError,
    UnsupportedByteOrderError,
    UnsupportedGeometryTypeError,
    UnexpectedGeometryTypeError,
    BufferOutOfRangeError,
    WkbNestingError,
)
from .shapes import (
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
    MAX_NESTING_DEPTH,
)
from .text import WktParser
from .binary import WkbDecoder, WkbEncoder
from .codec import parse_text, parse_binary, parse_hex, to_text, to_binary, to_hex

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "WellKnownError",
    "WktSyntaxError",
    "WkbError",
    "UnsupportedByteOrderError",
    "UnsupportedGeometryTypeError",
    "UnexpectedGeometryTypeError",
    "BufferOutOfRangeError",
    "WkbNestingError",
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
    "MAX_NESTING_DEPTH",
    "WktParser",
    "WkbDecoder",
    "WkbEncoder",
    "parse_text",
    "parse_binary",
    "parse_hex",
    "to_text",
    "to_binary",
    "to_hex",
]
