"""Well-Known Binary encoding."""

import logging
import struct
from typing import Optional, Sequence

from ..shapes.shape import (
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    PointShape,
    Polygon,
    Shape,
)

logger = logging.getLogger(__name__)


class WkbEncoder:
    """Encoder producing little-endian Well-Known Binary."""

    LITTLE_ENDIAN = 1

    _HEADER = struct.Struct("<BI")
    _UINT32 = struct.Struct("<I")
    _COORDS = struct.Struct("<dd")

    @staticmethod
    def encode(shape: Shape) -> bytes:
        """
        Encode a shape into a WKB byte string.

        Args:
            shape: The shape to encode

        Returns:
            The encoded bytes, always little-endian

        Raises:
            NotImplementedError: If shape is not one of the seven shape kinds
        """
        out = bytearray()
        WkbEncoder.append_shape(out, shape)
        logger.debug("Encoded %s into %d WKB bytes", shape.geometry_type.name, len(out))
        return bytes(out)

    @staticmethod
    def to_hex(shape: Shape) -> str:
        """Encode a shape as an upper-case hex WKB string."""
        return WkbEncoder.encode(shape).hex().upper()

    @staticmethod
    def append_shape(out: bytearray, shape: Shape) -> None:
        """Append the header and payload of any shape to out."""
        # Collections are walked with an explicit stack.
        stack = [shape]
        while stack:
            shape = stack.pop()
            if isinstance(shape, GeometryCollection):
                WkbEncoder._append_header(
                    out, GeometryType.GEOMETRYCOLLECTION, len(shape.shapes)
                )
                stack.extend(reversed(shape.shapes))
            else:
                WkbEncoder._append_simple_shape(out, shape)

    @staticmethod
    def _append_simple_shape(out: bytearray, shape: Shape) -> None:
        """Append any shape other than a geometry collection."""
        if isinstance(shape, PointShape):
            WkbEncoder._append_point(out, shape)
        elif isinstance(shape, LineString):
            WkbEncoder._append_line_string(out, shape)
        elif isinstance(shape, Polygon):
            WkbEncoder._append_polygon(out, shape)
        elif isinstance(shape, MultiPoint):
            WkbEncoder._append_header(out, GeometryType.MULTIPOINT, len(shape.points))
            for point in shape.points:
                WkbEncoder._append_point(out, point)
        elif isinstance(shape, MultiLineString):
            WkbEncoder._append_header(out, GeometryType.MULTILINESTRING, len(shape.line_strings))
            for line_string in shape.line_strings:
                WkbEncoder._append_line_string(out, line_string)
        elif isinstance(shape, MultiPolygon):
            WkbEncoder._append_header(out, GeometryType.MULTIPOLYGON, len(shape.polygons))
            for polygon in shape.polygons:
                WkbEncoder._append_polygon(out, polygon)
        else:
            raise NotImplementedError(f"Cannot encode {type(shape).__name__} as WKB")

    @staticmethod
    def _append_header(
        out: bytearray, geometry_type: GeometryType, count: Optional[int] = None
    ) -> None:
        """Append byte order and type, then the element count if one is given."""
        out += WkbEncoder._HEADER.pack(WkbEncoder.LITTLE_ENDIAN, geometry_type)
        if count is not None:
            out += WkbEncoder._UINT32.pack(count)

    @staticmethod
    def _append_points(out: bytearray, points: Sequence[Point]) -> None:
        out += WkbEncoder._UINT32.pack(len(points))
        for point in points:
            out += WkbEncoder._COORDS.pack(point.x, point.y)

    @staticmethod
    def _append_point(out: bytearray, shape: PointShape) -> None:
        WkbEncoder._append_header(out, GeometryType.POINT)
        out += WkbEncoder._COORDS.pack(shape.x, shape.y)

    @staticmethod
    def _append_line_string(out: bytearray, shape: LineString) -> None:
        WkbEncoder._append_header(out, GeometryType.LINESTRING)
        WkbEncoder._append_points(out, shape.points)

    @staticmethod
    def _append_polygon(out: bytearray, shape: Polygon) -> None:
        WkbEncoder._append_header(out, GeometryType.POLYGON, len(shape.rings))
        for ring in shape.rings:
            WkbEncoder._append_points(out, ring.points)
