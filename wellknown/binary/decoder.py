"""Well-Known Binary decoding."""

import binascii
import logging
import struct
from typing import Callable, Dict, List, Tuple, Union

from ..errors import (
    BufferOutOfRangeError,
    UnexpectedGeometryTypeError,
    UnsupportedByteOrderError,
    WkbError,
    WkbNestingError,
)
from ..shapes.shape import (
    MAX_NESTING_DEPTH,
    GeometryCollection,
    GeometryType,
    LinearRing,
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

Buffer = Union[bytes, bytearray, memoryview]

LITTLE_ENDIAN = 1

_BYTE = struct.Struct("<B")
_UINT32 = struct.Struct("<I")
_COORDS = struct.Struct("<dd")
HEADER_SIZE = _BYTE.size + _UINT32.size


def _unpack(fmt: struct.Struct, buffer: Buffer, offset: int) -> tuple:
    """Unpack fmt at offset, failing if the buffer is too short."""
    if offset < 0 or offset + fmt.size > len(buffer):
        raise BufferOutOfRangeError(offset, fmt.size, len(buffer))
    return fmt.unpack_from(buffer, offset)


def _read_count(buffer: Buffer, offset: int) -> int:
    return _unpack(_UINT32, buffer, offset)[0]


def _read_points(buffer: Buffer, offset: int) -> Tuple[List[Point], int]:
    """Read a point count followed by that many coordinate pairs."""
    count = _read_count(buffer, offset)
    offset += _UINT32.size
    needed = count * _COORDS.size
    if offset + needed > len(buffer):
        raise BufferOutOfRangeError(offset, needed, len(buffer))
    points = []
    for x, y in _COORDS.iter_unpack(bytes(buffer[offset:offset + needed])):
        points.append(Point(x, y))
    return points, offset + needed


class WkbDecoder:
    """Decoder for little-endian Well-Known Binary."""

    @staticmethod
    def decode(data: Buffer) -> Shape:
        """
        Decode the shape at the start of a WKB buffer.

        Bytes after the shape are ignored; use decode_from_cursor to find
        out where the shape ended.

        Raises:
            UnsupportedByteOrderError: If a header is not little-endian
            UnsupportedGeometryTypeError: If a header has an unknown type code
            BufferOutOfRangeError: If the buffer ends mid-shape
            WkbNestingError: If geometry collections nest too deeply
        """
        shape, end = WkbDecoder.decode_from_cursor(data, 0)
        logger.debug(
            "Decoded %s from %d of %d WKB bytes",
            shape.geometry_type.name, end, len(data),
        )
        return shape

    @staticmethod
    def decode_hex(text: str) -> Shape:
        """Decode a hex-encoded WKB string."""
        try:
            data = binascii.unhexlify(text.strip())
        except (binascii.Error, ValueError) as e:
            raise WkbError(f"Invalid hex WKB: {e}") from e
        return WkbDecoder.decode(data)

    @staticmethod
    def decode_from_cursor(
        buffer: Buffer, cursor: int = 0, depth: int = 0
    ) -> Tuple[Shape, int]:
        """
        Decode one self-describing shape starting at cursor.

        The header is inspected without being consumed to pick the decoder
        for its type; that decoder then validates the header itself.
        depth counts the geometry collections enclosing this shape.

        Returns:
            A tuple of (shape, cursor just past the shape)
        """
        byte_order = _unpack(_BYTE, buffer, cursor)[0]
        if byte_order != LITTLE_ENDIAN:
            raise UnsupportedByteOrderError(byte_order, cursor)
        code = _unpack(_UINT32, buffer, cursor + 1)[0]
        geometry_type = GeometryType.from_code(code, cursor)
        if geometry_type == GeometryType.GEOMETRYCOLLECTION:
            return WkbDecoder._decode_geometry_collection(buffer, cursor, depth)
        return _DECODERS[geometry_type](buffer, cursor)

    @staticmethod
    def _read_header(buffer: Buffer, cursor: int, expected: GeometryType) -> int:
        """Validate the byte order and type at cursor; return the payload offset."""
        byte_order = _unpack(_BYTE, buffer, cursor)[0]
        if byte_order != LITTLE_ENDIAN:
            raise UnsupportedByteOrderError(byte_order, cursor)
        code = _unpack(_UINT32, buffer, cursor + 1)[0]
        if GeometryType.from_code(code, cursor) != expected:
            raise UnexpectedGeometryTypeError(code, int(expected), cursor)
        return cursor + HEADER_SIZE

    @staticmethod
    def _decode_point(buffer: Buffer, cursor: int) -> Tuple[PointShape, int]:
        cursor = WkbDecoder._read_header(buffer, cursor, GeometryType.POINT)
        x, y = _unpack(_COORDS, buffer, cursor)
        return PointShape(Point(x, y)), cursor + _COORDS.size

    @staticmethod
    def _decode_line_string(buffer: Buffer, cursor: int) -> Tuple[LineString, int]:
        cursor = WkbDecoder._read_header(buffer, cursor, GeometryType.LINESTRING)
        points, cursor = _read_points(buffer, cursor)
        return LineString(points), cursor

    @staticmethod
    def _decode_polygon(buffer: Buffer, cursor: int) -> Tuple[Polygon, int]:
        cursor = WkbDecoder._read_header(buffer, cursor, GeometryType.POLYGON)
        count = _read_count(buffer, cursor)
        cursor += _UINT32.size

        # Rings carry no header of their own.
        rings = []
        for _ in range(count):
            points, cursor = _read_points(buffer, cursor)
            rings.append(LinearRing(points))
        return Polygon(rings), cursor

    @staticmethod
    def _decode_members(
        buffer: Buffer,
        cursor: int,
        geometry_type: GeometryType,
        decode_member: Callable[[Buffer, int], Tuple[Shape, int]],
    ) -> Tuple[List[Shape], int]:
        """Read a header, a member count, then that many full shapes."""
        cursor = WkbDecoder._read_header(buffer, cursor, geometry_type)
        count = _read_count(buffer, cursor)
        cursor += _UINT32.size

        members = []
        for _ in range(count):
            member, cursor = decode_member(buffer, cursor)
            members.append(member)
        return members, cursor

    @staticmethod
    def _decode_multi_point(buffer: Buffer, cursor: int) -> Tuple[MultiPoint, int]:
        points, cursor = WkbDecoder._decode_members(
            buffer, cursor, GeometryType.MULTIPOINT, WkbDecoder._decode_point
        )
        return MultiPoint(points), cursor

    @staticmethod
    def _decode_multi_line_string(buffer: Buffer, cursor: int) -> Tuple[MultiLineString, int]:
        line_strings, cursor = WkbDecoder._decode_members(
            buffer, cursor, GeometryType.MULTILINESTRING, WkbDecoder._decode_line_string
        )
        return MultiLineString(line_strings), cursor

    @staticmethod
    def _decode_multi_polygon(buffer: Buffer, cursor: int) -> Tuple[MultiPolygon, int]:
        polygons, cursor = WkbDecoder._decode_members(
            buffer, cursor, GeometryType.MULTIPOLYGON, WkbDecoder._decode_polygon
        )
        return MultiPolygon(polygons), cursor

    @staticmethod
    def _decode_geometry_collection(
        buffer: Buffer, cursor: int, depth: int = 0
    ) -> Tuple[GeometryCollection, int]:
        if depth >= MAX_NESTING_DEPTH:
            raise WkbNestingError(MAX_NESTING_DEPTH, cursor)

        def decode_member(buffer: Buffer, cursor: int) -> Tuple[Shape, int]:
            return WkbDecoder.decode_from_cursor(buffer, cursor, depth + 1)

        shapes, cursor = WkbDecoder._decode_members(
            buffer, cursor, GeometryType.GEOMETRYCOLLECTION, decode_member
        )
        return GeometryCollection(shapes), cursor


_DECODERS: Dict[GeometryType, Callable[[Buffer, int], Tuple[Shape, int]]] = {
    GeometryType.POINT: WkbDecoder._decode_point,
    GeometryType.LINESTRING: WkbDecoder._decode_line_string,
    GeometryType.POLYGON: WkbDecoder._decode_polygon,
    GeometryType.MULTIPOINT: WkbDecoder._decode_multi_point,
    GeometryType.MULTILINESTRING: WkbDecoder._decode_multi_line_string,
    GeometryType.MULTIPOLYGON: WkbDecoder._decode_multi_polygon,
}
