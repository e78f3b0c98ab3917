"""Public conversions between shapes, WKT and WKB."""

from .binary.decoder import Buffer, WkbDecoder
from .binary.encoder import WkbEncoder
from .shapes.shape import Shape, to_wkt
from .text.parser import WktParser


def parse_text(text: str) -> Shape:
    """Parse Well-Known Text into a shape. Raises WktSyntaxError."""
    return WktParser.parse(text)


def parse_binary(data: Buffer) -> Shape:
    """Decode Well-Known Binary into a shape. Raises a WkbError subclass."""
    return WkbDecoder.decode(data)


def parse_hex(text: str) -> Shape:
    """Decode hex-encoded Well-Known Binary into a shape."""
    return WkbDecoder.decode_hex(text)


def to_text(shape: Shape) -> str:
    """Render a shape as Well-Known Text."""
    return to_wkt(shape)


def to_binary(shape: Shape) -> bytes:
    """Encode a shape as little-endian Well-Known Binary."""
    return WkbEncoder.encode(shape)


def to_hex(shape: Shape) -> str:
    """Encode a shape as upper-case hex Well-Known Binary."""
    return WkbEncoder.to_hex(shape)
