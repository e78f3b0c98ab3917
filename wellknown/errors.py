"""Exceptions raised by the WKT and WKB codecs."""

from typing import Optional


class WellKnownError(ValueError):
    """Base class for all codec failures on malformed input."""


class WktSyntaxError(WellKnownError):
    """Raised when Well-Known Text cannot be tokenized or parsed."""

    def __init__(self, message: str, position: int, token: Optional[str] = None):
        self.position = position
        self.token = token
        found = "end of input" if token is None else repr(token)
        super().__init__(f"{message} (found {found} at position {position})")


class WkbError(WellKnownError):
    """Base class for Well-Known Binary decoding failures."""


class UnsupportedByteOrderError(WkbError):
    """Raised when a shape header is not marked little-endian."""

    def __init__(self, byte_order: int, offset: int):
        self.byte_order = byte_order
        self.offset = offset
        super().__init__(
            f"Unsupported byte order marker {byte_order} at offset {offset}: "
            "only little-endian (1) is supported"
        )


class UnsupportedGeometryTypeError(WkbError):
    """Raised when a shape header carries an unknown type code."""

    def __init__(self, type_code: int, offset: int, message: Optional[str] = None):
        self.type_code = type_code
        self.offset = offset
        super().__init__(
            message or f"Unsupported geometry type code {type_code} at offset {offset}"
        )


class UnexpectedGeometryTypeError(UnsupportedGeometryTypeError):
    """Raised when a known type code appears where another type is required."""

    def __init__(self, type_code: int, expected: int, offset: int):
        self.expected = expected
        super().__init__(
            type_code,
            offset,
            f"Expected geometry type {expected} at offset {offset}, got {type_code}",
        )


class BufferOutOfRangeError(WkbError, IndexError):
    """Raised when decoding needs more bytes than the buffer holds."""

    def __init__(self, offset: int, needed: int, size: int):
        self.offset = offset
        self.needed = needed
        self.size = size
        super().__init__(
            f"Need {needed} byte(s) at offset {offset} but buffer holds only {size}"
        )


class WkbNestingError(WkbError):
    """Raised when geometry collections are nested deeper than allowed."""

    def __init__(self, depth: int, offset: int):
        self.depth = depth
        self.offset = offset
        super().__init__(
            f"Geometry collection at offset {offset} exceeds nesting depth {depth}"
        )
