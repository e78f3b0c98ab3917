"""Well-Known Binary encoder and decoder."""

from .decoder import WkbDecoder
from .encoder import WkbEncoder

__all__ = [
    "WkbDecoder",
    "WkbEncoder",
]
