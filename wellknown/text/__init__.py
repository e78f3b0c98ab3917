"""Well-Known Text tokenizer and parser."""

from .tokenizer import Token, TokenType, WktTokenizer
from .parser import WktParser

__all__ = [
    "Token",
    "TokenType",
    "WktTokenizer",
    "WktParser",
]
