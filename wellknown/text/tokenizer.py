"""Lexer for Well-Known Text."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ..errors import WktSyntaxError


class TokenType(Enum):
    """Token classes produced by the WKT tokenizer."""
    POINT = auto()
    LINESTRING = auto()
    POLYGON = auto()
    MULTIPOINT = auto()
    MULTILINESTRING = auto()
    MULTIPOLYGON = auto()
    GEOMETRYCOLLECTION = auto()
    EMPTY = auto()
    COMMA = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()
    NUMBER = auto()
    EOF = auto()


KEYWORDS = {
    "POINT": TokenType.POINT,
    "LINESTRING": TokenType.LINESTRING,
    "POLYGON": TokenType.POLYGON,
    "MULTIPOINT": TokenType.MULTIPOINT,
    "MULTILINESTRING": TokenType.MULTILINESTRING,
    "MULTIPOLYGON": TokenType.MULTIPOLYGON,
    "GEOMETRYCOLLECTION": TokenType.GEOMETRYCOLLECTION,
    "EMPTY": TokenType.EMPTY,
}

SYMBOLS = {
    ",": TokenType.COMMA,
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
}

DIGITS = "0123456789"


@dataclass(frozen=True)
class Token:
    """A lexed token and the offset where it starts."""
    type: TokenType
    text: str
    position: int

    @property
    def value(self) -> float:
        """Numeric value of a NUMBER token."""
        return float(self.text)


class WktTokenizer:
    """
    Scanner over a WKT string with its own cursor.

    Whitespace before a token is skipped. Keywords match case-insensitively.
    Numbers follow the grammar ``-?digits(.digits)?``: no leading "+",
    no exponent, no bare leading or trailing decimal point.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    def _skip_whitespace(self) -> None:
        text = self.text
        while self.position < len(text) and text[self.position].isspace():
            self.position += 1

    def _scan_digits(self, start: int) -> int:
        """Return the offset just past the run of digits starting at start."""
        end = start
        while end < len(self.text) and self.text[end] in DIGITS:
            end += 1
        return end

    def _scan(self) -> Token:
        """Lex the token at the cursor without moving past it."""
        self._skip_whitespace()
        text = self.text
        start = self.position

        if start >= len(text):
            return Token(TokenType.EOF, "", start)

        char = text[start]

        if char in SYMBOLS:
            return Token(SYMBOLS[char], char, start)

        if char.isascii() and char.isalpha():
            end = start
            while end < len(text) and text[end].isascii() and text[end].isalpha():
                end += 1
            word = text[start:end]
            token_type = KEYWORDS.get(word.upper())
            if token_type is None:
                raise WktSyntaxError("Unknown keyword", start, word)
            return Token(token_type, word, start)

        if char == "-" or char in DIGITS:
            digits_start = start + 1 if char == "-" else start
            end = self._scan_digits(digits_start)
            if end == digits_start:
                raise WktSyntaxError("Malformed number", start, text[start:end + 1])
            if end + 1 < len(text) and text[end] == "." and text[end + 1] in DIGITS:
                end = self._scan_digits(end + 1)
            return Token(TokenType.NUMBER, text[start:end], start)

        raise WktSyntaxError("Unexpected character", start, char)

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        saved = self.position
        try:
            return self._scan()
        finally:
            self.position = saved

    def next_token(self) -> Token:
        """Consume and return the next token (EOF once input is exhausted)."""
        token = self._scan()
        self.position = token.position + len(token.text)
        return token

    def expect(self, token_type: TokenType, what: Optional[str] = None) -> Token:
        """Consume the next token, failing unless it has the given type."""
        token = self.next_token()
        if token.type != token_type:
            raise unexpected(token, what or describe(token_type))
        return token

    def read_number(self) -> float:
        return self.expect(TokenType.NUMBER, "a number").value


def describe(token_type: TokenType) -> str:
    """Human-readable name of a token type for error messages."""
    for symbol, symbol_type in SYMBOLS.items():
        if symbol_type == token_type:
            return repr(symbol)
    if token_type == TokenType.NUMBER:
        return "a number"
    if token_type == TokenType.EOF:
        return "end of input"
    return token_type.name


def unexpected(token: Token, expected: str) -> WktSyntaxError:
    """Build the error for a token that does not fit the grammar here."""
    text = None if token.type == TokenType.EOF else token.text
    return WktSyntaxError(f"Expected {expected}", token.position, text)
