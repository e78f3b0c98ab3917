"""Recursive-descent parser for Well-Known Text."""

import logging
from typing import List, Optional, Tuple

from ..errors import WktSyntaxError
from ..shapes.shape import (
    MAX_NESTING_DEPTH,
    GeometryCollection,
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
from .tokenizer import TokenType, WktTokenizer, unexpected

logger = logging.getLogger(__name__)


class WktParser:
    """Parser turning Well-Known Text into shapes."""

    def __init__(self, text: str):
        self.tokens = WktTokenizer(text)
        self.depth = 0

    @staticmethod
    def parse(text: str) -> Shape:
        """
        Parse a WKT string into a shape.

        The whole string must hold exactly one shape; anything other than
        whitespace after it is rejected.

        Args:
            text: The WKT string

        Returns:
            The parsed shape

        Raises:
            WktSyntaxError: If the text is not valid WKT
        """
        parser = WktParser(text)
        shape = parser.decode_shape()
        parser.tokens.expect(TokenType.EOF)
        logger.debug("Parsed %s from %d characters of WKT", shape.geometry_type.name, len(text))
        return shape

    @staticmethod
    def validate(text: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a WKT string without keeping the result.

        Returns:
            A tuple of (is_valid, error_message)
        """
        try:
            WktParser.parse(text)
            return True, None
        except WktSyntaxError as e:
            return False, str(e)

    @staticmethod
    def normalize(text: str) -> str:
        """
        Normalize a WKT string (parse and re-render).

        Keywords come out upper-case, whitespace is canonical and multipoint
        members are written without their own parentheses.
        """
        return WktParser.parse(text).to_wkt()

    def decode_shape(self) -> Shape:
        """Parse one shape, dispatching on its leading keyword."""
        token = self.tokens.next_token()
        decoders = {
            TokenType.POINT: self._decode_point,
            TokenType.LINESTRING: self._decode_line_string,
            TokenType.POLYGON: self._decode_polygon,
            TokenType.MULTIPOINT: self._decode_multi_point,
            TokenType.MULTILINESTRING: self._decode_multi_line_string,
            TokenType.MULTIPOLYGON: self._decode_multi_polygon,
            TokenType.GEOMETRYCOLLECTION: self._decode_geometry_collection,
        }
        decoder = decoders.get(token.type)
        if decoder is None:
            raise unexpected(token, "a geometry keyword")
        if token.type == TokenType.GEOMETRYCOLLECTION and self.depth >= MAX_NESTING_DEPTH:
            raise WktSyntaxError(
                f"Geometry collections nested deeper than {MAX_NESTING_DEPTH}",
                token.position,
                token.text,
            )
        return decoder()

    def _open_or_empty(self) -> bool:
        """Consume "EMPTY" (returns True) or "(" (returns False)."""
        token = self.tokens.next_token()
        if token.type == TokenType.EMPTY:
            return True
        if token.type != TokenType.OPEN_PAREN:
            raise unexpected(token, "'(' or EMPTY")
        return False

    def _end_of_list(self) -> bool:
        """Consume a list separator: ")" ends the list, "," continues it."""
        token = self.tokens.next_token()
        if token.type == TokenType.CLOSE_PAREN:
            return True
        if token.type != TokenType.COMMA:
            raise unexpected(token, "',' or ')'")
        return False

    def _read_point(self) -> Point:
        x = self.tokens.read_number()
        y = self.tokens.read_number()
        return Point(x, y)

    def _read_point_list(self) -> List[Point]:
        """Read "x y,x y,...)"; the opening parenthesis is already consumed."""
        points = [self._read_point()]
        while not self._end_of_list():
            points.append(self._read_point())
        return points

    def _read_ring_list(self) -> List[LinearRing]:
        """Read "(pts),(pts),...)"; the outer parenthesis is already consumed."""
        rings = []
        while True:
            self.tokens.expect(TokenType.OPEN_PAREN)
            rings.append(LinearRing(self._read_point_list()))
            if self._end_of_list():
                return rings

    def _decode_point(self) -> PointShape:
        token = self.tokens.next_token()
        if token.type != TokenType.OPEN_PAREN:
            raise unexpected(token, "'('")
        point = self._read_point()
        self.tokens.expect(TokenType.CLOSE_PAREN)
        return PointShape(point)

    def _decode_line_string(self) -> LineString:
        if self._open_or_empty():
            return LineString()
        return LineString(self._read_point_list())

    def _decode_polygon(self) -> Polygon:
        if self._open_or_empty():
            return Polygon()
        return Polygon(self._read_ring_list())

    def _decode_multi_point(self) -> MultiPoint:
        if self._open_or_empty():
            return MultiPoint()

        points = []
        while True:
            # Members may be bare "x y" or wrapped "(x y)", mixed freely.
            if self.tokens.peek().type == TokenType.OPEN_PAREN:
                self.tokens.next_token()
                point = self._read_point()
                self.tokens.expect(TokenType.CLOSE_PAREN)
            else:
                point = self._read_point()
            points.append(PointShape(point))
            if self._end_of_list():
                return MultiPoint(points)

    def _decode_multi_line_string(self) -> MultiLineString:
        if self._open_or_empty():
            return MultiLineString()
        rings = self._read_ring_list()
        return MultiLineString([LineString(ring.points) for ring in rings])

    def _decode_multi_polygon(self) -> MultiPolygon:
        if self._open_or_empty():
            return MultiPolygon()

        polygons = []
        while True:
            self.tokens.expect(TokenType.OPEN_PAREN)
            polygons.append(Polygon(self._read_ring_list()))
            if self._end_of_list():
                return MultiPolygon(polygons)

    def _decode_geometry_collection(self) -> GeometryCollection:
        if self._open_or_empty():
            return GeometryCollection()

        self.depth += 1
        shapes = [self.decode_shape()]
        while not self._end_of_list():
            shapes.append(self.decode_shape())
        self.depth -= 1
        return GeometryCollection(shapes)
