"""Tests for the shapes module."""

import dataclasses

import pytest
from wellknown.errors import UnsupportedGeometryTypeError
from wellknown.shapes.shape import (
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
    SHAPE_TYPES,
    format_coordinate,
    is_shape,
    to_wkt,
)

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
HOLE = [(2, 2), (4, 2), (4, 4), (2, 2)]


class TestGeometryType:
    """Tests for GeometryType."""

    def test_codes(self):
        assert GeometryType.POINT == 1
        assert GeometryType.GEOMETRYCOLLECTION == 7
        assert [int(t) for t in GeometryType] == [1, 2, 3, 4, 5, 6, 7]

    def test_from_code(self):
        assert GeometryType.from_code(3) is GeometryType.POLYGON

    def test_from_unknown_code(self):
        with pytest.raises(UnsupportedGeometryTypeError) as excinfo:
            GeometryType.from_code(99, offset=12)
        assert excinfo.value.type_code == 99
        assert excinfo.value.offset == 12

    def test_keyword(self):
        assert GeometryType.MULTILINESTRING.keyword == "MULTILINESTRING"

    def test_every_type_has_a_class(self):
        for geometry_type, cls in SHAPE_TYPES.items():
            assert cls.geometry_type is geometry_type


class TestFormatCoordinate:
    """Tests for coordinate rendering."""

    def test_integral_values_have_no_fraction(self):
        assert format_coordinate(1.0) == "1"
        assert format_coordinate(-20.0) == "-20"

    def test_fractions(self):
        assert format_coordinate(1.5) == "1.5"
        assert format_coordinate(-2.25) == "-2.25"
        assert format_coordinate(0.1) == "0.1"

    def test_never_uses_exponent(self):
        assert format_coordinate(1e-05) == "0.00001"
        assert format_coordinate(1e20) == "100000000000000000000"

    def test_shortest_round_trip(self):
        value = 1 / 3
        assert float(format_coordinate(value)) == value


class TestPoint:
    """Tests for Point."""

    def test_coordinates_are_floats(self):
        point = Point(1, 2)
        assert isinstance(point.x, float)
        assert isinstance(point.y, float)

    def test_value_equality(self):
        assert Point(1, 2) == Point(1.0, 2.0)
        assert Point(1, 2) != Point(2, 1)
        assert hash(Point(1, 2)) == hash(Point(1.0, 2.0))

    def test_str(self):
        assert str(Point(1.5, -2.25)) == "1.5 -2.25"

    def test_immutable(self):
        point = Point(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 5


class TestLinearRing:
    """Tests for LinearRing."""

    def test_accepts_pairs(self):
        ring = LinearRing(SQUARE)
        assert len(ring) == 5
        assert ring.points[1] == Point(10, 0)

    def test_stores_tuple(self):
        source = [Point(0, 0), Point(1, 1)]
        ring = LinearRing(source)
        source.append(Point(2, 2))
        assert isinstance(ring.points, tuple)
        assert len(ring) == 2

    def test_closure_not_enforced(self):
        ring = LinearRing([(0, 0), (1, 0), (1, 1)])
        assert ring.points[0] != ring.points[-1]


class TestPointShape:
    """Tests for PointShape."""

    def test_to_wkt(self):
        assert PointShape(Point(1.5, -2.25)).to_wkt() == "POINT( 1.5 -2.25 )"

    def test_integral_coordinates(self):
        assert str(PointShape((1, 2))) == "POINT( 1 2 )"

    def test_accessors(self):
        shape = PointShape(Point(3, 4))
        assert shape.x == 3.0
        assert shape.y == 4.0
        assert shape.geometry_type is GeometryType.POINT
        assert not shape.is_empty()


class TestLineString:
    """Tests for LineString."""

    def test_to_wkt(self):
        line = LineString([(1, 2), (3.5, 4)])
        assert line.to_wkt() == "LINESTRING(1 2,3.5 4)"

    def test_empty(self):
        line = LineString()
        assert line.is_empty()
        assert line.to_wkt() == "LINESTRING EMPTY"

    def test_order_matters(self):
        assert LineString([(0, 0), (1, 1)]) != LineString([(1, 1), (0, 0)])


class TestPolygon:
    """Tests for Polygon."""

    def test_to_wkt(self):
        polygon = Polygon([SQUARE, HOLE])
        assert polygon.to_wkt() == (
            "POLYGON((0 0,10 0,10 10,0 10,0 0),(2 2,4 2,4 4,2 2))"
        )

    def test_rings_coerced(self):
        polygon = Polygon([SQUARE])
        assert isinstance(polygon.rings[0], LinearRing)

    def test_empty(self):
        assert Polygon().to_wkt() == "POLYGON EMPTY"
        assert Polygon().is_empty()


class TestMultiPoint:
    """Tests for MultiPoint."""

    def test_members_rendered_bare(self):
        multi = MultiPoint([PointShape(Point(1, 2)), PointShape(Point(3, 4))])
        assert multi.to_wkt() == "MULTIPOINT(1 2,3 4)"

    def test_points_coerced(self):
        multi = MultiPoint([Point(1, 2), (3, 4)])
        assert all(isinstance(p, PointShape) for p in multi.points)

    def test_empty(self):
        assert MultiPoint().to_wkt() == "MULTIPOINT EMPTY"


class TestMultiLineString:
    """Tests for MultiLineString."""

    def test_to_wkt(self):
        multi = MultiLineString([
            LineString([(0, 0), (1, 1)]),
            LineString([(2, 2), (3, 3), (4, 4)]),
        ])
        assert multi.to_wkt() == "MULTILINESTRING((0 0,1 1),(2 2,3 3,4 4))"

    def test_empty(self):
        assert MultiLineString().to_wkt() == "MULTILINESTRING EMPTY"


class TestMultiPolygon:
    """Tests for MultiPolygon."""

    def test_to_wkt(self):
        multi = MultiPolygon([
            Polygon([SQUARE, HOLE]),
            Polygon([[(20, 20), (21, 20), (21, 21), (20, 20)]]),
        ])
        assert multi.to_wkt() == (
            "MULTIPOLYGON(((0 0,10 0,10 10,0 10,0 0),(2 2,4 2,4 4,2 2)),"
            "((20 20,21 20,21 21,20 20)))"
        )

    def test_empty(self):
        assert MultiPolygon().to_wkt() == "MULTIPOLYGON EMPTY"


class TestGeometryCollection:
    """Tests for GeometryCollection."""

    def test_to_wkt(self):
        collection = GeometryCollection([
            PointShape(Point(0, 0)),
            LineString(),
            GeometryCollection([MultiPoint([(1, 1)])]),
        ])
        assert collection.to_wkt() == (
            "GEOMETRYCOLLECTION(POINT( 0 0 ),LINESTRING EMPTY,"
            "GEOMETRYCOLLECTION(MULTIPOINT(1 1)))"
        )

    def test_empty(self):
        assert GeometryCollection().to_wkt() == "GEOMETRYCOLLECTION EMPTY"

    def test_rejects_non_shapes(self):
        with pytest.raises(TypeError):
            GeometryCollection([Point(0, 0)])

    def test_equality_is_structural(self):
        a = GeometryCollection([PointShape((1, 2)), LineString([(0, 0), (1, 1)])])
        b = GeometryCollection([PointShape((1, 2)), LineString([(0, 0), (1, 1)])])
        assert a == b
        assert a != GeometryCollection([LineString([(0, 0), (1, 1)]), PointShape((1, 2))])

    def test_deep_nesting(self):
        collection = GeometryCollection()
        for _ in range(1200):
            collection = GeometryCollection([collection])
        text = collection.to_wkt()
        assert text.startswith("GEOMETRYCOLLECTION(" * 1200 + "GEOMETRYCOLLECTION EMPTY")
        assert text.endswith(")" * 1200)
        assert len(text) == 1200 * len("GEOMETRYCOLLECTION()") + len("GEOMETRYCOLLECTION EMPTY")

    def test_member_order_and_separators(self):
        collection = GeometryCollection([
            GeometryCollection([PointShape((1, 2)), LineString()]),
            GeometryCollection(),
            MultiPoint([(3, 4), (5, 6)]),
        ])
        assert collection.to_wkt() == (
            "GEOMETRYCOLLECTION(GEOMETRYCOLLECTION(POINT( 1 2 ),LINESTRING EMPTY),"
            "GEOMETRYCOLLECTION EMPTY,MULTIPOINT(3 4,5 6))"
        )

    def test_variants_do_not_compare_equal(self):
        assert LineString() != MultiPoint()
        assert Polygon() != MultiPolygon()


class TestToWkt:
    """Tests for the module level renderer."""

    def test_renders_any_shape(self):
        assert to_wkt(Polygon()) == "POLYGON EMPTY"

    @pytest.mark.parametrize("shape", [
        PointShape((1, 2)),
        LineString(),
        Polygon(),
        MultiPoint([(1, 2)]),
        MultiLineString(),
        MultiPolygon(),
        GeometryCollection(),
    ])
    def test_starts_with_type_keyword(self, shape):
        assert to_wkt(shape).startswith(shape.geometry_type.keyword)

    def test_unknown_object(self):
        assert not is_shape(Point(0, 0))
        with pytest.raises(NotImplementedError):
            to_wkt(Point(0, 0))
