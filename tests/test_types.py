import numpy as np
import pytest

from planar_kernel import (
    Envelope,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
    Rect,
    Segment,
    TooFewPoints,
    UnclosedRing,
    envelope,
    kind_of,
)
from planar_kernel.types import GEOMETRY_KINDS

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
HOLE = [(1, 1), (3, 1), (3, 3), (1, 3), (1, 1)]
FAR_SQUARE = [(10, 10), (12, 10), (12, 12), (10, 12), (10, 10)]


def test_line_string_needs_two_positions():
    with pytest.raises(TooFewPoints) as excinfo:
        LineString(((0, 0),))
    assert excinfo.value.required == 2
    assert excinfo.value.actual == 1


def test_unclosed_ring_is_rejected():
    with pytest.raises(UnclosedRing):
        Polygon.from_coords([(0, 0), (4, 0), (4, 4), (0, 4)])


def test_short_ring_is_rejected():
    with pytest.raises(TooFewPoints):
        Polygon.from_coords([(0, 0), (4, 0), (0, 0)])


def test_ring_is_not_closed_on_callers_behalf():
    with pytest.raises(UnclosedRing):
        LineString.ring([(0, 0), (1, 0), (1, 1), (0, 1)])


def test_line_string_measures():
    line = LineString(((0, 0), (3, 4), (3, 10)))
    assert line.num_points == 3
    assert line.num_segments == 2
    assert line.length() == pytest.approx(11.0)
    assert line.start == Position(0, 0)
    assert line.end == Position(3, 10)
    assert not line.is_closed()
    assert line.signed_area() == 0.0


def test_line_string_coords_are_read_only():
    coords = LineString(((0, 0), (1, 1))).coords
    assert coords.shape == (2, 2)
    with pytest.raises(ValueError):
        coords[0, 0] = 5.0


def test_ring_orientation():
    ring = LineString.ring(SQUARE)
    assert ring.is_ring()
    assert ring.signed_area() == 16.0
    assert ring.is_ccw()
    assert ring.reversed().signed_area() == -16.0


def test_polygon_envelope_and_area():
    polygon = Polygon.from_coords(SQUARE, [HOLE])
    assert polygon.envelope() == Envelope(Rect(0, 0, 4, 4))
    assert polygon.area() == 12.0
    assert polygon.perimeter() == pytest.approx(24.0)
    assert len(list(polygon.rings())) == 2


def test_polygon_accepts_line_string_rings():
    ring = LineString.ring(SQUARE)
    assert Polygon(ring) == Polygon.from_coords(SQUARE)


def test_oriented_winds_exterior_and_holes_oppositely():
    cw_square = list(reversed(SQUARE))
    polygon = Polygon.from_coords(cw_square, [HOLE]).oriented()
    assert polygon.exterior.is_ccw()
    assert not polygon.holes[0].is_ccw()
    flipped = polygon.oriented(ccw_exterior=False)
    assert not flipped.exterior.is_ccw()
    assert flipped.holes[0].is_ccw()


def test_representative_point():
    assert Polygon.from_coords(SQUARE).representative_point() == Position(2, 2)
    assert Polygon.from_coords(SQUARE, [HOLE]).representative_point() == Position(0.5, 2)


def test_flat_polygon_has_no_representative_point():
    flat = Polygon.from_coords([(0, 0), (1, 0), (2, 0), (0, 0)])
    assert flat.representative_point() is None


def test_values_are_immutable():
    point = Point.from_xy(1, 2)
    with pytest.raises(AttributeError):
        point.position = Position(0, 0)
    assert point.translate(1, 1) == Point.from_xy(2, 3)
    assert point == Point.from_xy(1, 2)


def test_transformations():
    polygon = Polygon.from_coords(SQUARE)
    moved = polygon.translate(10, -1)
    assert moved.envelope() == Envelope(Rect(10, -1, 14, 3))
    scaled = polygon.scale(2, origin=(2, 2))
    assert scaled.envelope() == Envelope(Rect(-2, -2, 6, 6))
    assert LineString(((1, 1), (2, 3))).scale(1, 0).end == Position(2, 0)


def test_empty_collections_have_absent_envelope():
    for empty in (MultiPoint(), MultiLineString(), MultiPolygon()):
        assert empty.is_empty()
        assert empty.envelope().is_empty
        assert envelope(empty) == Envelope.empty()


def test_multi_point():
    mp = MultiPoint(((0, 0), Point.from_xy(2, 3), (0, 0)))
    assert len(mp) == 3
    assert mp[1] == Point.from_xy(2, 3)
    assert mp.envelope() == Envelope(Rect(0, 0, 2, 3))
    assert not mp.is_simple()
    assert mp.deduplicated().is_simple()
    assert len(mp.deduplicated()) == 2


def test_multi_point_with_nan_is_not_simple():
    assert not MultiPoint(((float('nan'), 0),)).is_simple()


def test_multi_line_string():
    mls = MultiLineString((((0, 0), (1, 0)), LineString(((5, 5), (5, 7)))))
    assert mls.length() == pytest.approx(3.0)
    assert mls.envelope() == Envelope(Rect(0, 0, 5, 7))


def test_multi_polygon():
    mpoly = MultiPolygon((Polygon.from_coords(SQUARE, [HOLE]), [(10, 10), (11, 10), (11, 11), (10, 10)]))
    assert mpoly.area() == pytest.approx(12.5)
    assert mpoly.envelope() == Envelope(Rect(0, 0, 11, 11))
    assert mpoly[1].exterior.num_points == 4


@pytest.mark.parametrize(
    'geometry, expected',
    [
        (Point.from_xy(0, 0), 'Point'),
        (LineString(((0, 0), (1, 1))), 'LineString'),
        (Polygon.from_coords(SQUARE), 'Polygon'),
        (MultiPoint(), 'MultiPoint'),
        (MultiLineString(), 'MultiLineString'),
        (MultiPolygon(), 'MultiPolygon'),
    ],
)
def test_kind_of(geometry, expected):
    assert kind_of(geometry) == expected
    assert expected in GEOMETRY_KINDS


def test_kind_of_rejects_foreign_objects():
    with pytest.raises(TypeError):
        kind_of(np.zeros(2))
    with pytest.raises(TypeError):
        envelope(Position(0, 0))


def test_line_string_segment_access():
    line = LineString(((0, 0), (3, 4), (3, 10)))
    assert line.segment(1) == Segment.from_coords((3, 4), (3, 10))
    assert list(line.segments())[0] == line.segment(0)
    with pytest.raises(IndexError):
        line.segment(2)


def test_multi_polygon_accepts_exterior_and_holes_pairs():
    mpoly = MultiPolygon(((SQUARE, [HOLE]), (FAR_SQUARE, [])))
    assert mpoly[0] == Polygon.from_coords(SQUARE, [HOLE])
    assert mpoly[1].holes == ()
    assert mpoly.area() == pytest.approx(16.0)
    assert MultiPolygon(((LineString.ring(SQUARE), (HOLE,)),))[0].area() == 12.0


def test_multi_polygon_short_ring_still_reports_too_few_points():
    with pytest.raises(TooFewPoints):
        MultiPolygon(([(0, 0), (1, 1)],))
