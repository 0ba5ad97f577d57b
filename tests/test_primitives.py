import math

import pytest

from planar_kernel import Position, Segment, Triangle, lexicographic_key


def test_position_equality_is_exact():
    assert Position(1.0, 2.0) == Position(1, 2)
    assert Position(0.1 + 0.2, 0.0) != Position(0.3, 0.0)


def test_nan_position_is_not_equal_to_itself():
    p = Position(float('nan'), 0.0)
    assert p != p
    assert not (p == p)


def test_positions_have_no_ordering():
    with pytest.raises(TypeError):
        Position(0, 0) < Position(1, 1)


def test_lexicographic_key_sorts_by_x_then_y():
    pts = [Position(1, 0), Position(0, 5), Position(0, 1)]
    assert sorted(pts, key=lexicographic_key) == [Position(0, 1), Position(0, 5), Position(1, 0)]


def test_position_accepts_infinite_values():
    p = Position(math.inf, -math.inf)
    assert not p.is_finite()
    assert p == Position(math.inf, -math.inf)


def test_position_vector_helpers():
    a = Position(1, 2)
    b = Position(3, 5)
    assert b - a == Position(2, 3)
    assert a + b == Position(4, 7)
    assert a * 2 == Position(2, 4)
    assert Position.cross(Position(1, 0), Position(0, 1)) == 1.0
    assert Position.dot(a, b) == 13.0
    assert Position.coerce((3, 4)) == Position(3, 4)


def test_segment_length_and_degeneracy():
    seg = Segment(Position(0, 0), Position(3, 4))
    assert seg.length() == 5.0
    assert not seg.is_degenerate()
    assert Segment(Position(1, 1), Position(1, 1)).is_degenerate()


def test_segment_length_propagates_non_finite():
    seg = Segment(Position(0, 0), Position(math.inf, 0))
    assert math.isinf(seg.length())
    seg_nan = Segment(Position(0, 0), Position(float('nan'), 0))
    assert math.isnan(seg_nan.length())


def test_position_location():
    seg = Segment.from_coords((0, 0), (1, 0))
    assert seg.position_location(Position(0.5, 1)) == 'left'
    assert seg.position_location(Position(0.5, -1)) == 'right'
    assert seg.position_location(Position(5, 0)) == 'on'
    assert not seg.contains_position(Position(5, 0))
    assert seg.contains_position(Position(0.25, 0))


def test_crossing_segments_meet_at_midpoint():
    first = Segment.from_coords((0, 0), (1, 1))
    second = Segment.from_coords((0, 1), (1, 0))
    hit = first.intersect_segment(second)
    assert hit.kind == 'position'
    assert hit.position == Position(0.5, 0.5)
    assert first.intersects_segment(second)


@pytest.mark.parametrize(
    'first, second',
    [
        (((0, 0), (1, 1)), ((1, 0), (0.5, 0.4))),
        (((0, 0), (1, 0)), ((0, 1), (1, 1))),
        (((0, 0), (1, 1)), ((1.1, 1.1), (2, 2))),
    ],
)
def test_disjoint_segments(first, second):
    hit = Segment.from_coords(*first).intersect_segment(Segment.from_coords(*second))
    assert hit.kind == 'none'
    assert not hit


def test_touching_end_points():
    first = Segment.from_coords((0, 0), (1, 0))
    second = Segment.from_coords((1, 0), (1, 1))
    hit = first.intersect_segment(second)
    assert hit.kind == 'position'
    assert hit.position == Position(1, 0)


def test_t_junction_reports_the_touching_end():
    first = Segment.from_coords((0, 0), (2, 0))
    second = Segment.from_coords((1, 0), (1, 1))
    hit = first.intersect_segment(second)
    assert hit.kind == 'position'
    assert hit.position == Position(1, 0)


def test_collinear_touch_is_a_position():
    first = Segment.from_coords((0, 0), (1, 0))
    second = Segment.from_coords((1, 0), (2, 0))
    hit = first.intersect_segment(second)
    assert hit.kind == 'position'
    assert hit.position == Position(1, 0)


@pytest.mark.parametrize(
    'second, expected',
    [
        (((0.5, 0.5), (2, 2)), ((0.5, 0.5), (1, 1))),
        (((2, 2), (0.5, 0.5)), ((0.5, 0.5), (1, 1))),
        (((0.2, 0.2), (0.5, 0.5)), ((0.2, 0.2), (0.5, 0.5))),
        (((0, 0), (1, 1)), ((0, 0), (1, 1))),
    ],
)
def test_collinear_overlap(second, expected):
    first = Segment.from_coords((0, 0), (1, 1))
    hit = first.intersect_segment(Segment.from_coords(*second))
    assert hit.kind == 'segment'
    assert hit.segment == Segment.from_coords(*expected)


def test_degenerate_segment_intersection():
    point_like = Segment.from_coords((0.5, 0), (0.5, 0))
    line = Segment.from_coords((0, 0), (1, 0))
    assert point_like.intersect_segment(line).position == Position(0.5, 0)
    assert line.intersect_segment(point_like).position == Position(0.5, 0)
    assert not Segment.from_coords((3, 3), (3, 3)).intersects_segment(line)


def test_triangle_signed_area_encodes_winding():
    ccw = Triangle.from_coords((0, 0), (4, 0), (0, 3))
    cw = Triangle.from_coords((0, 0), (0, 3), (4, 0))
    assert ccw.signed_area() == 12.0
    assert cw.signed_area() == -12.0
    assert ccw.area() == 6.0
    assert ccw.orientation() == 'ccw'
    assert cw.orientation() == 'cw'


def test_collinear_triangle():
    tri = Triangle.from_coords((0, 0), (1, 1), (2, 2))
    assert tri.is_collinear()
    assert tri.orientation() == 'collinear'
    assert not Triangle.from_coords((0, 0), (1, 1), (2, 2.5)).is_collinear()
