"""Tests for the polygon segment builder."""

import pytest

from polyraster.core.builder import build, loop_segments
from polyraster.core.parser import parse
from polyraster.domain import Point, Shape, ShapeSet


@pytest.fixture
def square() -> ShapeSet:
    """Create a 10x10 square anchored at the origin."""
    return parse("M 0,0 L 10,0 L 10,10 L 0,10 Z")


@pytest.fixture
def ring() -> ShapeSet:
    """Create a square with a square hole."""
    return parse("M 0,0 H 10 V 10 H 0 Z M 3,3 H 7 V 7 H 3 Z")


class TestLoopSegments:
    """Tests for loop_segments function."""

    def test_triangle_yields_three_segments(self):
        """Test a closed triangle has one segment per point."""
        points = [Point(0, 0), Point(4, 0), Point(0, 3)]
        segments = loop_segments(points)

        assert len(segments) == 3

    def test_first_segment_closes_loop(self):
        """Test the first segment runs from the last point to the first."""
        points = [Point(0, 0), Point(4, 0), Point(0, 3)]
        segments = loop_segments(points)

        assert segments[0].p0 == Point(0, 3)
        assert segments[0].p1 == Point(0, 0)

    def test_segments_form_cycle(self):
        """Test each segment ends where the next one starts."""
        points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(2, 6), Point(0, 4)]
        segments = loop_segments(points)

        for i, segment in enumerate(segments):
            assert segment.p1 == segments[(i + 1) % len(segments)].p0

    def test_precomputed_direction(self):
        """Test direction vector and squared length."""
        segments = loop_segments([Point(0, 0), Point(3, 4)])

        assert segments[1].v == (3, 4)
        assert segments[1].length_sq == 25
        assert segments[0].v == (-3, -4)

    def test_single_point_loop_is_degenerate(self):
        """Test a one-point loop yields a single zero-length segment."""
        segments = loop_segments([Point(2, 2)])

        assert len(segments) == 1
        assert segments[0].is_degenerate()

    def test_empty(self):
        """Test no points gives no segments."""
        assert loop_segments([]) == []


class TestBuild:
    """Tests for build function."""

    def test_segment_count_matches_points(self, ring: ShapeSet):
        """Test all shapes are concatenated, one segment per point."""
        polygon = build(ring)

        assert len(polygon) == ring.point_count == 8

    def test_closure_per_shape(self, ring: ShapeSet):
        """Test segments of each shape form their own cycle."""
        polygon = build(ring)
        offset = 0
        for shape in ring:
            n = shape.point_count
            chunk = polygon.segments[offset : offset + n]
            for i in range(n):
                assert chunk[i].p1 == chunk[(i + 1) % n].p0
            offset += n

    def test_width_and_height_are_max_extents(self):
        """Test size comes from max coordinates, not max - min."""
        polygon = build(parse("M 5,6 H 10 V 12 H 5 Z"))

        assert polygon.width == 10
        assert polygon.height == 12
        assert polygon.bbox.min_x == 5
        assert polygon.bbox.min_y == 6

    def test_bounding_box_checks_min_and_max(self):
        """Test a point can set both the min and max of an axis."""
        polygon = build(ShapeSet(shapes=(Shape(points=(Point(2, 3),)),)))

        assert polygon.bbox.to_tuple() == (2, 3, 2, 3)
        assert polygon.width == 2
        assert polygon.height == 3

    def test_bounding_box_descending_points(self):
        """Test the box tracks each axis independently."""
        polygon = build(parse("M 5,1 L 1,5 L 3,3 Z"))

        assert polygon.bbox.to_tuple() == (1, 1, 5, 5)

    def test_bounding_box_spans_all_shapes(self):
        """Test the box covers points of every shape."""
        polygon = build(parse("M 0,0 H 2 V 2 Z M 8,1 H 9 V 20 Z"))

        assert polygon.width == 9
        assert polygon.height == 20

    @pytest.mark.parametrize("scale", [0.5, 2.0, 3.0, 7.25])
    def test_scale_linearity(self, square: ShapeSet, scale: float):
        """Test extents scale linearly with a uniform scale."""
        base = build(square, 1.0, 1.0)
        scaled = build(square, scale, scale)

        assert scaled.width == pytest.approx(scale * base.width)
        assert scaled.height == pytest.approx(scale * base.height)

    def test_non_uniform_scale(self, square: ShapeSet):
        """Test each axis uses its own scale."""
        polygon = build(square, 2.0, 0.5)

        assert polygon.width == 20
        assert polygon.height == 5
        assert polygon.scale_x == 2.0
        assert polygon.scale_y == 0.5

    def test_default_scale(self, square: ShapeSet):
        """Test scales default to 1.0."""
        assert build(square).width == 10

    def test_negative_scale_mirrors(self, square: ShapeSet):
        """Test a negative scale mirrors instead of failing."""
        polygon = build(square, -1.0, 1.0)

        assert polygon.bbox.min_x == -10
        assert polygon.width == 0
        assert polygon.pixel_width == 0

    def test_zero_scale_degenerates(self, square: ShapeSet):
        """Test a zero scale collapses all segments."""
        polygon = build(square, 0.0, 0.0)

        assert len(polygon) == 4
        assert all(s.is_degenerate() for s in polygon.segments)
        assert polygon.width == 0

    def test_empty_shape_set(self):
        """Test an empty shape set builds an empty polygon."""
        polygon = build(ShapeSet())

        assert len(polygon) == 0
        assert polygon.bbox.is_empty()
        assert polygon.width == 0
        assert polygon.height == 0

    def test_pixel_size_rounds_to_nearest(self):
        """Test pixel size rounds half up."""
        assert build(parse("M 0,0 H 10.4 V 10.5 H 0 Z")).pixel_width == 10
        assert build(parse("M 0,0 H 10.4 V 10.5 H 0 Z")).pixel_height == 11
