"""Tests for the coordinate pipeline."""

import pytest

from testhead.errors import EmptyInputError
from testhead.fixture.profiles import FixtureProfile
from testhead.pipeline.transform import (
    CoordinatePipeline,
    midpoint,
    offset,
    rotate,
    scale,
    vertical_flip,
)
from testhead.placement.records import Rotation

from conftest import make_point


@pytest.fixture
def points():
    return [
        make_point("TP1", 1.0, 2.0),
        make_point("TP2", -3.5, 0.25),
        make_point("J1", 4.0, -1.0),
    ]


def positions(points):
    return [(p.x, p.y) for p in points]


class TestScale:
    """Tests for mil to inch scaling."""

    def test_divides_by_1000(self):
        pts = [make_point("TP1", 1500, -250)]
        scale(pts)
        assert pts[0].x == pytest.approx(1.5)
        assert pts[0].y == pytest.approx(-0.25)

    def test_custom_divisor(self):
        pts = [make_point("TP1", 10, 20)]
        scale(pts, 10.0)
        assert positions(pts) == [(1.0, 2.0)]

    def test_empty_is_noop(self):
        assert scale([]) == []


class TestOffset:
    """Tests for recentring on the fixture anchor."""

    def test_midpoint(self, points):
        mx, my = midpoint(points)
        assert mx == pytest.approx(0.5)
        assert my == pytest.approx(0.25 / 3 + 1.0 / 3)

    def test_midpoint_of_empty_set_raises(self):
        with pytest.raises(EmptyInputError):
            midpoint([])

    def test_offset_of_empty_set_raises(self):
        with pytest.raises(EmptyInputError):
            offset([])

    def test_offset_moves_mean_to_anchor(self, points):
        offset(points)
        mx, my = midpoint(points)
        assert mx == pytest.approx(3.5, abs=1e-9)
        assert my == pytest.approx(3.0, abs=1e-9)

    def test_offset_preserves_relative_positions(self, points):
        dx_before = points[1].x - points[0].x
        offset(points)
        assert points[1].x - points[0].x == pytest.approx(dx_before)

    def test_custom_anchor(self, points):
        offset(points, (0.0, 0.0))
        mx, my = midpoint(points)
        assert mx == pytest.approx(0.0, abs=1e-9)
        assert my == pytest.approx(0.0, abs=1e-9)

    def test_single_point_lands_on_anchor(self):
        pts = [make_point("J1", 12.0, -7.0)]
        offset(pts)
        assert positions(pts) == [(3.5, 3.0)]


class TestRotate:
    """Tests for board rotation about the origin."""

    def test_rotate_90(self):
        rotated = rotate([make_point("TP1", 1.0, 2.0)], Rotation.R90)
        assert positions(rotated) == [(2.0, -1.0)]

    def test_rotate_180(self):
        rotated = rotate([make_point("TP1", 1.0, 2.0)], Rotation.R180)
        assert positions(rotated) == [(-1.0, -2.0)]

    def test_rotate_270_is_vertical_flip(self):
        rotated = rotate([make_point("TP1", 1.0, 2.0)], Rotation.R270)
        assert positions(rotated) == [(1.0, -2.0)]
        assert vertical_flip(1.0, 2.0) == (1.0, -2.0)

    def test_accepts_plain_degrees(self):
        rotated = rotate([make_point("TP1", 1.0, 2.0)], 90)
        assert positions(rotated) == [(2.0, -1.0)]

    def test_invalid_degrees_rejected(self):
        with pytest.raises(ValueError):
            rotate([make_point("TP1", 1.0, 2.0)], 45)

    def test_input_is_not_mutated(self, points):
        before = positions(points)
        rotated = rotate(points, Rotation.R90)

        assert positions(points) == before
        assert all(a is not b for a, b in zip(points, rotated))
        assert [p.designator for p in rotated] == [p.designator for p in points]

    def test_180_is_self_inverse(self, points):
        twice = rotate(rotate(points, Rotation.R180), Rotation.R180)
        assert positions(twice) == positions(points)

    def test_four_quarter_turns_return_to_start(self, points):
        result = points
        for _ in range(4):
            result = rotate(result, Rotation.R90)
        assert positions(result) == positions(points)

    def test_270_setting_is_not_three_quarter_turns(self):
        """The 270 setting flips instead of turning; keep it that way."""
        pts = [make_point("TP1", 1.0, 2.0)]
        three_turns = pts
        for _ in range(3):
            three_turns = rotate(three_turns, Rotation.R90)

        assert positions(three_turns) == [(-2.0, 1.0)]
        assert positions(rotate(pts, Rotation.R270)) == [(1.0, -2.0)]

    def test_270_applied_twice_is_identity(self, points):
        twice = rotate(rotate(points, Rotation.R270), Rotation.R270)
        assert positions(twice) == positions(points)


class TestCoordinatePipeline:
    """Tests for the composed transform order."""

    def test_normalize_without_rotation(self):
        pts = [make_point("TP1", 0, 0), make_point("TP2", 1000, 0)]
        CoordinatePipeline().normalize(pts)
        assert pts[0].x == pytest.approx(3.0)
        assert pts[1].x == pytest.approx(4.0)
        assert pts[0].y == pytest.approx(3.0)

    def test_rotation_is_recentred(self):
        pts = [make_point("TP1", 0, 0), make_point("TP2", 1000, 0)]
        result = CoordinatePipeline().normalize(pts, Rotation.R90)

        mx, my = midpoint(result)
        assert mx == pytest.approx(3.5, abs=1e-9)
        assert my == pytest.approx(3.0, abs=1e-9)
        # The pair now runs vertically
        assert result[0].x == pytest.approx(result[1].x)
        assert result[0].y - result[1].y == pytest.approx(1.0)

    def test_profile_anchor_and_divisor(self):
        profile = FixtureProfile(name="mm", scale_divisor=1.0, anchor_x=0.0, anchor_y=0.0)
        pts = [make_point("TP1", 2, 2), make_point("TP2", 4, 4)]
        CoordinatePipeline(profile).normalize(pts)
        assert positions(pts) == [(-1.0, -1.0), (1.0, 1.0)]
