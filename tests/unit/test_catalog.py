"""Tests for the testhead mechanical catalog."""

import dataclasses

import pytest

from testhead.fixture.catalog import FIXTURE_POINTS, append_fixture_points, fixture_designators
from testhead.placement.records import ProbeClass

from conftest import make_point


EXPECTED = {
    "E1": (0.5, 3.0),
    "E2": (6.5, 3.0),
    "D1": (0.5, 0.25),
    "D2": (0.5, 5.75),
    "D3": (3.5, 0.25),
    "D4": (3.5, 5.75),
    "D5": (6.5, 0.25),
    "D6": (6.5, 5.75),
    "SCREW1": (2.77, 2.282),
    "SCREW2": (4.23, 2.282),
    "SCREW3": (2.77, 3.718),
    "SCREW4": (4.23, 3.718),
}


class TestCatalog:
    """The catalog is a fixed table."""

    def test_twelve_points_in_stable_order(self):
        assert fixture_designators() == [
            "E1", "E2", "D1", "D2", "D3", "D4", "D5", "D6",
            "SCREW1", "SCREW2", "SCREW3", "SCREW4",
        ]

    def test_coordinates(self):
        assert {fp.designator: (fp.x, fp.y) for fp in FIXTURE_POINTS} == EXPECTED

    def test_entries_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            FIXTURE_POINTS[0].x = 1.0

    def test_kinds(self):
        kinds = {fp.designator: fp.kind for fp in FIXTURE_POINTS}
        assert kinds["E1"] == "alignment_pin"
        assert kinds["D4"] == "tooling_hole"
        assert kinds["SCREW2"] == "screw"


class TestAppend:
    """Appending the catalog to a point set."""

    def test_appends_after_points(self):
        points = [make_point("TP1", 1.0, 1.0)]
        result = append_fixture_points(points)

        assert len(result) == 13
        assert result[0] is points[0]
        assert [p.designator for p in result[1:]] == fixture_designators()

    def test_input_list_unchanged(self):
        points = [make_point("TP1", 1.0, 1.0)]
        append_fixture_points(points)
        assert len(points) == 1

    def test_empty_input(self):
        result = append_fixture_points([])
        assert [(p.x, p.y) for p in result] == list(EXPECTED.values())

    def test_fixture_points_are_mechanical(self):
        result = append_fixture_points([])
        assert all(p.probe_class is ProbeClass.MECHANICAL for p in result)
        assert all(p.is_mechanical for p in result)
