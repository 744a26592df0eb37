"""
Testhead Mechanical Catalog

Fixed features of the testhead plate, in inches, in the fixture coordinate
space. They are appended after the test points have been normalized and are
never scaled, offset, rotated or sized.
"""

from typing import List, Sequence, Tuple

from ..placement.records import FixturePoint, TestPoint


FIXTURE_POINTS: Tuple[FixturePoint, ...] = (
    # Alignment pins
    FixturePoint("E1", 0.5, 3.0, "alignment_pin", "alignment pin"),
    FixturePoint("E2", 6.5, 3.0, "alignment_pin", "alignment pin"),
    # Tooling holes
    FixturePoint("D1", 0.5, 0.25, "tooling_hole", "tooling hole"),
    FixturePoint("D2", 0.5, 5.75, "tooling_hole", "tooling hole"),
    FixturePoint("D3", 3.5, 0.25, "tooling_hole", "tooling hole"),
    FixturePoint("D4", 3.5, 5.75, "tooling_hole", "tooling hole"),
    FixturePoint("D5", 6.5, 0.25, "tooling_hole", "tooling hole"),
    FixturePoint("D6", 6.5, 5.75, "tooling_hole", "tooling hole"),
    # Plate screws
    FixturePoint("SCREW1", 2.77, 2.282, "screw", "plate screw"),
    FixturePoint("SCREW2", 4.23, 2.282, "screw", "plate screw"),
    FixturePoint("SCREW3", 2.77, 3.718, "screw", "plate screw"),
    FixturePoint("SCREW4", 4.23, 3.718, "screw", "plate screw"),
)


def fixture_designators(catalog: Sequence[FixturePoint] = FIXTURE_POINTS) -> List[str]:
    return [fp.designator for fp in catalog]


def append_fixture_points(points: Sequence[TestPoint],
                          catalog: Sequence[FixturePoint] = FIXTURE_POINTS) -> List[TestPoint]:
    """Return a new list of the points followed by the catalog entries."""
    return list(points) + [fp.to_test_point() for fp in catalog]
