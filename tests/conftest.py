"""
Shared test fixtures for Testhead tests.

Provides reusable placement records, test point sets and CSV files
for testing selection, transforms, sizing and output.
"""

import csv

import pytest
from pathlib import Path
from typing import List

from testhead.placement.records import PlacementRecord, TestPoint
from testhead.placement.reader import REQUIRED_FIELDS


def make_record(designator: str, layer: str = "Bottom", x: float = 0.0,
                y: float = 0.0, comment: str = "", footprint: str = "TP_1mm",
                rotation: float = 0.0, description: str = "") -> PlacementRecord:
    """Build a placement record with sensible defaults (mil coordinates)."""
    return PlacementRecord(
        designator=designator,
        comment=comment,
        layer=layer,
        footprint=footprint,
        x=x,
        y=y,
        rotation=rotation,
        description=description,
    )


def make_point(designator: str, x: float, y: float) -> TestPoint:
    """Build a working test point (inch coordinates)."""
    return TestPoint(designator=designator, layer="Bottom", x=x, y=y)


def write_placement_csv(path: Path, records: List[PlacementRecord]) -> Path:
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(REQUIRED_FIELDS))
        writer.writeheader()
        for r in records:
            writer.writerow({name: getattr(r, name) for name in REQUIRED_FIELDS})
    return path


@pytest.fixture
def mixed_records() -> List[PlacementRecord]:
    """A small board with qualifying and non-qualifying parts."""
    return [
        make_record("TP1", "Bottom", 0, 0),
        make_record("TP2", "Top", 100, 0),
        make_record("FD1", "BOTTOM", 200, 0),
        make_record("FD2", "Top", 300, 0),
        make_record("J1", "Top", 400, 0),
        make_record("R12", "Bottom", 500, 0),
        make_record("C3", "Top", 600, 0),
        make_record("tp9", "Bottom", 700, 0),
    ]


@pytest.fixture
def example_records() -> List[PlacementRecord]:
    """TP1, TP2 on the bottom and J1 on top, far apart from each other."""
    return [
        make_record("TP1", "Bottom", 0, 0),
        make_record("TP2", "Bottom", 100, 0),
        make_record("J1", "Top", 5000, 5000),
    ]


@pytest.fixture
def placement_csv(tmp_path, example_records) -> Path:
    """The example board written as a pick-and-place CSV."""
    return write_placement_csv(tmp_path / "board-pnp.csv", example_records)
