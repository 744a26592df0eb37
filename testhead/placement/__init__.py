"""Placement records and pick-and-place file loading."""

from .records import PlacementRecord, TestPoint, FixturePoint, ProbeClass, Rotation
from .reader import read_placements, parse_placements, REQUIRED_FIELDS

__all__ = [
    "PlacementRecord",
    "TestPoint",
    "FixturePoint",
    "ProbeClass",
    "Rotation",
    "read_placements",
    "parse_placements",
    "REQUIRED_FIELDS",
]
