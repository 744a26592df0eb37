"""
Testhead - Pick-and-Place to Test Fixture Converter

Selects test points from a pick-and-place export, moves them into testhead
coordinates, sizes probe holes by neighbour spacing and adds the fixed
mechanical features of the fixture plate.
"""

__version__ = "0.1.0"

from .errors import (
    TestheadError,
    InputParseError,
    EmptyInputError,
    InvalidDesignatorError,
    ProfileError,
    OutputWriteError,
)
from .placement.records import PlacementRecord, TestPoint, FixturePoint, ProbeClass, Rotation
from .placement.reader import read_placements
from .fixture.profiles import FixtureProfile, get_profile, load_profile
from .pipeline.runner import FixturePipeline, PipelineResult

__all__ = [
    "TestheadError",
    "InputParseError",
    "EmptyInputError",
    "InvalidDesignatorError",
    "ProfileError",
    "OutputWriteError",
    "PlacementRecord",
    "TestPoint",
    "FixturePoint",
    "ProbeClass",
    "Rotation",
    "read_placements",
    "FixtureProfile",
    "get_profile",
    "load_profile",
    "FixturePipeline",
    "PipelineResult",
]
