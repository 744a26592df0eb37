"""Testhead mechanical catalog and fixture profiles."""

from .catalog import FIXTURE_POINTS, append_fixture_points, fixture_designators
from .profiles import (
    FixtureProfile,
    TESTHEAD_STANDARD,
    get_profile,
    list_profiles,
    load_profile,
    dump_profile,
)

__all__ = [
    "FIXTURE_POINTS",
    "append_fixture_points",
    "fixture_designators",
    "FixtureProfile",
    "TESTHEAD_STANDARD",
    "get_profile",
    "list_profiles",
    "load_profile",
    "dump_profile",
]
