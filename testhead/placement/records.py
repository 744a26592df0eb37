"""
Placement Records

Data model shared by every pipeline stage. A PlacementRecord is one row of a
pick-and-place file exactly as read; a TestPoint is the working copy that the
pipeline rescales, recenters and classifies. Fixture points are the fixed
mechanical features of the testhead and never come from the input file.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class ProbeClass(Enum):
    """Probe hole class of a point."""
    STANDARD = "100"       # 100 mil probe
    CLOSE_PITCH = "075"    # 75 mil probe for tight neighbours
    MECHANICAL = "mechanical"  # fixture feature, never sized


class Rotation(IntEnum):
    """Board rotations supported by the testhead."""
    R90 = 90
    R180 = 180
    R270 = 270


@dataclass(frozen=True)
class PlacementRecord:
    """One row of a pick-and-place file (coordinates in mil)."""
    designator: str  # e.g. "TP12", "J3"
    comment: str
    layer: str  # "Top" / "Bottom", matched case-insensitively
    footprint: str
    x: float
    y: float
    rotation: float  # degrees, carried through unused
    description: str


@dataclass
class TestPoint:
    """A placement record selected for probing, mutated by the pipeline."""

    __test__ = False  # not a pytest test class

    designator: str
    comment: str = ""
    layer: str = ""
    footprint: str = ""
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    description: str = ""

    probe_class: ProbeClass = ProbeClass.STANDARD

    # Filled in by ProbeSizer
    nearest: Optional[str] = None
    min_distance: Optional[float] = None

    @classmethod
    def from_record(cls, record: PlacementRecord) -> "TestPoint":
        """Create a working point from an input record."""
        return cls(
            designator=record.designator,
            comment=record.comment,
            layer=record.layer,
            footprint=record.footprint,
            x=record.x,
            y=record.y,
            rotation=record.rotation,
            description=record.description,
        )

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def is_mechanical(self) -> bool:
        return self.probe_class is ProbeClass.MECHANICAL


@dataclass(frozen=True)
class FixturePoint:
    """A fixed mechanical feature of the testhead (coordinates in inches)."""
    designator: str
    x: float
    y: float
    kind: str  # "alignment_pin", "tooling_hole", "screw"
    description: str = ""

    def to_test_point(self) -> TestPoint:
        """Convert to a pipeline point that bypasses proximity sizing."""
        return TestPoint(
            designator=self.designator,
            comment=self.description,
            layer="N/A",
            footprint="N/A",
            x=self.x,
            y=self.y,
            description=self.description,
            probe_class=ProbeClass.MECHANICAL,
        )
