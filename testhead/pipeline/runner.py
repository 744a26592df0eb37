"""
Fixture Pipeline

Runs the full record-to-drill-table flow:

    select -> size probes -> scale -> centre [-> rotate -> centre]
           -> append fixture points -> project rows

Sizing runs on the raw mil positions and divides each distance by the scale
divisor, so the inch thresholds see the same value for a given pitch
wherever the pair sits. Dividing the coordinates first would let rounding
push an exact 85 mil pitch just under 0.085in. Sizing also happens before
the fixture points are added, since those are not probes.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..errors import EmptyInputError
from ..placement.records import PlacementRecord, ProbeClass, Rotation, TestPoint
from ..fixture.catalog import FIXTURE_POINTS, append_fixture_points
from ..fixture.profiles import FixtureProfile, TESTHEAD_STANDARD
from .selection import RecordFilter
from .sizing import ProbeSizer, ProximityViolation
from .transform import CoordinatePipeline
from .output import OutputProjector, OutputRow

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of a fixture run."""
    test_points: List[TestPoint]
    points: List[TestPoint]  # test points followed by fixture points
    rows: List[OutputRow]
    named: bool = False
    violations: List[ProximityViolation] = field(default_factory=list)

    @property
    def close_pitch_count(self) -> int:
        return sum(1 for p in self.test_points if p.probe_class is ProbeClass.CLOSE_PITCH)

    def summary(self) -> str:
        lines = [
            f"Test points: {len(self.test_points)}",
            f"  Close-pitch (075): {self.close_pitch_count}",
            f"Fixture points: {len(self.points) - len(self.test_points)}",
            f"Rows: {len(self.rows)}",
        ]
        if self.violations:
            lines.append(f"Warning: {len(self.violations)} probes closer than minimum spacing")
        return "\n".join(lines)


class FixturePipeline:
    """Builds a testhead drill table from placement records."""

    def __init__(self, profile: Optional[FixtureProfile] = None,
                 named: bool = False,
                 rotation: Optional[Rotation] = None,
                 inclusions: Optional[Sequence[str]] = None,
                 deduplicate: bool = False,
                 allow_empty: bool = False):
        """
        Args:
            profile: Testhead geometry and probe rules
            named: Emit designators and the named-only radius rules
            rotation: Optional board rotation
            inclusions: Designator substrings forced into the test point set
            deduplicate: Include an override-matched record only once
            allow_empty: With no test points, emit fixture points only
                instead of raising EmptyInputError
        """
        self.profile = profile or TESTHEAD_STANDARD
        self.named = named
        self.rotation = Rotation(rotation) if rotation is not None else None
        self.allow_empty = allow_empty

        self.selector = RecordFilter(inclusions, deduplicate=deduplicate)
        self.transform = CoordinatePipeline(self.profile)
        self.sizer = ProbeSizer.from_profile(self.profile)
        self.projector = OutputProjector(named=named, profile=self.profile)

    def run(self, records: Iterable[PlacementRecord]) -> PipelineResult:
        """
        Run the pipeline.

        Raises:
            EmptyInputError: If no record qualifies and allow_empty is off
            InvalidDesignatorError: If a point has an empty designator
        """
        test_points = self.selector.select(records)
        violations: List[ProximityViolation] = []

        if test_points:
            violations = list(self.sizer.size(test_points))
            test_points = self.transform.scale(test_points)
            test_points = self.transform.place(test_points, self.rotation)
        elif self.allow_empty:
            logger.warning("No test points qualified; emitting fixture points only")
        else:
            raise EmptyInputError()

        points = append_fixture_points(test_points, FIXTURE_POINTS)
        rows = self.projector.project(points)

        return PipelineResult(
            test_points=test_points,
            points=points,
            rows=rows,
            named=self.named,
            violations=violations,
        )
