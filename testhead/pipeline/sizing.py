"""
Probe Sizing

Chooses a probe size for every test point from the distance to its nearest
neighbour. Points closer than the close-pitch threshold get the smaller 075
probe; points closer than the minimum probe spacing cannot be probed even
with 075 probes and are reported as violations. Violations are advisory:
the fixture is still generated.

Points are sized in their source units. Each distance is measured there and
then divided by the unit divisor, so an 85 mil pitch compares as exactly
0.085in wherever the pair sits on the board.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, FrozenSet, Tuple

from ..placement.records import ProbeClass, TestPoint
from ..fixture.profiles import FixtureProfile, TESTHEAD_STANDARD

logger = logging.getLogger(__name__)


@dataclass
class ProximityViolation:
    """Two test points too close for any probe."""
    reference: str
    neighbor: str
    distance: float  # inches
    location: Tuple[float, float]  # inches, board coordinates

    @property
    def message(self) -> str:
        return (f"{self.reference} and {self.neighbor} too close for 075 probes "
                f"(distance {self.distance:.4f}in at "
                f"{self.location[0]:.4f}, {self.location[1]:.4f})")

    @property
    def pair(self) -> FrozenSet[str]:
        return frozenset((self.reference, self.neighbor))


class ProbeSizer:
    """Classifies test points by nearest-neighbour distance."""

    def __init__(self, close_pitch_threshold: Optional[float] = None,
                 min_probe_spacing: Optional[float] = None,
                 profile: Optional[FixtureProfile] = None,
                 unit_divisor: float = 1.0):
        """
        Args:
            close_pitch_threshold: Below this distance use 075 probes
                (default: profile value, 0.085in)
            min_probe_spacing: Below this distance report a violation
                (default: profile value, 0.068in)
            profile: Fixture profile supplying defaults and radii
            unit_divisor: Point units per inch; 1000.0 for raw mil points
        """
        self.profile = profile or TESTHEAD_STANDARD
        if close_pitch_threshold is None:
            close_pitch_threshold = self.profile.close_pitch_threshold
        if min_probe_spacing is None:
            min_probe_spacing = self.profile.min_probe_spacing
        self.close_pitch_threshold = close_pitch_threshold
        self.min_probe_spacing = min_probe_spacing
        self.unit_divisor = unit_divisor
        self.violations: List[ProximityViolation] = []

    @classmethod
    def from_profile(cls, profile: FixtureProfile) -> "ProbeSizer":
        return cls(profile=profile, unit_divisor=profile.scale_divisor)

    def radius_for(self, probe_class: ProbeClass) -> float:
        return self.profile.base_radius(probe_class)

    @staticmethod
    def nearest_neighbor(point: TestPoint,
                         points: Sequence[TestPoint]) -> Tuple[Optional[TestPoint], Optional[float]]:
        """
        Find the closest point at a different position.

        The distance is in the points' own units.
        Points sharing the exact position of `point` are ignored, whatever
        their designator.

        Returns:
            (neighbor, distance), or (None, None) if no other position exists
        """
        nearest = None
        best = None
        for other in points:
            if other.x == point.x and other.y == point.y:
                continue
            dist = math.sqrt((point.x - other.x) ** 2 + (point.y - other.y) ** 2)
            if best is None or dist < best:
                nearest, best = other, dist
        return nearest, best

    def size(self, points: Sequence[TestPoint]) -> List[ProximityViolation]:
        """
        Classify every point in place.

        Mechanical points must not be passed in; they are not probes.

        Returns:
            Violations found, one per point that is too close to its neighbour
        """
        self.violations = []

        for point in points:
            neighbor, raw = self.nearest_neighbor(point, points)
            dist = raw / self.unit_divisor if raw is not None else None
            point.min_distance = dist
            point.nearest = neighbor.designator if neighbor else None

            if dist is None or dist >= self.close_pitch_threshold:
                point.probe_class = ProbeClass.STANDARD
                continue

            point.probe_class = ProbeClass.CLOSE_PITCH
            if dist < self.min_probe_spacing:
                violation = ProximityViolation(
                    reference=point.designator,
                    neighbor=neighbor.designator,
                    distance=dist,
                    location=(point.x / self.unit_divisor, point.y / self.unit_divisor),
                )
                self.violations.append(violation)
                logger.warning(violation.message)

        close = sum(1 for p in points if p.probe_class is ProbeClass.CLOSE_PITCH)
        logger.info(f"Sized {len(points)} probes: {close} close-pitch, "
                    f"{len(self.violations)} spacing violations")
        return self.violations

    def violating_pairs(self) -> List[Tuple[str, str]]:
        """Unordered violating pairs, each reported once."""
        seen: Set[FrozenSet[str]] = set()
        pairs = []
        for v in self.violations:
            if v.pair in seen:
                continue
            seen.add(v.pair)
            pairs.append((v.reference, v.neighbor))
        return pairs

    def get_summary(self) -> str:
        """Get summary of proximity check results."""
        if not self.violations:
            return "Probe spacing passed with no violations."

        pairs = self.violating_pairs()
        lines = [
            f"Probe spacing: {len(pairs)} pairs closer than {self.min_probe_spacing}in",
            "",
        ]
        for v in self.violations:
            lines.append(f"[WARN] {v.message}")

        return "\n".join(lines)
