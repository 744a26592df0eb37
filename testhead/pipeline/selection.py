"""
Test Point Selection

Decides which placement records become test points. Test pads (TP) and
fiducials (FD) qualify when they sit on the bottom layer, the side the
testhead probes. Connectors (J) always qualify. Anything else can be forced
in with inclusion substrings.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Union

from ..placement.records import PlacementRecord, TestPoint

logger = logging.getLogger(__name__)

PROBE_SIDE = "bottom"
BOTTOM_SIDE_MARKERS = ("TP", "FD")
ANY_SIDE_MARKERS = ("J",)

Record = Union[PlacementRecord, TestPoint]


def is_test_point(record: Record) -> bool:
    """Check whether a record qualifies without any inclusion override.

    Designator checks are case-sensitive substring matches; only the layer
    name is compared case-insensitively.
    """
    designator = record.designator
    on_probe_side = PROBE_SIDE in record.layer.lower()

    if on_probe_side and any(marker in designator for marker in BOTTOM_SIDE_MARKERS):
        return True
    return any(marker in designator for marker in ANY_SIDE_MARKERS)


def _as_test_point(record: Record) -> TestPoint:
    if isinstance(record, TestPoint):
        return replace(record)
    return TestPoint.from_record(record)


class RecordFilter:
    """Selects test points from placement records."""

    def __init__(self, inclusions: Optional[Sequence[str]] = None,
                 deduplicate: bool = False):
        """
        Args:
            inclusions: Designator substrings that force a record in. A record
                is emitted once per matching substring unless deduplicate is set.
            deduplicate: Emit an override-included record at most once
        """
        self.inclusions: List[str] = [i for i in (inclusions or []) if i]
        self.deduplicate = deduplicate

    def matching_inclusions(self, record: Record) -> List[str]:
        return [inc for inc in self.inclusions if inc in record.designator]

    def select(self, records: Iterable[Record]) -> List[TestPoint]:
        """
        Filter records down to test points, in input order.

        Returns:
            New TestPoint objects; the input is not modified
        """
        if self.inclusions:
            logger.info(f"Inclusion overrides: {self.inclusions}")

        selected: List[TestPoint] = []
        for record in records:
            if is_test_point(record):
                selected.append(_as_test_point(record))
                continue

            matches = self.matching_inclusions(record)
            if self.deduplicate:
                matches = matches[:1]
            for inclusion in matches:
                logger.info(f"Including {record.designator} (matched '{inclusion}')")
                selected.append(_as_test_point(record))

        logger.debug(f"Selected {len(selected)} test points")
        return selected
