"""
Drill Table Output

Turns finished points into rows for the testhead drill table and writes them
as CSV. Unnamed tables have columns x,y,radius; named tables add the
designator and apply the screw and pad radius rules.
"""

import csv
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

from ..errors import InvalidDesignatorError, OutputWriteError
from ..placement.records import TestPoint
from ..fixture.profiles import FixtureProfile, TESTHEAD_STANDARD

logger = logging.getLogger(__name__)

UNNAMED_HEADER = ("x", "y", "radius")
NAMED_HEADER = ("x", "y", "radius", "designator")


class OutputRow(NamedTuple):
    """One drill table row (inches)."""
    x: float
    y: float
    radius: float
    designator: Optional[str] = None

    def as_fields(self) -> List[str]:
        fields = [f"{self.x:.4f}", f"{self.y:.4f}", repr(self.radius)]
        if self.designator is not None:
            fields.append(self.designator)
        return fields


def header_for(named: bool):
    return NAMED_HEADER if named else UNNAMED_HEADER


class OutputProjector:
    """Resolves hole radii and builds drill table rows."""

    def __init__(self, named: bool = False, profile: Optional[FixtureProfile] = None):
        self.named = named
        self.profile = profile or TESTHEAD_STANDARD

    @staticmethod
    def validate(points: Sequence[TestPoint]):
        """
        Check every point can be projected.

        Raises:
            InvalidDesignatorError: On the first point with an empty designator
        """
        for index, point in enumerate(points):
            if not point.designator:
                raise InvalidDesignatorError(point.designator, index)

    def radius_for(self, point: TestPoint) -> float:
        """
        Hole radius for a point.

        The probe class gives the base radius; the designator's first letter
        then overrides it for mechanical features. Screws and pads only get
        their own radius in named tables.
        """
        profile = self.profile
        radius = profile.base_radius(point.probe_class)

        first = point.designator[0]
        if first == 'D':
            radius = profile.tooling_hole_radius
        elif first == 'E':
            radius = profile.alignment_pin_radius
        elif self.named and first == 'S':
            radius = profile.screw_radius
        elif self.named and first == 'P':
            radius = profile.pad_radius
        return radius

    def project_point(self, point: TestPoint) -> OutputRow:
        return OutputRow(
            x=point.x,
            y=point.y,
            radius=self.radius_for(point),
            designator=point.designator if self.named else None,
        )

    def project(self, points: Sequence[TestPoint]) -> List[OutputRow]:
        """Validate all points, then build one row per point in order."""
        self.validate(points)
        rows = [self.project_point(p) for p in points]
        for point, row in zip(points, rows):
            logger.debug(f"{point.designator}: x={row.x:.4f} y={row.y:.4f} r={row.radius}")
        return rows


def _discard(tmp_name: str):
    if os.path.exists(tmp_name):
        os.unlink(tmp_name)


def write_rows(rows: Iterable[OutputRow], path: Union[str, Path], named: bool = False) -> Path:
    """
    Write a drill table CSV.

    The table is written to a temporary file beside the target and moved into
    place, so the target is either fully written or left untouched.

    Returns:
        Path written

    Raises:
        OutputWriteError: If the target directory is missing or unwritable
    """
    path = Path(path)
    directory = path.parent

    if not directory.is_dir():
        raise OutputWriteError(f"output directory does not exist: {directory}", path=path)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    except OSError as e:
        raise OutputWriteError(f"cannot create output file: {e.strerror or e}", path=path) from e

    count = 0
    try:
        with os.fdopen(fd, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(header_for(named))
            for row in rows:
                writer.writerow(row.as_fields())
                count += 1
        os.replace(tmp_name, path)
    except OSError as e:
        _discard(tmp_name)
        raise OutputWriteError(f"cannot write output file: {e.strerror or e}", path=path) from e
    except BaseException:
        _discard(tmp_name)
        raise

    logger.info(f"Wrote {count} rows to {path}")
    return path
