"""
Pick-and-Place Reader

Loads placement records from a pick-and-place CSV export. The header is a
case-sensitive contract:

    designator,comment,layer,footprint,x,y,rotation,description

Coordinates are in mil. Extra columns are ignored; missing columns or values
abort the load with InputParseError.
"""

import csv
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..errors import InputParseError
from .records import PlacementRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "designator",
    "comment",
    "layer",
    "footprint",
    "x",
    "y",
    "rotation",
    "description",
)

NUMERIC_FIELDS = ("x", "y", "rotation")


def parse_record(row: Dict[str, Any], line: Optional[int] = None,
                 path: Optional[Path] = None) -> PlacementRecord:
    """
    Build a PlacementRecord from a header-keyed row.

    Args:
        row: Mapping of column name to raw value
        line: Source line number, for error messages
        path: Source file, for error messages

    Raises:
        InputParseError: If a field is missing or a coordinate is not a
            finite plain decimal number
    """
    values: Dict[str, Any] = {}
    for name in REQUIRED_FIELDS:
        raw = row.get(name)
        if raw is None:
            raise InputParseError(f"missing field '{name}'", path=path, line=line)
        values[name] = raw

    for name in NUMERIC_FIELDS:
        raw = values[name]
        if isinstance(raw, str):
            raw = raw.strip()
        if raw == "":
            raise InputParseError(f"empty value for '{name}'", path=path, line=line)
        try:
            if isinstance(raw, str) and "_" in raw:
                raise ValueError(raw)
            number = float(raw)
        except (TypeError, ValueError):
            raise InputParseError(
                f"invalid number for '{name}': {values[name]!r}", path=path, line=line
            ) from None
        if not math.isfinite(number):
            raise InputParseError(
                f"non-finite value for '{name}': {values[name]!r}", path=path, line=line
            )
        values[name] = number

    return PlacementRecord(**values)


def parse_placements(rows: Iterable[Dict[str, Any]],
                     path: Optional[Path] = None) -> List[PlacementRecord]:
    """Parse an iterable of header-keyed rows. Line numbers count the header as line 1."""
    records = []
    for index, row in enumerate(rows):
        records.append(parse_record(row, line=index + 2, path=path))
    return records


def read_placements(path: Union[str, Path]) -> List[PlacementRecord]:
    """
    Read a pick-and-place CSV file.

    Args:
        path: Path to the CSV export

    Returns:
        Records in file order

    Raises:
        InputParseError: If the file is missing, lacks a required column,
            is not valid UTF-8 CSV, or contains a malformed row
    """
    path = Path(path)

    if not path.exists():
        raise InputParseError("file not found", path=path)

    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        try:
            header = reader.fieldnames or []
            missing = [name for name in REQUIRED_FIELDS if name not in header]
            if missing:
                raise InputParseError(f"missing columns: {', '.join(missing)}", path=path, line=1)

            records = parse_placements(reader, path=path)
        except (UnicodeDecodeError, csv.Error) as e:
            raise InputParseError(str(e), path=path, line=reader.line_num or None) from e

    logger.info(f"Loaded {len(records)} placement records from {path}")
    return records
