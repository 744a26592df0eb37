"""Selection, transform, sizing and output stages of the fixture pipeline."""

from .selection import RecordFilter, is_test_point
from .transform import CoordinatePipeline, scale, midpoint, offset, rotate, vertical_flip
from .sizing import ProbeSizer, ProximityViolation
from .output import OutputProjector, OutputRow, write_rows
from .runner import FixturePipeline, PipelineResult

__all__ = [
    "RecordFilter",
    "is_test_point",
    "CoordinatePipeline",
    "scale",
    "midpoint",
    "offset",
    "rotate",
    "vertical_flip",
    "ProbeSizer",
    "ProximityViolation",
    "OutputProjector",
    "OutputRow",
    "write_rows",
    "FixturePipeline",
    "PipelineResult",
]
