"""
Testhead Errors

Every error that aborts a fixture run derives from TestheadError so the CLI
can report it uniformly. Proximity violations are not errors; see
testhead.pipeline.sizing.
"""

from pathlib import Path
from typing import Optional, Union


class TestheadError(Exception):
    """Base class for errors that abort a fixture run."""

    __test__ = False  # not a pytest test class


class InputParseError(TestheadError):
    """A placement record is malformed or missing a required field."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None,
                 line: Optional[int] = None):
        self.path = Path(path) if path is not None else None
        self.line = line
        self.reason = message

        location = ""
        if self.path is not None:
            location = f"{self.path}"
            if line is not None:
                location += f":{line}"
            location += ": "
        elif line is not None:
            location = f"line {line}: "
        super().__init__(f"{location}{message}")


class EmptyInputError(TestheadError):
    """No test points qualified, so the fixture midpoint is undefined."""

    def __init__(self, message: str = "No test points qualified; midpoint is undefined"):
        super().__init__(message)


class InvalidDesignatorError(TestheadError):
    """A point reached output projection with an empty designator."""

    def __init__(self, designator: str, index: int):
        self.designator = designator
        self.index = index
        super().__init__(
            f"Point #{index} has an empty designator; cannot resolve probe radius"
        )


class ProfileError(TestheadError):
    """Unknown profile name or malformed profile file."""


class OutputWriteError(TestheadError):
    """The drill table could not be written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        super().__init__(f"{self.path}: {message}" if self.path is not None else message)
