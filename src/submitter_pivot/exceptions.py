"""
Error kinds raised or reported while handling pivot tables.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failures a pivot table operation can report."""
    MALFORMED_HEADER = 'MalformedHeader'
    INVALID_IDENTIFIER = 'InvalidIdentifier'
    INVALID_COUNT = 'InvalidCount'
    COLUMN_COUNT_MISMATCH = 'ColumnCountMismatch'
    IO_FAILURE = 'IOFailure'
    MISSING_DIRECTORY = 'MissingDirectory'
    UNKNOWN_PERIOD = 'UnknownPeriod'


class PivotTableError(Exception):
    """Base class for all pivot table errors."""

    kind: Optional[ErrorKind] = None


class MalformedHeader(PivotTableError):
    kind = ErrorKind.MALFORMED_HEADER


class InvalidIdentifier(PivotTableError):
    kind = ErrorKind.INVALID_IDENTIFIER


class InvalidCount(PivotTableError):
    kind = ErrorKind.INVALID_COUNT


class ColumnCountMismatch(PivotTableError):
    """A row does not have the same number of cells as the first row."""
    kind = ErrorKind.COLUMN_COUNT_MISMATCH

    def __init__(self, line: int, found: int, expected: int):
        self.line = line
        self.found = found
        self.expected = expected
        super().__init__(
            f'line #{line} has {found} column(s) while expecting {expected}'
        )


class IOFailure(PivotTableError):
    kind = ErrorKind.IO_FAILURE


class MissingDirectory(PivotTableError):
    kind = ErrorKind.MISSING_DIRECTORY


class UnknownPeriod(PivotTableError):
    kind = ErrorKind.UNKNOWN_PERIOD
