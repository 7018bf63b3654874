"""
Submitter Pivot - validation and formatting of submitter pivot tables.

This package provides:
- Structural and field validation of pivot tables exported by the GNU
  datamash pivot function (submitters by year-month, integer counts)
- Output of a table as CSV or as an aligned Markdown table
- Extraction of the top submitters over a range of months
"""

from ._version import __version__
from .config import Settings
from .exceptions import (
    ErrorKind,
    PivotTableError,
    MalformedHeader,
    InvalidIdentifier,
    InvalidCount,
    ColumnCountMismatch,
    IOFailure,
    MissingDirectory,
    UnknownPeriod,
)
from .extraction import extract_top_submitters, is_valid_month
from .rendering import TableRenderer, get_column_widths
from .table import Table, load_table, read_table
from .validation import (
    ValidationEngine,
    ValidationResult,
    Severity,
    FileValidator,
    FieldValidator,
    check_file,
    check_stream,
)


__all__ = [
    # Table model
    'Table',
    'load_table',
    'read_table',

    # Validation components
    'ValidationEngine',
    'ValidationResult',
    'Severity',
    'FileValidator',
    'FieldValidator',
    'check_file',
    'check_stream',

    # Rendering components
    'TableRenderer',
    'get_column_widths',

    # Extraction
    'extract_top_submitters',
    'is_valid_month',

    # Errors
    'ErrorKind',
    'PivotTableError',
    'MalformedHeader',
    'InvalidIdentifier',
    'InvalidCount',
    'ColumnCountMismatch',
    'IOFailure',
    'MissingDirectory',
    'UnknownPeriod',

    'Settings',
    '__version__',
]
