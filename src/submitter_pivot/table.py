"""
In-memory representation of a submitter pivot table.
"""

import csv
import chardet
import pandas as pd
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, List, Optional, TextIO
from .exceptions import ColumnCountMismatch, IOFailure

DEFAULT_ENCODING = 'utf-8'


@dataclass
class Table:
    """
    A pivot table as loaded from a file.

    The first row is the header: an empty cell followed by the period
    labels. Every other row is a submitter followed by its counts.
    Rows are kept exactly as parsed, ragged rows included.
    """
    rows: List[List[str]] = field(default_factory=list)

    @property
    def header(self) -> List[str]:
        return self.rows[0] if self.rows else []

    @property
    def data_rows(self) -> List[List[str]]:
        return self.rows[1:]

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def periods(self) -> List[str]:
        return self.header[1:]

    def __len__(self) -> int:
        return len(self.rows)

    def check_consistency(self) -> None:
        """Raise ColumnCountMismatch for the first row not as wide as the header."""
        for line, row in enumerate(self.rows, 1):
            if len(row) != self.column_count:
                raise ColumnCountMismatch(line, len(row), self.column_count)

    def to_frame(self) -> pd.DataFrame:
        """
        Data rows as a DataFrame of strings.

        The index holds the submitters and there is one column per period,
        in header order. Duplicate submitters are kept.
        """
        self.check_consistency()
        frame = pd.DataFrame(
            [row[1:] for row in self.data_rows],
            columns=self.periods,
            index=[row[0] for row in self.data_rows],
            dtype=str,
        )
        frame.index.name = 'Submitter'

        return frame


def detect_encoding(file_path: str | Path) -> Dict[str, Any]:
    """
    Guess the encoding of a file with chardet.

    An empty or undecidable file is reported as utf-8 with no confidence.
    """
    try:
        with open(file_path, 'rb') as f:
            detected = chardet.detect(f.read())
    except OSError as e:
        raise IOFailure(f'Unable to read input file {file_path}: {e}') from e

    if not detected.get('encoding'):
        return {'encoding': DEFAULT_ENCODING, 'confidence': 0.0}

    return detected


def read_table(stream: TextIO, delimiter: str = ',') -> Table:
    """Parse an open text stream into a Table. Blank lines are skipped."""
    reader = csv.reader(stream, delimiter=delimiter, quoting=csv.QUOTE_MINIMAL)

    return Table([row for row in reader if row])


def load_table(
    file_path: str | Path,
    delimiter: str = ',',
    encoding: Optional[str] = None
) -> Table:
    """
    Load a pivot table file.

    Args:
        file_path: Path to the CSV file
        delimiter: Field delimiter
        encoding: File encoding, detected when not given

    Raises:
        IOFailure: If the file cannot be opened, decoded or parsed
    """
    if encoding is None:
        encoding = detect_encoding(file_path)['encoding']

    try:
        with open(file_path, encoding=encoding, newline='') as f:
            return read_table(f, delimiter=delimiter)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise IOFailure(f'Unable to load {file_path}: {e}') from e
