"""
Writes a pivot table as CSV or as an aligned Markdown table.
"""

import csv
import io
from pathlib import Path
from typing import List, Optional, Sequence
from ..exceptions import ColumnCountMismatch, IOFailure
from ..patterns import is_integer
from ..table import Table
from ..utils import configure_logger, is_markdown_target

Rows = Sequence[Sequence[str]]


def _as_rows(data: Table | Rows) -> Rows:
    return data.rows if isinstance(data, Table) else data


def get_column_widths(data: Table | Rows) -> List[int]:
    """
    Compute the width of every column.

    Args:
        data: Table or rows of cells, header included

    Returns:
        The longest cell length of each column

    Raises:
        ColumnCountMismatch: If a row is not as wide as the first one
    """
    rows = _as_rows(data)
    if not rows:
        return []

    widths = [0] * len(rows[0])

    for line, row in enumerate(rows, 1):
        if len(row) != len(widths):
            raise ColumnCountMismatch(line, len(row), len(widths))

        for column, cell in enumerate(row):
            widths[column] = max(widths[column], len(cell))

    return widths


class TableRenderer:
    """
    Renders rows of cells either as CSV or as a Markdown table.

    Args:
        header_row: Index of the row followed by the Markdown separator row
        introduction: Text written verbatim before the Markdown table
    """

    def __init__(self, header_row: int = 0, introduction: Optional[str] = None):
        if header_row < 0:
            raise ValueError('header_row must be a non-negative index')

        self.__logger = configure_logger(__name__)
        self.header_row = header_row
        self.introduction = introduction

    def __separator(self, rows: Rows, widths: List[int]) -> str:
        """Header underline, right aligned where the next row holds integers."""
        following = rows[self.header_row + 1] if self.header_row + 1 < len(rows) else None
        cells = []

        for column, width in enumerate(widths):
            if following is not None and is_integer(following[column]):
                cells.append('-' * (width - 1) + ':')
            else:
                cells.append('-' * width)

        return '|' + ''.join(f' {cell} |' for cell in cells)

    @staticmethod
    def __format_row(row: Sequence[str], widths: List[int]) -> str:
        cells = []

        for cell, width in zip(row, widths):
            # Integers are right aligned, anything else left aligned
            if is_integer(cell):
                cells.append(f' {cell.rjust(width)} |')
            else:
                cells.append(f' {cell.ljust(width)} |')

        return '|' + ''.join(cells)

    def to_markdown(self, data: Table | Rows) -> str:
        """
        Format rows as a Markdown table.

        Raises:
            ColumnCountMismatch: If the rows are not all the same width
        """
        rows = _as_rows(data)
        widths = get_column_widths(rows)
        lines = []

        if self.introduction:
            lines.append(self.introduction)

        for index, row in enumerate(rows):
            lines.append(self.__format_row(row, widths))
            if index == self.header_row:
                lines.append(self.__separator(rows, widths))

        return ''.join(f'{line}\n' for line in lines)

    @staticmethod
    def to_csv(data: Table | Rows, delimiter: str = ',') -> str:
        """Format rows as CSV with minimal quoting."""
        buffer = io.StringIO()
        writer = csv.writer(
            buffer, delimiter=delimiter, quoting=csv.QUOTE_MINIMAL, lineterminator='\n'
        )
        writer.writerows(_as_rows(data))

        return buffer.getvalue()

    def __write(self, output_path: str | Path, content: str) -> None:
        try:
            with open(output_path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except OSError as e:
            raise IOFailure(f'Unable to write {output_path}: {e}') from e

        self.__logger.info(f'Wrote {output_path}')

    def write_markdown(self, output_path: str | Path, data: Table | Rows) -> None:
        """Write rows as a Markdown table. Nothing is written if the rows are ragged."""
        self.__write(output_path, self.to_markdown(data))

    def write_csv(self, output_path: str | Path, data: Table | Rows) -> None:
        """Write rows as a CSV file."""
        self.__write(output_path, self.to_csv(data))

    def render(self, output_path: str | Path, data: Table | Rows) -> None:
        """
        Write rows in the format matching the output file extension.

        A ``.md`` file (any case) gets a Markdown table, anything else CSV.
        """
        if is_markdown_target(output_path):
            self.write_markdown(output_path, data)
        else:
            self.write_csv(output_path, data)
