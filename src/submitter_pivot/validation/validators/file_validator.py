"""
Pivot table file structure validator.
"""

import codecs
import csv
from pathlib import Path
from typing import List, Optional, TextIO
from ...exceptions import ErrorKind, IOFailure
from ...patterns import is_header_period
from ...table import Table, detect_encoding, read_table
from ...utils import configure_logger
from .base_validator import BaseValidator
from ..validation_result import ValidationResult, Severity


class FileValidator(BaseValidator):
    """
    Validates the structure of a pivot table file.

    Checks:
    - File existence and accessibility
    - File encoding
    - Header: empty first cell, year-month labels in every other cell
    - CSV structure (every row as wide as the header)

    The table loaded by the last successful run is kept in ``table``.
    """

    def __init__(
        self,
        expected_delimiter: str = ',',
        expected_encoding: Optional[str] = None,
        verbose: bool = False,
    ):
        super().__init__(verbose=verbose)
        self.__logger = configure_logger(__name__)
        self.__expected_delimiter = expected_delimiter
        self.__expected_encoding = expected_encoding
        self.table: Optional[Table] = None

    def __error(self, kind: ErrorKind, message: str, source: str, **location) -> None:
        self.add_result(
            ValidationResult(
                severity=Severity.ERROR,
                message=message,
                location={'file': source, **location},
                kind=kind,
            )
        )

    def __validate_file_exists(self, file_path: Path) -> bool:
        """Check if file exists and is accessible."""
        if not file_path.exists():
            self.__error(ErrorKind.IO_FAILURE, 'File does not exist', str(file_path))
            return False

        if not file_path.is_file():
            self.__error(ErrorKind.IO_FAILURE, 'Path exists but is not a file', str(file_path))
            return False

        return True

    def __detect_encoding(self, file_path: Path) -> Optional[str]:
        """Detect file encoding and validate against expected encoding."""
        try:
            detected = detect_encoding(file_path)
        except IOFailure as e:
            self.__error(ErrorKind.IO_FAILURE, str(e), str(file_path))
            return None

        if self.__expected_encoding is None:
            return detected['encoding']

        try:
            codecs.lookup(self.__expected_encoding)
        except LookupError:
            self.__error(ErrorKind.IO_FAILURE, f'Unknown encoding: {self.__expected_encoding}', str(file_path))
            return None

        # Plain ASCII is readable with any expected encoding
        if (
            detected['confidence']
            and detected['encoding'].lower() != 'ascii'
            and codecs.lookup(detected['encoding']).name
            != codecs.lookup(self.__expected_encoding).name
        ):
            self.add_result(
                ValidationResult(
                    severity=Severity.WARNING,
                    message=f'File encoding mismatch. Expected {self.__expected_encoding}, '
                    f'found {detected["encoding"]}',
                    location={'file': str(file_path)},
                    context={'confidence': detected['confidence']},
                    suggested_fix=f'Convert file to {self.__expected_encoding} encoding',
                )
            )

        return self.__expected_encoding

    def __validate_headers(self, headers: List[str], source: str) -> bool:
        """
        Validate the header row.

        Args:
            headers: List of header fields
            source: Name of the file being checked

        Returns:
            bool indicating if headers are valid
        """
        self.report_passed(
            f'Number of columns defined in header: {len(headers)}',
            {'file': source, 'line': 1},
        )

        if headers[0] != '':
            self.__error(
                ErrorKind.MALFORMED_HEADER,
                'Not the expected first column name (should be empty)',
                source, line=1, column=0,
            )
            return False

        self.report_passed("File's header starts with an empty column name", {'file': source, 'line': 1})

        for column, label in enumerate(headers[1:], 1):
            if not is_header_period(label):
                self.__error(
                    ErrorKind.MALFORMED_HEADER,
                    f'Column header "{label}" is not of the expected format (YYYY-MM)',
                    source, line=1, column=column,
                )
                return False

        self.report_passed('File\'s header data columns follow the "20YY-MM" format', {'file': source, 'line': 1})

        return True

    def __validate_field_consistency(self, table: Table, source: str) -> bool:
        """Validate consistent number of fields across rows."""
        expected_fields = table.column_count

        for line, row in enumerate(table.data_rows, 2):
            if len(row) != expected_fields:
                self.__error(
                    ErrorKind.COLUMN_COUNT_MISMATCH,
                    f'Line {line} has {len(row)} column(s) while the header defines {expected_fields}',
                    source, line=line,
                )
                return False

        self.report_passed('Number of data columns match header columns', {'file': source})

        return True

    def validate_stream(self, stream: TextIO, source: str = '<stream>') -> List[ValidationResult]:
        """
        Validate an already opened pivot table.

        Args:
            stream: Text stream holding the CSV data
            source: Name used in diagnostics

        Returns:
            List of ValidationResult objects
        """
        self.clear_results()
        self.table = None

        try:
            table = read_table(stream, delimiter=self.__expected_delimiter)
        except (csv.Error, UnicodeDecodeError) as e:
            self.__error(ErrorKind.IO_FAILURE, f'Failed to parse CSV: {str(e)}', source)
            return self.results

        if not table.rows:
            self.__error(ErrorKind.MALFORMED_HEADER, 'CSV file is empty', source)
            return self.results

        if self.__validate_headers(table.header, source) and \
                self.__validate_field_consistency(table, source):
            self.table = table

        return self.results

    def validate(self, file_path: str | Path) -> List[ValidationResult]:
        """
        Validate a pivot table file.

        Args:
            file_path: Path to the CSV file

        Returns:
            List of ValidationResult objects
        """
        self.clear_results()
        self.table = None
        file_path = Path(file_path)

        if not self.__validate_file_exists(file_path):
            return self.results

        encoding = self.__detect_encoding(file_path)
        if not encoding:
            return self.results

        # validate_stream starts a fresh result list
        warnings = list(self.results)

        try:
            with open(file_path, encoding=encoding, newline='') as f:
                self.validate_stream(f, source=str(file_path))
        except OSError as e:
            self.clear_results()
            self.__error(ErrorKind.IO_FAILURE, f'Unable to read input file: {str(e)}', str(file_path))

        for warning in reversed(warnings):
            self.results.insert(0, warning)

        self.__logger.debug(f'{file_path}: {len(self.results)} result(s), encoding {encoding}')

        return self.results
