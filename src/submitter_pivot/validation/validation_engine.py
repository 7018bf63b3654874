"""
Main validation engine that orchestrates the validation process.
"""

from pathlib import Path
from typing import List, Optional, TextIO, Tuple
from .validation_result import ValidationResult, Severity
from .validators import FileValidator, FieldValidator
from ..table import Table
from ..utils import configure_logger


class ValidationEngine:
    """
    Orchestrates the validation process across the validators.

    The file layer checks structure and loads the table, the field layer
    checks cell contents. Validation stops at the first error.
    """

    def __init__(
        self,
        file_validator: Optional[FileValidator] = None,
        field_validator: Optional[FieldValidator] = None
    ):
        """
        Initialize the validation engine.

        Args:
            file_validator: Optional FileValidator instance
            field_validator: Optional FieldValidator instance

        Note:
            A default FileValidator is used when none is given since the
            field layer needs the table it loads. The field layer only runs
            when a FieldValidator is provided.
        """
        self.__logger = configure_logger(__name__)
        self.file_validator = file_validator or FileValidator()
        self.field_validator = field_validator
        self._results: List[ValidationResult] = []
        self.table: Optional[Table] = None

    def __run_layers(self, source: str) -> List[ValidationResult]:
        file_results = self.file_validator.results
        self._results.extend(file_results)

        if any(r.severity == Severity.ERROR for r in file_results):
            return self._results

        table = self.file_validator.table

        if self.field_validator:
            self._results.extend(self.field_validator.validate(table, source=source))

        if self.is_valid:
            self.table = table
            self.__logger.info(f'Successfully checked "{source}"')

        return self._results

    def validate_file(self, file_path: str | Path) -> List[ValidationResult]:
        """
        Validate a pivot table file.

        Args:
            file_path: Path to the CSV file

        Returns:
            List of ValidationResult objects
        """
        self._results = []
        self.table = None

        self.file_validator.validate(file_path)

        return self.__run_layers(str(file_path))

    def validate_stream(self, stream: TextIO, source: str = '<stream>') -> List[ValidationResult]:
        """
        Validate a pivot table read from an open text stream.

        Args:
            stream: Text stream holding the CSV data
            source: Name used in diagnostics

        Returns:
            List of ValidationResult objects
        """
        self._results = []
        self.table = None

        self.file_validator.validate_stream(stream, source=source)

        return self.__run_layers(source)

    @property
    def results(self) -> List[ValidationResult]:
        """Get all validation results."""
        return self._results

    @property
    def is_valid(self) -> bool:
        """True when the last validation found no error."""
        return not self.has_errors()

    def get_errors(self) -> List[ValidationResult]:
        """Get validation results with ERROR severity."""
        return [r for r in self._results if r.severity == Severity.ERROR]

    def has_errors(self) -> bool:
        """Check if there are any ERROR severity results."""
        return any(r.severity == Severity.ERROR for r in self._results)


def build_engine(
    verbose: bool = False,
    delimiter: str = ',',
    encoding: Optional[str] = None
) -> ValidationEngine:
    """Engine running both the file and the field layers."""
    return ValidationEngine(
        file_validator=FileValidator(
            expected_delimiter=delimiter,
            expected_encoding=encoding,
            verbose=verbose,
        ),
        field_validator=FieldValidator(verbose=verbose),
    )


def check_file(
    file_path: str | Path,
    verbose: bool = False,
    delimiter: str = ',',
    encoding: Optional[str] = None
) -> Tuple[bool, List[ValidationResult]]:
    """
    Check whether a file is a processable submitter pivot table.

    Returns:
        Tuple of (is_valid, results)
    """
    engine = build_engine(verbose=verbose, delimiter=delimiter, encoding=encoding)
    results = engine.validate_file(file_path)

    return engine.is_valid, results


def check_stream(
    stream: TextIO,
    source: str = '<stream>',
    verbose: bool = False,
    delimiter: str = ','
) -> Tuple[bool, List[ValidationResult]]:
    """Same as check_file for an already opened text stream."""
    engine = build_engine(verbose=verbose, delimiter=delimiter)
    results = engine.validate_stream(stream, source=source)

    return engine.is_valid, results
