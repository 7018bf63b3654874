"""
Field content validator.
"""

import re
from typing import List, Dict, Any, Callable, Optional
from ...exceptions import ErrorKind
from ...patterns import IDENTIFIER_PATTERN, INTEGER_PATTERN, MAX_IDENTIFIER_LENGTH
from ...table import Table
from .base_validator import BaseValidator
from ..validation_result import ValidationResult, Severity

SUBMITTER = 'submitter'
COUNT = 'count'


class FieldValidator(BaseValidator):
    """
    Validates individual field contents of the data rows.

    Rules target either the submitter cell or every count cell. Rows are
    walked in file order and validation stops at the first failing cell.

    Checks:
    - Submitter name format and length
    - Counts are integers
    - Custom rules added with add_rule
    """

    def __init__(self, verbose: bool = False):
        super().__init__(verbose=verbose)
        self.validators: Dict[str, List[Dict[str, Any]]] = {SUBMITTER: [], COUNT: []}

        self.add_rule(
            target=SUBMITTER,
            rule=lambda value: 0 < len(value) <= MAX_IDENTIFIER_LENGTH,
            error_message='Submitter "{value}" at line {line} does not follow GitHub rules '
            f'(1 to {MAX_IDENTIFIER_LENGTH} characters)',
            kind=ErrorKind.INVALID_IDENTIFIER,
        )
        self.add_regex_rule(
            target=SUBMITTER,
            pattern=IDENTIFIER_PATTERN,
            error_message='Submitter "{value}" at line {line} does not follow GitHub rules',
            kind=ErrorKind.INVALID_IDENTIFIER,
        )
        self.add_regex_rule(
            target=COUNT,
            pattern=INTEGER_PATTERN,
            error_message='Value "{value}" at line {line} (column {column}) isn\'t an integer',
            kind=ErrorKind.INVALID_COUNT,
        )

    def add_rule(
        self,
        target: str,
        rule: Callable[[str], bool],
        error_message: str,
        kind: ErrorKind,
        suggested_fix: Optional[str] = None
    ) -> None:
        """
        Add a validation rule.

        Args:
            target: SUBMITTER for the first cell, COUNT for every other cell
            rule: Function that takes a cell value and returns True if valid
            error_message: Message to show when validation fails, may use
                the {value}, {line} and {column} fields
            kind: Error kind reported when validation fails
            suggested_fix: Optional suggestion for fixing the issue
        """
        if target not in self.validators:
            raise ValueError(f'Unknown rule target: {target}')

        self.validators[target].append({
            'rule': rule,
            'message': error_message,
            'kind': kind,
            'suggested_fix': suggested_fix
        })

    def add_regex_rule(
        self,
        target: str,
        pattern: str | re.Pattern,
        error_message: str,
        kind: ErrorKind,
    ) -> None:
        """
        Add a rule requiring the whole cell to match a regular expression.

        Args:
            target: SUBMITTER or COUNT
            pattern: Regular expression pattern
            error_message: Message to show when validation fails
            kind: Error kind reported when validation fails
        """
        regex = re.compile(pattern)

        self.add_rule(
            target=target,
            rule=lambda value: regex.fullmatch(value) is not None,
            error_message=error_message,
            kind=kind,
            suggested_fix=f'Match pattern: {regex.pattern}'
        )

    def __check(self, target: str, value: str, location: Dict[str, Any]) -> bool:
        for rule in self.validators[target]:
            if not rule['rule'](value):
                self.add_result(ValidationResult(
                    severity=Severity.ERROR,
                    message=rule['message'].format(value=value, **location),
                    location=location,
                    kind=rule['kind'],
                    context={'value': value},
                    suggested_fix=rule['suggested_fix']
                ))
                return False

        return True

    def validate(self, table: Table, source: str = '<table>') -> List[ValidationResult]:
        """
        Validate the data rows of a structurally valid table.

        Args:
            table: Table whose header and row widths were already checked
            source: Name used in diagnostics

        Returns:
            List of ValidationResult objects
        """
        self.clear_results()
        frame = table.to_frame()

        for line, (submitter, *counts) in enumerate(frame.itertuples(name=None), 2):
            if not self.__check(SUBMITTER, submitter, {'file': source, 'line': line, 'column': 0}):
                return self.results

            for column, value in enumerate(counts, 1):
                if not self.__check(COUNT, value, {'file': source, 'line': line, 'column': column}):
                    return self.results

        self.report_passed(
            'Records have a valid submitter name and number of submitted PRs '
            f'({len(frame)} data records)',
            {'file': source},
        )

        return self.results
