"""
Base validator class that all validators must inherit from.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from ..validation_result import ValidationResult, Severity


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    All validator implementations should inherit from this class
    and implement the validate method. In verbose mode passed checks
    are reported as INFO results.
    """

    def __init__(self, verbose: bool = False):
        self.__results: List[ValidationResult] = []
        self.verbose = verbose

    @abstractmethod
    def validate(self, data: Any) -> List[ValidationResult]:
        """
        Validate the input data and return a list of validation results.

        Args:
            data: The data to validate (type depends on specific validator)

        Returns:
            List of ValidationResult objects
        """
        pass

    def add_result(self, result: ValidationResult) -> None:
        """Add a validation result to the results list."""
        self.__results.append(result)

    def report_passed(self, message: str, location: Dict[str, Any],
                      context: Optional[Dict[str, Any]] = None) -> None:
        """Record a passed check, only in verbose mode."""
        if self.verbose:
            self.add_result(ValidationResult(
                severity=Severity.INFO,
                message=message,
                location=location,
                context=context
            ))

    @property
    def results(self) -> List[ValidationResult]:
        """Get all validation results."""
        return self.__results

    def has_errors(self) -> bool:
        """Check if this validator reported an ERROR."""
        return any(r.severity == Severity.ERROR for r in self.__results)

    def clear_results(self) -> None:
        """Clear all validation results."""
        self.__results = []
