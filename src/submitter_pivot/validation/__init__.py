"""
Validation module for submitter pivot tables.
"""

from .validation_engine import ValidationEngine, build_engine, check_file, check_stream
from .validation_result import ValidationResult, Severity
from .validators import FileValidator, FieldValidator

__all__ = [
    'ValidationEngine',
    'ValidationResult',
    'FileValidator',
    'FieldValidator',
    'Severity',
    'build_engine',
    'check_file',
    'check_stream',
]
