"""
Validator implementations.
"""

from .base_validator import BaseValidator
from .file_validator import FileValidator
from .field_validator import FieldValidator, SUBMITTER, COUNT

__all__ = [
    'BaseValidator',
    'FileValidator',
    'FieldValidator',
    'SUBMITTER',
    'COUNT',
]
