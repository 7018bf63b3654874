"""Utility modules for submitter-pivot."""

from .logger import configure_logger, log_validation_result, set_package_level
from .files import is_file_valid, check_dir, is_markdown_target

__all__ = [
    'configure_logger',
    'log_validation_result',
    'set_package_level',
    'is_file_valid',
    'check_dir',
    'is_markdown_target',
]
