"""Logging utilities for submitter-pivot."""

import logging
from typing import Any, Dict, Optional

# Level given to loggers configured without an explicit one
_package_level: int | str = logging.INFO


def configure_logger(name: str, level: Optional[int | str] = None) -> logging.Logger:
    """
    Configure a logger with consistent formatting across all environments.

    Args:
        name (str): Name for the logger, typically __name__
        level (int | str, optional): Logging level, the package level when not given

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else _package_level)

    # An application (or pytest) already configured the root logger
    if logging.getLogger().handlers:
        logger.propagate = True

        return logger

    if not logger.handlers:
        formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

    return logger


class LoggerUtility:
    """Utility class for consistent logging across modules."""

    def __init__(self, name: str):
        """Initialize logger with module name."""
        self.logger = configure_logger(name)

    def log_validation_result(
        self,
        severity: str,
        message: str,
        location: Dict[str, Any],
        kind: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        suggested_fix: Optional[str] = None
    ) -> None:
        """
        Log validation results in a consistent format.

        Args:
            severity: Severity level (error, warning, info)
            message: The main message to log
            location: Location details (file, line, column)
            kind: Error kind name, if the result is a failure
            context: Additional context information
            suggested_fix: Suggested solution if applicable
        """
        if kind:
            message = f'{kind}: {message}'

        if severity.lower() == 'error':
            self.logger.error(message)
        elif severity.lower() == 'warning':
            self.logger.warning(message)
        else:
            self.logger.info(message)

        # Location and context are only useful when debugging
        location_str = ', '.join(f'{k}: {v}' for k, v in location.items())
        self.logger.debug(f'Location: {location_str}')

        if context:
            context_str = ', '.join(f'{k}: {v}' for k, v in context.items())
            self.logger.debug(f'Context: {context_str}')

        if suggested_fix:
            self.logger.debug(f'Fix: {suggested_fix}')


default_logger = LoggerUtility('submitter_pivot')
log_validation_result = default_logger.log_validation_result


def set_package_level(level: int | str, package: str = 'submitter_pivot') -> None:
    """Apply a logging level to the package loggers, existing and future."""
    global _package_level
    _package_level = level

    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.split('.')[0] == package:
            logger.setLevel(level)
