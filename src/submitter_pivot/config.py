"""
Settings read from the environment and an optional .env file.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

ENV_PREFIX = 'SUBMITTER_PIVOT_'

_TRUE_WORDS = {'1', 'true', 'yes', 'on'}
_FALSE_WORDS = {'0', 'false', 'no', 'off', ''}


def _env(name: str) -> Optional[str]:
    return os.getenv(f'{ENV_PREFIX}{name}')


def _parse_bool(name: str, value: str) -> bool:
    word = value.strip().lower()

    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False

    raise ValueError(f'{ENV_PREFIX}{name} must be a boolean, got "{value}"')


@dataclass
class Settings:
    """
    Runtime options of the validator and the renderer.

    Attributes:
        delimiter: Field delimiter of the input and CSV output
        encoding: Input encoding, detected when None
        verbose: Report the passed checks as well
        header_row: Index of the row underlined in Markdown output
        log_level: Level of the package loggers
    """
    delimiter: str = ','
    encoding: Optional[str] = None
    verbose: bool = False
    header_row: int = 0
    log_level: str = 'WARNING'

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ValueError(f'Delimiter must be a single character, got "{self.delimiter}"')

        if self.header_row < 0:
            raise ValueError('Header row must be a non-negative index')

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f'Unknown log level: {self.log_level}')

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'Settings':
        """
        Build settings from SUBMITTER_PIVOT_* environment variables.

        Variables from the .env file are loaded first without overriding
        the ones already set. A missing .env file is not an error.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        load_dotenv(dotenv_path=dotenv_path)
        settings = cls()

        if (delimiter := _env('DELIMITER')) is not None:
            settings.delimiter = delimiter

        if encoding := _env('ENCODING'):
            settings.encoding = encoding

        if (verbose := _env('VERBOSE')) is not None:
            settings.verbose = _parse_bool('VERBOSE', verbose)

        if (header_row := _env('HEADER_ROW')) is not None:
            try:
                settings.header_row = int(header_row)
            except ValueError:
                raise ValueError(f'{ENV_PREFIX}HEADER_ROW must be an integer, got "{header_row}"')

        if log_level := _env('LOG_LEVEL'):
            settings.log_level = log_level.upper()

        # Revalidate the values taken from the environment
        settings.__post_init__()

        return settings
