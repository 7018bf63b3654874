"""
Regular expressions describing the cells of a submitter pivot table.
"""

import re

# Year-month header label, any 20YY-MM text found in the cell
HEADER_PERIOD_PATTERN = re.compile(r'20[0-9]{2}-[0-9]{2}')

# Month argument, 2010-01 up to 2029-12
PERIOD_PATTERN = re.compile(r'20[12][0-9]-(0[1-9]|1[0-2])')

# GitHub-like user names. The conventional rule would be
# ^[a-zA-Z0-9]+(?:-[a-zA-Z0-9]+)*$ but the exported datasets contain names
# ending with a hyphen or with doubled hyphens, so any mix is accepted.
IDENTIFIER_PATTERN = re.compile(r'[a-zA-Z0-9-]+')
MAX_IDENTIFIER_LENGTH = 39

# Base-10 integer, sign allowed, no range limit
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


def is_header_period(value: str) -> bool:
    """Check if a header cell carries a year-month label (20YY-MM)."""
    return HEADER_PERIOD_PATTERN.search(value) is not None


def is_period(value: str) -> bool:
    """Check if a value is a real month (YYYY-MM) from 2010 on."""
    return PERIOD_PATTERN.fullmatch(value) is not None


def is_integer(value: str) -> bool:
    """Check if a cell holds an integer in text form."""
    return INTEGER_PATTERN.fullmatch(value) is not None
