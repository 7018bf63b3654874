"""
Output of pivot tables as CSV or Markdown.
"""

from .renderer import TableRenderer, get_column_widths

__all__ = [
    'TableRenderer',
    'get_column_widths',
]
