"""
Extraction of the top submitters of a period from a pivot table.
"""

import pandas as pd
from typing import Optional
from .exceptions import UnknownPeriod
from .patterns import is_period
from .table import Table
from .utils import configure_logger

LATEST = 'latest'
RESULT_HEADER = ['Submitter', 'Total_PRs']

logger = configure_logger(__name__)


def is_valid_month(month: str) -> bool:
    """Check a month argument: "YYYY-MM" from 2010 on, or "latest" (any case)."""
    if not month:
        return False

    return month.lower() == LATEST or is_period(month)


def extract_top_submitters(
    table: Table,
    month: str = LATEST,
    months: int = 12,
    top: Optional[int] = None
) -> Table:
    """
    Total the submissions of each submitter over a window of periods.

    Args:
        table: A validated pivot table
        month: Last period of the window, "latest" for the last column
        months: Number of period columns in the window
        top: Keep only this many submitters

    Returns:
        Table with a "Submitter", "Total_PRs" header, largest totals first

    Raises:
        ValueError: If month, months or top are not acceptable
        UnknownPeriod: If month is not a column of the table
    """
    if not is_valid_month(month):
        raise ValueError(f'Supplied month ({month}) is not in a valid format. Should be "YYYY-MM" or "latest"')
    if months < 1:
        raise ValueError('months must be at least 1')
    if top is not None and top < 1:
        raise ValueError('top must be at least 1')

    periods = table.periods
    if not periods:
        raise UnknownPeriod('The table has no period column')

    if month.lower() == LATEST:
        end = len(periods)
    elif month in periods:
        end = periods.index(month) + 1
    else:
        raise UnknownPeriod(f'Period {month} is not a column of the table')

    window = periods[max(0, end - months):end]
    logger.info(f'Extracting totals from {window[0]} to {window[-1]}')

    frame = table.to_frame()
    counts = frame.iloc[:, max(0, end - months):end].apply(pd.to_numeric)

    totals = counts.sum(axis=1).groupby(level=0).sum()
    totals = totals[totals > 0]

    result = totals.rename('Total_PRs').reset_index()
    result.columns = RESULT_HEADER
    result = result.sort_values(by=RESULT_HEADER[::-1], ascending=[False, True], kind='mergesort')

    if top is not None:
        result = result.head(top)

    return Table([list(RESULT_HEADER)] + [
        [submitter, str(int(total))] for submitter, total in result.itertuples(index=False, name=None)
    ])
