# This project was developed with assistance from AI tools.
"""Tax year references for year-bearing document labels.

T4 slips for a tax year are generally issued by the end of February and in
hand by May, so from May onward the calendar year is treated as the current
tax year; January through April still point at the prior year.
"""

from datetime import date
from typing import NamedTuple

# Last month (inclusive) in which the prior calendar year is still "current"
_T4_CUTOFF_MONTH = 4


class TaxYears(NamedTuple):
    current: int
    previous: int
    two_years_ago: int
    t4_available: bool


def get_tax_years(evaluation_date: date) -> TaxYears:
    """Derive tax year labels from the evaluation date."""
    t4_available = evaluation_date.month > _T4_CUTOFF_MONTH
    current = evaluation_date.year if t4_available else evaluation_date.year - 1
    return TaxYears(
        current=current,
        previous=current - 1,
        two_years_ago=current - 2,
        t4_available=t4_available,
    )
