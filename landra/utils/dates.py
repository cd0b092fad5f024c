"""
Calendar helpers for lease schedules.
"""

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta


def next_due_date(due_day: int, reference: Optional[date] = None) -> date:
    """
    Project the next rent due date for a lease.

    Args:
        due_day (int): Day of month the rent falls due (1-31)
        reference (date): Date to project from, today when omitted

    Returns:
        date: ``due_day`` of the reference month, or of the following month
        when that day has already passed. Short months clamp to their last day.
    """
    if not 1 <= due_day <= 31:
        raise ValueError("Due date must be between 1 and 31")

    reference = reference or date.today()
    candidate = reference + relativedelta(day=due_day)
    if candidate < reference:
        candidate = reference + relativedelta(months=1, day=due_day)
    return candidate


def days_between(start: date, end: date) -> int:
    return (end - start).days
