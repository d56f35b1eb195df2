"""Date parsing and relative-position tests.

Every comparison here is total: a missing or unparseable operand makes the
test evaluate to False instead of raising.
"""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum

from fte_summary.utils.logger import get_logger

logger = get_logger(__name__)


class DateNotation(str, Enum):
    """Slash-separated notations used by the roster fields."""

    MONTH_DAY_YEAR = "%m/%d/%Y"  # staff start / termination dates
    YEAR_MONTH_DAY = "%Y/%m/%d"  # period_start / period_end


def parse_date(value: object, notation: DateNotation) -> date | None:
    """Parse ``value`` with ``notation``. Returns None if absent or malformed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, notation.value).date()
    except ValueError:
        logger.debug("Unparseable date %r for notation %s", text, notation.name)
        return None


def is_same_day(left: date | None, right: date | None) -> bool:
    if left is None or right is None:
        return False
    return _as_date(left) == _as_date(right)


def is_same_month(left: date | None, right: date | None) -> bool:
    if left is None or right is None:
        return False
    return (left.year, left.month) == (right.year, right.month)


def is_after(left: date | None, right: date | None) -> bool:
    """True if ``left`` falls strictly after ``right`` (calendar-day resolution)."""
    if left is None or right is None:
        return False
    return _as_date(left) > _as_date(right)


def is_future(value: date | None, now: datetime) -> bool:
    """True if midnight of ``value`` is strictly later than ``now``."""
    if value is None or now is None:
        return False
    moment = value if isinstance(value, datetime) else datetime.combine(value, time.min)
    if moment.tzinfo is not None and now.tzinfo is None:
        moment = moment.replace(tzinfo=None)
    elif moment.tzinfo is None and now.tzinfo is not None:
        now = now.replace(tzinfo=None)
    return moment > now


def format_month_day(value: date) -> str:
    """Short display form, e.g. ``09/01``."""
    return value.strftime("%m/%d")


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value
