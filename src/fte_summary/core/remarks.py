"""Per-staff remarks (備考) for hires, terminations and leave."""

from __future__ import annotations

from datetime import date

from fte_summary.core.temporal import format_month_day, is_after, is_future, is_same_day
from fte_summary.models.report import REMARK_SEPARATOR, ReportPeriod
from fte_summary.models.staff import StaffRecord

HIRE_TAG = "【入社】"
TERMINATION_TAG = "【退職】"


def is_period_event(event_date: date | None, period: ReportPeriod) -> bool:
    """Whether ``event_date`` falls on/after the period start or in the future.

    The three tests are independent: without a period start, only the
    future-relative-to-now test can fire.
    """
    if event_date is None:
        return False
    return (
        is_same_day(event_date, period.period_start)
        or is_after(event_date, period.period_start)
        or is_future(event_date, period.now)
    )


def build_remarks(record: StaffRecord, period: ReportPeriod) -> list[str]:
    """Ordered remarks for ``record``: hire, termination, leave (each optional)."""
    remarks: list[str] = []

    if record.start_date is not None and is_period_event(record.start_date, period):
        remarks.append(f"{HIRE_TAG}{format_month_day(record.start_date)}")

    if record.termination_date is not None and is_period_event(record.termination_date, period):
        remarks.append(f"{TERMINATION_TAG}{format_month_day(record.termination_date)}")

    leave = record.leave_note
    if leave is not None:
        remarks.append(leave)

    return remarks


def format_remarks(remarks: list[str] | tuple[str, ...]) -> str:
    return REMARK_SEPARATOR.join(remarks)
