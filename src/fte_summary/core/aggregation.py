"""Per-category statistics for one location."""

from __future__ import annotations

from fte_summary.models.report import AggregateStats
from fte_summary.models.staff import Category, CategoryBucket, EmploymentType, StaffRecord
from fte_summary.utils.logger import get_logger

logger = get_logger(__name__)

# Sub-counts reported only for the paid-service line
_PAID_SERVICE_LABELS = {
    "night_shift_count": EmploymentType.NIGHT_SHIFT,
    "culinary_count": EmploymentType.CULINARY,
    "cleaning_count": EmploymentType.CLEANING,
}


def bed_percentage(total_equivalent: float, bed_count: float | None) -> float | None:
    """``total_equivalent / bed_count * 100``, or None without beds or staffing."""
    if bed_count is None or bed_count <= 0 or total_equivalent <= 0:
        return None
    return total_equivalent / bed_count * 100


def total_equivalent(staffs: tuple[StaffRecord, ...] | list[StaffRecord], standard_hours: float) -> float:
    """Sum of per-record FTE contributions; 0 when ``standard_hours <= 0``."""
    if standard_hours <= 0:
        if staffs:
            logger.debug("Standard hours %s is not positive; equivalent is 0", standard_hours)
        return 0.0
    return sum(record.equivalent(standard_hours) for record in staffs)


def count_employment(staffs: tuple[StaffRecord, ...] | list[StaffRecord], label: EmploymentType) -> int:
    return sum(1 for record in staffs if record.employment_type == label.value)


def aggregate_category(
    bucket: CategoryBucket,
    standard_hours: float,
    bed_count: float | None = None,
) -> AggregateStats:
    """Compute AggregateStats for ``bucket``.

    Args:
        bucket: Staff records for one (location, category) pair.
        standard_hours: Hours that make up one full-time equivalent.
        bed_count: Location bed capacity, if known.

    Returns:
        Stats at full precision. Rounding is left to the presentation layer.
    """
    staffs = bucket.staffs
    equivalent = total_equivalent(staffs, standard_hours)

    sub_counts = {field: 0 for field in _PAID_SERVICE_LABELS}
    if bucket.category == Category.PAID_SERVICE:
        sub_counts = {
            field: count_employment(staffs, label)
            for field, label in _PAID_SERVICE_LABELS.items()
        }

    return AggregateStats(
        category=bucket.category,
        count=len(staffs),
        full_time_count=count_employment(staffs, EmploymentType.FULL_TIME),
        part_time_count=count_employment(staffs, EmploymentType.PART_TIME),
        total_working_hours=sum(record.working_hours for record in staffs),
        total_equivalent=equivalent,
        bed_percentage=bed_percentage(equivalent, bed_count),
        **sub_counts,
    )
