"""Per-location staff tables (one per category) with remarks."""

from __future__ import annotations

from fte_summary.core.aggregation import aggregate_category
from fte_summary.core.remarks import build_remarks
from fte_summary.models.report import CategoryDetail, LocationDetail, ReportPeriod, StaffDetailRow
from fte_summary.models.staff import Category, CategoryBucket, LocationContext, StaffRecord


def build_staff_row(record: StaffRecord, standard_hours: float, period: ReportPeriod) -> StaffDetailRow:
    return StaffDetailRow(
        name=record.name,
        employment_type=record.employment_type,
        working_hours=record.working_hours,
        equivalent=record.equivalent(standard_hours) if standard_hours > 0 else None,
        remarks=tuple(build_remarks(record, period)),
        terminated=record.is_terminated,
    )


def build_category_detail(
    bucket: CategoryBucket,
    standard_hours: float,
    period: ReportPeriod,
    bed_count: float | None = None,
) -> CategoryDetail:
    return CategoryDetail(
        stats=aggregate_category(bucket, standard_hours, bed_count),
        rows=tuple(build_staff_row(r, standard_hours, period) for r in bucket.staffs),
    )


def build_location_detail(
    context: LocationContext,
    standard_hours: float,
    period: ReportPeriod,
) -> LocationDetail:
    """Staff tables for 看護, 介護 and 有料, in that order."""
    return LocationDetail(
        location_id=context.location_id,
        name=context.name,
        categories=tuple(
            build_category_detail(context.bucket(c), standard_hours, period, context.bed_count)
            for c in Category
        ),
    )
