"""Location and facility rollups."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date

from fte_summary.core.aggregation import aggregate_category, bed_percentage
from fte_summary.models.report import AggregateStats, FacilityReport, LocationSummary
from fte_summary.models.staff import Category, LocationContext, LocationId
from fte_summary.utils.logger import get_logger

logger = get_logger(__name__)


def combined_percentage(stats: Iterable[AggregateStats]) -> float | None:
    """Sum of bed percentages (absent counts as 0); None if the sum is 0."""
    total = sum(s.bed_percentage or 0.0 for s in stats)
    return total if total > 0 else None


def summarize_location(
    stats: Mapping[Category, AggregateStats],
    location_id: LocationId,
    name: str,
    bed_count: float | None = None,
) -> LocationSummary:
    """Combine one location's three AggregateStats into a LocationSummary."""
    full = {
        category: stats.get(category) or AggregateStats(category=category)
        for category in Category
    }
    equivalent = sum(s.total_equivalent for s in full.values())

    return LocationSummary(
        location_id=location_id,
        name=name,
        bed_count=bed_count,
        stats=full,
        total_equivalent=equivalent,
        overall_bed_percentage=bed_percentage(equivalent, bed_count),
        nursing_care_percentage=combined_percentage(
            [full[Category.NURSING], full[Category.CARE]]
        ),
        all_categories_percentage=combined_percentage(full.values()),
    )


def aggregate_location(context: LocationContext, standard_hours: float) -> LocationSummary:
    """Run the category aggregator for each category, then roll up."""
    stats = {
        category: aggregate_category(context.bucket(category), standard_hours, context.bed_count)
        for category in Category
    }
    return summarize_location(stats, context.location_id, context.name, context.bed_count)


def build_facility_report(
    contexts: Mapping[str, LocationContext],
    location_order: Iterable[str],
    standard_hours: float,
    names: Mapping[str, str] | None = None,
    target_month: str = "",
    period_start: date | None = None,
    period_end: date | None = None,
) -> FacilityReport:
    """Summaries for every location in ``location_order``, in that order.

    Locations missing from ``contexts`` still appear, with all-zero stats.
    """
    names = names or {}
    summaries: list[LocationSummary] = []
    for key in location_order:
        location_id = LocationId(key)
        context = contexts.get(key)
        if context is None:
            logger.debug("Location %s not in dataset; reporting empty stats", key)
            context = LocationContext(location_id=location_id, name=names.get(key, key))
        summaries.append(aggregate_location(context, standard_hours))

    return FacilityReport(
        locations=tuple(summaries),
        basic_hours=standard_hours,
        target_month=target_month,
        period_start=period_start,
        period_end=period_end,
    )
