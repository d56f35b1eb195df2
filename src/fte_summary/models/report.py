"""Report output models.

Percentages are ``None`` when absent. Absent and zero are distinct values and
must stay distinct until the presentation layer decides how to render them.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from fte_summary.models.staff import Category, LocationId

REMARK_SEPARATOR = "\n"


class ReportPeriod(BaseModel):
    """Anchor for date-sensitive remarks."""

    model_config = ConfigDict(frozen=True)

    period_start: date | None = None
    period_end: date | None = None
    now: datetime = Field(
        default_factory=datetime.now, description="Moment used for future-date detection"
    )


class AggregateStats(BaseModel):
    """Statistics for one category at one location (full precision)."""

    model_config = ConfigDict(frozen=True)

    category: Category
    count: int = 0
    full_time_count: int = 0
    part_time_count: int = 0
    night_shift_count: int = 0
    culinary_count: int = 0
    cleaning_count: int = 0
    total_working_hours: float = 0.0
    total_equivalent: float = 0.0
    bed_percentage: float | None = None


class LocationSummary(BaseModel):
    """One location's category stats plus combined percentages."""

    model_config = ConfigDict(frozen=True)

    location_id: LocationId
    name: str
    bed_count: float | None = None
    stats: dict[Category, AggregateStats]
    total_equivalent: float = 0.0
    overall_bed_percentage: float | None = None
    nursing_care_percentage: float | None = None
    all_categories_percentage: float | None = None

    def category(self, category: Category) -> AggregateStats:
        return self.stats[category]


class FacilityReport(BaseModel):
    """Ordered per-location summaries for one reporting period."""

    model_config = ConfigDict(frozen=True)

    locations: tuple[LocationSummary, ...] = ()
    basic_hours: float = 0.0
    target_month: str = ""
    period_start: date | None = None
    period_end: date | None = None

    def get(self, location_id: str) -> LocationSummary | None:
        for summary in self.locations:
            if summary.location_id == location_id:
                return summary
        return None


class StaffDetailRow(BaseModel):
    """One row of a category staff table."""

    model_config = ConfigDict(frozen=True)

    name: str
    employment_type: str
    working_hours: float
    equivalent: float | None = Field(
        default=None, description="None when standard hours is not positive"
    )
    remarks: tuple[str, ...] = ()
    terminated: bool = False

    @property
    def remark_text(self) -> str:
        return REMARK_SEPARATOR.join(self.remarks)


class CategoryDetail(BaseModel):
    """Staff table and headline stats for one category at one location."""

    model_config = ConfigDict(frozen=True)

    stats: AggregateStats
    rows: tuple[StaffDetailRow, ...] = ()

    @property
    def category(self) -> Category:
        return self.stats.category

    @property
    def is_empty(self) -> bool:
        return not self.rows


class LocationDetail(BaseModel):
    """Per-category staff tables for one location."""

    model_config = ConfigDict(frozen=True)

    location_id: LocationId
    name: str
    categories: tuple[CategoryDetail, ...] = ()
