"""Staff roster data models."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, NewType

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fte_summary.core.temporal import DateNotation, parse_date

LocationId = NewType("LocationId", str)


class Category(str, Enum):
    """Care-service line within a location."""

    NURSING = "kango"
    CARE = "kaigo"
    PAID_SERVICE = "yuryo"

    @property
    def title_ja(self) -> str:
        return _CATEGORY_TITLES[self]


_CATEGORY_TITLES = {
    Category.NURSING: "看護",
    Category.CARE: "介護",
    Category.PAID_SERVICE: "有料",
}


class EmploymentType(str, Enum):
    """Employment labels the aggregator counts (exact match)."""

    FULL_TIME = "正社員"
    PART_TIME = "パート"
    NIGHT_SHIFT = "宿直"
    CULINARY = "調理"
    CLEANING = "清掃"


class StaffRecord(BaseModel):
    """One employee's entry within a category/location for the period."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    employment_type: str = Field(default="", description="e.g. 正社員, パート, 宿直")
    working_hours: float = Field(default=0.0, ge=0, description="Hours worked in the period")
    equivalent_ratio: float | None = Field(
        default=None, ge=0, description="Explicit FTE contribution; derived from hours if absent"
    )
    start_date: date | None = Field(default=None, description="MM/dd/yyyy")
    termination_date: date | None = Field(default=None, description="MM/dd/yyyy")
    leave_types: str | None = Field(default=None, description="Leave-of-absence descriptor")
    termination_listed: bool = Field(
        default=False, description="Roster carried a termination date, parseable or not"
    )

    @model_validator(mode="before")
    @classmethod
    def _note_termination(cls, data: Any) -> Any:
        if isinstance(data, dict) and "termination_listed" not in data:
            raw = data.get("termination_date")
            data = {**data, "termination_listed": raw is not None and str(raw) != ""}
        return data

    @field_validator("name", "employment_type", mode="before")
    @classmethod
    def _text_or_blank(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("working_hours", mode="before")
    @classmethod
    def _hours_default_zero(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0.0
        return value

    @field_validator("equivalent_ratio", mode="before")
    @classmethod
    def _blank_ratio_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("start_date", "termination_date", mode="before")
    @classmethod
    def _parse_month_day_year(cls, value: Any) -> date | None:
        return parse_date(value, DateNotation.MONTH_DAY_YEAR)

    @field_validator("leave_types", mode="before")
    @classmethod
    def _leave_as_text(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    def equivalent(self, standard_hours: float) -> float:
        """FTE contribution of this record; 0 when ``standard_hours <= 0``."""
        if standard_hours <= 0:
            return 0.0
        if self.equivalent_ratio is not None:
            return self.equivalent_ratio
        return self.working_hours / standard_hours

    @property
    def is_terminated(self) -> bool:
        """Whether the row is shaded as a leaver; a malformed date still counts."""
        return self.termination_listed or self.termination_date is not None

    @property
    def leave_note(self) -> str | None:
        """Leave descriptor if it carries any non-whitespace text."""
        if self.leave_types is None or not self.leave_types.strip():
            return None
        return self.leave_types


class CategoryBucket(BaseModel):
    """Staff records for one (location, category) pair."""

    model_config = ConfigDict(frozen=True)

    category: Category
    staffs: tuple[StaffRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.staffs)


class LocationContext(BaseModel):
    """One physical facility and its three category buckets."""

    model_config = ConfigDict(frozen=True)

    location_id: LocationId
    name: str
    bed_count: float | None = None
    buckets: dict[Category, CategoryBucket] = Field(default_factory=dict)

    def bucket(self, category: Category) -> CategoryBucket:
        """Bucket for ``category``; an empty bucket if the dataset had none."""
        found = self.buckets.get(category)
        if found is None:
            return CategoryBucket(category=category)
        return found


# ---------------------------------------------------------------------------
# Raw payload shape
# ---------------------------------------------------------------------------


class StaffGroup(BaseModel):
    """``{"staffs": [...]}`` entry under a category key."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    staffs: tuple[StaffRecord, ...] = ()

    @field_validator("staffs", mode="before")
    @classmethod
    def _null_staffs_empty(cls, value: Any) -> Any:
        return () if value is None else value


class LocationPayload(BaseModel):
    """Per-location entry of the ``facility`` map."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    kango: StaffGroup | None = None
    kaigo: StaffGroup | None = None
    yuryo: StaffGroup | None = None
    beds: float | None = Field(default=None, description="Bed capacity (床数)")

    @field_validator("beds", mode="before")
    @classmethod
    def _blank_beds_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def group(self, category: Category) -> StaffGroup | None:
        return getattr(self, category.value)


class FacilityDataset(BaseModel):
    """Raw dataset for one reporting period, as delivered by the data feed."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    period_start: date | None = Field(default=None, description="yyyy/MM/dd")
    period_end: date | None = Field(default=None, description="yyyy/MM/dd")
    basic_hours: float = Field(default=0.0, description="Standard hours for one FTE")
    target_month: str = ""
    facility: dict[str, LocationPayload] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _details_alias(cls, data: Any) -> Any:
        if isinstance(data, dict) and "facility" not in data and "details" in data:
            data = {**data, "facility": data["details"]}
        return data

    @field_validator("period_start", "period_end", mode="before")
    @classmethod
    def _parse_year_month_day(cls, value: Any) -> date | None:
        return parse_date(value, DateNotation.YEAR_MONTH_DAY)

    @field_validator("basic_hours", mode="before")
    @classmethod
    def _blank_hours_zero(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0.0
        return value

    @field_validator("target_month", mode="before")
    @classmethod
    def _month_as_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("facility", mode="before")
    @classmethod
    def _null_facility_empty(cls, value: Any) -> Any:
        return {} if value is None else value
