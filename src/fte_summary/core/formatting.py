"""Display formatting. All rounding in the project happens here."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import pandas as pd

from fte_summary.models.report import FacilityReport, LocationDetail, LocationSummary
from fte_summary.models.staff import Category

PLACEHOLDER = "―"

# Summary table layout: (group header, column header)
_CATEGORY_COLUMNS = [
    ("人数", "count"),
    ("正社員", "full_time_count"),
    ("パート", "part_time_count"),
]
_PAID_SERVICE_COLUMNS = [
    ("宿直", "night_shift_count"),
    ("調理", "culinary_count"),
    ("清掃", "cleaning_count"),
]
_TOTAL_GROUP = "常勤総合"


def _round_half_up(value: float, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def format_decimal(value: float | None) -> str:
    """Two decimal places, e.g. ``2.50``."""
    if value is None:
        return ""
    return str(_round_half_up(value, 2))


def format_count(value: float | None) -> str:
    """Counts and bed numbers; zero or absent shows the placeholder."""
    if value is None or value == 0:
        return PLACEHOLDER
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_equivalent(value: float | None) -> str:
    if value is None or value <= 0:
        return PLACEHOLDER
    return format_decimal(value)


def format_percentage(value: float | None) -> str:
    """Whole percent, e.g. ``25%``; absent shows the placeholder."""
    if value is None:
        return PLACEHOLDER
    return f"{_round_half_up(value, 0):.0f}%"


def summary_row(summary: LocationSummary) -> list[str]:
    row = [summary.name, format_count(summary.bed_count)]
    for category in Category:
        stats = summary.category(category)
        columns = list(_CATEGORY_COLUMNS)
        if category == Category.PAID_SERVICE:
            columns += _PAID_SERVICE_COLUMNS
        row += [format_count(getattr(stats, field)) for _, field in columns]
        row += [format_equivalent(stats.total_equivalent), format_percentage(stats.bed_percentage)]
    row += [
        format_percentage(summary.nursing_care_percentage),
        format_percentage(summary.all_categories_percentage),
        format_percentage(summary.overall_bed_percentage),
    ]
    return row


def summary_columns() -> pd.MultiIndex:
    """Two-level header: group (施設名, 看護, ...) over column label."""
    tuples = [("施設名", ""), ("床数", "")]
    for category in Category:
        columns = list(_CATEGORY_COLUMNS)
        if category == Category.PAID_SERVICE:
            columns += _PAID_SERVICE_COLUMNS
        tuples += [(category.title_ja, label) for label, _ in columns]
        tuples += [(category.title_ja, "常勤換算"), (category.title_ja, "常勤(%)")]
    tuples += [
        (_TOTAL_GROUP, "看護+介護"),
        (_TOTAL_GROUP, "看護+介護+有料"),
        (_TOTAL_GROUP, "総合"),
    ]
    return pd.MultiIndex.from_tuples(tuples)


def summary_frame(report: FacilityReport) -> pd.DataFrame:
    """Display-ready summary table, one row per location."""
    return pd.DataFrame(
        [summary_row(s) for s in report.locations],
        columns=summary_columns(),
    )


def detail_frame(detail: LocationDetail, category: Category) -> pd.DataFrame:
    """Display-ready staff table for one category of one location."""
    section = next(c for c in detail.categories if c.category == category)
    records = [
        {
            "氏名": row.name,
            "雇用形態": row.employment_type,
            "労働時間": format_decimal(row.working_hours),
            "常勤換算": format_decimal(row.equivalent),
            "備考": row.remark_text,
        }
        for row in section.rows
    ]
    return pd.DataFrame(records, columns=["氏名", "雇用形態", "労働時間", "常勤換算", "備考"])
