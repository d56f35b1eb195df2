"""Flat roster reader (CSV or Excel).

One row per staff member. Required columns: ``location``, ``category``,
``name``. Optional: ``employment_type``, ``working_hours``,
``equivalent_ratio``, ``start_date``, ``termination_date``, ``leave_types``,
``beds``. Category accepts either the key (``kango``) or the Japanese title
(``看護``).
"""

from __future__ import annotations

import zipfile
from datetime import datetime
from pathlib import Path
from typing import Any

import pandas as pd

from fte_summary.io.payload_reader import PayloadError, parse_payload
from fte_summary.models.staff import Category, FacilityDataset
from fte_summary.utils.logger import get_logger

logger = get_logger(__name__)

_REQUIRED_COLUMNS = ("location", "category", "name")
_STAFF_COLUMNS = (
    "name",
    "employment_type",
    "working_hours",
    "equivalent_ratio",
    "start_date",
    "termination_date",
    "leave_types",
)
_CATEGORY_LOOKUP = {c.value: c for c in Category} | {c.title_ja: c for c in Category}


def read_roster(
    filepath: str | Path,
    basic_hours: float = 0.0,
    period_start: str | None = None,
    period_end: str | None = None,
    target_month: str = "",
    sheet_name: str | int = 0,
) -> FacilityDataset:
    """Read a roster file into a FacilityDataset.

    Period dates use the ``yyyy/MM/dd`` notation; staff dates ``MM/dd/yyyy``.
    """
    filepath = Path(filepath)
    try:
        if filepath.suffix.lower() in (".xlsx", ".xls"):
            # Keep native cell types so date cells arrive as datetimes
            df = pd.read_excel(filepath, sheet_name=sheet_name)
        else:
            df = pd.read_csv(filepath, dtype=str, encoding="utf-8-sig")
    except (OSError, ValueError, zipfile.BadZipFile) as exc:
        raise PayloadError(f"Cannot read roster {filepath}: {exc}") from exc

    return roster_frame_to_dataset(
        df,
        basic_hours=basic_hours,
        period_start=period_start,
        period_end=period_end,
        target_month=target_month,
    )


def roster_frame_to_dataset(
    df: pd.DataFrame,
    basic_hours: float = 0.0,
    period_start: str | None = None,
    period_end: str | None = None,
    target_month: str = "",
) -> FacilityDataset:
    df = df.rename(columns=lambda c: str(c).strip())
    missing = [c for c in _REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise PayloadError(f"Roster is missing columns: {', '.join(missing)}")

    df = df.astype(object).where(pd.notna(df), None)

    facility: dict[str, dict[str, Any]] = {}
    for row_idx, row in df.iterrows():
        location = _clean(row["location"])
        if location is None:
            continue
        category = _CATEGORY_LOOKUP.get(_clean(row["category"]) or "")
        if category is None:
            raise PayloadError(f"Row {row_idx}: unknown category {row['category']!r}")

        entry = facility.setdefault(location, {})
        if "beds" in df.columns and entry.get("beds") is None:
            entry["beds"] = _clean(row["beds"])

        staff = {col: _clean(row[col]) for col in _STAFF_COLUMNS if col in df.columns}
        entry.setdefault(category.value, {"staffs": []})["staffs"].append(staff)

    logger.info("Roster parsed: %d rows, %d locations", len(df), len(facility))
    return parse_payload(
        {
            "period_start": period_start,
            "period_end": period_end,
            "basic_hours": basic_hours,
            "target_month": target_month,
            "facility": facility,
        }
    )


def _clean(value: Any) -> Any:
    """Trimmed text, or the datetime itself for native date cells."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    return text or None
