"""Reader for the JSON dataset delivered by the FTE data feed."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from fte_summary.models.report import ReportPeriod
from fte_summary.models.report_config import ReportConfig
from fte_summary.models.staff import (
    Category,
    CategoryBucket,
    FacilityDataset,
    LocationContext,
    LocationId,
)
from fte_summary.utils.logger import get_logger

logger = get_logger(__name__)


class PayloadError(ValueError):
    """The raw dataset could not be read or does not have the expected shape."""


def parse_payload(data: Any) -> FacilityDataset:
    """Validate an already-decoded payload."""
    if not isinstance(data, dict):
        raise PayloadError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        return FacilityDataset.model_validate(data)
    except ValidationError as exc:
        raise PayloadError(f"Invalid FTE payload: {exc}") from exc


def load_payload(filepath: str | Path) -> FacilityDataset:
    """Read and validate a dataset JSON file."""
    filepath = Path(filepath)
    try:
        raw = filepath.read_text(encoding="utf-8")
    except OSError as exc:
        raise PayloadError(f"Cannot read {filepath}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PayloadError(f"{filepath} is not valid JSON: {exc}") from exc

    dataset = parse_payload(data)
    logger.info(
        "Loaded %s: %d locations, target month %r",
        filepath.name,
        len(dataset.facility),
        dataset.target_month,
    )
    return dataset


def to_location_contexts(
    dataset: FacilityDataset,
    config: ReportConfig | None = None,
) -> dict[str, LocationContext]:
    """Build a LocationContext for every location present in the dataset."""
    config = config or ReportConfig()
    contexts: dict[str, LocationContext] = {}
    for key, payload in dataset.facility.items():
        buckets = {}
        for category in Category:
            group = payload.group(category)
            if group is not None:
                buckets[category] = CategoryBucket(category=category, staffs=group.staffs)
        contexts[key] = LocationContext(
            location_id=LocationId(key),
            name=config.display_name(key),
            bed_count=payload.beds,
            buckets=buckets,
        )
    return contexts


def to_report_period(dataset: FacilityDataset) -> ReportPeriod:
    return ReportPeriod(period_start=dataset.period_start, period_end=dataset.period_end)
