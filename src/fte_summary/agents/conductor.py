"""ReportConductor - orchestrates dataset -> summary -> details -> Excel."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

from fte_summary.core.detail import build_location_detail
from fte_summary.core.rollup import build_facility_report
from fte_summary.io.excel_writer import write_report_excel
from fte_summary.io.payload_reader import (
    PayloadError,
    load_payload,
    parse_payload,
    to_location_contexts,
)
from fte_summary.models.report import FacilityReport, LocationDetail, ReportPeriod
from fte_summary.models.report_config import ReportConfig
from fte_summary.models.staff import FacilityDataset, LocationContext, LocationId
from fte_summary.utils.logger import get_logger

logger = get_logger(__name__)


class ConductorAction(str, Enum):
    """Requests ReportConductor.process accepts."""

    RUN_FULL_PIPELINE = "run_full_pipeline"
    BUILD_SUMMARY = "build_summary"


class ReportConductor:
    """Runs the FTE report pipeline for one dataset."""

    def __init__(self, config: ReportConfig | None = None) -> None:
        self._config = config or ReportConfig()

    @property
    def config(self) -> ReportConfig:
        return self._config

    def standard_hours(self, dataset: FacilityDataset) -> float:
        return self._config.standard_hours_for(dataset.basic_hours)

    def build_summary(self, dataset: FacilityDataset) -> FacilityReport:
        contexts = to_location_contexts(dataset, self._config)
        return build_facility_report(
            contexts,
            self._config.location_order,
            self.standard_hours(dataset),
            names=self._config.locations,
            target_month=dataset.target_month,
            period_start=dataset.period_start,
            period_end=dataset.period_end,
        )

    def build_details(
        self,
        dataset: FacilityDataset,
        now: datetime | None = None,
    ) -> list[LocationDetail]:
        """Staff tables for every configured location, in configured order."""
        contexts = to_location_contexts(dataset, self._config)
        period = ReportPeriod(
            period_start=dataset.period_start,
            period_end=dataset.period_end,
            now=now or datetime.now(),
        )
        standard_hours = self.standard_hours(dataset)
        details = []
        for key in self._config.location_order:
            context = contexts.get(key) or LocationContext(
                location_id=LocationId(key), name=self._config.display_name(key)
            )
            details.append(build_location_detail(context, standard_hours, period))
        return details

    def run_full_pipeline(
        self,
        dataset: FacilityDataset,
        output_path: str | Path | None = None,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """Summary, per-location details and, if requested, an Excel export."""
        report = self.build_summary(dataset)
        details = self.build_details(dataset, now=now)
        result: dict[str, Any] = {"report": report, "details": details}

        if output_path:
            filepath = write_report_excel(
                output_path, report, details, summary_title=self._config.summary_title
            )
            result["output_path"] = str(filepath)
            logger.info("Wrote FTE report for %s to %s", dataset.target_month, filepath)

        return result

    def process(self, action: ConductorAction | str, payload: dict[str, Any]) -> dict[str, Any]:
        """Run ``action`` on the dataset named in ``payload``.

        The payload carries either ``dataset`` (a FacilityDataset or its raw
        mapping) or ``input_path`` (a JSON file). ``run_full_pipeline`` also
        reads ``output_path`` and ``now``.

        Raises:
            ValueError: If action is not supported.
            PayloadError: If the dataset is missing or malformed.
        """
        try:
            action = ConductorAction(action)
        except ValueError:
            raise ValueError(f"ReportConductor does not support action '{action}'") from None

        dataset = self._dataset_from(payload)
        if action is ConductorAction.BUILD_SUMMARY:
            return {"report": self.build_summary(dataset)}
        return self.run_full_pipeline(
            dataset=dataset,
            output_path=payload.get("output_path"),
            now=payload.get("now"),
        )

    @staticmethod
    def _dataset_from(payload: dict[str, Any]) -> FacilityDataset:
        if "dataset" in payload:
            dataset = payload["dataset"]
            return dataset if isinstance(dataset, FacilityDataset) else parse_payload(dataset)
        if "input_path" in payload:
            return load_payload(payload["input_path"])
        raise PayloadError("Payload needs either 'dataset' or 'input_path'")
