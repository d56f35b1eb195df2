"""FTE-summary MCP Server.

Exposes the FTE report engine as MCP tools so that AI agents can load a
dataset and query the facility summary and staff tables.

Usage:
    uv run python -m fte_summary.mcp            # stdio mode
    uv run fastmcp run fte_summary/mcp/server.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from fte_summary.agents.conductor import ReportConductor
from fte_summary.core.formatting import (
    format_decimal,
    format_percentage,
    summary_frame,
)
from fte_summary.io.excel_writer import write_report_excel
from fte_summary.io.payload_reader import PayloadError, load_payload
from fte_summary.models.report_config import ReportConfig
from fte_summary.models.staff import FacilityDataset
from fte_summary.utils.config import default_basic_hours, default_output_dir

# ---------------------------------------------------------------------------
# Server instance
# ---------------------------------------------------------------------------
mcp = FastMCP(
    name="fte-summary",
    instructions="""
    常勤換算数（FTE）集計ツールです。
    施設ごと・職種（看護/介護/有料）ごとの人数、常勤換算、床数比率を集計します。

    基本フロー:
    1. load_dataset → 対象月度のデータを読み込み
    2. get_summary → 全体一覧
    3. get_location_detail → 施設別スタッフ一覧（備考付き）
    4. export_excel → Excel出力
    """,
)

# ---------------------------------------------------------------------------
# In-memory dataset slot (per server session)
# ---------------------------------------------------------------------------
_session_state: dict[str, Any] = {}


def _conductor() -> ReportConductor:
    return ReportConductor(_session_state.get("config") or ReportConfig())


def _dataset() -> FacilityDataset | None:
    return _session_state.get("dataset")


_NO_DATASET = {"status": "error", "message": "データが読み込まれていません。load_dataset を先に実行してください。"}


# ---------------------------------------------------------------------------
# Tool 1: load_dataset
# ---------------------------------------------------------------------------
@mcp.tool
def load_dataset(
    input_path: str,
    basic_hours: float | None = None,
    locations: dict[str, str] | None = None,
) -> dict[str, Any]:
    """FTEデータ（JSON）を読み込みます。

    Args:
        input_path: データファイルのパス
        basic_hours: 基準労働時間の上書き（省略時はデータの値）
        locations: 施設ID→施設名の対応（省略時は既定の施設一覧）

    Returns:
        読み込み結果のサマリー
    """
    if not Path(input_path).exists():
        return {"status": "error", "message": f"ファイルが見つかりません: {input_path}"}
    try:
        dataset = load_payload(input_path)
    except PayloadError as exc:
        return {"status": "error", "message": str(exc)}

    if basic_hours is None:
        basic_hours = default_basic_hours()
    config = ReportConfig(basic_hours=basic_hours)
    if locations:
        config = ReportConfig(locations=locations, basic_hours=basic_hours)

    _session_state["dataset"] = dataset
    _session_state["config"] = config

    return {
        "status": "ok",
        "target_month": dataset.target_month,
        "basic_hours": config.standard_hours_for(dataset.basic_hours),
        "location_count": len(dataset.facility),
        "locations": list(dataset.facility.keys()),
    }


# ---------------------------------------------------------------------------
# Tool 2: list_locations
# ---------------------------------------------------------------------------
@mcp.tool
def list_locations() -> dict[str, Any]:
    """集計対象の施設一覧を返します。"""
    config = _session_state.get("config") or ReportConfig()
    dataset = _dataset()
    present = set(dataset.facility.keys()) if dataset else set()
    return {
        "locations": [
            {"id": key, "name": name, "has_data": key in present}
            for key, name in config.locations.items()
        ],
        "count": len(config.locations),
    }


# ---------------------------------------------------------------------------
# Tool 3: get_summary
# ---------------------------------------------------------------------------
@mcp.tool
def get_summary() -> dict[str, Any]:
    """全体一覧（施設ごとの常勤換算・床数比率）を返します。"""
    dataset = _dataset()
    if dataset is None:
        return _NO_DATASET

    report = _conductor().build_summary(dataset)
    frame = summary_frame(report)
    return {
        "status": "ok",
        "target_month": report.target_month,
        "basic_hours": report.basic_hours,
        "columns": [" ".join(part for part in col if part) for col in frame.columns],
        "rows": frame.values.tolist(),
        "report": report.model_dump(mode="json"),
    }


# ---------------------------------------------------------------------------
# Tool 4: get_location_detail
# ---------------------------------------------------------------------------
@mcp.tool
def get_location_detail(location_id: str) -> dict[str, Any]:
    """施設別のスタッフ一覧（労働時間・常勤換算・備考）を返します。

    Args:
        location_id: 施設ID（例: "umebayashi"）
    """
    dataset = _dataset()
    if dataset is None:
        return _NO_DATASET

    conductor = _conductor()
    if location_id not in conductor.config.locations:
        return {"status": "error", "message": f"不明な施設ID: {location_id}"}

    details = conductor.build_details(dataset)
    detail = next(d for d in details if d.location_id == location_id)

    categories = []
    for section in detail.categories:
        stats = section.stats
        categories.append(
            {
                "category": section.category.value,
                "title": section.category.title_ja,
                "count": stats.count,
                "full_time": stats.full_time_count,
                "part_time": stats.part_time_count,
                "working_hours": format_decimal(stats.total_working_hours),
                "equivalent": format_decimal(stats.total_equivalent),
                "bed_percentage": format_percentage(stats.bed_percentage),
                "staffs": [
                    {
                        "name": row.name,
                        "employment_type": row.employment_type,
                        "working_hours": format_decimal(row.working_hours),
                        "equivalent": format_decimal(row.equivalent),
                        "remarks": row.remark_text,
                        "terminated": row.terminated,
                    }
                    for row in section.rows
                ],
            }
        )

    return {
        "status": "ok",
        "location_id": detail.location_id,
        "name": detail.name,
        "categories": categories,
    }


# ---------------------------------------------------------------------------
# Tool 5: export_excel
# ---------------------------------------------------------------------------
@mcp.tool
def export_excel(output_path: str | None = None) -> dict[str, Any]:
    """全体一覧と施設別シートを含むExcelを出力します。

    Args:
        output_path: 出力先（省略時は出力ディレクトリに自動命名）
    """
    dataset = _dataset()
    if dataset is None:
        return _NO_DATASET

    conductor = _conductor()
    if output_path is None:
        stem = dataset.target_month.replace("/", "-") or "report"
        output_path = str(default_output_dir() / f"fte_{stem}.xlsx")

    report = conductor.build_summary(dataset)
    details = conductor.build_details(dataset)
    filepath = write_report_excel(
        output_path, report, details, summary_title=conductor.config.summary_title
    )
    return {"status": "ok", "output_path": str(filepath), "sheet_count": 1 + len(details)}


if __name__ == "__main__":
    mcp.run()
