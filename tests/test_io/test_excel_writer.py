"""Tests for the Excel report writer."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from openpyxl import load_workbook

from fte_summary.agents.conductor import ReportConductor
from fte_summary.io.excel_writer import sheet_title, write_report_excel
from fte_summary.io.payload_reader import parse_payload
from fte_summary.models.report_config import ReportConfig


def _build(sample_payload):
    conductor = ReportConductor(
        ReportConfig(locations={"umebayashi": "梅林", "rokujyo": "六条", "ogakishi": "大垣"})
    )
    dataset = parse_payload(sample_payload)
    report = conductor.build_summary(dataset)
    details = conductor.build_details(dataset, now=datetime(2025, 9, 15))
    return report, details


class TestWriteReportExcel:
    def test_sheets(self, sample_payload, tmp_path: Path):
        report, details = _build(sample_payload)
        path = write_report_excel(tmp_path / "fte.xlsx", report, details)
        wb = load_workbook(path)
        assert wb.sheetnames == ["全体一覧", "梅林", "六条", "大垣"]

    def test_summary_rows(self, sample_payload, tmp_path: Path):
        report, details = _build(sample_payload)
        path = write_report_excel(tmp_path / "fte.xlsx", report, details)
        ws = load_workbook(path)["全体一覧"]
        assert ws.cell(row=5, column=1).value == "施設名"
        assert ws.cell(row=5, column=3).value == "看護"
        assert ws.cell(row=6, column=3).value == "人数"
        names = [ws.cell(row=r, column=1).value for r in (7, 8, 9)]
        assert names == ["梅林", "六条", "大垣"]
        assert ws.cell(row=7, column=2).value == "10"

    def test_location_sheet_rows(self, sample_payload, tmp_path: Path):
        report, details = _build(sample_payload)
        path = write_report_excel(tmp_path / "fte.xlsx", report, details)
        ws = load_workbook(path)["梅林"]
        values = [cell for row in ws.iter_rows(values_only=True) for cell in row if cell]
        assert "看護" in values
        assert "佐藤花子" in values
        assert "【入社】09/01" in values
        assert "【退職】09/01" in values
        assert "産休" in values
        assert "データがありません。" in values  # 有料 has no staff

    def test_summary_only(self, sample_payload, tmp_path: Path):
        report, _ = _build(sample_payload)
        path = write_report_excel(tmp_path / "summary.xlsx", report, summary_title="一覧")
        assert load_workbook(path).sheetnames == ["一覧"]


class TestSheetTitle:
    def test_invalid_characters_replaced(self):
        assert sheet_title("梅林[本館]/A:B*?\\") == "梅林_本館__A_B___"

    def test_truncated_to_31(self):
        assert len(sheet_title("あ" * 40)) == 31

    def test_written_with_unsafe_location_name(self, sample_payload, tmp_path: Path):
        conductor = ReportConductor(ReportConfig(locations={"umebayashi": "梅林/本館"}))
        result = conductor.run_full_pipeline(
            parse_payload(sample_payload), output_path=tmp_path / "fte.xlsx"
        )
        assert load_workbook(result["output_path"]).sheetnames == ["全体一覧", "梅林_本館"]
