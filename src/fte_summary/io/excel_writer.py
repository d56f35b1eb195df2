"""Excel writer for FTE reports."""

from __future__ import annotations

import re
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from fte_summary.core.formatting import format_decimal, summary_columns, summary_row
from fte_summary.models.report import CategoryDetail, FacilityReport, LocationDetail
from fte_summary.models.staff import Category

_CATEGORY_FILLS = {
    Category.NURSING: "FCE4EC",
    Category.CARE: "E2EFDA",
    Category.PAID_SERVICE: "FFF2CC",
}
_INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")
_DETAIL_HEADERS = [("氏名", 16), ("雇用形態", 10), ("労働時間", 10), ("常勤換算", 10), ("備考", 30)]

_header_font = Font(bold=True, size=11, name="Arial")
_title_font = Font(bold=True, size=14, name="Arial")
_center = Alignment(horizontal="center", vertical="center")
_left_wrap = Alignment(horizontal="left", vertical="top", wrap_text=True)
_border = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)
_header_fill = PatternFill("solid", fgColor="F2F2F2")
_terminated_fill = PatternFill("solid", fgColor="EDEDED")


def write_report_excel(
    filepath: str | Path,
    report: FacilityReport,
    details: list[LocationDetail] | None = None,
    summary_title: str = "全体一覧",
) -> Path:
    """Write the summary sheet and, if given, one sheet per location."""
    filepath = Path(filepath)
    wb = Workbook()

    _write_summary_sheet(wb.active, report, summary_title)
    for detail in details or []:
        _write_location_sheet(wb, detail)

    wb.save(str(filepath))
    return filepath


def _write_summary_sheet(ws, report: FacilityReport, title: str) -> None:
    ws.title = title

    ws.cell(row=1, column=1, value="常勤換算数").font = _title_font
    ws.cell(row=2, column=1, value=f"基準労働時間: {format_decimal(report.basic_hours)}")
    period = ""
    if report.period_start or report.period_end:
        start = report.period_start.strftime("%Y/%m/%d") if report.period_start else ""
        end = report.period_end.strftime("%Y/%m/%d") if report.period_end else ""
        period = f" ({start} - {end})"
    ws.cell(row=3, column=1, value=f"対象月度: {report.target_month}{period}")

    # Two header rows: group over column label; single columns span both
    group_row, label_row = 5, 6
    columns = list(summary_columns())
    col = 1
    while col <= len(columns):
        group, label = columns[col - 1]
        span = 1
        while col + span <= len(columns) and columns[col + span - 1][0] == group and label:
            span += 1
        fill = _header_fill
        for category in Category:
            if category.title_ja == group:
                fill = PatternFill("solid", fgColor=_CATEGORY_FILLS[category])

        cell = ws.cell(row=group_row, column=col, value=group)
        cell.font = _header_font
        cell.alignment = _center
        cell.fill = fill
        if not label:
            ws.merge_cells(start_row=group_row, start_column=col, end_row=label_row, end_column=col)
        else:
            if span > 1:
                ws.merge_cells(
                    start_row=group_row, start_column=col, end_row=group_row, end_column=col + span - 1
                )
            for offset in range(span):
                sub = ws.cell(row=label_row, column=col + offset, value=columns[col + offset - 1][1])
                sub.font = _header_font
                sub.alignment = _center
                sub.fill = _header_fill
                sub.border = _border
        for offset in range(span):
            ws.cell(row=group_row, column=col + offset).border = _border
        col += span

    for i, summary in enumerate(report.locations):
        row_num = label_row + 1 + i
        for c, value in enumerate(summary_row(summary), 1):
            cell = ws.cell(row=row_num, column=c, value=value)
            cell.alignment = _center if c > 1 else Alignment(horizontal="left")
            cell.border = _border

    ws.column_dimensions["A"].width = 16
    for c in range(2, len(columns) + 1):
        ws.column_dimensions[get_column_letter(c)].width = 9


def sheet_title(name: str) -> str:
    """Excel-safe sheet title: no []:*?/\\ and at most 31 characters."""
    return _INVALID_SHEET_CHARS.sub("_", name)[:31] or "_"


def _write_location_sheet(wb: Workbook, detail: LocationDetail) -> None:
    ws = wb.create_sheet(sheet_title(detail.name or detail.location_id))
    ws.cell(row=1, column=1, value=detail.name).font = _title_font

    row = 3
    for section in detail.categories:
        row = _write_category_block(ws, section, row) + 2

    for idx, (_, width) in enumerate(_DETAIL_HEADERS, 1):
        ws.column_dimensions[get_column_letter(idx)].width = width


def _write_category_block(ws, section: CategoryDetail, row: int) -> int:
    """Write one category block starting at ``row``; return the last row used."""
    fill = PatternFill("solid", fgColor=_CATEGORY_FILLS[section.category])
    title = ws.cell(row=row, column=1, value=section.category.title_ja)
    title.font = _header_font
    title.fill = fill

    if section.is_empty:
        ws.cell(row=row + 1, column=1, value="データがありません。")
        return row + 1

    stats = section.stats
    cards = [
        ("社員", str(stats.count)),
        ("正社員", str(stats.full_time_count)),
        ("パート", str(stats.part_time_count)),
        ("労働時間", format_decimal(stats.total_working_hours)),
        ("常勤換算", format_decimal(stats.total_equivalent)),
    ]
    row += 1
    for idx, (label, value) in enumerate(cards, 1):
        ws.cell(row=row, column=idx, value=f"{label}: {value}")

    row += 1
    for idx, (label, _) in enumerate(_DETAIL_HEADERS, 1):
        cell = ws.cell(row=row, column=idx, value=label)
        cell.font = _header_font
        cell.fill = fill
        cell.alignment = _center
        cell.border = _border

    for staff in section.rows:
        row += 1
        values = [
            staff.name,
            staff.employment_type,
            format_decimal(staff.working_hours),
            format_decimal(staff.equivalent),
            staff.remark_text,
        ]
        for idx, value in enumerate(values, 1):
            cell = ws.cell(row=row, column=idx, value=value)
            cell.border = _border
            cell.alignment = _left_wrap if idx in (1, 5) else _center
            if staff.terminated:
                cell.fill = _terminated_fill
    return row
