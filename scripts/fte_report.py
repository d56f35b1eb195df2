#!/usr/bin/env python3
"""
常勤換算数 集計スクリプト

FTEデータ（JSON）または名簿（CSV / Excel）を読み込み、全体一覧を表示して
Excelに出力します。

使い方:
    .venv/bin/python scripts/fte_report.py --input fte.json
    .venv/bin/python scripts/fte_report.py --input fte.json --output fte_result.xlsx
    .venv/bin/python scripts/fte_report.py --roster roster.csv --basic-hours 160 --period-start 2025/09/01
"""

from __future__ import annotations

import argparse
import sys

from fte_summary.agents.conductor import ReportConductor
from fte_summary.core.formatting import summary_frame
from fte_summary.io.payload_reader import PayloadError, load_payload
from fte_summary.io.roster_reader import read_roster
from fte_summary.models.report_config import ReportConfig

BOLD = "\033[1m"
GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


def main() -> None:
    parser = argparse.ArgumentParser(
        description="常勤換算数 集計",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", "-i", help="FTEデータ（JSON）のパス")
    source.add_argument("--roster", "-r", help="名簿（CSV / Excel）のパス")
    parser.add_argument("--output", "-o", default=None, help="出力Excelファイルのパス")
    parser.add_argument("--basic-hours", type=float, default=None, help="基準労働時間")
    parser.add_argument("--period-start", default=None, help="期間開始 (yyyy/MM/dd)")
    parser.add_argument("--period-end", default=None, help="期間終了 (yyyy/MM/dd)")
    parser.add_argument("--target-month", default="", help="対象月度")
    args = parser.parse_args()

    try:
        if args.input:
            dataset = load_payload(args.input)
        else:
            dataset = read_roster(
                args.roster,
                basic_hours=args.basic_hours or 0.0,
                period_start=args.period_start,
                period_end=args.period_end,
                target_month=args.target_month,
            )
    except PayloadError as exc:
        print(f"  {RED}✗{RESET} {exc}")
        sys.exit(1)

    conductor = ReportConductor(ReportConfig(basic_hours=args.basic_hours))
    result = conductor.run_full_pipeline(dataset, output_path=args.output)

    report = result["report"]
    print(f"\n{BOLD}常勤換算数 {report.target_month}{RESET}  基準労働時間: {report.basic_hours}\n")
    print(summary_frame(report).to_string(index=False))
    if "output_path" in result:
        print(f"\n  {GREEN}✓{RESET} Excel出力: {result['output_path']}")


if __name__ == "__main__":
    main()
