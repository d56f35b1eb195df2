"""Common test fixtures."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from fte_summary.models.report import ReportPeriod
from fte_summary.models.staff import Category, CategoryBucket, StaffRecord


@pytest.fixture
def september_period() -> ReportPeriod:
    """Period starting 2025/09/01, observed mid-month."""
    return ReportPeriod(
        period_start=date(2025, 9, 1),
        period_end=date(2025, 9, 30),
        now=datetime(2025, 9, 15, 10, 30),
    )


@pytest.fixture
def nursing_bucket() -> CategoryBucket:
    """2 full-time (160h) + 1 part-time (80h)."""
    return CategoryBucket(
        category=Category.NURSING,
        staffs=[
            StaffRecord(name="佐藤花子", employment_type="正社員", working_hours=160),
            StaffRecord(name="鈴木一郎", employment_type="正社員", working_hours=160),
            StaffRecord(name="高橋美咲", employment_type="パート", working_hours=80),
        ],
    )


@pytest.fixture
def paid_service_bucket() -> CategoryBucket:
    return CategoryBucket(
        category=Category.PAID_SERVICE,
        staffs=[
            StaffRecord(name="田中健", employment_type="正社員", working_hours=160),
            StaffRecord(name="伊藤誠", employment_type="宿直", working_hours=40),
            StaffRecord(name="渡辺由紀", employment_type="調理", working_hours=60),
            StaffRecord(name="山本聡", employment_type="清掃", working_hours=20),
            StaffRecord(name="中村園美", employment_type="パート", working_hours=40),
        ],
    )


@pytest.fixture
def sample_payload() -> dict:
    """Raw dataset as delivered by the data feed."""
    return {
        "period_start": "2025/09/01",
        "period_end": "2025/09/30",
        "basic_hours": 160,
        "target_month": "2025年9月度",
        "facility": {
            "umebayashi": {
                "beds": 10,
                "kango": {
                    "staffs": [
                        {
                            "name": "佐藤花子",
                            "employment_type": "正社員",
                            "working_hours": 160,
                            "start_date": "09/01/2025",
                        },
                        {
                            "name": "鈴木一郎",
                            "employment_type": "正社員",
                            "working_hours": 160,
                            "termination_date": "09/01/2025",
                        },
                        {
                            "name": "高橋美咲",
                            "employment_type": "パート",
                            "working_hours": 80,
                            "leave_types": "産休",
                        },
                    ]
                },
                "kaigo": {
                    "staffs": [
                        {"name": "小林大輔", "employment_type": "正社員", "working_hours": 160},
                        {"name": "加藤恵", "employment_type": "パート", "working_hours": 120},
                    ]
                },
            },
            "rokujyo": {
                "yuryo": {
                    "staffs": [
                        {"name": "吉田翔", "employment_type": "宿直", "working_hours": 40},
                        {"name": "山田優", "employment_type": "調理", "working_hours": None},
                    ]
                },
            },
        },
    }
