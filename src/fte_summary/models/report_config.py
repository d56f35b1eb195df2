"""Report configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_LOCATIONS: dict[str, str] = {
    "umebayashi": "梅林",
    "rokujyo": "六条",
    "ogakishi": "大垣",
    "kanezawa": "金沢",
    "nigata": "新潟",
    "toyama": "富山",
    "kusatsu": "草津",
    "hikone": "彦根",
    "moriokanishi": "盛岡西(滝沢)",
    "morioka": "盛岡",
    "tsushinmachi": "津新町",
    "toyamaokuda": "富山奥田",
    "fukushima": "福島",
}


class ReportConfig(BaseModel):
    """Which locations to report on, and how."""

    locations: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_LOCATIONS),
        description="Ordered location id -> display name",
    )
    basic_hours: float | None = Field(
        default=None, description="Overrides the dataset's basic_hours when set"
    )
    summary_title: str = "全体一覧"

    @property
    def location_order(self) -> list[str]:
        return list(self.locations.keys())

    def display_name(self, location_id: str) -> str:
        return self.locations.get(location_id, location_id)

    def standard_hours_for(self, dataset_hours: float) -> float:
        return self.basic_hours if self.basic_hours is not None else dataset_hours

