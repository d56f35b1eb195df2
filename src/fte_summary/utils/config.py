"""Environment-driven defaults (.env aware)."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def default_output_dir() -> Path:
    """Directory used for exported workbooks when the caller gives none."""
    base = os.getenv("FTE_SUMMARY_OUTPUT_DIR", "").strip()
    out = Path(base) if base else Path(tempfile.gettempdir()) / "fte_summary_output"
    out.mkdir(parents=True, exist_ok=True)
    return out


def default_basic_hours() -> float | None:
    """Standard-hours override from FTE_SUMMARY_BASIC_HOURS, if set and numeric."""
    raw = os.getenv("FTE_SUMMARY_BASIC_HOURS", "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None
