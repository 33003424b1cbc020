from __future__ import annotations

import time
from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_millis() -> int:
    return int(time.time() * 1000)
