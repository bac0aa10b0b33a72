"""Named durations, in seconds, for token expirations."""

from __future__ import annotations

MINUTES_5 = 300  # 5 * 60
HOURS_1 = 3_600  # 60 * 60
HOURS_2 = 7_200  # 2 * 60 * 60
HOURS_24 = 86_400  # 24 * 60 * 60
WEEKS_1 = 604_800  # 7 * 24 * 60 * 60
DAYS_30 = 2_592_000  # 30 * 24 * 60 * 60

__all__ = ["DAYS_30", "HOURS_1", "HOURS_2", "HOURS_24", "MINUTES_5", "WEEKS_1"]
