"""Time-of-day fee schedule.

Each entry covers a half-open interval ``[start, end)`` on the 24-hour clock.
Lookups compare hour and minute only, so an entry ending at 06:30 covers
06:00:00 through 06:29:59.  Any time not covered by an entry costs 0.

Default schedule (inclusive minutes → fee):

  06:00–06:29   8      15:00–15:29  13
  06:30–06:59  13      15:30–16:59  18
  07:00–07:59  18      17:00–17:59  13
  08:00–08:29  13      18:00–18:29   8
  08:30–14:59   8      otherwise     0
"""

from __future__ import annotations

from datetime import time

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FeeScheduleEntry(BaseModel):
    """One fee bucket of the schedule."""

    model_config = ConfigDict(frozen=True)

    start: time = Field(description="First minute of the bucket (inclusive)")
    end: time = Field(description="First minute after the bucket (exclusive)")
    fee: int = Field(ge=0, description="Fee charged for a passage inside the bucket")

    @model_validator(mode="after")
    def _check_bounds(self) -> FeeScheduleEntry:
        if self.start >= self.end:
            raise ValueError(f"Bucket start {self.start} must be before end {self.end}")
        return self

    def covers(self, moment: time) -> bool:
        return self.start <= moment < self.end


class FeeSchedule(BaseModel):
    """Ordered, non-overlapping fee buckets covering part of the day."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[FeeScheduleEntry, ...] = Field(
        default=(),
        description="Buckets in ascending start order. First match wins.",
    )

    @model_validator(mode="after")
    def _check_ordering(self) -> FeeSchedule:
        for prev, nxt in zip(self.entries, self.entries[1:]):
            if nxt.start < prev.end:
                raise ValueError(
                    f"Bucket starting {nxt.start} overlaps or precedes "
                    f"bucket {prev.start}–{prev.end}"
                )
        return self

    @property
    def max_fee(self) -> int:
        return max((entry.fee for entry in self.entries), default=0)


def _entry(start: str, end: str, fee: int) -> FeeScheduleEntry:
    return FeeScheduleEntry(start=time.fromisoformat(start), end=time.fromisoformat(end), fee=fee)


DEFAULT_FEE_SCHEDULE = FeeSchedule(
    entries=(
        _entry("06:00", "06:30", 8),
        _entry("06:30", "07:00", 13),
        _entry("07:00", "08:00", 18),
        _entry("08:00", "08:30", 13),
        _entry("08:30", "15:00", 8),
        _entry("15:00", "15:30", 13),
        _entry("15:30", "17:00", 18),
        _entry("17:00", "18:00", 13),
        _entry("18:00", "18:30", 8),
    )
)
"""Reference schedule used when no other schedule is configured."""
