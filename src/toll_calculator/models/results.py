"""Result types — the contract between the engine and its callers.

``DailyTollResult.total_fee`` is the number the outside world cares about;
the per-passage breakdown exists so that a charge can be explained.
"""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel

from toll_calculator.config.vehicle import VehicleCategory


class PassageFee(BaseModel):
    """One evaluated passage."""

    timestamp: datetime

    fee: int
    """Fee for this passage alone, after vehicle and date exemptions."""

    window_index: int
    """0-based index of the charging window the passage was merged into."""

    minutes_from_anchor: float
    """Signed minutes between this passage and the window anchor it was compared with."""


class DailyTollResult(BaseModel):
    """Outcome of pricing one vehicle's passages for one day."""

    vehicle: VehicleCategory | None
    day: date
    """Calendar date of the first passage."""

    total_fee: int
    """Charged amount, within [0, daily_cap]."""

    capped: bool
    """True when the running total reached the daily cap."""

    passages: list[PassageFee]
    """Evaluated passages in supplied order.  Passages after the cap was hit are omitted."""

    window_count: int
    """Number of charging windows opened."""
