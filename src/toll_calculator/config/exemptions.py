"""Toll exemptions — free vehicle categories and free calendar dates.

The holiday list is a fixed approximation for the 2013 reference year:
public holidays, the days adjacent to them, and the whole of July.
A date from any other year only ever matches the weekend rule.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from toll_calculator.config.vehicle import VehicleCategory

REFERENCE_YEAR = 2013


def _month_days(year: int, month: int) -> list[date]:
    """Every date of one calendar month."""
    day = date(year, month, 1)
    days = []
    while day.month == month:
        days.append(day)
        day += timedelta(days=1)
    return days


def reference_year_holidays(year: int = REFERENCE_YEAR) -> frozenset[date]:
    """Toll-free dates of the reference year (weekends not included)."""
    fixed = [
        (1, 1),
        (3, 28), (3, 29),
        (4, 1), (4, 30),
        (5, 1), (5, 8), (5, 9),
        (6, 5), (6, 6), (6, 21),
        (11, 1),
        (12, 24), (12, 25), (12, 26), (12, 31),
    ]
    days = {date(year, month, day) for month, day in fixed}
    days.update(_month_days(year, 7))
    return frozenset(days)


class ExemptionConfig(BaseModel):
    """Which vehicles and which dates are never charged."""

    model_config = ConfigDict(frozen=True)

    toll_free_vehicles: frozenset[VehicleCategory] = Field(
        default=frozenset({
            VehicleCategory.MOTORBIKE,
            VehicleCategory.TRACTOR,
            VehicleCategory.EMERGENCY,
            VehicleCategory.DIPLOMAT,
            VehicleCategory.FOREIGN,
            VehicleCategory.MILITARY,
        }),
        description="Categories that pass every station for free",
    )
    toll_free_weekdays: frozenset[Annotated[int, Field(ge=0, le=6)]] = Field(
        default=frozenset({5, 6}),
        description="date.weekday() values that are free (5 = Saturday, 6 = Sunday)",
    )
    toll_free_dates: frozenset[date] = Field(
        default_factory=reference_year_holidays,
        description="Calendar dates that are free for every vehicle",
    )


DEFAULT_EXEMPTIONS = ExemptionConfig()
