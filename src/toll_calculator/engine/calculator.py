"""Toll calculator — the single entry point for pricing a day of passages.

Usage::

    calc = TollCalculator()
    fee = calc.get_toll_fee(VehicleCategory.CAR, [datetime(2013, 2, 4, 8, 0)])
    # fee == 13

The configuration is injected once and never mutated, so one instance can
be shared freely between callers and threads.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, time

from toll_calculator.config.calculator import DEFAULT_CONFIG, TollCalculatorConfig
from toll_calculator.config.vehicle import VehicleCategory
from toll_calculator.engine import aggregator
from toll_calculator.engine.exemptions import is_exempt_date, is_exempt_vehicle, passage_fee
from toll_calculator.engine.fee_table import fee_for_time
from toll_calculator.models.results import DailyTollResult


class TollCalculator:
    """Fee table, exemption rules and daily aggregation bound to one configuration."""

    def __init__(self, config: TollCalculatorConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def get_toll_fee(self, vehicle: VehicleCategory | str | None, passages: Sequence[datetime]) -> int:
        """Total fee for one day of passages, in ``[0, config.daily_cap]``."""
        return aggregator.total_fee(vehicle, passages, self.config)

    def calculate(self, vehicle: VehicleCategory | str | None, passages: Sequence[datetime]) -> DailyTollResult:
        """Same as :meth:`get_toll_fee` but with the per-passage breakdown."""
        return aggregator.compute_daily_toll(vehicle, passages, self.config)

    def passage_fee(self, vehicle: VehicleCategory | None, moment: datetime) -> int:
        return passage_fee(vehicle, moment, self.config)

    def fee_for_time(self, moment: datetime | time) -> int:
        return fee_for_time(moment, self.config.schedule)

    def is_toll_free_vehicle(self, vehicle: VehicleCategory | None) -> bool:
        return is_exempt_vehicle(vehicle, self.config.exemptions)

    def is_toll_free_date(self, day: date | datetime) -> bool:
        return is_exempt_date(day, self.config.exemptions)


_default_calculator = TollCalculator()


def get_toll_fee(
    vehicle: VehicleCategory | str | None,
    passages: Sequence[datetime],
    config: TollCalculatorConfig | None = None,
) -> int:
    """Module-level shortcut for :meth:`TollCalculator.get_toll_fee`."""
    calculator = _default_calculator if config is None else TollCalculator(config)
    return calculator.get_toll_fee(vehicle, passages)
