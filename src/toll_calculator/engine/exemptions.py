"""Exemption rules — vehicle categories and calendar dates that are never charged."""

from __future__ import annotations

from datetime import date, datetime

from toll_calculator.config.calculator import DEFAULT_CONFIG, TollCalculatorConfig
from toll_calculator.config.exemptions import DEFAULT_EXEMPTIONS, ExemptionConfig
from toll_calculator.config.vehicle import VehicleCategory
from toll_calculator.engine.fee_table import fee_for_time


def is_exempt_vehicle(
    vehicle: VehicleCategory | None,
    exemptions: ExemptionConfig = DEFAULT_EXEMPTIONS,
) -> bool:
    """True iff the category is in the free set.

    A missing or unknown category must pay.
    """
    if vehicle is None:
        return False
    return vehicle in exemptions.toll_free_vehicles


def is_exempt_date(day: date | datetime, exemptions: ExemptionConfig = DEFAULT_EXEMPTIONS) -> bool:
    """True for free weekdays (Saturday, Sunday) and for the fixed holiday dates."""
    if isinstance(day, datetime):
        day = day.date()
    if day.weekday() in exemptions.toll_free_weekdays:
        return True
    return day in exemptions.toll_free_dates


def passage_fee(
    vehicle: VehicleCategory | None,
    moment: datetime,
    config: TollCalculatorConfig = DEFAULT_CONFIG,
) -> int:
    """Fee for a single passage after both exemption checks."""
    if is_exempt_vehicle(vehicle, config.exemptions) or is_exempt_date(moment, config.exemptions):
        return 0
    return fee_for_time(moment, config.schedule)
