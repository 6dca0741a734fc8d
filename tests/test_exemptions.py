"""Tests for engine/exemptions.py."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from toll_calculator.config import TollCalculatorConfig
from toll_calculator.config.exemptions import (
    DEFAULT_EXEMPTIONS,
    ExemptionConfig,
    reference_year_holidays,
)
from toll_calculator.config.vehicle import VehicleCategory
from toll_calculator.engine.exemptions import is_exempt_date, is_exempt_vehicle, passage_fee


# ═══════════════════════════════════════════════════════════════════════════
# Vehicles
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize(
    "vehicle",
    [
        VehicleCategory.MOTORBIKE,
        VehicleCategory.TRACTOR,
        VehicleCategory.EMERGENCY,
        VehicleCategory.DIPLOMAT,
        VehicleCategory.FOREIGN,
        VehicleCategory.MILITARY,
    ],
)
def test_toll_free_vehicles(vehicle: VehicleCategory):
    assert is_exempt_vehicle(vehicle)


def test_car_pays():
    assert not is_exempt_vehicle(VehicleCategory.CAR)


def test_missing_vehicle_pays():
    assert not is_exempt_vehicle(None)


def test_unknown_vehicle_pays():
    assert not is_exempt_vehicle("Spaceship")


def test_custom_free_vehicles():
    exemptions = ExemptionConfig(toll_free_vehicles=frozenset({VehicleCategory.CAR}))
    assert is_exempt_vehicle(VehicleCategory.CAR, exemptions)
    assert not is_exempt_vehicle(VehicleCategory.MOTORBIKE, exemptions)


# ═══════════════════════════════════════════════════════════════════════════
# Dates
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize(
    "day",
    [
        date(2013, 2, 2),   # Saturday
        date(2013, 2, 3),   # Sunday
        date(2014, 3, 15),  # Saturday outside the reference year
    ],
)
def test_weekends_are_free(day: date):
    assert is_exempt_date(day)


@pytest.mark.parametrize(
    "day",
    [
        date(2013, 1, 1),
        date(2013, 3, 28),
        date(2013, 3, 29),
        date(2013, 4, 1),
        date(2013, 4, 30),
        date(2013, 5, 1),
        date(2013, 5, 8),
        date(2013, 5, 9),
        date(2013, 6, 5),
        date(2013, 6, 6),
        date(2013, 6, 21),
        date(2013, 11, 1),
        date(2013, 12, 24),
        date(2013, 12, 25),
        date(2013, 12, 26),
        date(2013, 12, 31),
    ],
)
def test_reference_year_holidays(day: date):
    assert is_exempt_date(day)


def test_all_of_july_is_free():
    for day in range(1, 32):
        assert is_exempt_date(date(2013, 7, day)), f"2013-07-{day:02d}"


@pytest.mark.parametrize(
    "day",
    [
        date(2013, 2, 4),   # ordinary Monday
        date(2013, 6, 20),  # Thursday next to a holiday
        date(2013, 8, 1),   # first day after July
        date(2014, 1, 1),   # Wednesday, holiday list does not roll over
        date(2014, 7, 1),   # Tuesday, July rule is 2013 only
    ],
)
def test_ordinary_days_are_not_free(day: date):
    assert not is_exempt_date(day)


def test_datetime_accepted():
    assert is_exempt_date(datetime(2013, 12, 24, 8, 0))
    assert not is_exempt_date(datetime(2013, 2, 4, 8, 0))


def test_holiday_count():
    # 16 fixed dates plus the 31 days of July
    assert len(reference_year_holidays()) == 47
    assert DEFAULT_EXEMPTIONS.toll_free_dates == reference_year_holidays()


def test_no_weekend_rule_when_disabled():
    exemptions = ExemptionConfig(toll_free_weekdays=frozenset())
    assert not is_exempt_date(date(2013, 2, 2), exemptions)


# ═══════════════════════════════════════════════════════════════════════════
# Passage fee
# ═══════════════════════════════════════════════════════════════════════════

def test_passage_fee_for_car(start_passage: datetime):
    assert passage_fee(VehicleCategory.CAR, start_passage) == 13


def test_passage_fee_exempt_vehicle(start_passage: datetime):
    assert passage_fee(VehicleCategory.DIPLOMAT, start_passage) == 0


def test_passage_fee_exempt_date():
    assert passage_fee(VehicleCategory.CAR, datetime(2013, 2, 2, 8, 0)) == 0


def test_passage_fee_uses_config_exemptions(start_passage: datetime):
    config = TollCalculatorConfig(
        exemptions=ExemptionConfig(toll_free_dates=frozenset({start_passage.date()})),
    )
    assert passage_fee(VehicleCategory.CAR, start_passage, config) == 0
