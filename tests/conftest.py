"""Shared test fixtures: the default calculator and passage sets."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from toll_calculator.config import TollCalculatorConfig
from toll_calculator.engine.calculator import TollCalculator

MONDAY_0800 = datetime(2013, 2, 4, 8, 0, 0)
"""An ordinary, non-exempt weekday morning in the reference year."""


@pytest.fixture
def calculator() -> TollCalculator:
    return TollCalculator()


@pytest.fixture
def rolling_calculator() -> TollCalculator:
    return TollCalculator(TollCalculatorConfig(window_anchor="rolling"))


@pytest.fixture
def start_passage() -> datetime:
    return MONDAY_0800


@pytest.fixture
def saturation_passages(start_passage: datetime) -> list[datetime]:
    """08:00, 08:05, then 09:00 through 09:08, eleven passages in all."""
    offsets = [0, 5, 60, 61, 62, 63, 64, 65, 66, 67, 68]
    return [start_passage + timedelta(minutes=m) for m in offsets]
