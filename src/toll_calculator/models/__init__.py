"""Result models — calculator output contracts."""

from toll_calculator.models.results import DailyTollResult, PassageFee

__all__ = [
    "DailyTollResult",
    "PassageFee",
]
