"""Engine — fee table, exemption rules and daily aggregation."""

from toll_calculator.engine.fee_table import fee_for_time, truncate_to_minute
from toll_calculator.engine.exemptions import is_exempt_date, is_exempt_vehicle, passage_fee
from toll_calculator.engine.aggregator import compute_daily_toll, total_fee, validate_passages
from toll_calculator.engine.calculator import TollCalculator, get_toll_fee

__all__ = [
    "fee_for_time",
    "truncate_to_minute",
    "is_exempt_vehicle",
    "is_exempt_date",
    "passage_fee",
    "validate_passages",
    "compute_daily_toll",
    "total_fee",
    "TollCalculator",
    "get_toll_fee",
]
