"""Configuration models — vehicle categories, fee schedule, exemptions."""

from toll_calculator.config.vehicle import VehicleCategory
from toll_calculator.config.fee_schedule import DEFAULT_FEE_SCHEDULE, FeeSchedule, FeeScheduleEntry
from toll_calculator.config.exemptions import (
    DEFAULT_EXEMPTIONS,
    REFERENCE_YEAR,
    ExemptionConfig,
    reference_year_holidays,
)
from toll_calculator.config.calculator import DEFAULT_CONFIG, TollCalculatorConfig

__all__ = [
    "VehicleCategory",
    "FeeScheduleEntry",
    "FeeSchedule",
    "DEFAULT_FEE_SCHEDULE",
    "ExemptionConfig",
    "DEFAULT_EXEMPTIONS",
    "REFERENCE_YEAR",
    "reference_year_holidays",
    "TollCalculatorConfig",
    "DEFAULT_CONFIG",
]
