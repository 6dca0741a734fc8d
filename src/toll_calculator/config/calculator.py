"""Top-level calculator configuration — bundles schedule, exemptions and daily rules."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from toll_calculator.config.exemptions import ExemptionConfig
from toll_calculator.config.fee_schedule import DEFAULT_FEE_SCHEDULE, FeeSchedule


class TollCalculatorConfig(BaseModel):
    """Complete, immutable input bundle for one calculator instance.

    The defaults are the standard rules: 60-minute windows measured
    from the first passage of the day and a daily cap of 60.
    """

    model_config = ConfigDict(frozen=True)

    schedule: FeeSchedule = Field(default=DEFAULT_FEE_SCHEDULE)
    exemptions: ExemptionConfig = Field(default_factory=ExemptionConfig)

    daily_cap: int = Field(default=60, ge=0, description="Maximum fee charged for one day")
    window_minutes: int = Field(
        default=60, gt=0,
        description="Passages at most this many minutes after the window anchor "
                    "are charged once, at the highest fee among them.",
    )
    window_anchor: Literal["first", "rolling"] = Field(
        default="first",
        description="'first': elapsed time is always measured from the first passage "
                    "of the day. 'rolling': the anchor moves to each passage that "
                    "opens a new window.",
    )

    # --- Input validation -------------------------------------------------------
    require_same_day: bool = Field(
        default=True,
        description="Reject requests whose passages span more than one calendar day.",
    )
    require_sorted: bool = Field(
        default=False,
        description="Reject passages that are not in ascending order. When off, "
                    "out-of-order input is priced by elapsed time from the anchor.",
    )


DEFAULT_CONFIG = TollCalculatorConfig()
