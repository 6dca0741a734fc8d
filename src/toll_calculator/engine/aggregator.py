"""Daily aggregator — combines per-passage fees into one capped day total.

Passages are merged into charging windows.  A window contributes only its
highest passage fee, never the sum of its members, and the day total is
clamped to ``daily_cap``.

The running total is kept in a single pass without storing window history:

  merge      (elapsed ≤ window):  total −= window_max
                                  window_max = max(window_max, fee)
                                  total += window_max
  new window (elapsed > window):  total += fee
                                  window_max = fee

``elapsed`` is the signed time from the window anchor.  With the default
``window_anchor="first"`` the anchor is always the first passage in
supplied order, so once the day has moved past the first window every
later passage opens a window of its own.  ``"rolling"`` moves the anchor
to each passage that opens a new window.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from toll_calculator.config.calculator import DEFAULT_CONFIG, TollCalculatorConfig
from toll_calculator.config.vehicle import VehicleCategory
from toll_calculator.engine.exemptions import is_exempt_date, is_exempt_vehicle
from toll_calculator.engine.fee_table import fee_for_time
from toll_calculator.errors import InvalidInputError
from toll_calculator.models.results import DailyTollResult, PassageFee

logger = logging.getLogger(__name__)


def _as_category(vehicle: VehicleCategory | str | None) -> VehicleCategory | None:
    """Normalise the caller's vehicle tag.  Unknown tags become ``None`` (must pay)."""
    if vehicle is None or isinstance(vehicle, VehicleCategory):
        return vehicle
    try:
        return VehicleCategory(vehicle)
    except ValueError:
        logger.debug("unknown vehicle category %r charged as non-exempt", vehicle)
        return None


def validate_passages(
    passages: Sequence[datetime],
    config: TollCalculatorConfig = DEFAULT_CONFIG,
) -> list[datetime]:
    """Check the passage list before pricing it.

    Raises
    ------
    InvalidInputError
        Empty input, a value that is not a ``datetime``, naive and aware
        timestamps mixed, passages on different days (``require_same_day``)
        or out-of-order passages (``require_sorted``).
    """
    passages = list(passages)
    if not passages:
        raise InvalidInputError("At least one passage is required")

    for passage in passages:
        if not isinstance(passage, datetime):
            raise InvalidInputError(f"Passage {passage!r} is not a datetime")

    if len({passage.utcoffset() is None for passage in passages}) > 1:
        raise InvalidInputError("Passages mix timezone-aware and naive timestamps")

    if config.require_same_day:
        day = passages[0].date()
        for passage in passages[1:]:
            if passage.date() != day:
                raise InvalidInputError(
                    f"Passage {passage.isoformat()} is not on {day.isoformat()}"
                )

    if config.require_sorted:
        for prev, nxt in zip(passages, passages[1:]):
            if nxt < prev:
                raise InvalidInputError(
                    f"Passage {nxt.isoformat()} is earlier than {prev.isoformat()}"
                )

    return passages


def compute_daily_toll(
    vehicle: VehicleCategory | str | None,
    passages: Sequence[datetime],
    config: TollCalculatorConfig = DEFAULT_CONFIG,
) -> DailyTollResult:
    """Price one vehicle's passages for one day, with a per-passage breakdown.

    Parameters
    ----------
    vehicle : VehicleCategory | str | None
        Category of the vehicle.  ``None`` or an unknown tag is charged like
        any non-exempt vehicle.
    passages : Sequence[datetime]
        Non-empty list of passage timestamps, evaluated in supplied order.
    config : TollCalculatorConfig
        Schedule, exemptions, cap and window rules.

    Returns
    -------
    DailyTollResult
        ``total_fee`` in ``[0, config.daily_cap]``.
    """
    passages = validate_passages(passages, config)
    vehicle = _as_category(vehicle)
    vehicle_exempt = is_exempt_vehicle(vehicle, config.exemptions)

    def fee_of(moment: datetime) -> int:
        if vehicle_exempt or is_exempt_date(moment, config.exemptions):
            return 0
        return fee_for_time(moment, config.schedule)

    anchor = passages[0]
    window_max = fee_of(anchor)
    total = window_max
    window_index = 0
    capped = False
    evaluated: list[PassageFee] = []

    for passage in passages:
        fee = fee_of(passage)
        elapsed = (passage - anchor).total_seconds() / 60.0

        if elapsed <= config.window_minutes:
            total -= window_max
            window_max = max(window_max, fee)
            total += window_max
        else:
            total += fee
            window_max = fee
            window_index += 1
            if config.window_anchor == "rolling":
                anchor = passage

        evaluated.append(PassageFee(
            timestamp=passage,
            fee=fee,
            window_index=window_index,
            minutes_from_anchor=round(elapsed, 4),
        ))
        logger.debug(
            "passage %s fee=%d window=%d total=%d",
            passage.isoformat(), fee, window_index, total,
        )

        if total >= config.daily_cap:
            capped = True
            logger.debug("daily cap %d reached at %s", config.daily_cap, passage.isoformat())
            break

    return DailyTollResult(
        vehicle=vehicle,
        day=passages[0].date(),
        total_fee=min(total, config.daily_cap),
        capped=capped,
        passages=evaluated,
        window_count=window_index + 1,
    )


def total_fee(
    vehicle: VehicleCategory | str | None,
    passages: Sequence[datetime],
    config: TollCalculatorConfig = DEFAULT_CONFIG,
) -> int:
    """Charged amount for the day, without the breakdown."""
    return compute_daily_toll(vehicle, passages, config).total_fee
