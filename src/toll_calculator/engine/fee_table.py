"""Fee table — maps a time of day to its base fee.

Only hour and minute take part in the lookup; seconds and microseconds
are dropped first, so 06:29:59 is still in the 06:00–06:29 bucket.
"""

from __future__ import annotations

from datetime import datetime, time

from toll_calculator.config.fee_schedule import DEFAULT_FEE_SCHEDULE, FeeSchedule


def truncate_to_minute(moment: datetime | time) -> time:
    """Reduce a timestamp or time of day to a naive ``time`` with hour and minute only."""
    if isinstance(moment, datetime):
        moment = moment.time()
    return time(moment.hour, moment.minute)


def fee_for_time(moment: datetime | time, schedule: FeeSchedule = DEFAULT_FEE_SCHEDULE) -> int:
    """Base fee for a passage at ``moment``, ignoring every exemption.

    Buckets are scanned in schedule order and the first one covering the
    minute wins.  Times outside every bucket cost 0.
    """
    minute = truncate_to_minute(moment)
    for entry in schedule.entries:
        if entry.covers(minute):
            return entry.fee
    return 0
