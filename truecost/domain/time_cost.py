"""Price expressed as hours of take-home labor"""

import math

from truecost.domain.models import TimeCostDisplay, TimeCostResult

WORKDAY_HOURS = 8


def _zero_result() -> TimeCostResult:
    return TimeCostResult(
        total_hours=0.0,
        net_hourly_rate=0.0,
        display=TimeCostDisplay(days=0, hours=0, minutes=0),
    )


def calculate_time_cost(price: float, hourly_rate: float, tax_rate: float = 0.25) -> TimeCostResult:
    """
    Convert a price into workdays, hours and minutes of after-tax work.

    Minutes are rounded half-up from the fractional hour without carrying
    into hours, so a remainder just under a whole hour shows as 60 minutes
    (e.g. 1.999h → 1h 60m).

    Example:
        $400 at $40/h, 25% tax → $30/h net, 13.33h → 1 day 5h 20m
    """
    if not hourly_rate or hourly_rate <= 0:
        return _zero_result()

    net_hourly_rate = hourly_rate * (1 - tax_rate)
    if net_hourly_rate == 0:
        # 100% tax: no amount of work pays for anything
        return _zero_result()

    raw_hours = price / net_hourly_rate
    if not math.isfinite(raw_hours):
        return _zero_result()

    days = math.floor(raw_hours / WORKDAY_HOURS)
    remainder_hours = math.fmod(raw_hours, WORKDAY_HOURS)
    hours = math.floor(remainder_hours)
    minutes = math.floor((remainder_hours - hours) * 60 + 0.5)

    return TimeCostResult(
        total_hours=raw_hours,
        net_hourly_rate=net_hourly_rate,
        display=TimeCostDisplay(days=days, hours=hours, minutes=minutes),
    )
