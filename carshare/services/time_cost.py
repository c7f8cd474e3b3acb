"""Time-based cost: cheapest combination of week/day/hour/quarter-hour tiers for a duration.

The duration is first rounded up to whole quarter-hours and split greedily
into the largest units the car is rated for. The leftover below each unit is
then collapsed into one more unit of that size whenever it costs at least as
much, days first and weeks second, so an equal price always resolves to the
larger unit.
"""
import math
import logging

from carshare.schemas.catalog import RateSchedule
from carshare.schemas.quote import TimeBreakdown, TimeCostResult

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24
HOURS_PER_WEEK = 168
QUARTERS_PER_HOUR = 4
QUARTERS_PER_DAY = HOURS_PER_DAY * QUARTERS_PER_HOUR
QUARTERS_PER_WEEK = HOURS_PER_WEEK * QUARTERS_PER_HOUR

MINIMUM_TIER = "1 hour (minimum)"
NO_WEEKLY_RATE_SUFFIX = " (no weekly rate)"


def round_up_to_quarters(duration_hours: float) -> int:
    """Number of started quarter-hours in ``duration_hours``."""
    # 9 places absorbs float noise such as 1.15 * 4 == 4.6000000000000005
    return math.ceil(round(duration_hours * QUARTERS_PER_HOUR, 9))


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def _format_decimal(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_time_component(hours: float) -> str:
    if hours < 1:
        mins = int(math.floor(hours * 60 + 0.5))
        return _plural(mins, "min")
    if float(hours).is_integer():
        return _plural(int(hours), "hour")
    return f"{_format_decimal(hours)} hours"


def tier_label(breakdown: TimeBreakdown) -> str:
    parts = []
    if breakdown.weeks:
        parts.append(_plural(breakdown.weeks, "week"))
    if breakdown.days:
        parts.append(_plural(breakdown.days, "day"))
    if breakdown.has_sub_day_remainder:
        parts.append(format_time_component(breakdown.sub_day_hours))
    return " + ".join(parts)


def cost_of(schedule: RateSchedule, breakdown: TimeBreakdown) -> float:
    cost = (
        breakdown.days * schedule.day
        + breakdown.hours * schedule.hour
        + breakdown.quarter_hours * schedule.quarter_hour
    )
    if breakdown.weeks:
        cost += breakdown.weeks * schedule.week
    return cost


def weekly_tier_usable(schedule: RateSchedule) -> bool:
    # A week dearer than seven days can never win against the daily tier
    return schedule.week is not None and schedule.week <= 7 * schedule.day


def _daily_fallback(schedule: RateSchedule, quarters: int) -> TimeCostResult:
    days = math.ceil(quarters / QUARTERS_PER_DAY)
    breakdown = TimeBreakdown(days=days)
    return TimeCostResult(
        cost=days * schedule.day,
        tier=_plural(days, "day") + NO_WEEKLY_RATE_SUFFIX,
        breakdown=breakdown,
    )


def decompose(schedule: RateSchedule, quarters: int) -> TimeBreakdown:
    use_weeks = weekly_tier_usable(schedule)

    weeks = quarters // QUARTERS_PER_WEEK if use_weeks else 0
    remainder = quarters - weeks * QUARTERS_PER_WEEK
    days, remainder = divmod(remainder, QUARTERS_PER_DAY)
    hours, quarter_hours = divmod(remainder, QUARTERS_PER_HOUR)

    sub_day_cost = hours * schedule.hour + quarter_hours * schedule.quarter_hour
    if sub_day_cost > 0 and sub_day_cost >= schedule.day:
        days += 1
        hours = quarter_hours = 0

    if use_weeks:
        sub_week_cost = (
            days * schedule.day
            + hours * schedule.hour
            + quarter_hours * schedule.quarter_hour
        )
        if sub_week_cost > 0 and sub_week_cost >= schedule.week:
            weeks += 1
            days = hours = quarter_hours = 0

    return TimeBreakdown(weeks=weeks, days=days, hours=hours, quarter_hours=quarter_hours)


def resolve_time_cost(schedule: RateSchedule, duration_hours: float) -> TimeCostResult:
    if duration_hours <= 1:
        return TimeCostResult(
            cost=schedule.hour,
            tier=MINIMUM_TIER,
            breakdown=TimeBreakdown(hours=1),
        )

    quarters = round_up_to_quarters(duration_hours)

    if schedule.week is None and duration_hours >= HOURS_PER_WEEK:
        logger.debug(f"No weekly rate, billing {duration_hours}h as whole days")
        return _daily_fallback(schedule, quarters)

    breakdown = decompose(schedule, quarters)
    return TimeCostResult(
        cost=cost_of(schedule, breakdown),
        tier=tier_label(breakdown),
        breakdown=breakdown,
    )
