import math
import logging

from carshare.core.enums import KmPolicyKind
from carshare.schemas.catalog import Car, Company, FreeDistancePolicy
from carshare.schemas.quote import TimeBreakdown

logger = logging.getLogger(__name__)

GRANULAR_KINDS = (KmPolicyKind.HOURLY, KmPolicyKind.QUARTER_HOURLY, KmPolicyKind.STANDARD)


def effective_policy(car: Car, company: Company) -> FreeDistancePolicy:
    """Company policy with every kind the car overrides replaced by the car's value."""
    if car.free_km_policy is None:
        return company.free_km_policy

    merged = {}
    for kind in KmPolicyKind:
        value = car.free_km_policy.allowance(kind)
        if value is None:
            value = company.free_km_policy.allowance(kind)
        merged[kind.value] = value
    return FreeDistancePolicy(**merged)


def _is_daily_only(policy: FreeDistancePolicy) -> bool:
    return policy.defines(KmPolicyKind.DAILY) and not any(
        policy.defines(kind) for kind in GRANULAR_KINDS
    )


def _round_km(value: float) -> int:
    return int(math.floor(value + 0.5))


def resolve_free_distance(policy: FreeDistancePolicy, breakdown: TimeBreakdown) -> int:
    """Free kilometres earned by the billed units in ``breakdown``.

    Only the breakdown is consulted, never the raw duration, so the allowance
    always follows the tiers that were actually charged.
    """
    total = 0.0

    if breakdown.weeks > 0 and policy.weekly is not None:
        total += breakdown.weeks * policy.weekly

    if policy.daily is not None:
        days = breakdown.days
        if _is_daily_only(policy):
            if breakdown.has_sub_day_remainder:
                days += 1
            if not breakdown.is_empty:
                days = max(days, 1)
        total += days * policy.daily

    if breakdown.hours > 0 and policy.hourly is not None:
        total += breakdown.hours * policy.hourly

    if breakdown.quarter_hours > 0 and policy.quarter_hourly is not None:
        total += breakdown.quarter_hours * policy.quarter_hourly

    if total == 0 and policy.standard is not None:
        total = policy.standard

    return _round_km(total)
