import math
import logging

from carshare.core.config import settings
from carshare.core.errors import QuoteInputError
from carshare.schemas.catalog import Car, Company
from carshare.schemas.quote import PriceBreakdown
from carshare.services.time_cost import resolve_time_cost
from carshare.services.free_distance import effective_policy, resolve_free_distance

logger = logging.getLogger(__name__)


def _check_input(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise QuoteInputError(f"{name} must be a finite non-negative number, got {value}")


def _money(value: float) -> float:
    return round(value, 2)


def price_per_extra_km(car: Car, company: Company) -> float:
    if car.price_per_extra_km is not None:
        return car.price_per_extra_km
    return company.default_price_per_extra_km


def assemble_quote(car: Car, company: Company, duration_hours: float, distance_km: float) -> PriceBreakdown:
    _check_input("duration_hours", duration_hours)
    _check_input("distance_km", distance_km)

    effective_duration = max(settings.MIN_BOOKING_HOURS, duration_hours)

    time_result = resolve_time_cost(car.pricing, effective_duration)
    free_km = resolve_free_distance(effective_policy(car, company), time_result.breakdown)

    rate = price_per_extra_km(car, company)
    paid_km = round(max(0.0, distance_km - free_km), 2)
    distance_cost = paid_km * rate
    total_price = _money(time_result.cost) + _money(distance_cost)

    logger.debug(
        f"Quoted {car.id} for {effective_duration}h/{distance_km}km: "
        f"{time_result.tier}, {free_km} km free, total {total_price:.2f}"
    )

    return PriceBreakdown(
        time_cost=_money(time_result.cost),
        distance_cost=_money(distance_cost),
        total_price=_money(total_price),
        free_km=free_km,
        paid_km=paid_km,
        price_per_extra_km=rate,
        pricing_tier=time_result.tier,
        breakdown=time_result.breakdown,
    )
