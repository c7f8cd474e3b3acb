"""Price a whole catalog against one duration/distance pair"""
import math
import logging
from typing import Iterable, List, Optional, Sequence

from carshare.core.config import settings
from carshare.core.enums import CarType, Transmission, FuelType, SortOrder
from carshare.core.errors import QuoteInputError
from carshare.core.metrics import quotes_calculated
from carshare.schemas.catalog import Car, Catalog
from carshare.schemas.quote import CarQuote, ComparisonResponse, NormalizedDuration
from carshare.services.pricing import assemble_quote

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60
DURATION_STEP_MINUTES = 15


def total_duration_hours(days: float = 0, hours: float = 0, minutes: float = 0) -> float:
    return days * 24 + hours + minutes / 60


def normalize_duration(days: float = 0, hours: float = 0, minutes: float = 0) -> NormalizedDuration:
    """Snap a duration to the nearest 15 minutes and carry it into days/hours/minutes."""
    total_minutes = days * MINUTES_PER_DAY + hours * 60 + minutes
    steps = math.floor(total_minutes / DURATION_STEP_MINUTES + 0.5)
    total_minutes = steps * DURATION_STEP_MINUTES

    norm_days, rest = divmod(total_minutes, MINUTES_PER_DAY)
    norm_hours, norm_minutes = divmod(rest, 60)
    return NormalizedDuration(days=norm_days, hours=norm_hours, minutes=norm_minutes)


def validate_duration(duration_hours: float) -> None:
    if not math.isfinite(duration_hours):
        raise QuoteInputError(f"Duration must be finite, got {duration_hours}")
    if duration_hours < settings.MIN_DURATION_HOURS:
        raise QuoteInputError(
            f"Duration must be at least {settings.MIN_DURATION_HOURS * 60:.0f} minutes"
        )
    if duration_hours > settings.MAX_DURATION_HOURS:
        raise QuoteInputError(
            f"Duration must be at most {settings.MAX_DURATION_HOURS / 24:.0f} days"
        )


def filter_cars(
    cars: Iterable[Car],
    car_types: Optional[Sequence[CarType]] = None,
    transmissions: Optional[Sequence[Transmission]] = None,
    fuel_types: Optional[Sequence[FuelType]] = None,
) -> List[Car]:
    """Cars matching every given filter; a missing or empty filter matches everything."""
    selected = []
    for car in cars:
        if car_types and car.type not in car_types:
            continue
        if transmissions and car.transmission not in transmissions:
            continue
        if fuel_types and car.fuel_type not in fuel_types:
            continue
        selected.append(car)
    return selected


def sort_quotes(quotes: List[CarQuote], sort_by: SortOrder = SortOrder.PRICE) -> List[CarQuote]:
    if sort_by == SortOrder.PRICE:
        return sorted(quotes, key=lambda q: q.price.total_price)
    if sort_by == SortOrder.PRICE_DESC:
        return sorted(quotes, key=lambda q: q.price.total_price, reverse=True)
    if sort_by == SortOrder.COMPANY:
        return sorted(quotes, key=lambda q: q.company_name.casefold())
    if sort_by == SortOrder.CAR_TYPE:
        return sorted(quotes, key=lambda q: (q.car_type.value, q.price.total_price))
    raise ValueError(f"Unknown sort order: {sort_by}")


def compare_catalog(
    catalog: Catalog,
    duration_hours: float,
    distance_km: float,
    car_types: Optional[Sequence[CarType]] = None,
    transmissions: Optional[Sequence[Transmission]] = None,
    fuel_types: Optional[Sequence[FuelType]] = None,
    sort_by: SortOrder = SortOrder.PRICE,
) -> ComparisonResponse:
    validate_duration(duration_hours)

    quotes = []
    for car in filter_cars(catalog.cars, car_types, transmissions, fuel_types):
        company = catalog.company_for(car)
        price = assemble_quote(car, company, duration_hours, distance_km)
        quotes_calculated.labels(company=company.id).inc()
        quotes.append(CarQuote(
            car_id=car.id,
            car_name=car.name,
            car_type=car.type,
            transmission=car.transmission,
            fuel_type=car.fuel_type,
            company_id=company.id,
            company_name=company.name,
            price=price,
        ))

    best_total = min((q.price.total_price for q in quotes), default=None)
    for quote in quotes:
        quote.best_deal = quote.price.total_price == best_total

    logger.info(
        f"Compared {len(quotes)} cars for {duration_hours}h/{distance_km}km, best {best_total}"
    )

    return ComparisonResponse(
        duration_hours=duration_hours,
        normalized_duration=normalize_duration(hours=duration_hours),
        distance_km=distance_km,
        minimum_duration_applied=duration_hours < settings.MIN_BOOKING_HOURS,
        sort_by=sort_by,
        count=len(quotes),
        best_total_price=best_total,
        results=sort_quotes(quotes, sort_by),
    )
