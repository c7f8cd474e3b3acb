"""Pricing quote endpoints with Redis caching"""
import logging
from fastapi import APIRouter, Depends, HTTPException

from carshare.schemas.catalog import Catalog
from carshare.schemas.quote import QuoteRequest, QuoteResponse, CompareRequest, ComparisonResponse
from carshare.services.catalog import get_catalog
from carshare.services.pricing import assemble_quote
from carshare.services.comparison import compare_catalog, total_duration_hours
from carshare.core.config import settings
from carshare.core.metrics import quotes_calculated
from carshare.core.rate_limit import check_rate_limit
from carshare.utils.cache import get_cached, set_cached
from carshare.utils.hashing import cache_key

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/quotes", tags=["quotes"], dependencies=[Depends(check_rate_limit)])


@router.post("/calc", response_model=QuoteResponse)
async def calc_quote(req: QuoteRequest, catalog: Catalog = Depends(get_catalog)):

    car = catalog.get_car(req.car_id)
    if car is None:
        raise HTTPException(status_code=404, detail=f"Car with id {req.car_id} not found")

    key = cache_key("price", req.model_dump())
    cached = await get_cached(key, "price")
    if cached:
        return QuoteResponse(**cached)

    company = catalog.company_for(car)
    price = assemble_quote(car, company, req.duration_hours, req.distance_km)
    quotes_calculated.labels(company=company.id).inc()

    result = QuoteResponse(
        car_id=car.id,
        company_id=company.id,
        minimum_duration_applied=req.duration_hours < settings.MIN_BOOKING_HOURS,
        price=price,
    )
    await set_cached(key, result.model_dump(mode="json"))
    return result


@router.post("/compare", response_model=ComparisonResponse)
async def compare_quotes(req: CompareRequest, catalog: Catalog = Depends(get_catalog)):

    key = cache_key("compare", req.model_dump(mode="json"))
    cached = await get_cached(key, "compare")
    if cached:
        return ComparisonResponse(**cached)

    if req.duration_hours is not None:
        duration = req.duration_hours
    else:
        duration = total_duration_hours(req.days, req.hours, req.minutes)

    result = compare_catalog(
        catalog,
        duration,
        req.distance_km,
        car_types=req.car_types,
        transmissions=req.transmissions,
        fuel_types=req.fuel_types,
        sort_by=req.sort_by,
    )
    await set_cached(key, result.model_dump(mode="json"))
    return result
