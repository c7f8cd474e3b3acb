from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from carshare.core.enums import CarType, Transmission, FuelType, SortOrder


class TimeBreakdown(BaseModel):
    """Billing units chosen for a duration; free distance is derived from the same units."""

    model_config = ConfigDict(frozen=True)

    weeks: int = 0
    days: int = 0
    hours: int = 0
    quarter_hours: int = Field(default=0, ge=0, le=3)

    @property
    def sub_day_hours(self) -> float:
        return self.hours + self.quarter_hours / 4

    @property
    def has_sub_day_remainder(self) -> bool:
        return self.hours > 0 or self.quarter_hours > 0

    @property
    def is_empty(self) -> bool:
        return not (self.weeks or self.days or self.has_sub_day_remainder)


class TimeCostResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost: float
    tier: str
    breakdown: TimeBreakdown


class PriceBreakdown(BaseModel):
    time_cost: float
    distance_cost: float
    total_price: float
    free_km: int
    paid_km: float
    price_per_extra_km: float
    pricing_tier: str
    breakdown: TimeBreakdown


class QuoteRequest(BaseModel):
    car_id: str
    duration_hours: float = Field(ge=0)
    distance_km: float = Field(ge=0)


class QuoteResponse(BaseModel):
    car_id: str
    company_id: str
    minimum_duration_applied: bool
    price: PriceBreakdown


class NormalizedDuration(BaseModel):
    days: int
    hours: int
    minutes: int


class CompareRequest(BaseModel):
    duration_hours: Optional[float] = Field(default=None, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    distance_km: float = Field(ge=0)
    car_types: Optional[List[CarType]] = None
    transmissions: Optional[List[Transmission]] = None
    fuel_types: Optional[List[FuelType]] = None
    sort_by: SortOrder = SortOrder.PRICE

    @model_validator(mode="after")
    def _duration_given_once(self):
        split_given = bool(self.days or self.hours or self.minutes)
        if self.duration_hours is not None and split_given:
            raise ValueError("Give either duration_hours or days/hours/minutes, not both")
        return self


class CarQuote(BaseModel):
    car_id: str
    car_name: str
    car_type: CarType
    transmission: Transmission
    fuel_type: FuelType
    company_id: str
    company_name: str
    best_deal: bool = False
    price: PriceBreakdown


class ComparisonResponse(BaseModel):
    duration_hours: float
    normalized_duration: NormalizedDuration
    distance_km: float
    minimum_duration_applied: bool
    sort_by: SortOrder
    count: int
    best_total_price: Optional[float] = None
    results: List[CarQuote]
