from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator
from typing import Dict, List, Optional
from carshare.core.enums import CarType, Transmission, FuelType, KmPolicyKind
from carshare.core.errors import CatalogError


class RateSchedule(BaseModel):
    model_config = ConfigDict(frozen=True)

    hour: float = Field(gt=0)
    day: float = Field(gt=0)
    week: Optional[float] = Field(default=None, gt=0)

    @property
    def quarter_hour(self) -> float:
        return self.hour / 4


class FreeDistancePolicy(BaseModel):
    """Free kilometres per unit of booked time, one optional allowance per policy kind."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    standard: Optional[float] = Field(default=None, ge=0)
    quarter_hourly: Optional[float] = Field(default=None, ge=0)
    hourly: Optional[float] = Field(default=None, ge=0)
    daily: Optional[float] = Field(default=None, ge=0)
    weekly: Optional[float] = Field(default=None, ge=0)

    def allowance(self, kind: KmPolicyKind) -> Optional[float]:
        if kind is KmPolicyKind.STANDARD:
            return self.standard
        if kind is KmPolicyKind.QUARTER_HOURLY:
            return self.quarter_hourly
        if kind is KmPolicyKind.HOURLY:
            return self.hourly
        if kind is KmPolicyKind.DAILY:
            return self.daily
        if kind is KmPolicyKind.WEEKLY:
            return self.weekly
        raise ValueError(f"Unknown policy kind: {kind}")

    def defines(self, kind: KmPolicyKind) -> bool:
        return self.allowance(kind) is not None

    def defined_kinds(self) -> List[KmPolicyKind]:
        return [kind for kind in KmPolicyKind if self.defines(kind)]


class Car(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: CarType
    transmission: Transmission
    fuel_type: FuelType = FuelType.PETROL_DIESEL
    company: str
    pricing: RateSchedule
    free_km_policy: Optional[FreeDistancePolicy] = None
    price_per_extra_km: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


class Company(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    logo: Optional[str] = None
    default_price_per_extra_km: float = Field(ge=0)
    free_km_policy: FreeDistancePolicy = FreeDistancePolicy()


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    companies: List[Company]
    cars: List[Car]

    _companies_by_id: Dict[str, Company] = PrivateAttr(default_factory=dict)
    _cars_by_id: Dict[str, Car] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_references(self):
        company_ids = [company.id for company in self.companies]
        if len(set(company_ids)) != len(company_ids):
            raise ValueError("Duplicate company id in catalog")

        car_ids = [car.id for car in self.cars]
        if len(set(car_ids)) != len(car_ids):
            raise ValueError("Duplicate car id in catalog")

        known = set(company_ids)
        for car in self.cars:
            if car.company not in known:
                raise ValueError(f"Car {car.id} references unknown company {car.company}")

        self._companies_by_id = {company.id: company for company in self.companies}
        self._cars_by_id = {car.id: car for car in self.cars}
        return self

    @property
    def companies_by_id(self) -> Dict[str, Company]:
        return self._companies_by_id

    def get_car(self, car_id: str) -> Optional[Car]:
        return self._cars_by_id.get(car_id)

    def get_company(self, company_id: str) -> Optional[Company]:
        return self._companies_by_id.get(company_id)

    def company_for(self, car: Car) -> Company:
        company = self.get_company(car.company)
        if company is None:
            raise CatalogError(f"Car {car.id} references unknown company {car.company}")
        return company
