from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from carshare.core.enums import CarType, Transmission, FuelType
from carshare.schemas.catalog import Car, Catalog, Company
from carshare.services.catalog import get_catalog
from carshare.services.comparison import filter_cars

router = APIRouter(tags=["catalog"])


@router.get("/cars", response_model=List[Car])
async def list_cars(
    car_type: Optional[List[CarType]] = Query(None),
    transmission: Optional[List[Transmission]] = Query(None),
    fuel_type: Optional[List[FuelType]] = Query(None),
    company: Optional[str] = Query(None),
    catalog: Catalog = Depends(get_catalog),
):
    cars = filter_cars(catalog.cars, car_type, transmission, fuel_type)
    if company:
        cars = [car for car in cars if car.company == company]
    return cars


@router.get("/cars/{car_id}", response_model=Car)
async def get_car(car_id: str, catalog: Catalog = Depends(get_catalog)):
    car = catalog.get_car(car_id)
    if car is None:
        raise HTTPException(status_code=404, detail=f"Car with id {car_id} not found")
    return car


@router.get("/companies", response_model=List[Company])
async def list_companies(catalog: Catalog = Depends(get_catalog)):
    return catalog.companies
