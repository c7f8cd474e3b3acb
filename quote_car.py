import sys
from carshare.core.errors import CatalogError, QuoteInputError
from carshare.services.catalog import get_catalog
from carshare.services.pricing import assemble_quote


def print_quote(car_id: str, duration_hours: float, distance_km: float) -> bool:
    try:
        catalog = get_catalog()
    except CatalogError as e:
        print(f"Error loading catalog: {e}")
        return False

    car = catalog.get_car(car_id)
    if car is None:
        print(f"Error: Car '{car_id}' not found")
        return False

    company = catalog.company_for(car)
    try:
        price = assemble_quote(car, company, duration_hours, distance_km)
    except QuoteInputError as e:
        print(f"Error: {e}")
        return False

    if duration_hours < 1:
        print("Note: minimum booking is 1 hour, price shown is for 1 hour")
    print(f"{car.name} ({company.name})")
    print(f"Time cost:     {price.pricing_tier} = {price.time_cost:.2f}")
    print(f"Distance cost: {price.free_km} km free + {price.paid_km:g} km at {price.price_per_extra_km:.2f} = {price.distance_cost:.2f}")
    print(f"Total:         {price.total_price:.2f}")
    return True


def main():
    if len(sys.argv) < 4:
        print("Usage: python quote_car.py <car_id> <duration_hours> <distance_km>")
        sys.exit(1)

    car_id = sys.argv[1]
    try:
        duration_hours = float(sys.argv[2])
        distance_km = float(sys.argv[3])
    except ValueError:
        print("Error: duration and distance must be numbers")
        sys.exit(1)

    success = print_quote(car_id, duration_hours, distance_km)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
