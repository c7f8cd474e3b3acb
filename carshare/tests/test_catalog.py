import json
import pytest

from carshare.core.config import settings
from carshare.core.errors import CatalogError
from carshare.services.catalog import load_catalog
from carshare.services.pricing import assemble_quote


def _write(tmp_path, payload):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


COMPANY = {"id": "acme", "name": "Acme", "default_price_per_extra_km": 0.2, "free_km_policy": {"daily": 40}}
CAR = {
    "id": "acme-1", "name": "Acme One", "company": "acme", "type": "economy",
    "transmission": "manual", "pricing": {"hour": 5, "day": 30},
}


class TestBundledCatalog:

    def test_loads(self):
        catalog = load_catalog(settings.CATALOG_PATH)

        assert len(catalog.companies) == 5
        assert len(catalog.cars) == 48
        for car in catalog.cars:
            assert catalog.company_for(car).id == car.company

    def test_every_car_prices(self):
        catalog = load_catalog(settings.CATALOG_PATH)

        for car in catalog.cars:
            res = assemble_quote(car, catalog.company_for(car), 30, 120)
            assert res.total_price > 0

    def test_car_policy_override(self):
        catalog = load_catalog(settings.CATALOG_PATH)
        car = catalog.get_car("gocar-goexplore-plus")

        res = assemble_quote(car, catalog.company_for(car), 2, 100)
        assert res.free_km == 75

    def test_lookup_missing(self):
        catalog = load_catalog(settings.CATALOG_PATH)

        assert catalog.get_car("nope") is None
        assert catalog.get_company("nope") is None

    def test_lookup_every_id(self):
        catalog = load_catalog(settings.CATALOG_PATH)

        for car in catalog.cars:
            assert catalog.get_car(car.id) is car
        for company in catalog.companies:
            assert catalog.get_company(company.id) is company
        assert set(catalog.companies_by_id) == {company.id for company in catalog.companies}


class TestCatalogValidation:

    def test_valid_file(self, tmp_path):
        catalog = load_catalog(_write(tmp_path, {"companies": [COMPANY], "cars": [CAR]}))

        assert catalog.get_car("acme-1").pricing.week is None
        assert catalog.get_company("acme").free_km_policy.daily == 40

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_unknown_company(self, tmp_path):
        car = dict(CAR, company="ghost")
        with pytest.raises(CatalogError):
            load_catalog(_write(tmp_path, {"companies": [COMPANY], "cars": [car]}))

    def test_duplicate_car(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(_write(tmp_path, {"companies": [COMPANY], "cars": [CAR, CAR]}))

    def test_policy_kind_typo(self, tmp_path):
        company = dict(COMPANY, free_km_policy={"dialy": 40})
        with pytest.raises(CatalogError):
            load_catalog(_write(tmp_path, {"companies": [company], "cars": [CAR]}))

    @pytest.mark.parametrize("pricing", [{"hour": 0, "day": 30}, {"hour": 5, "day": -1}, {"hour": 5}])
    def test_invalid_rates(self, tmp_path, pricing):
        car = dict(CAR, pricing=pricing)
        with pytest.raises(CatalogError):
            load_catalog(_write(tmp_path, {"companies": [COMPANY], "cars": [car]}))
