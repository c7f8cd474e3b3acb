from enum import Enum


class CarType(str, Enum):
    SMALL = "small"
    ECONOMY = "economy"
    COMPACT = "compact"
    STANDARD = "standard"
    PREMIUM = "premium"
    VAN = "van"

    def __str__(self):
        return self.value


class Transmission(str, Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"

    def __str__(self):
        return self.value


class FuelType(str, Enum):
    PETROL_DIESEL = "petrol-diesel"
    ELECTRIC = "electric"

    def __str__(self):
        return self.value


class KmPolicyKind(str, Enum):
    STANDARD = "standard"
    QUARTER_HOURLY = "quarter_hourly"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"

    def __str__(self):
        return self.value


class SortOrder(str, Enum):
    PRICE = "price"
    PRICE_DESC = "price-desc"
    COMPANY = "company"
    CAR_TYPE = "car-type"

    def __str__(self):
        return self.value
