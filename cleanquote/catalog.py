"""
Pricing catalog: fixed configuration for the instant estimator.

Tiers, multipliers, travel bands and add-on menus. Pure data, no pricing
behavior. Built once at import as DEFAULT_CATALOG and handed to the
estimators; a pricing change means shipping a new catalog, not editing
this one at runtime.

Consistency is checked at construction; a bad table fails at import.
"""

import enum
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .geo import HOME_BASES


class CatalogError(ValueError):
    """Raised when catalog tables are internally inconsistent."""


class BookingType(str, enum.Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class CleanLevel(str, enum.Enum):
    LIGHT = "light"
    STANDARD = "standard"
    HEAVY = "heavy"
    DEEP_RESET = "deepReset"


class ServiceKind(str, enum.Enum):
    STANDARD = "standard"
    DEEP = "deep"


class BusinessType(str, enum.Enum):
    OFFICE = "office"
    RETAIL = "retail"
    CLINIC = "clinic"
    RESTAURANT = "restaurant"


class Frequency(str, enum.Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


class AddOnCategory(str, enum.Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


@dataclass(frozen=True)
class Tier:
    max_sqft: float
    base: Optional[float]  # None = too large to auto-price


@dataclass(frozen=True)
class TravelBand:
    max_miles: float
    fee: float


@dataclass(frozen=True)
class MoveOutRule:
    min_standard: float
    min_deep: float
    standard_mult: float
    deep_mult: float


@dataclass(frozen=True)
class CommercialRates:
    rate_per_sqft: float
    restroom_fee: float
    type_multiplier: Mapping[BusinessType, float]
    frequency_discount: Mapping[Frequency, float]

    def __post_init__(self):
        object.__setattr__(self, "type_multiplier", MappingProxyType(dict(self.type_multiplier)))
        object.__setattr__(self, "frequency_discount", MappingProxyType(dict(self.frequency_discount)))


@dataclass(frozen=True)
class HourlyRates:
    min: float
    default: float
    max: float


@dataclass(frozen=True)
class AddOn:
    key: str
    label: str
    price: float


@dataclass(frozen=True)
class PricingCatalog:
    residential_tiers: Mapping[ServiceKind, tuple]
    clean_level_multiplier: Mapping[CleanLevel, float]
    move_out: MoveOutRule
    commercial: CommercialRates
    travel_fee_bands: tuple
    add_ons: Mapping[AddOnCategory, tuple]
    hourly: HourlyRates
    after_hours_multiplier: float = 1.15
    home_base_zips: tuple = field(default_factory=tuple)

    def __post_init__(self):
        # read-only views
        object.__setattr__(self, "residential_tiers", MappingProxyType(
            {k: tuple(v) for k, v in self.residential_tiers.items()}))
        object.__setattr__(self, "add_ons", MappingProxyType(
            {k: tuple(v) for k, v in self.add_ons.items()}))
        object.__setattr__(self, "clean_level_multiplier", MappingProxyType(
            dict(self.clean_level_multiplier)))
        object.__setattr__(self, "travel_fee_bands", tuple(self.travel_fee_bands))

        self._check_coverage("residential_tiers", self.residential_tiers, ServiceKind)
        self._check_coverage("clean_level_multiplier", self.clean_level_multiplier, CleanLevel)
        self._check_coverage("type_multiplier", self.commercial.type_multiplier, BusinessType)
        self._check_coverage("frequency_discount", self.commercial.frequency_discount, Frequency)
        self._check_coverage("add_ons", self.add_ons, AddOnCategory)

        for kind, tiers in self.residential_tiers.items():
            self._check_tiers(kind, tiers)
        self._check_ascending(
            "travel_fee_bands", [b.max_miles for b in self.travel_fee_bands]
        )
        if not self.travel_fee_bands:
            raise CatalogError("travel_fee_bands must not be empty")

        multipliers = {
            "after_hours_multiplier": self.after_hours_multiplier,
            "move_out.standard_mult": self.move_out.standard_mult,
            "move_out.deep_mult": self.move_out.deep_mult,
            "commercial.rate_per_sqft": self.commercial.rate_per_sqft,
        }
        multipliers.update(
            {f"clean_level_multiplier[{k.value}]": v for k, v in self.clean_level_multiplier.items()}
        )
        multipliers.update(
            {f"type_multiplier[{k.value}]": v for k, v in self.commercial.type_multiplier.items()}
        )
        for name, value in multipliers.items():
            if not value > 0:
                raise CatalogError(f"{name} must be strictly positive, got {value}")

        for freq, discount in self.commercial.frequency_discount.items():
            if not 0 <= discount < 1:
                raise CatalogError(f"frequency_discount[{freq.value}] must be in [0, 1), got {discount}")

        if not self.hourly.min <= self.hourly.default <= self.hourly.max:
            raise CatalogError(f"hourly rates out of order: {self.hourly}")

        for category, items in self.add_ons.items():
            keys = [a.key for a in items]
            if len(keys) != len(set(keys)):
                raise CatalogError(f"duplicate add-on keys in {category.value}: {keys}")
            for a in items:
                if a.price < 0:
                    raise CatalogError(f"add-on {a.key} has negative price {a.price}")

    # --- load-time checks ---

    @staticmethod
    def _check_coverage(name: str, mapping: Mapping, enum_cls) -> None:
        missing = [m.value for m in enum_cls if m not in mapping]
        if missing:
            raise CatalogError(f"{name} is missing entries for: {missing}")

    @staticmethod
    def _check_ascending(name: str, thresholds: list) -> None:
        for prev, cur in zip(thresholds, thresholds[1:]):
            if not cur > prev:
                raise CatalogError(f"{name} thresholds must be strictly ascending: {thresholds}")

    def _check_tiers(self, kind: ServiceKind, tiers: tuple) -> None:
        name = f"residential_tiers[{kind.value}]"
        if not tiers:
            raise CatalogError(f"{name} must not be empty")
        self._check_ascending(name, [t.max_sqft for t in tiers])
        sentinels = [i for i, t in enumerate(tiers) if t.base is None]
        if sentinels != [len(tiers) - 1]:
            raise CatalogError(f"{name} needs exactly one custom-quote tier, and it must be last")

    # --- lookups ---

    def tiers_for(self, kind: ServiceKind) -> tuple:
        return self.residential_tiers[ServiceKind(kind)]

    @property
    def service_radius_miles(self) -> float:
        """Farthest distance that still lands in a travel band."""
        return self.travel_fee_bands[-1].max_miles

    def add_ons_for(self, category: AddOnCategory) -> tuple:
        return self.add_ons[AddOnCategory(category)]

    def add_ons_total(self, category: AddOnCategory, keys: Iterable[str]) -> float:
        """
        Sum the prices of the selected add-ons in a category.
        Duplicate keys count once. Unknown keys raise ValueError.
        """
        menu = {a.key: a.price for a in self.add_ons_for(category)}
        selected = list(dict.fromkeys(keys))
        unknown = [k for k in selected if k not in menu]
        if unknown:
            raise ValueError(
                f"Unknown {AddOnCategory(category).value} add-on(s): {unknown}. "
                f"Available: {list(menu.keys())}"
            )
        return float(sum(menu[k] for k in selected))


DEFAULT_CATALOG = PricingCatalog(
    residential_tiers={
        ServiceKind.STANDARD: (
            Tier(1200, 120),
            Tier(2200, 260),
            Tier(3200, 330),
            Tier(4200, 420),
            Tier(math.inf, None),
        ),
        ServiceKind.DEEP: (
            Tier(1200, 220),
            Tier(2200, 420),
            Tier(3200, 650),
            Tier(4200, 800),
            Tier(math.inf, None),
        ),
    },
    clean_level_multiplier={
        CleanLevel.LIGHT: 0.9,
        CleanLevel.STANDARD: 1.0,
        CleanLevel.HEAVY: 1.25,
        CleanLevel.DEEP_RESET: 1.5,
    },
    move_out=MoveOutRule(min_standard=325, min_deep=425, standard_mult=1.35, deep_mult=1.15),
    commercial=CommercialRates(
        rate_per_sqft=0.14,
        restroom_fee=25,
        type_multiplier={
            BusinessType.OFFICE: 1.0,
            BusinessType.RETAIL: 1.1,
            BusinessType.CLINIC: 1.2,
            BusinessType.RESTAURANT: 1.4,
        },
        frequency_discount={
            Frequency.WEEKLY: 0.10,
            Frequency.BIWEEKLY: 0.05,
            Frequency.MONTHLY: 0.0,
        },
    ),
    travel_fee_bands=(
        TravelBand(15, 0),
        TravelBand(30, 15),
        TravelBand(50, 30),
    ),
    add_ons={
        AddOnCategory.RESIDENTIAL: (
            AddOn("oven", "Inside oven", 25),
            AddOn("fridge", "Inside fridge", 25),
            AddOn("windows", "Interior windows", 35),
            AddOn("baseboards", "Baseboards detail", 40),
            AddOn("petHair", "Pet hair focus", 25),
            AddOn("laundry", "Laundry", 20),
            AddOn("dishes", "Dishes", 20),
        ),
        AddOnCategory.COMMERCIAL: (
            AddOn("sanitization", "High-touch sanitization", 35),
            AddOn("floorScrub", "Floor machine scrub", 75),
            AddOn("trash", "Trash haul-out", 25),
        ),
    },
    hourly=HourlyRates(min=20, default=24, max=28),
    after_hours_multiplier=1.15,
    home_base_zips=tuple(b.zip for b in HOME_BASES),
)
