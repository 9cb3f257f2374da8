"""
Request and result types for the estimation engine.

Requests are validated when they are built: a malformed request never
reaches an estimator. Results are a closed union, Accepted | Declined.
"""

import enum
import math
from dataclasses import asdict, dataclass
from typing import ClassVar, Optional, Union

from ..catalog import BusinessType, CleanLevel, Frequency, ServiceKind


def _number(name: str, value, integer: bool = False) -> None:
    """Reject non-numbers, bools, NaN, infinities and negatives."""
    kinds = (int,) if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, kinds):
        expected = "an integer" if integer else "a number"
        raise ValueError(f"{name} must be {expected}, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError:
        raise ValueError(f"{name} is too large to price") from None
    if math.isnan(as_float):
        raise ValueError(f"{name} must not be NaN")
    if math.isinf(as_float):
        raise ValueError(f"{name} must be finite, got {value}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def _flag(name: str, value) -> None:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a bool, got {value!r}")


def _coerce(obj, name: str, enum_cls) -> None:
    """Swap a raw string for its enum member on a frozen dataclass."""
    try:
        object.__setattr__(obj, name, enum_cls(getattr(obj, name)))
    except ValueError:
        allowed = [m.value for m in enum_cls]
        raise ValueError(f"{name} must be one of {allowed}, got {getattr(obj, name)!r}") from None


# --- Requests ---

@dataclass(frozen=True)
class ResidentialRequest:
    sqft: float
    beds: int
    baths: int
    clean_level: CleanLevel
    kind: ServiceKind
    is_move_out: bool = False
    add_ons_total: float = 0.0
    miles: float = 0.0
    after_hours: bool = False

    def __post_init__(self):
        _number("sqft", self.sqft)
        _number("beds", self.beds, integer=True)
        _number("baths", self.baths, integer=True)
        _number("add_ons_total", self.add_ons_total)
        _number("miles", self.miles)
        _flag("is_move_out", self.is_move_out)
        _flag("after_hours", self.after_hours)
        _coerce(self, "clean_level", CleanLevel)
        _coerce(self, "kind", ServiceKind)


@dataclass(frozen=True)
class CommercialRequest:
    sqft: float
    restrooms: int
    business_type: BusinessType
    frequency: Frequency
    add_ons_total: float = 0.0
    miles: float = 0.0
    after_hours: bool = False

    def __post_init__(self):
        _number("sqft", self.sqft)
        _number("restrooms", self.restrooms, integer=True)
        _number("add_ons_total", self.add_ons_total)
        _number("miles", self.miles)
        _flag("after_hours", self.after_hours)
        _coerce(self, "business_type", BusinessType)
        _coerce(self, "frequency", Frequency)


# --- Results ---

class DeclineReason(str, enum.Enum):
    OUT_OF_RANGE = "OUT_OF_RANGE"   # farther than the last travel band
    CUSTOM_QUOTE = "CUSTOM_QUOTE"   # larger than the last priced tier


@dataclass(frozen=True)
class ResidentialMeta:
    expected_beds: int
    expected_baths: int
    adj: float
    travel_fee: float
    hours: float


@dataclass(frozen=True)
class Accepted:
    shown: int
    internal_low: int
    internal_high: int
    meta: Optional[ResidentialMeta] = None

    ok: ClassVar[bool] = True

    def to_dict(self) -> dict:
        return {
            "ok": True,
            "shown": self.shown,
            "internal_low": self.internal_low,
            "internal_high": self.internal_high,
            "meta": asdict(self.meta) if self.meta else None,
        }


@dataclass(frozen=True)
class Declined:
    reason: DeclineReason

    ok: ClassVar[bool] = False

    def to_dict(self) -> dict:
        return {"ok": False, "reason": self.reason.value}


EstimateResult = Union[Accepted, Declined]
