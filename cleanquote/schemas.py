from pydantic import BaseModel, EmailStr, Field, confloat
from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime
from .catalog import DEFAULT_CATALOG, BookingType, BusinessType, CleanLevel, Frequency, ServiceKind
from .estimators.contracts import DeclineReason


# --- Estimates ---

class EstimateInputBase(BaseModel):
    sqft: float = Field(ge=0)
    add_ons: List[str] = []
    add_ons_total: Optional[float] = Field(default=None, ge=0)   # wins over add_ons when set
    miles: Optional[float] = Field(default=None, ge=0)           # wins over coordinates when set
    coordinates: Optional[Tuple[confloat(ge=-180, le=180), confloat(ge=-90, le=90)]] = None  # (lng, lat)
    after_hours: bool = False

    class Config:
        allow_inf_nan = False


class ResidentialEstimateIn(EstimateInputBase):
    beds: int = Field(ge=0)
    baths: int = Field(ge=0)
    clean_level: CleanLevel = CleanLevel.STANDARD
    kind: ServiceKind = ServiceKind.STANDARD
    is_move_out: bool = False


class CommercialEstimateIn(EstimateInputBase):
    restrooms: int = Field(ge=0)
    business_type: BusinessType = BusinessType.OFFICE
    frequency: Frequency = Frequency.WEEKLY


class ResidentialMetaOut(BaseModel):
    expected_beds: int
    expected_baths: int
    adj: float
    travel_fee: float
    hours: float


class EstimateOut(BaseModel):
    ok: bool
    shown: Optional[int] = None
    internal_low: Optional[int] = None
    internal_high: Optional[int] = None
    meta: Optional[ResidentialMetaOut] = None
    reason: Optional[DeclineReason] = None
    # What the engine was actually given after resolving add-ons and distance
    miles: float
    add_ons_total: float


class AddOnOut(BaseModel):
    key: str
    label: str
    price: float


class CatalogOut(BaseModel):
    service_radius_miles: float
    home_base_zips: List[str]
    add_ons: Dict[str, List[AddOnOut]]
    clean_levels: List[str]
    kinds: List[str]
    business_types: List[str]
    frequencies: List[str]


# --- Bookings ---

class CustomerIn(BaseModel):
    name: str = Field(min_length=2)
    phone: str = Field(min_length=7)
    email: EmailStr


class BookingCreate(BaseModel):
    booking_type: BookingType
    address_text: str = Field(min_length=5)
    distance_miles: Optional[float] = Field(default=None, ge=0, le=DEFAULT_CATALOG.service_radius_miles)
    scheduled_date: Optional[str] = None
    scheduled_window: Optional[str] = None

    estimate_shown: int = Field(ge=0)
    internal_low: Optional[int] = Field(default=None, ge=0)
    internal_high: Optional[int] = Field(default=None, ge=0)

    input: Dict[str, Any]
    customer: CustomerIn


class BookingCreated(BaseModel):
    ok: bool = True
    id: int


class Booking(BaseModel):
    id: int
    created_at: datetime
    booking_type: str
    address_text: str
    distance_miles: Optional[float] = None
    scheduled_date: Optional[str] = None
    scheduled_window: Optional[str] = None
    estimate_shown: int
    internal_low: Optional[int] = None
    internal_high: Optional[int] = None
    status: str
    class Config:
        from_attributes = True
