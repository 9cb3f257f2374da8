"""
Estimator registry: maps booking types to estimator classes.
"""

from typing import Optional

from ..catalog import BookingType, PricingCatalog
from .base import BaseEstimator
from .commercial import CommercialEstimator
from .residential import ResidentialEstimator

ESTIMATOR_REGISTRY: dict[BookingType, type] = {
    BookingType.RESIDENTIAL: ResidentialEstimator,
    BookingType.COMMERCIAL: CommercialEstimator,
}


def get_estimator(booking_type: str, catalog: Optional[PricingCatalog] = None) -> BaseEstimator:
    """Returns an estimator for a booking type, or raises ValueError."""
    try:
        key = BookingType(booking_type)
    except ValueError:
        raise ValueError(
            f"No estimator registered for booking type: {booking_type}. "
            f"Available: {list_estimators()}"
        ) from None
    return ESTIMATOR_REGISTRY[key](catalog)


def list_estimators() -> list[str]:
    """List all registered booking types."""
    return [t.value for t in ESTIMATOR_REGISTRY]
