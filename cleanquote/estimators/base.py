"""
Abstract base class for the booking-type estimators.

Input: a validated request (contracts.py)
Output: Accepted | Declined
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Optional

from ..catalog import DEFAULT_CATALOG, PricingCatalog
from .contracts import Accepted, Declined, DeclineReason, EstimateResult, ResidentialMeta
from .helpers import resolve_travel_fee, round_to_nearest_5

logger = logging.getLogger(__name__)


class BaseEstimator(ABC):
    """Both estimators inherit from this. Stateless apart from the catalog."""

    INTERNAL_BAND = 0.10    # ±10% reference range for internal review

    def __init__(self, catalog: Optional[PricingCatalog] = None):
        self.catalog = catalog or DEFAULT_CATALOG

    @abstractmethod
    def estimate(self, request) -> EstimateResult:
        """Price one request. Never raises for out-of-policy jobs."""
        pass

    # --- Helper methods for both estimators ---

    def travel_fee(self, miles: float) -> Optional[float]:
        return resolve_travel_fee(miles, self.catalog.travel_fee_bands)

    def apply_after_hours(self, price: float, after_hours: bool) -> float:
        if after_hours:
            return price * self.catalog.after_hours_multiplier
        return price

    def decline(self, reason: DeclineReason, **context) -> Declined:
        logger.info(f"{type(self).__name__} declined: {reason.value} {context}")
        return Declined(reason)

    def accept(self, price: float, meta: Optional[ResidentialMeta] = None) -> EstimateResult:
        """
        Round the running price and attach the internal review band.
        A price whose band cannot be represented goes to a custom quote.
        """
        if not math.isfinite(price * (1 + self.INTERNAL_BAND)):
            return self.decline(DeclineReason.CUSTOM_QUOTE, price=price)
        shown = round_to_nearest_5(price)
        return Accepted(
            shown=shown,
            internal_low=round_to_nearest_5(shown * (1 - self.INTERNAL_BAND)),
            internal_high=round_to_nearest_5(shown * (1 + self.INTERNAL_BAND)),
            meta=meta,
        )
