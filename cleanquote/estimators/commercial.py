"""
Commercial estimator: offices, retail, clinics, restaurants.

Straight rate math: sqft x rate x business type, plus restrooms, less the
recurring-frequency discount, plus add-ons and travel. No custom-quote
tier and no labor guardrail.
"""

from typing import Optional

from ..catalog import DEFAULT_CATALOG, PricingCatalog
from .base import BaseEstimator
from .contracts import CommercialRequest, DeclineReason, EstimateResult


class CommercialEstimator(BaseEstimator):

    def estimate(self, request: CommercialRequest) -> EstimateResult:
        fee = self.travel_fee(request.miles)
        if fee is None:
            return self.decline(DeclineReason.OUT_OF_RANGE, miles=request.miles)

        rates = self.catalog.commercial
        price = request.sqft * rates.rate_per_sqft * rates.type_multiplier[request.business_type]
        price += request.restrooms * rates.restroom_fee
        price *= 1 - rates.frequency_discount[request.frequency]
        price += request.add_ons_total + fee
        price = self.apply_after_hours(price, request.after_hours)

        return self.accept(price)


def estimate_commercial(request: CommercialRequest,
                        catalog: Optional[PricingCatalog] = None) -> EstimateResult:
    return CommercialEstimator(catalog or DEFAULT_CATALOG).estimate(request)
