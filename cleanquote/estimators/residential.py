"""
Residential estimator: homes and apartments.

Order matters; each step feeds the next:
  travel band -> sqft tier -> move-out -> room adjustment -> clean level
  -> add-ons + travel -> after-hours -> labor guardrail -> round.

The guardrail is a hard bound: whatever the tier math says, the price
ends up between 1.3x and 2.6x the labor cost implied by square footage.
"""

from typing import Optional

from ..catalog import PricingCatalog, CleanLevel, ServiceKind, DEFAULT_CATALOG
from .base import BaseEstimator
from .contracts import DeclineReason, EstimateResult, ResidentialMeta, ResidentialRequest
from .helpers import clamp, resolve_tier, round_half_up, round_to_tenth


class ResidentialEstimator(BaseEstimator):

    SQFT_PER_BEDROOM = 700
    BATHS_PER_BEDROOM = 0.75

    # Room-count adjustment: extra rooms cost more than missing rooms save
    EXTRA_BED = 15
    MISSING_BED = 10
    EXTRA_BATH = 20
    MISSING_BATH = 15
    ADJ_MIN = -60
    ADJ_MAX = 90

    # Labor guardrail
    SQFT_PER_HOUR = {ServiceKind.STANDARD: 650, ServiceKind.DEEP: 500}
    LEVEL_HOURS_MULT = {
        CleanLevel.LIGHT: 0.9,
        CleanLevel.STANDARD: 1.0,
        CleanLevel.HEAVY: 1.2,
        CleanLevel.DEEP_RESET: 1.35,
    }
    GUARDRAIL_LOW = 1.3
    GUARDRAIL_HIGH = 2.6

    def estimate(self, request: ResidentialRequest) -> EstimateResult:
        fee = self.travel_fee(request.miles)
        if fee is None:
            return self.decline(DeclineReason.OUT_OF_RANGE, miles=request.miles)

        base = resolve_tier(request.sqft, self.catalog.tiers_for(request.kind))
        if base is None:
            return self.decline(DeclineReason.CUSTOM_QUOTE, sqft=request.sqft, kind=request.kind.value)

        if request.is_move_out:
            base = self.move_out_base(base, request.kind)

        expected_beds, expected_baths = self.expected_rooms(request.sqft)
        adj = self.room_adjustment(request.beds - expected_beds, request.baths - expected_baths)

        price = base + adj
        price *= self.catalog.clean_level_multiplier[request.clean_level]
        # add-ons and travel are not scaled by the clean level
        price += request.add_ons_total + fee
        price = self.apply_after_hours(price, request.after_hours)

        hours = self.labor_hours(request.sqft, request.kind, request.clean_level)
        labor = hours * self.catalog.hourly.default
        price = clamp(price, labor * self.GUARDRAIL_LOW, labor * self.GUARDRAIL_HIGH)

        return self.accept(price, ResidentialMeta(
            expected_beds=expected_beds,
            expected_baths=expected_baths,
            adj=adj,
            travel_fee=fee,
            hours=round_to_tenth(hours),
        ))

    def move_out_base(self, base: float, kind: ServiceKind) -> float:
        """Inflate the tier base and enforce the move-out floor."""
        rule = self.catalog.move_out
        if kind == ServiceKind.DEEP:
            return max(rule.min_deep, base * rule.deep_mult)
        return max(rule.min_standard, base * rule.standard_mult)

    def expected_rooms(self, sqft: float) -> tuple[int, int]:
        beds = max(1, round_half_up(sqft / self.SQFT_PER_BEDROOM))
        baths = max(1, round_half_up(beds * self.BATHS_PER_BEDROOM))
        return beds, baths

    def room_adjustment(self, bed_diff: int, bath_diff: int) -> float:
        adj = bed_diff * (self.EXTRA_BED if bed_diff >= 0 else self.MISSING_BED)
        adj += bath_diff * (self.EXTRA_BATH if bath_diff >= 0 else self.MISSING_BATH)
        return clamp(adj, self.ADJ_MIN, self.ADJ_MAX)

    def labor_hours(self, sqft: float, kind: ServiceKind, clean_level: CleanLevel) -> float:
        return sqft / self.SQFT_PER_HOUR[kind] * self.LEVEL_HOURS_MULT[clean_level]


def estimate_residential(request: ResidentialRequest,
                         catalog: Optional[PricingCatalog] = None) -> EstimateResult:
    """Price a residential request against the given catalog (default: DEFAULT_CATALOG)."""
    return ResidentialEstimator(catalog or DEFAULT_CATALOG).estimate(request)
