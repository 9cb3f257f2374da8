"""
Numeric helpers shared by both estimators.

All rounding in the engine is half-up (2.5 -> 3), never Python's
banker's rounding, so the same inputs always land on the same dollar.
"""

import math
from typing import Optional, Sequence

from ..catalog import Tier, TravelBand


def clamp(value: float, lo: float, hi: float) -> float:
    """Two-sided clamp. Callers guarantee lo <= hi."""
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_to_nearest_5(value: float) -> int:
    """Whole-dollar price, always divisible by 5."""
    return round_half_up(value / 5) * 5


def round_to_tenth(value: float) -> float:
    return round_half_up(value * 10) / 10


def resolve_tier(sqft: float, tiers: Sequence[Tier]) -> Optional[float]:
    """
    Base price of the first tier whose max_sqft covers sqft.
    None means the job needs a custom quote.
    """
    for tier in tiers:
        if sqft <= tier.max_sqft:
            return tier.base
    return None


def resolve_travel_fee(miles: float, bands: Sequence[TravelBand]) -> Optional[float]:
    """Flat fee for the first band covering miles. None = outside service area."""
    for band in bands:
        if miles <= band.max_miles:
            return band.fee
    return None
