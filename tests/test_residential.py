"""
Residential estimator tests.

Tests:
1-5.   Reference scenarios (standard, out of range, custom quote, move-out + guardrail)
6-10.  Step-by-step behavior (move-out floor, room adjustment, add-ons, after-hours)
11-15. Properties over parameter sweeps (determinism, rounding, clamp, guardrail)
16-17. Guardrail discontinuities: documented as observed, not endorsed
18.    Alternate catalog injection
"""

import dataclasses
import itertools

import pytest

from cleanquote.catalog import DEFAULT_CATALOG, CleanLevel, HourlyRates, ServiceKind
from cleanquote.estimators import (
    Accepted,
    Declined,
    DeclineReason,
    ResidentialEstimator,
    ResidentialRequest,
    estimate_residential,
)
from cleanquote.estimators.helpers import round_to_nearest_5


def _request(**overrides):
    """Scenario A defaults: 1500 sqft, 2 bd / 1 ba, standard clean, 10 miles."""
    fields = dict(
        sqft=1500, beds=2, baths=1,
        clean_level="standard", kind="standard",
        is_move_out=False, add_ons_total=0, miles=10, after_hours=False,
    )
    fields.update(overrides)
    return ResidentialRequest(**fields)


def _guardrail(sqft, kind, level):
    est = ResidentialEstimator()
    labor = est.labor_hours(sqft, ServiceKind(kind), CleanLevel(level)) * DEFAULT_CATALOG.hourly.default
    return labor * 1.3, labor * 2.6


# ============================================================
# Reference scenarios
# ============================================================

def test_scenario_a_standard_home():
    result = estimate_residential(_request())
    assert isinstance(result, Accepted)
    assert result.ok is True
    assert result.shown == 145
    assert result.internal_low == 130
    assert result.internal_high == 160
    assert result.meta.hours == 2.3
    assert result.meta.travel_fee == 0
    assert result.meta.expected_beds == 2
    assert result.meta.expected_baths == 2   # round(1.5) -> 2, half-up
    assert result.meta.adj == -15


@pytest.mark.parametrize("overrides", [
    {},
    {"sqft": 5000},
    {"kind": "deep", "is_move_out": True},
    {"clean_level": "deepReset", "after_hours": True, "add_ons_total": 200},
])
def test_scenario_c_out_of_range_regardless_of_other_fields(overrides):
    result = estimate_residential(_request(miles=60, **overrides))
    assert result == Declined(DeclineReason.OUT_OF_RANGE)
    assert result.ok is False


def test_scenario_d_custom_quote():
    result = estimate_residential(_request(sqft=5000))
    assert result == Declined(DeclineReason.CUSTOM_QUOTE)


def test_scenario_d_boundary_largest_tier_accepted():
    assert isinstance(estimate_residential(_request(sqft=4200)), Accepted)
    assert estimate_residential(_request(sqft=4201)) == Declined(DeclineReason.CUSTOM_QUOTE)
    assert isinstance(estimate_residential(_request(sqft=4200, kind="deep")), Accepted)
    assert estimate_residential(_request(sqft=4201, kind="deep")) == Declined(DeclineReason.CUSTOM_QUOTE)


def test_scenario_e_move_out_suppressed_by_guardrail():
    """Deep move-out base 483 - 15 = 468, but labor caps it at 3h * $24 * 2.6 = 187.2."""
    result = estimate_residential(_request(kind="deep", is_move_out=True))
    assert result.shown == 185
    assert result.internal_low == 165
    assert result.internal_high == 205
    assert result.meta.hours == 3.0


def test_travel_band_boundary_at_50_miles():
    at_edge = estimate_residential(_request(miles=50))
    assert isinstance(at_edge, Accepted)
    assert at_edge.meta.travel_fee == 30
    assert estimate_residential(_request(miles=50.01)) == Declined(DeclineReason.OUT_OF_RANGE)


# ============================================================
# Step-by-step behavior
# ============================================================

def test_move_out_floor_and_multiplier():
    est = ResidentialEstimator()
    assert est.move_out_base(120, ServiceKind.STANDARD) == 325           # floor wins
    assert est.move_out_base(420, ServiceKind.STANDARD) == pytest.approx(567)  # 420 * 1.35
    assert est.move_out_base(220, ServiceKind.DEEP) == 425
    assert est.move_out_base(800, ServiceKind.DEEP) == pytest.approx(920)


def test_expected_rooms_minimum_one():
    est = ResidentialEstimator()
    assert est.expected_rooms(0) == (1, 1)
    assert est.expected_rooms(349) == (1, 1)
    assert est.expected_rooms(1050) == (2, 2)    # 1.5 -> 2 beds, 1.5 -> 2 baths
    assert est.expected_rooms(2100) == (3, 2)    # 3 beds, 2.25 -> 2 baths
    assert est.expected_rooms(4200) == (6, 5)    # 4.5 -> 5 baths


def test_room_adjustment_asymmetric():
    est = ResidentialEstimator()
    assert est.room_adjustment(1, 0) == 15
    assert est.room_adjustment(-1, 0) == -10
    assert est.room_adjustment(0, 1) == 20
    assert est.room_adjustment(0, -1) == -15
    assert est.room_adjustment(2, -1) == 15


def test_room_adjustment_clamped():
    est = ResidentialEstimator()
    assert est.room_adjustment(10, 10) == 90
    assert est.room_adjustment(-10, -10) == -60


def test_add_ons_travel_and_after_hours():
    """
    2200 sqft with no beds/baths declared: base 260, adj -60 -> 200, which sits
    inside the labor band [105.6, 211.2]. Everything added on top hits the cap.
    """
    lo, hi = _guardrail(2200, "standard", "standard")
    plain = estimate_residential(_request(sqft=2200, beds=0, baths=0))
    assert lo <= 200 <= hi
    assert plain.meta.adj == -60
    assert plain.shown == 200

    with_add_on = estimate_residential(_request(sqft=2200, beds=0, baths=0, add_ons_total=10))
    assert with_add_on.shown == 210

    # 200 + $15 travel = 215 -> capped at 211.2
    farther = estimate_residential(_request(sqft=2200, beds=0, baths=0, miles=20))
    assert farther.meta.travel_fee == 15
    assert farther.shown == round_to_nearest_5(hi) == 210

    # 200 * 1.15 = 230 -> capped
    late = estimate_residential(_request(sqft=2200, beds=0, baths=0, after_hours=True))
    assert late.shown == round_to_nearest_5(min(230, hi))


# ============================================================
# Properties
# ============================================================

SWEEP = list(itertools.product(
    [0, 300, 800, 1200, 1500, 2200, 3100, 4200],   # sqft
    [0, 2, 9],                                     # beds
    [0, 1, 7],                                     # baths
    list(CleanLevel),
    list(ServiceKind),
    [False, True],                                 # move-out
    [0, 12, 45],                                   # miles
    [False, True],                                 # after hours
))


def test_determinism():
    for sqft, beds, baths, level, kind, move_out, miles, after in SWEEP[::7]:
        req = _request(sqft=sqft, beds=beds, baths=baths, clean_level=level, kind=kind,
                       is_move_out=move_out, miles=miles, after_hours=after)
        assert estimate_residential(req) == estimate_residential(req)


def test_shown_always_multiple_of_5():
    for sqft, beds, baths, level, kind, move_out, miles, after in SWEEP:
        req = _request(sqft=sqft, beds=beds, baths=baths, clean_level=level, kind=kind,
                       is_move_out=move_out, miles=miles, after_hours=after, add_ons_total=37)
        result = estimate_residential(req)
        assert result.shown % 5 == 0
        assert result.internal_low % 5 == 0
        assert result.internal_high % 5 == 0
        assert result.internal_low <= result.shown <= result.internal_high


def test_adjustment_never_leaves_bounds():
    for sqft, beds, baths in itertools.product([300, 1500, 4200], range(0, 20, 3), range(0, 20, 3)):
        result = estimate_residential(_request(sqft=sqft, beds=beds, baths=baths))
        assert -60 <= result.meta.adj <= 90


def test_guardrail_dominates():
    for sqft, beds, baths, level, kind, move_out, miles, after in SWEEP:
        req = _request(sqft=sqft, beds=beds, baths=baths, clean_level=level, kind=kind,
                       is_move_out=move_out, miles=miles, after_hours=after, add_ons_total=500)
        lo, hi = _guardrail(sqft, kind, level)
        shown = estimate_residential(req).shown
        assert round_to_nearest_5(lo) <= shown <= round_to_nearest_5(hi)


def test_zero_sqft_prices_at_zero():
    """No labor hours -> the guardrail collapses to [0, 0]."""
    result = estimate_residential(_request(sqft=0, beds=0, baths=0))
    assert result.shown == 0
    assert result.meta.hours == 0.0


# ============================================================
# Guardrail discontinuities (observed behavior, kept as-is)
# ============================================================

def test_guardrail_makes_move_out_irrelevant_on_mid_size_homes():
    """With the cap in force, move-out adds nothing for a 1500 sqft deep clean."""
    deep = estimate_residential(_request(kind="deep"))
    move_out = estimate_residential(_request(kind="deep", is_move_out=True))
    assert deep.shown == move_out.shown == 185


def test_guardrail_jump_across_tier_boundary():
    """
    Crossing 1200 -> 1201 sqft doubles the standard tier base (120 -> 260),
    but the shown price only moves with labor hours.
    """
    below = estimate_residential(_request(sqft=1200, beds=2, baths=1))
    above = estimate_residential(_request(sqft=1201, beds=2, baths=1))
    assert below.shown == 105    # 120 - 15, inside the band
    assert above.shown == 115    # 260 - 15 = 245, capped at 115.3
    # 500 sqft light clean: tier math says 108, cap is 43.2
    tiny = estimate_residential(_request(sqft=500, beds=1, baths=1, clean_level="light"))
    lo, hi = _guardrail(500, "standard", "light")
    assert tiny.shown == round_to_nearest_5(hi)


# ============================================================
# Catalog injection
# ============================================================

def test_alternate_catalog_changes_price():
    cheaper = dataclasses.replace(DEFAULT_CATALOG, hourly=HourlyRates(min=15, default=20, max=25))
    default = estimate_residential(_request())
    alt = estimate_residential(_request(), catalog=cheaper)
    # guardrail cap: 2.3077h * $20 * 2.6 = 120
    assert alt.shown == 120
    assert default.shown == 145
