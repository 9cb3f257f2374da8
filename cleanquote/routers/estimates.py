"""
Instant estimate endpoints.

Declines (out of range, custom quote) are normal answers and come back
as 200 with ok=false. Only malformed input is an HTTP error.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..catalog import (
    DEFAULT_CATALOG, AddOnCategory, BusinessType, CleanLevel, Frequency, PricingCatalog, ServiceKind,
)
from ..estimators import CommercialRequest, ResidentialRequest
from ..estimators.registry import get_estimator
from ..geo import nearest_home_base

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimates", tags=["estimates"])


def get_catalog() -> PricingCatalog:
    """Catalog dependency: override in tests to price against another revision."""
    return DEFAULT_CATALOG


def resolve_miles(body: schemas.EstimateInputBase) -> float:
    """Explicit miles first, then distance from coordinates, else 0 (MVP manual entry)."""
    if body.miles is not None:
        return body.miles
    if body.coordinates is not None:
        nearest = nearest_home_base(body.coordinates)
        logger.info(f"Resolved {body.coordinates} to {nearest.distance} mi from {nearest.base_name}")
        return nearest.distance
    return 0.0


def resolve_add_ons_total(body: schemas.EstimateInputBase, category: AddOnCategory,
                          catalog: PricingCatalog) -> float:
    if body.add_ons_total is not None:
        return body.add_ons_total
    try:
        return catalog.add_ons_total(category, body.add_ons)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _respond(result, miles: float, add_ons_total: float) -> schemas.EstimateOut:
    return schemas.EstimateOut(**result.to_dict(), miles=miles, add_ons_total=add_ons_total)


@router.get("/catalog", response_model=schemas.CatalogOut)
def read_catalog(catalog: PricingCatalog = Depends(get_catalog)):
    """Read-only view of the options a booking form needs."""
    return schemas.CatalogOut(
        service_radius_miles=catalog.service_radius_miles,
        home_base_zips=list(catalog.home_base_zips),
        add_ons={
            category.value: [
                schemas.AddOnOut(key=a.key, label=a.label, price=a.price)
                for a in catalog.add_ons_for(category)
            ]
            for category in AddOnCategory
        },
        clean_levels=[m.value for m in CleanLevel],
        kinds=[m.value for m in ServiceKind],
        business_types=[m.value for m in BusinessType],
        frequencies=[m.value for m in Frequency],
    )


@router.post("/residential", response_model=schemas.EstimateOut)
def estimate_residential(body: schemas.ResidentialEstimateIn,
                         catalog: PricingCatalog = Depends(get_catalog)):
    miles = resolve_miles(body)
    add_ons_total = resolve_add_ons_total(body, AddOnCategory.RESIDENTIAL, catalog)
    try:
        request = ResidentialRequest(
            sqft=body.sqft,
            beds=body.beds,
            baths=body.baths,
            clean_level=body.clean_level,
            kind=body.kind,
            is_move_out=body.is_move_out,
            add_ons_total=add_ons_total,
            miles=miles,
            after_hours=body.after_hours,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = get_estimator("residential", catalog).estimate(request)
    return _respond(result, miles, add_ons_total)


@router.post("/commercial", response_model=schemas.EstimateOut)
def estimate_commercial(body: schemas.CommercialEstimateIn,
                        catalog: PricingCatalog = Depends(get_catalog)):
    miles = resolve_miles(body)
    add_ons_total = resolve_add_ons_total(body, AddOnCategory.COMMERCIAL, catalog)
    try:
        request = CommercialRequest(
            sqft=body.sqft,
            restrooms=body.restrooms,
            business_type=body.business_type,
            frequency=body.frequency,
            add_ons_total=add_ons_total,
            miles=miles,
            after_hours=body.after_hours,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = get_estimator("commercial", catalog).estimate(request)
    return _respond(result, miles, add_ons_total)
