"""
Instant estimation engine.

Pure Python math. No I/O, no persistence.
Given a residential or commercial request and the pricing catalog,
produce either a bounded price (Accepted) or a reason the job needs a
human (Declined).
"""

from .contracts import (
    Accepted,
    CommercialRequest,
    Declined,
    DeclineReason,
    EstimateResult,
    ResidentialMeta,
    ResidentialRequest,
)
from .commercial import CommercialEstimator, estimate_commercial
from .residential import ResidentialEstimator, estimate_residential

__all__ = [
    "Accepted",
    "CommercialEstimator",
    "CommercialRequest",
    "Declined",
    "DeclineReason",
    "EstimateResult",
    "ResidentialEstimator",
    "ResidentialMeta",
    "ResidentialRequest",
    "estimate_commercial",
    "estimate_residential",
]
