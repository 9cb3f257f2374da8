import hmac
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from .. import models, schemas
from ..config import settings
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])

ADMIN_LIST_LIMIT = 50


def require_admin(
    x_admin_token: Optional[str] = Header(default=None),
    token: Optional[str] = Query(default=None),
):
    """Shared-secret check for the admin booking list. Header wins over ?token=."""
    expected = settings.ADMIN_TOKEN
    supplied = x_admin_token or token or ""
    if not expected or not hmac.compare_digest(supplied.encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized. Send X-Admin-Token or ?token=YOUR_ADMIN_TOKEN",
        )


@router.post("/", response_model=schemas.BookingCreated)
def create_booking(booking: schemas.BookingCreate, db: Session = Depends(get_db)):
    """Record a submitted booking with the estimate the customer saw."""
    data = booking.model_dump(mode="json")
    db_booking = models.Booking(
        booking_type=data["booking_type"],
        address_text=data["address_text"],
        distance_miles=data["distance_miles"],
        scheduled_date=data["scheduled_date"],
        scheduled_window=data["scheduled_window"],
        estimate_shown=data["estimate_shown"],
        internal_low=data["internal_low"],
        internal_high=data["internal_high"],
        input=data["input"],
        customer=data["customer"],
        status=models.BookingStatus.PENDING.value,
    )
    db.add(db_booking)
    db.commit()
    db.refresh(db_booking)
    logger.info(
        f"Booking {db_booking.id} recorded: {db_booking.booking_type} "
        f"${db_booking.estimate_shown}"
    )
    return schemas.BookingCreated(id=db_booking.id)


@router.get("/", response_model=List[schemas.Booking], dependencies=[Depends(require_admin)])
def list_bookings(db: Session = Depends(get_db)):
    """Most recent bookings first."""
    return (
        db.query(models.Booking)
        .order_by(models.Booking.created_at.desc(), models.Booking.id.desc())
        .limit(ADMIN_LIST_LIMIT)
        .all()
    )
