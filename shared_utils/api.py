"""
Pieces shared by every router: the success envelopes, the required-field
check and the parent-row lookup used before inserts that reference another
table.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel, PositiveInt
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class CamelModel(BaseModel):
    """Directory entities travel as camelCase JSON (zipCode, meatTypes, ...)."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class StatusResponse(BaseModel):
    success: bool
    message: str


class CreatedResponse(StatusResponse):
    id: int


def is_blank(value: Any) -> bool:
    """Missing or empty string. Empty lists and False count as present."""
    return value is None or (isinstance(value, str) and value == "")


def blank_to_none(value: Any) -> Any:
    """
    Before-validator for required enum and id fields: "" and 0 mean "not
    given", so the handler reports its required-field message instead of a
    type error.
    """
    if isinstance(value, bool):
        return value
    if value == "" or value == 0:
        return None
    return value


def require_fields(message: str, *values: Any) -> None:
    """400 with `message` if any of the values is blank."""
    if any(is_blank(value) for value in values):
        logger.warning(f"Validation failed: {message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def lock_parent(db: Session, model, row_id: Optional[int], message: str):
    """
    Fetch the referenced parent row with FOR UPDATE so it cannot be deleted
    before the caller's insert/update commits. 400 with `message` when the
    row does not exist. A None id is a no-op.
    """
    if row_id is None:
        return None
    parent = db.query(model).filter(model.id == row_id).with_for_update().first()
    if parent is None:
        logger.warning(f"Validation failed: {message} (id={row_id})")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return parent


def insert_row(db: Session, row) -> int:
    """Add, commit and return the generated primary key."""
    db.add(row)
    db.commit()
    db.refresh(row)
    return row.id


# ===================== LISTINGS =====================
# Meat houses, restaurants and stores share the business-listing columns.

class ListingCreate(CamelModel):
    external_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    address_id: Optional[PositiveInt] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    business_hours: Optional[Any] = None
    social_media: Optional[Any] = None
    ratings: Optional[Any] = None
    reviews: Optional[Any] = None
    images: Optional[List[str]] = None
    additional_notes: Optional[str] = None

    class Config:
        extra = "forbid"


class ListingResponse(CamelModel):
    id: int
    external_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    address_id: Optional[int] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    business_hours: Optional[Any] = None
    social_media: Optional[Any] = None
    ratings: Optional[Any] = None
    reviews: Optional[Any] = None
    images: List[str] = []
    last_updated: Optional[datetime] = None
    additional_notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


def listing_columns(payload: ListingCreate) -> Dict[str, Any]:
    """Column values common to every listing."""
    return {
        "external_id": payload.external_id,
        "name": payload.name,
        "description": payload.description,
        "address_id": payload.address_id,
        "phone": payload.phone,
        "email": payload.email,
        "business_hours": payload.business_hours,
        "social_media": payload.social_media,
        "ratings": payload.ratings,
        "reviews": payload.reviews,
        "images": payload.images or [],
        "last_updated": datetime.utcnow(),
        "additional_notes": payload.additional_notes,
    }
