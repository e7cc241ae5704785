from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from config.database import get_db
from shared_utils.api import CreatedResponse, insert_row, require_fields
from .models import Address
from .schema import AddressCreate, AddressResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/addresses")


@router.get("", response_model=List[AddressResponse])
def list_addresses(db: Session = Depends(get_db)):
    return db.query(Address).order_by(Address.id).all()


@router.post("", response_model=CreatedResponse)
def create_address(payload: AddressCreate, db: Session = Depends(get_db)):
    require_fields(
        "All address fields are required",
        payload.street, payload.city, payload.state, payload.zip_code, payload.country,
    )

    address_id = insert_row(db, Address(
        street=payload.street,
        city=payload.city,
        state=payload.state,
        zip_code=payload.zip_code,
        country=payload.country,
        lat=payload.lat,
        lng=payload.lng,
    ))
    logger.info(f"Created address {address_id}")

    return CreatedResponse(success=True, message="Address created successfully", id=address_id)
