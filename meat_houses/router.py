from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from addresses.models import Address
from config.database import get_db
from shared_utils.api import CreatedResponse, insert_row, listing_columns, lock_parent, require_fields
from .models import MeatHouse
from .schema import MeatHouseCreate, MeatHouseResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/meat-houses")


@router.get("", response_model=List[MeatHouseResponse])
def list_meat_houses(db: Session = Depends(get_db)):
    return db.query(MeatHouse).order_by(MeatHouse.id).all()


@router.post("", response_model=CreatedResponse)
def create_meat_house(payload: MeatHouseCreate, db: Session = Depends(get_db)):
    # An empty meatTypes list is accepted; only a missing one is rejected
    require_fields("Name and meat types are required", payload.name, payload.meat_types)
    lock_parent(db, Address, payload.address_id, "Address not found")

    meat_house_id = insert_row(db, MeatHouse(
        **listing_columns(payload),
        meat_types=payload.meat_types,
        slaughter_methods=payload.slaughter_methods or [],
        wholesale_available=payload.wholesale_available,
        retail_available=payload.retail_available,
    ))
    logger.info(f"Created meat house {meat_house_id}")

    return CreatedResponse(success=True, message="Meat house created successfully", id=meat_house_id)
