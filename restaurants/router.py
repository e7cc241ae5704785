from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from addresses.models import Address
from config.database import get_db
from shared_utils.api import CreatedResponse, insert_row, listing_columns, lock_parent, require_fields
from .models import Restaurant
from .schema import RestaurantCreate, RestaurantResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/restaurants")


@router.get("", response_model=List[RestaurantResponse])
def list_restaurants(db: Session = Depends(get_db)):
    return db.query(Restaurant).order_by(Restaurant.id).all()


@router.post("", response_model=CreatedResponse)
def create_restaurant(payload: RestaurantCreate, db: Session = Depends(get_db)):
    require_fields("Name is required", payload.name)
    lock_parent(db, Address, payload.address_id, "Address not found")

    restaurant_id = insert_row(db, Restaurant(
        **listing_columns(payload),
        cuisine_types=payload.cuisine_types or [],
        specialties=payload.specialties or [],
        price_range=payload.price_range,
        restaurant_type=payload.restaurant_type,
        menu=payload.menu,
        delivery_options=payload.delivery_options or [],
        takeout_available=payload.takeout_available,
        reservations_available=payload.reservations_available,
        has_alcohol=payload.has_alcohol or False,
    ))
    logger.info(f"Created restaurant {restaurant_id}")

    return CreatedResponse(success=True, message="Restaurant created successfully", id=restaurant_id)
