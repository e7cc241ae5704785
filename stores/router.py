from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from addresses.models import Address
from config.database import get_db
from shared_utils.api import CreatedResponse, insert_row, listing_columns, lock_parent, require_fields
from .models import Store
from .schema import StoreCreate, StoreResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/stores")


@router.get("", response_model=List[StoreResponse])
def list_stores(db: Session = Depends(get_db)):
    return db.query(Store).order_by(Store.id).all()


@router.post("", response_model=CreatedResponse)
def create_store(payload: StoreCreate, db: Session = Depends(get_db)):
    require_fields("Name and store type are required", payload.name, payload.store_type)
    lock_parent(db, Address, payload.address_id, "Address not found")

    store_id = insert_row(db, Store(
        **listing_columns(payload),
        store_type=payload.store_type,
        product_categories=payload.product_categories or [],
        delivery_available=payload.delivery_available,
        online_ordering=payload.online_ordering,
    ))
    logger.info(f"Created store {store_id}")

    return CreatedResponse(success=True, message="Store created successfully", id=store_id)
