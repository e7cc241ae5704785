from typing import List, Optional
from pydantic import field_validator
from shared_utils.api import ListingCreate, ListingResponse, blank_to_none
from .models import StoreType


class StoreCreate(ListingCreate):
    store_type: Optional[StoreType] = None
    product_categories: Optional[List[str]] = None
    delivery_available: Optional[bool] = None
    online_ordering: Optional[bool] = None

    @field_validator("store_type", mode="before")
    @classmethod
    def blank_store_type(cls, value):
        return blank_to_none(value)


class StoreResponse(ListingResponse):
    store_type: StoreType
    product_categories: List[str] = []
    delivery_available: Optional[bool] = None
    online_ordering: Optional[bool] = None
