from typing import List, Optional
from shared_utils.api import ListingCreate, ListingResponse


class MeatHouseCreate(ListingCreate):
    meat_types: Optional[List[str]] = None
    slaughter_methods: Optional[List[str]] = None
    wholesale_available: Optional[bool] = None
    retail_available: Optional[bool] = None


class MeatHouseResponse(ListingResponse):
    meat_types: List[str] = []
    slaughter_methods: List[str] = []
    wholesale_available: Optional[bool] = None
    retail_available: Optional[bool] = None
