from typing import Any, List, Optional
from shared_utils.api import ListingCreate, ListingResponse
from .models import RestaurantType


class RestaurantCreate(ListingCreate):
    cuisine_types: Optional[List[str]] = None
    specialties: Optional[List[str]] = None
    price_range: Optional[str] = None
    restaurant_type: Optional[RestaurantType] = None
    menu: Optional[Any] = None
    delivery_options: Optional[List[str]] = None
    takeout_available: Optional[bool] = None
    reservations_available: Optional[bool] = None
    has_alcohol: Optional[bool] = None


class RestaurantResponse(ListingResponse):
    cuisine_types: List[str] = []
    specialties: List[str] = []
    price_range: Optional[str] = None
    restaurant_type: Optional[RestaurantType] = None
    menu: Optional[Any] = None
    delivery_options: List[str] = []
    takeout_available: Optional[bool] = None
    reservations_available: Optional[bool] = None
    has_alcohol: bool = False
