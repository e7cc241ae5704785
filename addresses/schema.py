from datetime import datetime
from typing import Optional
from shared_utils.api import CamelModel


class AddressCreate(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    class Config:
        extra = "forbid"


class AddressResponse(CamelModel):
    id: int
    street: str
    city: str
    state: str
    zip_code: str
    country: str
    lat: Optional[float] = None
    lng: Optional[float] = None
    created_at: datetime
    updated_at: datetime
