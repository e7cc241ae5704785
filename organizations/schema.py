from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class OrganizationCreate(BaseModel):
    name: Optional[str] = None

    class Config:
        extra = "forbid"


class OrganizationResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
