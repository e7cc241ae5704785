from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class UserWrite(BaseModel):
    """
    Body for POST and PUT. On PUT, leaving organization_id out keeps the
    current organization while an explicit null detaches the user.
    """
    username: Optional[str] = None
    organization_id: Optional[int] = None

    class Config:
        extra = "forbid"


class UserResponse(BaseModel):
    id: int
    username: str
    organization_id: Optional[int] = None
    organization_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
