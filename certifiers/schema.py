from datetime import datetime
from typing import Optional
from pydantic import PositiveInt, field_validator
from shared_utils.api import CamelModel, blank_to_none
from .models import CertificationType, CertificationStatus


class CertifierCreate(CamelModel):
    name: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    certification_type: Optional[CertificationType] = None
    certification_since: Optional[datetime] = None
    last_inspection_date: Optional[datetime] = None
    certification_expiry: Optional[datetime] = None

    class Config:
        extra = "forbid"

    @field_validator("certification_type", mode="before")
    @classmethod
    def blank_certification_type(cls, value):
        return blank_to_none(value)


class CertifierResponse(CamelModel):
    id: int
    name: str
    website: Optional[str] = None
    logo_url: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    certification_type: CertificationType
    certification_since: Optional[datetime] = None
    last_inspection_date: Optional[datetime] = None
    certification_expiry: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class EntityCertificationCreate(CamelModel):
    entity_type: Optional[str] = None
    entity_id: Optional[PositiveInt] = None
    certifier_id: Optional[PositiveInt] = None
    certification_status: Optional[CertificationStatus] = None
    certified_since: Optional[datetime] = None
    expires_at: Optional[datetime] = None

    class Config:
        extra = "forbid"

    @field_validator("entity_id", "certifier_id", "certification_status", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        # entityId 0 / "" and an empty status are "not given"
        return blank_to_none(value)


class EntityCertificationResponse(CamelModel):
    id: int
    entity_type: str
    entity_id: int
    certifier_id: Optional[int] = None
    certification_status: CertificationStatus
    certified_since: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
