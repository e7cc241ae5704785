from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from config.database import get_db
from shared_utils.api import CreatedResponse, insert_row, lock_parent, require_fields
from .models import Certifier, EntityCertification, CertificationStatus
from .schema import (
    CertifierCreate,
    CertifierResponse,
    EntityCertificationCreate,
    EntityCertificationResponse,
)
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# ===================== CERTIFIERS =====================

@router.get("/certifiers", response_model=List[CertifierResponse])
def list_certifiers(db: Session = Depends(get_db)):
    return db.query(Certifier).order_by(Certifier.id).all()


@router.post("/certifiers", response_model=CreatedResponse)
def create_certifier(payload: CertifierCreate, db: Session = Depends(get_db)):
    require_fields("Name and certification type are required", payload.name, payload.certification_type)

    certifier_id = insert_row(db, Certifier(
        name=payload.name,
        website=payload.website,
        logo_url=payload.logo_url,
        contact_email=payload.contact_email,
        contact_phone=payload.contact_phone,
        certification_type=payload.certification_type,
        certification_since=payload.certification_since,
        last_inspection_date=payload.last_inspection_date,
        certification_expiry=payload.certification_expiry,
    ))
    logger.info(f"Created certifier {certifier_id}")

    return CreatedResponse(success=True, message="Certifier created successfully", id=certifier_id)


# ===================== ENTITY CERTIFICATIONS =====================

@router.get("/entity-certifications", response_model=List[EntityCertificationResponse])
def list_entity_certifications(db: Session = Depends(get_db)):
    return db.query(EntityCertification).order_by(EntityCertification.id).all()


@router.post("/entity-certifications", response_model=CreatedResponse)
def create_entity_certification(payload: EntityCertificationCreate, db: Session = Depends(get_db)):
    require_fields(
        "Entity type, entity ID, and certifier ID are required",
        payload.entity_type, payload.entity_id, payload.certifier_id,
    )
    lock_parent(db, Certifier, payload.certifier_id, "Certifier not found")

    certification_id = insert_row(db, EntityCertification(
        entity_type=payload.entity_type,
        entity_id=payload.entity_id,
        certifier_id=payload.certifier_id,
        certification_status=payload.certification_status or CertificationStatus.CERTIFIED,
        certified_since=payload.certified_since,
        expires_at=payload.expires_at,
    ))
    logger.info(
        f"Certified {payload.entity_type} {payload.entity_id} by certifier {payload.certifier_id}"
    )

    return CreatedResponse(
        success=True,
        message="Entity certification created successfully",
        id=certification_id,
    )
