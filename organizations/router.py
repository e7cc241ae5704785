from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from config.database import get_db
from shared_utils.api import CreatedResponse, StatusResponse, insert_row, require_fields
from users.models import User
from .models import Organization
from .schema import OrganizationCreate, OrganizationResponse
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/organizations")


@router.get("", response_model=List[OrganizationResponse])
def list_organizations(db: Session = Depends(get_db)):
    return db.query(Organization).order_by(Organization.id).all()


@router.post("", response_model=CreatedResponse)
def create_organization(payload: OrganizationCreate, db: Session = Depends(get_db)):
    require_fields("Organization name is required", payload.name)

    organization_id = insert_row(db, Organization(name=payload.name))
    logger.info(f"Created organization {organization_id}")

    return CreatedResponse(
        success=True,
        message="Organization created successfully",
        id=organization_id,
    )


@router.delete("/{organization_id}", response_model=StatusResponse)
def delete_organization(organization_id: int, db: Session = Depends(get_db)):
    """
    Refuses while any user still belongs to the organization. The row lock
    keeps a concurrent user insert from slipping in between count and delete.
    """
    db.query(Organization).filter(Organization.id == organization_id).with_for_update().first()

    user_count = db.query(User).filter(User.organization_id == organization_id).count()
    if user_count > 0:
        logger.warning(f"Refused to delete organization {organization_id}: {user_count} users")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete organization with associated users",
        )

    db.query(Organization).filter(Organization.id == organization_id).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Deleted organization {organization_id}")

    return StatusResponse(success=True, message="Organization deleted successfully")
