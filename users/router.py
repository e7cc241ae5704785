from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from config.database import get_db
from organizations.models import Organization
from shared_utils.api import CreatedResponse, StatusResponse, insert_row, lock_parent, require_fields
from .models import User
from .schema import UserWrite, UserResponse
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users")


@router.get("", response_model=List[UserResponse])
def list_users(
    organization_id: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """
    All users with their organization's name. `?organization_id=` with an
    empty value is the same as no filter.
    """
    organization_filter = None
    if organization_id not in (None, ""):
        try:
            organization_filter = int(organization_id)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="organization_id must be an integer",
            )

    query = (
        db.query(User, Organization.name)
        .outerjoin(Organization, User.organization_id == Organization.id)
    )
    if organization_filter is not None:
        query = query.filter(User.organization_id == organization_filter)

    return [
        UserResponse(
            id=user.id,
            username=user.username,
            organization_id=user.organization_id,
            organization_name=organization_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        for user, organization_name in query.order_by(User.id).all()
    ]


@router.post("", response_model=CreatedResponse)
def create_user(payload: UserWrite, db: Session = Depends(get_db)):
    require_fields("Username is required", payload.username)
    lock_parent(db, Organization, payload.organization_id, "Organization not found")

    user_id = insert_row(db, User(
        username=payload.username,
        organization_id=payload.organization_id,
    ))
    logger.info(f"Created user {user_id}")

    return CreatedResponse(success=True, message="User created successfully", id=user_id)


@router.put("/{user_id}", response_model=StatusResponse)
def update_user(user_id: int, payload: UserWrite, db: Session = Depends(get_db)):
    require_fields("Username is required", payload.username)

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    if "organization_id" in payload.model_fields_set:
        lock_parent(db, Organization, payload.organization_id, "Organization not found")
        user.organization_id = payload.organization_id
    user.username = payload.username

    db.commit()
    logger.info(f"Updated user {user_id}")

    return StatusResponse(success=True, message="User updated successfully")


@router.delete("/{user_id}", response_model=StatusResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    db.commit()
    logger.info(f"Deleted user {user_id}")

    return StatusResponse(success=True, message="User deleted successfully")
