import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from config.database import Base
from datetime import datetime


class CertificationType(str, enum.Enum):
    HALAL = "HALAL"
    ZABIHAH = "ZABIHAH"


class CertificationStatus(str, enum.Enum):
    CERTIFIED = "CERTIFIED"
    PENDING = "PENDING"
    EXPIRED = "EXPIRED"
    REVOKED = "REVOKED"


class Certifier(Base):
    __tablename__ = "certifiers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    website = Column(String, nullable=True)
    logo_url = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    certification_type = Column(Enum(CertificationType, name="certification_type"), nullable=False)
    certification_since = Column(DateTime, nullable=True)
    last_inspection_date = Column(DateTime, nullable=True)
    certification_expiry = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    entity_certifications = relationship("EntityCertification", back_populates="certifier")

    def __repr__(self):
        return f"<Certifier(id={self.id}, name={self.name})>"


class EntityCertification(Base):
    """
    Links a certifier to any listed business. entity_type is free text
    ("restaurant", "store", "meat_house", ...) so entity_id carries no
    foreign key.
    """
    __tablename__ = "entity_certifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String, nullable=False)
    entity_id = Column(Integer, nullable=False)
    certifier_id = Column(Integer, ForeignKey("certifiers.id"), nullable=True, index=True)
    certification_status = Column(
        Enum(CertificationStatus, name="certification_status"),
        nullable=False,
        default=CertificationStatus.CERTIFIED,
    )
    certified_since = Column(DateTime, nullable=True)
    expires_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    certifier = relationship("Certifier", back_populates="entity_certifications")
