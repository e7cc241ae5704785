from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from config.database import Base
from config.column_types import StringArray, Document
from datetime import datetime


class MeatHouse(Base):
    __tablename__ = "meat_houses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String, nullable=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=True, index=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    meat_types = Column(StringArray, nullable=False, default=list)
    slaughter_methods = Column(StringArray, nullable=False, default=list)
    business_hours = Column(Document, nullable=True)
    social_media = Column(Document, nullable=True)
    wholesale_available = Column(Boolean, nullable=True)
    retail_available = Column(Boolean, nullable=True)
    ratings = Column(Document, nullable=True)
    reviews = Column(Document, nullable=True)
    images = Column(StringArray, nullable=False, default=list)
    last_updated = Column(DateTime, nullable=True)
    additional_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    address = relationship("Address", back_populates="meat_houses")

    def __repr__(self):
        return f"<MeatHouse(id={self.id}, name={self.name})>"
