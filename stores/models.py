import enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text, Enum
from sqlalchemy.orm import relationship
from config.database import Base
from config.column_types import StringArray, Document
from datetime import datetime


class StoreType(str, enum.Enum):
    GROCERY = "GROCERY"
    BUTCHER = "BUTCHER"
    SUPERMARKET = "SUPERMARKET"
    SPECIALTY = "SPECIALTY"


class Store(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String, nullable=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=True, index=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    store_type = Column(Enum(StoreType, name="store_type"), nullable=False)
    business_hours = Column(Document, nullable=True)
    social_media = Column(Document, nullable=True)
    product_categories = Column(StringArray, nullable=False, default=list)
    ratings = Column(Document, nullable=True)
    reviews = Column(Document, nullable=True)
    delivery_available = Column(Boolean, nullable=True)
    online_ordering = Column(Boolean, nullable=True)
    images = Column(StringArray, nullable=False, default=list)
    last_updated = Column(DateTime, nullable=True)
    additional_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    address = relationship("Address", back_populates="stores")

    def __repr__(self):
        return f"<Store(id={self.id}, name={self.name})>"
