import enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Text, Enum
from sqlalchemy.orm import relationship
from config.database import Base
from config.column_types import StringArray, Document
from datetime import datetime


class RestaurantType(str, enum.Enum):
    CASUAL = "CASUAL"
    FINE_DINING = "FINE_DINING"
    FAST_FOOD = "FAST_FOOD"
    CAFE = "CAFE"


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    external_id = Column(String, nullable=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    address_id = Column(Integer, ForeignKey("addresses.id"), nullable=True, index=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    cuisine_types = Column(StringArray, nullable=False, default=list)
    specialties = Column(StringArray, nullable=False, default=list)
    price_range = Column(String, nullable=True)
    restaurant_type = Column(Enum(RestaurantType, name="restaurant_type"), nullable=True)
    business_hours = Column(Document, nullable=True)
    social_media = Column(Document, nullable=True)
    menu = Column(Document, nullable=True)
    ratings = Column(Document, nullable=True)
    reviews = Column(Document, nullable=True)
    delivery_options = Column(StringArray, nullable=False, default=list)
    takeout_available = Column(Boolean, nullable=True)
    reservations_available = Column(Boolean, nullable=True)
    has_alcohol = Column(Boolean, nullable=False, default=False)
    images = Column(StringArray, nullable=False, default=list)
    last_updated = Column(DateTime, nullable=True)
    additional_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    address = relationship("Address", back_populates="restaurants")

    def __repr__(self):
        return f"<Restaurant(id={self.id}, name={self.name})>"
