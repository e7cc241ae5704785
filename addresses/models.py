from sqlalchemy import Column, Integer, String, DateTime, Float
from sqlalchemy.orm import relationship
from config.database import Base
from datetime import datetime


class Address(Base):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    zip_code = Column(String, nullable=False)
    country = Column(String, nullable=False, default="USA")
    lat = Column(Float(precision=53), nullable=True)
    lng = Column(Float(precision=53), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    restaurants = relationship("Restaurant", back_populates="address")
    stores = relationship("Store", back_populates="address")
    meat_houses = relationship("MeatHouse", back_populates="address")

    def __repr__(self):
        return f"<Address(id={self.id}, city={self.city})>"
