"""
Registers every table on Base.metadata. Relationships are declared by class
name, so all model modules have to be imported before the first query;
main.py, alembic/env.py and the test suite import this module for that.
"""
from config.database import Base
from organizations.models import Organization
from users.models import User
from addresses.models import Address
from certifiers.models import Certifier, EntityCertification, CertificationType, CertificationStatus
from meat_houses.models import MeatHouse
from restaurants.models import Restaurant, RestaurantType
from stores.models import Store, StoreType

# Tables reported by /api/check-tables, keyed the way the response names them
TRACKED_TABLES = {
    "addresses": "addresses",
    "certifiers": "certifiers",
    "entityCertifications": "entity_certifications",
    "meatHouses": "meat_houses",
    "restaurants": "restaurants",
    "stores": "stores",
    "users": "users",
}

__all__ = [
    "Base",
    "Organization",
    "User",
    "Address",
    "Certifier",
    "EntityCertification",
    "CertificationType",
    "CertificationStatus",
    "MeatHouse",
    "Restaurant",
    "RestaurantType",
    "Store",
    "StoreType",
    "TRACKED_TABLES",
]
