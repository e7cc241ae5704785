from fastapi import FastAPI, Depends
from contextlib import asynccontextmanager
from sqlalchemy import inspect
from sqlalchemy.orm import Session
from config.database import engine, Base, get_db, ping
from config.logging_config import setup_logging
from config.middleware import add_cors_middleware, add_error_handling
from models import TRACKED_TABLES
import organizations.router, users.router, addresses.router, certifiers.router
import meat_houses.router, restaurants.router, stores.router
import assets.router
import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ------------- Logging -------------
setup_logging()
logger = logging.getLogger(__name__)

AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "false").lower() == "true"


# ------------- Lifespan -------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown"""
    logger.info("Halal directory API starting up...")

    if AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")

    yield

    logger.info("Halal directory API shutting down...")
    engine.dispose()


# ------------- Create app -------------
app = FastAPI(title="Halal Directory API", lifespan=lifespan)

# ------------- Errors + CORS -------------
# CORS is registered last so it wraps the error middleware and 500s keep their CORS headers
add_error_handling(app)
add_cors_middleware(app)


# ------------- Health + diagnostics -------------
@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    return {
        "status": "healthy",
        "database_connected": ping(db),
    }


@app.get("/api/check-tables")
def check_tables(db: Session = Depends(get_db)):
    """Which of the tracked tables exist in the connected database right now."""
    existing_tables = set(inspect(db.connection()).get_table_names())
    logger.info(f"Existing tables: {sorted(existing_tables)}")
    return {
        key: table_name in existing_tables
        for key, table_name in TRACKED_TABLES.items()
    }


# ------------- Routers -------------
app.include_router(organizations.router.router, tags=["organizations"])
app.include_router(users.router.router, tags=["users"])
app.include_router(addresses.router.router, tags=["addresses"])
app.include_router(certifiers.router.router, tags=["certifiers"])
app.include_router(meat_houses.router.router, tags=["meat-houses"])
app.include_router(restaurants.router.router, tags=["restaurants"])
app.include_router(stores.router.router, tags=["stores"])

# Must stay last: catches every remaining GET/HEAD path
app.include_router(assets.router.router)
