"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from atlas.config import settings
from atlas.database import Base, engine

# Import routers
from atlas.routers import admin, contributions, entities

# Import all models so Base.metadata knows about them
from atlas.models.contribution import Contribution              # noqa: F401
from atlas.models.region import Region                          # noqa: F401
from atlas.models.country import Country                        # noqa: F401
from atlas.models.ethnic_group import EthnicGroup, EthnicGroupPresence  # noqa: F401

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="African Ethnicities API",
    description="Regions, countries and ethnic groups of Africa, plus crowdsourced contributions under admin moderation",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(contributions.router, prefix="/api/contributions", tags=["Contributions"])
app.include_router(entities.router, prefix="/api/contributions/entities", tags=["Entities"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    if settings.ADMIN_SESSION_SECRET == "default-secret-change-in-production":
        logger.warning("ADMIN_SESSION_SECRET is the default value; set it before deploying")


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
