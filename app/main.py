"""FastAPI application — main entry point."""

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import make_url

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import AppError, global_exception_handler, validation_exception_handler

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User
from app.domain.models.admin_record import AdminRecord
from app.domain.models.site_setting import SiteSetting
from app.domain.models.event import Event
from app.domain.models.news_post import NewsPost
from app.domain.models.menu_item import MenuItem
from app.domain.models.donation import Donation
from app.domain.models.subscriber import Subscriber

# Import routers
from app.interfaces.api.auth import router as auth_router
from app.interfaces.api.events import router as events_router
from app.interfaces.api.news import router as news_router
from app.interfaces.api.menu import router as menu_router
from app.interfaces.api.donations import router as donations_router
from app.interfaces.api.outreach import router as outreach_router
from app.interfaces.api.site import router as site_router
from app.interfaces.api.admin import router as admin_router
from app.interfaces.api.uploads import router as uploads_router
from app.interfaces.webhooks.razorpay import router as razorpay_webhook_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


def _ensure_sqlite_directory() -> None:
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)


def _bootstrap_admin() -> None:
    """Run the one-time admin setup from configuration, if requested."""
    if not (settings.BOOTSTRAP_ADMIN_EMAIL and settings.BOOTSTRAP_ADMIN_PASSWORD):
        return

    from app.infrastructure.database import SessionLocal
    from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
    from app.application.services.auth_service import setup_first_admin

    db = SessionLocal()
    try:
        repo = SQLAlchemyUserRepository(db, User)
        if repo.is_setup_completed():
            return
        email = settings.BOOTSTRAP_ADMIN_EMAIL
        setup_first_admin(repo, email.split("@")[0], email, settings.BOOTSTRAP_ADMIN_PASSWORD)
        logger.info("Bootstrap admin created", email=email)
    except AppError as e:
        logger.warning("Bootstrap admin skipped", email=settings.BOOTSTRAP_ADMIN_EMAIL, error=e.message)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting nonprofit site API...", env=settings.ENVIRONMENT)

    # Create DB tables (no migrations tool; schema is created in place)
    _ensure_sqlite_directory()
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    _bootstrap_admin()

    yield

    logger.info("Nonprofit site API stopped")


app = FastAPI(
    title="Nonprofit Site API",
    description="Content, newsletter and donation backend for the public site and admin dashboard",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Global Exception Handling
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Uploaded images
os.makedirs(settings.MEDIA_DIR, exist_ok=True)
app.mount(settings.MEDIA_URL_PREFIX, StaticFiles(directory=settings.MEDIA_DIR), name="media")

# Include routers
app.include_router(auth_router)
app.include_router(events_router)
app.include_router(news_router)
app.include_router(menu_router)
app.include_router(donations_router)
app.include_router(outreach_router)
app.include_router(site_router)
app.include_router(admin_router)
app.include_router(uploads_router)
app.include_router(razorpay_webhook_router)


@app.get("/")
def root():
    return {
        "name": "Nonprofit Site API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
