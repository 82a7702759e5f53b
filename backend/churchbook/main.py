"""FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError

from churchbook.config import settings
from churchbook.database import Base, engine

# Import routers
from churchbook.routers import (
    users, schedules, bookings, appointments, visits, devotions, dashboard, reminders, notifications,
)

# Import all models so Base.metadata knows about them
from churchbook.models.document import Document  # noqa: F401

logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Church Booking",
    description="Schedules, booking approval, appointments, visits and prayer logs for a church community",
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
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(schedules.router, prefix="/api/schedules", tags=["Schedules"])
app.include_router(bookings.router, prefix="/api/bookings", tags=["Bookings"])
app.include_router(appointments.router, prefix="/api/appointments", tags=["Appointments"])
app.include_router(visits.router, prefix="/api/visits", tags=["Visits"])
app.include_router(devotions.router, prefix="/api/devotions", tags=["Devotions"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(reminders.router, prefix="/api/reminders", tags=["Reminders"])
app.include_router(notifications.router, prefix="/api/notifications", tags=["Notifications"])


@app.exception_handler(StaleDataError)
def stale_data_handler(request: Request, exc: StaleDataError):
    """Another request changed the document first."""
    logger.warning("Concurrent write rejected on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "The record was changed by someone else. Reload and try again."},
    )


@app.exception_handler(SQLAlchemyError)
def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Data store failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Data store unavailable. Please try again later."},
    )


@app.on_event("startup")
def on_startup():
    """Create database tables on startup (for SQLite dev mode)."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
