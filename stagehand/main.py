"""
Stagehand - Main Application Entry Point
Multi-tenant event planning and performer booking
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import structlog

from stagehand.core.config import get_settings
from stagehand.core.errors import register_exception_handlers
from stagehand.api import (
    tenants, users, users_auth, events, venues,
    performers, clients, bookings
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"Starting {settings.APP_NAME} ({settings.ENVIRONMENT})")
    # Schema is managed by Alembic migrations
    yield
    logger.info(f"Shutting down {settings.APP_NAME}")


app = FastAPI(
    title="Stagehand API",
    description="Multi-tenant event planning with performer bookings, run sheets and budgets",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)

register_exception_handlers(app)

prefix = settings.API_V1_PREFIX
app.include_router(tenants.router, prefix=f"{prefix}/tenants", tags=["tenants"])
app.include_router(users_auth.router, prefix=f"{prefix}/auth", tags=["auth"])
app.include_router(users.router, prefix=f"{prefix}/users", tags=["users"])
app.include_router(events.router, prefix=f"{prefix}/events", tags=["events"])
app.include_router(venues.router, prefix=f"{prefix}/venues", tags=["venues"])
app.include_router(performers.router, prefix=f"{prefix}/performers", tags=["performers"])
app.include_router(clients.router, prefix=f"{prefix}/clients", tags=["clients"])
app.include_router(bookings.router, prefix=f"{prefix}/bookings", tags=["bookings"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "stagehand-api"}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Stagehand API",
        "version": "1.0.0",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "stagehand.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level="info",
    )
