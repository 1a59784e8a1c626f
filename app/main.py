from contextlib import asynccontextmanager
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm.exc import StaleDataError

from app.config import settings
from app.api.v1.router import api_router
from app.core.exceptions import ConfigurationError
from app.database import init_db, async_session_factory, get_db_session


logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


async def seed_templates():
    """Insert the built-in one-click templates if they are missing."""
    from app.services.template_service import seed_default_templates

    async with get_db_session() as session:
        await seed_default_templates(session)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
    - Create tables
    - Seed the built-in templates (SEED_DEFAULT_TEMPLATES)
    """
    # Startup
    logger.info("Starting %s v%s", settings.APP_NAME, settings.APP_VERSION)
    await init_db()
    if settings.SEED_DEFAULT_TEMPLATES:
        await seed_templates()

    yield

    # Shutdown
    logger.info("Shutting down...")


OPENAPI_TAGS = [
    {"name": "Inventory Groups", "description": "Storage/line identifier scopes; root of the configuration"},
    {"name": "Task Sequences", "description": "Ordered outbound task sequence per inventory group"},
    {"name": "Pick Strategies", "description": "Pick planning, sorting and loading per inventory group"},
    {"name": "HU Formation", "description": "Handling unit settings, one per pick strategy"},
    {"name": "Work Order Management", "description": "Work order settings, one per pick strategy"},
    {"name": "Stock Allocation", "description": "PICK and PUT slotting strategies per inventory group"},
    {"name": "Task Planning", "description": "Planning-side configuration per inventory group"},
    {"name": "Task Execution", "description": "Execution-side configuration, one per task planning"},
    {"name": "Templates", "description": "One-click configuration templates"},
    {"name": "Setup & Export", "description": "Quick setup and full configuration export"},
    {"name": "Wizard", "description": "Step navigation and draft data"},
]

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Configuration wizard backend for the WMS outbound module.",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=OPENAPI_TAGS,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router
app.include_router(api_router)


def error_response(request: Request, status_code: int, content: dict) -> JSONResponse:
    content = {**content, "path": str(request.url.path), "method": request.method}
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Typed service errors carry their own status code."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(request, exc.status_code, exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are answered with 400 like every other validation failure."""
    return error_response(request, 400, {
        "error": "Invalid request payload",
        "code": "VALIDATION_ERROR",
        "details": {"errors": exc.errors()},
    })


@app.exception_handler(StaleDataError)
async def stale_data_handler(request: Request, exc: StaleDataError):
    """A concurrent request updated the record between read and write."""
    return error_response(request, 409, {
        "error": "The record was modified by another request",
        "code": "VERSION_CONFLICT",
    })


# Global exception handler for anything unexpected
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error_detail = {
        "error": "Internal server error",
        "code": "STORAGE_ERROR",
        "type": type(exc).__name__,
    }
    if settings.DEBUG:
        error_detail["traceback"] = traceback.format_exc()
    return error_response(request, 500, error_detail)


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint with database validation."""
    from sqlalchemy import text
    from datetime import datetime, timezone

    health_status = {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {
            "database": "unknown"
        }
    }

    # Check database connectivity
    try:
        async with async_session_factory() as session:
            result = await session.execute(text("SELECT 1"))
            result.scalar()
            health_status["checks"]["database"] = "connected"
    except Exception as e:
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = f"error: {str(e)}"

    # Return 503 if unhealthy
    if health_status["status"] == "unhealthy":
        return JSONResponse(status_code=503, content=health_status)

    return health_status


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "wizard_steps": settings.WIZARD_STEPS,
    }
