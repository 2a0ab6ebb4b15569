"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import admins, auth, farmers, investors
from src.config import get_settings
from src.exceptions import AppError, InternalError
from src.schemas.envelope import error

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting accounts API ({settings.environment})")
    yield


app = FastAPI(
    title="Agri Accounts API",
    description="Registration, authentication and account management for farmers and investors",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def validation_errors_by_field(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group pydantic errors as ``{field: [messages]}``, keeping every error."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        # loc is ("body", "email") for JSON bodies; drop the source prefix
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return errors


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    detail = None
    if isinstance(exc, InternalError) and settings.show_error_details:
        detail = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content=error(exc.message, errors=exc.errors, detail=detail),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error("Validation failed", errors=validation_errors_by_field(exc)),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    detail = str(exc) if settings.show_error_details else None
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error(InternalError.default_message, detail=detail),
    )


# Register routers
app.include_router(auth.router)
app.include_router(admins.router)
app.include_router(farmers.router)
app.include_router(investors.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
