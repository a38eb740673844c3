from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError

from vidtube.config import settings
from vidtube.database import engine
from vidtube.exceptions import AppError, StoreUnavailableError
from vidtube.logger import api_logger, app_logger, db_logger, redis_logger
from vidtube.redis_client import redis_client
from vidtube.routers import comments, likes, playlists, subscriptions, users, videos
from vidtube.schemas.common import ErrorResponse

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production else None,
    openapi_url=f"{settings.api_prefix}/openapi.json",
)

# Configure CORS for local and production
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["*"],
    expose_headers=["*"],
    max_age=600,  # Cache preflight requests for 10 minutes
)

# Add trusted host middleware in production for additional security
if settings.is_production:
    trusted_hosts = [
        origin.replace("https://", "").replace("http://", "")
        for origin in settings.cors_origins
    ]
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=trusted_hosts)

# Include routers
app.include_router(videos.router, prefix=settings.api_prefix, tags=["Videos"])
app.include_router(comments.router, prefix=settings.api_prefix, tags=["Comments"])
app.include_router(likes.router, prefix=settings.api_prefix, tags=["Likes"])
app.include_router(
    subscriptions.router, prefix=settings.api_prefix, tags=["Subscriptions"]
)
app.include_router(playlists.router, prefix=settings.api_prefix, tags=["Playlists"])
app.include_router(users.router, prefix=settings.api_prefix, tags=["Users"])


def error_response(exc: AppError) -> JSONResponse:
    body = ErrorResponse(
        status_code=exc.status_code, message=exc.message, error=exc.kind
    )
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code, content=body.model_dump(), headers=headers
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        api_logger.error(f"{request.method} {request.url.path}: {exc.message}")
    else:
        api_logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.kind}"
        )
    return error_response(exc)


@app.exception_handler(DBAPIError)
async def store_error_handler(request: Request, exc: DBAPIError):
    # Surfaced to the caller as retryable; never retried here
    db_logger.error(f"{request.method} {request.url.path}: store failure: {exc}")
    return error_response(StoreUnavailableError())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'invalid value')}" if location else "Invalid request"
    body = ErrorResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        message=message,
        error="invalid_argument",
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


@app.on_event("startup")
async def startup_event():
    app_logger.info(
        f"Starting {settings.app_name} ({settings.environment}, debug={settings.debug})"
    )

    try:
        with engine.connect():
            db_logger.info("Database reachable")
    except DBAPIError as e:
        db_logger.error(f"Database unreachable at startup: {e}")

    if not redis_client.client:
        redis_logger.warning("Channel count cache disabled")


@app.on_event("shutdown")
async def shutdown_event():
    app_logger.info("Shutting down")
    redis_client.close()


@app.get("/")
async def root():
    return {
        "status": "healthy",
        "app": settings.app_name,
        "environment": settings.environment,
    }


@app.get("/health")
async def health_check():
    """Liveness plus store and cache connectivity."""
    db_status = "connected"
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except DBAPIError as e:
        db_status = f"error: {e}"

    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": "1.0.0",
        "environment": settings.environment,
        "database": db_status,
        "redis": "connected" if redis_client.client else "disconnected",
    }
