import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from uptime_dashboard.api.v1.router import api_router
from uptime_dashboard.core.exceptions import EntityValidationError
from uptime_dashboard.core.log_config import setup_logging
from uptime_dashboard.core.settings import settings
from uptime_dashboard.core.store import build_record_store
from uptime_dashboard.schemas.response import ErrorResponse, Messages
from uptime_dashboard.utils.dates import format_timestamp, utcnow

# Setup logging before creating the app
setup_logging(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger = logging.getLogger(__name__)

    # Startup
    logger.info("Uptime Dashboard API starting up...")
    app.state.settings = settings
    if getattr(app.state, "store", None) is None:
        app.state.store = await build_record_store(settings)

    yield

    # Shutdown
    logger.info("Uptime Dashboard API shutting down...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)
app.state.settings = settings
app.state.store = None

# Set all CORS enabled origins
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(EntityValidationError)
async def entity_validation_exception_handler(
    request: Request, exc: EntityValidationError
):
    """Rejected input is the only gateway error that reaches clients"""
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            message=exc.message or Messages.INVALID_REQUEST, errors=exc.errors
        ).model_dump(),
    )


app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "timestamp": format_timestamp(utcnow()),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
