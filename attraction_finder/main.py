"""
FastAPI application entry point for the AI Attraction Finder backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from attraction_finder.config import settings
from attraction_finder.errors import AttractionFinderError
from attraction_finder.routes.attractions import router as attractions_router
from attraction_finder.routes.attractions import to_http_exception
from attraction_finder.routes.geolocation import router as geolocation_router
from attraction_finder.routes.health import router as health_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ORIGINS (explicit list)
    - ENVIRONMENT=testing/development: Allows all origins for local dev

    The browser front end is a static site calling this API cross-origin,
    so production must list its origin explicitly.

    Returns:
        List of allowed origin URLs, or ["*"] for development.
    """
    if settings.is_production():
        origins = [origin.strip() for origin in settings.CORS_ORIGINS if origin.strip()]
        if not origins:
            logger.warning(
                "CORS_ORIGINS not set in production. "
                "No web origins allowed."
            )
        else:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
        return origins

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="AI Attraction Finder API",
    description="Nearby attraction recommendations powered by Gemini with Google Maps grounding",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    This helps diagnose 422 errors from the frontend.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({
            "error": "validation_error",
            "details": exc.errors(),
        })
    )


# Service errors not translated by a route still get the API error shape
@app.exception_handler(AttractionFinderError)
async def attraction_finder_exception_handler(request: Request, exc: AttractionFinderError):
    logger.error(f"Unhandled service error on {request.method} {request.url.path}: {exc.error}")
    http_exc = to_http_exception(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail}
    )


# Configure CORS with environment-based origins
cors_origins = _get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(geolocation_router)
app.include_router(attractions_router)

logger.info("FastAPI app initialized successfully")
