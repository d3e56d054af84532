from datetime import datetime, timezone
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Depends, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from slowapi import _rate_limit_exceeded_handler, errors

import config
import commands
from config import Config, get_settings
from core_logic import logger, ObfuscationError, ConfigurationError
from limiter import limiter
from router import api_router

# --- LIFESPAN AND APP SETUP ---

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    try:
        get_settings().validate()
        commands.init_state()

        logger.info("Application started successfully")
        yield

    finally:
        logger.info("Application shutdown complete")

# Main app instance
app = FastAPI(
    title=config.APP_TITLE,
    lifespan=lifespan
)

# --- MIDDLEWARE ---
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(errors.RateLimitExceeded, _rate_limit_exceeded_handler)

# --- EXCEPTION HANDLERS ---

@app.exception_handler(ObfuscationError)
async def obfuscation_error_handler(request: Request, exc: ObfuscationError):
    """Translates engine errors into a JSON body with a stable error code."""
    status_code = status.HTTP_404_NOT_FOUND if isinstance(exc, ConfigurationError) else status.HTTP_400_BAD_REQUEST
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.code}: {exc.detail}")
    return JSONResponse(status_code=status_code, content={"detail": exc.detail, "error": exc.code})

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error", "error": "InternalError"},
    )

# --- ROUTES ---

@app.get("/health")
async def health_check(settings: Config = Depends(get_settings)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_TITLE,
        "profile": commands.get_profile(),
        "prefix_enabled": commands.get_prefix_enabled(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

app.include_router(api_router)
