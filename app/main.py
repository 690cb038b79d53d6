"""
Main FastAPI application entry point.
"""

import logging
import sys

from fastapi import FastAPI

from app.config import get_settings
from app.api import router as api_router

settings = get_settings()

# Configure logging so all loggers output to console
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    stream=sys.stdout,
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Short-term-rental launch investment and ROI estimator",
    version=settings.app_version,
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": settings.app_version}
