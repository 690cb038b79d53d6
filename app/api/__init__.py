"""
API routes for the launch estimator.
"""

from fastapi import APIRouter

from app.api import packages, calculations, exchange_rate

router = APIRouter()

# Include sub-routers
router.include_router(packages.router, prefix="/packages", tags=["packages"])
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(
    exchange_rate.router, prefix="/exchange-rate", tags=["exchange-rate"]
)
