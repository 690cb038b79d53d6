"""
Exchange rate API endpoint.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.services.exchange_rate import (
    ExchangeRateService,
    get_exchange_rate_service,
)

router = APIRouter()


class ExchangeRateResponse(BaseModel):
    """Current USD -> CAD rate."""

    usd_to_cad: float
    is_live: bool
    last_updated: datetime


@router.get("", response_model=ExchangeRateResponse)
async def get_exchange_rate(
    service: ExchangeRateService = Depends(get_exchange_rate_service),
):
    """Fetch the current rate, or the fixed fallback when the provider fails."""
    info = await service.get_exchange_rate()
    return ExchangeRateResponse(
        usd_to_cad=info.usd_to_cad,
        is_live=info.is_live,
        last_updated=info.last_updated,
    )
