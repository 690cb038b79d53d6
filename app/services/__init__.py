"""
Application services module.
"""

from app.services.exchange_rate import (
    ExchangeRateInfo,
    ExchangeRateService,
    get_exchange_rate_service,
)

__all__ = ["ExchangeRateInfo", "ExchangeRateService", "get_exchange_rate_service"]
