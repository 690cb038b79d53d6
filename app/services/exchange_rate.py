"""
Exchange rate service.

Fetches the live USD -> CAD rate from the open exchange rate API. Any
failure falls back to the fixed rate from settings, flagged as not live.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import httpx
from dateutil import parser as date_parser

from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


class ExchangeRateError(Exception):
    """Raised internally when the provider response cannot be used."""


@dataclass
class ExchangeRateInfo:
    """A USD -> CAD rate and where it came from."""

    usd_to_cad: float
    is_live: bool
    last_updated: datetime


class ExchangeRateService:
    """Exchange rate client with a fixed-rate fallback."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_url = settings.exchange_rate_api_url
        self.currency = settings.exchange_rate_target_currency
        self.fallback_rate = settings.fallback_exchange_rate
        self.timeout = settings.exchange_rate_timeout_seconds
        self.transport = transport

    def _parse_response(self, data: dict) -> ExchangeRateInfo:
        """
        Extract the target currency rate from a provider payload.

        Raises:
            ExchangeRateError: If the payload is unsuccessful or has no
                usable rate
        """
        if not isinstance(data, dict) or data.get("result") != "success":
            raise ExchangeRateError("API returned unsuccessful result")

        rates = data.get("rates")
        if not isinstance(rates, dict):
            raise ExchangeRateError("API response has no rates table")

        rate = rates.get(self.currency)
        if not isinstance(rate, (int, float)) or isinstance(rate, bool):
            raise ExchangeRateError(f"{self.currency} rate not found in API response")
        if not math.isfinite(rate) or rate <= 0:
            raise ExchangeRateError(f"Invalid {self.currency} rate: {rate}")

        last_updated = datetime.now(timezone.utc)
        raw_updated = data.get("time_last_update_utc")
        if raw_updated:
            try:
                last_updated = date_parser.parse(raw_updated)
            except (TypeError, ValueError, OverflowError):
                logger.warning(f"Unparseable update time from API: {raw_updated}")

        return ExchangeRateInfo(
            usd_to_cad=float(rate),
            is_live=True,
            last_updated=last_updated,
        )

    def _fallback(self) -> ExchangeRateInfo:
        logger.warning(
            f"Using fixed exchange rate ({self.fallback_rate}) due to API failure"
        )
        return ExchangeRateInfo(
            usd_to_cad=self.fallback_rate,
            is_live=False,
            last_updated=datetime.now(timezone.utc),
        )

    async def get_exchange_rate(self) -> ExchangeRateInfo:
        """
        Fetch the current rate. Always fetches; nothing is cached.

        Returns:
            ExchangeRateInfo, live when the API answered with a usable rate
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.api_url)
                response.raise_for_status()
                return self._parse_response(response.json())

        except (httpx.HTTPError, ExchangeRateError, ValueError) as e:
            logger.error(f"Failed to fetch exchange rate: {str(e)}")
            return self._fallback()

    async def get_usd_to_cad_rate(self) -> float:
        """Fetch the current rate as a plain number."""
        info = await self.get_exchange_rate()
        return info.usd_to_cad


# Shared instance for the API layer; the calculators never see it
_exchange_rate_service: Optional[ExchangeRateService] = None


def get_exchange_rate_service() -> ExchangeRateService:
    """Get the exchange rate service singleton."""
    global _exchange_rate_service
    if _exchange_rate_service is None:
        _exchange_rate_service = ExchangeRateService()
    return _exchange_rate_service
