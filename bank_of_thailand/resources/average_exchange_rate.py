"""
Average exchange rates of commercial banks (THB / foreign currency).

Covers 19 foreign currencies. Without ``currency`` every currency is
returned.
"""

from typing import Optional

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource, compact_params


class AverageExchangeRate(BaseResource):
    """Average buying/selling rates of commercial banks in Thailand."""

    name = "average_exchange_rate"
    BASE_URL = "https://gateway.api.bot.or.th/Stat-ExchangeRate/v2"
    OPERATIONS = ("daily", "monthly", "quarterly", "annual")

    def daily(
        self,
        start_period: str,
        end_period: str,
        currency: Optional[str] = None,
    ) -> Response:
        """
        Fetch daily average rates.

        Args:
            start_period: First day (YYYY-MM-DD)
            end_period: Last day (YYYY-MM-DD)
            currency: ISO currency code, e.g. "USD" (optional)
        """
        return self._fetch("/DAILY_AVG_EXG_RATE/", start_period, end_period, currency)

    def monthly(
        self,
        start_period: str,
        end_period: str,
        currency: Optional[str] = None,
    ) -> Response:
        return self._fetch("/MONTHLY_AVG_EXG_RATE/", start_period, end_period, currency)

    def quarterly(
        self,
        start_period: str,
        end_period: str,
        currency: Optional[str] = None,
    ) -> Response:
        return self._fetch("/QUARTERLY_AVG_EXG_RATE/", start_period, end_period, currency)

    def annual(
        self,
        start_period: str,
        end_period: str,
        currency: Optional[str] = None,
    ) -> Response:
        return self._fetch("/ANNUAL_AVG_EXG_RATE/", start_period, end_period, currency)

    def _fetch(
        self,
        path: str,
        start_period: str,
        end_period: str,
        currency: Optional[str],
    ) -> Response:
        params = compact_params(
            start_period=start_period,
            end_period=end_period,
            currency=currency,
        )
        return self._get(path, params)
