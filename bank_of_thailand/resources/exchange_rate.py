"""
Weighted-average interbank exchange rate (THB / USD).

Reference rates published daily by the BOT, also available aggregated by
month, quarter and year.
"""

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource


class ExchangeRate(BaseResource):
    """
    THB/USD reference rate.

    Period formats: ``YYYY-MM-DD`` (daily), ``YYYY-MM`` (monthly),
    ``YYYY-QN`` (quarterly), ``YYYY`` (annual).
    """

    name = "exchange_rate"
    BASE_URL = "https://gateway.api.bot.or.th/Stat-ReferenceRate/v2"
    OPERATIONS = ("daily", "monthly", "quarterly", "annual")

    def daily(self, start_period: str, end_period: str) -> Response:
        """
        Fetch daily reference rates.

        Args:
            start_period: First day (YYYY-MM-DD)
            end_period: Last day (YYYY-MM-DD)

        Returns:
            Response whose data holds one record per business day
        """
        return self._get(
            "/DAILY_REF_RATE/",
            {"start_period": start_period, "end_period": end_period},
        )

    def monthly(self, start_period: str, end_period: str) -> Response:
        return self._get(
            "/MONTHLY_REF_RATE/",
            {"start_period": start_period, "end_period": end_period},
        )

    def quarterly(self, start_period: str, end_period: str) -> Response:
        return self._get(
            "/QUARTERLY_REF_RATE/",
            {"start_period": start_period, "end_period": end_period},
        )

    def annual(self, start_period: str, end_period: str) -> Response:
        return self._get(
            "/ANNUAL_REF_RATE/",
            {"start_period": start_period, "end_period": end_period},
        )
