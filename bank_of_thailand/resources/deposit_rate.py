"""Deposit interest rates of commercial banks."""

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource


class DepositRate(BaseResource):
    """Per-bank and average deposit rates."""

    name = "deposit_rate"
    BASE_URL = "https://gateway.api.bot.or.th/DepositRate/v2"
    OPERATIONS = ("rates", "average_rates")

    def rates(self, start_period: str, end_period: str) -> Response:
        """
        Fetch deposit rates for each commercial bank.

        Args:
            start_period: First day (YYYY-MM-DD)
            end_period: Last day (YYYY-MM-DD)
        """
        return self._get(
            "/deposit_rate/",
            {"start_period": start_period, "end_period": end_period},
        )

    def average_rates(self, start_period: str, end_period: str) -> Response:
        """Fetch deposit rates averaged across banks."""
        return self._get(
            "/avg_deposit_rate/",
            {"start_period": start_period, "end_period": end_period},
        )
