"""Debt securities auction results."""

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource


class DebtSecurities(BaseResource):
    """Government bond and BOT bond auction results."""

    name = "debt_securities"
    BASE_URL = "https://gateway.api.bot.or.th/BondAuction/bond_auction_v2"
    OPERATIONS = ("auction_results",)

    def auction_results(self, start_period: str, end_period: str) -> Response:
        """
        Fetch auction results between two dates.

        Args:
            start_period: First auction date (YYYY-MM-DD)
            end_period: Last auction date (YYYY-MM-DD)
        """
        return self._get("/", {"start_period": start_period, "end_period": end_period})
