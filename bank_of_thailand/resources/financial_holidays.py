"""
Financial institutions' holidays.

The API answers with a bare JSON list rather than the usual
``result.data`` envelope; Response handles both.
"""

from typing import Union

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource


class FinancialHolidays(BaseResource):
    """Holiday calendar of Thai financial institutions."""

    name = "financial_holidays"
    BASE_URL = "https://gateway.api.bot.or.th/financial-institutions-holidays"
    OPERATIONS = ("list",)

    def list(self, year: Union[int, str]) -> Response:
        """
        Fetch the holidays of one year.

        Args:
            year: Calendar year, e.g. 2025
        """
        return self._get("/", {"year": str(year)})
