"""Loan interest rates (MOR, MLR, MRR) of commercial banks."""

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource


class LoanRate(BaseResource):
    name = "loan_rate"
    BASE_URL = "https://gateway.api.bot.or.th/LoanRate/v2"
    OPERATIONS = ("rates", "average_rates")

    def rates(self, start_period: str, end_period: str) -> Response:
        return self._get(
            "/loan_rate/",
            {"start_period": start_period, "end_period": end_period},
        )

    def average_rates(self, start_period: str, end_period: str) -> Response:
        return self._get(
            "/avg_loan_rate/",
            {"start_period": start_period, "end_period": end_period},
        )
