"""Interbank transaction rates."""

from typing import Optional

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource, compact_params


class InterbankRate(BaseResource):
    """Interbank transaction rates by term (e.g. "O/N")."""

    name = "interbank_rate"
    BASE_URL = "https://gateway.api.bot.or.th/Stat-InterbankTransactionRate/v2/INTRBNK_TXN_RATE"
    OPERATIONS = ("rates",)

    def rates(
        self,
        start_period: str,
        end_period: str,
        term_type: Optional[str] = None,
    ) -> Response:
        return self._get(
            "/",
            compact_params(
                start_period=start_period,
                end_period=end_period,
                term_type=term_type,
            ),
        )
