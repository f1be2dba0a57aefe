"""Thai Baht implied interest rates."""

from typing import Optional

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource, compact_params


class ImpliedRate(BaseResource):
    """THB implied interest rates from FX swaps."""

    name = "implied_rate"
    BASE_URL = "https://gateway.api.bot.or.th/Stat-ThaiBahtImpliedInterestRate/v2/THB_IMPL_INT_RATE"
    OPERATIONS = ("rates",)

    def rates(
        self,
        start_period: str,
        end_period: str,
        rate_type: Optional[str] = None,
    ) -> Response:
        """
        Fetch implied rates.

        Args:
            start_period: First day (YYYY-MM-DD)
            end_period: Last day (YYYY-MM-DD)
            rate_type: e.g. "ONSHORE : T/N" (optional)
        """
        return self._get(
            "/",
            compact_params(
                start_period=start_period,
                end_period=end_period,
                rate_type=rate_type,
            ),
        )
