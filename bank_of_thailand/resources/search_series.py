"""Statistical series search."""

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource


class SearchSeries(BaseResource):
    """Find series codes by keyword."""

    name = "search_series"
    BASE_URL = "https://gateway.api.bot.or.th/search-series"
    OPERATIONS = ("search",)

    def search(self, keyword: str) -> Response:
        """
        Search series metadata.

        Args:
            keyword: Free text, e.g. "government debt"
        """
        return self._get("/", {"keyword": keyword})
