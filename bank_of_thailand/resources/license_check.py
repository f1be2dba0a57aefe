"""
BOT license check.

Look up institutions and persons authorized by the Bank of Thailand and
the licenses they hold.
"""

from typing import Optional

from bank_of_thailand.domain.response import Response
from bank_of_thailand.resources.base import BaseResource, compact_params


class LicenseCheck(BaseResource):
    """Authorized-entity search and license details."""

    name = "license_check"
    BASE_URL = "https://gateway.api.bot.or.th/BotLicenseCheckAPI"
    OPERATIONS = ("search_authorized", "license", "authorized_detail")

    def search_authorized(
        self,
        keyword: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Response:
        """
        Search authorized entities by name.

        Args:
            keyword: Name or part of a name
            page: Page number (optional)
            limit: Results per page (optional)
        """
        return self._get(
            "/SearchAuthorized",
            compact_params(keyword=keyword, page=page, limit=limit),
        )

    def license(self, auth_id: str, doc_id: str) -> Response:
        """Fetch one license document of an authorized entity."""
        return self._get("/License", {"authId": auth_id, "docId": doc_id})

    def authorized_detail(self, id: str) -> Response:
        return self._get("/AuthorizedDetail", {"id": id})
