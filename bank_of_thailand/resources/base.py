"""
Base class for all API resources.

A resource maps named operations onto a BOT gateway product: a URL under
``BASE_URL`` plus query parameters. Resources hold no state beyond the
client they call through and return ``Response`` objects.
"""

from typing import TYPE_CHECKING, Any, Optional

from bank_of_thailand.core.logging import LoggerMixin
from bank_of_thailand.domain.response import Response

if TYPE_CHECKING:
    from bank_of_thailand.client import BOTClient


def compact_params(**params: Any) -> dict[str, Any]:
    """Drop optional parameters that were not given."""
    return {key: value for key, value in params.items() if value is not None}


class BaseResource(LoggerMixin):
    """
    Abstract base class for API resources.

    Subclasses set:
    - name: Registry key and client attribute name
    - BASE_URL: Absolute URL of the API product
    - OPERATIONS: Public operation names (for listings)
    """

    name: str = "base"
    BASE_URL: str = ""
    OPERATIONS: tuple[str, ...] = ()

    def __init__(self, client: "BOTClient"):
        self.client = client

    def _url(self, path: str = "/") -> str:
        return f"{self.BASE_URL}{path}"

    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> Response:
        """GET ``BASE_URL + path``."""
        return self.client.get(self._url(path), params or {})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.BASE_URL!r})"
