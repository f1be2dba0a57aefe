"""
Bank of Thailand API client.

Wires settings, the request dispatcher and the endpoint resources together.

Usage:
    settings = load_settings(api_token="your-token")
    with BOTClient(settings) as client:
        rates = client.exchange_rate.daily(
            start_period="2025-01-01",
            end_period="2025-01-31",
        )
        print(rates.average("rate"), rates.trend("rate"))
"""

from typing import Any, Optional

from bank_of_thailand.core.config import Settings, load_settings
from bank_of_thailand.core.http import Failure, HttpClient, Outcome, RequestSpec, unwrap
from bank_of_thailand.core.logging import LoggerMixin
from bank_of_thailand.domain.response import Response
from bank_of_thailand.registry import ResourceRegistry, create_default_registry
from bank_of_thailand.resources import BaseResource


class BOTClient(LoggerMixin):
    """
    Client for the BOT API gateway.

    Resources are built once at construction and exposed as attributes
    named after their registry key (``client.exchange_rate``,
    ``client.financial_holidays``, ...) or through ``resource(name)``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[HttpClient] = None,
        registry: Optional[ResourceRegistry] = None,
        **overrides: Any,
    ):
        """
        Initialize the client.

        Args:
            settings: Client settings. Loaded from the environment if not provided.
            http_client: Dispatcher. Built from settings if not provided.
            registry: Resource registry. Defaults to all built-in resources.
            **overrides: Settings fields to replace, e.g. ``api_token=...``

        Raises:
            BOTError: kind CONFIGURATION if the token or base URL is missing
        """
        base_settings = settings if settings is not None else load_settings()
        self.settings = base_settings.with_overrides(**overrides)
        self.settings.validate_for_requests()

        self.http = http_client or HttpClient(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
        )
        self.registry = registry or create_default_registry()
        self._resources: dict[str, BaseResource] = {
            name: self.registry.get(name, self)
            for name in self.registry.list_resources()
        }

    def __getattr__(self, name: str) -> BaseResource:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._resources[name]
        except KeyError:
            raise AttributeError(
                f"{self.__class__.__name__} has no resource {name!r}"
            ) from None

    def resource(self, name: str) -> BaseResource:
        """Get a resource by registry name."""
        if name not in self._resources:
            raise KeyError(f"Resource not registered: {name}")
        return self._resources[name]

    @property
    def resource_names(self) -> list[str]:
        return list(self._resources.keys())

    def execute(self, spec: RequestSpec) -> Outcome:
        """Dispatch a request and return the classified outcome."""
        outcome = self.http.execute(spec, self.settings.api_token, self.settings.timeout)
        if isinstance(outcome, Failure):
            self.logger.warning(
                f"{spec.method} {spec.url} failed: {outcome.kind.value}: {outcome.message}"
            )
        return outcome

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Response:
        """
        Make a GET request.

        Args:
            path: Full URL, or a path relative to the configured base URL
            params: Query parameters

        Returns:
            Response wrapping the decoded JSON

        Raises:
            BOTError: On any failure, tagged with its kind
        """
        return Response(unwrap(self.execute(RequestSpec("GET", path, params or {}))))

    def post(
        self,
        path: str,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Response:
        """Make a POST request with a JSON body."""
        spec = RequestSpec("POST", path, params or {}, body if body is not None else {})
        return Response(unwrap(self.execute(spec)))

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.http.close()

    def __enter__(self) -> "BOTClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def create_client(settings: Optional[Settings] = None, **overrides: Any) -> BOTClient:
    """Create a client from settings (environment if omitted) plus overrides."""
    return BOTClient(settings, **overrides)
