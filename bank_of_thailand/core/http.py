"""
Request dispatcher.

Issues a single HTTP call against the BOT gateway and turns the exchange
into a typed outcome: ``Success`` with the decoded JSON body, or ``Failure``
carrying an ``ErrorKind``. No retries are attempted.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

import httpx

from bank_of_thailand.core.errors import BOTError, ErrorKind
from bank_of_thailand.core.logging import get_logger

logger = get_logger("http")

SUPPORTED_METHODS = ("GET", "POST")


@dataclass(frozen=True)
class RequestSpec:
    """One request: method, absolute or base-relative URL, query, JSON body."""
    method: str
    url: str
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        object.__setattr__(self, "method", method)


@dataclass(frozen=True)
class Success:
    """Completed 2xx exchange with its decoded body."""
    json: Any
    status_code: int = 200

    ok = True


@dataclass(frozen=True)
class Failure:
    """Failed exchange, classified by kind."""
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    retry_after: Optional[int] = None
    url: Optional[str] = None

    ok = False

    def to_error(self) -> BOTError:
        return BOTError(
            self.message,
            kind=self.kind,
            status_code=self.status_code,
            retry_after=self.retry_after,
            url=self.url,
        )


Outcome = Union[Success, Failure]


def unwrap(outcome: Outcome) -> Any:
    """Return the JSON of a Success, or raise the Failure as BOTError."""
    if isinstance(outcome, Failure):
        raise outcome.to_error()
    return outcome.json


def resolve_url(url: str, base_url: Optional[str]) -> str:
    """Use URLs with a scheme verbatim, otherwise prefix the base URL."""
    if url.startswith(("http://", "https://")):
        return url
    if not base_url:
        raise BOTError.configuration("Base URL cannot be empty", path=url)
    return f"{base_url}{url}"


def decode_json(text: Optional[str]) -> Any:
    """Decode a response body. An empty body decodes to an empty object."""
    if not text:
        return {}
    return json.loads(text)


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """Retry-After as integer seconds; None when missing or not an integer."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def classify_response(response: httpx.Response, url: str) -> Outcome:
    """Map a completed exchange onto exactly one outcome kind."""
    status = response.status_code

    if 200 <= status < 300:
        try:
            return Success(decode_json(response.text), status_code=status)
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            return Failure(
                ErrorKind.REQUEST,
                f"Invalid JSON response: {e}",
                status_code=status,
                url=url,
            )

    logger.error(f"HTTP {status} from {url}: {response.text[:200]}")

    if status == 401:
        return Failure(
            ErrorKind.AUTHENTICATION,
            "Authentication failed. Check your API token.",
            status_code=status,
            url=url,
        )
    if status == 403:
        return Failure(
            ErrorKind.AUTHENTICATION,
            "Access forbidden. Your token may not have permission for this resource.",
            status_code=status,
            url=url,
        )
    if status == 404:
        return Failure(
            ErrorKind.NOT_FOUND,
            f"Resource not found: {url}",
            status_code=status,
            url=url,
        )
    if status == 429:
        return Failure(
            ErrorKind.RATE_LIMITED,
            "Rate limit exceeded",
            status_code=status,
            retry_after=parse_retry_after(response.headers.get("Retry-After")),
            url=url,
        )
    if 500 <= status < 600:
        return Failure(
            ErrorKind.SERVER,
            f"Server error ({status})",
            status_code=status,
            url=url,
        )
    return Failure(
        ErrorKind.REQUEST,
        f"Unexpected response status: {status}",
        status_code=status,
        url=url,
    )


class HttpClient:
    """
    Synchronous dispatcher over httpx.

    One ``execute`` call makes exactly one attempt. The same duration is
    applied to the connect phase and to the whole exchange.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized sync HTTP client."""
        if self._client is None:
            client_kwargs: dict[str, Any] = {}
            if self.timeout is not None:
                client_kwargs["timeout"] = self.timeout
            if self._transport is not None:
                client_kwargs["transport"] = self._transport
            self._client = httpx.Client(**client_kwargs)
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def execute(
        self,
        spec: RequestSpec,
        token: Optional[str],
        timeout: Optional[float] = None,
    ) -> Outcome:
        """
        Issue one request and classify the result.

        Args:
            spec: What to request
            token: Value for the Authorization header
            timeout: Seconds; falls back to the client's default

        Returns:
            Success or Failure

        Raises:
            BOTError: kind CONFIGURATION when the token or base URL is
                missing. Raised before any network call.
        """
        if not token:
            raise BOTError.configuration("API token is required")

        url = resolve_url(spec.url, self.base_url)
        headers = {
            "Authorization": token,
            "Content-Type": "application/json",
        }
        params = dict(spec.query) if spec.query else None
        content = None
        if spec.method == "POST" and spec.body is not None:
            content = json.dumps(spec.body)

        request_kwargs: dict[str, Any] = {}
        seconds = timeout if timeout is not None else self.timeout
        if seconds is not None:
            request_kwargs["timeout"] = httpx.Timeout(seconds)

        try:
            logger.debug(f"{spec.method} {url} params={params}")
            response = self.client.request(
                spec.method,
                url,
                params=params,
                content=content,
                headers=headers,
                **request_kwargs,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout on {spec.method} {url}: {e}")
            return Failure(ErrorKind.REQUEST, f"Request timeout: {e}", url=url)
        except httpx.ConnectError as e:
            logger.error(f"Connection failed on {spec.method} {url}: {e}")
            return Failure(ErrorKind.REQUEST, f"Connection failed: {e}", url=url)
        except httpx.HTTPError as e:
            logger.error(f"Request failed on {spec.method} {url}: {e}")
            return Failure(ErrorKind.REQUEST, f"Request failed: {e}", url=url)

        return classify_response(response, str(response.request.url))
