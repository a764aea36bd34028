"""
NewsAPI client.

Thin synchronous wrapper over ``requests``. Callers on the event loop run
it through ``asyncio.to_thread``. HTTP and transport failures are mapped
onto the newsreel exception hierarchy so the UI only has to handle
``ApiError``.
"""

import logging
from typing import Any, Optional

import requests

from ..config.constants import (
    DEFAULT_BASE_URL,
    EVERYTHING_ENDPOINT,
    QUERY_PAGE_SIZE,
    REQUEST_TIMEOUT_SECONDS,
)
from ..exceptions import (
    ApiAuthenticationError,
    ApiConnectionError,
    ApiRateLimitError,
    ApiResponseError,
)
from ..models.articles import NewsResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "newsapi"


class NewsService:
    """Fetches pages of articles from the NewsAPI ``everything`` endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = QUERY_PAGE_SIZE,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"X-Api-Key": api_key})

    def __enter__(self) -> "NewsService":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def fetch_articles(self, query: str, page: int) -> NewsResponse:
        """
        Fetch one page of articles matching ``query``.

        Args:
            query: Topic or free-text search
            page: 1-based page number

        Returns:
            Parsed NewsResponse for that page

        Raises:
            ApiConnectionError: Network failure or timeout
            ApiAuthenticationError: Missing or rejected API key
            ApiRateLimitError: Too many requests
            ApiResponseError: Any other error answer or an unreadable body
        """
        url = f"{self.base_url}{EVERYTHING_ENDPOINT}"
        params = {"q": query, "page": page, "pageSize": self.page_size}
        logger.info(f"Fetching articles q={query!r} page={page}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise ApiConnectionError(
                f"Could not reach news service: {e}", service=SERVICE_NAME
            ) from e
        except requests.RequestException as e:
            raise ApiResponseError(f"Request to news service failed: {e}") from e

        payload = self._decode(response)
        self._raise_for_error(response, payload)

        try:
            news = NewsResponse.from_dict(payload)
        except (TypeError, ValueError, AttributeError) as e:
            raise ApiResponseError(
                f"News service returned a malformed body: {e}",
                status_code=response.status_code,
            ) from e
        logger.debug(
            f"Fetched {len(news.articles)} articles (total_results={news.total_results})"
        )
        return news

    def _decode(self, response: requests.Response) -> dict[str, Any]:
        """Parse the JSON body; error answers may carry none (e.g. a proxy's HTML page)."""
        try:
            payload = response.json()
        except ValueError as e:
            if not response.ok:
                return {}
            raise ApiResponseError(
                "News service returned a non-JSON body",
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            if not response.ok:
                return {}
            raise ApiResponseError(
                "News service returned an unexpected body",
                status_code=response.status_code,
            )
        return payload

    def _raise_for_error(self, response: requests.Response, payload: dict[str, Any]) -> None:
        """Translate error statuses into ApiError subclasses."""
        status_code = response.status_code
        if response.ok and payload.get("status") != "error":
            return

        message = payload.get("message") or f"HTTP {status_code}"
        code = payload.get("code")

        if status_code == 401:
            raise ApiAuthenticationError(message, service=SERVICE_NAME)
        if status_code == 429:
            raise ApiRateLimitError(
                message,
                service=SERVICE_NAME,
                retry_after=_parse_retry_after(response.headers.get("Retry-After")),
            )
        raise ApiResponseError(message, status_code=status_code, code=code)


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None
