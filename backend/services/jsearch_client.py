"""JSearch API (RapidAPI) client for aggregated job listings."""

import logging

import httpx

from config import settings
from services.errors import ConfigurationMissing, ProviderError

logger = logging.getLogger(__name__)


class JSearchClient:
    """One GET per call, no retries. Errors surface as ProviderError."""

    def __init__(
        self,
        api_key: str | None = None,
        host: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = settings.rapidapi_key if api_key is None else api_key
        self.host = host or settings.rapidapi_host
        self.timeout = timeout or settings.provider_timeout_s
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"

    async def search(self, params: dict[str, str]) -> list[dict]:
        """Return the raw listing records for one provider page request."""
        if not self.api_key:
            raise ConfigurationMissing("RAPIDAPI_KEY not configured; job search is unavailable")

        headers = {"X-RapidAPI-Key": self.api_key, "X-RapidAPI-Host": self.host}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get("/search", params=params, headers=headers)
        except httpx.TimeoutException as e:
            logger.error("JSearch request timed out: %s", e)
            raise ProviderError("Job search provider timed out", status_code=504) from e
        except httpx.HTTPError as e:
            logger.error("JSearch request failed: %s", e)
            raise ProviderError(f"Failed to search jobs: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.error("JSearch API error %d: %s", response.status_code, message)
            raise ProviderError(
                f"Failed to search jobs: {message}",
                status_code=response.status_code,
                retry_after=response.headers.get("Retry-After"),
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderError("Job search provider returned invalid JSON") from e
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            return []
        return [hit for hit in data if isinstance(hit, dict)]


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase


_client: JSearchClient | None = None


def get_client() -> JSearchClient:
    global _client
    if _client is None:
        _client = JSearchClient()
    return _client
