"""Async Alpha Vantage API client with error handling."""

from __future__ import annotations

import csv
import io
import json
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class AlphaVantageError(Exception):
    """Raised when the Alpha Vantage API cannot be reached or returns garbage."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class AlphaVantageClient:
    """Async HTTP client for the Alpha Vantage ``/query`` endpoint.

    Every request is a GET with a ``function`` code plus query parameters.
    The API key is injected automatically. Provider messages such as
    ``{"Information": "..."}`` come back with HTTP 200 and are returned as
    data so tools can show them to the user.
    """

    BASE_URL = "https://www.alphavantage.co"
    QUERY_PATH = "/query"
    USER_AGENT = "alphavantage-mcp/1.0"

    def __init__(self, api_key: str, timeout: float = 30.0, base_url: str | None = None):
        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json", "User-Agent": self.USER_AGENT},
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def _request(self, params: dict) -> httpx.Response:
        query = {k: v for k, v in params.items() if v is not None}
        function = query.get("function", "?")
        logger.debug("GET %s function=%s params=%s", self.QUERY_PATH, function,
                     {k: v for k, v in query.items() if k != "function"})
        query["apikey"] = self.api_key

        try:
            resp = await self._get_client().get(self.QUERY_PATH, params=query)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AlphaVantageError(
                f"Alpha Vantage API error {e.response.status_code}: {e.response.text[:200]}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise AlphaVantageError(f"Request failed: {e}") from e
        return resp

    async def get(self, params: dict) -> Any:
        """Make a JSON request to the Alpha Vantage API.

        Args:
            params: Query parameters including ``function``. List values are
                sent as repeated keys.

        Returns:
            Parsed JSON response

        Raises:
            AlphaVantageError: On HTTP errors or an undecodable body
        """
        resp = await self._request(params)
        try:
            return resp.json()
        except ValueError as e:
            raise AlphaVantageError(f"Invalid JSON from Alpha Vantage: {resp.text[:200]}") from e

    async def get_csv(self, params: dict) -> dict:
        """Make a CSV request and parse the body into row dicts.

        Returns ``{"data": [row, ...]}``. When the provider answers with a
        JSON object instead of CSV (rate-limit notes, bad parameters), that
        object is returned unchanged.
        """
        resp = await self._request({**params, "datatype": "csv"})
        text = resp.text.strip()

        if text.startswith("{"):
            try:
                data = json.loads(text)
            except ValueError as e:
                raise AlphaVantageError(f"Invalid response from Alpha Vantage: {text[:200]}") from e
            if isinstance(data, dict):
                return data

        return {"data": parse_csv(text)}

    async def get_safe(self, params: dict, default: Any = None) -> Any:
        """Like get() but returns default on error instead of raising."""
        try:
            return await self.get(params)
        except AlphaVantageError as e:
            logger.warning("Alpha Vantage request %s failed: %s", params.get("function"), e)
            return default

    async def get_csv_safe(self, params: dict, default: Any = None) -> Any:
        """Like get_csv() but returns default on error instead of raising."""
        try:
            return await self.get_csv(params)
        except AlphaVantageError as e:
            logger.warning("Alpha Vantage CSV request %s failed: %s", params.get("function"), e)
            return default


def parse_csv(text: str) -> list[dict]:
    """Parse a CSV document with a header row into a list of dicts.

    Blank lines are skipped and cell values are stripped. Rows with no
    non-empty cell are dropped.
    """
    if not text.strip():
        return []
    reader = csv.DictReader(io.StringIO(text))
    rows = []
    for row in reader:
        cleaned = {
            (k or "").strip(): (v or "").strip()
            for k, v in row.items()
            if k is not None
        }
        if any(cleaned.values()):
            rows.append(cleaned)
    return rows
