"""Createsend: API Client.

Handles authentication, URL construction, JSON encode/decode and error
mapping for every endpoint. One call is one request; nothing is retried.
"""

import json
import time
from typing import Any, Dict, List, Optional, get_origin

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from createsend.config import settings
from createsend.core.logging import get_logger
from createsend.models.base_models import APIModel

logger = get_logger("client")


class CreatesendAPIError(Exception):
    """Raised when a request fails or the API returns an error."""

    def __init__(self, message: str, status_code: int = 0, error_code: int = 0):
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(message)


class CreatesendDecodeError(CreatesendAPIError):
    """Raised when a successful response body cannot be decoded."""


def _empty_payload(response_type: Any) -> Any:
    """Raw JSON value standing in for an absent body of the given type."""
    if response_type is str:
        return ""
    if get_origin(response_type) is list or response_type is list:
        return []
    if isinstance(response_type, type) and issubclass(response_type, BaseModel):
        return {}
    return None


class CreatesendClient:
    """Synchronous HTTP client for the Campaign Monitor API."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        access_token: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.createsend_api_key
        # An explicit API key is not overridden by a token from settings.
        if access_token is None and api_key is None:
            access_token = settings.createsend_access_token
        self.access_token = access_token
        self.base_url = (
            base_url.rstrip("/") + "/" if base_url else settings.effective_base_url
        )
        self.timeout = timeout or settings.http_timeout_seconds
        self._client: Optional[httpx.Client] = http_client
        self._owns_client = http_client is None

    def _auth(self) -> httpx.Auth | None:
        if self.access_token:
            return None
        # The API key is the username; the password is ignored.
        return httpx.BasicAuth(self.api_key, "x")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
            )
            self._owns_client = True
        return self._client

    def close(self) -> None:
        if self._owns_client and self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "CreatesendClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ── Core Request Method ──

    def url_for(self, path: str) -> str:
        """Absolute URL for an endpoint path relative to the base URL."""
        return self.base_url + path.lstrip("/")

    def build_request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        body: APIModel | Dict[str, Any] | None = None,
    ) -> httpx.Request:
        """Assemble a request without sending it."""
        payload = body.to_payload() if isinstance(body, APIModel) else body
        query = {k: v for k, v in (params or {}).items() if v is not None}
        return self._get_client().build_request(
            method,
            self.url_for(path),
            params=query or None,
            json=payload,
            headers=self._headers(),
        )

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        body: APIModel | Dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Returns None when a successful response has no body, including
        when the connection closes before the body arrives.
        """
        client = self._get_client()
        request = self.build_request(method, path, params, body)
        started = time.monotonic()

        try:
            resp = client.send(request, stream=True, auth=self._auth())
        except httpx.RequestError as e:
            logger.warning(f"Request error on {method} {path}: {e}")
            raise CreatesendAPIError(f"Connection failed: {e}") from e

        try:
            if not resp.is_success:
                resp.read()
                raise self._api_error(resp)
            content = self._read_body(resp, method, path)
        finally:
            resp.close()

        logger.debug(
            f"{method} {path} -> {resp.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": resp.status_code,
                "duration_ms": round((time.monotonic() - started) * 1000, 1),
            },
        )

        if not content.strip():
            return None
        try:
            return json.loads(content)
        except ValueError as e:
            raise CreatesendDecodeError(
                f"Invalid JSON in response to {method} {path}: {e}",
                resp.status_code,
            ) from e

    def request(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        params: Dict[str, Any] | None = None,
        body: APIModel | Dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and validate the body into ``response_type``.

        An absent body yields the empty value of the type: ``[]`` for
        lists, ``""`` for strings, a default record for models.
        """
        data = self._request(method, path, params, body)
        if response_type is None:
            return data
        if data is None:
            data = _empty_payload(response_type)
        try:
            return TypeAdapter(response_type).validate_python(data)
        except ValidationError as e:
            raise CreatesendDecodeError(
                f"Unexpected response to {method} {path}: {e}"
            ) from e

    @staticmethod
    def _read_body(resp: httpx.Response, method: str, path: str) -> bytes:
        """Read a successful response body.

        A stream that ends before its first byte counts as an empty body.
        One that breaks after data has arrived is a transport failure.
        """
        chunks: List[bytes] = []
        try:
            for chunk in resp.iter_bytes():
                chunks.append(chunk)
        except httpx.RemoteProtocolError as e:
            if any(chunks):
                raise CreatesendAPIError(
                    f"Truncated response to {method} {path}: {e}", resp.status_code
                ) from e
            logger.info(
                f"{method} {path} closed before the body arrived; treating as empty",
                extra={"method": method, "path": path, "status_code": resp.status_code},
            )
        except httpx.RequestError as e:
            raise CreatesendAPIError(f"Connection failed: {e}", resp.status_code) from e
        return b"".join(chunks)

    @staticmethod
    def _api_error(resp: httpx.Response) -> CreatesendAPIError:
        """Map an error response to an exception, reading ``Code``/``Message``."""
        body: Dict[str, Any] = {}
        try:
            parsed = resp.json()
            if isinstance(parsed, dict):
                body = parsed
        except ValueError:
            pass
        message = body.get("Message") or resp.text or resp.reason_phrase
        error_code = body.get("Code", 0)
        logger.warning(
            f"API error {resp.status_code} ({error_code}): {message}",
            extra={"status_code": resp.status_code},
        )
        return CreatesendAPIError(
            f"{resp.status_code} {message}",
            resp.status_code,
            error_code if isinstance(error_code, int) else 0,
        )
