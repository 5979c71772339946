from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx
import pydantic

from idtoken_verifier.jose.errors import DecodeError, InvalidURL, NetworkError
from idtoken_verifier.jose.keys import KeySet
from idtoken_verifier.settings import get_settings

logger = logging.getLogger(__name__)


class JwksClient:
    """Fetches an issuer's JSON Web Key Set over HTTP.

    One GET per call, no retries and no caching. The whole exchange runs under
    a single deadline so a silent endpoint cannot block the caller.
    """

    def __init__(self, timeout: float | None = None, client: Optional[httpx.AsyncClient] = None) -> None:
        if timeout is None:
            timeout = get_settings().jwks.timeout
        if timeout <= 0:
            raise ValueError("JWKS timeout must be greater than zero")
        self._timeout = timeout
        self._client = client

    async def fetch(self, jwks_url: str) -> KeySet:
        url = _parse_url(jwks_url)
        logger.debug("fetching jwks", extra={"jwks_url": _redact(url)})
        try:
            if self._client is not None:
                body = await asyncio.wait_for(self._get(self._client, url), timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    body = await asyncio.wait_for(self._get(client, url), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise NetworkError(f"JWKS request timed out after {self._timeout}s", timeout=True) from exc
        except httpx.TimeoutException as exc:
            raise NetworkError(f"JWKS request timed out: {exc}", timeout=True) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(f"Network error fetching JWKS: {exc}") from exc

        key_set = _decode_key_set(body)
        logger.debug("jwks fetched", extra={"jwks_url": _redact(url), "key_count": len(key_set.keys)})
        return key_set

    async def _get(self, client: httpx.AsyncClient, url: httpx.URL) -> bytes:
        request = client.build_request("GET", url, headers={"Accept": "application/json"})
        response = await client.send(request, stream=True)
        try:
            if not response.is_success:
                raise NetworkError(
                    f"JWKS endpoint returned HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            return await response.aread()
        finally:
            await _close_quietly(response)


def _parse_url(jwks_url: str) -> httpx.URL:
    if not isinstance(jwks_url, str) or not jwks_url.strip():
        raise InvalidURL("JWKS URL must be a non-empty string")
    try:
        url = httpx.URL(jwks_url.strip())
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidURL(f"Malformed JWKS URL: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURL("JWKS URL must be an absolute http(s) URL")
    return url


def _redact(url: httpx.URL) -> str:
    return str(url.copy_with(username=None, password=None))


def _decode_key_set(body: bytes) -> KeySet:
    try:
        return KeySet.model_validate_json(body)
    except pydantic.ValidationError as exc:
        raise DecodeError(f"Malformed JWKS document: {exc.error_count()} error(s)") from exc


async def _close_quietly(response: httpx.Response) -> None:
    try:
        await response.aclose()
    except Exception as exc:
        # Never let a close failure replace the result of the request
        logger.warning("failed to close jwks response: %s", exc)
