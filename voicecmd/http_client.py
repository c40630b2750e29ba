"""Shared HTTP client for both API calls."""

import logging
from typing import Optional

import httpx

from voicecmd.errors import ApiError

logger = logging.getLogger(__name__)

_shared_client: Optional[httpx.Client] = None


def get_shared_client() -> httpx.Client:
    """Get or create the shared httpx.Client.

    No timeout is configured: a stalled server blocks the run until the user
    interrupts it.
    """
    global _shared_client
    if _shared_client is None:
        _shared_client = httpx.Client(
            timeout=None,
            limits=httpx.Limits(
                max_keepalive_connections=2,
                max_connections=4,
                keepalive_expiry=30.0,
            ),
            http2=True,
        )
        logger.debug("Created shared HTTP client")
    return _shared_client


def close_shared_client():
    """Close the shared client. Call on shutdown."""
    global _shared_client
    if _shared_client is not None:
        _shared_client.close()
        _shared_client = None
        logger.debug("Closed shared HTTP client")


def bearer_headers(api_key: str) -> dict:
    return {"Authorization": f"Bearer {api_key}"}


def raise_for_non_200(resp: httpx.Response):
    """Raise ApiError with the raw body for anything but HTTP 200."""
    if resp.status_code == 200:
        return
    try:
        body = resp.text
    except (UnicodeDecodeError, LookupError):
        body = resp.content.decode("utf-8", errors="replace")
    logger.debug("API request failed with HTTP %d", resp.status_code)
    raise ApiError(resp.status_code, body)
