"""aiohttp-based JSON fetcher for the stats APIs."""

import asyncio
import json
from typing import Any

import aiohttp

from profilegen._version import __version__
from profilegen.exceptions import TransportError


DEFAULT_USER_AGENT = f"profilegen/{__version__}"


async def fetch_json(
    session: aiohttp.ClientSession,
    url: str,
    headers: dict[str, str] | None = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Any | None:
    """
    GET a URL and decode its body as JSON.

    The status code is not interpreted: APIs report errors in the body
    (`{"message": "Not Found"}`, `{"status": "error"}`), and the caller
    decides what a usable payload looks like.

    Args:
        session: Open aiohttp session (carries the timeout)
        url: Absolute URL to fetch
        headers: Extra request headers
        user_agent: Identifying User-Agent, always sent

    Returns:
        Decoded JSON value, or None if the body is not valid JSON

    Raises:
        TransportError: Connection failure or timeout
    """
    request_headers = {"User-Agent": user_agent}
    if headers:
        request_headers.update(headers)

    try:
        async with session.get(url, headers=request_headers) as response:
            body = await response.read()
    except asyncio.TimeoutError as e:
        raise TransportError(f"Timed out fetching {url}") from e
    except aiohttp.ClientError as e:
        raise TransportError(f"Request to {url} failed: {e}") from e

    try:
        return json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
