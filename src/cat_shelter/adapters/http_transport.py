"""Shared request handling for the httpx-backed service clients."""

import httpx

_TRANSIENT_STATUS_CODES = {502, 503, 504}


async def send(
    http_client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    timeout: float,
    allow_not_found: bool = False,
    **kwargs: object,
) -> httpx.Response | None:
    """Send a request, mapping connectivity failures to ``ConnectionError``.

    Returns ``None`` for a 404 when ``allow_not_found`` is set. Other error
    statuses raise ``httpx.HTTPStatusError``.
    """
    try:
        response = await http_client.request(method, url, timeout=timeout, **kwargs)
    except httpx.TransportError as exc:
        raise ConnectionError(f"{method} {url} failed: {exc}") from exc
    if response.status_code in _TRANSIENT_STATUS_CODES:
        raise ConnectionError(f"{method} {url} returned {response.status_code}")
    if allow_not_found and response.status_code == httpx.codes.NOT_FOUND:
        return None
    response.raise_for_status()
    return response
