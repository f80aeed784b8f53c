from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.constants import TRANSPORT_ERROR_MESSAGE
from ..core.exceptions import ServerRejection, TransportError
from .connection import ApiConnection

logger = logging.getLogger(__name__)


def send(
    conn: ApiConnection,
    method: str,
    path: str,
    *,
    params: Optional[dict] = None,
    json: Any = None,
    fallback_message: str,
) -> requests.Response:
    """Issue one request and map failures onto the gateway error taxonomy.

    - no response at all -> TransportError (generic, retryable)
    - non-2xx response -> ServerRejection with the body's ``message``
    """

    url = conn.url(path)
    try:
        response = conn.session().request(method, url, params=params, json=json, timeout=conn.timeout)
    except requests.RequestException as exc:
        logger.warning("%s %s failed: %s", method, url, exc)
        raise TransportError(TRANSPORT_ERROR_MESSAGE) from exc

    if not response.ok:
        message = error_message(response) or fallback_message
        logger.info("%s %s rejected (%s): %s", method, url, response.status_code, message)
        raise ServerRejection(message, status_code=response.status_code)

    return response


def error_message(response: requests.Response) -> Optional[str]:
    """Pull ``message`` out of a structured error body, if there is one."""

    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return str(message)
    return None


def read_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        logger.warning("Undecodable response body from %s", response.url)
        raise TransportError(TRANSPORT_ERROR_MESSAGE) from exc
