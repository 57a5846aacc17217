"""HTTP transport for forecast requests."""
from __future__ import annotations

import time
from typing import Any, Optional, Protocol

import requests

from darksky.config import settings
from utils.logging_utils import get_tagged_logger, mask_api_key

logger = get_tagged_logger(__name__, tag="darksky/transport")

# Shared by every call; swapped out in tests.
session = requests.Session()

TransportError = requests.exceptions.RequestException

# A read of N bytes blocks until all N arrive; single-byte reads keep the
# deadline check at every byte received.
READ_CHUNK_BYTES = 1


class LoggerLike(Protocol):
    """The logging surface the client needs; stdlib loggers and adapters fit."""

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        ...


def fetch(
    url: str,
    *,
    http_session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
    log: Optional[LoggerLike] = None,
) -> requests.Response:
    """Issue a single GET for `url` and return the response with its body unread.

    Status codes are not inspected. The caller owns the response and must
    close it (it is a context manager). Transport failures are logged once
    and re-raised unchanged.
    """
    http = http_session or session
    log = log or logger
    timeout = settings.timeout_seconds if timeout is None else timeout

    log.info("Fetching forecast from %s", mask_api_key(url))
    try:
        return http.get(url, timeout=timeout, stream=True)
    except TransportError as exc:
        log.error("Forecast request failed: %s", exc)
        raise


def read_body(
    resp: requests.Response,
    *,
    deadline: float,
    log: Optional[LoggerLike] = None,
) -> bytes:
    """Read the whole response body, giving up once `time.monotonic()` passes `deadline`.

    Overruns raise `requests.exceptions.Timeout`. Like any other transport
    failure it is logged once and propagated; closing `resp` stays with the
    caller.
    """
    log = log or logger
    body = bytearray()
    try:
        for chunk in resp.iter_content(chunk_size=READ_CHUNK_BYTES):
            if time.monotonic() > deadline:
                raise requests.exceptions.Timeout("forecast response not received before the deadline")
            body += chunk
    except TransportError as exc:
        log.error("Forecast request failed: %s", exc)
        raise
    return bytes(body)
