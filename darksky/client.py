"""End-to-end forecast lookup: build the URL, fetch it, decode the body."""
from __future__ import annotations

import time
from typing import Optional

import requests

from darksky import config
from darksky.decoder import decode_forecast
from darksky.models import Forecast
from darksky.request import ForecastRequest, build_url
from darksky.transport import LoggerLike, fetch, read_body


def get_forecast(
    request: ForecastRequest,
    *,
    http_session: Optional[requests.Session] = None,
    log: Optional[LoggerLike] = None,
    settings: config.Settings | None = None,
) -> Forecast:
    """Fetch and decode the forecast described by `request`.

    Stages run strictly in sequence and the first failure propagates
    unchanged (`TransportError` or `DecodeError`). `settings.timeout_seconds`
    bounds the whole exchange, body included. The response is closed
    whether or not decoding succeeds.
    """
    settings = settings or config.settings
    url = build_url(request, base_url=settings.base_url)
    deadline = time.monotonic() + settings.timeout_seconds

    with fetch(url, http_session=http_session, timeout=settings.timeout_seconds, log=log) as resp:
        body = read_body(resp, deadline=deadline, log=log)
        return decode_forecast(body, log=log)
