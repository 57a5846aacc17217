"""Decode forecast response bodies into `Forecast` models."""
from __future__ import annotations

from typing import IO, Optional, Union

from pydantic import ValidationError

from darksky.models import Forecast
from darksky.transport import LoggerLike
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="darksky/decoder")

DecodeError = ValidationError

Body = Union[bytes, bytearray, str, IO[bytes], IO[str]]


def decode_forecast(body: Body, *, log: Optional[LoggerLike] = None) -> Forecast:
    """Parse a JSON response body into a `Forecast`.

    `body` may be raw bytes/str or any file-like object with ``read()``.
    Malformed JSON and type mismatches raise `DecodeError` after a single
    error log line; nothing partial is returned.
    """
    log = log or logger
    if hasattr(body, "read"):
        body = body.read()

    try:
        return Forecast.model_validate_json(body)
    except DecodeError as exc:
        log.error("Unable to decode forecast JSON: %s", exc)
        raise
