"""
Logging helpers shared by the Dark Sky client modules.

Usage
-----
    from utils.logging_utils import get_tagged_logger

    logger = get_tagged_logger(__name__, tag="darksky/transport")
    logger.info("Fetching forecast from %s", mask_api_key(url))

The client never configures handlers or levels; that stays with the
application. Records carry a `tag` field that a caller's formatter can use
(e.g. ``"%(asctime)s | %(levelname)s | %(tag)s | %(message)s"``).
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

MASKED = "***"


def get_tagged_logger(
    name: str,
    *,
    tag: Optional[str] = None,
) -> logging.LoggerAdapter:
    """
    Return a LoggerAdapter that always carries a `tag` field.

    Parameters
    ----------
    name:
        Base logger name (usually __name__).
    tag:
        Semantic tag for this component. Defaults to the last segment of
        `name`, e.g. "darksky.decoder" -> "decoder".
    """
    base_logger = logging.getLogger(name)
    if tag is None:
        tag = name.split(".")[-1]
    return logging.LoggerAdapter(base_logger, {"tag": tag})


def mask_api_key(url: str) -> str:
    """Return a forecast URL with its access-key path segment masked.

    Forecast URLs look like ``{base}/{key}/{lat},{long}?...``; the key is the
    path segment right before the coordinates.

    Examples
    --------
    - https://api.darksky.net/forecast/abc123/40.0,-105.0?units=auto
      -> https://api.darksky.net/forecast/***/40.0,-105.0?units=auto
    - https://api.darksky.net/forecast//1,2?units=auto -> unchanged
    """
    try:
        parsed = urlsplit(url)
    except ValueError:
        return url

    segments = parsed.path.split("/")
    if len(segments) < 2 or not segments[-2]:
        return url
    segments[-2] = MASKED

    return urlunsplit(
        (parsed.scheme, parsed.netloc, "/".join(segments), parsed.query, parsed.fragment)
    )
