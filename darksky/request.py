"""Request descriptor and URL assembly for the Dark Sky forecast endpoint."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from darksky.config import settings

UNITS_AUTO = "auto"

# Unit systems and data blocks the API understands. Informational only:
# build_url passes whatever the caller supplies through untouched.
KNOWN_UNITS = ("auto", "ca", "uk2", "us", "si")
KNOWN_BLOCKS = ("currently", "minutely", "hourly", "daily", "alerts", "flags")


@dataclass(frozen=True)
class ForecastRequest:
    """Caller-supplied location, access key and response options."""
    latitude: str
    longitude: str
    key: str
    exclude: Sequence[str] = ()
    lang: str = ""
    units: str = ""


def build_url(request: ForecastRequest, base_url: Optional[str] = None) -> str:
    """Assemble the forecast URL for `request`.

    The result has the shape
    ``{base}/{key}/{lat},{long}?units={units|auto}[&exclude=a,b][&lang=xx]``.
    Components are concatenated verbatim with no percent-encoding, so values
    must already be URL-safe.
    """
    if base_url is None:
        base_url = settings.base_url

    parts = [base_url, "/", request.key, "/", request.latitude, ",", request.longitude]

    parts.append("?units=" + (request.units or UNITS_AUTO))

    if request.exclude:
        parts.append("&exclude=" + ",".join(request.exclude))

    if request.lang:
        parts.append("&lang=" + request.lang)

    return "".join(parts)
