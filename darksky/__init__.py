"""Client for the Dark Sky forecast API."""

import logging

from .client import get_forecast
from .config import Settings, settings
from .decoder import DecodeError, decode_forecast
from .models import (
    AlertData,
    Currently,
    Daily,
    DailyData,
    Forecast,
    Hourly,
    HourlyData,
    Minutely,
    MinutelyData,
)
from .request import KNOWN_BLOCKS, KNOWN_UNITS, UNITS_AUTO, ForecastRequest, build_url
from .transport import LoggerLike, TransportError, fetch, read_body

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "get_forecast",
    "Settings",
    "settings",
    "ForecastRequest",
    "build_url",
    "UNITS_AUTO",
    "KNOWN_UNITS",
    "KNOWN_BLOCKS",
    "fetch",
    "read_body",
    "TransportError",
    "LoggerLike",
    "decode_forecast",
    "DecodeError",
    "Forecast",
    "Currently",
    "Minutely",
    "MinutelyData",
    "Hourly",
    "HourlyData",
    "Daily",
    "DailyData",
    "AlertData",
]
