"""Pydantic models for the Dark Sky forecast response.

Every field defaults to its zero value, so a key missing from the payload
(or sent as ``null``) never fails validation. Keys match only by their
camelCase wire names; anything else, snake_case spellings of the Python
attribute names included, is ignored. Type
disagreements, such as a string where a number belongs, do fail: the models
validate in strict mode.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _ForecastBlock(BaseModel):
    """Shared config: camelCase wire keys, strict types, immutable."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        strict=True,
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """Treat explicit nulls like absent keys."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Currently(_ForecastBlock):
    """Point-in-time conditions at the requested location."""
    apparent_temperature: float = 0.0
    cloud_cover: float = 0.0
    dew_point: float = 0.0
    humidity: float = 0.0
    icon: str = ""
    nearest_storm_bearing: float = 0.0
    nearest_storm_distance: float = 0.0
    ozone: float = 0.0
    precip_intensity: float = 0.0
    precip_probability: float = 0.0
    pressure: float = 0.0
    summary: str = ""
    temperature: float = 0.0
    time: int = 0
    visibility: float = 0.0
    wind_bearing: float = 0.0
    wind_speed: float = 0.0


class MinutelyData(_ForecastBlock):
    precip_intensity: float = 0.0
    precip_probability: float = 0.0
    time: int = 0


class Minutely(_ForecastBlock):
    """Minute-by-minute precipitation for the next hour."""
    icon: str = ""
    # Read from the "string" key rather than "summary"; kept as the
    # existing wire contract.
    summary: str = Field(default="", alias="string")
    data: List[MinutelyData] = Field(default_factory=list)


class HourlyData(_ForecastBlock):
    apparent_temperature: float = 0.0
    cloud_cover: float = 0.0
    dew_point: float = 0.0
    humidity: float = 0.0
    icon: str = ""
    ozone: float = 0.0
    precip_intensity: float = 0.0
    precip_probability: float = 0.0
    pressure: float = 0.0
    summary: str = ""
    temperature: float = 0.0
    time: int = 0
    visibility: float = 0.0
    wind_bearing: float = 0.0
    wind_speed: float = 0.0


class Hourly(_ForecastBlock):
    """Hour-by-hour forecast block."""
    icon: str = ""
    summary: str = ""
    data: List[HourlyData] = Field(default_factory=list)


class DailyData(_ForecastBlock):
    """One day of forecast. Each *_time field is its own Unix timestamp."""
    apparent_temperature_max: float = 0.0
    apparent_temperature_max_time: int = 0
    apparent_temperature_min: float = 0.0
    apparent_temperature_min_time: int = 0
    cloud_cover: float = 0.0
    dew_point: float = 0.0
    humidity: float = 0.0
    icon: str = ""
    moon_phase: float = 0.0
    ozone: float = 0.0
    precip_intensity: float = 0.0
    precip_intensity_max: float = 0.0
    precip_intensity_max_time: int = 0
    precip_probability: float = 0.0
    precip_type: str = ""
    pressure: float = 0.0
    summary: str = ""
    sunrise_time: int = 0
    sunset_time: int = 0
    temperature_max: float = 0.0
    temperature_max_time: int = 0
    temperature_min: float = 0.0
    temperature_min_time: int = 0
    time: int = 0
    visibility: float = 0.0
    wind_bearing: float = 0.0
    wind_speed: float = 0.0


class Daily(_ForecastBlock):
    """Day-by-day forecast block."""
    icon: str = ""
    summary: str = ""
    data: List[DailyData] = Field(default_factory=list)


class AlertData(_ForecastBlock):
    """Severe weather alert issued for the requested location."""
    title: str = ""
    description: str = ""
    severity: str = ""
    time: int = 0
    expires: int = 0  # 0 when the alert carries no expiry
    uri: str = ""
    regions: List[str] = Field(default_factory=list)

    @field_validator("regions", mode="before")
    @classmethod
    def _null_regions_to_empty(cls, v: Any) -> Any:
        if isinstance(v, list):
            return ["" if r is None else r for r in v]
        return v


class Forecast(_ForecastBlock):
    """Root of a decoded forecast response."""
    latitude: float = 0.0
    longitude: float = 0.0
    offset: float = 0.0
    timezone: str = ""
    currently: Currently = Field(default_factory=Currently)
    minutely: Minutely = Field(default_factory=Minutely)
    hourly: Hourly = Field(default_factory=Hourly)
    daily: Daily = Field(default_factory=Daily)
    alerts: List[AlertData] = Field(default_factory=list)
