import io
import json
import unittest

from darksky.decoder import DecodeError, decode_forecast
from darksky.models import Currently, Daily, Forecast, Hourly, HourlyData, Minutely


class RecordingLogger:
    def __init__(self):
        self.infos = []
        self.errors = []

    def info(self, msg, *args, **kwargs):
        self.infos.append(msg % args if args else msg)

    def error(self, msg, *args, **kwargs):
        self.errors.append(msg % args if args else msg)


def _make_forecast_payload():
    return {
        "latitude": 42.3601,
        "longitude": -71.0589,
        "timezone": "America/New_York",
        "offset": -5,
        "currently": {
            "time": 1509993277,
            "summary": "Drizzle",
            "icon": "rain",
            "nearestStormDistance": 0,
            "precipIntensity": 0.0089,
            "precipProbability": 0.9,
            "temperature": 66.1,
            "apparentTemperature": 66.31,
            "dewPoint": 60.77,
            "humidity": 0.83,
            "pressure": 1010.34,
            "windSpeed": 5.59,
            "windBearing": 246,
            "cloudCover": 0.7,
            "uvIndex": 1,
            "visibility": 9.84,
            "ozone": 267.44,
        },
        "minutely": {
            "string": "Light rain stopping in 13 min.",
            "icon": "rain",
            "data": [
                {"time": 1509993240, "precipIntensity": 0.007, "precipProbability": 0.84},
                {"time": 1509993300, "precipIntensity": 0.0061, "precipProbability": 0.81},
            ],
        },
        "hourly": {
            "summary": "Rain starting later this afternoon.",
            "icon": "rain",
            "data": [
                {"time": 1509991200, "summary": "Mostly Cloudy", "temperature": 65.76},
                {"time": 1509994800, "summary": "Drizzle", "temperature": 66.1},
            ],
        },
        "daily": {
            "summary": "Mixed precipitation throughout the week.",
            "icon": "rain",
            "data": [
                {
                    "time": 1509944400,
                    "sunriseTime": 1509967519,
                    "sunsetTime": 1510003982,
                    "moonPhase": 0.59,
                    "precipIntensityMax": 0.0483,
                    "precipIntensityMaxTime": 1510027200,
                    "precipType": "rain",
                    "temperatureMax": 66.35,
                    "temperatureMaxTime": 1509994800,
                    "temperatureMin": 52.08,
                    "temperatureMinTime": 1510041600,
                },
            ],
        },
        "alerts": [
            {
                "title": "Flood Watch for Mason, WA",
                "time": 1509993360,
                "expires": 1510036680,
                "description": "...FLOOD WATCH REMAINS IN EFFECT THROUGH LATE FRIDAY NIGHT...",
                "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=WA1255E4DB8494.FloodWatch",
                "severity": "watch",
                "regions": ["Mason"],
            }
        ],
        "flags": {"units": "us"},
    }


class TestDecodeForecast(unittest.TestCase):
    def test_full_payload(self):
        f = decode_forecast(json.dumps(_make_forecast_payload()).encode())

        self.assertEqual(f.timezone, "America/New_York")
        self.assertEqual(f.offset, -5.0)
        self.assertEqual(f.currently.summary, "Drizzle")
        self.assertEqual(f.currently.wind_bearing, 246.0)
        self.assertEqual(f.currently.nearest_storm_distance, 0.0)
        self.assertEqual(f.minutely.summary, "Light rain stopping in 13 min.")
        self.assertEqual([m.time for m in f.minutely.data], [1509993240, 1509993300])
        self.assertEqual(len(f.hourly.data), 2)
        self.assertEqual(f.hourly.data[1].summary, "Drizzle")
        day = f.daily.data[0]
        self.assertEqual(day.sunrise_time, 1509967519)
        self.assertEqual(day.temperature_min_time, 1510041600)
        self.assertEqual(day.precip_type, "rain")
        self.assertEqual(f.alerts[0].regions, ["Mason"])
        self.assertEqual(f.alerts[0].expires, 1510036680)

    def test_only_coordinates(self):
        f = decode_forecast(b'{"latitude": 40.0, "longitude": -105.0}')
        self.assertEqual(f.latitude, 40.0)
        self.assertEqual(f.longitude, -105.0)
        self.assertEqual(f.offset, 0.0)
        self.assertEqual(f.timezone, "")
        self.assertEqual(f.currently, Currently())
        self.assertEqual(f.minutely, Minutely())
        self.assertEqual(f.hourly, Hourly())
        self.assertEqual(f.daily, Daily())
        self.assertEqual(f.alerts, [])
        self.assertEqual(f, Forecast(latitude=40.0, longitude=-105.0))

    def test_half_hour_offset(self):
        self.assertEqual(decode_forecast('{"offset": 5.5}').offset, 5.5)

    def test_empty_object_is_zero_forecast(self):
        self.assertEqual(decode_forecast("{}"), Forecast())

    def test_unknown_field_ignored(self):
        f = decode_forecast('{"latitude":1,"unknownField":"x"}')
        self.assertEqual(f.latitude, 1.0)

    def test_snake_case_keys_ignored(self):
        f = decode_forecast('{"currently": {"apparent_temperature": 5, "wind_speed": 3}}')
        self.assertEqual(f.currently.apparent_temperature, 0.0)
        self.assertEqual(f.currently.wind_speed, 0.0)

    def test_minutely_summary_key_not_read(self):
        f = decode_forecast('{"minutely": {"summary": "Rain starting in 5 min."}}')
        self.assertEqual(f.minutely.summary, "")

    def test_null_list_entries_become_zero_values(self):
        f = decode_forecast('{"alerts": [{"regions": [null, "Mason"]}], "hourly": {"data": [null]}}')
        self.assertEqual(f.alerts[0].regions, ["", "Mason"])
        self.assertEqual(f.hourly.data, [HourlyData()])

    def test_nulls_become_zero_values(self):
        f = decode_forecast('{"latitude": null, "currently": {"summary": null}, "alerts": null}')
        self.assertEqual(f, Forecast())

    def test_alert_without_expiry(self):
        f = decode_forecast('{"alerts": [{"title": "Heat Advisory", "time": 10}]}')
        self.assertEqual(f.alerts[0].expires, 0)
        self.assertEqual(f.alerts[0].regions, [])

    def test_truncated_json_raises_and_logs(self):
        log = RecordingLogger()
        with self.assertRaises(DecodeError):
            decode_forecast('{"latitude":', log=log)
        self.assertEqual(len(log.errors), 1)

    def test_string_for_number_raises(self):
        with self.assertRaises(DecodeError):
            decode_forecast('{"latitude": "40.0"}', log=RecordingLogger())

    def test_fractional_timestamp_raises(self):
        with self.assertRaises(DecodeError):
            decode_forecast('{"currently": {"time": 1.5}}', log=RecordingLogger())

    def test_non_object_top_level_raises(self):
        with self.assertRaises(DecodeError):
            decode_forecast("[1, 2]", log=RecordingLogger())

    def test_reads_file_like_body(self):
        f = decode_forecast(io.BytesIO(b'{"timezone": "Europe/Oslo"}'))
        self.assertEqual(f.timezone, "Europe/Oslo")

    def test_same_bytes_decode_equal(self):
        body = json.dumps(_make_forecast_payload()).encode()
        self.assertEqual(decode_forecast(body), decode_forecast(body))


if __name__ == "__main__":
    unittest.main()
