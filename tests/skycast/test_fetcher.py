"""Tests for the weather fetcher and its request validation."""

from __future__ import annotations

import httpx
import pytest
import respx

from skycast._http import AsyncTransport, SyncTransport
from skycast.exceptions import (
    InvalidDateFormatError,
    InvalidDaysError,
    UpstreamAPIError,
    ValidationError,
)
from skycast.fetcher import (
    CURRENT_FIELDS,
    DAILY_FIELDS,
    AsyncWeatherFetcher,
    WeatherFetcher,
    forecast_params,
    validate_date,
    validate_date_range,
    validate_days,
)
from tests.conftest import FORECAST_URL

BASE_URL = "https://api.open-meteo.com/v1"


@pytest.fixture
def fetcher():
    transport = SyncTransport(BASE_URL, "weather provider")
    yield WeatherFetcher(transport)
    transport.close()


class TestValidateDays:
    @pytest.mark.parametrize("days", [1, 5, 16])
    def test_valid(self, days: int) -> None:
        assert validate_days(days) == days

    @pytest.mark.parametrize("days", [0, 17, -3])
    def test_out_of_range(self, days: int) -> None:
        with pytest.raises(InvalidDaysError):
            validate_days(days)

    @pytest.mark.parametrize("days", ["3", 2.5, True])
    def test_not_an_int(self, days: object) -> None:
        with pytest.raises(InvalidDaysError):
            validate_days(days)  # type: ignore[arg-type]


class TestValidateDate:
    def test_valid(self) -> None:
        assert validate_date("2024-02-29") == "2024-02-29"

    @pytest.mark.parametrize("value", ["2024-1-5", "20240105", "2024/01/05", "yesterday", ""])
    def test_bad_format(self, value: str) -> None:
        with pytest.raises(InvalidDateFormatError, match="YYYY-MM-DD"):
            validate_date(value)

    @pytest.mark.parametrize("value", ["2023-02-29", "2024-13-01", "2024-04-31"])
    def test_not_a_calendar_date(self, value: str) -> None:
        with pytest.raises(InvalidDateFormatError):
            validate_date(value)


class TestValidateDateRange:
    def test_both_or_neither(self) -> None:
        assert validate_date_range(None, None) == (None, None)
        assert validate_date_range("2024-01-15", "2024-01-15") == ("2024-01-15", "2024-01-15")

    @pytest.mark.parametrize(("start", "end"), [("2024-01-15", None), (None, "2024-01-20")])
    def test_half_open_range(self, start: str | None, end: str | None) -> None:
        with pytest.raises(ValidationError, match="both a start date and an end date"):
            validate_date_range(start, end)

    def test_start_after_end(self) -> None:
        with pytest.raises(ValidationError, match="after end date"):
            validate_date_range("2024-01-20", "2024-01-15")

    def test_format_checked_first(self) -> None:
        with pytest.raises(InvalidDateFormatError):
            validate_date_range("2024-02-30", None)


class TestForecastParams:
    def test_forecast_days_without_range(self) -> None:
        params = dict(forecast_params(48.85, 2.35, 3, "metric"))
        assert params["forecast_days"] == "3"
        assert params["timezone"] == "auto"
        assert params["daily"] == ",".join(DAILY_FIELDS)
        assert "start_date" not in params

    def test_date_range_replaces_forecast_days(self) -> None:
        params = dict(forecast_params(48.85, 2.35, 3, "metric", "2024-01-15", "2024-01-20"))
        assert "forecast_days" not in params
        assert params["start_date"] == "2024-01-15"
        assert params["end_date"] == "2024-01-20"

    def test_imperial_tokens(self) -> None:
        params = dict(forecast_params(48.85, 2.35, 3, "imperial"))
        assert params["temperature_unit"] == "fahrenheit"
        assert params["wind_speed_unit"] == "mph"
        assert params["precipitation_unit"] == "inch"


class TestWeatherFetcher:
    @respx.mock
    def test_fetch_current(self, fetcher, current_payload) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=current_payload))
        raw = fetcher.fetch_current(40.7128, -74.006, "metric")
        assert raw == current_payload
        params = route.calls.last.request.url.params
        assert params["latitude"] == "40.7128"
        assert params["longitude"] == "-74.006"
        assert params["current"] == ",".join(CURRENT_FIELDS)
        assert params["temperature_unit"] == "celsius"

    @respx.mock
    def test_fetch_current_kelvin_uses_celsius(self, fetcher, current_payload) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=current_payload))
        fetcher.fetch_current(40.7128, -74.006, "kelvin")
        params = route.calls.last.request.url.params
        assert params["temperature_unit"] == "celsius"
        assert params["wind_speed_unit"] == "kmh"

    @respx.mock
    def test_fetch_forecast(self, fetcher, forecast_payload) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))
        raw = fetcher.fetch_forecast(48.85, 2.35, days=16, units="imperial")
        assert raw["timezone"] == "Europe/Paris"
        assert route.calls.last.request.url.params["forecast_days"] == "16"

    @pytest.mark.parametrize("days", [0, 17])
    @respx.mock(assert_all_called=False)
    def test_fetch_forecast_rejects_days_before_network(self, fetcher, days: int) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json={}))
        with pytest.raises(InvalidDaysError):
            fetcher.fetch_forecast(48.85, 2.35, days=days)
        assert not route.called

    @respx.mock(assert_all_called=False)
    def test_fetch_forecast_rejects_bad_date_before_network(self, fetcher) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json={}))
        with pytest.raises(InvalidDateFormatError):
            fetcher.fetch_forecast(48.85, 2.35, days=3, start_date="2024-02-30")
        assert not route.called

    @respx.mock
    def test_fetch_alerts(self, fetcher, alerts_payload) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=alerts_payload))
        raw = fetcher.fetch_alerts(40.71, -74.0)
        assert len(raw["alerts"]) == 2
        assert route.calls.last.request.url.params["alerts"] == "temperature"

    @respx.mock
    def test_provider_error(self, fetcher) -> None:
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(500))
        with pytest.raises(UpstreamAPIError):
            fetcher.fetch_current(40.7, -74.0)


class TestAsyncWeatherFetcher:
    @respx.mock
    @pytest.mark.asyncio
    async def test_fetch_forecast(self, forecast_payload) -> None:
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=forecast_payload))
        transport = AsyncTransport(BASE_URL, "weather provider")
        fetcher = AsyncWeatherFetcher(transport)
        raw = await fetcher.fetch_forecast(48.85, 2.35, days=3)
        assert len(raw["daily"]["time"]) == 10
        await transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_fetch_current(self, current_payload) -> None:
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=current_payload))
        transport = AsyncTransport(BASE_URL, "weather provider")
        fetcher = AsyncWeatherFetcher(transport)
        raw = await fetcher.fetch_current(40.7, -74.0, "imperial")
        assert raw["current"]["weather_code"] == 3
        await transport.close()
