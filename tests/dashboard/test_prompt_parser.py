"""Tests for dashboard/shared/prompt_parser.py."""

from __future__ import annotations

import pytest

from shared.prompt_parser import parse_prompt
from skycast.exceptions import ValidationError


class TestParsePrompt:
    def test_full_question(self):
        request = parse_prompt("What's the weather in Paris, FR for 3 days in fahrenheit?")
        assert request.location == "Paris"
        assert request.country == "FR"
        assert request.kind == "forecast"
        assert request.days == 3
        assert request.units == "imperial"

    def test_multi_word_city(self):
        request = parse_prompt("weather in New York")
        assert request.location == "New York"
        assert request.country is None
        assert request.kind == "current"
        assert request.days is None

    def test_forecast_keyword(self):
        request = parse_prompt("forecast for Berlin")
        assert request.kind == "forecast"
        assert request.location == "Berlin"

    def test_days_before_location(self):
        request = parse_prompt("Give me a 5 day forecast for London, gb in celsius")
        assert request.location == "London"
        assert request.country == "GB"
        assert request.days == 5
        assert request.units == "metric"

    def test_week_means_seven_days(self):
        request = parse_prompt("What is the weather in Rome for the week?")
        assert request.kind == "forecast"
        assert request.days == 7
        assert request.location == "Rome"

    def test_time_words_stripped(self):
        request = parse_prompt("Will it rain in Tokyo tomorrow?")
        assert request.location == "Tokyo"
        assert request.kind == "current"

    def test_kelvin(self):
        request = parse_prompt("temperature in kelvin at Oslo")
        assert request.units == "kelvin"
        assert request.location == "Oslo"

    def test_coordinates(self):
        request = parse_prompt("weather at 40.7128,-74.0060")
        assert request.location == "40.7128,-74.0060"

    def test_postal_code(self):
        assert parse_prompt("weather for 10001").location == "10001"

    def test_alerts(self):
        request = parse_prompt("Any weather alerts for Miami?")
        assert request.kind == "alerts"
        assert request.location == "Miami"

    def test_no_preposition_fallback(self):
        request = parse_prompt("Paris weather")
        assert request.location == "Paris"

    def test_units_default_to_settings(self):
        assert parse_prompt("weather in Lima").units is None

    @pytest.mark.parametrize("prompt", ["What's the weather?", "   ", "forecast"])
    def test_no_location(self, prompt):
        with pytest.raises(ValidationError, match="Could not find a location"):
            parse_prompt(prompt)
