"""Basic usage examples for the skycast client."""

from skycast import SkycastError, WeatherClient, WeatherRequest


def main() -> None:
    with WeatherClient() as client:
        # Current conditions from raw coordinates (no geocoding call)
        print("=== Current: 40.7128,-74.0060 ===")
        report = client.current("40.7128,-74.0060")
        c = report.current
        print(f"  {c.weather.description}, {c.temperature}{report.units.temperature}")
        print(f"  Feels like {c.feels_like}{report.units.temperature}, humidity {c.humidity}%")
        print(f"  Wind {c.wind.speed} {report.units.wind_speed} (gusts {c.wind.gust})")

        # City name with a country hint
        print("\n=== 3-day forecast: Paris, FR (imperial) ===")
        forecast = client.forecast("Paris, FR", days=3, units="imperial")
        print(f"  {forecast.location.name}, {forecast.location.country} ({forecast.timezone})")
        for day in forecast.daily:
            print(
                f"  {day.date}: {day.weather.description}, "
                f"{day.temperature.min}-{day.temperature.max}{forecast.units.temperature}"
            )

        # Postal code
        print("\n=== Alerts: 10001, US ===")
        alerts = client.alerts("10001", country="US")
        print(f"  {alerts.alert_count} alert(s) for {alerts.location.name}")
        for alert in alerts.alerts:
            print(f"  {alert.event} [{alert.severity}]")

        # Errors come back as a typed exception, or as a dict from respond()
        print("\n=== Errors ===")
        try:
            client.forecast("Paris", days=17)
        except SkycastError as exc:
            print(f"  {exc.kind}: {exc.message}")
        print(f"  {client.respond(WeatherRequest('Nowhereville12345xyz'))}")


if __name__ == "__main__":
    main()
