"""Concurrent multi-location comparison with the async client."""

import asyncio

from skycast import AsyncWeatherClient


async def compare(locations: list[str], units: str = "metric") -> None:
    async with AsyncWeatherClient() as client:
        report = await client.compare(locations, units=units)

    print(f"=== Comparison ({report.units}) ===")
    for entry in report.comparison:
        if entry.success and entry.data is not None:
            current = entry.data.current
            unit = entry.data.units.temperature
            print(f"  {entry.location:<22} {current.temperature}{unit}  {current.weather.description}")
        else:
            print(f"  {entry.location:<22} FAILED ({entry.error_kind}): {entry.error}")

    print(f"\n  {len(report.succeeded)} succeeded, {len(report.failed)} failed")


if __name__ == "__main__":
    asyncio.run(compare(["Miami", "Seattle, US", "10001", "51.5074,-0.1278", "Nowhereville12345xyz"]))
