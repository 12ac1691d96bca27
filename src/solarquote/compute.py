"""Computation layer — geocoding, yield estimation, savings projection, and quote arithmetic."""

import datetime
import logging
import math
import os
import re
from collections.abc import Iterable

import httpx

from solarquote.models import (
    PanelArrayConfig,
    QuoteItem,
    SavingsProjection,
    SimulationInput,
    SimulationResults,
    SiteLocation,
    SiteOrientation,
    YieldEstimate,
)

log = logging.getLogger("solarquote.compute")

# Idealized full-sun-hours baseline: annual kWh per unit of panel rating.
YIELD_PER_WATT = 1000
OPTIMAL_ORIENTATION_DEG = 180.0
DEFAULT_ELECTRICITY_PRICE = 0.20  # EUR/kWh
DEGRADATION_FACTOR = 0.9  # Flat, applied across the whole horizon
SAVINGS_HORIZON_YEARS = 20
QUOTE_VALIDITY_DAYS = 30

_QUOTE_NUMBER_RE = re.compile(r"^DEV-(\d{4})-(\d+)$")


class GeocodingError(Exception):
    """Geocoder call failure."""


def geocode_address(address: str) -> SiteLocation:
    """Resolve a roof address to coordinates with Nominatim (OpenStreetMap).

    Args:
        address: Free-form postal address.

    Returns:
        SiteLocation with latitude/longitude of the best match.

    Raises:
        GeocodingError: When the address is blank, cannot be found, or the
            geocoder cannot be reached.
    """
    if not address or not address.strip():
        raise GeocodingError("Empty address")
    params = {"q": address, "format": "json", "limit": 1}
    headers = {
        "User-Agent": os.environ.get("NOMINATIM_USER_AGENT", "SolarQuote/1.0")
    }
    try:
        resp = httpx.get(
            "https://nominatim.openstreetmap.org/search",
            params=params,
            headers=headers,
            timeout=10,
        )
        resp.raise_for_status()
    except httpx.HTTPError as e:
        log.warning("geocoder failed for %r: %s", address, e)
        raise GeocodingError(f"Geocoder unavailable: {e}") from e
    results = resp.json()
    if not results:
        raise GeocodingError(f"Address not found: {address}")
    r = results[0]
    log.debug("geocoded %r -> %s, %s", address, r["lat"], r["lon"])
    return SiteLocation(lat=float(r["lat"]), lng=float(r["lon"]))


def estimate_annual_production(
    panel_count: int,
    panel_wattage: float,
    orientation_deg: float,
    tilt_deg: float,
    location: SiteLocation,
) -> float:
    """Estimate annual energy yield in kWh/year.

    Yield peaks facing due south (180°) with a tilt equal to |latitude|.
    Factors are not clamped: arrays more than 90° off-optimal give a
    negative result.
    """
    base = panel_count * panel_wattage * YIELD_PER_WATT
    orientation_factor = math.cos(
        math.radians(abs(orientation_deg - OPTIMAL_ORIENTATION_DEG))
    )
    optimal_tilt = abs(location.lat)
    tilt_factor = math.cos(math.radians(abs(tilt_deg - optimal_tilt)))
    geo_factor = 0.8 + location.lat / 100
    return base * orientation_factor * tilt_factor * geo_factor


def estimate_yield(
    array: PanelArrayConfig, orientation: SiteOrientation, location: SiteLocation
) -> YieldEstimate:
    return YieldEstimate(
        annual_production=estimate_annual_production(
            array.panel_count,
            array.panel_wattage,
            orientation.orientation,
            orientation.tilt,
            location,
        )
    )


def project_savings(
    annual_production_kwh: float,
    electricity_price_per_kwh: float = DEFAULT_ELECTRICITY_PRICE,
) -> SavingsProjection:
    """Convert annual yield into annual, monthly, and twenty-year savings."""
    annual = annual_production_kwh * electricity_price_per_kwh
    return SavingsProjection(
        annual_savings=annual,
        monthly_savings=annual / 12,
        twenty_year_savings=annual * SAVINGS_HORIZON_YEARS * DEGRADATION_FACTOR,
    )


def estimate_payback_period(
    installation_cost: float | None, annual_savings: float
) -> float | None:
    """Years needed for savings to cover the installation cost.

    Returns None when there is no cost to recover or no positive savings.
    """
    if installation_cost is None or installation_cost <= 0 or annual_savings <= 0:
        return None
    return round(installation_cost / annual_savings, 1)


def savings_schedule(
    projection: SavingsProjection, years: int = SAVINGS_HORIZON_YEARS
) -> list[float]:
    """Cumulative savings at the end of each year, with the flat degradation factor."""
    return [
        projection.annual_savings * year * DEGRADATION_FACTOR
        for year in range(1, years + 1)
    ]


def run(sim: SimulationInput) -> SimulationResults:
    """Top-level entry point: simulate a project and return its stored results.

    Args:
        sim: Array, geometry, location, and pricing inputs.

    Returns:
        SimulationResults ready to be written to projects.simulation_results.
    """
    estimate = estimate_yield(sim.array, sim.orientation, sim.location)
    savings = project_savings(estimate.annual_production, sim.electricity_price)
    log.info(
        "simulated %d panels at lat=%.4f: %.0f kWh/year",
        sim.array.panel_count,
        sim.location.lat,
        estimate.annual_production,
    )
    return SimulationResults(
        annual_production=estimate.annual_production,
        annual_savings=savings.annual_savings,
        monthly_savings=savings.monthly_savings,
        twenty_year_savings=savings.twenty_year_savings,
        payback_period=estimate_payback_period(
            sim.installation_cost, savings.annual_savings
        ),
    )


# --- Quotes ---


def quote_total(items: Iterable[QuoteItem]) -> float:
    return round(sum(item.total for item in items), 2)


def next_quote_number(existing: Iterable[str], today: datetime.date) -> str:
    """Next sequential quote number for today's year, e.g. DEV-2026-0007.

    Numbers from other years or in another format are ignored.
    """
    highest = 0
    for number in existing:
        m = _QUOTE_NUMBER_RE.match(number or "")
        if m and int(m.group(1)) == today.year:
            highest = max(highest, int(m.group(2)))
    return f"DEV-{today.year}-{highest + 1:04d}"


def default_valid_until(today: datetime.date) -> datetime.date:
    return today + datetime.timedelta(days=QUOTE_VALIDITY_DAYS)
