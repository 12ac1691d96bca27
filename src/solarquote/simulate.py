"""CLI entry point for a one-off production and savings simulation.

    uv run solarquote-simulate --panels 20 --wattage 0.4 --tilt 30 --lat 45
    uv run solarquote-simulate --panels 12 --address "12 rue de la Paix, Lyon"
"""

import argparse
import sys

from dotenv import load_dotenv

from solarquote.compute import GeocodingError, geocode_address, run
from solarquote.formatting import format_currency, format_number
from solarquote.logs import setup_logging
from solarquote.models import (
    PanelArrayConfig,
    SimulationInput,
    SiteLocation,
    SiteOrientation,
)


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="solarquote-simulate",
        description="Estimate annual production and savings of a solar array.",
    )
    p.add_argument("--panels", type=int, required=True, help="number of panels")
    p.add_argument("--wattage", type=float, default=0.4, help="rating per panel (kW)")
    p.add_argument("--orientation", type=float, default=180.0, help="heading, 180=south")
    p.add_argument("--tilt", type=float, default=30.0, help="inclination in degrees")
    p.add_argument("--lat", type=float, help="site latitude")
    p.add_argument("--lng", type=float, default=0.0, help="site longitude")
    p.add_argument("--address", help="geocode the site instead of --lat/--lng")
    p.add_argument("--price", type=float, default=0.20, help="electricity price (EUR/kWh)")
    p.add_argument("--cost", type=float, help="installation cost (EUR)")
    return p


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    setup_logging()
    args = _parser().parse_args(argv)

    if args.address:
        try:
            location = geocode_address(args.address)
        except GeocodingError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    elif args.lat is not None:
        location = SiteLocation(lat=args.lat, lng=args.lng)
    else:
        print("error: either --lat or --address is required", file=sys.stderr)
        return 2

    results = run(
        SimulationInput(
            array=PanelArrayConfig(panel_count=args.panels, panel_wattage=args.wattage),
            orientation=SiteOrientation(orientation=args.orientation, tilt=args.tilt),
            location=location,
            electricity_price=args.price,
            installation_cost=args.cost,
        )
    )
    print(f"Production annuelle : {format_number(results.annual_production)} kWh")
    print(f"Économies annuelles : {format_currency(results.annual_savings)}")
    print(f"Économies mensuelles : {format_currency(results.monthly_savings)}")
    print(f"Économies sur 20 ans : {format_currency(results.twenty_year_savings)}")
    if results.payback_period is not None:
        print(f"Retour sur investissement : {format_number(results.payback_period, 1)} ans")
    return 0


if __name__ == "__main__":
    sys.exit(main())
