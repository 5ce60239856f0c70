"""Command-line entrypoint for sunflux."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from datetime import datetime

from sunflux.astro.position import solar_position
from sunflux.atmosphere.air_mass import air_mass_at
from sunflux.atmosphere.radiation import extraterrestrial_radiation, solar_radiation
from sunflux.config import config_from_env
from sunflux.contracts import resolve_optical_depth
from sunflux.errors import ValidationError
from sunflux.orchestrate.series import SeriesSpec, generate_latitudes, radiation_series
from sunflux.time.julian import to_utc

logger = logging.getLogger(__name__)

_TAU_HELP = "Optical depth, or a band: clear_sky, thin_cloud, thick_cloud."


def _parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO timestamp as UTC; offsets that leave the datetime range are rejected."""
    try:
        return to_utc(datetime.fromisoformat(value))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid datetime: {value}") from exc
    except OverflowError as exc:
        raise argparse.ArgumentTypeError(f"datetime out of range in UTC: {value}") from exc


def _parse_tau(value: str) -> float:
    """Parse `--tau` as a number or an optical depth band name."""
    try:
        return resolve_optical_depth(value)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sunflux",
        description="Solar position and surface irradiance calculator.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command")

    position = subparsers.add_parser("position", help="Solar angles and air mass at one instant.")
    position.add_argument("--time", type=_parse_iso_datetime, required=True)
    position.add_argument("--lat", type=float, required=True)
    position.add_argument("--lon", type=float, required=True)

    radiation = subparsers.add_parser("radiation", help="Surface irradiance at one instant.")
    radiation.add_argument("--time", type=_parse_iso_datetime, required=True)
    radiation.add_argument("--lat", type=float, required=True)
    radiation.add_argument("--lon", type=float, required=True)
    radiation.add_argument("--tau", type=_parse_tau, default=None, help=_TAU_HELP)

    series = subparsers.add_parser(
        "series",
        help="Daily irradiance over a year, one series per latitude.",
    )
    series.add_argument("--year", type=int, required=True)
    series.add_argument("--lat-min", type=float, required=True)
    series.add_argument("--lat-max", type=float, required=True)
    series.add_argument("--lat-step", type=float, required=True)
    series.add_argument("--lon", type=float, default=0.0)
    series.add_argument("--tau", type=_parse_tau, default=None, help=_TAU_HELP)
    series.add_argument("--hour", type=int, default=None)

    return parser


def _run(args: argparse.Namespace) -> object:
    cfg = config_from_env()
    tau = cfg.default_tau if getattr(args, "tau", None) is None else args.tau

    if args.command == "position":
        return solar_position(args.time, args.lat, args.lon).to_dict()

    if args.command == "radiation":
        irradiance = solar_radiation(
            args.lat, args.lon, args.time, tau, solar_constant=cfg.solar_constant
        )
        return {
            "time_utc": args.time.isoformat(),
            "lat": args.lat,
            "lon": args.lon,
            "tau": tau,
            "air_mass": air_mass_at(args.lat, args.lon, args.time),
            "extraterrestrial_w_m2": extraterrestrial_radiation(
                args.time, solar_constant=cfg.solar_constant
            ),
            "irradiance_w_m2": irradiance,
        }

    spec = SeriesSpec(
        year=args.year,
        latitudes=tuple(generate_latitudes(args.lat_min, args.lat_max, args.lat_step)),
        longitude=args.lon,
        tau=tau,
        hour_utc=cfg.series_hour_utc if args.hour is None else args.hour,
    )
    return [item.to_dict() for item in radiation_series(spec, cfg)]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        result = _run(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
