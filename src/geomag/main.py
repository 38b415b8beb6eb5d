#!/usr/bin/env python3
"""
geomag command line front-end.

Prints the IGRF magnetic flux density at a WGS-84 position:

    geomag 2020-01-01T00:00:00Z 35.6586 139.7454 100
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from geomag.config import Config, load_config
from geomag.exceptions import GeoMagError
from geomag.models.coordinates import Wgs84
from geomag.models.magnetic_field import MagFluxUnit, MagneticFieldModel
from geomag.models.model import ModelSet
from geomag.utils.logging import setup_logging
from geomag.utils.time import parse_datetime
from geomag.utils.validation import validate_latitude

logger = logging.getLogger(__name__)


class ArgumentError(Exception):
    """Invalid command line arguments."""
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = _ArgumentParser(
        prog="geomag",
        description="Magnetic flux density from the IGRF model"
    )
    parser.add_argument("date", help="ISO-8601 date/time, e.g. 2020-01-01T00:00:00Z")
    parser.add_argument("lat", type=float, help="Geodetic latitude [deg]")
    parser.add_argument("lon", type=float, help="Longitude [deg]")
    parser.add_argument("alt", type=float, help="Height above the WGS-84 ellipsoid [m]")
    parser.add_argument(
        "--unit",
        help="Output unit (nT, uT, T, G, SI, CGS, MKS, MKSA)"
    )
    parser.add_argument(
        "--coefficients",
        type=Path,
        help="IAGA coefficient file to use instead of the built-in IGRF-13"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file"
    )
    angles = parser.add_mutually_exclusive_group()
    angles.add_argument("--degrees", dest="angles", action="store_const", const="degrees",
                        help="Print angles in degrees")
    angles.add_argument("--radians", dest="angles", action="store_const", const="radians",
                        help="Print angles in radians")
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    return parser.parse_args(argv)


def format_report(position: Wgs84, field_model: MagneticFieldModel,
                  angles: str = "degrees", precision: int = 1) -> str:
    """
    Position echo followed by NED and derived field components.

    precision applies to nT output; scaled units are printed in
    scientific notation with six decimals.
    """
    components = field_model.components(position)
    unit = field_model.unit.symbol
    value_format = ".6e" if field_model.unit.scale != 1.0 else f".{precision}f"

    def value(v: float) -> str:
        return format(v, value_format)

    def angle(radians: float, degrees: float) -> str:
        if angles == "radians":
            return f"{radians:.6f} rad"
        return f"{degrees:.4f} deg"

    return "\n".join([
        f"Position: {position}",
        f"Magnetic Flux Density: {value(components.north)} {value(components.east)} "
        f"{value(components.down)} [{unit}]",
        f"  North:       {value(components.north)} {unit}",
        f"  East:        {value(components.east)} {unit}",
        f"  Down:        {value(components.down)} {unit}",
        f"  Total:       {value(components.total)} {unit}",
        f"  Horizontal:  {value(components.horizontal)} {unit}",
        f"  Inclination: {angle(components.inclination, components.inclination_deg)}",
        f"  Declination: {angle(components.declination, components.declination_deg)}",
    ])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    try:
        args = parse_arguments(argv)
        config = load_config(args.config) if args.config else Config()
        setup_logging(args.log_level or config.logging.level, config.logging.log_file)

        date = parse_datetime(args.date)
        if not validate_latitude(args.lat):
            raise ArgumentError(f"Latitude {args.lat} out of range [-90, 90]")
        unit = MagFluxUnit.parse(args.unit or config.output.unit)

        coefficient_file = args.coefficients or config.model.coefficient_file
        model_set = ModelSet.from_file(coefficient_file) if coefficient_file else ModelSet.default()
        field_model = MagneticFieldModel(model_set, unit, config.model.cache_size)

        position = Wgs84.from_degrees(date, args.lat, args.lon, args.alt)
        print(format_report(position, field_model,
                            args.angles or config.output.angles,
                            config.output.precision))
        return 0

    except (ArgumentError, GeoMagError, ValueError, OSError) as e:
        logger.debug(f"Command failed: {str(e)}")
        print(f"Format Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
