import argparse
import logging
import sys
from typing import List, Optional

from .config.calculator_config import CalculatorConfig
from .estimation.scan_rate import estimate_scan_rate
from .geometry.solver import CalculationMode, solve_missing_quantity
from .utils.catalog_loader import ScannerCatalogLoader
from .utils.formatting import format_angle, format_length, format_scan_rate
from .utils.logging_config import setup_logging


def build_parser(config: CalculatorConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lasersight",
        description="Laser scanner calculator: scan angle, distance, projection width and max scan rate.",
    )
    parser.add_argument("--catalog", required=True, help="Scanner catalog file (.csv or .json)")
    parser.add_argument("--scanner", default=config.default_scanner_id, help="Scanner id from the catalog")
    parser.add_argument("--mode", choices=[m.value for m in CalculationMode],
                        default=config.default_mode.value, help="Quantity to calculate")
    parser.add_argument("--angle", type=float, default=None, help="Scan angle (degrees)")
    parser.add_argument("--distance", type=float, default=None, help="Projection distance")
    parser.add_argument("--width", type=float, default=None, help="Projection width")
    parser.add_argument("--list", action="store_true", help="List the scanners in the catalog and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point: solve the missing quantity and estimate the scan rate.
    """
    config = CalculatorConfig()
    args = build_parser(config).parse_args(argv)

    setup_logging(level=logging.DEBUG if args.debug else logging.WARNING)

    # --- Data Loading ---
    try:
        loader = ScannerCatalogLoader(args.catalog)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error during catalog loading: {e}", file=sys.stderr)
        return 1

    if args.list:
        for scanner_id, scanner in loader.catalog.items():
            print(f"{scanner_id}: {scanner.name}")
        return 0

    scanner = loader.catalog.get(args.scanner)
    if scanner is None:
        print(f"Warning: scanner '{args.scanner}' not in catalog. Available scanners: {loader.scanner_ids()}",
              file=sys.stderr)

    mode = CalculationMode(args.mode)
    angle, distance, width = args.angle, args.distance, args.width

    # Untouched inputs fall back to the session defaults
    if mode is not CalculationMode.ANGLE and angle is None:
        angle = config.default_angle
    if mode is not CalculationMode.DISTANCE and distance is None:
        distance = config.default_distance

    # --- Calculation ---
    result = solve_missing_quantity(mode, angle=angle, distance=distance, width=width)
    if mode is CalculationMode.WIDTH:
        width = result
    elif mode is CalculationMode.DISTANCE:
        distance = result
    else:
        angle = result

    # --- Results ---
    unit, precision = config.length_unit, config.display_precision
    print("--- LaserSight Results ---")
    print(f"Scanner:          {scanner.name if scanner else 'N/A'}")
    print(f"Scan Angle:       {format_angle(angle, precision)}")
    print(f"Distance:         {format_length(distance, unit, precision)}")
    print(f"Projection Width: {format_length(width, unit, precision)}")
    if scanner is None or angle is None:
        print("Max Scan Rate:    Unknown")
    else:
        print(f"Max Scan Rate:    {format_scan_rate(estimate_scan_rate(scanner, angle))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
