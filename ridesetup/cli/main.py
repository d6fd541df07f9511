"""
Command-line interface for the ride setup recommender.

Usage:
    python -m ridesetup make-example [--output-dir examples]
    python -m ridesetup tire-pressure --input tire.json [--output result.json] [--readable]
    python -m ridesetup suspension --input suspension.json [--fork "Fox 36 Float"] [--shock NAME]
    python -m ridesetup gears --chainrings 50/34 --cogs 11-34 [--cadence 90]
    python -m ridesetup compare --current-chainrings 50/34 --current-cogs 11-28 \
        --proposed-chainrings 50/34 --proposed-cogs 11-34
    python -m ridesetup catalog [--kind forks|shocks]
    python -m ridesetup serve [--port 8000]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from ridesetup import __version__
from ridesetup.catalog.suspension import (
    FORK_DATABASE,
    SHOCK_DATABASE,
    find_spec,
    list_forks,
    list_shocks,
)
from ridesetup.cli.readable_output import (
    print_catalog,
    print_comparison,
    print_gear_table,
    print_pressure_result,
    print_suspension_result,
)
from ridesetup.models.inputs import (
    GearSetup,
    RidingDiscipline,
    SurfaceType,
    SuspensionInputs,
    TireCasing,
    TirePressureInputs,
    TireType,
    WheelDiameter,
)
from ridesetup.models.settings import EngineSettings
from ridesetup.physics.gearing import DEFAULT_CADENCE_RPM, calculate_gear_ratios, compare_setups
from ridesetup.physics.suspension import calculate_suspension_setup
from ridesetup.physics.tire_pressure import calculate_tire_pressure

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ridesetup",
        description="Ride Setup Recommender - tire pressure, suspension baseline and gear ratios. "
                    "Results are starting points; always respect component limits.",
    )
    parser.add_argument("--version", action="version", version=f"ridesetup {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log calculation details to stderr",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="JSON file overriding engine tuning constants",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate example input JSON files",
    )
    example_parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=Path("."),
        help="Directory for tire.json and suspension.json (default: current directory)",
    )

    # tire-pressure command
    tire_parser = subparsers.add_parser(
        "tire-pressure",
        help="Recommend front/rear tire pressure",
    )
    _add_io_arguments(tire_parser, "tire setup")

    # suspension command
    susp_parser = subparsers.add_parser(
        "suspension",
        help="Recommend suspension air pressure, sag and rebound",
    )
    _add_io_arguments(susp_parser, "rider and suspension")
    susp_parser.add_argument(
        "--fork",
        default=None,
        help='Catalog fork name, e.g. "Fox 36 Float" (overrides any fork in the input file)',
    )
    susp_parser.add_argument(
        "--shock",
        default=None,
        help='Catalog shock name, e.g. "RockShox Super Deluxe Ultimate"',
    )
    susp_parser.add_argument(
        "--travel",
        type=float,
        default=None,
        help="Override the catalog travel (fork) or stroke (shock) in mm",
    )

    # gears command
    gears_parser = subparsers.add_parser(
        "gears",
        help="List gear ratios and speeds for a drivetrain",
    )
    gears_parser.add_argument("--chainrings", required=True, help='Chainrings, e.g. "50/34"')
    gears_parser.add_argument("--cogs", required=True, help='Cassette, e.g. "11-34" or "11,12,13,..."')
    gears_parser.add_argument("--circumference", type=float, default=2100.0, help="Wheel circumference in mm")
    gears_parser.add_argument("--cadence", type=float, default=DEFAULT_CADENCE_RPM, help="Cadence in RPM")
    gears_parser.add_argument("--output", "-o", type=Path, default=None, help="Path to save JSON output")
    gears_parser.add_argument("--readable", action="store_true", help="Print a table instead of JSON")

    # compare command
    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare two drivetrains",
    )
    compare_parser.add_argument("--current-chainrings", required=True)
    compare_parser.add_argument("--current-cogs", required=True)
    compare_parser.add_argument("--proposed-chainrings", required=True)
    compare_parser.add_argument("--proposed-cogs", required=True)
    compare_parser.add_argument("--circumference", type=float, default=2100.0)
    compare_parser.add_argument("--readable", action="store_true")

    # catalog command
    catalog_parser = subparsers.add_parser(
        "catalog",
        help="List catalog forks and shocks",
    )
    catalog_parser.add_argument(
        "--kind",
        choices=["forks", "shocks", "all"],
        default="all",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def _add_io_arguments(parser: argparse.ArgumentParser, what: str) -> None:
    parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help=f"Path to JSON input file with {what} parameters",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON output (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--readable",
        action="store_true",
        help="Print a human-readable summary instead of JSON",
    )


def load_settings(path: Optional[Path]) -> EngineSettings:
    """Load tuning overrides, or the defaults when no file is given."""
    if path is None:
        return EngineSettings()
    return EngineSettings.model_validate_json(path.read_text())


def _emit(result: BaseModel | list, output: Optional[Path]) -> None:
    """Write JSON to a file or stdout."""
    if isinstance(result, list):
        output_json = json.dumps([r.model_dump(mode="json") for r in result], indent=2)
    else:
        output_json = result.model_dump_json(indent=2)

    if output:
        output.write_text(output_json)
        print(f"\nResults saved to {output}", file=sys.stderr)
    else:
        print(output_json)


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate example input JSON files."""
    tire = TirePressureInputs(
        rider_weight=165,
        equipment_weight=19,
        tire_width_mm=28,
        rim_width_mm=21,
        wheel_diameter=WheelDiameter.ROAD_700C,
        casing=TireCasing.STANDARD,
        surface=SurfaceType.PAVEMENT,
        tire_type=TireType.TUBELESS,
        is_hookless=False,
    )
    suspension = SuspensionInputs(
        rider_weight=180,
        equipment_weight=5,
        fork=FORK_DATABASE["Fox 34 Float"],
        discipline=RidingDiscipline.TRAIL,
    )

    args.output_dir.mkdir(parents=True, exist_ok=True)
    tire_path = args.output_dir / "tire.json"
    suspension_path = args.output_dir / "suspension.json"
    tire_path.write_text(tire.model_dump_json(indent=2))
    suspension_path.write_text(suspension.model_dump_json(indent=2, exclude_none=True))

    print(f"Created example input files: {tire_path}, {suspension_path}")
    print("\nRun calculations with:")
    print(f"  python -m ridesetup tire-pressure --input {tire_path}")
    print(f"  python -m ridesetup suspension --input {suspension_path}")

    return 0


def cmd_tire_pressure(args: argparse.Namespace) -> int:
    """Recommend tire pressure."""
    try:
        settings = load_settings(args.settings)
        with open(args.input) as f:
            input_data = json.load(f)

        inputs = TirePressureInputs(**input_data)

        print("\nTire Pressure", file=sys.stderr)
        print(
            f"System weight: {inputs.total_weight:g} {inputs.weight_unit.value} | "
            f"Tire: {inputs.tire_width_mm:g}mm on {inputs.rim_width_mm:g}mm rim",
            file=sys.stderr,
        )

        result = calculate_tire_pressure(inputs, settings.tire)

        if args.readable:
            print_pressure_result(result)
        else:
            _emit(result, args.output)

        if result.warnings:
            print("\nWarnings:", file=sys.stderr)
            for w in result.warnings:
                print(f"  - {w}", file=sys.stderr)

        return 0

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # pydantic ValidationError is a ValueError
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1


def cmd_suspension(args: argparse.Namespace) -> int:
    """Recommend a suspension baseline."""
    try:
        settings = load_settings(args.settings)
        with open(args.input) as f:
            input_data = json.load(f)

        for flag, database, field in (
            (args.fork, FORK_DATABASE, "fork"),
            (args.shock, SHOCK_DATABASE, "shock"),
        ):
            if flag is None:
                continue
            spec = find_spec(flag, database)
            if spec is None:
                print(f"Error: Unknown {field}: {flag}", file=sys.stderr)
                print(f"Run 'python -m ridesetup catalog --kind {field}s' to list options.", file=sys.stderr)
                return 1
            if args.travel:
                spec = spec.model_copy(update={"travel_mm": args.travel})
            input_data[field] = spec.model_dump()

        inputs = SuspensionInputs(**input_data)

        print("\nSuspension Setup", file=sys.stderr)
        print(
            f"Rider + gear: {inputs.total_weight:g} {inputs.weight_unit.value} | "
            f"Discipline: {inputs.discipline.value}",
            file=sys.stderr,
        )

        outcome = calculate_suspension_setup(inputs, settings.suspension)

        if args.readable:
            print_suspension_result(outcome)
        else:
            _emit(outcome, args.output)

        return 0

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1


def cmd_gears(args: argparse.Namespace) -> int:
    """List gear ratios."""
    try:
        setup = GearSetup.from_strings(args.chainrings, args.cogs, args.circumference)
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1

    gears = calculate_gear_ratios(setup, args.cadence)
    if not gears:
        print("Error: Could not parse any chainrings or cogs", file=sys.stderr)
        return 1

    if args.readable:
        print_gear_table(gears, args.cadence)
    else:
        _emit(gears, args.output)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Compare two drivetrains."""
    try:
        current = GearSetup.from_strings(args.current_chainrings, args.current_cogs, args.circumference)
        proposed = GearSetup.from_strings(args.proposed_chainrings, args.proposed_cogs, args.circumference)
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1

    result = compare_setups(current, proposed)
    if args.readable:
        print_comparison(result)
    else:
        _emit(result, None)
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """List catalog forks and shocks."""
    if args.kind in ("forks", "all"):
        print_catalog("Forks", [FORK_DATABASE[name] for name in list_forks()])
    if args.kind in ("shocks", "all"):
        print_catalog("Shocks", [SHOCK_DATABASE[name] for name in list_shocks()])
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn

        print("\nStarting Ride Setup API", file=sys.stderr)
        print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
        print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
        print("\nPress Ctrl+C to stop\n", file=sys.stderr)

        uvicorn.run(
            "ridesetup.api.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def configure_logging(verbose: bool) -> None:
    """Send engine logs to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cli(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "make-example": cmd_make_example,
        "tire-pressure": cmd_tire_pressure,
        "suspension": cmd_suspension,
        "gears": cmd_gears,
        "compare": cmd_compare,
        "catalog": cmd_catalog,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
