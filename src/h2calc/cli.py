from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from h2calc.display import format_production_result, format_reverse_result
from h2calc.economics.constants import (
    DEFAULT_CONSTANTS,
    EnergySource,
    ProcessConstants,
    load_constants,
)
from h2calc.economics.curve import curve_to_frame, generate_curve
from h2calc.economics.production import ProductionInputs, compute_production
from h2calc.economics.reverse import ReverseInputs, compute_reverse
from h2calc.errors import CalculatorError

EXIT_USAGE_ERROR = 2


def _add_production_arguments(parser: argparse.ArgumentParser) -> None:
    defaults = ProductionInputs()
    parser.add_argument(
        "--source",
        default=defaults.energy_source.value,
        help=f"Energy source ({', '.join(source.value for source in EnergySource)}).",
    )
    parser.add_argument(
        "--energy-cost",
        type=float,
        default=defaults.energy_cost_per_kwh,
        help="Energy cost in $/kWh.",
    )
    parser.add_argument(
        "--water-cost",
        type=float,
        default=defaults.water_cost_per_m3,
        help="Water cost in $/m3.",
    )
    parser.add_argument(
        "--capacity",
        type=float,
        default=defaults.production_kg_per_day,
        help="Production capacity in kg/day.",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=defaults.temperature_c,
        help="Cell temperature in degC.",
    )
    parser.add_argument(
        "--pressure",
        type=float,
        default=defaults.pressure_atm,
        help="Cell pressure in atm.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="h2calc",
        description="Estimate hydrogen production economics for an electrolysis plant.",
    )
    parser.add_argument(
        "--constants",
        default=None,
        help="Path to a JSON file overriding the process constants.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    production = subparsers.add_parser("production", help="Forward production analysis.")
    _add_production_arguments(production)

    reverse_defaults = ReverseInputs()
    reverse = subparsers.add_parser(
        "reverse", help="Back-solve requirements from production and cost targets."
    )
    reverse.add_argument(
        "--target-production",
        type=float,
        default=reverse_defaults.target_production_kg_per_day,
        help="Target production in kg/day.",
    )
    reverse.add_argument(
        "--target-efficiency",
        type=float,
        default=reverse_defaults.target_efficiency_percent,
        help="Target system efficiency in percent.",
    )
    reverse.add_argument(
        "--target-cost",
        type=float,
        default=reverse_defaults.target_cost_per_kg,
        help="Target cost in $/kg.",
    )

    curve = subparsers.add_parser("curve", help="Cost and requirement curve over production.")
    _add_production_arguments(curve)
    curve.add_argument(
        "--csv",
        action="store_true",
        help="Emit the curve as CSV instead of a table.",
    )
    return parser


def _production_inputs(args: argparse.Namespace) -> ProductionInputs:
    return ProductionInputs(
        energy_source=args.source,
        energy_cost_per_kwh=args.energy_cost,
        water_cost_per_m3=args.water_cost,
        production_kg_per_day=args.capacity,
        temperature_c=args.temperature,
        pressure_atm=args.pressure,
    )


def _print_report(title: str, report: dict[str, str]) -> None:
    print(f"{title}:")
    width = max(len(label) for label in report)
    for label, value in report.items():
        print(f"  {label:<{width}}  {value}")


def _run(args: argparse.Namespace, constants: ProcessConstants) -> None:
    if args.command == "production":
        result = compute_production(_production_inputs(args), constants)
        _print_report("Production Analysis", format_production_result(result))
    elif args.command == "reverse":
        inputs = ReverseInputs(
            target_production_kg_per_day=args.target_production,
            target_efficiency_percent=args.target_efficiency,
            target_cost_per_kg=args.target_cost,
        )
        result = compute_reverse(inputs, constants)
        _print_report("Reverse Calculation", format_reverse_result(result))
    else:
        frame = curve_to_frame(generate_curve(_production_inputs(args), constants))
        if args.csv:
            print(frame.to_csv(index=False), end="")
        else:
            print(frame.to_string(index=False, float_format=lambda value: f"{value:.2f}"))


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        constants = DEFAULT_CONSTANTS
        if args.constants is not None:
            constants = load_constants(Path(args.constants))
        _run(args, constants)
    except (CalculatorError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
