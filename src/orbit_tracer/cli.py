# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for one-revolution orbit tracing.

Usage:
    # Propagate the 'Satellite' entity around 'Earth' and print elements
    orbit-tracer -i scenario.json

    # Override integration settings from the scenario file
    orbit-tracer -i scenario.json --time-step 0.5 --max-steps 200000

    # Export the traced path and the element set
    orbit-tracer -i scenario.json --export-csv path.csv
    orbit-tracer -i scenario.json --export-elements elements.json
"""
import argparse
import logging
import sys

from orbit_tracer.adapters.csv_exporter import CsvTraceExporter
from orbit_tracer.adapters.json_io import JsonElementsWriter, JsonScenarioReader
from orbit_tracer.domain.orbit_propagation import OrbitTrace, propagate_orbit
from orbit_tracer.domain.orbital_elements import OrbitalElements, elements_from_trace
from orbit_tracer.domain.scenario import Scenario

logger = logging.getLogger(__name__)


def run(
    scenario: Scenario,
    strict: bool = False,
) -> tuple[OrbitTrace, OrbitalElements]:
    """
    Propagate a scenario for one revolution and derive its elements.

    Returns:
        (trace, elements)
    """
    logger.debug(
        "Propagating %s: dt=%s, max_steps=%d",
        scenario.name, scenario.config.time_step, scenario.config.max_steps,
    )
    trace = propagate_orbit(
        scenario.initial_position,
        scenario.initial_velocity,
        scenario.config,
    )
    return trace, elements_from_trace(trace, strict=strict)


def _format_angle(value: float | None) -> str:
    return "undefined" if value is None else f"{value:.4f} deg"


def format_elements(elements: OrbitalElements) -> str:
    """Human-readable element summary, one element per line."""
    lines = [
        f"Apoapsis:                    {elements.apoapsis:.6g}",
        f"Periapsis:                   {elements.periapsis:.6g}",
        f"Semi-major axis:             {elements.semi_major_axis:.6g}",
        f"Eccentricity:                {elements.eccentricity:.6f}",
        f"Inclination:                 {elements.inclination_deg:.4f} deg",
        f"Longitude of ascending node: {_format_angle(elements.longitude_of_ascending_node_deg)}",
        f"Argument of periapsis:       {_format_angle(elements.argument_of_periapsis_deg)}",
    ]
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Trace one revolution of a body around a central attractor"
    )
    parser.add_argument(
        '--input', '-i', required=True,
        help="Path to scenario JSON (attractor and body entities)"
    )
    parser.add_argument(
        '--body', default='Satellite',
        help="Name of the orbiting body entity (default: Satellite)"
    )
    parser.add_argument(
        '--attractor', default='Earth',
        help="Name of the attracting body entity (default: Earth)"
    )
    parser.add_argument(
        '--time-step', type=float,
        help="Integration time step in seconds (overrides the scenario)"
    )
    parser.add_argument(
        '--max-steps', type=int,
        help="Maximum number of samples (overrides the scenario)"
    )
    parser.add_argument(
        '--strict', action='store_true', default=False,
        help="Fail instead of reporting undefined node/periapsis angles"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-csv',
        help="Export the traced samples to CSV"
    )
    export_group.add_argument(
        '--export-elements',
        help="Export the orbital element set to JSON"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        scenario = JsonScenarioReader().read_scenario(
            args.input, body_name=args.body, attractor_name=args.attractor,
        )
        scenario = scenario.with_overrides(
            time_step=args.time_step, max_steps=args.max_steps,
        )
        trace, elements = run(scenario, strict=args.strict)

        print(f"Traced {len(trace)} samples for {scenario.name}.")
        if trace.is_partial_arc:
            print(
                f"Warning: revolution not completed within {scenario.config.max_steps} "
                f"steps (swept {trace.swept_angle_deg:.1f} deg). "
                "Increase --max-steps or --time-step.",
                file=sys.stderr,
            )
        print(format_elements(elements))

        try:
            if args.export_csv:
                n = CsvTraceExporter().export(trace, args.export_csv)
                print(f"Exported {n} samples to {args.export_csv}")

            if args.export_elements:
                JsonElementsWriter().write_elements(elements, args.export_elements)
                print(f"Exported orbital elements to {args.export_elements}")
        except OSError as e:
            print(f"Error: Export failed: {e}", file=sys.stderr)
            sys.exit(1)

    except FileNotFoundError:
        print(
            f"Error: Input file not found: {args.input}\n"
            f"Expected a scenario JSON file with '{args.attractor}' "
            f"and '{args.body}' entities.",
            file=sys.stderr,
        )
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
