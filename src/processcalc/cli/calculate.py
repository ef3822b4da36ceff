"""
Command-line interface for process calculations.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

from ..calculator.output import to_json, to_markdown, to_summary
from ..calculator.registry import get_process
from ..calculator.validation import validate_inputs
from ..enums import Process
from ..exceptions import ProcessCalcError
from ..io.loaders import save_export_json
from ..io.records import ExportData, make_record
from ..materials import REGISTRIES, list_materials

logger = logging.getLogger(__name__)


def _parse_assignments(assignments: List[str]) -> Dict[str, str]:
    """Turn ['key=value', ...] into a dict; raises ValueError on bad items."""
    fields = {}
    for item in assignments:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected key=value, got '{item}'")
        fields[key.strip()] = value.strip()
    return fields


def _load_fields(path: str) -> Dict:
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of parameter fields")
    # Accept a bridge-style document as well as bare fields
    if isinstance(data.get("parameters"), dict):
        data = data["parameters"]
    return data


def _print_materials(family: str) -> None:
    registry = REGISTRIES[family]
    print(f"{family.capitalize()} materials:")
    for key, name in list_materials(registry):
        print(f"  {key:<20} {name}")


def main(argv=None):
    """Main CLI entry point."""
    processes = [p.value for p in Process]

    parser = argparse.ArgumentParser(
        prog="processcalc",
        description="Calculate forces, power, tool life and recommendations for manufacturing processes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Roll a strip, parameters from a JSON file (camelCase or snake_case keys)
  processcalc rolling strip.json

  # Inline parameters; blank optional fields get form defaults
  processcalc punching --set material=steel-mild --set thickness=2 \\
      --set holeDiameter=10 --set punchDiameter=9.8

  # JSON output, and an export bundle for later import
  processcalc turning turning.json --format json --save-json run.json

  # List the materials a process family accepts
  processcalc --list-materials machining
        """
    )

    parser.add_argument(
        'process',
        nargs='?',
        choices=processes,
        metavar='PROCESS',
        help=f"Process to calculate: {', '.join(processes)}"
    )
    parser.add_argument(
        'params_file',
        nargs='?',
        help='JSON file with parameter fields'
    )
    parser.add_argument(
        '--set',
        dest='assignments',
        action='append',
        default=[],
        metavar='KEY=VALUE',
        help='Set a parameter field (repeatable, overrides the file)'
    )
    parser.add_argument(
        '--format',
        choices=['summary', 'json', 'markdown'],
        default='summary',
        help='Output format (default: summary)'
    )
    parser.add_argument(
        '--save-json',
        type=str,
        metavar='PATH',
        help='Also save an export bundle containing this calculation'
    )
    parser.add_argument(
        '--list-materials',
        choices=sorted(REGISTRIES),
        metavar='FAMILY',
        help=f"List materials for a family ({', '.join(sorted(REGISTRIES))}) and exit"
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_materials:
        _print_materials(args.list_materials)
        return 0

    if not args.process:
        parser.error("PROCESS is required unless --list-materials is given")

    # Collect raw fields
    try:
        fields = _load_fields(args.params_file) if args.params_file else {}
        fields.update(_parse_assignments(args.assignments))
    except FileNotFoundError as e:
        print(f"Error loading parameters: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error loading parameters: {e}", file=sys.stderr)
        return 1

    spec = get_process(args.process)
    validation = validate_inputs(spec.process, fields)

    for msg in validation.warnings:
        print(f"Warning: {msg.message}", file=sys.stderr)
    if not validation.valid:
        print(f"Invalid {spec.process.value} parameters:", file=sys.stderr)
        for msg in validation.errors:
            print(f"  - {msg.message}", file=sys.stderr)
            if msg.suggestion:
                print(f"    {msg.suggestion}", file=sys.stderr)
        return 1

    params = validation.params
    try:
        result = spec.calculate(params)
    except ProcessCalcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(to_json(spec.process, result, params))
    elif args.format == 'markdown':
        print(to_markdown(spec.process, result, params, validation))
    else:
        print(to_summary(spec.process, result, params))

    if args.save_json:
        export = ExportData(calculations=[make_record(spec.process, params, result)])
        try:
            output_path = save_export_json(export, Path(args.save_json))
        except OSError as e:
            print(f"Error saving export: {e}", file=sys.stderr)
            return 1
        print(f"\nSaved export: {output_path}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
