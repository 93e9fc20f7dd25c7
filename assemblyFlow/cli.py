from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from assemblyFlow import TOOL_NAME, __version__
from assemblyFlow.binary import FileBinary
from assemblyFlow.credentials import StaticCredentials
from assemblyFlow.dispatcher import Dispatcher
from assemblyFlow.exceptions import AssemblyFlowError, ItemProcessingError
from assemblyFlow.operation_registry import (
    get_all_operation_ids,
    get_operation_display_name,
    get_operation_spec,
)

API_KEY_ENV = "ASSEMBLYAI_API_KEY"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Run AssemblyAI operations over a batch of input items.",
    )
    parser.add_argument("-l", "--log", help="specify the log level", dest="loglevel")
    parser.add_argument("--version", help="show version and exit", action="store_true")
    parser.add_argument("--list-operations", help="list available operations", action="store_true")
    parser.add_argument("--describe", help="show the parameters of an operation", metavar="RESOURCE/OPERATION")
    parser.add_argument("--run", help="run an operation", metavar="RESOURCE/OPERATION")
    parser.add_argument(
        "--params",
        help="JSON object or list of objects (one per item), or @path to a JSON file",
        metavar="JSON",
    )
    parser.add_argument(
        "--binary",
        help="attach a file to every item under the given binary property",
        metavar="NAME=PATH",
        action="append",
        default=[],
    )
    parser.add_argument("--continue-on-fail", help="report failed items instead of stopping", action="store_true")
    parser.add_argument("--api-key", help=f"AssemblyAI API key (default: ${API_KEY_ENV})")
    parser.add_argument("--check-credentials", help="check that the API key is accepted", action="store_true")
    return parser


@dataclass
class CliExit:
    code: int
    stdout: str = ""
    stderr: str = ""


def setup_logging(args: argparse.Namespace) -> None:
    """Configure logging based on command-line arguments."""
    if args.loglevel is not None:
        numeric_level = getattr(logging, args.loglevel.upper(), None)
    else:
        numeric_level = logging.WARNING
    if not isinstance(numeric_level, int):
        raise ValueError("Invalid log level: %s" % args.loglevel)
    logging.basicConfig(level=numeric_level, format='%(message)s')


def validate_operation(operation_id: str) -> Optional[CliExit]:
    """Validate a "resource/operation" identifier and return an error if unknown."""
    resource, _, operation = operation_id.partition("/")
    if get_operation_spec(resource, operation) is not None:
        return None
    available = "\n".join(f"  - {op_id}" for op_id in get_all_operation_ids())
    message = (
        f"✗ Operation '{operation_id}' not found\n\n"
        f"Available operations:\n{available}\n"
    )
    return CliExit(code=1, stderr=message)


def handle_list_operations(args) -> Optional[CliExit]:
    if not getattr(args, "list_operations", False):
        return None
    lines = ["Available operations:", "-" * 80]
    for op_id in get_all_operation_ids():
        lines.append(f"  {op_id:<36} {get_operation_display_name(op_id)}")
    lines.append("")
    return CliExit(code=0, stdout="\n".join(lines) + "\n")


def handle_describe(args) -> Optional[CliExit]:
    operation_id = getattr(args, "describe", None)
    if not operation_id:
        return None
    error = validate_operation(operation_id)
    if error:
        return error

    resource, _, operation = operation_id.partition("/")
    spec = get_operation_spec(resource, operation)
    lines = [get_operation_display_name(operation_id)]
    if spec.description:
        lines.append(spec.description)
    lines.append("-" * 80)
    for entry in spec.params_class.describe():
        marker = "*" if entry["required"] else " "
        lines.append(f"{marker} {entry['name']} ({entry['widget']}) {entry['label']}")
        lines.append(f"    default: {json.dumps(entry['default'])}")
        if "options" in entry:
            lines.append(f"    options: {', '.join(map(str, entry['options']))}")
        if "show" in entry:
            conditions = ", ".join(f"{key} in {values}" for key, values in entry["show"].items())
            lines.append(f"    shown when: {conditions}")
        if "tooltip" in entry:
            lines.append(f"    {entry['tooltip']}")
    lines.append("")
    return CliExit(code=0, stdout="\n".join(lines) + "\n")


def load_params(value: Optional[str]) -> List[Dict[str, Any]]:
    """Parse --params into one mapping per input item.

    Raises:
        ValueError: the text is not JSON, or not an object or list of objects
    """
    if not value:
        return [{}]
    if value.startswith("@"):
        value = Path(value[1:]).read_text(encoding="utf-8")
    data = json.loads(value)
    items = data if isinstance(data, list) else [data]
    if not items or not all(isinstance(item, dict) for item in items):
        raise ValueError("Parameters must be a JSON object or a non-empty list of objects")
    return items


def parse_binaries(values: Sequence[str]) -> Dict[str, FileBinary]:
    binaries: Dict[str, FileBinary] = {}
    for value in values:
        name, sep, path = value.partition("=")
        if not sep or not name or not path:
            raise ValueError(f"Invalid binary '{value}', expected NAME=PATH")
        binaries[name] = FileBinary(path)
    return binaries


def resolve_api_key(args) -> Optional[str]:
    return getattr(args, "api_key", None) or os.environ.get(API_KEY_ENV)


def handle_check_credentials(args, dispatcher: Dispatcher) -> Optional[CliExit]:
    if not getattr(args, "check_credentials", False):
        return None
    valid, reason = dispatcher.check_credentials()
    if valid:
        return CliExit(code=0, stdout="✓ API key accepted\n")
    return CliExit(code=1, stderr=f"✗ API key rejected: {reason}\n")


def handle_run(args, dispatcher: Dispatcher) -> Optional[CliExit]:
    operation_id = getattr(args, "run", None)
    if not operation_id:
        return None
    error = validate_operation(operation_id)
    if error:
        return error

    try:
        params_list = load_params(getattr(args, "params", None))
        binaries = parse_binaries(getattr(args, "binary", []))
    except (OSError, ValueError) as exc:
        return CliExit(code=2, stderr=f"✗ {exc}\n")

    resource, _, operation = operation_id.partition("/")
    try:
        results = dispatcher.run(
            resource,
            operation,
            params_list,
            binaries=[dict(binaries) for _ in params_list],
            continue_on_fail=getattr(args, "continue_on_fail", False),
        )
    except ItemProcessingError as exc:
        return CliExit(code=1, stderr=f"✗ {exc}\n")
    except AssemblyFlowError as exc:
        return CliExit(code=1, stderr=f"✗ {exc.message}\n")

    output = json.dumps([result.to_item() for result in results], indent=2, default=str)
    code = 0 if all(result.ok for result in results) else 1
    return CliExit(code=code, stdout=output + "\n")


def run_cli(args, dispatcher_factory=None) -> CliExit:
    """Dispatch parsed arguments to the matching handler."""
    if args.version:
        return CliExit(code=0, stdout=f"{TOOL_NAME} {__version__}\n")

    for handler in (handle_list_operations, handle_describe):
        result = handler(args)
        if result is not None:
            return result

    if not (args.run or args.check_credentials):
        return CliExit(code=2, stderr="✗ Nothing to do, see --help\n")

    api_key = resolve_api_key(args)
    if not api_key:
        return CliExit(code=2, stderr=f"✗ No API key, use --api-key or set {API_KEY_ENV}\n")

    factory = dispatcher_factory or (lambda key: Dispatcher(StaticCredentials(key)))
    with factory(api_key) as dispatcher:
        for handler in (handle_check_credentials, handle_run):
            result = handler(args, dispatcher)
            if result is not None:
                return result
    return CliExit(code=0)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args)

    result = run_cli(args)
    if result.stdout:
        print(result.stdout, end="")
    if result.stderr:
        print(result.stderr, end="", file=sys.stderr)
    sys.exit(result.code)


if __name__ == "__main__":
    main()
