"""Command line access to configuration resolution (``python -m rdebugger``).

Usage::

    python -m rdebugger templates --initial
    python -m rdebugger --workspace . --file script.R resolve launch.json
    python -m rdebugger transport attach.json

Every command prints JSON on stdout. Configuration files may hold a single
configuration object or a ``launch.json`` document, in which case the first
entry of ``configurations`` is used.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from rdebugger.adapter.startup import make_startup_arguments
from rdebugger.adapter.transport import select_transport
from rdebugger.config.catalog import dynamic_templates
from rdebugger.config.catalog import initial_templates
from rdebugger.config.config_manager import get_settings
from rdebugger.config.environment import EnvironmentSignals
from rdebugger.config.resolver import DebugConfigurationResolver
from rdebugger.constants import DEFAULT_ATTACH_PORT
from rdebugger.constants import DEFAULT_HOST
from rdebugger.errors import RDebuggerError

logger = logging.getLogger(__name__)

EXIT_FATAL = 1
EXIT_UNRESOLVED = 2

# Eventually this can just be logging.getLevelNamesMapping()
NAME_TO_LEVEL: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def load_configuration(source: str | None) -> dict[str, Any]:
    """Read a configuration from a file, ``-`` for stdin, or nothing."""
    if source is None:
        return {}
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    data = json.loads(text)
    if isinstance(data, dict) and isinstance(data.get("configurations"), list):
        configurations = data["configurations"]
        if not configurations:
            return {}
        data = configurations[0]
    if not isinstance(data, dict):
        msg = f"Expected a JSON object in {source}"
        raise ValueError(msg)
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdebugger", description="Resolve R debugger launch/attach configurations"
    )
    parser.add_argument("--workspace", type=str, default=None, help="Workspace folder")
    parser.add_argument("--file", type=str, default=None, help="File open in the editor")
    parser.add_argument(
        "--scheme", type=str, default="file", help="URI scheme of the open file (default: file)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=list(NAME_TO_LEVEL),
        help="Log level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    templates = sub.add_parser("templates", help="List configuration templates")
    templates.add_argument(
        "--initial", action="store_true", help="Templates for a new launch.json"
    )

    for name, help_text in (
        ("resolve", "Resolve a configuration"),
        ("transport", "Resolve a configuration and select its adapter transport"),
        ("startup", "Resolve a launch configuration and print R's startup arguments"),
    ):
        command = sub.add_parser(name, help=help_text)
        command.add_argument(
            "config", nargs="?", default=None, help="JSON file, '-' for stdin, omit for none"
        )
        command.add_argument(
            "--port", type=int, default=DEFAULT_ATTACH_PORT, help="Fallback port for attach"
        )
        command.add_argument(
            "--host", type=str, default=DEFAULT_HOST, help="Fallback host for attach"
        )
        command.add_argument(
            "--help-panel", action="store_true", help="A help panel is available"
        )
        if name == "startup":
            command.add_argument("--r-path", type=str, default=None, help="Path to R")

    return parser


def run(args: argparse.Namespace) -> int:
    signals = EnvironmentSignals.collect(args.workspace, args.file, args.scheme)

    if args.command == "templates":
        templates = initial_templates() if args.initial else dynamic_templates(signals)
        print(json.dumps(templates, indent=2))
        return 0

    resolver = DebugConfigurationResolver(args.port, args.host, args.help_panel)
    config = resolver.resolve(load_configuration(args.config), signals)
    if config is None:
        logger.error("Debug configuration could not be resolved")
        return EXIT_UNRESOLVED

    if args.command == "resolve":
        output: Any = {"tag": config.tag, "configuration": config.to_dict()}
    elif args.command == "transport":
        transport = select_transport(config, args.help_panel)
        output = {"kind": transport.kind, **vars(transport)}
        if "command_line_args" in output:
            output["command_line_args"] = list(output["command_line_args"])
    else:
        output = make_startup_arguments(config, args.r_path or get_settings().r_path)

    print(json.dumps(output, indent=2))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=NAME_TO_LEVEL.get(args.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler()],
    )

    try:
        return run(args)
    except RDebuggerError as e:
        logger.error("%s", e)
        return EXIT_FATAL
    except (OSError, ValueError) as e:
        logger.error("Unable to read configuration: %s", e)
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
