"""
Command-line interface for propguard.

Inspection helpers around the checker: edit distances, the built-in
whitelist, eligibility of display names, a one-off check of a synthetic
instantiation, and a starter configuration file.
"""

import argparse
import logging
import sys
import tomllib
from pathlib import Path
from typing import List, Optional

from ..checker import PropValidator
from ..config import get_config, set_config_path, write_starter_config
from ..matching import edit_distance, should_instrument
from ..reporting import StreamReporter
from ..validation import ValidationError, handle_cli_error
from ..whitelist import WHITELIST, list_categories

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _split_names(value: str) -> List[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propguard",
        description="Inspect prop name checking: typos and undeclared props.",
    )
    parser.add_argument("--config", type=Path, help="Path to a propguard TOML configuration file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    distance = subparsers.add_parser("distance", help="Print the edit distance between two names.")
    distance.add_argument("first")
    distance.add_argument("second")

    whitelist = subparsers.add_parser("whitelist", help="List whitelist categories or their patterns.")
    whitelist.add_argument("--category", help=f"One of: {', '.join(list_categories())}")

    eligible = subparsers.add_parser("eligible", help="Show whether display names would be instrumented.")
    eligible.add_argument("names", nargs="+")

    check = subparsers.add_parser("check", help="Check props against a schema and print diagnostics.")
    check.add_argument("--component", default="Component", help="Display name used in messages.")
    check.add_argument("--schema", default="", help="Comma-separated declared prop names.")
    check.add_argument("--props", required=True, help="Comma-separated supplied prop names.")

    init = subparsers.add_parser("init-config", help="Write a starter configuration file.")
    init.add_argument("path", type=Path)
    init.add_argument("--force", action="store_true", help="Overwrite an existing file.")

    return parser


def main_cli(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the ``propguard`` command.

    Returns:
        Exit status: 0 on success, 1 when ``check`` produced diagnostics.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if args.command == "distance":
        print(edit_distance(args.first, args.second))
        return 0

    if args.command == "whitelist":
        if args.category is None:
            for name in list_categories():
                print(f"{name}\t{len(WHITELIST[name])} patterns")
            return 0
        if args.category not in WHITELIST:
            logger.error(f"Unknown category '{args.category}'. Available: {', '.join(list_categories())}")
            return 2
        for pattern in WHITELIST[args.category]:
            print(pattern)
        return 0

    if args.command == "init-config":
        try:
            path = write_starter_config(args.path, overwrite=args.force)
        except FileExistsError as e:
            handle_cli_error(error=e, context="writing starter configuration", exit_code=2, logger=logger)
        print(f"Wrote {path}")
        return 0

    if args.config is not None:
        set_config_path(args.config)
    try:
        config = get_config()
    except (FileNotFoundError, tomllib.TOMLDecodeError, ValidationError) as e:
        handle_cli_error(error=e, context="configuration loading", exit_code=2, logger=logger)

    if args.command == "eligible":
        for name in args.names:
            verdict = "instrumented" if should_instrument(name, config) else "skipped"
            print(f"{name}\t{verdict}")
        return 0

    # check
    component = type(args.component, (), {})
    component.display_name = args.component
    component.prop_types = {name: None for name in _split_names(args.schema)}
    props = {name: True for name in _split_names(args.props)}

    validator = PropValidator(config, StreamReporter(sys.stdout))
    diagnostics = validator.validate(component, props)
    return 1 if diagnostics else 0


def run() -> None:
    sys.exit(main_cli())


if __name__ == "__main__":
    run()
