"""Command line entry point for creating decision and debt records."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from . import create
from .config import FILE_KEYS, Config, find_config_file, load_config_file, sanity_checks
from .errors import RecordError


class _HelpFormatter(argparse.HelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        super().add_usage(usage, actions, groups, prefix or "Usage: ")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``rtrs`` command."""
    parser = argparse.ArgumentParser(
        prog="rtrs",
        usage="%(prog)s [OPTIONS] [commands]...",
        formatter_class=_HelpFormatter,
    )
    parser.add_argument("--config-file", help="Path to the config file")
    parser.add_argument("--file-type", help="Record file type [default: adoc]")
    parser.add_argument("--template-dir", help="Path to templates [default: ./templates]")
    parser.add_argument(
        "--adr-dir",
        help="Path to Architecture Decision Records [default: ./architecture-decision-record]",
    )
    parser.add_argument(
        "--tdr-dir",
        help="Path to Technical Debts Records [default: ./technical-debt-records]",
    )
    parser.add_argument("-t", "--record-type", default="", help="Record type to create")
    parser.add_argument("-s", "--superseded", default="", help="Supersed old decision record")
    parser.add_argument(
        "--dry-run", action="store_true", help="Just run and don't create files"
    )
    parser.add_argument("commands", nargs="*")
    return parser


def parse_config(argv: list[str] | None = None) -> tuple[Config, Path | None]:
    """Build the settings from the command line, a config file and defaults."""
    args = build_parser().parse_intermixed_args(argv)

    if args.config_file:
        path: Path | None = Path(args.config_file)
        if not path.is_file():
            raise RecordError(f"Config file {path} does not exist")
    else:
        path = find_config_file(Path.cwd())

    settings = load_config_file(path) if path else {}
    for key in FILE_KEYS:
        value = getattr(args, key)
        if value is not None:
            settings[key] = value

    config = Config(
        **settings,
        record_type=args.record_type,
        superseded=args.superseded,
        dry_run=args.dry_run,
        commands=list(args.commands),
    )
    return config, path


def handle_command(config: Config) -> None:
    """Run the subcommand named first in the positional arguments."""
    if not config.commands:
        return

    subcmd, *rest = config.commands
    remainder = " ".join(rest)

    if subcmd == "init":
        return
    if subcmd == "create":
        create.execute(remainder, config)
        return
    raise RecordError("Command not implemented yet")


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    try:
        config, path = parse_config(argv)
    except RecordError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Loaded config from: {json.dumps(str(path) if path else '')}")
    print(f"Config: {config!r}")
    print(f"Command: {json.dumps(config.commands)}")

    try:
        sanity_checks(config)
    except RecordError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        handle_command(config)
    except RecordError as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())