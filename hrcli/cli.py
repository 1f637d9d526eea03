"""Command-line interface for managing people records."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from hrcli.models import Human, Metric, parse_metric
from hrcli.search import search
from hrcli.storage import Storage

STORAGE_ENV = "HR_STORAGE_PATH"
_DEFAULT_DIR_NAME = ".hr_data"


def _metric_arg(text: str) -> Metric:
    try:
        return parse_metric(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_human_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--id", help="identification number")
    parser.add_argument("-n", "--name", required=True, help="name of the human")
    parser.add_argument("--phone", help="phone number of the human")
    parser.add_argument(
        "-d", "--description", help="free-form description of the human"
    )
    parser.add_argument(
        "--label", action="append", help="labels associated with the human"
    )
    parser.add_argument(
        "--metric",
        action="append",
        type=_metric_arg,
        help="metrics associated with the human, as name:value",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its add, remove, list and search commands."""
    parser = argparse.ArgumentParser(prog="hr", description="Human Resource CLI")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    add = commands.add_parser("add", help="Add a human")
    _add_human_arguments(add)

    remove = commands.add_parser("remove", help="Remove a human")
    remove.add_argument("name", help="Name of the human to remove")

    commands.add_parser("list", help="List all humans")

    find = commands.add_parser(
        "search",
        help="Search humans by wildcard name, must-have labels, and minimal metrics",
    )
    _add_human_arguments(find)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the arguments; add and search get a ``human`` attribute."""
    args = build_parser().parse_args(argv)
    if args.command in ("add", "search"):
        args.human = Human(
            name=args.name,
            id=args.id,
            phone=args.phone,
            description=args.description,
            label=args.label,
            metric=args.metric,
        )
    return args


def default_storage_path() -> Path:
    """Storage directory from the environment, or ``~/.hr_data``."""
    configured = os.environ.get(STORAGE_ENV)
    if configured is not None:
        return Path(configured)
    return Path.home() / _DEFAULT_DIR_NAME


def run(storage: Storage, argv: Sequence[str] | None = None) -> None:
    """Parse the arguments and carry out the command against the storage."""
    args = parse_args(argv)
    if args.command == "add":
        storage.save(args.human)
        print(f"Adding {args.human.name}")
    elif args.command == "remove":
        storage.remove(args.name)
        print(f"Removing {args.name}")
    elif args.command == "list":
        for human in storage.load_all():
            print(f"Found human: {human.name}")
    elif args.command == "search":
        try:
            results = search(storage, args.human)
        except (OSError, ValueError) as exc:
            print(f"Search failed: {exc}", file=sys.stderr)
            return
        for human in results:
            print(f"Found human: {human.name}")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``hr`` command."""
    storage = Storage(default_storage_path())
    try:
        run(storage, argv)
    except (OSError, ValueError) as exc:
        print(f"hr: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())