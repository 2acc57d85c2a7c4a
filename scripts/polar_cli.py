#!/usr/bin/env python3
"""CLI entry point for the polars store.

Runs a single store action and prints the response as JSON, starts the MCP
server with ``--action serve``, or shows / deletes polars.log with
``--action log`` / ``--action log-clear``.
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

import polar_api
from polar_config import ConfigError, load_config
from polar_store import PolarStore, StoreSetupError
from polar_utils.conf import DEFAULT_CONFIG_FILE
from polar_utils.log import clear_log, polar_log, read_log

ACTIONS = [
    "serve", "list", "get", "find", "create", "update", "delete", "archive", "restore",
    "log", "log-clear",
]
LOG_ACTIONS = {"log", "log-clear"}
NEEDS_ID = {"get", "update", "delete", "archive", "restore"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Polars store: manage sailing polar records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config-file",
        "-c",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help="Config file (YAML with polarsDir / archivedDir). Created with defaults if missing.",
    )

    parser.add_argument(
        "--action",
        "-a",
        type=str,
        default="list",
        choices=ACTIONS,
        help="Action to run; serve starts the MCP server on stdio, log / log-clear show or delete polars.log",
    )

    parser.add_argument(
        "--id",
        type=str,
        help="Polar id (file name) for get, update, delete, archive and restore",
    )

    parser.add_argument(
        "--polar-id",
        type=int,
        help="Numeric _id for find",
    )

    parser.add_argument(
        "--archived",
        action="store_true",
        help="List archived polars instead of active ones",
    )

    parser.add_argument(
        "--sort-by",
        type=str,
        help="Sort listed polars by id or _id",
    )

    parser.add_argument(
        "--order",
        type=str,
        default="asc",
        choices=["asc", "desc"],
        help="Sort direction",
    )

    parser.add_argument(
        "--file",
        "-f",
        type=str,
        help="YAML or JSON polar document for create and update",
    )

    parser.add_argument(
        "--tail",
        type=int,
        default=0,
        help="With --action log, only print the last N lines",
    )

    return parser


def _read_body(path: str) -> dict:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise SystemExit(f"{path} does not hold a polar document")
    return data


def run_action(store: PolarStore, args: argparse.Namespace) -> polar_api.ApiResponse:
    """Dispatch a parsed command line to the matching API handler."""
    if args.action in NEEDS_ID and not args.id:
        raise SystemExit(f"--id is required for {args.action}")
    if args.action in ("create", "update") and not args.file:
        raise SystemExit(f"--file is required for {args.action}")

    if args.action == "list":
        return polar_api.list_polars(store, args.archived, args.sort_by, args.order)
    if args.action == "get":
        return polar_api.get_polar(store, args.id)
    if args.action == "find":
        if args.polar_id is None:
            raise SystemExit("--polar-id is required for find")
        return polar_api.find_polar(store, args.polar_id)
    if args.action == "create":
        return polar_api.create_polar(store, _read_body(args.file))
    if args.action == "update":
        return polar_api.update_polar(store, args.id, _read_body(args.file))
    if args.action == "delete":
        return polar_api.delete_polar(store, args.id)
    if args.action == "archive":
        return polar_api.archive_polar(store, args.id)
    if args.action == "restore":
        return polar_api.restore_polar(store, args.id)
    raise SystemExit(f"Unknown action: {args.action}")


def run_log_action(args: argparse.Namespace) -> int:
    """Print or delete polars.log. Needs no config or store."""
    if args.action == "log-clear":
        print("[Polars log cleared]" if clear_log() else "[Polars log file does not exist]")
        return 0
    contents = read_log(args.tail)
    if contents:
        print(contents, end="")
    else:
        print("[Polars log is empty]")
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.action in LOG_ACTIONS:
        return run_log_action(args)

    try:
        config = load_config(args.config_file)
        store = PolarStore.from_config(config)
    except (ConfigError, StoreSetupError) as e:
        polar_log(f"ERROR: {e}")
        raise SystemExit(str(e)) from e

    if args.action == "serve":
        from polar_mcp import serve

        serve(store)
        return 0

    response = run_action(store, args)
    print(json.dumps(response.to_dict(), indent=2))
    return 0 if response.ok else 1


if __name__ == "__main__":
    sys.exit(main())
