"""
Frontend module for the benchmark set procedures.

This module handles command-line argument parsing and dispatches to the
procedure and resolver functions. Output meant for the user is printed;
diagnostics go through loguru.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from loguru import logger

from benchsets.core.procedures import (
    load_procedures,
    read_benchmark_set,
    read_meta,
    write_benchmark_set,
    write_meta,
)
from benchsets.core.resolver import get_metas_from_meta, get_sets_from_meta
from benchsets.infra.config import Settings, load_settings
from benchsets.infra.errors import AlreadyExists, MalformedContent, ReadError
from benchsets.infra.logs import configure_logging
from benchsets.models import BenchmarkSet, Map, Mod, ProcedureKind


def parse_mod(value: str) -> Mod:
    """Parse a NAME:VERSION:SHA1 mod argument."""
    parts = value.split(":")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"Mod must be NAME:VERSION:SHA1, got '{value}'")
    name, version, sha1 = parts
    return Mod(name=name, version=version, sha1=sha1)


def parse_map(value: str) -> Map:
    """Parse a PATH:SHA256:URL map argument (the URL may contain colons)."""
    parts = value.split(":", 2)
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"Map must be PATH:SHA256:URL, got '{value}'")
    path, sha256, link = parts
    return Map(path=Path(path), sha256=sha256, download_link=link)


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, got {value}")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="benchsets",
        description="Manage benchmark sets and meta sets in a procedure file",
        epilog="Example: benchsets --file procedures.json resolve nightly",
    )

    parser.add_argument(
        "-f", "--file",
        type=Path,
        help="Procedure file to use (overrides the settings file)"
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to a YAML settings file"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List stored procedures")
    list_parser.add_argument(
        "--kind",
        type=ProcedureKind.from_str,
        default=ProcedureKind.BOTH,
        help="benchmark, meta or both (default: both)"
    )

    show_parser = subparsers.add_parser("show", help="Show a benchmark set")
    show_parser.add_argument("name")

    meta_parser = subparsers.add_parser("meta", help="Show the members of a meta set")
    meta_parser.add_argument("name")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a meta set")
    resolve_parser.add_argument("name")
    resolve_parser.add_argument(
        "--metas",
        action="store_true",
        help="List the meta sets reached instead of the benchmark sets"
    )

    add_meta_parser = subparsers.add_parser("add-meta", help="Store a meta set")
    add_meta_parser.add_argument("name")
    add_meta_parser.add_argument("members", nargs="+")
    add_meta_parser.add_argument("--force", action="store_true", help="Overwrite an existing meta set")

    add_set_parser = subparsers.add_parser("add-set", help="Store a benchmark set")
    add_set_parser.add_argument("name")
    add_set_parser.add_argument("--ticks", type=non_negative_int, required=True)
    add_set_parser.add_argument("--runs", type=non_negative_int, required=True)
    add_set_parser.add_argument(
        "--mod", dest="mods", type=parse_mod, action="append", default=[],
        metavar="NAME:VERSION:SHA1"
    )
    add_set_parser.add_argument(
        "--map", dest="maps", type=parse_map, action="append", default=[],
        metavar="PATH:SHA256:URL"
    )
    add_set_parser.add_argument("--save-subdirectory", type=Path)
    add_set_parser.add_argument("--force", action="store_true", help="Overwrite an existing benchmark set")

    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Combine the settings file (if any) with command-line overrides."""
    settings = load_settings(args.config) if args.config else Settings()
    if args.file:
        settings.procedure_file = args.file
    if args.verbose:
        settings.verbose = True
    return settings


def cmd_list(path: Path, kind: ProcedureKind) -> int:
    document = load_procedures(path)
    print(f"Procedures in {path}:")
    print(document.summary(kind))
    return 0


def cmd_show(path: Path, name: str) -> int:
    benchmark_set = read_benchmark_set(name, path)
    if benchmark_set is None:
        print(f"Benchmark set '{name}' not found in {path}", file=sys.stderr)
        return 1
    print(json.dumps(benchmark_set.to_dict(), indent=2))
    return 0


def cmd_meta(path: Path, name: str) -> int:
    members = read_meta(name, path)
    if members is None:
        print(f"Meta set '{name}' not found in {path}", file=sys.stderr)
        return 1
    for member in sorted(members):
        print(member)
    return 0


def cmd_resolve(path: Path, name: str, metas: bool) -> int:
    if metas:
        names: List[str] = get_metas_from_meta(name, path)
    else:
        names = sorted(get_sets_from_meta(name, path))
    for resolved in names:
        print(resolved)
    return 0


def cmd_add_meta(path: Path, name: str, members: List[str], force: bool) -> int:
    write_meta(name, members, force, path)
    print(f"✓ Meta set '{name}' stored in {path}")
    return 0


def cmd_add_set(path: Path, args: argparse.Namespace) -> int:
    benchmark_set = BenchmarkSet(
        save_subdirectory=args.save_subdirectory,
        mods=set(args.mods),
        maps=set(args.maps),
        ticks=args.ticks,
        runs=args.runs,
    )
    write_benchmark_set(args.name, benchmark_set, args.force, path)
    print(f"✓ Benchmark set '{args.name}' stored in {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the frontend.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args)
        configure_logging(settings.verbose)
        path = settings.procedure_file
        logger.debug("Using procedure file {}", path)

        if args.command == "list":
            return cmd_list(path, args.kind)
        if args.command == "show":
            return cmd_show(path, args.name)
        if args.command == "meta":
            return cmd_meta(path, args.name)
        if args.command == "resolve":
            return cmd_resolve(path, args.name, args.metas)
        if args.command == "add-meta":
            return cmd_add_meta(path, args.name, args.members, args.force)
        if args.command == "add-set":
            return cmd_add_set(path, args)

        parser.error(f"Unknown command: {args.command}")

    except (FileNotFoundError, AlreadyExists) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (MalformedContent, ReadError, yaml.YAMLError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 3


if __name__ == "__main__":
    sys.exit(main())
