"""Command-line front end for the footprint ledger.

Usage:
    footprint add 北京市
    footprint list
    footprint stats
    footprint clear --yes
    footprint boundary
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .container import Container, get_container
from .domain.errors import BoundaryFetchError
from .domain.models import Location
from .logging_config import configure_logging
from .services import BoundaryDataCache, FootprintService


def _format_location(location: Location) -> str:
    if location.coordinates is not None:
        lat, lon = location.coordinates.as_pair()
        return f"{location.name} ({location.province}) [{lat:.4f}, {lon:.4f}]"
    return f"{location.name} (province)"


def _cmd_add(service: FootprintService, args: argparse.Namespace) -> int:
    status = 0
    for name in args.names:
        location, error = service.submit_safe(name)
        if error is not None:
            print(f"✗ {error.message}", file=sys.stderr)
            status = 1
        elif location is not None:
            print(f"✓ {_format_location(location)}")
    return status


def _cmd_list(service: FootprintService, args: argparse.Namespace) -> int:
    visited = service.visited()
    if not visited:
        print("No places visited yet.")
        return 0
    for i, location in enumerate(visited, start=1):
        print(f"{i:>3}. {_format_location(location)}")
    return 0


def _cmd_stats(service: FootprintService, args: argparse.Namespace) -> int:
    stats = service.stats()
    print(f"Cities:    {stats.cities}")
    print(f"Provinces: {stats.provinces}")
    print(f"Touched:   {len(stats.provinces_touched)}")
    if stats.provinces_touched:
        print("  " + "、".join(stats.provinces_touched))
    return 0


def _cmd_clear(service: FootprintService, args: argparse.Namespace) -> int:
    confirmed = args.yes
    if not confirmed:
        answer = input("Are you sure you want to clear your travel history? (y/N) ")
        confirmed = answer.strip().lower() in {"y", "yes"}
    if service.clear(confirmed):
        print("Travel history cleared.")
    else:
        print("Nothing cleared.")
    return 0


def _cmd_boundary(container: Container) -> int:
    cache: BoundaryDataCache = container.resolve(BoundaryDataCache)
    try:
        dataset = cache.get()
    except BoundaryFetchError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    names = dataset.feature_names()
    print(f"{len(dataset)} features from {dataset.source_url}")
    if names:
        print("  " + "、".join(names))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="footprint",
        description="Keep a ledger of the Chinese cities and provinces you visited.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add one or more cities/provinces")
    add.add_argument("names", nargs="+", metavar="NAME")

    sub.add_parser("list", help="List visited places in order")
    sub.add_parser("stats", help="Show counts of visited places")

    clear = sub.add_parser("clear", help="Clear the travel history")
    clear.add_argument("--yes", action="store_true", help="Skip confirmation")

    sub.add_parser("boundary", help="Fetch the boundary dataset and summarize it")
    return parser


def main(
    argv: Optional[Sequence[str]] = None, container: Optional[Container] = None
) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    container = container or get_container()

    if args.command == "boundary":
        return _cmd_boundary(container)

    service: FootprintService = container.resolve(FootprintService)
    handlers = {
        "add": _cmd_add,
        "list": _cmd_list,
        "stats": _cmd_stats,
        "clear": _cmd_clear,
    }
    return handlers[args.command](service, args)


if __name__ == "__main__":
    sys.exit(main())
