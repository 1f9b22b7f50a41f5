"""Wren CLI — inspect a router's table and try paths against it.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren — a small URL-path router.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List compiled route templates")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )

    # -- wren match -------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a path against the routes")
    match_parser.add_argument(
        "router",
        help="Import string (e.g. myapp:router)",
    )
    match_parser.add_argument("path", help="URL or path to resolve")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from wren.cli._match import run_match

        run_match(args)
