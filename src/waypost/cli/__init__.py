"""Waypost CLI — inspect, test and validate route tables.

Entry point registered as ``waypost`` in ``pyproject.toml``::

    [project.scripts]
    waypost = "waypost.cli:main"

Every command takes a route source: a ``.json``/``.toml`` configuration
file or an import string (``myapp.routes:router``) naming a Router.
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypost`` command."""
    parser = argparse.ArgumentParser(
        prog="waypost",
        description="Waypost — URL-pattern router tooling.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypost routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes and their compiled regexes")
    routes_parser.add_argument("source", help="Config file or import string (e.g. myapp:router)")

    # -- waypost match ----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Resolve a path against the routes")
    match_parser.add_argument("source", help="Config file or import string (e.g. myapp:router)")
    match_parser.add_argument("path", help="Request path to resolve (e.g. /post/5)")

    # -- waypost check ----------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Compile every route and report errors")
    check_parser.add_argument("source", help="Config file or import string (e.g. myapp:router)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from waypost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from waypost.cli._match import run_match

        run_match(args)
    elif args.command == "check":
        from waypost.cli._check import run_check

        run_check(args)
