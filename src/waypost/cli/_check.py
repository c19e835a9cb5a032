"""``waypost check`` — compile every route and report configuration errors."""

import argparse
import sys

from waypost.cli._resolve import resolve_or_exit
from waypost.errors import ConfigurationError


def run_check(args: argparse.Namespace) -> None:
    router = resolve_or_exit(args)

    try:
        router.check()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    count = len(router.get_routes())
    print(f"OK: {count} route{'s' if count != 1 else ''} compiled.")
