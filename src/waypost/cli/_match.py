"""``waypost match`` — resolve one path and print the result as JSON."""

import argparse
import json
import sys

from waypost.cli._resolve import resolve_or_exit
from waypost.errors import ConfigurationError


def run_match(args: argparse.Namespace) -> None:
    """Resolve ``args.path``. Exits 1 when no route matches."""
    router = resolve_or_exit(args)

    try:
        route = router.match_routes(args.path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if route is None:
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    result = {"controller": route.controller, "method": route.method, "args": route.args}
    print(json.dumps(result, indent=2))
