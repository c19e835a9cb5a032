"""``waypost routes`` — list declared routes.

Prints every route in match order with its target template and the
regex it compiles to.
"""

import argparse
import sys

from waypost.cli._resolve import resolve_or_exit
from waypost.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print a PATTERN / TARGET / REGEX table for ``args.source``."""
    router = resolve_or_exit(args)

    routes = router.get_routes()
    if not routes:
        print("No routes registered.")
        return

    try:
        regexs = router.get_regexs()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows = [(pattern, target, regexs[pattern]) for pattern, target in routes.items()]

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_target = max(max(len(r[1]) for r in rows), 6)  # "TARGET" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_target}}}  {{}}"
    print(fmt.format("PATTERN", "TARGET", "REGEX"))
    sep_len = max_pattern + max_target + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, target, regex in rows:
        print(fmt.format(pattern, target, regex))
