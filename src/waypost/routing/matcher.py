"""First-match route scanning."""

import re
from collections.abc import Mapping

from waypost.routing.compiler import PatternCompiler


class RouteMatcher:
    """Scans a route table in registration order.

    The first pattern whose compiled rule matches wins; later patterns are
    never compiled or tested. There is no best-match ranking, so specific
    routes must be declared before general ones.
    """

    __slots__ = ("compiler",)

    def __init__(self, compiler: PatternCompiler) -> None:
        self.compiler = compiler

    def find_route(
        self, routes: Mapping[str, str], path: str
    ) -> tuple[str, re.Match[str]] | None:
        """Return ``(pattern, match)`` for the first matching route, or ``None``."""
        for pattern in routes:
            match = self.compiler.compile(pattern).fullmatch(path)
            if match is not None:
                return pattern, match
        return None
