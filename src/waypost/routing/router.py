"""Router — route and token tables with first-match path resolution.

The router does not dispatch. It tells the caller whether a path matched
and which controller, method and arguments it resolved to.
"""

import logging
from collections.abc import Mapping
from typing import Any

from waypost.config import RouterConfig
from waypost.errors import UnknownRouteError
from waypost.routing.compiler import PatternCompiler
from waypost.routing.matcher import RouteMatcher
from waypost.routing.params import extract, parse_target
from waypost.routing.route import Route
from waypost.routing.tokens import TokenRegistry

logger = logging.getLogger("waypost.routing")


class Router:
    """Ordered route table plus token registry.

    Usage::

        router = Router(RouterConfig(
            routes={
                "/post/:id(/:slug)": "Post->show(slug=none)",
                "/about": "Pages->about",
            },
            tokens={":id": "[0-9]+", ":slug": "[a-z0-9-]+"},
        ))
        route = router.match_routes("/post/5")
        # Route(controller="Post", method="show", args={"id": "5", "slug": "none"})

    Tables are configuration: populate them before serving and treat them
    as read-only afterwards. Mutating a router while another thread is
    matching against it is not supported.

    Token constraints are user-supplied regex fragments and are matched
    with Python's backtracking ``re`` engine; nested quantifiers such as
    ``(a+)+`` can make a single match take exponential time.
    """

    __slots__ = ("_compiler", "_matcher", "_routes", "_tokens")

    def __init__(self, config: RouterConfig | Mapping[str, Any] | None = None) -> None:
        self._routes: dict[str, str] = {}
        self._tokens = TokenRegistry()
        self._compiler = PatternCompiler(self._tokens)
        self._matcher = RouteMatcher(self._compiler)
        if config is not None:
            self.set_routes(config)

    def set_routes(self, config: RouterConfig | Mapping[str, Any]) -> None:
        """Replace both the route and token tables.

        Accepts a ``RouterConfig`` or a ``{"routes": ..., "tokens": ...}``
        mapping. Every route is compiled against the new tokens before
        anything is replaced, so a ``ConfigurationError`` leaves the router
        as it was.
        """
        if not isinstance(config, RouterConfig):
            config = RouterConfig.from_mapping(config)
        tokens = TokenRegistry(config.tokens)
        compiler = PatternCompiler(tokens, config.default_constraint)
        for pattern in config.routes:
            compiler.compile(pattern)

        self._routes = dict(config.routes)
        self._tokens = tokens
        self._compiler = compiler
        self._matcher = RouteMatcher(compiler)

    @property
    def config(self) -> RouterConfig:
        """Snapshot of the current tables."""
        return RouterConfig(
            routes=self._routes,
            tokens=self._tokens.get_tokens(),
            default_constraint=self._compiler.default_constraint,
        )

    # -- Routes ----------------------------------------------------------

    def add_route(self, pattern: str, target: str) -> None:
        """Register a route. Re-adding a pattern replaces its target in place.

        The pattern is not compiled here; tokens it uses may be added later.
        Call ``check()`` once the tables are complete.
        """
        if pattern in self._routes:
            logger.debug("Route %r overwritten: %r -> %r", pattern, self._routes[pattern], target)
        self._routes[pattern] = target

    def get_route(self, pattern: str) -> str:
        """Return the target template for *pattern*.

        Raises ``UnknownRouteError`` (a ``KeyError``) if it was never added.
        """
        try:
            return self._routes[pattern]
        except KeyError:
            raise UnknownRouteError(pattern) from None

    def has_route(self, pattern: str) -> bool:
        return pattern in self._routes

    def get_routes(self) -> dict[str, str]:
        return dict(self._routes)

    # -- Tokens ----------------------------------------------------------

    def add_token(self, name: str, constraint: str) -> None:
        if self._tokens.has_token(name):
            logger.debug("Token %r overwritten with constraint %r", name, constraint)
        self._tokens.add_token(name, constraint)

    def get_token(self, name: str) -> str:
        return self._tokens.get_token(name)

    def has_token(self, name: str) -> bool:
        return self._tokens.has_token(name)

    def get_tokens(self) -> dict[str, str]:
        return self._tokens.get_tokens()

    # -- Compilation and matching ----------------------------------------

    def get_regexs(self) -> dict[str, str]:
        """Compile every route now and return pattern -> regex source."""
        return {pattern: self._compiler.source(pattern) for pattern in self._routes}

    def check(self) -> None:
        """Compile every route, raising the first ``ConfigurationError``.

        Call at startup to surface undeclared tokens, unbalanced groups and
        broken constraints before the first request does.
        """
        for pattern in self._routes:
            self._compiler.compile(pattern)

    def match_routes(self, path: str) -> Route | None:
        """Resolve *path* to a ``Route``, or ``None`` if no route matches."""
        found = self._matcher.find_route(self._routes, path)
        if found is None:
            logger.debug("No route matches %r", path)
            return None

        pattern, match = found
        target = parse_target(self._routes[pattern])
        args = extract(match, target, self._compiler.defaults(pattern))
        logger.debug("%r matched %r -> %s->%s", path, pattern, target.controller, target.method)
        return Route(controller=target.controller, method=target.method, args=args)
