"""Waypost — a URL-pattern router for controller/method dispatch.

Declare patterns with named tokens and optional groups, declare the
constraints the tokens must satisfy, and resolve request paths to a
controller, a method and its arguments.

Basic usage::

    from waypost import Router

    router = Router({
        "routes": {
            "/post/:id(/:slug)": "Post->show(slug=none)",
            "/about": "Pages->about",
        },
        "tokens": {":id": "[0-9]+", ":slug": "[a-z0-9-]+"},
    })

    route = router.match_routes("/post/5/hello")
    route.controller  # "Post"
    route.args        # {"id": "5", "slug": "hello"}
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "PatternSyntaxError",
    "Route",
    "Router",
    "RouterConfig",
    "UndeclaredTokenError",
    "UnknownRouteError",
    "UnknownTokenError",
    "WaypostError",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    if name == "Router":
        from waypost.routing.router import Router

        return Router

    if name == "Route":
        from waypost.routing.route import Route

        return Route

    if name in ("RouterConfig", "load_config"):
        from waypost import config as _config

        return getattr(_config, name)

    if name in (
        "ConfigurationError",
        "PatternSyntaxError",
        "UndeclaredTokenError",
        "UnknownRouteError",
        "UnknownTokenError",
        "WaypostError",
    ):
        from waypost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
