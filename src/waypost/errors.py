"""Waypost exception hierarchy.

Shared across the router, its compiler and the CLI so every module
raises and catches the same types.
"""


class WaypostError(Exception):
    """Base for all waypost-specific errors."""


class ConfigurationError(WaypostError):
    """Raised when the route or token configuration is invalid.

    Surfaces while compiling a pattern, either during matching or
    eagerly through ``Router.check()``.
    """


class PatternSyntaxError(ConfigurationError):
    """A route pattern (or a token constraint inside it) cannot be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid route pattern {pattern!r}: {reason}")


class UndeclaredTokenError(ConfigurationError):
    """A pattern references a token that has no registered constraint."""

    def __init__(self, token: str, pattern: str) -> None:
        self.token = token
        self.pattern = pattern
        super().__init__(
            f"Token {token!r} used in route pattern {pattern!r} is not declared. "
            f"Register it with add_token({token!r}, ...) or set a default_constraint."
        )


class UnknownRouteError(WaypostError, KeyError):
    """Lookup of a route pattern that was never registered."""

    def __str__(self) -> str:
        return f"No route registered for pattern {self.args[0]!r}"


class UnknownTokenError(WaypostError, KeyError):
    """Lookup of a token name that was never registered."""

    def __str__(self) -> str:
        return f"No token registered under {self.args[0]!r}"
