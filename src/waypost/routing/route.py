"""Pattern nodes and the Route descriptor returned by a successful match."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal pattern text, matched verbatim.

    ``/user/`` in ``/user/:id``
    """

    text: str


@dataclass(frozen=True, slots=True)
class TokenRef:
    """A ``:name`` token reference.

    ``default`` holds an inline ``:name=value`` default, if one was written.
    """

    name: str
    default: str | None = None

    @property
    def key(self) -> str:
        """The token name as registered, e.g. ``:id``."""
        return f":{self.name}"


@dataclass(frozen=True, slots=True)
class Group:
    """A parenthesized optional group, ``(/:slug)``. Groups nest."""

    children: tuple["Literal | TokenRef | Group", ...]


Node = Literal | TokenRef | Group


@dataclass(slots=True)
class Route:
    """A resolved route: controller, method and the arguments to call it with.

    Created by ``Router.match_routes()``. The dispatcher owns it from
    there and may adjust it through the setters before invoking the target.
    """

    controller: str | None
    method: str | None
    args: dict[str, str] | None = None

    def get_class(self) -> str | None:
        return self.controller

    def set_class(self, controller: str | None) -> None:
        self.controller = controller

    def has_class(self) -> bool:
        return self.controller is not None

    def get_method(self) -> str | None:
        return self.method

    def set_method(self, method: str | None) -> None:
        self.method = method

    def has_method(self) -> bool:
        return self.method is not None

    def get_args(self) -> dict[str, str] | None:
        return self.args

    def set_args(self, args: dict[str, str] | None) -> None:
        self.args = args

    def has_args(self) -> bool:
        """True when args are set, even if empty."""
        return self.args is not None

    def add_arg(self, name: str, value: str) -> None:
        """Insert or overwrite one argument."""
        if self.args is None:
            self.args = {}
        self.args[name] = value
