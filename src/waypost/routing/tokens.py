"""Token registry — token name to constraint regex."""

from collections.abc import Iterator, Mapping

from waypost.errors import UnknownTokenError


def normalize_token_name(name: str) -> str:
    """Return *name* with its leading colon: ``id`` and ``:id`` both give ``:id``."""
    return name if name.startswith(":") else f":{name}"


class TokenRegistry:
    """Mapping of token names (``:id``) to constraint regex fragments.

    Constraints are stored as given; they are only checked when a pattern
    using them is compiled.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Mapping[str, str] | None = None) -> None:
        self._tokens: dict[str, str] = {}
        for name, constraint in (tokens or {}).items():
            self.add_token(name, constraint)

    def add_token(self, name: str, constraint: str) -> None:
        """Register or overwrite a token constraint."""
        self._tokens[normalize_token_name(name)] = constraint

    def get_token(self, name: str) -> str:
        """Return the constraint for *name*.

        Raises ``UnknownTokenError`` (a ``KeyError``) if it was never added.
        """
        try:
            return self._tokens[normalize_token_name(name)]
        except KeyError:
            raise UnknownTokenError(name) from None

    def has_token(self, name: str) -> bool:
        return normalize_token_name(name) in self._tokens

    def get_tokens(self) -> dict[str, str]:
        return dict(self._tokens)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_token(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)
