"""Router configuration.

RouterConfig is a frozen dataclass, immutable after creation. It is the
value a Router is built from and the value it hands back as a snapshot.
"""

import json
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from waypost.errors import ConfigurationError


def _freeze(table: Mapping[str, str] | None, kind: str) -> Mapping[str, str]:
    if table is None:
        return MappingProxyType({})
    if not isinstance(table, Mapping):
        msg = f"{kind!r} must be a mapping of strings, got {type(table).__name__}"
        raise ConfigurationError(msg)
    for key, value in table.items():
        if not isinstance(key, str) or not isinstance(value, str):
            msg = f"{kind!r} entry {key!r} must map a string to a string"
            raise ConfigurationError(msg)
    return MappingProxyType(dict(table))


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Route and token tables. Immutable after creation.

    Route order is the registration order used for first-match-wins::

        config = RouterConfig(
            routes={"/user/:id": "Users->show"},
            tokens={":id": "[0-9]+"},
        )

    ``default_constraint`` is the regex used for tokens referenced in a
    pattern but never declared. When ``None`` (the default) such a token
    is a configuration error.
    """

    routes: Mapping[str, str] = field(default_factory=dict)
    tokens: Mapping[str, str] = field(default_factory=dict)
    default_constraint: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "routes", _freeze(self.routes, "routes"))
        object.__setattr__(self, "tokens", _freeze(self.tokens, "tokens"))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RouterConfig":
        """Build a config from a ``{"routes": ..., "tokens": ...}`` mapping.

        Missing keys mean empty tables. Unknown keys are rejected so typos
        in configuration files do not go unnoticed.
        """
        unknown = set(data) - {"routes", "tokens", "default_constraint"}
        if unknown:
            msg = f"Unknown router configuration keys: {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        default_constraint = data.get("default_constraint")
        if default_constraint is not None and not isinstance(default_constraint, str):
            msg = "'default_constraint' must be a string"
            raise ConfigurationError(msg)
        return cls(
            routes=data.get("routes") or {},
            tokens=data.get("tokens") or {},
            default_constraint=default_constraint,
        )


def load_config(path: str | Path) -> RouterConfig:
    """Load a RouterConfig from a ``.json`` or ``.toml`` file.

    Raises ``ConfigurationError`` if the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read router configuration {str(path)!r}: {exc.strerror}"
        raise ConfigurationError(msg) from exc

    try:
        if path.suffix == ".toml":
            data = tomllib.loads(raw.decode("utf-8"))
        else:
            data = json.loads(raw)
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        msg = f"Cannot parse router configuration {str(path)!r}: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Router configuration {str(path)!r} must be a table at the top level"
        raise ConfigurationError(msg)
    return RouterConfig.from_mapping(data)
