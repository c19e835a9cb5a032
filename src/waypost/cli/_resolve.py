"""Route source resolution — config files or ``"module:attribute"`` strings.

Shared by every command so ``waypost routes routes.toml`` and
``waypost routes myapp.urls:router`` behave the same.
"""

import argparse
import importlib
import sys
from pathlib import Path

from waypost.config import load_config
from waypost.errors import ConfigurationError
from waypost.routing.router import Router

CONFIG_SUFFIXES = (".json", ".toml")


def resolve_router(source: str) -> Router:
    """Resolve a config file path or import string to a Router.

    Import strings accept ``"module:attribute"``; the attribute defaults
    to ``router``. A callable attribute that is not a Router is treated as
    a factory and called.

    Raises:
        ConfigurationError: If a config file is unreadable or invalid.
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Router.

    """
    if source.endswith(CONFIG_SUFFIXES) or Path(source).is_file():
        return Router(load_config(source))

    module_path, _, attr_name = source.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {source!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{source!r} resolved to {type(obj).__name__}, not a waypost.Router instance"
        raise TypeError(msg)

    return obj


def resolve_or_exit(args: argparse.Namespace) -> Router:
    """``resolve_router(args.source)``, printing the error and exiting 1 on failure."""
    try:
        return resolve_router(args.source)
    except (ConfigurationError, ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
