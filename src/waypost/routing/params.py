"""Target templates and argument extraction.

A target template names what a route resolves to::

    "Post->show(slug=none,format=html)"

Arguments captured from the path win over the template's defaults,
which in turn win over inline ``:name=value`` defaults in the pattern.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

_DELIMITERS = re.compile(r"->|\(|\)")


@dataclass(frozen=True, slots=True)
class Target:
    """A parsed target template.

    Either name may be ``None`` when the template is malformed, e.g.
    ``"Pages"`` (no ``->``) has no method. That is not an error here; the
    dispatcher decides what a nameless target means.
    """

    controller: str | None
    method: str | None
    defaults: dict[str, str] = field(default_factory=dict)


def parse_defaults(text: str) -> dict[str, str]:
    """Parse ``"a=1,b=2"`` into ``{"a": "1", "b": "2"}``.

    Empty entries are skipped; an entry with no ``=`` defaults to ``""``.
    """
    defaults: dict[str, str] = {}
    for entry in text.split(","):
        if not entry:
            continue
        name, _, value = entry.partition("=")
        defaults[name] = value
    return defaults


def parse_target(template: str) -> Target:
    """Split a ``Controller->method(a=1,b=2)`` template into its fields.

    Whitespace anywhere in the template is ignored.
    """
    fields = _DELIMITERS.split("".join(template.split()))
    fields += [""] * (3 - len(fields))
    controller, method, arglist = fields[:3]
    return Target(
        controller=controller or None,
        method=method or None,
        defaults=parse_defaults(arglist),
    )


def merge_args(captured: Mapping[str, str | None], *defaults: Mapping[str, str]) -> dict[str, str]:
    """Merge captured values with default tables.

    Captures that did not participate in the match (``None``) are dropped.
    Each default is added only if no capture or earlier default set it.
    """
    args = {name: value for name, value in captured.items() if value is not None}
    for table in defaults:
        for name, value in table.items():
            args.setdefault(name, value)
    return args


def extract(
    match: re.Match[str],
    target: Target,
    inline_defaults: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Build the argument mapping for a matched path.

    Only named groups are kept; positional groups inside token
    constraints are ignored.
    """
    return merge_args(match.groupdict(), target.defaults, inline_defaults or {})
