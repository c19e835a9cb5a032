"""Pattern compiler — route pattern DSL to anchored regular expressions.

A pattern is parsed into nodes, then rendered::

    "/post/:id(/:slug)"
      -> [Literal("/post/"), TokenRef("id"), Group((Literal("/"), TokenRef("slug"))))]
      -> "^/post/(?P<id>[0-9]+)(?:/(?P<slug>[a-z-]+))?$"

Token references are read as whole identifiers, so ``:id`` is never
substituted inside ``:identity``. Every ``(``/``)`` pair is an optional
group; the DSL has no way to write a literal parenthesis.
"""

import re
from collections.abc import Iterable, Sequence

from waypost.errors import PatternSyntaxError, UndeclaredTokenError
from waypost.routing.route import Group, Literal, Node, TokenRef
from waypost.routing.tokens import TokenRegistry

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
# Inline default value after ``:name=``, up to the next structural char
_INLINE_DEFAULT = re.compile(r"[^/():]*")


def parse_pattern(pattern: str) -> list[Node]:
    """Parse a route pattern string into nodes.

    Examples::

        "/about"            -> [Literal("/about")]
        "/user/:id"         -> [Literal("/user/"), TokenRef("id")]
        "/post/:id(/:slug)" -> [..., Group((Literal("/"), TokenRef("slug"),))]
        "/list(/:page=1)"   -> [..., Group((Literal("/"), TokenRef("page", "1"),))]

    Raises ``PatternSyntaxError`` on unbalanced parentheses or when the
    same token is referenced twice.
    """
    # Stack of open node lists; the bottom entry is the top level
    stack: list[list[Node]] = [[]]
    literal: list[str] = []
    seen: set[str] = set()

    def flush() -> None:
        if literal:
            stack[-1].append(Literal("".join(literal)))
            literal.clear()

    pos = 0
    while pos < len(pattern):
        char = pattern[pos]

        if char == ":":
            ident = _IDENTIFIER.match(pattern, pos + 1)
            if ident is None:
                literal.append(char)
                pos += 1
                continue
            flush()
            name = ident.group()
            if name in seen:
                raise PatternSyntaxError(pattern, f"token ':{name}' is used more than once")
            seen.add(name)
            pos = ident.end()
            default = None
            if pattern.startswith("=", pos):
                value = _INLINE_DEFAULT.match(pattern, pos + 1)
                default = value.group()
                pos = value.end()
            stack[-1].append(TokenRef(name, default))
            continue

        if char == "(":
            flush()
            stack.append([])
        elif char == ")":
            if len(stack) == 1:
                raise PatternSyntaxError(pattern, f"unmatched ')' at position {pos}")
            flush()
            children = stack.pop()
            stack[-1].append(Group(tuple(children)))
        else:
            literal.append(char)
        pos += 1

    if len(stack) > 1:
        raise PatternSyntaxError(pattern, f"{len(stack) - 1} unclosed '('")
    flush()
    return stack[0]


def iter_tokens(nodes: Iterable[Node]) -> Iterable[TokenRef]:
    """Yield every token reference in *nodes*, depth first, in pattern order."""
    for node in nodes:
        if isinstance(node, TokenRef):
            yield node
        elif isinstance(node, Group):
            yield from iter_tokens(node.children)


class PatternCompiler:
    """Compiles route patterns against a token registry.

    Nothing is cached: each call reflects the registry as it is now.
    Constraints are spliced into the output unmodified, so a constraint
    prone to catastrophic backtracking makes matching slow for every
    path tested against its routes.
    """

    __slots__ = ("default_constraint", "tokens")

    def __init__(self, tokens: TokenRegistry, default_constraint: str | None = None) -> None:
        self.tokens = tokens
        self.default_constraint = default_constraint

    def source(self, pattern: str) -> str:
        """Return the regex source for *pattern*, anchored with ``^`` and ``$``."""
        nodes = parse_pattern(pattern)
        return f"^{self._render(nodes, pattern)}$"

    def compile(self, pattern: str) -> re.Pattern[str]:
        """Compile *pattern* into a regex with one named group per token."""
        source = self.source(pattern)
        try:
            return re.compile(source)
        except re.error as exc:
            raise PatternSyntaxError(pattern, f"bad token constraint ({exc})") from exc

    def defaults(self, pattern: str) -> dict[str, str]:
        """Inline ``:name=value`` defaults declared in *pattern*, in order."""
        return {
            ref.name: ref.default
            for ref in iter_tokens(parse_pattern(pattern))
            if ref.default is not None
        }

    def _render(self, nodes: Sequence[Node], pattern: str) -> str:
        parts: list[str] = []
        for node in nodes:
            if isinstance(node, Literal):
                parts.append(re.escape(node.text))
            elif isinstance(node, TokenRef):
                parts.append(f"(?P<{node.name}>{self._constraint(node, pattern)})")
            else:
                parts.append(f"(?:{self._render(node.children, pattern)})?")
        return "".join(parts)

    def _constraint(self, ref: TokenRef, pattern: str) -> str:
        if self.tokens.has_token(ref.key):
            return self.tokens.get_token(ref.key)
        if self.default_constraint is not None:
            return self.default_constraint
        raise UndeclaredTokenError(ref.key, pattern)
