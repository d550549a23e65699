"""Lark-based walker that lists the rules of a stylesheet.

Syntax handled:
    .card { color: red; }                 -> rule ".card"
    @media (min-width: 544px) { .a {} }   -> rule ".a" (the at-rule is not a rule)
    .card { .title { margin: 0; } }       -> rules ".card" then ".title"

Selectors are kept verbatim (comments removed, surrounding whitespace stripped).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import cast

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from cssguard.stylesheet.errors import ParseError
from cssguard.stylesheet.model import StyleRule, Stylesheet

__all__ = ["parse_stylesheet", "parse_file"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class _Prelude:
    """Selector (or at-rule) text with the position of its first character."""

    def __init__(self, text: str, line: int, column: int):
        self.text = text
        self.line = line
        self.column = column


def _locate(token: Token) -> tuple[int, int]:
    """Position of the first non-whitespace character of *token*."""
    raw = str(token)
    lead = raw[: len(raw) - len(raw.lstrip())]
    line = token.line or 1
    column = token.column or 1
    if "\n" in lead:
        line += lead.count("\n")
        column = len(lead) - lead.rfind("\n")
    else:
        column += len(lead)
    return line, column


class RuleTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a flat, document-ordered rule list."""

    def prelude(self, items: list[Token]) -> _Prelude:
        text = "".join(str(t) for t in items).strip()
        first = next((t for t in items if str(t).strip()), items[0])
        line, column = _locate(first)
        return _Prelude(text, line, column)

    def statement(self, items: list[object]) -> list[StyleRule]:
        return []

    def rule(self, items: list[object]) -> list[StyleRule]:
        # The grammar puts the prelude first in every rule.
        head = cast(_Prelude, items[0])
        children = _collect(items[1:])
        if head.text.startswith("@"):
            # At-rule blocks only contribute the rules they contain.
            return children
        return [StyleRule(selector=head.text, line=head.line, column=head.column), *children]

    def start(self, items: list[object]) -> list[StyleRule]:
        return _collect(items)


def _collect(items: list[object]) -> list[StyleRule]:
    rules: list[StyleRule] = []
    for item in items:
        # A trailing _Prelude is a declaration without its semicolon.
        if isinstance(item, list):
            rules.extend(item)
    return rules


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_stylesheet(source: str, path: str | None = None) -> Stylesheet:
    """Split stylesheet *source* into its rules.

    Raises :class:`ParseError` when braces are unbalanced or a comment is
    left open.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if line is not None and line < 1:
            # Lark reports end-of-input failures at -1.
            line = column = None
        raise ParseError(str(e), line=line, column=column) from e
    rules = RuleTransformer().transform(tree)
    logger.debug("Found %d rule(s) in %s", len(rules), path or "<string>")
    return Stylesheet(rules=rules, path=path)


def parse_file(path: Path) -> Stylesheet:
    """Read and walk the stylesheet at *path*."""
    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ParseError(f"Cannot read {path}: {exc}") from exc
    return parse_stylesheet(source, path=str(path))
