"""Cosmetic re-indentation of JSX markup.

Splits markup into tag, expression and text tokens and indents one level per
open element. Layout whitespace is discarded and rendered spaces become
``{" "}`` tokens, so the component renders the same text before and after,
and formatting already formatted markup returns it unchanged.
"""

from __future__ import annotations

INDENT = "  "
SPACE_EXPRESSION = '{" "}'


def _skip_string(text: str, i: int) -> int:
    """Index just past the JS string literal opening at ``text[i]``."""
    quote = text[i]
    i += 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote:
            return i + 1
        i += 1
    return i


def _skip_braces(text: str, i: int) -> int:
    """Index just past the ``{...}`` expression opening at ``text[i]``."""
    depth = 0
    while i < len(text):
        ch = text[i]
        if ch in "\"'`":
            i = _skip_string(text, i)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return i


def _scan_tag(text: str, i: int) -> int:
    """Index just past the tag opening at ``text[i]``."""
    i += 1
    while i < len(text):
        ch = text[i]
        if ch in "\"'":
            i = _skip_string(text, i)
        elif ch == "{":
            i = _skip_braces(text, i)
        elif ch == ">":
            return i + 1
        else:
            i += 1
    return i


def _text_tokens(segment: str, leading: bool, trailing: bool) -> list[str]:
    """Tokens for plain text between tags or expressions.

    Whitespace that holds a newline is layout and JSX drops it. A run without
    a newline is a rendered space, so it becomes an explicit ``{" "}`` token
    when it borders a tag or expression (``leading``/``trailing``).
    """
    stripped = segment.strip()
    if not stripped:
        if segment and "\n" not in segment and leading and trailing:
            return [SPACE_EXPRESSION]
        return []
    tokens: list[str] = []
    head = segment[: len(segment) - len(segment.lstrip())]
    tail = segment[len(segment.rstrip()):]
    if head and "\n" not in head and leading:
        tokens.append(SPACE_EXPRESSION)
    # JSX joins the lines of multi-line text with single spaces
    tokens.extend(line.strip() for line in stripped.splitlines() if line.strip())
    if tail and "\n" not in tail and trailing:
        tokens.append(SPACE_EXPRESSION)
    return tokens


def tokenize_markup(markup: str) -> list[str]:
    """Split JSX markup into tag, expression and text tokens.

    Rendered spaces next to a token boundary are kept as ``{" "}`` tokens so
    laying tokens out on separate lines does not change the rendered text.
    """
    tokens: list[str] = []
    i = 0
    n = len(markup)
    while i < n:
        if markup[i] == "<":
            end = _scan_tag(markup, i)
        elif markup[i] == "{":
            end = _skip_braces(markup, i)
        else:
            end = i
            while end < n and markup[end] not in "<{":
                end += 1
            tokens.extend(_text_tokens(markup[i:end], leading=i > 0, trailing=end < n))
            i = end
            continue
        tokens.append(markup[i:end])
        i = end
    return tokens


def format_markup(markup: str, base_indent: str = "") -> str:
    """One token per line, indented by element depth."""
    lines: list[str] = []
    depth = 0
    for token in tokenize_markup(markup):
        closing = token.startswith("</")
        opening = token.startswith("<") and not closing and not token.endswith("/>")
        if closing:
            depth = max(depth - 1, 0)
        lines.append(base_indent + INDENT * depth + token)
        if opening:
            depth += 1
    return "\n".join(lines)
