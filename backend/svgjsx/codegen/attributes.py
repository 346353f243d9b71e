"""SVG → React attribute and style-property naming."""

from __future__ import annotations

import json
import re

# SVG presentation / xlink / xml attributes that React spells in camelCase.
_HYPHENATED = (
    "accent-height",
    "alignment-baseline",
    "arabic-form",
    "baseline-shift",
    "cap-height",
    "clip-path",
    "clip-rule",
    "color-interpolation",
    "color-interpolation-filters",
    "color-profile",
    "color-rendering",
    "dominant-baseline",
    "enable-background",
    "fill-opacity",
    "fill-rule",
    "flood-color",
    "flood-opacity",
    "font-family",
    "font-size",
    "font-size-adjust",
    "font-stretch",
    "font-style",
    "font-variant",
    "font-weight",
    "glyph-name",
    "glyph-orientation-horizontal",
    "glyph-orientation-vertical",
    "horiz-adv-x",
    "horiz-origin-x",
    "image-rendering",
    "letter-spacing",
    "lighting-color",
    "marker-end",
    "marker-mid",
    "marker-start",
    "overline-position",
    "overline-thickness",
    "paint-order",
    "panose-1",
    "pointer-events",
    "rendering-intent",
    "shape-rendering",
    "stop-color",
    "stop-opacity",
    "strikethrough-position",
    "strikethrough-thickness",
    "stroke-dasharray",
    "stroke-dashoffset",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-miterlimit",
    "stroke-opacity",
    "stroke-width",
    "text-anchor",
    "text-decoration",
    "text-rendering",
    "underline-position",
    "underline-thickness",
    "unicode-bidi",
    "unicode-range",
    "units-per-em",
    "v-alphabetic",
    "v-hanging",
    "v-ideographic",
    "v-mathematical",
    "vector-effect",
    "vert-adv-y",
    "vert-origin-x",
    "vert-origin-y",
    "word-spacing",
    "writing-mode",
    "x-height",
    "xlink:actuate",
    "xlink:arcrole",
    "xlink:href",
    "xlink:role",
    "xlink:show",
    "xlink:title",
    "xlink:type",
    "xml:base",
    "xml:lang",
    "xml:space",
    "xmlns:xlink",
)

_WORD_BREAK = re.compile(r"[-:]([a-z0-9])")


def camel_case(name: str) -> str:
    """``stroke-width`` → ``strokeWidth``, ``xlink:href`` → ``xlinkHref``."""
    return _WORD_BREAK.sub(lambda m: m.group(1).upper(), name)


ATTRIBUTE_MAP: dict[str, str] = {name: camel_case(name) for name in _HYPHENATED}
ATTRIBUTE_MAP["class"] = "className"


def jsx_attribute_name(name: str) -> str:
    """React name for an SVG attribute.

    ``data-*``, ``aria-*`` and unknown plain names pass through. Unknown
    namespaced names (``inkscape:label``) are camel-cased, since JSX parsers
    reject ``ns:name`` attributes.
    """
    if name in ATTRIBUTE_MAP:
        return ATTRIBUTE_MAP[name]
    if ":" in name:
        return camel_case(name).replace(":", "")
    return name


def css_property_name(prop: str) -> str:
    """CSS property → React style-object key (``-webkit-x`` → ``WebkitX``)."""
    if prop.startswith("--"):
        return prop
    if prop.startswith("-"):
        prop = prop[1:]
        return camel_case(prop[:1].upper() + prop[1:])
    return camel_case(prop)


def split_declarations(style: str) -> list[tuple[str, str]]:
    """Split a CSS declaration list into (property, value) pairs.

    Semicolons inside quotes or parentheses (``url("data:...;base64,")``) do
    not end a declaration. Entries without a colon are dropped.
    """
    declarations: list[str] = []
    current: list[str] = []
    quote = ""
    depth = 0
    for ch in style:
        if quote:
            if ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == ";" and depth == 0:
            declarations.append("".join(current))
            current = []
            continue
        current.append(ch)
    declarations.append("".join(current))

    pairs: list[tuple[str, str]] = []
    for declaration in declarations:
        prop, colon, value = declaration.partition(":")
        prop, value = prop.strip(), value.strip()
        if colon and prop and value:
            pairs.append((prop, value))
    return pairs


_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER.match(name))


def style_object(style: str) -> str:
    """Inline CSS → JSX style object literal, e.g. ``{ strokeWidth: "2" }``."""
    entries = []
    for prop, value in split_declarations(style):
        key = css_property_name(prop)
        key = key if is_identifier(key) else json.dumps(key)
        entries.append(f"{key}: {json.dumps(value)}")
    return "{ " + ", ".join(entries) + " }" if entries else "{}"
