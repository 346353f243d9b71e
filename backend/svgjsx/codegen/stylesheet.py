"""Move presentation data out of the tree into a CSS-module stylesheet."""

from __future__ import annotations

from svgjsx.codegen.attributes import split_declarations
from svgjsx.models.svg_document import Document

CLASS_PREFIX = "svg_element_"
INLINE_STYLES_HEADER = "/* Extracted inline styles */"


def _css_rule(class_name: str, style: str) -> str:
    body = "".join(f"  {prop}: {value};\n" for prop, value in split_declarations(style))
    return f".{class_name} {{\n{body}}}\n"


def extract_stylesheet(document: Document) -> str | None:
    """Extract <style> blocks and inline ``style`` attributes in place.

    Style-block text moves to the stylesheet and the blocks are removed. Each
    styled element gets a class ``svg_element_<n>`` (n counts styled elements
    in document order) appended to its ``class`` and a matching rule.
    Returns the stylesheet text, or None when there was nothing to extract.
    """
    blocks: list[str] = []
    for style in list(document.iter("style")):
        text = style.text_content().strip()
        if text:
            blocks.append(text + "\n")
        style.detach()

    rules: list[str] = []
    styled = [e for e in document.iter() if "style" in e.attributes]
    for index, element in enumerate(styled):
        class_name = f"{CLASS_PREFIX}{index}"
        style = element.attributes.pop("style")
        if not split_declarations(style):
            continue
        existing = element.attributes.get("class", "").split()
        element.attributes["class"] = " ".join([*existing, class_name])
        rules.append(_css_rule(class_name, style))

    if rules:
        blocks.append("\n" + INLINE_STYLES_HEADER + "\n" + "".join(rules))
    if not blocks:
        return None
    return "".join(blocks).lstrip("\n")
