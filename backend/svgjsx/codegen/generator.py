"""Code generator — cleaned Document → React component (+ optional stylesheet).

Works on a deep copy, so the caller's Document is left untouched, and is
deterministic: the same Document and options always give identical text.

Step order:
  1. strip ids            4. attribute names → React spelling
  2. strip comments       5. root augmentation (className, size, color, props)
  3. extract stylesheet   6. render + template   7. pretty print
"""

from __future__ import annotations

import copy
import json
import logging

from svgjsx.codegen.attributes import jsx_attribute_name
from svgjsx.codegen.formatter import INDENT, format_markup
from svgjsx.codegen.jsx import JsxExpression, class_expression, render_jsx
from svgjsx.codegen.stylesheet import extract_stylesheet
from svgjsx.codegen.templates import component_name, render_component
from svgjsx.errors import GenerationError
from svgjsx.models.options import GenerationOptions
from svgjsx.models.results import GeneratedArtifact
from svgjsx.models.svg_document import SVG_ROOT_TAG, Comment, Document, Element

logger = logging.getLogger(__name__)

COLOR_EXPRESSION = JsxExpression('color || "currentColor"')
SIZE_EXPRESSION = JsxExpression("size")


def _strip_identifiers(document: Document) -> None:
    for element in document.iter():
        element.attributes.pop("id", None)


def _strip_comments(document: Document) -> None:
    for node in list(document.root.iter_nodes()):
        if isinstance(node, Comment):
            node.detach()


def _rename_attributes(document: Document, has_stylesheet: bool) -> None:
    for element in document.iter():
        renamed: dict[str, str] = {}
        for name, value in element.attributes.items():
            if name == "class":
                value = class_expression(value, has_stylesheet)
            renamed[jsx_attribute_name(name)] = value
        element.attributes = renamed


def _augment_root(root: Element) -> None:
    attrs = root.attributes
    own_class = attrs.get("className")
    if own_class is None:
        class_value = JsxExpression("className")
    elif isinstance(own_class, JsxExpression):
        class_value = JsxExpression(f'[{own_class}, className].filter(Boolean).join(" ")')
    else:
        class_value = JsxExpression(f'[{json.dumps(own_class)}, className].filter(Boolean).join(" ")')

    for dimension in ("width", "height"):
        if dimension in attrs:
            attrs[dimension] = SIZE_EXPRESSION
    for paint in ("fill", "stroke"):
        if attrs.get(paint) == "currentColor":
            attrs[paint] = COLOR_EXPRESSION

    # className goes first so callers see it next to the tag name
    root.attributes = {"className": class_value, **{k: v for k, v in attrs.items() if k != "className"}}


def generate_component(document: Document, options: GenerationOptions) -> GeneratedArtifact:
    """Generate component source (and stylesheet) from a cleaned Document."""
    if document is None or not isinstance(document.root, Element) or document.root.tag != SVG_ROOT_TAG:
        raise GenerationError("Document has no <svg> root element")

    working = copy.deepcopy(document)

    if options.strip_identifiers:
        _strip_identifiers(working)
    if options.strip_comments:
        _strip_comments(working)

    stylesheet = extract_stylesheet(working) if options.extract_stylesheet else None

    _rename_attributes(working, has_stylesheet=stylesheet is not None)
    _augment_root(working.root)

    markup = render_jsx(working.root, normalize_quoting=options.normalize_quoting, spread="props")
    if options.pretty_print:
        markup = format_markup(markup, base_indent=INDENT)
    else:
        markup = INDENT + markup

    name = component_name(options.component_name)
    component = render_component(
        name,
        markup,
        typed=options.emit_type_annotations,
        memo=options.wrap_in_memoization,
        stylesheet_import=stylesheet is not None,
    )
    logger.info(
        "Generated %s (%d chars%s)",
        name,
        len(component),
        f", stylesheet {len(stylesheet)} chars" if stylesheet else "",
    )
    return GeneratedArtifact(component=component, stylesheet=stylesheet)
