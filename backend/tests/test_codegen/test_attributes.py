"""Tests for attribute and style-property naming."""

from __future__ import annotations

import pytest

from svgjsx.codegen.attributes import (
    ATTRIBUTE_MAP,
    css_property_name,
    jsx_attribute_name,
    split_declarations,
    style_object,
)


def test_attribute_map_is_injective():
    assert len(set(ATTRIBUTE_MAP.values())) == len(ATTRIBUTE_MAP)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("stroke-width", "strokeWidth"),
        ("xlink:href", "xlinkHref"),
        ("xml:space", "xmlSpace"),
        ("class", "className"),
        ("panose-1", "panose1"),
        ("viewBox", "viewBox"),
        ("data-name", "data-name"),
        ("aria-hidden", "aria-hidden"),
        ("inkscape:label", "inkscapeLabel"),
        ("sodipodi:docname", "sodipodiDocname"),
        ("xmlns:inkscape", "xmlnsInkscape"),
    ],
)
def test_jsx_attribute_name(name, expected):
    assert jsx_attribute_name(name) == expected


@pytest.mark.parametrize(
    "prop, expected",
    [
        ("fill", "fill"),
        ("stroke-width", "strokeWidth"),
        ("-webkit-transform", "WebkitTransform"),
        ("--brand", "--brand"),
    ],
)
def test_css_property_name(prop, expected):
    assert css_property_name(prop) == expected


def test_split_declarations():
    assert split_declarations('background: url("a;b"); color: red;; bogus') == [
        ("background", 'url("a;b")'),
        ("color", "red"),
    ]
    assert split_declarations("fill: url(data:image/png;base64,xyz)") == [("fill", "url(data:image/png;base64,xyz)")]


def test_style_object():
    assert style_object("stroke-width: 2; --brand: red") == '{ strokeWidth: "2", "--brand": "red" }'
    assert style_object(" ; ") == "{}"
