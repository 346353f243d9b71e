"""Tests for the path-data tokenizer and simplifier."""

from __future__ import annotations

import pytest

from svgjsx.svg.path_data import PathDataError, format_path, simplify_path, tokenize_path


def test_tokenize_commands_and_args():
    segments = tokenize_path("M1 2 L3,4 z")
    assert [s.command for s in segments] == ["M", "L", "z"]
    assert segments[0].args == ["1", "2"]
    assert segments[1].args == ["3", "4"]
    assert segments[2].args == []


def test_tokenize_compact_numbers():
    segments = tokenize_path("M8 14s1.5 2 4 2 4-2 4-2")
    assert segments[1].args == ["1.5", "2", "4", "2", "4", "-2", "4", "-2"]


def test_tokenize_exponent():
    assert tokenize_path("M1e-3 2E2")[0].args == ["1e-3", "2E2"]


def test_format_reproduces_source_layout():
    d = "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0z"
    assert format_path(tokenize_path(d)) == d


@pytest.mark.parametrize("d", ["X1 2", "1 2 L3 4", "M1 2 L3 #4"])
def test_tokenize_rejects_garbage(d):
    with pytest.raises(PathDataError):
        tokenize_path(d)


class TestSimplify:
    def test_collapses_whitespace(self):
        assert simplify_path("M 1 2   L 3 4") == "M 1 2 L 3 4"

    def test_trims_ends(self):
        assert simplify_path("  M1 2 L3 4  ") == "M1 2 L3 4"

    def test_repeated_lineto_becomes_implicit(self):
        assert simplify_path("M1 2 L3 4 L5 6") == "M1 2 L3 4 5 6"
        assert simplify_path("m1 2 l3 4 l5 6") == "m1 2 l3 4 5 6"

    def test_mixed_case_lineto_kept(self):
        assert simplify_path("M1 2 L3 4 l5 6") == "M1 2 L3 4 l5 6"

    def test_superseded_moveto(self):
        assert simplify_path("M1 2 M3 4 L5 6") == "M3 4 L5 6"

    def test_relative_moveto_kept(self):
        assert simplify_path("M1 2 m3 4") == "M1 2 m3 4"

    def test_moveto_with_implicit_lineto_kept(self):
        # M1 2 3 4 draws a line; it is not a bare moveto
        assert simplify_path("M1 2 3 4 M5 6") == "M1 2 3 4 M5 6"

    def test_double_closepath(self):
        assert simplify_path("M0 0 L1 1 Z Z") == "M0 0 L1 1 Z"

    def test_already_minimal_unchanged(self):
        d = "M8 14s1.5 2 4 2 4-2 4-2"
        assert simplify_path(d) == d

    def test_idempotent(self):
        once = simplify_path("M 0 0  M 1 1 L 2 2 L 3 3 Z z")
        assert simplify_path(once) == once
