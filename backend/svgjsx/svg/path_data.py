"""Path-data tokenizer and syntactic simplifier.

Splits a ``d`` attribute into command segments without interpreting geometry,
so rewrites only ever remove textual redundancy. Each token remembers the
separator that preceded it, which lets the formatter reproduce the source
layout with only whitespace runs collapsed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

COMMAND_LETTERS = frozenset("MmLlHhVvCcSsQqTtAaZz")
_NUMBER_START = frozenset("+-.0123456789")
_SEPARATORS = frozenset(" \t\r\n\f,")


class PathDataError(ValueError):
    """Path data contains something that is neither command, number nor separator."""


@dataclass
class PathSegment:
    command: str
    lead: str = ""
    args: list[str] = field(default_factory=list)
    # separator preceding each argument: "", " " or ","
    seps: list[str] = field(default_factory=list)

    @property
    def is_moveto(self) -> bool:
        return self.command in "Mm"

    @property
    def is_closepath(self) -> bool:
        return self.command in "Zz"

    def extend(self, other: PathSegment) -> None:
        for i, (sep, arg) in enumerate(zip(other.seps, other.args)):
            self.seps.append(" " if i == 0 and not sep else sep)
            self.args.append(arg)

    def to_text(self) -> str:
        return self.lead + self.command + "".join(s + a for s, a in zip(self.seps, self.args))


def _scan_number(d: str, i: int) -> int:
    """Return the end index of the number literal starting at ``i``."""
    n = len(d)
    j = i
    if j < n and d[j] in "+-":
        j += 1
    digits = 0
    while j < n and d[j].isdigit():
        j += 1
        digits += 1
    if j < n and d[j] == ".":
        j += 1
        while j < n and d[j].isdigit():
            j += 1
            digits += 1
    if digits == 0:
        raise PathDataError(f"Malformed number at offset {i}: {d[i:i + 8]!r}")
    if j < n and d[j] in "eE":
        k = j + 1
        if k < n and d[k] in "+-":
            k += 1
        if k < n and d[k].isdigit():
            while k < n and d[k].isdigit():
                k += 1
            j = k
    return j


def tokenize_path(d: str) -> list[PathSegment]:
    """Tokenize path data into command segments.

    Raises PathDataError on anything that is not path syntax, including a
    number before the first command.
    """
    segments: list[PathSegment] = []
    pending = ""
    i = 0
    n = len(d)
    while i < n:
        ch = d[i]
        if ch in _SEPARATORS:
            pending = "," if ch == "," or pending == "," else " "
            i += 1
        elif ch in COMMAND_LETTERS:
            segments.append(PathSegment(command=ch, lead=pending))
            pending = ""
            i += 1
        elif ch in _NUMBER_START:
            if not segments:
                raise PathDataError("Path data must start with a command")
            end = _scan_number(d, i)
            segments[-1].args.append(d[i:end])
            segments[-1].seps.append(pending)
            pending = ""
            i = end
        else:
            raise PathDataError(f"Unexpected character {ch!r} at offset {i}")
    return segments


def format_path(segments: list[PathSegment]) -> str:
    return "".join(seg.to_text() for seg in segments).strip(" ,")


def simplify_path(d: str) -> str:
    """Remove textual redundancy from path data without changing its shape.

    - whitespace runs collapse to single spaces
    - ``L1 2 L3 4`` → ``L1 2 3 4`` (a repeated lineto letter is implicit)
    - ``M1 2 M3 4`` → ``M3 4`` (a bare moveto superseded by an absolute moveto)
    - ``Z Z`` → ``Z``
    """
    out: list[PathSegment] = []
    for seg in tokenize_path(d):
        prev = out[-1] if out else None
        if prev is not None:
            if seg.command in "Ll" and prev.command == seg.command and seg.args:
                prev.extend(seg)
                continue
            if seg.command == "M" and prev.is_moveto and len(prev.args) == 2:
                seg.lead = prev.lead
                out[-1] = seg
                continue
            if seg.is_closepath and prev.is_closepath:
                continue
        out.append(seg)
    return format_path(out)
