"""C8 — Path Merging (experimental, off by default).

Concatenate the path data of sibling <path> elements that share fill, stroke
and stroke-width into the first of them. Lossy: overlapping paths lose their
independent fill-rule and z-order behaviour once they become one path.
"""

from __future__ import annotations

from svgjsx.engine.registry import cleaning_pass
from svgjsx.models.options import CleaningOptions
from svgjsx.models.svg_document import Document, Element

MERGE_KEY_ATTRIBUTES = ("fill", "stroke", "stroke-width")


class _Absent:
    """Key component for an attribute that is not set."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def merge_key(path: Element) -> tuple[str | _Absent, ...]:
    return tuple(path.attributes.get(name, ABSENT) for name in MERGE_KEY_ATTRIBUTES)


def _merge_siblings(parent: Element) -> int:
    groups: dict[tuple, list[Element]] = {}
    for child in parent.element_children():
        if child.tag == "path" and child.get("d"):
            groups.setdefault(merge_key(child), []).append(child)

    merged = 0
    for group in groups.values():
        if len(group) < 2:
            continue
        first = group[0]
        first.attributes["d"] = " ".join(p.attributes["d"].strip() for p in group)
        for path in group[1:]:
            path.detach()
            merged += 1
    return merged


@cleaning_pass(
    id="C8",
    order=8,
    option="merge_paths",
    description="Merged {count} compatible paths",
    removes_elements=True,
)
def merge_paths(document: Document, options: CleaningOptions) -> int:
    return sum(_merge_siblings(parent) for parent in list(document.iter()))
