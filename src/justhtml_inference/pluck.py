"""Pluck paths: the child-axis selections that strip implied wrappers.

A path is a sequence of steps, each a tag name or ``*``. The first step is
matched against the roots of a parsed forest; every further step descends
one level into the children of the nodes matched so far. ``*`` keeps every
node at its level, text and comments included, so plucking never drops
whitespace or comments the caller wrote between rows or cells.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .nodes import NodeSequence

if TYPE_CHECKING:
    from collections.abc import Iterable

WILDCARD = "*"


class PluckPathError(ValueError):
    """Raised when a textual pluck path is malformed."""


class PluckPath:
    __slots__ = ("steps",)

    steps: tuple[str, ...]

    def __init__(self, steps: Iterable[str]) -> None:
        normalized = tuple(step.strip().lower() for step in steps)
        if not normalized:
            raise PluckPathError("Pluck path needs at least one step")
        for step in normalized:
            if not step:
                raise PluckPathError("Pluck path steps cannot be empty")
            if step != WILDCARD and ("/" in step or WILDCARD in step or any(ch.isspace() for ch in step)):
                raise PluckPathError(f"Invalid pluck path step: {step!r}")
        object.__setattr__(self, "steps", normalized)

    @classmethod
    def parse(cls, text: str) -> PluckPath:
        if not text or not text.strip():
            raise PluckPathError("Pluck path cannot be empty")
        return cls(text.strip().split("/"))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("PluckPath is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PluckPath):
            return NotImplemented
        return self.steps == other.steps

    def __hash__(self) -> int:
        return hash((PluckPath, self.steps))

    def __str__(self) -> str:
        return "/".join(self.steps)

    def __repr__(self) -> str:
        return f"PluckPath({str(self)!r})"

    def __len__(self) -> int:
        return len(self.steps)


def _matches(node: Any, step: str) -> bool:
    if step == WILDCARD:
        return True
    return node.name == step


def _leading_whitespace(roots: list[Any], first_match: Any) -> list[Any]:
    # Whitespace ahead of a table construct lands beside the implied wrapper, not inside it
    kept = []
    for node in roots:
        if node is first_match:
            break
        if node.name == "#text" and not (node.data or "").strip(" \t\n\f\r"):
            kept.append(node)
    return kept


def select(forest: Iterable[Any], path: PluckPath | str) -> NodeSequence:
    """Navigate `forest` along `path` and return the matched nodes in document order."""
    if isinstance(path, str):
        path = PluckPath.parse(path)

    first, *rest = path.steps
    roots = list(forest)
    current = [node for node in roots if _matches(node, first)]
    leading = _leading_whitespace(roots, current[0]) if current else []
    for step in rest:
        current = [
            child
            for node in current
            if node.name != "#text"
            for child in (node.children or [])
            if _matches(child, step)
        ]
    return NodeSequence(leading + current)
