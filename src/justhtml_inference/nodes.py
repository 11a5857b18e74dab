from __future__ import annotations

from .serialize import to_html


class NodeSequence(list):
    """Ordered top-level nodes of a parsed fragment."""

    def to_html(self) -> str:
        return to_html(self)

    @property
    def names(self) -> list[str]:
        return [node.name for node in self]

    def __repr__(self) -> str:
        return f"NodeSequence({list.__repr__(self)})"
