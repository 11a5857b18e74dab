from __future__ import annotations

from typing import Union


class FullDocument:
    """Decision meaning the input must be parsed as a complete document."""

    __slots__ = ()

    _instance: FullDocument | None = None

    def __new__(cls) -> FullDocument:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "FULL_DOCUMENT"

    def __reduce__(self) -> str:
        return "FULL_DOCUMENT"


FULL_DOCUMENT = FullDocument()


class ContextNode:
    """Decision naming the element a fragment must be parsed inside of."""

    __slots__ = ("tag_name",)

    tag_name: str

    def __init__(self, tag_name: str) -> None:
        object.__setattr__(self, "tag_name", tag_name.lower())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContextNode):
            return NotImplemented
        return self.tag_name == other.tag_name

    def __hash__(self) -> int:
        return hash((ContextNode, self.tag_name))

    def __repr__(self) -> str:
        return f"ContextNode({self.tag_name})"

    def __reduce__(self) -> tuple[type[ContextNode], tuple[str]]:
        return (ContextNode, (self.tag_name,))


ContextDecision = Union[FullDocument, ContextNode]


def is_full_document(decision: ContextDecision) -> bool:
    return decision is FULL_DOCUMENT
