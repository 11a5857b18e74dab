"""Parser collaborators.

The inference engine never tokenizes or builds trees itself. It hands text to
a backend that implements HTML5 document and fragment parsing; the default
backend is JustHTML.
"""

from __future__ import annotations

from typing import Any, Protocol

from justhtml import JustHTML
from justhtml.context import FragmentContext


class ParserBackend(Protocol):
    def parse_document(self, text: str) -> Any:
        """Parse `text` as a full document and return its document node."""

    def parse_fragment(self, text: str, context_name: str) -> list[Any]:
        """Parse `text` as the children of `context_name`; return the root nodes."""


class JustHTMLBackend:
    __slots__ = ("collect_errors",)

    def __init__(self, *, collect_errors: bool = False) -> None:
        self.collect_errors = bool(collect_errors)

    def parse_document(self, text: str) -> Any:
        return JustHTML(text or "", collect_errors=self.collect_errors).root

    def parse_fragment(self, text: str, context_name: str) -> list[Any]:
        doc = JustHTML(
            text or "",
            collect_errors=self.collect_errors,
            fragment_context=FragmentContext(context_name),
        )
        return list(doc.root.children or [])

    def __repr__(self) -> str:
        return f"JustHTMLBackend(collect_errors={self.collect_errors})"
