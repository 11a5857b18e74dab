"""Inference parser entry point.

`InferenceParser.parse` classifies the input, calls the document or fragment
parser accordingly and, for fragments, plucks the caller's nodes out of any
wrappers the HTML5 fragment algorithm inserted.
"""

from __future__ import annotations

import logging
from typing import Any

from .backend import JustHTMLBackend, ParserBackend
from .classifier import ContextClassifier
from .context import ContextDecision, is_full_document
from .nodes import NodeSequence
from .pluck import PluckPath, select
from .policy import DEFAULT_POLICY, ContextPolicy
from .resolver import PluckResolver

logger = logging.getLogger(__name__)


class InferenceParser:
    __slots__ = ("backend", "classifier", "policy", "resolver")

    def __init__(
        self,
        policy: ContextPolicy | None = None,
        *,
        backend: ParserBackend | None = None,
    ) -> None:
        self.policy = policy or DEFAULT_POLICY
        self.backend = backend or JustHTMLBackend()
        self.classifier = ContextClassifier(self.policy)
        self.resolver = PluckResolver(self.policy)

    def context(self, text: str | None) -> ContextDecision:
        return self.classifier.classify(text)

    def pluck_path(self, text: str | None) -> PluckPath | None:
        return self.resolver.pluck_path(text)

    def parse(self, text: str | None, *, pluck: bool = True) -> Any:
        """Parse `text` as whatever it looks like.

        Returns the parser's document node when the input starts like a full
        document, otherwise a `NodeSequence` of the fragment's top-level nodes.
        With ``pluck=False`` fragments come back exactly as parsed, including
        implied ancestors such as the ``<tbody><tr>`` around a bare ``<td>``.
        """
        text = text or ""
        decision = self.classifier.classify(text)
        if is_full_document(decision):
            return self.backend.parse_document(text)

        forest = self.backend.parse_fragment(text, decision.tag_name)
        if not pluck:
            return NodeSequence(forest)

        path = self.resolver.pluck_path(text)
        if path is None:
            return NodeSequence(forest)
        logger.debug("plucking %s from %d root node(s)", path, len(forest))
        return select(forest, path)

    def __repr__(self) -> str:
        return f"InferenceParser(policy={self.policy.name!r}, backend={self.backend!r})"


_default_parser = InferenceParser()


def parse(text: str | None, *, pluck: bool = True) -> Any:
    return _default_parser.parse(text, pluck=pluck)


def classify(text: str | None) -> ContextDecision:
    return _default_parser.context(text)


def pluck_path(text: str | None) -> PluckPath | None:
    return _default_parser.pluck_path(text)


context = classify
