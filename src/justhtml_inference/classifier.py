"""Context classification.

Decides from the first few characters of the input whether it is a full
document or, if it is a fragment, which context element the fragment parser
must start in. Only ``policy.scan_limit`` leading characters are examined,
so the cost does not grow with the input.
"""

from __future__ import annotations

import logging

from .context import ContextDecision
from .policy import DEFAULT_POLICY, ContextPolicy

logger = logging.getLogger(__name__)


class ContextClassifier:
    __slots__ = ("policy",)

    def __init__(self, policy: ContextPolicy | None = None) -> None:
        self.policy = policy or DEFAULT_POLICY

    def classify(self, text: str | None) -> ContextDecision:
        prefix = self.policy.prefix(text)
        for predicate, decision in self.policy.context_table():
            if predicate(prefix):
                logger.debug("classified %r as %r", prefix[:40], decision)
                return decision
        fallback = self.policy.fallback
        logger.debug("classified %r as fallback %r", prefix[:40], fallback)
        return fallback

    def __repr__(self) -> str:
        return f"ContextClassifier(policy={self.policy.name!r})"
