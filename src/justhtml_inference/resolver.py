from __future__ import annotations

from .pluck import PluckPath
from .policy import DEFAULT_POLICY, ContextPolicy


class PluckResolver:
    """Map a fragment's leading tag to the implied wrappers the parser will add.

    The answer is a static function of the text, mirroring which wrappers that
    kind of fragment is known to trigger in its context. ``None`` means the
    parser output already lines up with the caller's nodes.
    """

    __slots__ = ("policy",)

    def __init__(self, policy: ContextPolicy | None = None) -> None:
        self.policy = policy or DEFAULT_POLICY

    def pluck_path(self, text: str | None) -> PluckPath | None:
        text = text or ""
        prefix = self.policy.prefix(text)
        for predicate, path in self.policy.pluck_table():
            if predicate(prefix, len(text)):
                return path
        return None

    def __repr__(self) -> str:
        return f"PluckResolver(policy={self.policy.name!r})"
