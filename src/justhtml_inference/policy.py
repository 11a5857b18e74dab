"""Context policies.

A `ContextPolicy` is the immutable configuration behind classification and
plucking: the fallback context for input no rule recognizes, how far into the
input the rules may look, and the two ordered rule tables. Rule tables are
compiled once per policy into ``(predicate, result)`` pairs and evaluated in
order, first match wins.

Two presets ship with the library:

* ``BODY_POLICY`` parses unrecognized fragments inside ``<body>`` and carries
  the full pluck table. It is the default.
* ``TEMPLATE_POLICY`` parses unrecognized fragments inside ``<template>``,
  whose insertion mode accepts nearly any tag without implied wrappers.

The default can be switched with the ``JUSTHTML_INFERENCE_POLICY``
environment variable, read once at import.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import (
    BODY_CONTEXT,
    CONTEXT_NAMES,
    DEFAULT_SCAN_LIMIT,
    DOCUMENT_SKELETON_TAGS,
    HTML_CONTEXT,
    TABLE_CELL_TAGS,
    TABLE_COLUMN_TAGS,
    TABLE_CONSTRUCT_TAGS,
    TABLE_CONTEXT,
    TABLE_ROW_TAGS,
    TEMPLATE_CONTEXT,
)
from .context import FULL_DOCUMENT, ContextDecision, ContextNode
from .pluck import PluckPath

if TYPE_CHECKING:
    from collections.abc import Callable

    Predicate = Callable[[str], bool]
    PluckPredicate = Callable[[str, int], bool]

POLICY_ENV_VAR = "JUSTHTML_INFERENCE_POLICY"

_LEADING_WS = r"\A[ \t\n\f\r]*"


def _start_tag_pattern(names: list[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(name) for name in names)
    return re.compile(rf"{_LEADING_WS}<(?:{alternatives})(?![\w-])", re.IGNORECASE)


def _matcher(pattern: re.Pattern[str]) -> Predicate:
    return lambda prefix: pattern.match(prefix) is not None


DOCUMENT_PATTERN = re.compile(rf"{_LEADING_WS}(?:<!doctype\s+html(?![\w-])|<html(?![\w-]))", re.IGNORECASE)


@dataclass(frozen=True)
class ContextRule:
    """Start-tag rule for the classifier: leading tag in `tags` -> `context`."""

    tags: tuple[str, ...]
    context: str

    def compile(self) -> tuple[Predicate, ContextDecision]:
        return _matcher(_start_tag_pattern(list(self.tags))), ContextNode(self.context)


@dataclass(frozen=True)
class PluckRule:
    """Start-tag rule for the resolver: leading tag in `tags` -> `path`.

    With `whole_input_only` the rule applies only when the entire input fits the
    scan window, so a decision never depends on characters the window did not
    see. `unless_tags` then vetoes the rule when any of those start tags occur,
    and `ends_with` requires the input to close with that end tag (trailing
    whitespace allowed).
    """

    tags: tuple[str, ...]
    path: str
    whole_input_only: bool = False
    unless_tags: tuple[str, ...] = ()
    ends_with: str | None = None

    def compile(self, scan_limit: int) -> tuple[PluckPredicate, PluckPath]:
        leading = _matcher(_start_tag_pattern(list(self.tags)))
        path = PluckPath.parse(self.path)
        if not self.whole_input_only:
            return (lambda prefix, length: leading(prefix)), path

        unless = re.compile(
            "|".join(rf"<{re.escape(tag)}(?![\w-])" for tag in self.unless_tags) or r"(?!)",
            re.IGNORECASE,
        )
        closing = None
        if self.ends_with:
            closing = re.compile(rf"</{re.escape(self.ends_with)}[ \t\n\f\r]*>[ \t\n\f\r]*\Z", re.IGNORECASE)

        def predicate(prefix: str, length: int) -> bool:
            if length > scan_limit:
                return False
            if closing is not None and closing.search(prefix) is None:
                return False
            return leading(prefix) and unless.search(prefix) is None

        return predicate, path


DEFAULT_CONTEXT_RULES = (
    ContextRule(tuple(TABLE_CONSTRUCT_TAGS), TABLE_CONTEXT),
    ContextRule(tuple(DOCUMENT_SKELETON_TAGS), HTML_CONTEXT),
)

DEFAULT_PLUCK_RULES = (
    PluckRule(tuple(TABLE_CELL_TAGS), "tbody/tr/*"),
    PluckRule(tuple(TABLE_ROW_TAGS), "tbody/*"),
    PluckRule(tuple(TABLE_COLUMN_TAGS), "colgroup/*"),
    PluckRule(("body",), "body"),
    PluckRule(("head",), "head", whole_input_only=True, unless_tags=("body",), ends_with="head"),
)


@dataclass(frozen=True)
class ContextPolicy:
    name: str
    fallback_context: str = BODY_CONTEXT
    scan_limit: int = DEFAULT_SCAN_LIMIT
    context_rules: tuple[ContextRule, ...] = DEFAULT_CONTEXT_RULES
    pluck_rules: tuple[PluckRule, ...] = DEFAULT_PLUCK_RULES
    _compiled_context: tuple[tuple[Predicate, ContextDecision], ...] = field(
        init=False, repr=False, compare=False
    )
    _compiled_pluck: tuple[tuple[PluckPredicate, PluckPath], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.scan_limit <= 0:
            raise ValueError(f"scan_limit must be positive, got {self.scan_limit}")
        if self.fallback_context not in CONTEXT_NAMES:
            raise ValueError(
                f"Unknown fallback context {self.fallback_context!r}; expected one of {sorted(CONTEXT_NAMES)}"
            )
        for rule in self.context_rules:
            if rule.context not in CONTEXT_NAMES:
                raise ValueError(f"Unknown context {rule.context!r} in rule for {rule.tags}")

        # Document detection always outranks the configured start-tag rules
        context_table = [(_matcher(DOCUMENT_PATTERN), FULL_DOCUMENT)]
        context_table.extend(rule.compile() for rule in self.context_rules)
        object.__setattr__(self, "_compiled_context", tuple(context_table))
        object.__setattr__(
            self, "_compiled_pluck", tuple(rule.compile(self.scan_limit) for rule in self.pluck_rules)
        )

    @property
    def fallback(self) -> ContextNode:
        return ContextNode(self.fallback_context)

    def prefix(self, text: str | None) -> str:
        return (text or "")[: self.scan_limit]

    def context_table(self) -> tuple[tuple[Predicate, ContextDecision], ...]:
        return self._compiled_context

    def pluck_table(self) -> tuple[tuple[PluckPredicate, PluckPath], ...]:
        return self._compiled_pluck


BODY_POLICY = ContextPolicy(name="body", fallback_context=BODY_CONTEXT)
TEMPLATE_POLICY = ContextPolicy(name="template", fallback_context=TEMPLATE_CONTEXT)

POLICIES = {
    BODY_POLICY.name: BODY_POLICY,
    TEMPLATE_POLICY.name: TEMPLATE_POLICY,
}


def get_policy(name: str) -> ContextPolicy:
    try:
        return POLICIES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown context policy {name!r}; expected one of {sorted(POLICIES)}") from None


def policy_from_env(environ: dict[str, str] | None = None) -> ContextPolicy:
    value = (os.environ if environ is None else environ).get(POLICY_ENV_VAR, "")
    if not value:
        return BODY_POLICY
    return get_policy(value)


DEFAULT_POLICY = policy_from_env()
