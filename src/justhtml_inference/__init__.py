from .backend import JustHTMLBackend, ParserBackend
from .classifier import ContextClassifier
from .context import FULL_DOCUMENT, ContextDecision, ContextNode, FullDocument
from .nodes import NodeSequence
from .parser import InferenceParser, classify, context, parse, pluck_path
from .pluck import PluckPath, PluckPathError, select
from .policy import BODY_POLICY, DEFAULT_POLICY, POLICIES, TEMPLATE_POLICY, ContextPolicy, get_policy
from .resolver import PluckResolver
from .serialize import to_html

__version__ = "0.1.0"

__all__ = [
    "BODY_POLICY",
    "DEFAULT_POLICY",
    "FULL_DOCUMENT",
    "POLICIES",
    "TEMPLATE_POLICY",
    "ContextClassifier",
    "ContextDecision",
    "ContextNode",
    "ContextPolicy",
    "FullDocument",
    "InferenceParser",
    "JustHTMLBackend",
    "NodeSequence",
    "ParserBackend",
    "PluckPath",
    "PluckPathError",
    "PluckResolver",
    "classify",
    "context",
    "get_policy",
    "parse",
    "pluck_path",
    "select",
    "to_html",
]
