"""HTML serialization for parsed documents and plucked node sequences.

Output is compact (no pretty-printing) so a fragment parsed and plucked
correctly serializes back to the markup the caller supplied.
"""

from __future__ import annotations

from typing import Any

from .constants import RAWTEXT_ELEMENTS, VOID_ELEMENTS


def _escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace("\xa0", "&nbsp;")


def _choose_attr_quote(value: str) -> str:
    if '"' in value and "'" not in value:
        return "'"
    return '"'


def _escape_attr_value(value: str, quote_char: str) -> str:
    value = value.replace("&", "&amp;").replace("\xa0", "&nbsp;")
    if quote_char == '"':
        return value.replace('"', "&quot;")
    return value.replace("'", "&#39;")


def serialize_start_tag(name: str, attrs: dict[str, str | None] | None) -> str:
    parts: list[str] = ["<", name]
    for key, value in (attrs or {}).items():
        if value is None or value == "":
            parts.extend([" ", key, '=""'])
            continue
        value_str = str(value)
        quote = _choose_attr_quote(value_str)
        parts.extend([" ", key, "=", quote, _escape_attr_value(value_str, quote), quote])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def _doctype_to_html(node: Any) -> str:
    doctype = node.data
    name = getattr(doctype, "name", None) or "html"
    return f"<!DOCTYPE {name}>"


def _is_html(node: Any) -> bool:
    return node.namespace in {None, "html"}


def _node_to_html(node: Any, parts: list[str], *, raw_text: bool = False) -> None:
    name: str = node.name

    if name == "#text":
        text = node.data or ""
        parts.append(text if raw_text else _escape_text(text))
        return

    if name == "#comment":
        parts.append(f"<!--{node.data or ''}-->")
        return

    if name == "!doctype":
        parts.append(_doctype_to_html(node))
        return

    if name in {"#document", "#document-fragment"}:
        for child in node.children or []:
            _node_to_html(child, parts)
        return

    parts.append(serialize_start_tag(name, node.attrs))
    if _is_html(node) and name in VOID_ELEMENTS:
        return

    # HTML templates keep their contents in a separate fragment
    template_content = getattr(node, "template_content", None)
    if name == "template" and _is_html(node) and template_content is not None:
        children = template_content.children or []
    else:
        children = node.children or []

    child_raw = _is_html(node) and name in RAWTEXT_ELEMENTS
    for child in children:
        _node_to_html(child, parts, raw_text=child_raw)
    parts.append(serialize_end_tag(name))


def to_html(obj: Any) -> str:
    """Serialize a node, a document, or a sequence of nodes to HTML."""
    parts: list[str] = []
    if isinstance(obj, (list, tuple)):
        for node in obj:
            _node_to_html(node, parts)
    elif hasattr(obj, "name") and hasattr(obj, "children"):
        _node_to_html(obj, parts)
    else:
        raise TypeError(f"Cannot serialize {type(obj).__name__}")
    return "".join(parts)
