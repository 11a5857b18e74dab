"""Tests for context classification."""

import unittest

from justhtml_inference import (
    BODY_POLICY,
    FULL_DOCUMENT,
    TEMPLATE_POLICY,
    ContextClassifier,
    ContextNode,
    ContextPolicy,
    classify,
    context,
)

FRAGMENTS = {
    "body": [
        "<div>hello</div>",
        '<div class="big">hello</div>',
        "<li>hello</li>",
        "<dl><dd>hello</dd><dt>world</dt></dl>",
        "<dd>hello</dd><dt>world</dt>",
        "just some text",
    ],
    "table": [
        "<thead><tr><td>hello</td></tr></thead>",
        "<tbody><tr><td>hello</td></tr></tbody>",
        "<tfoot><tr><td>hello</td></tr></tfoot>",
        "<tr><th>hello</th></tr>",
        "<tr><td>hello</td></tr>",
        "<th>hello</th>",
        "<td>hello</td>",
        '<colgroup><col class="hello"></colgroup>',
        '<col class="hello">',
        "<caption>hello</caption>",
    ],
    "html": [
        "<body><div>hello</div></body>",
        '<head><meta charset="UTF-8"><title>hello</title></head><body><div>hello</div></body>',
    ],
}


class TestDocumentDetection(unittest.TestCase):
    def test_doctype(self):
        assert classify("<!doctype html><html><head></head><body></body></html>") is FULL_DOCUMENT
        assert classify(" <!doctype   html><html><head></head><body></body></html>") is FULL_DOCUMENT
        assert classify("<!DOCTYPE HTML><HTML><HEAD></HEAD><BODY></BODY></HTML>") is FULL_DOCUMENT

    def test_html_tag_without_doctype(self):
        assert classify("<html><head></head><body></body></html>") is FULL_DOCUMENT
        assert classify(" <html lang='en'><head></head><body></body></html>") is FULL_DOCUMENT
        assert classify("<HTML><HEAD></HEAD><BODY></BODY></HTML>") is FULL_DOCUMENT

    def test_leading_newlines_and_tabs(self):
        assert classify("\n\t\r\n<!DOCTYPE html>") is FULL_DOCUMENT

    def test_similar_tag_names_are_not_documents(self):
        assert classify("<htmlish>x</htmlish>") == ContextNode("body")
        assert classify("<html-widget>x</html-widget>") == ContextNode("body")
        assert classify("<!doctype htmlx>") == ContextNode("body")

    def test_doctype_must_lead(self):
        assert classify("text <!DOCTYPE html>") == ContextNode("body")


class TestFragmentContexts(unittest.TestCase):
    def test_known_fragments(self):
        for expected, fragments in FRAGMENTS.items():
            for fragment in fragments:
                actual = classify(fragment)
                assert actual == ContextNode(expected), f"Given: {fragment!r} got {actual!r}"

    def test_case_insensitive(self):
        assert classify("<TD>hello</TD>") == ContextNode("table")
        assert classify("<Body><div>x</div></Body>") == ContextNode("html")

    def test_leading_whitespace_is_skipped(self):
        assert classify("  \n<tr><td>hello</td></tr>") == ContextNode("table")
        assert classify("\t<head></head>") == ContextNode("html")

    def test_tag_names_end_at_word_boundary(self):
        assert classify("<table><tr><td>x</td></tr></table>") == ContextNode("body")
        assert classify("<tdx>hello</tdx>") == ContextNode("body")
        assert classify("<td-cell>hello</td-cell>") == ContextNode("body")
        assert classify("<header>hello</header>") == ContextNode("body")
        assert classify("<bodyguard>hello</bodyguard>") == ContextNode("body")

    def test_attributes_after_tag_name(self):
        assert classify('<td colspan="2">x</td>') == ContextNode("table")
        assert classify("<col/>") == ContextNode("table")

    def test_only_the_leading_tag_matters(self):
        assert classify("<div><td>hello</td></div>") == ContextNode("body")
        assert classify("hello <td>world</td>") == ContextNode("body")


class TestTotality(unittest.TestCase):
    def test_empty_and_whitespace(self):
        assert classify("") == ContextNode("body")
        assert classify("   \n ") == ContextNode("body")
        assert classify(None) == ContextNode("body")

    def test_malformed_input(self):
        for text in ["<", "<>", "</td>", "<!--", "<!doctype", "<<td>", "\x00<td>"]:
            assert classify(text) == ContextNode("body"), text

    def test_deterministic(self):
        for fragments in FRAGMENTS.values():
            for fragment in fragments:
                assert classify(fragment) == classify(fragment)

    def test_context_alias(self):
        assert context is classify


class TestBoundedScan(unittest.TestCase):
    def test_only_prefix_is_examined(self):
        policy = ContextPolicy(name="short", scan_limit=8)
        classifier = ContextClassifier(policy)
        assert classifier.classify("        <td>x</td>") == ContextNode("body")
        assert classifier.classify("   <td>x</td>") == ContextNode("table")

    def test_long_input(self):
        text = "<td>" + "x" * 1_000_000 + "</td>"
        assert classify(text) == ContextNode("table")


class TestPolicies(unittest.TestCase):
    def test_template_policy_fallback(self):
        classifier = ContextClassifier(TEMPLATE_POLICY)
        assert classifier.classify("<div>hello</div>") == ContextNode("template")
        assert classifier.classify("just some text") == ContextNode("template")

    def test_template_policy_keeps_specific_rules(self):
        classifier = ContextClassifier(TEMPLATE_POLICY)
        assert classifier.classify("<td>hello</td>") == ContextNode("table")
        assert classifier.classify("<body></body>") == ContextNode("html")
        assert classifier.classify("<!DOCTYPE html>") is FULL_DOCUMENT

    def test_default_policy_is_body(self):
        assert ContextClassifier().policy is BODY_POLICY


if __name__ == "__main__":
    unittest.main()
