"""Tag sets used for context inference and serialization.

Elements are kept in lists where iteration order matters (rule tables are
built from them) and in sets where only membership is checked.

References:
    - https://html.spec.whatwg.org/multipage/parsing.html#parsing-html-fragments
    - https://html.spec.whatwg.org/multipage/parsing.html#serialising-html-fragments
"""

# Context node names the fragment parser is invoked with
BODY_CONTEXT = "body"
TABLE_CONTEXT = "table"
HTML_CONTEXT = "html"
TEMPLATE_CONTEXT = "template"

CONTEXT_NAMES = frozenset({BODY_CONTEXT, TABLE_CONTEXT, HTML_CONTEXT, TEMPLATE_CONTEXT})

# Start tags that only parse correctly in the "in table" family of insertion modes
TABLE_CONSTRUCT_TAGS = [
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "td",
    "th",
    "colgroup",
    "col",
    "caption",
]

TABLE_CELL_TAGS = ["td", "th"]
TABLE_ROW_TAGS = ["tr"]
TABLE_COLUMN_TAGS = ["col"]

# Start tags that require the "before head" insertion mode of an html context
DOCUMENT_SKELETON_TAGS = [
    "head",
    "body",
]

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "embed",
        "frame",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Text children of these are serialized verbatim (title/textarea are RCDATA and stay escaped)
RAWTEXT_ELEMENTS = frozenset(
    {
        "style",
        "script",
        "xmp",
        "iframe",
        "noembed",
        "noframes",
        "plaintext",
    }
)

# Default number of leading characters inspected by the classifier and resolver
DEFAULT_SCAN_LIMIT = 1024
