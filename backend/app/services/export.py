"""
Export helpers for stored procedures.

Markdown download gets the content verbatim. The print view hides the
leading H1 (it is shown in the header table instead), renders the rest
of the Markdown to HTML and adds the metadata header block.
"""

import re
from typing import Any

from markdown_it import MarkdownIt

from app.models.sop import SopRecord

LEADING_HEADING_PATTERN = re.compile(r"^#\s+.+\n")
WHITESPACE_PATTERN = re.compile(r"\s+")
REVISION = "1.0"
MISSING_VALUE = "N/A"

# Generated text is untrusted: raw HTML in it is escaped, not passed through
_markdown = MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])


def markdown_filename(record: SopRecord) -> str:
    return WHITESPACE_PATTERN.sub("_", record.title) + "_SOP.md"


def display_body(content: str) -> str:
    """Content without its first-line H1."""
    return LEADING_HEADING_PATTERN.sub("", content, count=1)


def render_body(content: str) -> str:
    """HTML for the print view: display_body() rendered as Markdown."""
    return _markdown.render(display_body(content))


def short_id(record: SopRecord) -> str:
    return record.id[:6].upper()


def format_date(record: SopRecord) -> str:
    return record.created_at.strftime("%d/%m/%Y")


def print_context(record: SopRecord) -> dict[str, Any]:
    """Template variables for templates/sop_print.html."""
    return {
        "title": record.title.replace("**", ""),
        "short_id": short_id(record),
        "revision": REVISION,
        "date": format_date(record),
        "brand": record.brand or MISSING_VALUE,
        "model": record.model or MISSING_VALUE,
        "doc_type": record.type.label,
        "specs": record.specs,
        "body_html": render_body(record.content),
    }
