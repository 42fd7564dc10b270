"""
Export of parsed documents to Markdown, plain text and HTML.

Exporters only read the document model: paragraph text, emphasis/strong
collections, headline, byline, dateline, abstract, block quotes and
footnotes.
"""

import html
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from nitf_text.models.document import Document
    from nitf_text.models.paragraph import Paragraph

DEFAULT_FOOTNOTE_LABEL = "*"
TEXT_RULE_WIDTH = 40


def escape_html(text) -> str:
    """Escape &, <, > and double quotes; None becomes ''."""
    if text is None:
        return ""
    return html.escape(str(text), quote=False).replace('"', "&quot;")


def _dateline(doc: "Document"):
    return doc.body.dateline if doc.body else None


def _abstract(doc: "Document"):
    return doc.body.abstract if doc.body else None


def _block_quotes(doc: "Document") -> List[str]:
    return doc.body.block_quotes if doc.body else []


def _byline_text(doc: "Document"):
    return doc.byline.text if doc.byline and doc.byline.text else None


# === Markdown ===

def format_paragraph_markdown(para: "Paragraph") -> str:
    text = para.text
    for em in para.emphasis:
        text = text.replace(em, f"*{em}*")
    for strong in para.strong:
        text = text.replace(strong, f"**{strong}**")
    return text


def to_markdown(doc: "Document") -> str:
    """
    Convert a document to Markdown.

    Example:
        >>> print(to_markdown(doc))
        # Revolutionary Technology Changes Industry
        <BLANKLINE>
        *By Jane Smith, Senior Technology Reporter*
        ...
    """
    lines: List[str] = []

    if doc.headline:
        lines += [f"# {doc.headline}", ""]

    byline = _byline_text(doc)
    if byline:
        lines += [f"*{byline}*", ""]

    if _dateline(doc):
        lines += [f"**{_dateline(doc)}**", ""]

    if _abstract(doc):
        lines += [f"> {_abstract(doc)}", ""]

    for para in doc.paragraphs:
        lines += [format_paragraph_markdown(para), ""]

    for quote in _block_quotes(doc):
        lines += [f"> {quote}", ""]

    if doc.footnotes:
        lines += ["---", ""]
        for fn in doc.footnotes:
            lines.append(f"[{fn.label or DEFAULT_FOOTNOTE_LABEL}]: {fn.value or ''}")
        lines.append("")

    return "\n".join(lines).strip()


# === Plain text ===

def to_text(doc: "Document") -> str:
    """Convert a document to plain text with an underlined, upper-cased headline."""
    lines: List[str] = []

    if doc.headline:
        lines += [doc.headline.upper(), "=" * len(doc.headline), ""]

    byline = _byline_text(doc)
    if byline:
        lines += [byline, ""]

    if _dateline(doc):
        lines += [_dateline(doc), ""]

    for para in doc.paragraphs:
        lines += [para.text, ""]

    for quote in _block_quotes(doc):
        lines += [f'  "{quote}"', ""]

    if doc.footnotes:
        lines += ["-" * TEXT_RULE_WIDTH, ""]
        for fn in doc.footnotes:
            lines.append(f"[{fn.label or DEFAULT_FOOTNOTE_LABEL}] {fn.value or ''}")
        lines.append("")

    return "\n".join(lines).strip()


# === HTML ===

def format_paragraph_html(para: "Paragraph") -> str:
    text = escape_html(para.text)

    for em in para.emphasis:
        escaped = escape_html(em)
        text = text.replace(escaped, f"<em>{escaped}</em>")
    for strong in para.strong:
        escaped = escape_html(strong)
        text = text.replace(escaped, f"<strong>{escaped}</strong>")

    # after re-marking, so inline text never matches inside <br>
    text = text.replace("\n", "<br>\n")

    class_attr = ' class="lead"' if para.is_lead else ""
    return f"    <p{class_attr}>{text}</p>"


def wrap_html(doc: "Document", content: str) -> str:
    title = escape_html(doc.title or doc.headline or "NITF Document")
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"  <title>{title}</title>\n"
        "</head>\n"
        "<body>\n"
        f"{content}\n"
        "</body>\n"
        "</html>\n"
    )


def to_html(doc: "Document", include_wrapper: bool = False) -> str:
    """
    Convert a document to an HTML <article>.

    Args:
        doc: Parsed document
        include_wrapper: Wrap the article in a complete HTML5 page

    Returns:
        HTML string; all document text is escaped
    """
    parts: List[str] = ["<article>", "  <header>"]

    if doc.headline:
        parts.append(f"    <h1>{escape_html(doc.headline)}</h1>")

    byline = _byline_text(doc)
    if byline:
        parts.append(f'    <p class="byline">{escape_html(byline)}</p>')

    if _dateline(doc):
        parts.append(f'    <p class="dateline">{escape_html(_dateline(doc))}</p>')

    parts.append("  </header>")

    if _abstract(doc):
        parts += [
            '  <aside class="abstract">',
            f"    <p>{escape_html(_abstract(doc))}</p>",
            "  </aside>",
        ]

    parts.append('  <section class="content">')
    parts += [format_paragraph_html(para) for para in doc.paragraphs]
    for quote in _block_quotes(doc):
        parts += [
            "    <blockquote>",
            f"      <p>{escape_html(quote)}</p>",
            "    </blockquote>",
        ]
    parts.append("  </section>")

    if doc.footnotes:
        parts += ['  <footer class="footnotes">', "    <ol>"]
        for fn in doc.footnotes:
            id_attr = f' id="{escape_html(fn.id)}"' if fn.id else ""
            parts.append(f"      <li{id_attr}>{escape_html(fn.value)}</li>")
        parts += ["    </ol>", "  </footer>"]

    parts.append("</article>")
    content = "\n".join(parts)

    return wrap_html(doc, content) if include_wrapper else content
