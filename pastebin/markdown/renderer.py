# pastebin/markdown/renderer.py

import logging

from django.template.loader import render_to_string
from django.utils.safestring import mark_safe

from ..conf import get_setting
from .metadata import extract_metadata
from .parser import convert_tree, parse_markdown
from .postprocessors import apply_postprocessors

logger = logging.getLogger(__name__)


def render_markdown(text, context=None):
    """
    Render a Markdown paste as a standalone HTML page.

    Pipeline: parse into a Pandoc AST, read title/description from it,
    convert the same tree to HTML, run the postprocessors, fill the page
    template.

    Args:
        text: Raw markdown text
        context: Optional dict handed to every postprocessor
    """
    # Postprocessors may write to the context, keep the caller's dict clean
    context = dict(context or {})

    tree = parse_markdown(text)
    metadata = extract_metadata(tree)
    logger.debug(
        "Markdown metadata: title=%r, description length=%s",
        metadata.title,
        len(metadata.description),
    )

    html = convert_tree(tree)
    html = apply_postprocessors(html, context)

    return render_to_string(
        "pastebin/markdown.html",
        {
            "title": metadata.title,
            "description": metadata.description,
            # Sanitized by the postprocessors
            "body": mark_safe(html),
            "stylesheet": get_setting("MARKDOWN_STYLESHEET"),
            "mathjax": get_setting("MATHJAX_SCRIPT"),
            "prism": get_setting("PRISM_MARKDOWN_ASSETS"),
        },
    )
