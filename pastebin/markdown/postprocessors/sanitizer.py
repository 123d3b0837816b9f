# pastebin/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach
from bleach.css_sanitizer import CSSSanitizer
from django.utils.html import escape

from ...conf import get_setting

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "del",  # ~~strikethrough~~
            "ins",
            "sup",  # footnote references
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            # links
            "a",
            # task lists
            "input",
            "label",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "role"],
        "a": ["href", "title", "rel"],
        "img": ["src", "alt", "title", "width", "height"],
        "code": ["class"],
        "pre": ["class"],
        # Pandoc writes column alignment as style="text-align: ..."
        "th": ["colspan", "rowspan", "scope", "style"],
        "td": ["colspan", "rowspan", "style"],
        "col": ["width"],
        "input": ["type", "checked", "disabled"],
        "ol": ["start", "type", "class"],
    }

    allowed_protocols = ["http", "https", "mailto"]

    css_sanitizer = CSSSanitizer(allowed_css_properties=["text-align"])

    return allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and should run before any other HTML modifications.

    Tags outside the allow-list (raw <script>, <iframe>, <style> written in the
    paste) are escaped into visible text rather than removed.
    """
    if not get_setting("SANITIZE_MARKDOWN"):
        logger.debug("Markdown sanitization disabled by settings")
        return html

    allowed_tags, allowed_attrs, allowed_protocols, css_sanitizer = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            css_sanitizer=css_sanitizer,
            strip=False,  # Escape disallowed tags instead of dropping them
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        # Unsanitized markup must not reach the page, show it as text instead
        return str(escape(html))
