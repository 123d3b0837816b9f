# pastebin/highlight.py

import logging

from django.template.loader import render_to_string

from .conf import get_setting

logger = logging.getLogger(__name__)


def render_highlight(content, language):
    """
    Wrap a code paste in a page that Prism highlights in the browser.

    Both ``content`` and ``language`` go through template autoescaping, so
    ``&``, ``<``, ``>``, ``"`` and ``'`` never reach the page unescaped. The
    code element carries ``language-<language>``, the class Prism's autoloader
    keys on.
    """
    logger.debug(
        "Rendering highlight page: language=%r, length=%s", language, len(content)
    )
    return render_to_string(
        "pastebin/highlight.html",
        {
            "title": get_setting("HIGHLIGHT_TITLE"),
            "content": content,
            "language": language,
            "prism": get_setting("PRISM_HIGHLIGHT_ASSETS"),
        },
    )
