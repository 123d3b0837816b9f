# pastebin/conf.py
"""
Settings for the paste renderers.

Every value can be overridden from Django settings with a ``PASTEBIN_`` prefix,
e.g. ``PASTEBIN_MARKDOWN_DESCRIPTION_LIMIT = 160``. CDN URLs and version pins
are part of the rendered output, so they live here rather than in templates.
"""

from django.conf import settings

PRISM_CDN = "https://cdn.jsdelivr.net/npm/prismjs"

DEFAULTS = {
    "HIGHLIGHT_TITLE": "Yet another pastebin",
    "MARKDOWN_DEFAULT_TITLE": "Untitled",
    "MARKDOWN_DESCRIPTION_LIMIT": 200,
    "PRISM_HIGHLIGHT_ASSETS": {
        "theme": f"{PRISM_CDN}@1.23.0/themes/prism-tomorrow.css",
        "core": f"{PRISM_CDN}@1.23.0/components/prism-core.min.js",
        "autoloader": f"{PRISM_CDN}@1.23.0/plugins/autoloader/prism-autoloader.min.js",
    },
    "PRISM_MARKDOWN_ASSETS": {
        "core": f"{PRISM_CDN}@1.29.0/components/prism-core.min.js",
        "autoloader": f"{PRISM_CDN}@1.29.0/plugins/autoloader/prism-autoloader.min.js",
    },
    "MARKDOWN_STYLESHEET": {
        "href": "https://cdnjs.cloudflare.com/ajax/libs/github-markdown-css/5.5.1/github-markdown.css",
        "integrity": "sha512-LX/J+iRwkfRqaipVsfmi2B1S7xrqXNHdTb6o4tWe2Ex+//EN3ifknyLIbX5f+kC31zEKHon5l9HDEwTQR1H8cg==",
    },
    "MATHJAX_SCRIPT": "https://cdn.jsdelivr.net/npm/mathjax@4.0.0-beta.3/tex-mml-chtml.js",
    # Pandoc reader; gfm brings tables, strikethrough, autolinks and task lists.
    # Emoji shortcodes stay as typed, Pandoc would swap in the glyph
    "MARKDOWN_FORMAT": "gfm-emoji",
    "PANDOC_EXTRA_ARGS": [
        # Math is typeset client-side by MathJax
        "--mathjax",
        # Prism highlights in the browser, keep code blocks as plain text
        "--syntax-highlighting=none",
        "--wrap=preserve",
    ],
    "SANITIZE_MARKDOWN": True,
}


def get_setting(name):
    """
    Return the ``PASTEBIN_<name>`` setting, falling back to the default.

    Unconfigured settings (the renderers used outside a Django project) read
    the defaults.
    """
    default = DEFAULTS[name]
    if not settings.configured:
        return default
    return getattr(settings, f"PASTEBIN_{name}", default)
