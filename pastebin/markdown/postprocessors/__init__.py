# pastebin/markdown/postprocessors/__init__.py

from bs4 import BeautifulSoup

from .code_language import code_language_classes
from .external_links import external_link_rel
from .sanitizer import sanitize_html

# Run on the HTML string, before it is parsed
POSTPROCESSORS = [
    sanitize_html,  # Must run first, everything after works on clean markup
]

# Run on one shared BeautifulSoup tree, mutating it in place
SOUP_POSTPROCESSORS = [
    code_language_classes,  # Move Pandoc's code block language onto <code> for Prism
    external_link_rel,  # Paste links are untrusted
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order, parsing the sanitized HTML once."""
    for processor in POSTPROCESSORS:
        html = processor(html, context)

    soup = BeautifulSoup(html, "html.parser")
    for processor in SOUP_POSTPROCESSORS:
        processor(soup, context)
    return str(soup)
