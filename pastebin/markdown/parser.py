# pastebin/markdown/parser.py
"""
Pandoc passes of the Markdown pipeline.

``parse_markdown`` reads paste text into Pandoc's JSON AST and
``convert_tree`` writes that tree out as an HTML5 fragment. Pandoc never
rejects Markdown input: unclosed emphasis, broken tables and the like come back
as literal text. The only failures are environmental (no pandoc binary, a
crashed process) and surface as ``MarkdownConversionError``.
"""

import json
import logging

import pypandoc

from ..exceptions import MarkdownConversionError
from .config import get_pandoc_config

logger = logging.getLogger(__name__)


def _run_pandoc(source, to, format, extra_args):
    try:
        return pypandoc.convert_text(
            source,
            to=to,
            format=format,
            extra_args=extra_args,
        )
    except (OSError, RuntimeError) as exc:
        logger.error("Pandoc %s -> %s failed: %s", format, to, exc, exc_info=True)
        raise MarkdownConversionError(
            f"Pandoc could not convert {format} to {to}"
        ) from exc


def parse_markdown(text):
    """Parse Markdown text into a Pandoc JSON AST (a dict with ``blocks``)."""
    reader = get_pandoc_config()["reader"]
    output = _run_pandoc(text, "json", reader["format"], reader["extra_args"])

    try:
        tree = json.loads(output)
    except ValueError as exc:
        raise MarkdownConversionError("Pandoc returned an unreadable AST") from exc

    logger.debug("Parsed markdown into %s top-level blocks", len(tree.get("blocks", [])))
    return tree


def convert_tree(tree):
    """Convert a Pandoc JSON AST into an HTML5 fragment."""
    writer = get_pandoc_config()["writer"]
    return _run_pandoc(
        json.dumps(tree), writer["format"], "json", writer["extra_args"]
    )
