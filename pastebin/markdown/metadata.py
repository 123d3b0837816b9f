"""
Title and description extraction for Markdown pastes.

Works on Pandoc's JSON AST. Only the first one or two top-level blocks are
looked at:

- a leading level-1 heading becomes the title, and the block after it the
  description;
- otherwise the title stays the placeholder and the first block is the
  description.

Descriptions are cut to ``PASTEBIN_MARKDOWN_DESCRIPTION_LIMIT`` characters with
no ellipsis. Values are plain text; escaping happens in the page template.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from ..conf import get_setting

# Leaves whose second payload item is literal text: [attr|format, text]
_LITERAL_NODES = {"Code", "CodeBlock", "Math", "RawInline", "RawBlock"}

_BREAK_TEXT = {
    "Space": " ",
    "SoftBreak": "\n",
    "LineBreak": "",
}

# Footnote bodies are not part of the text they are attached to
_SKIPPED_NODES = {"Note"}

# Checkbox glyphs the gfm reader puts in front of task list items
_TASK_MARKERS = {"\u2610", "\u2612"}


class DocumentMetadata(NamedTuple):
    title: str
    description: str


def _without_task_marker(item: list) -> list:
    """Drop the synthetic checkbox and its Space from a task list item."""
    if not item or item[0].get("t") not in ("Plain", "Para"):
        return item
    inlines = item[0]["c"]
    if (
        len(inlines) >= 2
        and inlines[0].get("t") == "Str"
        and inlines[0]["c"] in _TASK_MARKERS
        and inlines[1].get("t") == "Space"
    ):
        return [{"t": item[0]["t"], "c": inlines[2:]}] + item[1:]
    return item


def flatten_text(node: Any) -> str:
    """
    Concatenate every text leaf under a Pandoc AST node.

    Accepts a single node, a list of nodes or any nesting of the two. Bare
    strings in a node's payload (identifiers, classes, link targets) are
    structure, not text, and are skipped.
    """
    parts: list[str] = []
    # Explicit stack, deeply nested lists and quotes must not hit the recursion limit
    stack: list[Any] = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, list):
            stack.extend(reversed(current))
            continue
        if not isinstance(current, dict):
            continue

        kind = current.get("t")
        if kind == "Str":
            parts.append(current["c"])
        elif kind == "RawBlock":
            parts.append(current["c"][1].rstrip("\n"))
        elif kind in _LITERAL_NODES:
            parts.append(current["c"][1])
        elif kind in _BREAK_TEXT:
            parts.append(_BREAK_TEXT[kind])
        elif kind in _SKIPPED_NODES:
            continue
        elif kind == "BulletList":
            stack.append([_without_task_marker(item) for item in current["c"]])
        elif kind == "OrderedList":
            stack.append([_without_task_marker(item) for item in current["c"][1]])
        elif "c" in current:
            stack.append(current["c"])

    return "".join(parts)


def _is_title_heading(block: dict) -> bool:
    return block.get("t") == "Header" and block["c"][0] == 1


def _describe(block: dict, limit: int) -> str:
    return flatten_text(block)[:limit]


def extract_metadata(tree: dict) -> DocumentMetadata:
    """Return the title and description of a parsed Markdown document."""
    title = get_setting("MARKDOWN_DEFAULT_TITLE")
    description = ""
    limit = get_setting("MARKDOWN_DESCRIPTION_LIMIT")

    blocks = tree.get("blocks") or []
    if not blocks:
        return DocumentMetadata(title, description)

    first = blocks[0]
    if _is_title_heading(first):
        title = flatten_text(first)
        if len(blocks) > 1:
            description = _describe(blocks[1], limit)
    else:
        description = _describe(first, limit)

    return DocumentMetadata(title, description)
