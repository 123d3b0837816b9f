"""Tests for title/description extraction on Pandoc ASTs."""

import pytest
from django.test import override_settings

from pastebin.markdown import DocumentMetadata, extract_metadata, flatten_text
from pastebin.markdown.parser import parse_markdown


def _str(text: str) -> dict:
    return {"t": "Str", "c": text}


def _words(text: str) -> list[dict]:
    inlines: list[dict] = []
    for i, word in enumerate(text.split(" ")):
        if i:
            inlines.append({"t": "Space"})
        inlines.append(_str(word))
    return inlines


def _header(level: int, text: str) -> dict:
    return {"t": "Header", "c": [level, ["slug", ["cls"], [["k", "v"]]], _words(text)]}


def _para(text: str) -> dict:
    return {"t": "Para", "c": _words(text)}


def _doc(*blocks: dict) -> dict:
    return {"pandoc-api-version": [1, 23, 1], "meta": {}, "blocks": list(blocks)}


class TestFlattenText:
    def test_joins_words_with_spaces(self) -> None:
        assert flatten_text(_para("Hello brave world")) == "Hello brave world"

    def test_ignores_attributes(self) -> None:
        assert flatten_text(_header(2, "Section")) == "Section"

    def test_link_text_without_target(self) -> None:
        link = {
            "t": "Link",
            "c": [["", [], []], [_str("docs")], ["https://example.com", "title"]],
        }
        assert flatten_text({"t": "Para", "c": [_str("see"), {"t": "Space"}, link]}) == "see docs"

    def test_literal_nodes(self) -> None:
        inlines = [
            {"t": "Code", "c": [["", [], []], "x = 1"]},
            {"t": "Space"},
            {"t": "Math", "c": [{"t": "InlineMath"}, "a^2"]},
            {"t": "Space"},
            {"t": "RawInline", "c": ["html", "<b>"]},
        ]
        assert flatten_text({"t": "Para", "c": inlines}) == "x = 1 a^2 <b>"

    def test_code_block(self) -> None:
        block = {"t": "CodeBlock", "c": [["", ["python"], []], "print(1)\nprint(2)"]}
        assert flatten_text(block) == "print(1)\nprint(2)"

    def test_breaks(self) -> None:
        inlines = [_str("a"), {"t": "SoftBreak"}, _str("b"), {"t": "LineBreak"}, _str("c")]
        assert flatten_text({"t": "Para", "c": inlines}) == "a\nbc"

    def test_skips_footnote_bodies(self) -> None:
        note = {"t": "Note", "c": [_para("footnote body")]}
        assert flatten_text({"t": "Para", "c": [_str("text"), note]}) == "text"

    def test_nested_lists(self) -> None:
        bullet = {
            "t": "BulletList",
            "c": [[{"t": "Plain", "c": [_str("one")]}], [{"t": "Plain", "c": [_str("two")]}]],
        }
        assert flatten_text(bullet) == "onetwo"

    def test_emphasis_and_strikeout(self) -> None:
        inlines = [
            {"t": "Emph", "c": [_str("em")]},
            {"t": "Strikeout", "c": [_str("gone")]},
            {"t": "Strong", "c": [_str("bold")]},
        ]
        assert flatten_text({"t": "Para", "c": inlines}) == "emgonebold"

    def test_deep_nesting(self) -> None:
        node: dict = _para("core")
        for _ in range(5000):
            node = {"t": "BlockQuote", "c": [node]}
        assert flatten_text(node) == "core"

    def test_nodes_without_payload(self) -> None:
        assert flatten_text({"t": "HorizontalRule"}) == ""
        assert flatten_text([]) == ""


class TestExtractMetadata:
    def test_empty_document(self) -> None:
        assert extract_metadata(_doc()) == DocumentMetadata("Untitled", "")

    def test_heading_and_paragraph(self) -> None:
        metadata = extract_metadata(_doc(_header(1, "Hello"), _para("World")))
        assert metadata.title == "Hello"
        assert metadata.description == "World"

    def test_heading_only(self) -> None:
        assert extract_metadata(_doc(_header(1, "Only title"))) == DocumentMetadata("Only title", "")

    def test_paragraph_first(self) -> None:
        metadata = extract_metadata(_doc(_para("Just a paragraph"), _para("ignored")))
        assert metadata == DocumentMetadata("Untitled", "Just a paragraph")

    def test_second_level_heading_is_description(self) -> None:
        metadata = extract_metadata(_doc(_header(2, "Not a title"), _para("body")))
        assert metadata == DocumentMetadata("Untitled", "Not a title")

    def test_only_two_blocks_considered(self) -> None:
        metadata = extract_metadata(_doc(_header(1, "T"), _para("first"), _para("second")))
        assert metadata.description == "first"

    def test_description_truncated_without_ellipsis(self) -> None:
        metadata = extract_metadata(_doc(_para("a" * 1000)))
        assert metadata.description == "a" * 200

    def test_description_after_title_truncated(self) -> None:
        metadata = extract_metadata(_doc(_header(1, "T"), _para("word " * 300)))
        assert len(metadata.description) == 200
        assert metadata.description.startswith("word word")

    def test_title_not_truncated(self) -> None:
        metadata = extract_metadata(_doc(_header(1, "t" * 500)))
        assert metadata.title == "t" * 500

    def test_values_are_not_escaped(self) -> None:
        heading = {"t": "Header", "c": [1, ["", [], []], [{"t": "RawInline", "c": ["html", "<script>"]}]]}
        assert extract_metadata(_doc(heading)).title == "<script>"

    def test_limit_and_placeholder_from_settings(self) -> None:
        with override_settings(
            PASTEBIN_MARKDOWN_DESCRIPTION_LIMIT=5,
            PASTEBIN_MARKDOWN_DEFAULT_TITLE="Paste",
        ):
            metadata = extract_metadata(_doc(_para("abcdefgh")))
        assert metadata == DocumentMetadata("Paste", "abcde")


@pytest.mark.usefixtures("pandoc")
class TestFlattenParsedMarkdown:
    """Text that Pandoc's gfm reader invents must not reach the description."""

    def test_task_list_markers_dropped(self) -> None:
        tree = parse_markdown("- [ ] task\n- [x] done")
        assert extract_metadata(tree).description == "taskdone"

    def test_literal_checkbox_in_paragraph_kept(self) -> None:
        tree = parse_markdown("☐ not a task")
        assert extract_metadata(tree).description == "☐ not a task"

    def test_raw_block_without_trailing_newline(self) -> None:
        tree = parse_markdown("<div>raw</div>\n\nnext")
        assert extract_metadata(tree).description == "<div>raw</div>"

    def test_emoji_shortcode_kept(self) -> None:
        tree = parse_markdown(":smile: hi")
        assert extract_metadata(tree).description == ":smile: hi"


class TestTaskMarkersInAst:
    def test_bullet_item_marker(self) -> None:
        item = [{"t": "Plain", "c": [_str("☒"), {"t": "Space"}, _str("done")]}]
        assert flatten_text({"t": "BulletList", "c": [item]}) == "done"

    def test_ordered_item_marker(self) -> None:
        items = [
            [{"t": "Plain", "c": [_str("☐"), {"t": "Space"}, _str("first")]}],
            [{"t": "Plain", "c": [_str("second")]}],
        ]
        ordered = {"t": "OrderedList", "c": [[1, {"t": "Decimal"}, {"t": "Period"}], items]}
        assert flatten_text(ordered) == "firstsecond"

    def test_marker_without_space_kept(self) -> None:
        item = [{"t": "Plain", "c": [_str("☐")]}]
        assert flatten_text({"t": "BulletList", "c": [item]}) == "☐"

    def test_raw_block_trailing_newlines(self) -> None:
        assert flatten_text({"t": "RawBlock", "c": ["html", "<hr>\n\n"]}) == "<hr>"
