from ..conf import get_setting


def get_pandoc_config():
    """
    Configuration for the two Pandoc passes of the Markdown pipeline.

    The reader pass turns paste text into Pandoc's JSON AST so metadata can be
    read from the document structure; the writer pass turns that same tree
    into an HTML5 fragment. No standalone template is requested from Pandoc,
    the page itself comes from ``pastebin/markdown.html``.
    """
    return {
        "reader": {
            "format": get_setting("MARKDOWN_FORMAT"),
            "extra_args": [],
        },
        "writer": {
            "format": "html5",
            "extra_args": list(get_setting("PANDOC_EXTRA_ARGS")),
        },
    }
