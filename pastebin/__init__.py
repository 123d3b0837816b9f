from .highlight import render_highlight
from .markdown import render_markdown

__all__ = ("render_highlight", "render_markdown")
