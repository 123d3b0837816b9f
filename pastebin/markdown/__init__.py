from .metadata import DocumentMetadata, extract_metadata, flatten_text
from .renderer import render_markdown

__all__ = ("DocumentMetadata", "extract_metadata", "flatten_text", "render_markdown")
