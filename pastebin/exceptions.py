# pastebin/exceptions.py
"""
Exceptions raised by the paste renderers.

User content never triggers these: malformed Markdown degrades to literal
text. They signal a broken environment, such as a missing Pandoc binary.
"""


class PastebinError(Exception):
    """Base class for paste rendering failures."""


class MarkdownConversionError(PastebinError):
    """Pandoc could not be run, or returned output we cannot read."""
