"""
Management command to render a paste file as a standalone HTML page.

Code files go through the highlight page, Markdown files (``.md``,
``.markdown`` or ``--markdown``) through the Markdown page. Useful for
previewing how a paste will look without a serving layer.
"""

import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from pastebin.exceptions import PastebinError
from pastebin.highlight import render_highlight
from pastebin.markdown import render_markdown

MARKDOWN_SUFFIXES = {'.md', '.markdown'}
DEFAULT_LANGUAGE = 'plaintext'


class Command(BaseCommand):
    help = 'Render a paste file as a standalone HTML page'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help="Paste file to render, or '-' to read from stdin",
        )
        mode = parser.add_mutually_exclusive_group()
        mode.add_argument(
            '--language',
            type=str,
            help='Language for the highlight page (default: from the file extension)',
        )
        mode.add_argument(
            '--markdown',
            action='store_true',
            help='Render the paste as a Markdown document',
        )
        parser.add_argument(
            '--output',
            '-o',
            type=str,
            help='Write the page to this file instead of stdout',
        )

    def handle(self, *args, **options):
        path = options['path']
        language = options.get('language')
        output = options.get('output')

        content = self._read_paste(path)
        suffix = '' if path == '-' else Path(path).suffix.lower()

        try:
            if options.get('markdown') or (not language and suffix in MARKDOWN_SUFFIXES):
                page = render_markdown(content)
            else:
                page = render_highlight(content, language or suffix.lstrip('.') or DEFAULT_LANGUAGE)
        except PastebinError as e:
            raise CommandError(f'Could not render {path}: {e}') from e

        if output:
            Path(output).write_text(page, encoding='utf-8')
            self.stdout.write(
                self.style.SUCCESS(f'Wrote {len(page)} characters to {output}')
            )
        else:
            self.stdout.write(page, ending='')

    def _read_paste(self, path):
        if path == '-':
            return sys.stdin.read()

        try:
            return Path(path).read_text(encoding='utf-8')
        except FileNotFoundError as e:
            raise CommandError(f'Paste file not found: {path}') from e
        except UnicodeDecodeError as e:
            raise CommandError(f'Paste file is not UTF-8 text: {path}') from e
