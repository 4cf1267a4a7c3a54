"""Markdown rendering for blogc.

Articles are converted with mistune's default CommonMark renderer and no
plugins. Raw HTML inside the Markdown is passed through untouched, so the
resulting fragment is only as safe as the article source it came from.

Key classes:
- MarkdownRenderer: Renders Markdown source to an HTML fragment.
"""

from __future__ import annotations

import mistune


class MarkdownRenderer:
    """Renders Markdown content to an HTML fragment.

    The mistune parser is built once and reused for every article; it keeps
    no state between calls.
    """

    def __init__(self):
        """Initialize the renderer."""
        self._markdown = mistune.create_markdown(
            renderer=mistune.HTMLRenderer(escape=False)
        )

    def render(self, source: bytes | str) -> str:
        """Render Markdown source to HTML.

        Args:
            source: Markdown source, raw bytes are decoded as UTF-8 with
                undecodable bytes replaced.

        Returns:
            Rendered HTML fragment.
        """
        if isinstance(source, bytes):
            source = source.decode("utf-8", errors="replace")
        return self._markdown(source)
