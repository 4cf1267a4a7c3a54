"""Template rendering engine for blogc.

This module uses Jinja2 to compile the job's template once and evaluate it
for every article. A template sees exactly three variables:

- ``title``: the article title, autoescaped.
- ``publishDate``: the article's publish date string, autoescaped.
- ``articleContent``: the Markdown-rendered fragment, wrapped in Markup and
  inserted unescaped.

Inserting ``articleContent`` as trusted HTML assumes article sources come
from the site's authors. Markdown from untrusted users would be an XSS risk.

Key classes:
- CompiledTemplate: Immutable compiled template shared by all articles.
- TemplateEngine: Compiles template files and evaluates them per article.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, Template, TemplateError
from markupsafe import Markup

from .config import Article
from .errors import BuildError, ErrorKind, format_error_message


@dataclass(frozen=True)
class CompiledTemplate:
    """A parsed template ready to be evaluated.

    Attributes:
        path: Path of the template file.
        template: Compiled Jinja2 template.
    """

    path: Path
    template: Template


def article_context(article: Article, fragment: str) -> dict[str, Any]:
    """Build the variable bindings for one article.

    Args:
        article: Article being rendered.
        fragment: HTML fragment rendered from the article's Markdown.

    Returns:
        Mapping of template variable names to values.
    """
    return {
        "title": article.title,
        # Trusted-author HTML, never escaped.
        "articleContent": Markup(fragment),
        "publishDate": article.published_at,
    }


class TemplateEngine:
    """Template engine using Jinja2.

    Undefined variables raise instead of rendering empty, and output keeps
    the template's trailing newline so pages match the template byte for byte
    outside the substitution points.

    Attributes:
        env: Jinja2 environment.
    """

    def __init__(self):
        """Initialize the template engine."""
        self.env = Environment(
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            enable_async=False,
        )

    def compile(self, path: Path | str) -> CompiledTemplate:
        """Read and parse a template file.

        Args:
            path: Path to the template file.

        Returns:
            CompiledTemplate wrapping the parsed template.

        Raises:
            BuildError: IO_FAILURE if the file cannot be read,
                TEMPLATE_FAILURE if it does not parse.
        """
        template_path = Path(path)
        if not str(path):
            raise BuildError(ErrorKind.IO_FAILURE, None, "no template configured")
        try:
            source = template_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise BuildError(
                ErrorKind.IO_FAILURE,
                template_path,
                f"failed to read template: {format_error_message(exc)}",
                exc,
            ) from exc
        try:
            template = self.env.from_string(source)
        except TemplateError as exc:
            raise BuildError(
                ErrorKind.TEMPLATE_FAILURE,
                template_path,
                f"failed to parse template: {format_error_message(exc)}",
                exc,
            ) from exc
        return CompiledTemplate(path=template_path, template=template)

    def render(self, compiled: CompiledTemplate, context: dict[str, Any]) -> str:
        """Evaluate a compiled template.

        Args:
            compiled: Template to evaluate.
            context: Variables to make available in the template.

        Returns:
            Rendered string.

        Raises:
            BuildError: TEMPLATE_FAILURE if evaluation fails.
        """
        try:
            return compiled.template.render(**context)
        except Exception as exc:
            raise BuildError(
                ErrorKind.TEMPLATE_FAILURE,
                compiled.path,
                f"failed to render template: {format_error_message(exc)}",
                exc,
            ) from exc
