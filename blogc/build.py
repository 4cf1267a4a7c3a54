"""Blog building functionality for blogc.

This module contains the pipeline that turns a BlogConfig into HTML pages.
The template is compiled once, then every article is read, converted from
Markdown, rendered into the template and written next to its source, strictly
in config order. The first failure raises BuildError and stops the run; pages
already written stay on disk.

Key functions:
- compile_blog: Render and write every article of a config.
- render_article: Render one article to bytes.
- write_article: Write rendered bytes to the article's output path.
- output_path_for: Derive ``<source without extension>.html``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import click

from .config import Article, BlogConfig
from .errors import BuildError, ErrorKind, format_error_message
from .renderers import MarkdownRenderer
from .templates import CompiledTemplate, TemplateEngine, article_context


@dataclass
class BuildResult:
    """Result of a blog build.

    Attributes:
        config: The config that was compiled.
        outputs: Paths written, in article order.
    """

    config: BlogConfig
    outputs: list[Path] = field(default_factory=list)


def output_path_for(source: str) -> Path:
    """Return the output path for an article source.

    Everything from the last dot of the file name is replaced with
    ``.html``, so dotfiles and trailing dots lose their suffix too. A name
    without a dot gets ``.html`` appended.

    Examples:
        >>> output_path_for("posts/hello.md").as_posix()
        'posts/hello.html'
        >>> output_path_for("notes/README").as_posix()
        'notes/README.html'
    """
    path = Path(source)
    name = path.name
    dot = name.rfind(".")
    if dot != -1:
        name = name[:dot]
    return path.with_name(f"{name}.html")


def read_article(article: Article) -> bytes:
    """Read an article's Markdown source as raw bytes."""
    click.echo(f"- loading article from {article.source}", err=True)
    if not article.source:
        raise BuildError(ErrorKind.IO_FAILURE, None, "article has no source path")
    try:
        return Path(article.source).read_bytes()
    except OSError as exc:
        raise BuildError(
            ErrorKind.IO_FAILURE,
            article.source,
            f"failed to read article contents: {format_error_message(exc)}",
            exc,
        ) from exc


def render_article(
    article: Article,
    template: CompiledTemplate,
    engine: TemplateEngine | None = None,
    renderer: MarkdownRenderer | None = None,
) -> bytes:
    """Render one article into its final page.

    Args:
        article: Article to render.
        template: Compiled template shared by all articles.
        engine: Engine used to evaluate the template.
        renderer: Markdown renderer.

    Returns:
        Rendered page as UTF-8 bytes.
    """
    engine = engine or TemplateEngine()
    renderer = renderer or MarkdownRenderer()
    fragment = renderer.render(read_article(article))
    rendered = engine.render(template, article_context(article, fragment))
    return rendered.encode("utf-8")


def write_article(article: Article, content: bytes) -> Path:
    """Write a rendered page next to its source, overwriting any existing file.

    Args:
        article: Article the page was rendered from.
        content: Rendered page bytes.

    Returns:
        Path that was written.
    """
    target = output_path_for(article.source)
    try:
        target.write_bytes(content)
    except OSError as exc:
        raise BuildError(
            ErrorKind.IO_FAILURE,
            target,
            f"failed to write page: {format_error_message(exc)}",
            exc,
        ) from exc
    return target


def compile_blog(
    config: BlogConfig,
    engine: TemplateEngine | None = None,
    renderer: MarkdownRenderer | None = None,
) -> BuildResult:
    """Render and write every article in a config.

    Args:
        config: Loaded job configuration.
        engine: Optional template engine.
        renderer: Optional Markdown renderer.

    Returns:
        BuildResult listing the written pages in order.

    Raises:
        BuildError: On the first failure of any step.
    """
    engine = engine or TemplateEngine()
    renderer = renderer or MarkdownRenderer()
    template = engine.compile(config.template)

    result = BuildResult(config=config)
    for article in config.articles:
        content = render_article(article, template, engine, renderer)
        result.outputs.append(write_article(article, content))
    return result
