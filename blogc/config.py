"""Job configuration for blogc.

A job file is a UTF-8 JSON document:

    {
      "template": "layout.html",
      "articles": [
        {"source": "posts/hello.md", "title": "Hello", "publishedAt": "2024-01-01"}
      ]
    }

Missing fields are lenient: ``template`` defaults to an empty string,
``articles`` to an empty list and each article field to an empty string
(``null`` counts as missing). Fields that are present must have the right
type, otherwise loading fails with ``ErrorKind.CONFIG_INVALID``. Unknown keys
are ignored. Paths are used as given, so relative paths resolve against the
current working directory.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import BuildError, ErrorKind, format_error_message


@dataclass(frozen=True)
class Article:
    """One Markdown source plus its display metadata.

    Attributes:
        source: Path to the Markdown file.
        title: Free-form title string.
        published_at: Free-form publish date string.
    """

    source: str
    title: str
    published_at: str


@dataclass(frozen=True)
class BlogConfig:
    """One compilation job.

    Attributes:
        template: Path to the template shared by all articles.
        articles: Articles in the order they appear in the job file.
    """

    template: str
    articles: tuple[Article, ...] = ()


def load_config(path: Path | str) -> BlogConfig:
    """Load a job file into a BlogConfig.

    Args:
        path: Path to the JSON job file.

    Returns:
        Fully populated BlogConfig.

    Raises:
        BuildError: IO_FAILURE when the file cannot be read, CONFIG_INVALID
            when it is not JSON of the expected shape.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(
            ErrorKind.IO_FAILURE,
            config_path,
            f"failed to load blog config: {format_error_message(exc)}",
            exc,
        ) from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BuildError(
            ErrorKind.CONFIG_INVALID,
            config_path,
            f"failed to read blog config: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            exc,
        ) from exc

    return parse_config(payload, config_path)


def parse_config(payload: Any, config_path: Path | str = "<config>") -> BlogConfig:
    """Build a BlogConfig from decoded JSON.

    Args:
        payload: Decoded JSON value.
        config_path: Path reported in errors.

    Returns:
        BlogConfig with articles in payload order.
    """
    if not isinstance(payload, dict):
        raise _invalid(config_path, "top level must be an object")

    template = _string_field(payload, "template", "template", config_path)

    raw_articles = payload.get("articles")
    if raw_articles is None:
        raw_articles = []
    if not isinstance(raw_articles, list):
        raise _invalid(config_path, "'articles' must be an array")

    articles = []
    for index, item in enumerate(raw_articles):
        where = f"articles[{index}]"
        if not isinstance(item, dict):
            raise _invalid(config_path, f"'{where}' must be an object")
        articles.append(
            Article(
                source=_string_field(item, "source", f"{where}.source", config_path),
                title=_string_field(item, "title", f"{where}.title", config_path),
                published_at=_string_field(
                    item, "publishedAt", f"{where}.publishedAt", config_path
                ),
            )
        )
    return BlogConfig(template=template, articles=tuple(articles))


def _string_field(
    mapping: dict[str, Any], key: str, where: str, config_path: Path | str
) -> str:
    value = mapping.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _invalid(config_path, f"'{where}' must be a string")
    return value


def _invalid(config_path: Path | str, message: str) -> BuildError:
    return BuildError(
        ErrorKind.CONFIG_INVALID, config_path, f"failed to read blog config: {message}"
    )
