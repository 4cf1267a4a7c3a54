"""Error types for blogc.

Every failure in the pipeline is reported as a BuildError tagged with an
ErrorKind. All kinds are fatal: components raise, nothing retries, and only
the CLI turns the error into a message and a non-zero exit status.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Category of a build failure."""

    CONFIG_INVALID = "config invalid"
    IO_FAILURE = "I/O failure"
    TEMPLATE_FAILURE = "template failure"


class BuildError(Exception):
    """Error during a blog build with file context.

    Attributes:
        kind: Category of the failure.
        source_path: Path to the file that caused the error, or None when
            there is no path to report.
        message: Human-readable error message.
        original_error: The original exception that was caught.
    """

    def __init__(
        self,
        kind: ErrorKind,
        source_path: Path | str | None,
        message: str,
        original_error: Exception | None = None,
    ):
        self.kind = kind
        self.source_path = Path(source_path) if source_path else None
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_path or '<none>'}: {message}")


def format_error_message(exc: Exception) -> str:
    """Format an exception into a user-friendly error message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    error_type = type(exc).__name__

    if error_type == "UndefinedError":
        return f"Undefined variable: {exc}"
    if error_type == "TemplateSyntaxError":
        return f"Template syntax error on line {exc.lineno}: {exc.message}"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    if isinstance(exc, UnicodeDecodeError):
        return f"Not valid UTF-8: {exc.reason}"

    return f"{error_type}: {exc}"
