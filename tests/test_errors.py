from pathlib import Path

import pytest
from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError

from blogc.errors import BuildError, ErrorKind, format_error_message


def test_build_error_carries_context():
    cause = FileNotFoundError(2, "No such file or directory")
    error = BuildError(ErrorKind.IO_FAILURE, "posts/a.md", "failed to read", cause)
    assert error.kind is ErrorKind.IO_FAILURE
    assert error.source_path == Path("posts/a.md")
    assert error.message == "failed to read"
    assert error.original_error is cause
    assert str(error) == "posts/a.md: failed to read"


def test_format_error_message_variants():
    with pytest.raises(UndefinedError) as undefined:
        Environment(undefined=StrictUndefined).from_string("{{ missing }}").render()
    assert format_error_message(undefined.value) == "Undefined variable: 'missing' is undefined"

    with pytest.raises(TemplateSyntaxError) as syntax:
        Environment().from_string("\n{% if %}")
    assert format_error_message(syntax.value).startswith("Template syntax error on line 2:")

    assert format_error_message(PermissionError(13, "Permission denied")) == "Permission denied"
    assert format_error_message(ValueError("boom")) == "ValueError: boom"
