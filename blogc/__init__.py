"""blogc static blog compiler.

This package compiles a list of Markdown articles into standalone HTML pages.
A JSON job file names one Jinja2 template and the articles to render; every
article is converted with mistune, substituted into the template and written
next to its source as ``<name>.html``.

The pipeline is strictly sequential and stops at the first failure:
load config -> compile template -> for each article: read, convert, render, write.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
