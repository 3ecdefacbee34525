"""Build a cross-linked static HTML site from a table of contents of Markdown files.

This package exposes the CLI entry points used by ``uv run tocsite`` to render
documentation sites whose structure comes from a YAML table of contents.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from tocsite import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
