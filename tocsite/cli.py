"""Cyclopts CLI entrypoint for building tocsite static documentation.

The ``tocsite`` console script defined here reads ``site.yaml``, renders every
document listed in its table of contents, and writes a cross-linked HTML site.
Typical usage involves running ``tocsite generate`` locally or in CI.

Examples
--------
Generate the site described by ``site.yaml`` in the current directory:

>>> from tocsite.cli import main
>>> main()  # doctest: +SKIP

Write the output somewhere else:

>>> from tocsite.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILENAME
from .config import load_site_config
from .errors import TocSiteError
from .generator import SiteGenerator

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)

app = App(name="tocsite", config=cyclopts.config.Env("TOCSITE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the static HTML site from Markdown sources.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="TOCSITE_CONFIG")
    ] = DEFAULT_CONFIG,
    source_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the Markdown source folder"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder"),
    ] = None,
) -> None:
    """Generate every page listed in the site's table of contents.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``TOCSITE_CONFIG``).
    source_dir : Path or None, optional
        Override the directory holding Markdown sources.
    output_dir : Path or None, optional
        Override the directory receiving generated HTML.

    Returns
    -------
    None
        Writes rendered pages and assets, then logs the generated paths.

    Raises
    ------
    SystemExit
        With status ``1`` when configuration loading or generation fails.
    """
    try:
        site_config = load_site_config(config).with_overrides(
            source_dir=source_dir, output_dir=output_dir
        )
        written = SiteGenerator(site_config).run()
    except (TocSiteError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `tocsite` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
