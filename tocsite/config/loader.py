"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from tocsite.toc.parser import load_toc, parse

from .helpers import (
    _build_theme_config,
    _normalize_suffix,
    _optional_str,
    _resolve_dir,
)
from .models import SiteConfig, SiteConfigError

if typ.TYPE_CHECKING:
    from tocsite.toc.models import TocTree


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing one documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the site configuration (for example,
        ``site.yaml``). Relative directories inside it resolve against the
        file's parent directory.

    Returns
    -------
    SiteConfig
        Parsed configuration including the TOC tree, source and output
        directories, and theme text.

    Raises
    ------
    FileNotFoundError
        If the configuration file, or a TOC file it references, does not exist.
    SiteConfigError
        If the YAML cannot be parsed, its top level is not a mapping, or
        required fields are missing or invalid (for example, no ``toc``).
    MalformedToc
        If the TOC does not describe leaves and sections.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tocsite.config import load_site_config
    >>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> config.output_dir  # doctest: +SKIP
    PosixPath('public')
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Configuration file '{path}' is not valid YAML: {exc}"
        raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    return SiteConfig(
        toc=_load_toc_setting(raw.get("toc"), base_dir),
        source_dir=_resolve_dir(base_dir, raw.get("source_dir"), "docs"),
        output_dir=_resolve_dir(base_dir, raw.get("output_dir"), "public"),
        theme=_build_theme_config(raw),
        pygments_style=_optional_str(raw.get("pygments_style")) or "monokai",
        source_suffix=_normalize_suffix(raw.get("source_suffix")),
    )


def _load_toc_setting(value: object, base_dir: Path) -> TocTree:
    """Return the TOC from an inline definition or a referenced YAML file."""
    match value:
        case None:
            msg = "Site configuration is missing a 'toc' entry."
            raise SiteConfigError(msg)
        case str() as location:
            toc_path = Path(location).expanduser()
            if not toc_path.is_absolute():
                toc_path = base_dir / toc_path
            return load_toc(toc_path)
        case _:
            return parse(value)


__all__ = ["load_site_config"]
