"""Load and validate site configuration YAML for tocsite builds.

This subpackage parses the project's ``site.yaml`` file, resolves the source
and output directories relative to it, loads the table of contents (inline or
from a separate file), and produces a :class:`SiteConfig` that the generator
consumes. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from tocsite.config import load_site_config
>>> site = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> site.theme.site_name  # doctest: +SKIP
'Documentation'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError, ThemeConfig

__all__ = ["SiteConfig", "SiteConfigError", "ThemeConfig", "load_site_config"]
