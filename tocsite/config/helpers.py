"""Utility helpers shared by the tocsite configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import SiteConfigError, ThemeConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_dir(base: Path, value: object | None, default: str) -> Path:
    """Resolve a configured directory relative to the config file location."""
    text = _optional_str(value) or default
    candidate = Path(text).expanduser()
    if candidate.is_absolute():
        return candidate
    return base / candidate


def _normalize_suffix(value: object | None) -> str:
    """Return a source suffix with a leading dot, defaulting to ``.md``."""
    text = _optional_str(value) or ".md"
    if "/" in text or "\\" in text:
        msg = f"Invalid source_suffix {text!r}."
        raise SiteConfigError(msg)
    return text if text.startswith(".") else f".{text}"


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig instance from the top-level config mapping."""
    base = ThemeConfig()
    return ThemeConfig(
        site_name=_optional_str(payload.get("site_name")) or base.site_name,
        page_title_suffix=_optional_str(payload.get("page_title_suffix"))
        or base.page_title_suffix,
        footer_note=_optional_str(payload.get("footer_note")) or base.footer_note,
    )


__all__ = [
    "_build_theme_config",
    "_normalize_suffix",
    "_optional_str",
    "_resolve_dir",
]
