"""Settings dataclass and loading helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

from .utils.logging import get_logger

__all__ = ["TextSettings", "load_settings", "get_settings", "reset_settings"]

LOGGER = get_logger(__name__)
_SETTINGS_PATH_ENV = "LINETEXT_SETTINGS"
_INT_ENV_OVERRIDES: Mapping[str, str] = {
    "LINETEXT_INDENT_SIZE": "indent_size",
}
_CURRENT: TextSettings | None = None


@dataclass(slots=True, frozen=True)
class TextSettings:
    """Tunables consumed by the text helpers.

    The canonical line separator is intentionally absent: serialized text must
    not depend on configuration.
    """

    indent_size: int = 4

    def __post_init__(self) -> None:
        if isinstance(self.indent_size, bool) or not isinstance(self.indent_size, int):
            raise ValueError(f"indent_size must be an integer, got {self.indent_size!r}")
        if self.indent_size < 0:
            raise ValueError("indent_size must not be negative")

    @property
    def default_indent(self) -> str:
        """Return the indentation prepended when no explicit indent is given."""

        return " " * self.indent_size


def load_settings(
    path: Path | str | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> TextSettings:
    """Build settings from defaults, an optional JSON file, env vars and ``overrides``."""

    settings = TextSettings()
    target = path or os.environ.get(_SETTINGS_PATH_ENV)
    if target:
        settings = _apply_overrides(settings, _read_file(Path(target)), source="file")
    settings = _apply_overrides(settings, _env_overrides(), source="environment")
    if overrides:
        settings = _apply_overrides(settings, overrides, source="explicit")
    return settings


def get_settings() -> TextSettings:
    """Return the process-wide settings, loading them on first use."""

    global _CURRENT
    if _CURRENT is None:
        _CURRENT = load_settings()
    return _CURRENT


def reset_settings() -> None:
    """Forget the cached settings so the next lookup reloads them."""

    global _CURRENT
    _CURRENT = None


def _read_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        LOGGER.debug("Settings file %s does not exist; using defaults", path)
        return {}
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        LOGGER.warning("Settings file %s is not valid JSON: %s", path, exc)
        return {}
    if not isinstance(payload, dict):
        LOGGER.warning("Settings file %s must contain a JSON object", path)
        return {}
    return payload


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_name, field_name in _INT_ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is None:
            continue
        try:
            overrides[field_name] = int(value)
        except ValueError:
            LOGGER.warning(
                "Environment override %s=%s is not a valid integer",
                env_name,
                value,
            )
    return overrides


def _apply_overrides(
    settings: TextSettings,
    overrides: Mapping[str, Any],
    *,
    source: str,
) -> TextSettings:
    allowed = {item.name for item in fields(TextSettings)}
    filtered = {key: value for key, value in overrides.items() if key in allowed}
    ignored = sorted(set(overrides) - allowed)
    if ignored:
        LOGGER.debug("Ignoring unknown %s settings: %s", source, ignored)
    if not filtered:
        return settings
    try:
        updated = replace(settings, **filtered)
    except (TypeError, ValueError) as exc:
        LOGGER.warning("Rejected %s settings overrides %s: %s", source, sorted(filtered), exc)
        return settings
    LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
    return updated
