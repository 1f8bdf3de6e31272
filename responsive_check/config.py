"""Configuration loading for responsive-check."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from responsive_check.analyzer import DEFAULT_FILES
from responsive_check.visual import (
    DEFAULT_PAGES,
    DEFAULT_SETTLE_MS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_VIEWPORTS,
    PageTarget,
    Viewport,
)

CONFIG_FILENAMES = (".responsive-check.toml", "responsive-check.toml")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEYS = ("responsive_check", "responsive-check")


@dataclass(slots=True)
class VisualConfig:
    """Screenshot run settings."""

    out: str = "screenshots"
    settle_ms: int = DEFAULT_SETTLE_MS
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    pages: list[PageTarget] = field(default_factory=lambda: list(DEFAULT_PAGES))
    viewports: list[Viewport] = field(default_factory=lambda: list(DEFAULT_VIEWPORTS))


@dataclass(slots=True)
class AppConfig:
    """Runtime configuration values resolved from project files."""

    files: list[str] = field(default_factory=lambda: list(DEFAULT_FILES))
    format: str = "human"
    rule_enable: list[str] | None = None
    rule_disable: list[str] = field(default_factory=list)
    visual: VisualConfig = field(default_factory=VisualConfig)
    source: str | None = None


def load_app_config(root: Path, config_path: Path | None = None) -> AppConfig:
    """Load config from explicit path or project-local files with precedence."""
    root = root.resolve()
    if config_path is not None:
        resolved = config_path if config_path.is_absolute() else (root / config_path)
        if not resolved.exists():
            raise ValueError(f"Config file does not exist: {resolved}")
        mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
        return _from_mapping(mapping, source=str(resolved))

    for filename in CONFIG_FILENAMES:
        resolved = root / filename
        if resolved.exists():
            mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
            return _from_mapping(mapping, source=str(resolved))

    pyproject_path = root / PYPROJECT_FILENAME
    if pyproject_path.exists():
        mapping = _extract_config_mapping(_load_toml(pyproject_path), source_path=pyproject_path)
        if mapping:
            return _from_mapping(mapping, source=str(pyproject_path))

    return AppConfig()


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as file_obj:
            loaded = tomllib.load(file_obj)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        return {}
    return loaded


def _extract_config_mapping(loaded: dict[str, Any], *, source_path: Path) -> dict[str, Any]:
    section = _find_pyproject_tool_section(loaded)
    if source_path.name == PYPROJECT_FILENAME:
        return section if section is not None else {}
    return section if section is not None else loaded


def _find_pyproject_tool_section(loaded: dict[str, Any]) -> dict[str, Any] | None:
    tool = loaded.get("tool")
    if not isinstance(tool, dict):
        return None
    for key in PYPROJECT_TOOL_KEYS:
        section = tool.get(key)
        if isinstance(section, dict):
            return section
    return None


def _from_mapping(mapping: dict[str, Any], *, source: str) -> AppConfig:
    rules_mapping = _as_table(mapping.get("rules"), "rules")
    visual_mapping = _as_table(mapping.get("visual"), "visual")

    files = _as_str_list(mapping.get("files"), "files")
    return AppConfig(
        files=files or list(DEFAULT_FILES),
        format=_as_choice(mapping.get("format", "human"), {"human", "json"}, "format"),
        rule_enable=_as_str_list_or_none(rules_mapping.get("enable"), "rules.enable"),
        rule_disable=_as_str_list(rules_mapping.get("disable"), "rules.disable"),
        visual=_parse_visual_config(visual_mapping),
        source=source,
    )


def _parse_visual_config(value: dict[str, Any]) -> VisualConfig:
    settle_ms = _as_int(value.get("settle_ms", DEFAULT_SETTLE_MS), "visual.settle_ms")
    timeout_ms = _as_int(value.get("timeout_ms", DEFAULT_TIMEOUT_MS), "visual.timeout_ms")
    if settle_ms < 0:
        raise ValueError("visual.settle_ms must be >= 0")
    if timeout_ms <= 0:
        raise ValueError("visual.timeout_ms must be > 0")

    pages = [
        PageTarget(
            name=_as_str(item.get("name"), "visual.pages.name"),
            url=_as_str(item.get("url"), "visual.pages.url"),
            extra_delay_ms=_as_int(item.get("extra_delay_ms", 0), "visual.pages.extra_delay_ms"),
        )
        for item in _as_table_list(value.get("pages"), "visual.pages")
    ]
    viewports = [
        Viewport(
            name=_as_str(item.get("name"), "visual.viewports.name"),
            width=_as_int(item.get("width"), "visual.viewports.width"),
            height=_as_int(item.get("height"), "visual.viewports.height"),
            scale_factor=_as_float(item.get("scale_factor", 1), "visual.viewports.scale_factor"),
        )
        for item in _as_table_list(value.get("viewports"), "visual.viewports")
    ]
    return VisualConfig(
        out=_as_str(value.get("out", "screenshots"), "visual.out"),
        settle_ms=settle_ms,
        timeout_ms=timeout_ms,
        pages=pages or list(DEFAULT_PAGES),
        viewports=viewports or list(DEFAULT_VIEWPORTS),
    )


def _as_table(value: Any, field_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a table/object")
    return value


def _as_table_list(value: Any, field_name: str) -> list[dict[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list of tables")
    output: list[dict[str, Any]] = []
    for item in value:
        if not isinstance(item, dict):
            raise ValueError(f"{field_name} must be a list of tables")
        output.append(item)
    return output


def _as_str_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"{field_name} must be a list of strings")
    return list(value)


def _as_str_list_or_none(value: Any, field_name: str) -> list[str] | None:
    if value is None:
        return None
    return _as_str_list(value, field_name)


def _as_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _as_choice(raw: Any, allowed: set[str], field_name: str) -> str:
    value = str(raw).lower()
    if value not in allowed:
        choices = ", ".join(sorted(allowed))
        raise ValueError(f"{field_name} must be one of: {choices}")
    return value


def _as_int(raw: Any, field_name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{field_name} must be an integer")
    return raw


def _as_float(raw: Any, field_name: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(raw)
