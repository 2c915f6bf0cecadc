"""dictsense configuration loader.

Priority (high → low):
  1. CLI flags           (handled at call site, not in this module)
  2. Environment variables  (DICTSENSE_DOCUMENT, DICTSENSE_INDENT)
  3. Per-project dictsense.yaml  (workspace root)
  4. Global ~/.dictsense/config.yaml
  5. Hardcoded defaults

All YAML reads use yaml.safe_load(), never yaml.load().
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_GLOBAL_CONFIG_DIR: Path = Path.home() / ".dictsense"
_GLOBAL_CONFIG_PATH: Path = _GLOBAL_CONFIG_DIR / "config.yaml"
_PROJECT_CONFIG_NAME: str = "dictsense.yaml"

# Known top-level sections; unknown keys produce a warning
_KNOWN_SECTIONS: frozenset[str] = frozenset(["document", "reference", "watch", "log"])

_LOG_LEVELS: frozenset[str] = frozenset(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(ValueError):
    """Raised when a config file contains an invalid value."""


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class DocumentCfg:
    """Dictionary document settings (dictsense.yaml: document:).

    Attributes:
        name: File name searched for in the workspace and required on selection.
        path: Explicit document path; skips the workspace search when set.
        indent: Indent unit written for newly created keys.
    """

    name: str = "dictionary.json"
    path: str | None = None
    indent: str = "  "


@dataclass
class ReferenceCfg:
    """Source reference settings (dictsense.yaml: reference:)."""

    function: str = "d"


@dataclass
class WatchCfg:
    """File watching settings (dictsense.yaml: watch:)."""

    interval: float = 1.0


@dataclass
class LogCfg:
    """Logging settings (dictsense.yaml: log:)."""

    level: str = "WARNING"


@dataclass
class DictsenseConfig:
    """Root configuration object, built by load_config() from merged YAML layers."""

    document: DocumentCfg = field(default_factory=DocumentCfg)
    reference: ReferenceCfg = field(default_factory=ReferenceCfg)
    watch: WatchCfg = field(default_factory=WatchCfg)
    log: LogCfg = field(default_factory=LogCfg)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _warn_unknown_keys(data: dict[str, Any], source: Path) -> None:
    """Emit a UserWarning for unrecognised top-level keys."""
    for key in data:
        if key not in _KNOWN_SECTIONS:
            warnings.warn(
                f"Unknown config key '{key}' in '{source}' (ignored).",
                UserWarning,
                stacklevel=4,
            )


def _validate(cfg: DictsenseConfig) -> None:
    if not cfg.document.name or "/" in cfg.document.name or "\\" in cfg.document.name:
        raise ConfigError(
            f"document.name must be a bare file name: '{cfg.document.name}'\n"
            "  Example: document.name: dictionary.json"
        )
    if not cfg.document.indent or cfg.document.indent.strip(" \t"):
        raise ConfigError(
            f"document.indent must be spaces or tabs only: {cfg.document.indent!r}\n"
            "  Example: document.indent: \"  \""
        )
    if not cfg.reference.function.isidentifier():
        raise ConfigError(
            f"reference.function must be an identifier: '{cfg.reference.function}'\n"
            "  Example: reference.function: d"
        )
    if cfg.watch.interval <= 0:
        raise ConfigError(f"watch.interval must be > 0, got {cfg.watch.interval}")
    if cfg.log.level.upper() not in _LOG_LEVELS:
        raise ConfigError(
            f"log.level must be one of {', '.join(sorted(_LOG_LEVELS))}: '{cfg.log.level}'"
        )


# ---------------------------------------------------------------------------
# Merge + build
# ---------------------------------------------------------------------------


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict that is *base* deep-merged with *override*."""
    result = dict(base)
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    raw = data.get(name) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping, got {type(raw).__name__}")
    return raw


def _cfg_from_dict(data: dict[str, Any]) -> DictsenseConfig:
    """Build a *DictsenseConfig* from a merged raw YAML dict."""
    cfg = DictsenseConfig()

    if "document" in data:
        d = _section(data, "document")
        cfg.document = DocumentCfg(
            name=str(d.get("name", cfg.document.name)),
            path=d.get("path") or cfg.document.path,
            indent=str(d.get("indent", cfg.document.indent)),
        )

    if "reference" in data:
        r = _section(data, "reference")
        cfg.reference = ReferenceCfg(
            function=str(r.get("function", cfg.reference.function)),
        )

    if "watch" in data:
        w = _section(data, "watch")
        try:
            interval = float(w.get("interval", cfg.watch.interval))
        except (TypeError, ValueError):
            raise ConfigError(f"watch.interval must be a number: {w.get('interval')!r}") from None
        cfg.watch = WatchCfg(interval=interval)

    if "log" in data:
        lg = _section(data, "log")
        cfg.log = LogCfg(level=str(lg.get("level", cfg.log.level)).upper())

    return cfg


def _apply_env_overrides(cfg: DictsenseConfig) -> DictsenseConfig:
    """Apply DICTSENSE_* environment variable overrides (layer 2)."""
    if document := os.environ.get("DICTSENSE_DOCUMENT"):
        cfg.document.path = document
    if indent := os.environ.get("DICTSENSE_INDENT"):
        cfg.document.indent = indent
    return cfg


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file '{path}' is not valid YAML:\n  {exc}") from None
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping at the top level.")
    return raw


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(
    project_dir: Path | None = None,
    *,
    global_config_path: Path | None = None,
) -> DictsenseConfig:
    """Load and return a merged *DictsenseConfig*.

    Applies layers in order: global → per-project → env vars.
    CLI flag overrides must be applied by the caller after this function.

    Args:
        project_dir: Directory to search for *dictsense.yaml*. Defaults to CWD.
        global_config_path: Override the global config path (for testing).

    Returns:
        Fully merged *DictsenseConfig* with env var overrides applied.

    Raises:
        ConfigError: If a config file is malformed or holds an invalid value.
    """
    global_path = global_config_path if global_config_path is not None else _GLOBAL_CONFIG_PATH
    search_dir = project_dir if project_dir is not None else Path.cwd()

    merged: dict[str, Any] = {}

    # Layer 1: global config
    if global_path.exists():
        raw_global = _read_yaml(global_path)
        _warn_unknown_keys(raw_global, global_path)
        merged = _deep_merge(merged, raw_global)

    # Layer 2: per-project config
    project_cfg_path = search_dir / _PROJECT_CONFIG_NAME
    if project_cfg_path.exists():
        raw_project = _read_yaml(project_cfg_path)
        _warn_unknown_keys(raw_project, project_cfg_path)
        merged = _deep_merge(merged, raw_project)

    cfg = _cfg_from_dict(merged)

    # Layer 3: env var overrides
    cfg = _apply_env_overrides(cfg)

    _validate(cfg)
    return cfg
