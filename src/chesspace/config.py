"""
Configuration and environment loading for chesspace.

- Loads .env via python-dotenv, then settings.yml (YAML) from repo root if present;
  falls back to environment variables, then built-in defaults.
- Exposes SETTINGS with the CLI defaults (move count, display interval, log level).
- CHESSPACE_SETTINGS points at an alternative settings.yml.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any, Callable, Mapping

import yaml
from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger("config")


def _repo_root() -> str:
    # this file: src/chesspace/config.py → repo root is two levels up
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def _load_yaml(path: str) -> dict:
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        log.warning("Could not read settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring settings file %s: expected a mapping, got %s", path, type(data).__name__)
        return {}
    return data


@dataclass(frozen=True)
class Settings:
    # CLI defaults
    default_moves: int
    default_display: int

    # Logging
    log_level: str


def load_settings(path: str | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    path = path or env.get("CHESSPACE_SETTINGS") or os.path.join(_repo_root(), "settings.yml")
    cfg = _load_yaml(path)

    def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None) -> Any:
        # YAML takes precedence
        if name in cfg:
            raw = cfg[name]
        elif env.get(name) is not None:
            raw = env[name]
        else:
            return default
        if cast is None:
            return raw
        try:
            return cast(raw)
        except (TypeError, ValueError):
            log.warning("Ignoring invalid %s=%r; using default %r", name, raw, default)
            return default

    return Settings(
        default_moves=_get("CHESSPACE_DEFAULT_MOVES", 40, cast=int),
        default_display=_get("CHESSPACE_DEFAULT_DISPLAY", 1, cast=int),
        log_level=str(_get("CHESSPACE_LOG_LEVEL", "WARNING")).upper(),
    )


SETTINGS = load_settings()
