from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml


class AppConfig(Protocol):
    def __getitem__(self, key: str) -> object: ...


_DEFAULTS: dict[str, object] = {
    "retrosheet": {
        "base_url": "https://www.retrosheet.org",
    },
    "http": {
        "timeout": 60,
        "connect_timeout": 10,
    },
    "cache": {
        "enabled": True,
        "dir": "~/.cache/retrosheet_events",
    },
    "parse": {
        "max_workers": 0,
    },
}


def create_config(
    yaml_path: str = "retrosheet.yaml",
    env_prefix: str = "RETROSHEET",
    defaults: dict[str, object] | None = None,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    Environment variables use ``__`` as the separator, e.g. ``RETROSHEET__CACHE__DIR``.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _as_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class LoaderSettings:
    base_url: str
    timeout: float
    connect_timeout: float
    cache_enabled: bool
    cache_dir: Path
    max_workers: int | None


def load_loader_settings(cfg: AppConfig | None = None) -> LoaderSettings:
    """Resolve typed loader settings. Env var values arrive as strings."""
    if cfg is None:
        cfg = create_config()
    max_workers = int(str(cfg["parse.max_workers"]))
    return LoaderSettings(
        base_url=str(cfg["retrosheet.base_url"]),
        timeout=float(str(cfg["http.timeout"])),
        connect_timeout=float(str(cfg["http.connect_timeout"])),
        cache_enabled=_as_bool(cfg["cache.enabled"]),
        cache_dir=Path(str(cfg["cache.dir"])).expanduser(),
        max_workers=max_workers if max_workers > 0 else None,
    )
