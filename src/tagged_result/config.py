from __future__ import annotations

import logging

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from tagged_result.exceptions import ConfigError

_DEFAULTS: dict[str, object] = {
    "logging": {
        "level": "WARNING",
        "format": "%(name)s: %(message)s",
    },
}

_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def create_config(
    yaml_path: str = "tagged_result.yaml",
    env_prefix: str = "TAGGED_RESULT",
    defaults: dict[str, object] | None = None,
    *,
    level: str | None = None,
) -> ConfigurationSet:
    """Build the logging settings, first layer wins.

    ``level`` beats ``TAGGED_RESULT__LOGGING__LEVEL``-style env vars, which beat
    ``yaml_path`` (skipped when absent), which beats ``defaults``.
    """
    overrides = [] if level is None else [config_from_dict({"logging": {"level": level}})]
    return ConfigurationSet(
        *overrides,
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(_DEFAULTS if defaults is None else defaults),
    )


def load_log_level(cfg: ConfigurationSet | None = None) -> int:
    if cfg is None:
        cfg = create_config()
    name = str(cfg["logging.level"]).strip().upper()
    if name not in _LEVELS:
        raise ConfigError(f"Unknown logging level '{name}', expected one of {', '.join(_LEVELS)}")
    return _LEVELS[name]


def load_log_format(cfg: ConfigurationSet | None = None) -> str:
    if cfg is None:
        cfg = create_config()
    return str(cfg["logging.format"])
