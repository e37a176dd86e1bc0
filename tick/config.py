from datetime import time
from functools import lru_cache

import yaml

from tick.core.deadline import DEFAULT_TIME, parse_time_of_day
from tick.errors import InvalidDeadlineFormat

_KNOWN_KEYS = {"file", "default_time"}


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a dict, got {type(cfg).__name__}")

    unknown = set(cfg) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(map(str, unknown)))}")

    if "file" in cfg and not isinstance(cfg["file"], str):
        raise ValueError("Config 'file' must be a string")

    if "default_time" in cfg:
        value = cfg["default_time"]
        if not isinstance(value, str):
            raise ValueError("Config 'default_time' must be a quoted 'HH:MM' string")
        try:
            parse_time_of_day(value)
        except InvalidDeadlineFormat as e:
            raise ValueError(f"Config 'default_time' is not a valid time: {value!r}") from e


def _clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load config.yaml from the tick home, returning its content or an empty dict if not found."""
    from tick.lib import paths

    path = paths.config_file()
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    _validate_config(cfg)
    return cfg


def default_time() -> time:
    value = load_config().get("default_time")
    if value is None:
        return DEFAULT_TIME
    return parse_time_of_day(value)
