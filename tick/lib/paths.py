import os
from pathlib import Path

DEFAULT_STORE = "./database"


def tick_home() -> Path:
    override = os.environ.get("TICK_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".tick"


def config_file() -> Path:
    return tick_home() / "config.yaml"


def store_file(override: Path | str | None = None) -> Path:
    """Resolve the store path: explicit override, TICK_FILE, config `file`, ./database."""
    if override:
        return Path(override).expanduser()

    env = os.environ.get("TICK_FILE")
    if env:
        return Path(env).expanduser()

    from tick import config

    configured = config.load_config().get("file")
    if configured:
        return Path(configured).expanduser()

    return Path(DEFAULT_STORE)
