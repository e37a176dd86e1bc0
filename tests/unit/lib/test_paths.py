from pathlib import Path

from tick import config
from tick.lib import paths


def test_tick_home_respects_env_var(tick_home):
    assert paths.tick_home() == tick_home
    assert paths.config_file() == tick_home / "config.yaml"


def test_tick_home_defaults_to_home_dir(monkeypatch):
    monkeypatch.delenv("TICK_HOME", raising=False)
    assert paths.tick_home() == Path.home() / ".tick"


def test_store_file_default():
    assert paths.store_file() == Path("./database")


def test_store_file_from_config(tick_home):
    (tick_home / "config.yaml").write_text("file: /srv/tasks.db\n")
    config._clear_cache()
    assert paths.store_file() == Path("/srv/tasks.db")


def test_env_var_beats_config(tick_home, monkeypatch):
    (tick_home / "config.yaml").write_text("file: /srv/tasks.db\n")
    config._clear_cache()
    monkeypatch.setenv("TICK_FILE", "/tmp/env.db")
    assert paths.store_file() == Path("/tmp/env.db")


def test_override_beats_env_var(monkeypatch):
    """Contract: an explicit --file path takes precedence over TICK_FILE."""
    monkeypatch.setenv("TICK_FILE", "/tmp/env.db")
    assert paths.store_file("/explicit/db") == Path("/explicit/db")


def test_store_file_expands_user(monkeypatch):
    monkeypatch.setenv("TICK_FILE", "~/tasks.db")
    assert paths.store_file() == Path.home() / "tasks.db"
