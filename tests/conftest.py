from datetime import datetime

import pytest

from tick import config
from tick.core.models import Store, Task


@pytest.fixture(autouse=True)
def tick_home(monkeypatch, tmp_path):
    """Isolated tick home per test.

    Provides:
    - TICK_HOME pointing at an empty temporary directory
    - TICK_FILE unset so path resolution falls through to config/default
    - Fresh config cache (setup + teardown)
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("TICK_HOME", str(home))
    monkeypatch.delenv("TICK_FILE", raising=False)
    config._clear_cache()

    yield home

    config._clear_cache()


@pytest.fixture
def now():
    return datetime(2025, 3, 7, 9, 0)


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "database"


@pytest.fixture
def sample_store():
    return Store(
        (
            Task(1, "Write report", datetime(2025, 3, 6, 17, 0), ("work",)),
            Task(2, "Buy milk", datetime(2025, 3, 7, 18, 0), ("home", "errand")),
            Task(3, "File taxes", datetime(2025, 3, 1, 12, 0), ("home",), complete=True),
            Task(5, "Plan trip", datetime(2025, 4, 1, 17, 0), ("home", "travel", "work")),
        )
    )
