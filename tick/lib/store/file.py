"""Store file boundary: read whole file, write whole file."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from tick.core.models import Store
from tick.errors import StoreUnavailable
from tick.lib.store import codec

logger = logging.getLogger(__name__)


def load(path: Path | str) -> Store:
    """Load the store at path.

    A missing file is an empty store. Any other read failure raises
    StoreUnavailable; malformed lines raise CorruptRecord.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Store %s missing, starting empty", path)
        return Store()
    except (OSError, UnicodeDecodeError) as e:
        raise StoreUnavailable(path, e) from e

    store = codec.decode(text)
    logger.debug("Loaded %d tasks from %s", len(store), path)
    return store


def _new_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _copy_mode(path: Path, temp_path: Path) -> None:
    if path.exists():
        shutil.copymode(path, temp_path)
    else:
        os.chmod(temp_path, _new_file_mode())


def save(path: Path | str, store: Store) -> None:
    """Atomically replace the store at path: write a sibling temp file, then rename.

    The replaced file keeps its permission bits; a new file gets the usual
    umask-derived mode rather than the private mode of a temp file.
    """
    path = Path(path)
    payload = codec.encode(store)
    temp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w",
            delete=False,
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(payload)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        _copy_mode(path, temp_path)
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise StoreUnavailable(path, e) from e

    logger.debug("Saved %d tasks to %s", len(store), path)


__all__ = ["load", "save"]
