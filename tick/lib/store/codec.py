"""Flat-file codec: one task per line.

    <id> | <true|false> | <name> | <YYYY-MM-DD HH:MM> | <tag1>,<tag2>,...

Backslash escapes keep delimiters out of free text: `\\\\`, `\\|`, `\\n` and
`\\r` in names and tags, plus `\\,` in tags.
"""

import re
from datetime import datetime

from tick.core.deadline import format_deadline
from tick.core.models import Store, Task
from tick.errors import CorruptRecord, EmptyName, InvalidTag

FIELD_DELIMITER = " | "
TAG_DELIMITER = ","
FIELD_COUNT = 5

_ESCAPES = {"\\": "\\", "|": "|", ",": ",", "n": "\n", "r": "\r"}
_ID_RE = re.compile(r"^[0-9]+$")
_DEADLINE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2})$", re.ASCII)


def _escape(text: str, *, tag: bool = False) -> str:
    out = text.replace("\\", "\\\\").replace("|", "\\|").replace("\n", "\\n").replace("\r", "\\r")
    if tag:
        out = out.replace(",", "\\,")
    return out


def _unescape(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            if i + 1 >= len(text):
                raise ValueError("dangling escape at end of field")
            nxt = text[i + 1]
            if nxt not in _ESCAPES:
                raise ValueError(f"unknown escape '\\{nxt}'")
            out.append(_ESCAPES[nxt])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _split_unescaped(text: str, sep: str) -> list[str]:
    """Split on `sep` where not preceded by an escaping backslash. Pieces stay escaped."""
    pieces = []
    buf: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            buf.append(text[i : i + 2])
            i += 2
            continue
        if ch == sep:
            pieces.append("".join(buf))
            buf = []
        else:
            buf.append(ch)
        i += 1
    pieces.append("".join(buf))
    return pieces


def _split_fields(line: str) -> list[str]:
    raw = _split_unescaped(line, "|")
    last = len(raw) - 1
    fields = []
    for idx, value in enumerate(raw):
        if idx > 0 and value.startswith(" "):
            value = value[1:]
        if idx < last and value.endswith(" "):
            value = value[:-1]
        fields.append(value)
    return fields


def _parse_deadline(value: str) -> datetime:
    match = _DEADLINE_RE.match(value)
    if not match:
        raise ValueError(f"invalid deadline {value!r}, expected 'YYYY-MM-DD HH:MM'")
    year, month, day, hour, minute = (int(part) for part in match.groups())
    return datetime(year, month, day, hour, minute)


def _parse_tags(value: str) -> tuple[str, ...]:
    if value == "":
        return ()
    return tuple(_unescape(piece) for piece in _split_unescaped(value, TAG_DELIMITER))


def encode_task(task: Task) -> str:
    tags = TAG_DELIMITER.join(_escape(tag, tag=True) for tag in task.tags)
    return FIELD_DELIMITER.join(
        [
            str(task.id),
            "true" if task.complete else "false",
            _escape(task.name),
            format_deadline(task.deadline),
            tags,
        ]
    )


def decode_line(line: str, line_number: int) -> Task:
    """Decode one persisted line into a Task.

    Raises:
        CorruptRecord: line is malformed; carries the 1-based line number
    """
    fields = _split_fields(line)
    if len(fields) != FIELD_COUNT:
        raise CorruptRecord(line_number, f"expected {FIELD_COUNT} fields, found {len(fields)}")

    id_str, complete_str, name_str, deadline_str, tags_str = fields

    id_str = id_str.strip()
    if not _ID_RE.match(id_str) or int(id_str) < 1:
        raise CorruptRecord(line_number, f"invalid id {id_str!r}")

    complete_str = complete_str.strip()
    if complete_str not in ("true", "false"):
        raise CorruptRecord(line_number, f"invalid complete flag {complete_str!r}")

    try:
        name = _unescape(name_str)
        deadline = _parse_deadline(deadline_str.strip())
        tags = _parse_tags(tags_str)
        return Task(
            id=int(id_str),
            name=name,
            deadline=deadline,
            tags=tags,
            complete=complete_str == "true",
        )
    except EmptyName as e:
        raise CorruptRecord(line_number, "empty name") from e
    except InvalidTag as e:
        raise CorruptRecord(line_number, "empty tag") from e
    except ValueError as e:
        raise CorruptRecord(line_number, str(e)) from e


def decode(text: str) -> Store:
    """Decode a whole store file. Blank lines are skipped; order is preserved."""
    tasks: list[Task] = []
    seen: dict[int, int] = {}
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        task = decode_line(line, line_number)
        if task.id in seen:
            raise CorruptRecord(
                line_number, f"duplicate id {task.id} (first seen on line {seen[task.id]})"
            )
        seen[task.id] = line_number
        tasks.append(task)
    return Store(tuple(tasks))


def encode(store: Store) -> str:
    return "".join(f"{encode_task(task)}\n" for task in store)


__all__ = ["decode", "decode_line", "encode", "encode_task"]
