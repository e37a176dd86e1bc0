"""Flat-file persistence for the task store."""

from tick.lib.store.codec import decode, decode_line, encode, encode_task
from tick.lib.store.file import load, save

__all__ = [
    "decode",
    "decode_line",
    "encode",
    "encode_task",
    "load",
    "save",
]
