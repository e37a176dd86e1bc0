from pathlib import Path


class TickError(Exception):
    """Base exception for tick domain errors."""

    pass


class EmptyName(TickError):
    """Raised when a task is created with a blank name."""

    def __init__(self) -> None:
        super().__init__("Task name cannot be empty")


class InvalidTag(TickError):
    """Raised when a task carries an empty tag."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Invalid tag {tag!r}: tags cannot be empty")


class InvalidDeadlineFormat(TickError):
    """Raised when a deadline string matches none of the accepted shapes or is out of range."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        self.reason = reason
        msg = f"Cannot parse deadline {text!r}: expected 'YYYY-MM-DD HH:MM', 'YYYY-MM-DD' or 'HH:MM'"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class CorruptRecord(TickError):
    """Raised when a persisted line cannot be decoded."""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}")


class StoreUnavailable(TickError):
    """Raised when the store file cannot be read or written."""

    def __init__(self, path: Path | str, cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")
