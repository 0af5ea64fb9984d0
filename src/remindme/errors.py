"""
Error types for remindme.

Every failure surfaced to the user is a ReminderError tagged with a kind.
Causes are chained with ``raise ... from exc`` and rendered as one line.
"""


class ReminderError(Exception):
    """Base error. ``kind`` tells usage mistakes apart from I/O failures."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        parts = [self.message]
        cause = self.__cause__
        while cause is not None:
            parts.append(str(cause))
            cause = cause.__cause__
        return ": ".join(p for p in parts if p)


class UsageError(ReminderError):
    """Bad arguments, out-of-range index, or content that won't fit a line."""

    kind = "usage"


class StorageError(ReminderError):
    """Home lookup, open, read or write failure."""

    kind = "io"
