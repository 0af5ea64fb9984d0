"""
Task store for remindme.

Reminders are kept one per line in a plain text file. Every operation
re-reads the file; nothing is cached between calls.
"""

import logging
from pathlib import Path

from remindme.errors import StorageError, UsageError

logger = logging.getLogger(__name__)

# Bytes that are not valid UTF-8 (from the file or from argv) round-trip as-is
ENCODING_ERRORS = "surrogateescape"


class TaskStore:
    """Line-oriented reminders file: add, list, acknowledge."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def default(cls) -> "TaskStore":
        """Store backed by the configured reminders file (~/.reminders)."""
        from remindme.config import get_reminders_path

        return cls(get_reminders_path())

    def add(self, content: str) -> None:
        """
        Append a reminder.

        The file (and its parent directory) is created on first use.
        Multi-line content is rejected before anything is written.
        """
        if "\n" in content or "\r" in content:
            raise UsageError("reminder must fit on a single line")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8", errors=ENCODING_ERRORS) as f:
                f.write(f"{content}\n")
        except (OSError, UnicodeError) as e:
            raise StorageError("failed to write reminder") from e

        logger.debug("Appended reminder to %s", self.path)

    def list_tasks(self) -> list[str]:
        """
        Return all pending reminders in file order.

        A missing file means no reminders, not an error.
        Lines split on "\\n" only; one trailing "\\r" is dropped.
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8", errors=ENCODING_ERRORS, newline="\n") as f:
                return [line.removesuffix("\n").removesuffix("\r") for line in f]
        except (OSError, UnicodeError) as e:
            raise StorageError("failed to load reminders") from e

    def acknowledge(self, index: int) -> str:
        """
        Remove the reminder at ``index`` and return it.

        The remaining reminders are rewritten in their original order.
        """
        tasks = self.list_tasks()

        if index < 0 or index >= len(tasks):
            raise UsageError("invalid index specified")

        removed = tasks.pop(index)

        try:
            with open(self.path, "w", encoding="utf-8", errors=ENCODING_ERRORS) as f:
                f.writelines(f"{task}\n" for task in tasks)
        except (OSError, UnicodeError) as e:
            raise StorageError("failed to rewrite reminders") from e

        logger.info("Acknowledged reminder %d (%d left)", index, len(tasks))
        return removed


def printable(text: str) -> str:
    """Swap undecodable bytes for U+FFFD so the text can be shown anywhere."""
    return text.encode("utf-8", ENCODING_ERRORS).decode("utf-8", "replace")


def format_tasks(tasks: list[str]) -> str:
    """Render reminders the way `remindme list` prints them."""
    if not tasks:
        return "no pending tasks :)"

    lines = ["Reminders:"]
    for i, task in enumerate(tasks):
        lines.append(f"{i}. {printable(task)}")

    return "\n".join(lines)
