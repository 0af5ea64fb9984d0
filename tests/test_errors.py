# tests/test_errors.py

from __future__ import annotations

from remindme.errors import ReminderError, StorageError, UsageError


def test_kinds() -> None:
    assert UsageError("x").kind == "usage"
    assert StorageError("x").kind == "io"
    assert isinstance(UsageError("x"), ReminderError)


def test_message_chain_renders_causes() -> None:
    try:
        try:
            raise OSError(28, "No space left on device")
        except OSError as e:
            raise StorageError("failed to write reminder") from e
    except StorageError as err:
        assert str(err) == "failed to write reminder: [Errno 28] No space left on device"


def test_message_without_cause() -> None:
    assert str(UsageError("invalid index specified")) == "invalid index specified"
