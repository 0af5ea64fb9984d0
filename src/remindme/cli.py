"""
CLI for remindme.

Minimal CLI using stdlib for fast startup.
Subcommands are imported lazily to avoid startup overhead.

Usage:
    remindme add <your note here>   # Add a reminder
    remindme list                   # List pending reminders
    remindme ack <id>               # Acknowledge a reminder
"""

import sys

CMD_ADD = "add"
CMD_ACK = "ack"
CMD_LIST = "list"


def print_help() -> None:
    """Print help message."""
    print("""Usage:
    remindme add <your note here>          -- add a task
    remindme list                          -- list pending tasks
    remindme ack <id>                      -- acknowledge an existing task

Options:
    remindme --help, -h                    Show this help
    remindme --version, -v                 Show version

Reminders are stored one per line in ~/.reminders
(override with REMINDME_FILE or [reminders] path in config.toml).""")


def print_version() -> None:
    """Print version."""
    from remindme import __version__
    print(f"remindme {__version__}")


def setup_logging() -> None:
    """Configure stderr logging from REMINDME_LOG_LEVEL / config.toml."""
    import logging

    from remindme.config import get_log_level

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=get_log_level(),
        stream=sys.stderr,
    )


def cmd_add(args: list[str]) -> int:
    """Add a reminder built from all remaining arguments."""
    from remindme.store import TaskStore

    if not args:
        print("expected a reminder after 'add', got nothing")
        print_help()
        return 1

    text = " ".join(args)
    if not text.strip():
        print("expected a non-empty reminder")
        print_help()
        return 1

    TaskStore.default().add(text)
    return 0


def cmd_list(args: list[str]) -> int:
    """List pending reminders. Extra arguments are ignored."""
    from remindme.store import TaskStore, format_tasks

    print(format_tasks(TaskStore.default().list_tasks()))
    return 0


def parse_index(text: str) -> int | None:
    """Parse a decimal index (optional sign, ASCII digits only)."""
    import re

    if not re.fullmatch(r"[+-]?[0-9]+", text):
        return None
    return int(text)


def cmd_ack(args: list[str]) -> int:
    """Acknowledge (remove) a reminder by index."""
    from remindme.store import TaskStore, printable

    if len(args) != 1:
        print(f"expected exactly 1 index after 'ack', got {len(args)}")
        print_help()
        return 1

    index = parse_index(args[0])
    if index is None:
        print(f"expected integer index, got {printable(args[0])}")
        print_help()
        return 1

    TaskStore.default().acknowledge(index)
    return 0


COMMANDS = {
    CMD_ADD: cmd_add,
    CMD_LIST: cmd_list,
    CMD_ACK: cmd_ack,
}


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Returns the process exit code.
    """
    from remindme.errors import ReminderError

    args = sys.argv[1:] if argv is None else argv

    if not args:
        print_help()
        return 1

    first_arg = args[0]

    if first_arg in ("--help", "-h", "help"):
        print_help()
        return 0

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    command = COMMANDS.get(first_arg)
    if command is None:
        print_help()
        return 1

    try:
        setup_logging()
        return command(args[1:])
    except ReminderError as e:
        print(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
