# tests/test_mcp_server.py

from __future__ import annotations

import asyncio
from pathlib import Path

from remindme_mcp.server import call_tool, list_tools


def call(name: str, arguments: dict) -> str:
    result = asyncio.run(call_tool(name, arguments))
    assert len(result) == 1
    return result[0].text


def test_tools_are_listed() -> None:
    tools = asyncio.run(list_tools())
    assert [t.name for t in tools] == ["reminders_add", "reminders_list", "reminders_ack"]


def test_add_list_ack_round_trip(reminders_path: Path) -> None:
    assert call("reminders_list", {}) == "no pending tasks :)"

    assert call("reminders_add", {"text": "buy milk"}) == "Added: buy milk"
    assert call("reminders_add", {"text": "call mom"}) == "Added: call mom"
    assert call("reminders_list", {}) == "Reminders:\n0. buy milk\n1. call mom"

    assert call("reminders_ack", {"index": 0}) == "Acknowledged: buy milk"
    assert reminders_path.read_text(encoding="utf-8") == "call mom\n"


def test_errors_are_reported_as_text(reminders_path: Path) -> None:
    assert call("reminders_add", {"text": "  "}) == "Error: Empty reminder"
    assert call("reminders_add", {"text": "a\nb"}) == "Error: reminder must fit on a single line"
    assert call("reminders_ack", {"index": 3}) == "Error: invalid index specified"
    assert call("reminders_ack", {"index": "1"}).startswith("Error: expected integer index")
    assert call("nope", {}) == "Unknown tool: nope"
    assert not reminders_path.exists()


def test_add_stores_text_as_given(reminders_path: Path) -> None:
    assert call("reminders_add", {"text": "  indented "}) == "Added:   indented "
    assert reminders_path.read_text(encoding="utf-8") == "  indented \n"
