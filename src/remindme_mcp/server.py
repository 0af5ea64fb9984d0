"""
MCP Server for remindme.

Exposes the reminders file as tools for MCP clients.
"""

import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from remindme.errors import ReminderError
from remindme.store import TaskStore, format_tasks, printable

logger = logging.getLogger(__name__)

# Create MCP server
server = Server("remindme")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="reminders_add",
            description="Add a reminder. It is stored as a single line, so the text must not contain newlines.",
            inputSchema={
                "type": "object",
                "properties": {
                    "text": {
                        "type": "string",
                        "description": "The reminder to add",
                    },
                },
                "required": ["text"],
            },
        ),
        Tool(
            name="reminders_list",
            description="List pending reminders with their 0-based indices.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
        Tool(
            name="reminders_ack",
            description="Acknowledge (remove) a reminder by its index from reminders_list. Later reminders shift down by one.",
            inputSchema={
                "type": "object",
                "properties": {
                    "index": {
                        "type": "integer",
                        "description": "0-based index of the reminder",
                    },
                },
                "required": ["index"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "reminders_add":
            return await tool_add(arguments)
        elif name == "reminders_list":
            return await tool_list(arguments)
        elif name == "reminders_ack":
            return await tool_ack(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]
    except ReminderError as e:
        logger.warning("Tool %s failed: %s", name, e)
        return [TextContent(type="text", text=f"Error: {e}")]


async def tool_add(args: dict) -> list[TextContent]:
    """Add a reminder."""
    text = args.get("text") or ""
    if not text.strip():
        return [TextContent(type="text", text="Error: Empty reminder")]

    TaskStore.default().add(text)
    return [TextContent(type="text", text=f"Added: {printable(text)}")]


async def tool_list(args: dict) -> list[TextContent]:
    """List reminders."""
    tasks = TaskStore.default().list_tasks()
    return [TextContent(type="text", text=format_tasks(tasks))]


async def tool_ack(args: dict) -> list[TextContent]:
    """Acknowledge a reminder."""
    index = args.get("index")
    if isinstance(index, bool) or not isinstance(index, int):
        return [TextContent(type="text", text=f"Error: expected integer index, got {index!r}")]

    removed = TaskStore.default().acknowledge(index)
    return [TextContent(type="text", text=f"Acknowledged: {printable(removed)}")]


async def main():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    """Console script entry point."""
    import asyncio

    from remindme.cli import setup_logging

    setup_logging()
    asyncio.run(main())


if __name__ == "__main__":
    run()
