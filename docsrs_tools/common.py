"""
Shared helpers for the MCP tool wrappers.
"""

from typing import Awaitable, TypeVar

from fastmcp.exceptions import ToolError

T = TypeVar("T")


async def run_tool(tool_name: str, call: Awaitable[T], logger) -> T:
    """
    Await a core call and turn any failure into a ToolError.

    Only the message chain reaches the client, never a traceback.
    """
    try:
        return await call
    except Exception as e:
        logger.error(
            "Tool call failed", exc_info=True,
            extra={'extra_data': {'tool': tool_name, 'error_type': type(e).__name__}}
        )
        raise ToolError(f"Error executing tool {tool_name}: {e}") from e
