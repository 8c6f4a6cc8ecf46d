"""MCP tool catalog and dispatch for Gong API access."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from mcp import types

from .client import GongClient
from .errors import BadRequestError, GongMCPError, UnknownToolError
from .models import (
    ListCallsInput,
    RetrieveCallDetailsInput,
    RetrieveTranscriptsInput,
    parse_args,
)

logger = logging.getLogger(__name__)

LIST_CALLS_TOOL = types.Tool(
    name="list_calls",
    description=(
        "List Gong calls with optional date range filtering. Returns call details including "
        "ID, title, start/end times, participants, and duration."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "fromDateTime": {
                "type": "string",
                "description": "Start date/time in ISO format (e.g. 2024-03-01T00:00:00Z)",
            },
            "toDateTime": {
                "type": "string",
                "description": "End date/time in ISO format (e.g. 2024-03-31T23:59:59Z)",
            },
        },
    },
)

RETRIEVE_TRANSCRIPTS_TOOL = types.Tool(
    name="retrieve_transcripts",
    description=(
        "Retrieve transcripts for specified call IDs. Returns detailed transcripts including "
        "speaker IDs, topics, and timestamped sentences."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "callIds": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of Gong call IDs to retrieve transcripts for",
            },
        },
        "required": ["callIds"],
    },
)

RETRIEVE_CALL_DETAILS_TOOL = types.Tool(
    name="retrieve_call_details",
    description=(
        "Retrieve comprehensive call details including topics, trackers, speakers, interaction "
        "stats, and CRM data. Requires at least one filter parameter. Pass the returned cursor "
        "back to fetch the next page."
    ),
    inputSchema={
        "type": "object",
        "properties": {
            "callIds": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of call IDs to retrieve",
            },
            "fromDateTime": {
                "type": "string",
                "description": "Start date/time in ISO format (e.g., '2024-03-01T00:00:00Z')",
            },
            "toDateTime": {
                "type": "string",
                "description": "End date/time in ISO format (e.g., '2024-03-31T23:59:59Z')",
            },
            "primaryUserIds": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Array of primary user IDs to filter by",
            },
            "context": {
                "type": "string",
                "description": "Context level for data retrieval (default: 'Extended' for CRM data)",
            },
            "cursor": {
                "type": "string",
                "description": "Cursor for pagination",
            },
        },
    },
)

TOOLS: list[types.Tool] = [
    LIST_CALLS_TOOL,
    RETRIEVE_TRANSCRIPTS_TOOL,
    RETRIEVE_CALL_DETAILS_TOOL,
]


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool invocation, success or error."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, data: Any) -> "ToolResult":
        return cls(json.dumps(data, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(f"Error: {message}", is_error=True)

    def to_call_tool_result(self) -> types.CallToolResult:
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.text)],
            isError=self.is_error,
        )


Handler = Callable[[Any], Awaitable[Any]]


class ToolRouter:
    """Maps tool names to validated Gong client calls."""

    def __init__(self, client: GongClient):
        self.client = client
        self._handlers: dict[str, Handler] = {
            LIST_CALLS_TOOL.name: self._list_calls,
            RETRIEVE_TRANSCRIPTS_TOOL.name: self._retrieve_transcripts,
            RETRIEVE_CALL_DETAILS_TOOL.name: self._retrieve_call_details,
        }

    def list_tools(self) -> list[types.Tool]:
        return list(TOOLS)

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]]) -> ToolResult:
        """Run a tool and fold every failure into an error result."""
        try:
            if arguments is None:
                raise BadRequestError("No arguments provided")
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)
            return ToolResult.success(await handler(arguments))
        except GongMCPError as e:
            logger.info("Tool %s failed: %s", name, e.to_payload())
            return ToolResult.failure(e.message)
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return ToolResult.failure(str(e))

    async def _list_calls(self, arguments: Any) -> Any:
        params = parse_args(ListCallsInput, arguments)
        if params is None:
            raise BadRequestError("Invalid arguments for list_calls")
        return await self.client.list_calls(params.from_date_time, params.to_date_time)

    async def _retrieve_transcripts(self, arguments: Any) -> Any:
        params = parse_args(RetrieveTranscriptsInput, arguments)
        if params is None:
            raise BadRequestError("Invalid arguments for retrieve_transcripts")
        return await self.client.retrieve_transcripts(params.call_ids)

    async def _retrieve_call_details(self, arguments: Any) -> Any:
        params = parse_args(RetrieveCallDetailsInput, arguments)
        if params is None:
            raise BadRequestError("Invalid arguments for retrieve_call_details")
        return await self.client.retrieve_call_details(params)
