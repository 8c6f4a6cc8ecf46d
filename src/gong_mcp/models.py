"""Pydantic models for MCP tool input validation."""

from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError


class ToolInput(BaseModel):
    """Base for tool arguments: camelCase keys, no coercion, extras ignored."""

    model_config = ConfigDict(
        strict=True,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class ListCallsInput(ToolInput):
    """Input for listing calls in a date range."""

    # Explicit null is rejected; the keys may only be omitted.
    from_date_time: StrictStr = Field(
        default=None,
        alias="fromDateTime",
        description="Start date/time in ISO format (e.g. 2024-03-01T00:00:00Z)",
    )
    to_date_time: StrictStr = Field(
        default=None,
        alias="toDateTime",
        description="End date/time in ISO format (e.g. 2024-03-31T23:59:59Z)",
    )


class RetrieveTranscriptsInput(ToolInput):
    """Input for retrieving transcripts."""

    call_ids: list[StrictStr] = Field(
        ...,
        alias="callIds",
        description="Array of Gong call IDs to retrieve transcripts for",
    )


class RetrieveCallDetailsInput(ToolInput):
    """Input for retrieving extensive call details.

    Every field is optional here. Whether enough of them are set to scope
    the query is checked by the client, not by this model.
    """

    call_ids: Optional[list[StrictStr]] = Field(
        default=None,
        alias="callIds",
        description="Array of call IDs to retrieve",
    )
    from_date_time: Optional[StrictStr] = Field(
        default=None,
        alias="fromDateTime",
        description="Start date/time in ISO format (e.g., '2024-03-01T00:00:00Z')",
    )
    to_date_time: Optional[StrictStr] = Field(
        default=None,
        alias="toDateTime",
        description="End date/time in ISO format (e.g., '2024-03-31T23:59:59Z')",
    )
    primary_user_ids: Optional[list[StrictStr]] = Field(
        default=None,
        alias="primaryUserIds",
        description="Array of primary user IDs to filter by",
    )
    context: Optional[StrictStr] = Field(
        default=None,
        description="Context level for data retrieval (default: 'Extended' for CRM data)",
    )
    cursor: Optional[StrictStr] = Field(
        default=None,
        description="Cursor for pagination",
    )


InputT = TypeVar("InputT", bound=ToolInput)


def parse_args(model: type[InputT], args: Any) -> Optional[InputT]:
    """Parse an untyped argument bag into ``model``, or None if it doesn't fit."""
    if not isinstance(args, dict):
        return None
    try:
        return model.model_validate(args)
    except ValidationError:
        return None


def is_list_calls_args(args: Any) -> bool:
    return parse_args(ListCallsInput, args) is not None


def is_retrieve_transcripts_args(args: Any) -> bool:
    return parse_args(RetrieveTranscriptsInput, args) is not None


def is_retrieve_call_details_args(args: Any) -> bool:
    return parse_args(RetrieveCallDetailsInput, args) is not None
