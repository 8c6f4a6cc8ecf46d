"""MCP server exposing Gong calls, transcripts, and call details."""

__version__ = "0.1.0"
