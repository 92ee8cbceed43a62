"""MCP server exposing the knowledge base as tools."""

from docchat.server.mcp_server import DocChatTools, create_mcp_server

__all__ = ["DocChatTools", "create_mcp_server"]
