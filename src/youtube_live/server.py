"""
YouTube Live MCP Server

Exposes live broadcast scheduling as MCP tools.
"""

from .app import mcp

# Import tools to register them with the mcp instance
from .tools import live  # noqa: F401


def main():
    """Run the MCP server."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
