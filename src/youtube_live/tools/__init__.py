"""
MCP tools for YouTube live streaming.
"""

from . import live

__all__ = [
    "live",
]
