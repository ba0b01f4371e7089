"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Interval arithmetic and spelling
- tunings - Tuning catalog, ratios, intonation and frequency units
"""

from chuk_mcp_tuning.tools.intervals import register_interval_tools
from chuk_mcp_tuning.tools.tunings import register_tuning_tools

__all__ = [
    "register_interval_tools",
    "register_tuning_tools",
]
