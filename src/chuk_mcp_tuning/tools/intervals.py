"""
Interval tools - MCP tools for interval arithmetic and spelling.

Tools for describing intervals, stacking them, measuring the interval
between two pitches, and spelling semitone counts.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tuning.core.pitch import Interval, Pitch, spell

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def describe_interval(interval: Interval) -> dict[str, Any]:
    """JSON-ready description of an interval."""
    return {
        "name": str(interval),
        "quality": interval.quality.kind.value,
        "quality_count": interval.quality.count,
        "number": int(interval.number),
        "chromatic_steps": interval.chromatic_steps,
        "diatonic_steps": interval.diatonic_steps,
        "semitones": int(interval.semitones),
        "octaves": interval.octaves,
        "steps": int(interval.steps),
        "simple": str(interval.simple()),
        "compound": interval.is_compound,
    }


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_describe_interval(interval: str) -> str:
        """
        Describe an interval.

        Returns quality, number, generator counts and semitone size.

        Args:
            interval: Interval notation (e.g., 'm3', 'P5', 'AA4', '-M2')

        Returns:
            JSON string with interval details

        Example:
            tuning_describe_interval(interval="A4")
        """
        try:
            parsed = Interval.parse(interval)
            return json.dumps({"status": "success", "interval": describe_interval(parsed)})
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_describe_interval"] = tuning_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_add_intervals(intervals: list[str]) -> str:
        """
        Stack intervals on top of each other.

        Spelling is preserved: m3 + M3 is P5, d5 + M6 is m10.

        Args:
            intervals: Interval notations to add

        Returns:
            JSON string with the resulting interval

        Example:
            tuning_add_intervals(intervals=["m3", "M3"])
        """
        try:
            total = Interval.P1
            for name in intervals:
                total = total + Interval.parse(name)
            return json.dumps({"status": "success", "interval": describe_interval(total)})
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_add_intervals"] = tuning_add_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_interval_between(from_pitch: str, to_pitch: str) -> str:
        """
        Get the interval from one pitch to another.

        Args:
            from_pitch: Starting pitch (e.g., 'C4')
            to_pitch: Target pitch (e.g., 'Eb4')

        Returns:
            JSON string with the interval

        Example:
            tuning_interval_between(from_pitch="C4", to_pitch="F#4")
        """
        try:
            result = Pitch.parse(to_pitch) - Pitch.parse(from_pitch)
            return json.dumps({"status": "success", "interval": describe_interval(result)})
        except Exception as e:
            logger.exception("Failed to measure interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_interval_between"] = tuning_interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_spell(semitones: int, prefer_flats: bool = False) -> str:
        """
        Spell a number of semitones as an interval.

        The spelling basis is explicit: a tritone is A4 with sharps, d5 with flats.

        Args:
            semitones: Interval size in semitones (may be negative)
            prefer_flats: Use the flat basis instead of sharps

        Returns:
            JSON string with the spelled interval

        Example:
            tuning_spell(semitones=6, prefer_flats=True)
        """
        try:
            result = spell(semitones, prefer_flats)
            return json.dumps({"status": "success", "interval": describe_interval(result)})
        except Exception as e:
            logger.exception("Failed to spell interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_spell"] = tuning_spell

    return tools
