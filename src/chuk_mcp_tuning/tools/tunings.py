"""
Tuning tools - MCP tools for tunings, intonation and frequency units.

Tools for listing tunings, evaluating interval ratios, computing the
frequency of a pitch, converting frequencies between units and copying
tunings into the project for customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tuning.constants import STANDARD_ANCHOR_HZ, STANDARD_ANCHOR_NAME, ErrorMessages
from chuk_mcp_tuning.core.absolute import Hertz, cents, fifths, octaves
from chuk_mcp_tuning.core.intonation import intone
from chuk_mcp_tuning.core.pitch import Interval, Pitch
from chuk_mcp_tuning.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_tuning_tools(mcp: ChukMCPServer, loader: TuningLoader) -> dict[str, Any]:
    """
    Register tuning tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_list_tunings() -> str:
        """
        List available tunings.

        Returns built-in, library and project tunings with their references.

        Returns:
            JSON string with list of tuning summaries

        Example:
            tuning_list_tunings()
        """
        try:
            tunings = loader.list_tunings()
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [t.model_dump(mode="json") for t in tunings],
                    "count": len(tunings),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_list_tunings"] = tuning_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_interval_ratio(interval: str, tuning: str = "twelve-tone-equal") -> str:
        """
        Get the frequency ratio of an interval in a tuning.

        Args:
            interval: Interval notation (e.g., 'P5', 'M3')
            tuning: Tuning name (default: 'twelve-tone-equal')

        Returns:
            JSON string with ratio and size in cents

        Example:
            tuning_interval_ratio(interval="M3", tuning="quarter-comma-meantone")
        """
        try:
            tuned = loader.get_tuning(tuning)
            if tuned is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TUNING_NOT_FOUND.format(name=tuning)}
                )

            parsed = Interval.parse(interval)
            return json.dumps(
                {
                    "status": "success",
                    "interval": str(parsed),
                    "tuning": tuning,
                    "ratio": tuned.ratio(parsed),
                    "cents": tuned.cents(parsed).value,
                }
            )
        except Exception as e:
            logger.exception("Failed to compute interval ratio")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_interval_ratio"] = tuning_interval_ratio

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_pitch_frequency(
        pitch: str,
        tuning: str = "twelve-tone-equal",
        anchor_pitch: str = STANDARD_ANCHOR_NAME,
        anchor_hz: float = STANDARD_ANCHOR_HZ,
    ) -> str:
        """
        Get the absolute frequency of a pitch.

        The tuning is anchored by fixing one pitch to one frequency.
        Defaults give modern standard intonation (12-TET, A4 = 440 Hz).

        Args:
            pitch: Pitch notation (e.g., 'C4', 'Bb3')
            tuning: Tuning name (default: 'twelve-tone-equal')
            anchor_pitch: Pitch with known frequency (default: 'A4')
            anchor_hz: Frequency of the anchor pitch (default: 440.0)

        Returns:
            JSON string with the frequency in Hz

        Example:
            tuning_pitch_frequency(pitch="E4", tuning="pythagorean", anchor_hz=415.0)
        """
        try:
            if anchor_hz <= 0:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.NON_POSITIVE_FREQUENCY.format(value=anchor_hz),
                    }
                )

            tuned = loader.get_tuning(tuning)
            if tuned is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TUNING_NOT_FOUND.format(name=tuning)}
                )

            intonation = intone((Pitch.parse(anchor_pitch), Hertz(anchor_hz)), tuned)
            parsed = Pitch.parse(pitch)
            hertz = intonation(parsed)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": str(parsed),
                    "tuning": tuning,
                    "frequency": hertz.value,
                    "display": str(hertz),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute pitch frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_pitch_frequency"] = tuning_pitch_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_convert_frequency(hertz: float) -> str:
        """
        Express a frequency (or ratio) in octaves, fifths and cents.

        Args:
            hertz: Positive frequency or frequency ratio

        Returns:
            JSON string with the logarithmic measures

        Example:
            tuning_convert_frequency(hertz=1.5)
        """
        try:
            if hertz <= 0:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.NON_POSITIVE_FREQUENCY.format(value=hertz),
                    }
                )

            value = Hertz(hertz)
            return json.dumps(
                {
                    "status": "success",
                    "hertz": value.value,
                    "octaves": octaves(value).value,
                    "fifths": fifths(value).value,
                    "cents": cents(value).value,
                }
            )
        except Exception as e:
            logger.exception("Failed to convert frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_convert_frequency"] = tuning_convert_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_copy_to_project(name: str) -> str:
        """
        Copy a library or built-in tuning to the project for customization.

        Args:
            name: Tuning name

        Returns:
            JSON string with path to copied definition

        Example:
            tuning_copy_to_project(name="quarter-comma-meantone")
        """
        try:
            path = loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TUNING_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": "Tuning copied to project",
                    "path": str(path),
                    "hint": "Edit the reference ratios in the YAML file to retune",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy tuning")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_copy_to_project"] = tuning_copy_to_project

    return tools
