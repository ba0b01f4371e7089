#!/usr/bin/env python3
"""
Async Tuning MCP Server using chuk-mcp-server

This server provides MCP tools for interval algebra and intonation.
Intervals are exact (spelling is kept), tunings are defined by two
reference intervals, and intonations anchor a tuning at one frequency.

The server provides tools for:
- Describing, stacking and spelling intervals
- Listing built-in, library and project tunings
- Copying tunings into the project for customization
- Evaluating interval ratios in any tuning
- Computing absolute pitch frequencies
- Converting frequencies to octaves, fifths and cents
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tuning.tools import register_interval_tools, register_tuning_tools
from chuk_mcp_tuning.tunings import TuningLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tuning")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
TUNINGS_DIR = BASE_PATH / "tunings"
TUNINGS_LIBRARY_PATH = Path(__file__).parent / "tunings" / "library"

tuning_loader = TuningLoader(
    library_path=TUNINGS_LIBRARY_PATH,
    project_path=TUNINGS_DIR,
)

# Register all tools
interval_tools = register_interval_tools(mcp)
tuning_tools = register_tuning_tools(mcp, tuning_loader)

# Export tool functions for direct access
tuning_describe_interval = interval_tools["tuning_describe_interval"]
tuning_add_intervals = interval_tools["tuning_add_intervals"]
tuning_interval_between = interval_tools["tuning_interval_between"]
tuning_spell = interval_tools["tuning_spell"]

tuning_list_tunings = tuning_tools["tuning_list_tunings"]
tuning_interval_ratio = tuning_tools["tuning_interval_ratio"]
tuning_pitch_frequency = tuning_tools["tuning_pitch_frequency"]
tuning_convert_frequency = tuning_tools["tuning_convert_frequency"]
tuning_copy_to_project = tuning_tools["tuning_copy_to_project"]

logger.info("CHUK Tuning MCP Server initialized")
logger.info(f"  Library path: {TUNINGS_LIBRARY_PATH}")
logger.info(f"  Project tunings dir: {TUNINGS_DIR}")


def use_tunings_dir(path: Path) -> None:
    """
    Point the tuning loader at another project tunings directory.

    Registered tools see the new directory on their next call.
    """
    tuning_loader.project_path = path
    tuning_loader.clear_cache()
    logger.info(f"  Project tunings dir: {path}")
