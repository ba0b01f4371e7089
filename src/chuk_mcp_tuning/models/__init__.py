"""
Pydantic models for the tuning system.

This module provides:
- TuningDefinition: A tuning described as data (two references)
- TuningReference: An interval and its frequency ratio
- TuningMetadata: Lightweight listing view
"""

from chuk_mcp_tuning.models.tuning import (
    TuningDefinition,
    TuningMetadata,
    TuningReference,
)

__all__ = [
    "TuningDefinition",
    "TuningMetadata",
    "TuningReference",
]
