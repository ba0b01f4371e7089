"""
Tuning catalog - named tunings as built-ins and YAML definitions.

Library definitions ship with the package; project definitions let users
add or override tunings without touching code.
"""

from chuk_mcp_tuning.tunings.loader import TuningLoader, builtin_definition

__all__ = [
    "TuningLoader",
    "builtin_definition",
]
