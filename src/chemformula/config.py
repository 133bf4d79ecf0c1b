"""
Library configuration and settings.

Tunable parameters are centralized here for easy maintenance.
"""

__all__ = ["CONFIG"]

from typing import Any, Dict

# ====================================================================
# PARSER CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Parsing limits
    "max_depth": 200,  # Max parenthesis nesting, kept well under the interpreter recursion limit
    # Caching
    "cache_size": 256,  # Entries kept by parse_cached
    # Logging
    "log_level": "WARNING",  # CLI sink level when --verbose is not given
}
