"""
Shared utilities for CVGEN.

Common functionality used across contexts:
- Logger configuration
- Timestamps for log directories
"""

from cvgen.utils.timestamp import now

__all__ = ["now"]
