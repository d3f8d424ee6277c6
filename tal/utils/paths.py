"""
Path helpers for names that come from configuration data.
"""

import os


def is_path_segment(value: str) -> bool:
    """Check that ``value`` names a plain directory entry: not empty, not "." or "..", no separators."""
    if not value or value in (".", ".."):
        return False
    if "/" in value or os.sep in value:
        return False
    return os.altsep is None or os.altsep not in value
