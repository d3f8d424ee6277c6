"""
Utility helpers for the TAL page strategy layer.
"""

from tal.utils.keys import normalise_key_names, keys_match

__all__ = ['normalise_key_names', 'keys_match']
