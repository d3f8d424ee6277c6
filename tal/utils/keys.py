"""
Device identifier normalisation.

Device keys arrive from user agents, config files and query strings with no
guarantee about capitalisation or punctuation, so they are compared in a
normalised form.
"""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")


def normalise_key_names(value: str) -> str:
    """
    Replace every non-alphanumeric character with an underscore and lowercase the result.

    Example:
        >>> normalise_key_names("one$two(three")
        'one_two_three'
        >>> normalise_key_names("one_TWO_Three")
        'one_two_three'
    """
    return _NON_ALPHANUMERIC.sub("_", value).lower()


def keys_match(first: str, second: str) -> bool:
    """Check whether two device identifiers are equal once normalised."""
    return normalise_key_names(first) == normalise_key_names(second)
