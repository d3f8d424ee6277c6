import os

import pytest

from tal.utils.paths import is_path_segment

@pytest.mark.parametrize("value", ["default", "generic-tv1", "hbbtv.1", "..hidden"])
def test_plain_names_are_segments(value):
    assert is_path_segment(value)

@pytest.mark.parametrize("value", ["", ".", "..", "a/b", "/etc", os.sep + "etc", "../default"])
def test_other_names_are_not_segments(value):
    assert not is_path_segment(value)
