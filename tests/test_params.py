import dataclasses

import pytest

from zeroengine.params import AppParams


def test_defaults_match_command_line_defaults():
    params = AppParams()
    assert params.app_title == "Zero Engine"
    assert params.window_height == 600
    assert params.window_width == 800


def test_custom_values_are_kept():
    params = AppParams(app_title="Demo", window_height=480, window_width=640)
    assert (params.app_title, params.window_height, params.window_width) == ("Demo", 480, 640)


def test_params_are_immutable():
    params = AppParams()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.window_width = 1024  # type: ignore[misc]
    assert params.window_width == 800


@pytest.mark.parametrize("field_name", ["window_height", "window_width"])
def test_negative_sizes_are_rejected(field_name):
    with pytest.raises(ValueError, match=field_name):
        AppParams(**{field_name: -1})


def test_equal_params_compare_equal():
    first = AppParams(app_title="A", window_height=1, window_width=2)
    second = AppParams(app_title="A", window_height=1, window_width=2)
    assert dataclasses.asdict(first) == {"app_title": "A", "window_height": 1, "window_width": 2}
    assert first == second
    assert not first == AppParams(app_title="B", window_height=1, window_width=2)