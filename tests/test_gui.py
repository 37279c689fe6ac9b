import pytest

from arenahub.gui import WINDOW_MINIMAL_SIZE, GuiSettings, constrain_screen_size


def test_default_scale_is_one():
    assert GuiSettings().scale == 1.0


def test_large_enough_screen_is_left_alone():
    assert constrain_screen_size(1024.0, 768.0) is None


def test_exactly_minimal_screen_is_left_alone():
    assert constrain_screen_size(*WINDOW_MINIMAL_SIZE) is None


def test_small_screen_is_grown():
    assert constrain_screen_size(640.0, 480.0) == (801, 601)


@pytest.mark.parametrize(
    "width,height",
    [(100.0, 2000.0), (2000.0, 100.0), (10.0, 10.0), (799.9, 600.0)],
)
def test_constrained_size_exceeds_minimum(width, height):
    result = constrain_screen_size(width, height)
    assert result is not None
    new_width, new_height = result
    assert new_width > WINDOW_MINIMAL_SIZE[0]
    assert new_height > WINDOW_MINIMAL_SIZE[1]
    assert new_width >= width and new_height >= height


def test_larger_dimension_is_kept():
    result = constrain_screen_size(500.0, 900.0)
    assert result is not None
    assert result[1] == 901