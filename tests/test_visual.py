import pytest

from fdfwave.visual import good_color, rgb_shifts

RGB565 = (0xF800, 0x07E0, 0x001F)


def test_shifts_for_888_visual():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_565_visual():
    assert rgb_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


def test_zero_mask_is_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(0xFF0000, 0, 0xFF)


def test_deep_visual_keeps_colour():
    shifts = rgb_shifts(*RGB565)
    assert good_color(0x123456, 24, shifts) == 0x123456
    assert good_color(0x123456, 32, shifts) == 0x123456


def test_white_fills_every_mask():
    shifts = rgb_shifts(*RGB565)
    red, green, blue = RGB565
    assert good_color(0xFFFFFF, 16, shifts) == red | green | blue


def test_black_is_zero():
    shifts = rgb_shifts(*RGB565)
    assert good_color(0x000000, 16, shifts) == 0


@pytest.mark.parametrize("color, mask", [(0xFF0000, 0xF800), (0x00FF00, 0x07E0), (0x0000FF, 0x001F)])
def test_pure_channels_land_in_their_mask(color, mask):
    shifts = rgb_shifts(*RGB565)
    assert good_color(color, 16, shifts) == mask