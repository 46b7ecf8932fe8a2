import pytest

from friendlyjam.layout import Vec2
from friendlyjam.rendering import TARGET_SIZE, Color, TextRenderOptions, get_pixel_scale


def test_pixel_scale_at_target_size():
    assert get_pixel_scale(TARGET_SIZE) == 1.0


@pytest.mark.parametrize("size", [(1920, 1080), (800, 1000), (3000, 200), (640, 720)])
def test_pixel_scale_fits_framebuffer(size):
    scale = get_pixel_scale(size)
    scaled_w = TARGET_SIZE[0] * scale
    scaled_h = TARGET_SIZE[1] * scale
    assert scaled_w <= size[0] + 1e-9
    assert scaled_h <= size[1] + 1e-9
    assert scaled_w == pytest.approx(size[0]) or scaled_h == pytest.approx(size[1])


def test_pixel_scale_is_linear():
    assert get_pixel_scale((1280, 900)) * 2 == pytest.approx(get_pixel_scale((2560, 1800)))


def test_default_options():
    options = TextRenderOptions()
    assert options.size == 1.0
    assert options.align == Vec2(0.5, 0.5)
    assert options.color == Color.WHITE
    assert options.hover_color == Color(0.7, 0.7, 0.7, 1.0)
    assert options.press_color == Color(0.5, 0.5, 0.5, 1.0)
    assert options.rotation == 0.0


def test_with_size_keeps_other_defaults():
    options = TextRenderOptions.with_size(12.0)
    assert options.size == 12.0
    assert options.align == TextRenderOptions().align
    assert options.color == TextRenderOptions().color


def test_aligned_returns_copy():
    base = TextRenderOptions.with_size(3.0)
    aligned = base.aligned((0.0, 1.0))
    assert aligned.align == Vec2(0.0, 1.0)
    assert aligned.size == 3.0
    assert base.align == Vec2(0.5, 0.5)


def test_colored_returns_copy():
    base = TextRenderOptions()
    colored = base.colored(Color.BLUE)
    assert colored.color == Color.BLUE
    assert base.color == Color.WHITE


def test_color_constants():
    assert Color.TRANSPARENT_BLACK.a == 0.0
    assert Color.BLACK == Color(0.0, 0.0, 0.0)