import pytest
from PIL import Image as PILImage

from nightguard.canvas import (
    Image,
    alpha,
    blue,
    green,
    is_opaque,
    load_image,
    next_power_of_two,
    red,
)


@pytest.mark.parametrize("width", [1, 2, 3, 5, 7, 100, 272, 300, 480, 511, 512])
def test_next_power_of_two_invariant(width):
    size = next_power_of_two(width)
    assert size & (size - 1) == 0
    assert width <= size < 2 * width or size == width


def test_next_power_of_two_screen_width():
    assert next_power_of_two(480) == 512
    assert next_power_of_two(512) == 512


def test_next_power_of_two_negative():
    with pytest.raises(ValueError):
        next_power_of_two(-1)


def test_channels():
    color = 0x11223344
    assert red(color) == 0x44
    assert green(color) == 0x33
    assert blue(color) == 0x22
    assert alpha(color) == 0x11


def test_is_opaque():
    assert is_opaque(0xFF000000)
    assert not is_opaque(0xFE000000)
    assert not is_opaque(0x00FFFFFF)


def test_new_image_is_blank_with_texture_size():
    image = Image(5, 3)
    assert image.texture_width == next_power_of_two(5)
    assert image.texture_height == next_power_of_two(3)
    assert len(image.pixels) == image.texture_width * image.texture_height
    assert set(image.pixels) == {0}


@pytest.mark.parametrize("size", [(0, 4), (4, 0), (513, 4), (4, 513)])
def test_bad_image_size(size):
    with pytest.raises(ValueError):
        Image(*size)


def test_put_get_roundtrip():
    image = Image(10, 10)
    image.put_pixel(0xFF123456, 9, 9)
    assert image.get_pixel(9, 9) == 0xFF123456
    assert image.get_pixel(0, 0) == 0


def test_pixel_out_of_range():
    image = Image(10, 10)
    with pytest.raises(IndexError):
        image.get_pixel(10, 0)
    with pytest.raises(IndexError):
        image.put_pixel(1, 0, -1)


def test_clear_fills_texture():
    image = Image(5, 5)
    image.clear(0xFF0000FF)
    assert set(image.pixels) == {0xFF0000FF}


def test_fill_rect():
    image = Image(8, 8)
    image.fill_rect(7, 2, 3, 4, 2)
    filled = {(x, y) for y in range(8) for x in range(8) if image.get_pixel(x, y) == 7}
    assert filled == {(x, y) for x in range(2, 6) for y in range(3, 5)}


def test_fill_rect_outside():
    with pytest.raises(ValueError):
        Image(8, 8).fill_rect(1, 6, 0, 4, 1)


def test_blit_copies_rectangle():
    source = Image(4, 4)
    for y in range(4):
        for x in range(4):
            source.put_pixel(x + 10 * y, x, y)
    target = Image(6, 6)
    target.blit(source, 1, 1, 2, 2, 3, 4)
    assert target.get_pixel(3, 4) == source.get_pixel(1, 1)
    assert target.get_pixel(4, 5) == source.get_pixel(2, 2)
    assert target.get_pixel(2, 4) == 0


def test_blit_outside_raises():
    with pytest.raises(ValueError):
        Image(4, 4).blit(Image(4, 4), 2, 0, 3, 1, 0, 0)


def test_blit_alpha_skips_transparent():
    source = Image(2, 1)
    source.put_pixel(0xFF00FF00, 0, 0)
    source.put_pixel(0x8000FF00, 1, 0)
    target = Image(2, 1)
    target.clear(0xFFFFFFFF)
    target.blit_alpha(source, 0, 0, 2, 1, 0, 0)
    assert target.get_pixel(0, 0) == 0xFF00FF00
    assert target.get_pixel(1, 0) == 0xFFFFFFFF


def test_draw_line_horizontal():
    image = Image(10, 10)
    image.draw_line(1, 2, 7, 2, 5)
    marked = {(x, y) for y in range(10) for x in range(10) if image.get_pixel(x, y) == 5}
    assert marked == {(x, 2) for x in range(1, 8)}


def test_draw_line_diagonal_and_endpoints():
    image = Image(10, 10)
    image.draw_line(8, 8, 0, 0, 3)
    assert all(image.get_pixel(i, i) == 3 for i in range(9))
    image.draw_line(0, 9, 4, 0, 4)
    assert image.get_pixel(0, 9) == 4
    assert image.get_pixel(4, 0) == 4
    rows = {y for y in range(10) for x in range(10) if image.get_pixel(x, y) == 4}
    assert rows == set(range(10))


def test_draw_line_out_of_range():
    with pytest.raises(IndexError):
        Image(4, 4).draw_line(0, 0, 4, 0, 1)


def test_png_roundtrip_with_alpha(tmp_path):
    image = Image(3, 2)
    image.put_pixel(0x80112233, 0, 0)
    image.put_pixel(0xFFABCDEF, 2, 1)
    path = tmp_path / "a.png"
    image.save_png(path, True)
    loaded = load_image(path)
    assert (loaded.width, loaded.height) == (3, 2)
    assert loaded.get_pixel(0, 0) == 0x80112233
    assert loaded.get_pixel(2, 1) == 0xFFABCDEF


def test_png_without_alpha_is_opaque(tmp_path):
    image = Image(2, 2)
    image.put_pixel(0x10112233, 1, 1)
    path = tmp_path / "b.png"
    image.save_png(path, False)
    loaded = load_image(path)
    assert loaded.get_pixel(1, 1) == 0xFF112233
    assert all(is_opaque(loaded.get_pixel(x, y)) for x in range(2) for y in range(2))


def test_load_grayscale_expands(tmp_path):
    path = tmp_path / "g.png"
    PILImage.new("L", (2, 2), 0x40).save(path)
    loaded = load_image(path)
    assert loaded.get_pixel(1, 0) == 0xFF404040


def test_load_too_large(tmp_path):
    path = tmp_path / "big.png"
    PILImage.new("RGB", (513, 1)).save(path)
    with pytest.raises(ValueError):
        load_image(path)


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(tmp_path / "missing.png")