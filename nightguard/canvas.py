"""Off-screen 32-bit images with power-of-two backing textures.

Colours are 32-bit integers laid out as ``0xAABBGGRR``: red in the low byte,
alpha in the high byte.
"""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import Union

from PIL import Image as _PILImage

MAX_TEXTURE_SIZE = 512
OPAQUE = 0xFF

_Path = Union[str, "PathLike[str]"]


def next_power_of_two(width: int) -> int:
    """Return the smallest power of two not below ``width`` (1 for 0)."""
    if width < 0:
        raise ValueError(f"negative size {width}")
    size = 1 << width.bit_length()
    if size == 2 * width:
        size >>= 1
    return size


def red(color: int) -> int:
    return color & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return (color >> 16) & 0xFF


def alpha(color: int) -> int:
    return (color >> 24) & 0xFF


def is_opaque(color: int) -> bool:
    """Return whether a colour has full alpha."""
    return alpha(color) == OPAQUE


def _pack(r: int, g: int, b: int, a: int) -> int:
    return r | (g << 8) | (b << 16) | (a << 24)


def _check_size(width: int, height: int) -> None:
    for label, value in (("width", width), ("height", height)):
        if not 0 < value <= MAX_TEXTURE_SIZE:
            raise ValueError(
                f"image {label} {value} outside 1..{MAX_TEXTURE_SIZE}"
            )


def _line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a Bresenham line from (x0, y0) to (x1, y1)."""
    dy = y1 - y0
    dx = x1 - x0
    step_y = -1 if dy < 0 else 1
    step_x = -1 if dx < 0 else 1
    dy = abs(dy) << 1
    dx = abs(dx) << 1
    x, y = x0, y0
    yield x, y
    if dx > dy:
        fraction = dy - (dx >> 1)
        while x != x1:
            if fraction >= 0:
                y += step_y
                fraction -= dx
            x += step_x
            fraction += dy
            yield x, y
    else:
        fraction = dx - (dy >> 1)
        while y != y1:
            if fraction >= 0:
                x += step_x
                fraction -= dy
            y += step_y
            fraction += dx
            yield x, y


class Image:
    """An image whose pixels live in a texture of power-of-two size."""

    def __init__(self, width: int, height: int) -> None:
        _check_size(width, height)
        self.width = width
        self.height = height
        self.texture_width = next_power_of_two(width)
        self.texture_height = next_power_of_two(height)
        self.pixels: list[int] = [0] * (self.texture_width * self.texture_height)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return x + y * self.texture_width

    def _check_rect(self, x: int, y: int, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"negative rectangle size {width}x{height}")
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise ValueError(
                f"rectangle ({x}, {y}, {width}, {height}) outside "
                f"{self.width}x{self.height}"
            )

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self._index(x, y)]

    def put_pixel(self, color: int, x: int, y: int) -> None:
        self.pixels[self._index(x, y)] = color

    def clear(self, color: int) -> None:
        """Set every texel of the backing texture to ``color``."""
        self.pixels = [color] * len(self.pixels)

    def fill_rect(self, color: int, x0: int, y0: int, width: int, height: int) -> None:
        self._check_rect(x0, y0, width, height)
        for y in range(y0, y0 + height):
            start = y * self.texture_width + x0
            self.pixels[start:start + width] = [color] * width

    def blit(
        self, source: Image, sx: int, sy: int, width: int, height: int, dx: int, dy: int
    ) -> None:
        """Copy a rectangle of ``source`` into this image."""
        source._check_rect(sx, sy, width, height)
        self._check_rect(dx, dy, width, height)
        rows = [
            source.pixels[(sy + row) * source.texture_width + sx:][:width]
            for row in range(height)
        ]
        for row, line in enumerate(rows):
            start = (dy + row) * self.texture_width + dx
            self.pixels[start:start + width] = line

    def blit_alpha(
        self, source: Image, sx: int, sy: int, width: int, height: int, dx: int, dy: int
    ) -> None:
        """Copy only the fully opaque pixels of a rectangle of ``source``."""
        source._check_rect(sx, sy, width, height)
        self._check_rect(dx, dy, width, height)
        for row in range(height):
            src_start = (sy + row) * source.texture_width + sx
            dst_start = (dy + row) * self.texture_width + dx
            line = source.pixels[src_start:src_start + width]
            for offset, color in enumerate(line):
                if is_opaque(color):
                    self.pixels[dst_start + offset] = color

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        self._index(x0, y0)
        self._index(x1, y1)
        for x, y in _line_points(x0, y0, x1, y1):
            self.pixels[x + y * self.texture_width] = color

    def save_png(self, path: _Path, save_alpha: bool) -> None:
        """Write the visible part of the image as a PNG file."""
        mode = "RGBA" if save_alpha else "RGB"
        picture = _PILImage.new(mode, (self.width, self.height))
        rows = (
            self.pixels[y * self.texture_width:y * self.texture_width + self.width]
            for y in range(self.height)
        )
        if save_alpha:
            data = [(red(c), green(c), blue(c), alpha(c)) for row in rows for c in row]
        else:
            data = [(red(c), green(c), blue(c)) for row in rows for c in row]
        picture.putdata(data)
        picture.save(path, format="PNG")


def load_image(path: _Path) -> Image:
    """Load a PNG file of at most 512x512 pixels."""
    with _PILImage.open(path) as picture:
        width, height = picture.size
        if width > MAX_TEXTURE_SIZE or height > MAX_TEXTURE_SIZE:
            raise ValueError(
                f"image {width}x{height} larger than "
                f"{MAX_TEXTURE_SIZE}x{MAX_TEXTURE_SIZE}"
            )
        rgba = picture.convert("RGBA")
        data = list(rgba.getdata())
    image = Image(width, height)
    for y in range(height):
        start = y * image.texture_width
        image.pixels[start:start + width] = [
            _pack(*texel) for texel in data[y * width:(y + 1) * width]
        ]
    return image