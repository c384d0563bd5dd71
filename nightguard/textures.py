"""Textures loaded from or saved to PNG and Targa files."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from os import PathLike, fspath
from typing import Union

from PIL import Image as _PILImage

MAX_TEXTURE_SIZE = 512
FORMAT_8888 = 3

_Path = Union[str, "PathLike[str]"]


def _fit_texture(size: int) -> int:
    if not 0 < size <= MAX_TEXTURE_SIZE:
        raise ValueError(f"texture size {size} outside 1..{MAX_TEXTURE_SIZE}")
    texture = MAX_TEXTURE_SIZE
    while (texture >> 1) >= size:
        texture >>= 1
    return texture


class Texture:
    """A 32-bit texture; rows are ``texture_width`` texels apart."""

    def __init__(self, width: int, height: int, filename: str) -> None:
        self.image_width = width
        self.image_height = height
        self.texture_width = _fit_texture(width)
        self.texture_height = _fit_texture(height)
        self.filename = filename
        self.format = FORMAT_8888
        self.is_swizzled = False
        self.vram = False
        self.palette = None
        self.pixels: list[int] = [0] * (height * self.texture_width)

    def __repr__(self) -> str:
        return f"Texture({self.image_width}, {self.image_height}, {self.filename!r})"

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.image_width and 0 <= y < self.image_height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.image_width}x{self.image_height}"
            )
        return x + y * self.texture_width

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self._index(x, y)]

    def put_pixel(self, color: int, x: int, y: int) -> None:
        self.pixels[self._index(x, y)] = color


def new_texture(width: int, height: int) -> Texture:
    """Create an empty texture named after its size."""
    return Texture(width, height, f"local{width}x{height}\n")


def _png_name(name: str) -> str:
    for suffix in (".jpg", ".JPG"):
        position = name.find(suffix)
        if position != -1:
            name = name[:position] + ".png"
    return name


def load_png(path: _Path) -> Texture:
    """Load a PNG of at most 512x512 pixels.

    A ``.jpg`` or ``.JPG`` in the name is read as ``.png`` instead; the
    texture keeps the name it was asked for.
    """
    requested = fspath(path)
    with _PILImage.open(_png_name(requested)) as picture:
        width, height = picture.size
        if width > MAX_TEXTURE_SIZE or height > MAX_TEXTURE_SIZE:
            raise ValueError(
                f"image {width}x{height} larger than "
                f"{MAX_TEXTURE_SIZE}x{MAX_TEXTURE_SIZE}"
            )
        raw = picture.convert("RGBA").tobytes()
    texture = Texture(width, height, requested)
    colors = [value for (value,) in struct.iter_unpack("<I", raw)]
    for y in range(height):
        start = y * texture.texture_width
        texture.pixels[start:start + width] = colors[y * width:(y + 1) * width]
    return texture


def _rows(data: Sequence[int], width: int, height: int, line_size: int):
    for y in range(height):
        yield data[y * line_size:y * line_size + width]


def save_png(
    path: _Path,
    data: Sequence[int],
    width: int,
    height: int,
    line_size: int,
    save_alpha: bool,
) -> None:
    """Write ``width`` x ``height`` colours, rows ``line_size`` apart, as PNG."""
    mode = "RGBA" if save_alpha else "RGB"
    raw = bytearray()
    for row in _rows(data, width, height, line_size):
        for color in row:
            packed = (color & 0xFFFFFFFF).to_bytes(4, "little")
            raw += packed if save_alpha else packed[:3]
    _PILImage.frombytes(mode, (width, height), bytes(raw)).save(path, format="PNG")


def save_targa(
    path: _Path,
    data: Sequence[int],
    width: int,
    height: int,
    line_size: int,
    save_alpha: bool,
) -> None:
    """Write an uncompressed 24-bit Targa file; alpha is never stored."""
    header = struct.pack(
        "<BBBhhBhhhhBB", 0, 0, 2, 0, 0, 0, 0, 0, width, height, 24, 0
    )
    body = bytearray()
    for row in reversed(list(_rows(data, width, height, line_size))):
        for color in row:
            body += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    with open(path, "wb") as handle:
        handle.write(header)
        handle.write(body)