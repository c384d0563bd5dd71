"""Textured sprite drawing with alpha testing and source-over blending."""

from __future__ import annotations

from typing import Protocol

from nightguard.canvas import Image, alpha as _alpha


class _Target(Protocol):
    width: int
    height: int

    def get_pixel(self, x: int, y: int) -> int: ...

    def put_pixel(self, color: int, x: int, y: int) -> None: ...


def _blend(src: int, dst: int) -> int:
    a = _alpha(src)
    if a == 0xFF:
        return src
    inverse = 0xFF - a
    out = 0
    for shift in (0, 8, 16, 24):
        s = (src >> shift) & 0xFF
        d = (dst >> shift) & 0xFF
        out |= ((s * a + d * inverse + 127) // 255) << shift
    return out


def draw_sprite_alpha(
    target: _Target,
    source: Image,
    sx: int,
    sy: int,
    width: int,
    height: int,
    dx: int,
    dy: int,
    alpha: int,
) -> None:
    """Draw a rectangle of ``source`` onto ``target`` at (dx, dy).

    Texels are sampled with wrap-around, texels with zero alpha are dropped,
    the rest are blended over the target by their own alpha, and drawing is
    clipped to the target. Texturing replaces the vertex colour, so
    ``alpha`` (the vertex alpha, 0..255) does not change the result.
    """
    if not 0 <= alpha <= 0xFF:
        raise ValueError(f"alpha {alpha} outside 0..255")
    if width < 0 or height < 0:
        raise ValueError(f"negative sprite size {width}x{height}")
    x_start = max(dx, 0)
    x_stop = min(dx + width, target.width)
    y_start = max(dy, 0)
    y_stop = min(dy + height, target.height)
    tw, th = source.texture_width, source.texture_height
    for y in range(y_start, y_stop):
        row = ((sy + y - dy) % th) * tw
        for x in range(x_start, x_stop):
            texel = source.pixels[row + (sx + x - dx) % tw]
            if _alpha(texel) == 0:
                continue
            target.put_pixel(_blend(texel, target.get_pixel(x, y)), x, y)