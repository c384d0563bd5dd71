"""A double-buffered 480x272 frame buffer with 512-texel lines."""

from __future__ import annotations

from nightguard.canvas import Image, _line_points

LINE_SIZE = 512
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 272
FRAMEBUFFER_TEXELS = LINE_SIZE * SCREEN_HEIGHT


class Screen:
    """Two frame buffers, one shown while the other is drawn into.

    Drawing calls that go through the graphics engine (clear, fill, blit and
    flip) do nothing until :meth:`initialize` has been called or after
    :meth:`disable`; direct pixel access always works.
    """

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT

    def __init__(self) -> None:
        self._buffers = ([0] * FRAMEBUFFER_TEXELS, [0] * FRAMEBUFFER_TEXELS)
        self._display = 0
        self.initialized = False

    def initialize(self) -> None:
        """Start the display with buffer 0 shown and a cleared draw buffer."""
        self._display = 0
        self.initialized = True
        self.clear(0)

    def disable(self) -> None:
        self.initialized = False

    def draw_buffer(self) -> list[int]:
        """Return the buffer currently being drawn into."""
        return self._buffers[self._display ^ 1]

    def display_buffer(self) -> list[int]:
        """Return the buffer currently being shown."""
        return self._buffers[self._display]

    def flip(self) -> None:
        """Exchange the display and draw buffers."""
        if self.initialized:
            self._display ^= 1

    @staticmethod
    def _index(x: int, y: int) -> int:
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            raise IndexError(
                f"pixel ({x}, {y}) outside {SCREEN_WIDTH}x{SCREEN_HEIGHT}"
            )
        return x + y * LINE_SIZE

    @staticmethod
    def _check_rect(x: int, y: int, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"negative rectangle size {width}x{height}")
        if x < 0 or y < 0 or x + width > SCREEN_WIDTH or y + height > SCREEN_HEIGHT:
            raise ValueError(
                f"rectangle ({x}, {y}, {width}, {height}) outside "
                f"{SCREEN_WIDTH}x{SCREEN_HEIGHT}"
            )

    def clear(self, color: int) -> None:
        """Fill the visible part of the draw buffer with ``color``."""
        if not self.initialized:
            return
        buffer = self.draw_buffer()
        row = [color] * SCREEN_WIDTH
        for y in range(SCREEN_HEIGHT):
            start = y * LINE_SIZE
            buffer[start:start + SCREEN_WIDTH] = row

    def fill_rect(self, color: int, x0: int, y0: int, width: int, height: int) -> None:
        if not self.initialized:
            return
        self._check_rect(x0, y0, width, height)
        buffer = self.draw_buffer()
        for y in range(y0, y0 + height):
            start = y * LINE_SIZE + x0
            buffer[start:start + width] = [color] * width

    def put_pixel(self, color: int, x: int, y: int) -> None:
        self.draw_buffer()[self._index(x, y)] = color

    def get_pixel(self, x: int, y: int) -> int:
        return self.draw_buffer()[self._index(x, y)]

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        self._index(x0, y0)
        self._index(x1, y1)
        buffer = self.draw_buffer()
        for x, y in _line_points(x0, y0, x1, y1):
            buffer[x + y * LINE_SIZE] = color

    def blit(
        self, source: Image, sx: int, sy: int, width: int, height: int, dx: int, dy: int
    ) -> None:
        """Copy a rectangle of ``source`` unchanged into the draw buffer."""
        if not self.initialized:
            return
        if width < 0 or height < 0:
            raise ValueError(f"negative rectangle size {width}x{height}")
        if sx < 0 or sy < 0 or sx + width > source.width or sy + height > source.height:
            raise ValueError(
                f"rectangle ({sx}, {sy}, {width}, {height}) outside "
                f"{source.width}x{source.height}"
            )
        self._check_rect(dx, dy, width, height)
        buffer = self.draw_buffer()
        for row in range(height):
            src = (sy + row) * source.texture_width + sx
            dst = (dy + row) * LINE_SIZE + dx
            buffer[dst:dst + width] = source.pixels[src:src + width]