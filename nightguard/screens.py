"""Timed screens shown after death and at the ending."""

from __future__ import annotations

from collections.abc import Callable

STATIC_FRAMES = 4
DEAD_FRAMES = 600
ENDING_FRAMES = 3660
DEAD_STATIC_PERIOD = 5


class StaticAnimation:
    """Cycles through the static overlay frames at a fixed pace."""

    def __init__(self, period: int, initial_wait: int) -> None:
        self.period = period
        self.wait = initial_wait
        self.frame = 0

    def advance(self) -> int:
        """Count down one tick, moving to the next frame when due; return the frame."""
        if self.wait <= 0:
            self.frame = (self.frame + 1) % STATIC_FRAMES
            self.wait = self.period
        else:
            self.wait -= 1
        return self.frame


class CountdownScreen:
    """A screen that calls ``on_done`` once a number of frames have passed."""

    def __init__(self, frames: int, on_done: Callable[[], object]) -> None:
        if frames < 0:
            raise ValueError(f"frame count {frames} must not be negative")
        self.frames = frames
        self.on_done = on_done
        self.remaining = frames

    def tick(self) -> bool:
        """Advance one frame; return True when the countdown finished this frame."""
        if self.remaining <= 0:
            self.on_done()
            self.remaining = self.frames
            return True
        self.remaining -= 1
        return False

    def reset(self) -> None:
        self.remaining = self.frames


def dead_screen(on_done: Callable[[], object]) -> CountdownScreen:
    """The game-over static screen, which returns to the menu after 600 frames."""
    screen = CountdownScreen(DEAD_FRAMES, on_done)
    screen.static = StaticAnimation(DEAD_STATIC_PERIOD, DEAD_STATIC_PERIOD)
    return screen


def ending_screen(on_done: Callable[[], object]) -> CountdownScreen:
    """The ending picture, which returns to the menu after 3660 frames."""
    return CountdownScreen(ENDING_FRAMES, on_done)