"""Security camera monitor: opening, closing and moving between cameras."""

from __future__ import annotations

from typing import Protocol

_RETICLE_POSITIONS: tuple[tuple[int, int], ...] = (
    (353, 115),
    (348, 140),
    (333, 172),
    (352, 215),
    (352, 232),
    (323, 210),
    (395, 215),
    (395, 232),
    (307, 150),
    (435, 202),
    (440, 150),
)

_LEFT = {1: 8, 2: 8, 3: 5, 4: 5, 6: 3, 7: 3, 9: 6, 10: 1}
_RIGHT = {1: 10, 2: 10, 3: 6, 4: 6, 6: 9, 7: 9, 5: 3, 8: 1}
_UP = {1: 0, 2: 1, 3: 2, 4: 3, 7: 6, 9: 10}
_DOWN = {0: 1, 1: 2, 2: 3, 3: 4, 6: 7, 10: 9}

LAST_FLIP_FRAME = 3


class _Player(Protocol):
    def play(self, name: str) -> object: ...


def reticle_position(camera: int) -> tuple[int, int]:
    """Return the map position of the marker for a camera."""
    if not 0 <= camera < len(_RETICLE_POSITIONS):
        raise ValueError(f"no camera {camera}")
    return _RETICLE_POSITIONS[camera]


class CameraSystem:
    """State of the camera monitor."""

    def __init__(self, sounds: _Player) -> None:
        self.sounds = sounds
        self.reset()

    def reset(self) -> None:
        self.camera = 0
        self.using = False
        self.opening = False
        self.closing = False
        self.frame = 0
        self.wait_frames = 1
        self.delay = 3
        self.reticle = reticle_position(0)

    def toggle(self) -> None:
        """Start opening or closing the monitor."""
        if not self.opening and not self.using:
            self.opening = True
            self.sounds.play("open_cam")
        elif not self.closing and self.using:
            self.closing = True
            self.sounds.play("close_cam")

    def open_step(self) -> None:
        """Advance the opening animation by one frame."""
        if self.wait_frames > 0:
            self.wait_frames -= 1
        elif self.frame < LAST_FLIP_FRAME:
            self.frame += 1
            self.wait_frames = 1
        else:
            self.opening = False
            self.using = True

    def close_step(self) -> None:
        """Advance the closing animation by one frame."""
        if self.delay > 0:
            self.delay -= 1
        elif self.wait_frames > 0:
            self.wait_frames -= 1
        elif self.frame > 0:
            self.frame -= 1
            self.wait_frames = 1
        else:
            self.closing = False
            self.using = False
            self.delay = 2

    def _move(self, table: dict[int, int]) -> None:
        if not self.using:
            return
        self.camera = table.get(self.camera, self.camera)
        self.sounds.play("switch")
        self.update_reticle()

    def left(self) -> None:
        self._move(_LEFT)

    def right(self) -> None:
        self._move(_RIGHT)

    def up(self) -> None:
        self._move(_UP)

    def down(self) -> None:
        self._move(_DOWN)

    def update_reticle(self) -> None:
        self.reticle = reticle_position(self.camera)