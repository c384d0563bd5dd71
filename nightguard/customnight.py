"""Custom night setup: choosing each animatronic's difficulty level."""

from __future__ import annotations

from enum import Enum

from nightguard.animatronic import Animatronic, AnimatronicSystem

MAX_LEVEL = 20
MIN_LEVEL = 0
CUSTOM_NIGHT = 7
CRASH_FRAMES = 300
SECRET_LEVELS = (1, 9, 8, 7)

NAMES = ("freddy", "bonnie", "chika", "foxy")
RETICLE_X = (60, 160, 260, 360)


class CreateResult(Enum):
    """What pressing "create" led to."""

    IGNORED = "ignored"
    CRASH = "crash"
    START_NIGHT = "start_night"


class CustomNight:
    """The custom night menu and the levels it edits."""

    def __init__(self, animatronics: AnimatronicSystem) -> None:
        self.animatronics = animatronics
        self.must_crash = False
        self.crash_delay = CRASH_FRAMES
        self.reset()

    def reset(self) -> None:
        """Put the reticle back on the first animatronic."""
        self.reticle_position = 0
        self.reticle_x = RETICLE_X[0]
        self.editing = NAMES[0]

    def _edited(self) -> Animatronic:
        return self.animatronics.animatronics[NAMES.index(self.editing)]

    def plus(self) -> None:
        """Raise the edited animatronic's level by one, up to 20."""
        if self.must_crash:
            return
        target = self._edited()
        if target.total_level < MAX_LEVEL:
            target.total_level += 1
            target.level_ones += 1
        self._carry(target)

    def minus(self) -> None:
        """Lower the edited animatronic's level by one, down to 0."""
        if self.must_crash:
            return
        target = self._edited()
        if target.total_level > MIN_LEVEL:
            target.total_level -= 1
            target.level_ones -= 1
        self._carry(target)

    @staticmethod
    def _carry(target: Animatronic) -> None:
        if target.level_ones == 10:
            target.level_ones = 0
            target.level_tenths += 1
        elif target.level_ones < 0 and target.level_tenths > 0:
            target.level_ones = 9
            target.level_tenths -= 1

    def move_left(self) -> None:
        if not self.must_crash and self.reticle_position > 0:
            self.reticle_position -= 1

    def move_right(self) -> None:
        if not self.must_crash and self.reticle_position < len(NAMES) - 1:
            self.reticle_position += 1

    def update_position(self) -> None:
        """Move the reticle on screen and pick the animatronic under it."""
        if self.must_crash:
            return
        self.reticle_x = RETICLE_X[self.reticle_position]
        self.editing = NAMES[self.reticle_position]

    def create(self) -> CreateResult:
        """Start the custom night, or trigger the secret for levels 1/9/8/7."""
        levels = tuple(a.total_level for a in self.animatronics.animatronics)
        if levels == SECRET_LEVELS:
            if self.must_crash:
                return CreateResult.IGNORED
            sounds = self.animatronics.sounds
            sounds.load("jumpscare2")
            sounds.play("jumpscare2")
            self.must_crash = True
            return CreateResult.CRASH
        self.animatronics.night = CUSTOM_NIGHT
        return CreateResult.START_NIGHT

    def exit(self) -> bool:
        """Leave for the main menu; return False while the secret screen is up."""
        return not self.must_crash

    def tick_crash(self) -> bool:
        """Count down the secret screen; return True when the game must quit."""
        if not self.must_crash:
            return False
        if self.crash_delay <= 0:
            return True
        self.crash_delay -= 1
        return False