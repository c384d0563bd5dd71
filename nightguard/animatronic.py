"""Night-time behaviour of the four animatronics and the shared office state."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Protocol

from nightguard.sounds import SoundBoard

_log = logging.getLogger(__name__)

ROLL_RANGE = 20
FORCE_RESET_FRAMES = 450

DOOR_POSITION = 6
FOXY_DOOR_POSITION = 4
BONNIE_SIDE_ROOM = 7
CHICA_SIDE_ROOMS = (7, 8, 9)

NIGHT_LEVELS: dict[int, tuple[int, int, int, int]] = {
    1: (0, 0, 0, 0),
    2: (0, 3, 1, 1),
    3: (1, 0, 5, 2),
    4: (1, 2, 4, 6),
    5: (3, 5, 7, 5),
    6: (4, 10, 12, 6),
}

_OFFICE_SOUNDS = (
    "buzz",
    "door",
    "scare",
    "switch",
    "laugh",
    "move",
    "walk",
    "run",
    "knock",
    "open_cam",
    "close_cam",
    "ambience",
    "fan",
)


class _Random(Protocol):
    def randrange(self, stop: int) -> int: ...


class Jumpscare(IntEnum):
    """Which animatronic caught the player."""

    NONE = 0
    FREDDY = 1
    BONNIE = 2
    CHICA = 3
    FOXY = 4


class Animatronic:
    """Common timing and movement-opportunity logic of one animatronic."""

    period = 0
    jumpscare = Jumpscare.NONE

    def __init__(self, system: AnimatronicSystem) -> None:
        self.system = system
        self.delay = self.period
        self.random_number = 0
        self.shown_position = 0
        self._clear()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self.position}, "
            f"level={self.total_level}, at_door={self.at_door})"
        )

    def _clear(self) -> None:
        self.level_ones = 0
        self.level_tenths = 0
        self.total_level = 0
        self.at_door = False
        self.position = 0

    def tick(self) -> None:
        """Count down one frame, rolling for a move when the delay runs out."""
        if self.delay <= 0:
            self.roll()
            self.delay = self.period
        else:
            self.delay -= 1

    def roll(self) -> None:
        """Draw a number in 0..19 and act on it."""
        self.random_number = self.system.rng.randrange(ROLL_RANGE)
        self._compare()

    def _compare(self) -> None:
        raise NotImplementedError

    def _reload(self) -> None:
        self.shown_position = self.position
        self.system._request_reload()

    def _attack(self) -> None:
        system = self.system
        system.jumpscaring = True
        system.which_jumpscare = self.jumpscare
        system._unload_main()


class Freddy(Animatronic):
    period = 650
    jumpscare = Jumpscare.FREDDY

    def _increment_difficulty(self) -> None:
        if self.system.night == 3:
            self.total_level = self.system.rng.randrange(3)

    def _compare(self) -> None:
        if self.random_number < self.total_level or self.position == DOOR_POSITION:
            if not self.at_door:
                self._opportunity()

    def _opportunity(self) -> None:
        system = self.system
        if self.position >= DOOR_POSITION:
            self.at_door = True
            if not system.jumpscaring and not system.right_closed and system.using_cams:
                self._attack()
            elif not system.jumpscaring and system.right_closed:
                self.at_door = False
                self.position = DOOR_POSITION
                self._reload()
        elif not system.using_cams and not system.is_moving:
            self.position += 1
            system._play("laugh")
            self._reload()


class Bonnie(Animatronic):
    period = 389
    jumpscare = Jumpscare.BONNIE

    def __init__(self, system: AnimatronicSystem) -> None:
        self.in_other_room = False
        super().__init__(system)

    def _compare(self) -> None:
        if not (self.random_number < self.total_level or self.position == DOOR_POSITION):
            return
        if self.position != BONNIE_SIDE_ROOM:
            if not self.in_other_room and not self.at_door:
                self._opportunity()
        elif self.in_other_room and not self.at_door:
            self.position = 2
            self._reload()
            self.in_other_room = False

    def _opportunity(self) -> None:
        system = self.system
        if self.random_number == 2 and self.position in (2, 3):
            self.position = BONNIE_SIDE_ROOM
            self.in_other_room = True
            system.is_moving = True
            self._reload()
        if self.position == 5:
            system._play("walk")
        if self.position >= DOOR_POSITION and self.position != BONNIE_SIDE_ROOM:
            self.at_door = True
            if not system.jumpscaring and not system.left_closed:
                self._attack()
            elif not system.jumpscaring and system.left_closed:
                self.at_door = False
                self.position = 1
                self._reload()
        elif not system.is_moving:
            self.position += 1
            self._reload()


class Chica(Animatronic):
    period = 432
    jumpscare = Jumpscare.CHICA

    def __init__(self, system: AnimatronicSystem) -> None:
        self.in_other_room = False
        super().__init__(system)

    def tick(self) -> None:
        if self.delay <= 0:
            self.in_other_room = False
        super().tick()

    def _compare(self) -> None:
        if not (self.random_number < self.total_level or self.position == DOOR_POSITION):
            return
        if self.position not in (8, 9):
            if not self.in_other_room and not self.at_door:
                self._opportunity()
        if self.position in (8, 9) and self.in_other_room and not self.at_door:
            self.position = 1
            self.in_other_room = False
            self._reload()

    def _opportunity(self) -> None:
        system = self.system
        if self.random_number == 3 and self.position == 1:
            self.position = 7
            self.in_other_room = True
            system.is_moving = True
            self._reload()
        elif self.random_number == 6 and self.position == 2:
            self.position = 9
            self.in_other_room = True
            system.is_moving = True
            self._reload()
        if self.position == 5:
            system._play("walk")
        if self.position >= DOOR_POSITION and self.position not in CHICA_SIDE_ROOMS:
            self.at_door = True
            if not system.jumpscaring and not system.right_closed:
                self._attack()
            elif not system.jumpscaring and system.right_closed:
                self.at_door = False
                self.position = 1
                self._reload()
        elif not system.is_moving:
            self.position += 1
            self._reload()


class Foxy(Animatronic):
    period = 460
    jumpscare = Jumpscare.FOXY

    def __init__(self, system: AnimatronicSystem) -> None:
        self.was_attacking = False
        super().__init__(system)

    def _compare(self) -> None:
        system = self.system
        if self.random_number <= self.total_level or self.position in (3, 4):
            if not system.is_moving and not self.at_door:
                self._opportunity()
                system.is_moving = True

    def _opportunity(self) -> None:
        system = self.system
        if self.position == 3:
            system._play("run")
        if self.position >= FOXY_DOOR_POSITION:
            self.at_door = True
            self.was_attacking = True
            if not system.jumpscaring and not system.left_closed:
                self._attack()
            elif not system.jumpscaring and system.left_closed:
                system._play("knock")
                self.at_door = False
                self.position = 0
                self._reload()
        elif not system.is_moving and (not system.using_cams or self.position == 3):
            self.position += 1
            self._reload()


class AnimatronicSystem:
    """The four animatronics and the office state they react to.

    A move requests a camera reload: ``reload_pending`` becomes true and the
    animatronics count as moving until the game loop calls
    :meth:`reload_cams`.
    """

    def __init__(self, night: int, rng: _Random, sounds: SoundBoard) -> None:
        self.night = night
        self.rng = rng
        self.sounds = sounds
        self.office_active = True
        self.jumpscare_active = False
        self.reload_pending = False
        self.freddy = Freddy(self)
        self.bonnie = Bonnie(self)
        self.chica = Chica(self)
        self.foxy = Foxy(self)
        self.reset()

    @property
    def animatronics(self) -> tuple[Freddy, Bonnie, Chica, Foxy]:
        return (self.freddy, self.bonnie, self.chica, self.foxy)

    def reset(self) -> None:
        """Put every animatronic back on the stage and clear the office flags."""
        for animatronic in self.animatronics:
            animatronic._clear()
        self.is_moving = False
        self.reloaded = True
        self.using_cams = False
        self.left_closed = False
        self.right_closed = False
        self.jumpscaring = False
        self.unloaded = False
        self.locked = False
        self.wait_before_force_reset = FORCE_RESET_FRAMES
        self.which_jumpscare = Jumpscare.NONE

    def set_defaults(self) -> None:
        """Set the difficulty levels that belong to the current night."""
        levels = NIGHT_LEVELS.get(self.night)
        if levels is None:
            _log.debug("night %s has no default levels", self.night)
            return
        for animatronic, level in zip(self.animatronics, levels):
            animatronic.total_level = level

    def force_ai_reset(self) -> bool:
        """Every 450 frames, pull stray state back in range; return whether it ran."""
        if self.wait_before_force_reset > 0 or self.jumpscaring:
            self.wait_before_force_reset -= 1
            return False
        if self.reloaded and self.is_moving:
            self.is_moving = False
        freddy, bonnie, chica, foxy = self.animatronics
        freddy.position = min(freddy.position, DOOR_POSITION)
        if bonnie.position > DOOR_POSITION and bonnie.position != BONNIE_SIDE_ROOM:
            bonnie.position = DOOR_POSITION
        if chica.position > DOOR_POSITION and chica.position not in CHICA_SIDE_ROOMS:
            chica.position = DOOR_POSITION
        foxy.position = min(foxy.position, FOXY_DOOR_POSITION)
        if bonnie.in_other_room and bonnie.position != BONNIE_SIDE_ROOM:
            bonnie.in_other_room = False
        if chica.in_other_room and chica.position not in CHICA_SIDE_ROOMS:
            chica.in_other_room = False
        for animatronic, door in (
            (freddy, DOOR_POSITION),
            (bonnie, DOOR_POSITION),
            (chica, DOOR_POSITION),
            (foxy, FOXY_DOOR_POSITION),
        ):
            if animatronic.at_door and animatronic.position < door:
                animatronic.at_door = False
        _log.debug("forcefully reset AI")
        self.wait_before_force_reset = FORCE_RESET_FRAMES
        return True

    def run_ai_loop(self) -> None:
        """Advance every active animatronic by one frame."""
        self.freddy.tick()
        if self.night == 2:
            self.freddy._increment_difficulty()
        self.bonnie.tick()
        self.chica.tick()
        if self.night > 1:
            self.foxy.tick()

    def reload_cams(self) -> bool:
        """Finish a camera reload; return False if a jumpscare blocked it."""
        self.reload_pending = False
        if self.jumpscaring:
            return False
        self.reloaded = False
        self.is_moving = True
        if self.using_cams:
            self._play("move")
        self.reloaded = True
        self.is_moving = False
        return True

    def _request_reload(self) -> None:
        if self.jumpscaring:
            return
        self.reload_pending = True
        self.reloaded = False
        self.is_moving = True

    def _play(self, name: str) -> None:
        if self.sounds.is_loaded(name):
            self.sounds.play(name)

    def _unload_main(self) -> None:
        self.office_active = False
        for name in _OFFICE_SOUNDS:
            self.sounds.unload(name)
        self.sounds.load("jumpscare")
        self.jumpscare_active = True