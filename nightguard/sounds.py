"""Sound catalogue and a board that tracks which sounds are loaded and playing."""

from __future__ import annotations

from dataclasses import dataclass

NO_CHANNEL = -1
PHONE_CALL_CHANNEL = 1
PHONE_CALL_NIGHTS = range(1, 6)


@dataclass(frozen=True)
class _Spec:
    path: str
    streamed: bool
    channel: int
    loop: bool = False


_CATALOGUE: dict[str, _Spec] = {
    "menu_music": _Spec("romfs/music/menu/music.wav", False, 0, loop=True),
    "ending_song": _Spec("romfs/music/ending/music.wav", True, 0),
    "ambience": _Spec("romfs/ambience/office/ambience_mix.wav", True, 0, loop=True),
    "fan": _Spec("romfs/ambience/office/fan.wav", True, 2, loop=True),
    "buzz": _Spec("romfs/sfx/office/buzz.wav", False, 3, loop=True),
    "door": _Spec("romfs/sfx/office/door.wav", False, 4),
    "scare": _Spec("romfs/sfx/office/scare.wav", False, 7),
    "switch": _Spec("romfs/sfx/office/switch.wav", False, 5),
    "laugh": _Spec("romfs/sfx/office/laugh.wav", True, 6),
    "move": _Spec("romfs/sfx/office/move.wav", False, 5),
    "walk": _Spec("romfs/sfx/office/walk.wav", False, 7),
    "run": _Spec("romfs/sfx/office/run.wav", True, 7),
    "knock": _Spec("romfs/sfx/office/knock.wav", True, 7),
    "open_cam": _Spec("romfs/sfx/office/openCam.wav", False, 5),
    "close_cam": _Spec("romfs/sfx/office/closeCam.wav", False, 5),
    "chimes": _Spec("romfs/sfx/sixam/chimes.wav", True, 0),
    "jumpscare": _Spec("romfs/sfx/jumpscare/jumpscare.wav", True, 0),
    "jumpscare2": _Spec("romfs/sfx/jumpscare/jumpscare2.wav", True, 0),
    "dead": _Spec("romfs/sfx/jumpscare/dead.wav", True, 0),
}
_CATALOGUE.update(
    {
        f"call{night}": _Spec(
            f"romfs/ambience/office/call/call{night}.wav", True, PHONE_CALL_CHANNEL
        )
        for night in PHONE_CALL_NIGHTS
    }
)


@dataclass
class Sound:
    """A loaded sound and its playback state."""

    name: str
    path: str
    streamed: bool
    channel: int
    loop: bool = False
    playing: bool = False
    paused: bool = False


def phone_call_path(night: int) -> str | None:
    """Return the path of the phone call for a night, or None if that night has none."""
    if night not in PHONE_CALL_NIGHTS:
        return None
    return _CATALOGUE[f"call{night}"].path


def _phone_call_name(night: int) -> str | None:
    return f"call{night}" if night in PHONE_CALL_NIGHTS else None


class SoundBoard:
    """Keeps track of loaded sounds and of which sound occupies each channel."""

    def __init__(self) -> None:
        self._loaded: dict[str, Sound] = {}
        self._voices: dict[int, str] = {}
        self.phone_call_stopped = False

    def _get(self, name: str) -> Sound:
        try:
            return self._loaded[name]
        except KeyError:
            raise KeyError(f"sound {name!r} is not loaded") from None

    def _release_voice(self, sound: Sound) -> None:
        if self._voices.get(sound.channel) == sound.name:
            del self._voices[sound.channel]
        sound.playing = False
        sound.paused = False

    def load(self, name: str) -> Sound:
        """Load a catalogued sound, replacing any earlier load of it."""
        try:
            spec = _CATALOGUE[name]
        except KeyError:
            raise KeyError(f"unknown sound {name!r}") from None
        if name in self._loaded:
            self.unload(name)
        sound = Sound(name, spec.path, spec.streamed, spec.channel)
        self._loaded[name] = sound
        return sound

    def unload(self, name: str) -> bool:
        """Unload a sound; return whether it was loaded."""
        sound = self._loaded.pop(name, None)
        if sound is None:
            return False
        self._release_voice(sound)
        return True

    def play(self, name: str) -> Sound:
        """Start a loaded sound on its channel, stopping whatever played there."""
        sound = self._get(name)
        previous = self._voices.get(sound.channel)
        if previous is not None and previous != name:
            self._release_voice(self._loaded[previous])
        sound.playing = True
        sound.paused = False
        sound.loop = _CATALOGUE[name].loop
        self._voices[sound.channel] = name
        return sound

    def pause(self, name: str) -> bool:
        """Toggle pause on a playing sound and return whether it is now paused."""
        sound = self._get(name)
        if sound.playing:
            sound.paused = not sound.paused
        return sound.paused

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def channel_of(self, name: str) -> int:
        """Return the channel a sound plays on, or -1 if it is not playing."""
        sound = self._loaded.get(name)
        if sound is None or not sound.playing:
            return NO_CHANNEL
        return sound.channel

    def load_phone_call(self, night: int) -> Sound | None:
        name = _phone_call_name(night)
        return self.load(name) if name else None

    def play_phone_call(self, night: int) -> Sound | None:
        name = _phone_call_name(night)
        if name is None:
            return None
        sound = self.play(name)
        if self.channel_of(name) == NO_CHANNEL:
            self.unload_phone_call(night)
        return sound

    def unload_phone_call(self, night: int) -> None:
        name = _phone_call_name(night)
        if name is not None:
            self.unload(name)
        self.phone_call_stopped = True