import pytest

from nightguard.sounds import NO_CHANNEL, Sound, SoundBoard, phone_call_path


def test_phone_call_path_for_valid_nights():
    assert phone_call_path(1) == "romfs/ambience/office/call/call1.wav"
    assert phone_call_path(5) == "romfs/ambience/office/call/call5.wav"


@pytest.mark.parametrize("night", [0, 6, 7])
def test_phone_call_path_none_outside_range(night):
    assert phone_call_path(night) is None


def test_load_records_catalogue_entry():
    board = SoundBoard()
    sound = board.load("fan")
    assert sound.path == "romfs/ambience/office/fan.wav"
    assert sound.streamed is True
    assert board.is_loaded("fan")


def test_load_unknown_sound_raises():
    with pytest.raises(KeyError):
        SoundBoard().load("kitchen")


def test_play_unloaded_raises():
    with pytest.raises(KeyError):
        SoundBoard().play("door")


def test_channel_of_reflects_playback():
    board = SoundBoard()
    board.load("door")
    assert board.channel_of("door") == NO_CHANNEL
    board.play("door")
    assert board.channel_of("door") == 4


def test_looping_sounds_loop_when_played():
    board = SoundBoard()
    board.load("menu_music")
    board.load("door")
    assert board.play("menu_music").loop is True
    assert board.play("door").loop is False


def test_playing_on_same_channel_stops_previous():
    board = SoundBoard()
    board.load("switch")
    board.load("move")
    board.play("switch")
    board.play("move")
    assert board.channel_of("switch") == NO_CHANNEL
    assert board.channel_of("move") == board.channel_of("move") >= 0
    assert board._loaded["switch"].playing is False


def test_pause_toggles():
    board = SoundBoard()
    board.load("buzz")
    board.play("buzz")
    assert board.pause("buzz") is True
    assert board.pause("buzz") is False


def test_pause_of_idle_sound_stays_unpaused():
    board = SoundBoard()
    board.load("buzz")
    assert board.pause("buzz") is False


def test_unload_returns_whether_loaded():
    board = SoundBoard()
    board.load("knock")
    board.play("knock")
    assert board.unload("knock") is True
    assert board.unload("knock") is False
    assert not board.is_loaded("knock")
    assert board.channel_of("knock") == NO_CHANNEL


def test_reload_resets_state():
    board = SoundBoard()
    board.load("laugh")
    board.play("laugh")
    sound = board.load("laugh")
    assert isinstance(sound, Sound)
    assert sound.playing is False


def test_phone_call_cycle():
    board = SoundBoard()
    loaded = board.load_phone_call(3)
    assert loaded.path == phone_call_path(3)
    board.play_phone_call(3)
    assert board.is_loaded("call3")
    assert board.channel_of("call3") == 1
    board.unload_phone_call(3)
    assert not board.is_loaded("call3")
    assert board.phone_call_stopped is True


def test_phone_call_on_night_without_call():
    board = SoundBoard()
    assert board.load_phone_call(6) is None
    assert board.play_phone_call(6) is None
    board.unload_phone_call(6)
    assert board.phone_call_stopped is True