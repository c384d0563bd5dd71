import pytest

from nightguard.camera import CameraSystem, reticle_position
from nightguard.sounds import SoundBoard


@pytest.fixture
def board():
    sounds = SoundBoard()
    for name in ("open_cam", "close_cam", "switch"):
        sounds.load(name)
    return sounds


@pytest.fixture
def cams(board):
    return CameraSystem(board)


def _open(cams):
    cams.toggle()
    for _ in range(50):
        if cams.using:
            break
        cams.open_step()
    return cams


def test_reticle_positions_from_map():
    assert reticle_position(0) == (353, 115)
    assert reticle_position(10) == (440, 150)


@pytest.mark.parametrize("camera", [-1, 11])
def test_reticle_position_rejects_unknown(camera):
    with pytest.raises(ValueError):
        reticle_position(camera)


def test_initial_state(cams):
    assert cams.camera == 0
    assert cams.using is False
    assert cams.reticle == reticle_position(0)


def test_toggle_starts_opening_with_sound(cams, board):
    cams.toggle()
    assert cams.opening is True
    assert board.channel_of("open_cam") == 5


def test_open_animation_reaches_use(cams):
    _open(cams)
    assert cams.using is True
    assert cams.opening is False
    assert cams.frame == 3


def test_close_animation_returns_to_office(cams, board):
    _open(cams)
    cams.toggle()
    assert cams.closing is True
    assert board.channel_of("close_cam") == 5
    for _ in range(50):
        if not cams.using:
            break
        cams.close_step()
    assert cams.using is False
    assert cams.closing is False
    assert cams.frame == 0
    assert cams.delay == 2


def test_moves_ignored_when_not_using(cams, board):
    cams.down()
    assert cams.camera == 0
    assert board.channel_of("switch") == -1


def test_navigation_updates_reticle(cams, board):
    _open(cams)
    cams.down()
    cams.down()
    assert cams.camera == 2
    assert cams.reticle == reticle_position(2)
    assert board.channel_of("switch") == 5


def test_left_right_round_trip(cams):
    _open(cams)
    cams.down()
    cams.left()
    assert cams.camera == 8
    cams.right()
    assert cams.camera == 1
    cams.right()
    assert cams.camera == 10
    cams.left()
    assert cams.camera == 1


def test_up_at_top_stays(cams):
    _open(cams)
    cams.up()
    assert cams.camera == 0


def test_up_down_round_trip_from_ten(cams):
    _open(cams)
    cams.camera = 10
    cams.down()
    assert cams.camera == 9
    cams.up()
    assert cams.camera == 10
    assert cams.reticle == reticle_position(10)


def test_reset_restores_defaults(cams):
    _open(cams)
    cams.down()
    cams.reset()
    assert cams.camera == 0
    assert cams.using is False
    assert cams.delay == 3
    assert cams.reticle == reticle_position(0)