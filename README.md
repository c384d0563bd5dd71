# nightguard

The engine behind a night-watch survival game. You sit in an office, watch the
cameras, close the doors and hope the animatronics do not reach you before 6 AM.
The package holds the game state and rules plus a software image layer. It is
not tied to any display or audio device.

## Installation

```
pip install nightguard
```

To run the tests:

```
pip install "nightguard[test]"
pytest
```

## What is inside

- `nightguard.animatronic`: `AnimatronicSystem` holds `Freddy`, `Bonnie`,
  `Chica` and `Foxy`. Each frame, `run_ai_loop()` counts down their delays.
  When a delay runs out, the animatronic rolls a number from 0 to 19 against its
  level. It then moves, gets turned away at a closed door, or sets
  `which_jumpscare` to a `Jumpscare` value. A move sets `reload_pending`, and
  the caller completes it with `reload_cams()`. `set_defaults()` applies the
  levels for nights 1–6. Call `force_ai_reset()` once per frame: every 450
  frames it pulls stray positions and flags back into range.
- `nightguard.camera`: `CameraSystem` covers the monitor flip animation
  (`toggle`, `open_step`, `close_step`) and moving between the eleven cameras
  (`left`, `right`, `up`, `down`). `reticle_position()` gives each camera's
  marker position on the map.
- `nightguard.customnight`: `CustomNight` is the level editor for night 7.
  `plus`/`minus` change the selected animatronic's level within 0–20.
  `move_left`/`move_right` with `update_position` pick the animatronic to edit.
  `create()` returns a `CreateResult`: levels 1/9/8/7 set off the secret
  screen, and `tick_crash()` counts that screen down.
- `nightguard.screens`: `StaticAnimation` cycles the four static frames.
  `CountdownScreen` calls a callback after a set number of frames.
  `dead_screen` (600 frames) and `ending_screen` (3660 frames) build the two
  timed screens.
- `nightguard.sounds`: `SoundBoard` keeps a record of which catalogued sounds
  are loaded, which channel each plays on, and whether each is paused. It
  covers the phone call for nights 1–5 (`phone_call_path`, `load_phone_call`,
  `play_phone_call`, `unload_phone_call`).
- `nightguard.canvas`: `Image` is a 32-bit image stored in a power-of-two
  texture. It supports pixel access, `clear`, `fill_rect`, `blit`,
  `blit_alpha` (copies fully opaque pixels only), Bresenham `draw_line` and
  `save_png`. `load_image` reads PNG files up to 512×512.
- `nightguard.sprite`: `draw_sprite_alpha` draws part of an `Image` onto a
  target. Texels with zero alpha are skipped, the others are blended by their
  own alpha, and the result is clipped to the target.
- `nightguard.screen`: `Screen` is a double-buffered 480×272 frame buffer with
  512-texel lines. Its `clear`, `fill_rect`, `blit` and `flip` do nothing until
  `initialize()` has been called.
- `nightguard.textures`: `Texture`, `new_texture` and `load_png` (a `.jpg` name
  is read as `.png`). `save_png` and `save_targa` write any strided colour
  sequence to a file.
- `nightguard.vram`: `VRamAllocator` manages the video-memory region that sits
  after the frame and depth buffers. Each allocation comes off the front of the
  largest free block. Freed ranges are merged with their neighbours, and
  `VRamExhausted` is raised when nothing fits. `swizzle` reorders a texture into
  16-byte × 8-row blocks.

## Example

```python
import random

from nightguard.animatronic import AnimatronicSystem, Jumpscare
from nightguard.camera import CameraSystem
from nightguard.sounds import SoundBoard

sounds = SoundBoard()
ai = AnimatronicSystem(night=3, rng=random.Random(1), sounds=sounds)
ai.set_defaults()
cameras = CameraSystem(sounds)

for _ in range(10_000):
    ai.run_ai_loop()
    ai.force_ai_reset()
    if ai.reload_pending:
        ai.reload_cams()
    if ai.which_jumpscare is not Jumpscare.NONE:
        print("caught by", ai.which_jumpscare.name)
        break
```

Colours are plain integers laid out as `0xAABBGGRR`. `red`, `green`, `blue`
and `alpha` in `nightguard.canvas` pull out each channel.

## What it does not do

- It does not play audio. `SoundBoard` only keeps track of sound state and file
  paths.
- It has no window, display output or input handling. `Screen` is an in-memory
  buffer.
- It has no main menu, night clock, power meter, 6 AM screen, save files or
  game loop, and it provides no command to run. Connecting the modules and
  driving them frame by frame is left to the caller.