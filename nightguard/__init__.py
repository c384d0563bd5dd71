"""Game logic and software graphics for a night-watch survival game."""

__version__ = "1.3.1"

__all__ = [
    "animatronic",
    "camera",
    "canvas",
    "customnight",
    "screen",
    "screens",
    "sounds",
    "sprite",
    "textures",
    "vram",
]