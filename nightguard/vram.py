"""Video memory bookkeeping and texture swizzling."""

from __future__ import annotations

import bisect
from dataclasses import dataclass

from nightguard.textures import Texture

VRAM_BASE = 0x04000000
VRAM_START = VRAM_BASE + 0x154000
VRAM_SIZE = 0x200000 - 0x154000

_BLOCK_BYTES = 16
_BLOCK_TEXELS = 4
_BLOCK_ROWS = 8


class VRamExhausted(MemoryError):
    """No free block of video memory is large enough."""


@dataclass
class _Block:
    address: int
    length: int

    @property
    def end(self) -> int:
        return self.address + self.length


@dataclass(frozen=True)
class VRamReport:
    """Summary of the free video memory."""

    available: int
    blocks: int
    biggest: int


class VRamAllocator:
    """Free list of video memory after the frame and depth buffers.

    Allocations are carved from the front of the largest free block; freed
    ranges are put back in address order and merged with adjacent blocks.
    """

    def __init__(self) -> None:
        self._blocks: list[_Block] = []
        self.reset()

    def reset(self) -> None:
        """Mark the whole region free again."""
        self._blocks = [_Block(VRAM_START, VRAM_SIZE)]

    @property
    def available(self) -> int:
        return sum(block.length for block in self._blocks)

    @property
    def biggest(self) -> int:
        return max((block.length for block in self._blocks), default=0)

    def alloc(self, length: int) -> int:
        """Reserve ``length`` bytes and return their address."""
        if length <= 0:
            raise ValueError(f"allocation length {length} must be positive")
        if self.biggest < length:
            raise VRamExhausted(
                f"cannot allocate {length} bytes; biggest free block is {self.biggest}"
            )
        block = max(self._blocks, key=lambda candidate: candidate.length)
        address = block.address
        if block.length == length:
            self._blocks.remove(block)
        else:
            block.address += length
            block.length -= length
        return address

    def free(self, address: int, length: int) -> None:
        """Return ``length`` bytes at ``address`` to the free list."""
        if length <= 0:
            raise ValueError(f"free length {length} must be positive")
        end = address + length
        if address < VRAM_START or end > VRAM_START + VRAM_SIZE:
            raise ValueError(
                f"range {address:#x}..{end:#x} outside video memory"
            )
        for block in self._blocks:
            if address < block.end and block.address < end:
                raise ValueError(f"range {address:#x}..{end:#x} is already free")
        addresses = [block.address for block in self._blocks]
        position = bisect.bisect_left(addresses, address)
        self._blocks.insert(position, _Block(address, length))
        if position + 1 < len(self._blocks):
            following = self._blocks[position + 1]
            if self._blocks[position].end == following.address:
                self._blocks[position].length += following.length
                del self._blocks[position + 1]
        if position > 0:
            previous = self._blocks[position - 1]
            if previous.end == self._blocks[position].address:
                previous.length += self._blocks[position].length
                del self._blocks[position]

    def report(self) -> VRamReport:
        return VRamReport(self.available, len(self._blocks), self.biggest)


def swizzle(texture: Texture) -> None:
    """Reorder a texture's texels into 16-byte by 8-row blocks.

    Each block holds four texels from each of eight consecutive rows; blocks
    run left to right, then down. Rows below the last whole band of eight
    are left as zeros.
    """
    width = texture.texture_width
    bands = texture.image_height // _BLOCK_ROWS
    columns = width // _BLOCK_TEXELS
    source = texture.pixels
    swizzled: list[int] = []
    for band in range(bands):
        for column in range(columns):
            x = column * _BLOCK_TEXELS
            for row in range(band * _BLOCK_ROWS, (band + 1) * _BLOCK_ROWS):
                start = row * width + x
                swizzled.extend(source[start:start + _BLOCK_TEXELS])
    swizzled.extend([0] * (len(source) - len(swizzled)))
    texture.pixels = swizzled
    texture.is_swizzled = True