"""Tilesets, tilemaps and rectangles used by the tile renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

TILE_SIZE = 8
"""Width and height of one tile, in pixels."""

TILE_PIXELS = TILE_SIZE * TILE_SIZE
"""Number of pixels in one tile."""

NO_TILE = 0xFFFF
"""Tile index meaning 'no tile here' in a map, or 'not animated' in offsets."""


@dataclass(frozen=True)
class AnimFrame:
    """One frame of a tile animation.

    In the first frame of a sequence, ``delay_ms`` is the total length of the
    cycle and ``tile`` is ``NO_TILE``.
    """

    delay_ms: int
    tile: int = NO_TILE


@dataclass(frozen=True)
class Tileset:
    """A set of 8x8 tiles in big-endian RGB565, with optional animations.

    ``trans_col`` is the transparent colour, or -1 for none. ``anim_offsets``
    is indexed by tile number and gives the position of the tile's animation
    in ``anim_frames``, or ``NO_TILE`` if the tile is not animated.
    """

    pixels: Sequence[Sequence[int]]
    trans_col: int = -1
    anim_offsets: Optional[Sequence[int]] = None
    anim_frames: Optional[Sequence[AnimFrame]] = None

    def __post_init__(self) -> None:
        tiles = tuple(tuple(tile) for tile in self.pixels)
        for number, tile in enumerate(tiles):
            if len(tile) != TILE_PIXELS:
                raise ValueError(
                    f"tile {number} has {len(tile)} pixels, expected {TILE_PIXELS}"
                )
        object.__setattr__(self, "pixels", tiles)
        if (self.anim_offsets is None) != (self.anim_frames is None):
            raise ValueError("anim_offsets and anim_frames must be given together")
        if self.anim_offsets is not None:
            object.__setattr__(self, "anim_offsets", tuple(self.anim_offsets))
            object.__setattr__(self, "anim_frames", tuple(self.anim_frames))

    def __len__(self) -> int:
        return len(self.pixels)

    def tile(self, index: int) -> tuple:
        """Return the 64 pixels of a tile, row by row."""
        return self.pixels[index]


@dataclass
class TileMap:
    """A grid of tile indices referring to a tileset."""

    w: int
    h: int
    tileset: Tileset
    tiles: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.w <= 0 or self.h <= 0:
            raise ValueError("tilemap dimensions must be positive")
        self.tiles = list(self.tiles)
        if len(self.tiles) != self.w * self.h:
            raise ValueError(
                f"tilemap of {self.w}x{self.h} needs {self.w * self.h} tiles, "
                f"got {len(self.tiles)}"
            )

    @classmethod
    def empty(cls, w: int, h: int, tileset: Tileset) -> "TileMap":
        """Create a map of the given size with every position empty."""
        if w <= 0 or h <= 0:
            raise ValueError("tilemap dimensions must be positive")
        return cls(w, h, tileset, [NO_TILE] * (w * h))

    def copy(self) -> "TileMap":
        """Return an independent, editable copy of this map."""
        return TileMap(self.w, self.h, self.tileset, list(self.tiles))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.w and 0 <= y < self.h):
            raise IndexError(f"position ({x}, {y}) outside {self.w}x{self.h} map")
        return x + y * self.w

    def get_tile(self, x: int, y: int) -> int:
        """Return the tile index at a position, or ``NO_TILE``."""
        return self.tiles[self._index(x, y)]

    def set_tile(self, x: int, y: int, tile: int) -> None:
        """Set the tile index at a position; ``NO_TILE`` clears it."""
        if not 0 <= tile <= 0xFFFF:
            raise ValueError(f"tile index {tile} out of range")
        self.tiles[self._index(x, y)] = tile


@dataclass(frozen=True)
class Rect:
    """A rectangle in framebuffer coordinates."""

    x: int
    y: int
    w: int
    h: int