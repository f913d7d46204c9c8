"""Framebuffer renderer for tilemaps with a throttled virtual vertical blank."""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Sequence

from .tiles import NO_TILE, TILE_SIZE, Rect, TileMap, Tileset

SCREEN_W = 80
SCREEN_H = 64

_AVG_MASK = 0xF7BEF7BE


def _swap16(value: int) -> int:
    return ((value >> 8) | (value << 8)) & 0xFFFF


def _pixel_pair(pixels: Sequence[int], index: int) -> int:
    """Two adjacent pixels as one 32-bit word in native RGB565 order."""
    return _swap16(pixels[index]) | (_swap16(pixels[index + 1]) << 16)


def downscale_double(pixels: Sequence[int]) -> List[int]:
    """Scale a 160x128 framebuffer down to 80x64 with subpixel-aware mixing.

    Pixels are big-endian RGB565, both on input and output.
    """
    wide = SCREEN_W * 2
    if len(pixels) != wide * SCREEN_H * 2:
        raise ValueError(f"expected {wide * SCREEN_H * 2} pixels, got {len(pixels)}")
    out = []
    for y in range(SCREEN_H):
        top = 2 * y * wide
        bottom = top + wide
        for x in range(SCREEN_W):
            p = _pixel_pair(pixels, top + 2 * x)
            p2 = _pixel_pair(pixels, bottom + 2 * x)
            p = ((p & _AVG_MASK) >> 1) + ((p2 & _AVG_MASK) >> 1)
            r = (((p >> 27) & 0x1F) * 3 + ((p >> 11) & 0x1F)) // 4
            g = (((p >> 21) & 0x3F) + ((p >> 5) & 0x3F)) // 2
            b = (((p >> 16) & 0x1F) + (p & 0x1F) * 3) // 4
            out.append(_swap16((r << 11) + (g << 5) + b))
    return out


class TileGfx:
    """A tile renderer owning a big-endian RGB565 framebuffer.

    ``display`` receives the 80x64 frame on every flush. ``clock`` returns a
    monotonic time in nanoseconds; it drives animations and frame pacing.
    """

    def __init__(
        self,
        double_res: bool = False,
        hz: int = 60,
        display: Optional[Callable[[List[int]], None]] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        if not 1 <= hz <= 1_000_000:
            raise ValueError(f"refresh rate {hz} out of range")
        self.double_res = bool(double_res)
        scale = 2 if self.double_res else 1
        self.width = SCREEN_W * scale
        self.height = SCREEN_H * scale
        self._fb: Optional[List[int]] = [0] * (self.width * self.height)
        self._display = display
        self._clock = clock or time.monotonic_ns
        self._period_ns = (1_000_000 // hz) * 1000
        start = self._clock()
        self._anim_start = start
        self._vbl_start = start
        self._ticks_taken = 0

    @property
    def closed(self) -> bool:
        return self._fb is None

    @property
    def framebuffer(self) -> List[int]:
        """The framebuffer itself, row by row; writes to it show on flush."""
        return self._require()

    def _require(self) -> List[int]:
        if self._fb is None:
            raise RuntimeError("renderer is closed")
        return self._fb

    def _anim_tile(self, tileset: Tileset, index: int) -> int:
        if tileset.anim_offsets is None:
            return index
        offset = tileset.anim_offsets[index]
        if offset == NO_TILE:
            return index
        frames = tileset.anim_frames
        t_ms = (self._clock() - self._anim_start) // 1_000_000
        t_ms %= frames[offset].delay_ms
        position = offset
        while t_ms:
            position += 1
            frame = frames[position]
            if t_ms < frame.delay_ms:
                return frame.tile
            t_ms -= frame.delay_ms
        return index

    def _blit(self, fb, pixels, x, y, clip, trans_col) -> None:
        cx, cy, cw, ch = clip
        x0, x1 = max(x, cx), min(x + TILE_SIZE, cx + cw)
        y0, y1 = max(y, cy), min(y + TILE_SIZE, cy + ch)
        for py in range(y0, y1):
            base = py * self.width
            row = (py - y) * TILE_SIZE - x
            for px in range(x0, x1):
                value = pixels[row + px]
                if value != trans_col:
                    fb[base + px] = value

    def render_map(
        self,
        tilemap: TileMap,
        offx: int = 0,
        offy: int = 0,
        dest: Optional[Rect] = None,
    ) -> None:
        """Render a tilemap, wrapping around, with (offx, offy) at the top left of dest.

        ``dest`` limits rendering to a rectangle; None means the whole framebuffer.
        """
        fb = self._require()
        if dest is None:
            cx, cy, cw, ch = 0, 0, self.width, self.height
        else:
            cx, cy, cw, ch = dest.x, dest.y, dest.w, dest.h
            if cx < 0:
                offx -= cx
                cw += cx
                cx = 0
            if cx + cw > self.width:
                cw = self.width - cx
            if cy < 0:
                offy -= cy
                ch += cy
                cy = 0
            if cy + ch > self.height:
                ch = self.height - cy
            if cw <= 0 or ch <= 0:
                return

        offx %= tilemap.w * TILE_SIZE
        offy %= tilemap.h * TILE_SIZE
        fx, fy = offx & 7, offy & 7
        sx, sy = cx - fx, cy - fy
        ex = sx + ((cw + fx + 7) & ~7)
        ey = sy + ((ch + fy + 7) & ~7)

        tileset = tilemap.tileset
        clip = (cx, cy, cw, ch)
        total = tilemap.w * tilemap.h
        row = (offy // TILE_SIZE) * tilemap.w
        for y in range(sy, ey, TILE_SIZE):
            col = offx // TILE_SIZE
            for x in range(sx, ex, TILE_SIZE):
                tileno = tilemap.tiles[row + col]
                if tileno != NO_TILE:
                    pixels = tileset.tile(self._anim_tile(tileset, tileno))
                    self._blit(fb, pixels, x, y, clip, tileset.trans_col)
                col += 1
                if col >= tilemap.w:
                    col = 0
            row += tilemap.w
            if row >= total:
                row -= total

    def fade(self, r: int, g: int, b: int, pct: int) -> None:
        """Mix every pixel with an RGB colour; pct 255 keeps the image, 0 gives the colour."""
        for name, value in (("r", r), ("g", g), ("b", b), ("pct", pct)):
            if not 0 <= value <= 255:
                raise ValueError(f"{name}={value} out of range 0-255")
        fb = self._require()
        inv = 255 - pct
        reds = [_swap16(((i * 8 * pct + r * inv) >> 11) << 11) for i in range(32)]
        greens = [_swap16(((i * 4 * pct + g * inv) >> 10) << 5) for i in range(64)]
        blues = [_swap16((i * 8 * pct + b * inv) >> 11) for i in range(32)]
        for i, value in enumerate(fb):
            c = _swap16(value)
            fb[i] = reds[c >> 11] | greens[(c >> 5) & 0x3F] | blues[c & 0x1F]

    def _wait_vblank(self) -> None:
        now = self._clock()
        tick = (now - self._vbl_start) // self._period_ns
        if tick > self._ticks_taken:
            self._ticks_taken = tick
            return
        self._ticks_taken += 1
        target = self._vbl_start + self._ticks_taken * self._period_ns
        if target > now:
            time.sleep((target - now) / 1e9)

    def flush(self) -> None:
        """Send the frame to the display, then wait for the next vertical blank."""
        fb = self._require()
        native = SCREEN_W * SCREEN_H
        if self.double_res:
            fb[:native] = downscale_double(fb)
        frame = fb[:native]
        if self._display is not None:
            self._display(frame)
        self._wait_vblank()

    def close(self) -> None:
        """Release the framebuffer."""
        self._fb = None

    def __enter__(self) -> "TileGfx":
        return self

    def __exit__(self, *args) -> None:
        self.close()