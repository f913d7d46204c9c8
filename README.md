# tilegfx

A small tile-based graphics engine built around 8x8 tiles and an 80x64
framebuffer of big-endian RGB565 pixels, with an optional 160x128 mode
that is scaled down on output.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

The package has no dependencies outside the standard library.

## Tiles and maps (`tilegfx.tiles`)

- `Tileset(pixels, trans_col=-1, anim_offsets=None, anim_frames=None)`
  holds a sequence of tiles, each 64 pixel words, row by row. `trans_col`
  is the transparent colour, or `-1` for none. A tile with the wrong
  number of pixels raises `ValueError`; so does giving only one of
  `anim_offsets` and `anim_frames`. `len(tileset)` is the number of tiles
  and `tileset.tile(i)` returns one tile's pixels.
- `AnimFrame(delay_ms, tile)` is one animation frame. In `anim_frames`,
  each sequence starts with a frame whose `delay_ms` is the total cycle
  length, followed by the frames themselves. `anim_offsets` gives, per
  tile, the position of its sequence, or `0xFFFF` (`NO_TILE`) when the
  tile is not animated.
- `TileMap(w, h, tileset, tiles)` places tile indices on a grid; `0xFFFF`
  marks an empty cell. `TileMap.empty(w, h, tileset)` makes an all-empty
  map, `copy()` an independent copy, and `get_tile(x, y)` /
  `set_tile(x, y, tile)` read and write cells. Positions outside the map
  raise `IndexError`; tile indices outside 0..0xFFFF raise `ValueError`.
- `Rect(x, y, w, h)` is a rectangle in framebuffer coordinates.

## Rendering (`tilegfx.renderer`)

```python
from tilegfx.tiles import Tileset, TileMap, Rect
from tilegfx.renderer import TileGfx

red = 0x00F8  # RGB565 red, bytes swapped
tileset = Tileset([[red] * 64])
level = TileMap.empty(4, 4, tileset)
level.set_tile(1, 2, 0)
assert level.get_tile(1, 2) == 0

frames = []
with TileGfx(double_res=False, hz=30, display=frames.append) as gfx:
    gfx.render_map(level)                             # whole framebuffer
    gfx.render_map(level, 4, 4, Rect(0, 0, 16, 16))   # only inside a rectangle
    gfx.fade(0, 0, 0, 128)                            # darken towards black
    gfx.flush()                                       # hand the frame to display
assert len(frames[0]) == 80 * 64
```

- `TileGfx(double_res=False, hz=60, display=None, clock=None)` owns the
  framebuffer. `display` is called with the 80x64 frame on every flush;
  `clock` returns a monotonic time in nanoseconds (default
  `time.monotonic_ns`) and drives animations and frame pacing.
- `render_map(tilemap, offx=0, offy=0, dest=None)` draws the map with
  `(offx, offy)` at the top left of `dest`, wrapping around at the map's
  edges, clipping to `dest` and the framebuffer, skipping the transparent
  colour and showing animated tiles at their current frame.
- `fade(r, g, b, pct)` mixes every pixel with the colour; `pct` 255 keeps
  the picture and 0 replaces it with the colour. Values outside 0..255
  raise `ValueError`.
- `flush()` sends the frame to `display` and then sleeps as needed so that
  flushes happen at most `hz` times per second.
- `framebuffer` gives direct access to the pixel list; `close()` releases
  it, after which `closed` is true and further use raises `RuntimeError`.
- With `double_res=True` drawing happens on 160x128. On flush,
  `downscale_double(pixels)` scales it to 80x64, averaging line pairs and
  weighting red, green and blue of neighbouring pixels for the display's
  sub-pixel layout. The result is written to the start of the framebuffer.

## What this package does not do

It does not drive any display hardware: frames are only passed to the
`display` callable you supply. It also has no tool for loading maps or
tile images from files; tilesets and maps are built in Python from pixel
and index lists.