import pytest

from tilegfx.tiles import NO_TILE, AnimFrame, Rect, TileMap, Tileset


def solid_tileset(*values, **kwargs):
    return Tileset([[v] * 64 for v in values], **kwargs)


def test_empty_map_has_no_tiles():
    m = TileMap.empty(3, 2, solid_tileset(1))
    assert m.tiles == [NO_TILE] * 6
    assert m.get_tile(2, 1) == 0xFFFF


def test_set_get_round_trip():
    m = TileMap.empty(4, 3, solid_tileset(1, 2))
    m.set_tile(3, 2, 1)
    m.set_tile(0, 1, 0)
    assert m.get_tile(3, 2) == 1
    assert m.get_tile(0, 1) == 0
    assert m.tiles[3 + 2 * 4] == 1
    assert m.tiles[0 + 1 * 4] == 0


def test_copy_is_independent():
    m = TileMap.empty(2, 2, solid_tileset(1))
    m.set_tile(1, 1, 0)
    dup = m.copy()
    assert dup.tiles == m.tiles
    assert dup.tileset is m.tileset
    dup.set_tile(0, 0, 0)
    assert m.get_tile(0, 0) == NO_TILE
    assert dup.get_tile(0, 0) == 0


@pytest.mark.parametrize("x,y", [(-1, 0), (2, 0), (0, 2), (0, -1)])
def test_out_of_range_position(x, y):
    m = TileMap.empty(2, 2, solid_tileset(1))
    with pytest.raises(IndexError):
        m.get_tile(x, y)
    with pytest.raises(IndexError):
        m.set_tile(x, y, 0)


def test_tile_value_out_of_range():
    m = TileMap.empty(2, 2, solid_tileset(1))
    with pytest.raises(ValueError):
        m.set_tile(0, 0, 0x10000)
    with pytest.raises(ValueError):
        m.set_tile(0, 0, -1)


def test_map_size_mismatch():
    with pytest.raises(ValueError):
        TileMap(2, 2, solid_tileset(1), [0, 0, 0])


def test_empty_rejects_bad_size():
    with pytest.raises(ValueError):
        TileMap.empty(0, 3, solid_tileset(1))


def test_tileset_tile_length_checked():
    with pytest.raises(ValueError):
        Tileset([[0] * 63])


def test_tileset_tile_access():
    ts = Tileset([[5] * 64, list(range(64))])
    assert len(ts) == 2
    assert ts.tile(1)[10] == 10
    assert ts.tile(0) == (5,) * 64
    assert ts.trans_col == -1


def test_tileset_animation_needs_both_parts():
    with pytest.raises(ValueError):
        Tileset([[0] * 64], anim_offsets=[0])


def test_tileset_animation_stored():
    frames = [AnimFrame(200), AnimFrame(100, 0), AnimFrame(100, 0)]
    ts = Tileset([[0] * 64], anim_offsets=[0], anim_frames=frames)
    assert ts.anim_frames[0].tile == NO_TILE
    assert ts.anim_frames[1] == AnimFrame(100, 0)


def test_rect_fields():
    r = Rect(1, 2, 3, 4)
    assert (r.x, r.y, r.w, r.h) == (1, 2, 3, 4)