# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Tests for line joining, titles and visibility of nested TileViews."""

import pytest

from tileui.geometry import Rect, ORIENTATION_HORIZONTAL, LINE_STYLE_NONE, LINE_STYLE_SINGLE
from tileui.term.canvas import Canvas
from tileui.tiles import TileView
from tileui.views import Label, View


def digit_block(digit):
    return Label('\n'.join([str(digit) * 100] * 10))


def widths_of(tile_view):
    return [tile.dimensions.width for tile in tile_view.tiles]


@pytest.fixture()
def three_right_one_down():
    """Three tiles side by side, the tile at ``split`` is split into two stacked tiles."""
    def _make(border, titles=False, split=2):
        tile_view = TileView(3)
        tile_view.line_style = LINE_STYLE_SINGLE if border else LINE_STYLE_NONE
        is_split, nested = tile_view.try_split_tile(split, 2)
        assert is_split
        nested.orientation = ORIENTATION_HORIZONTAL

        tiles = [tile for tile in tile_view.tiles if tile.content is not nested] + list(nested.tiles)
        for i, tile in enumerate(tiles):
            if titles:
                tile.title = 'T%s' % (i + 1)
            tile.content = digit_block(i + 1)

        tile_view.set_dimensions(Rect(0, 0, 20, 10))
        return tile_view
    return _make


def test_split_top_whole_bottom(draw, looks_like):
    tile_view = TileView(2)
    tile_view.orientation = ORIENTATION_HORIZONTAL
    tile_view.line_style = LINE_STYLE_SINGLE
    _, top = tile_view.try_split_tile(0, 2)
    top.tiles[0].content = Label('bleh')
    top.tiles[1].content = Label('blah')
    tile_view.tiles[1].content = Label('Hello')
    tile_view.set_dimensions(Rect(0, 0, 20, 10))

    assert draw(tile_view) == looks_like("""
┌─────────┬────────┐
│bleh     │blah    │
│         │        │
│         │        │
│         │        │
├─────────┴────────┤
│Hello             │
│                  │
│                  │
└──────────────────┘
""")


def test_nested_two_left_one_right(make_tile_view, draw, looks_like):
    tile_view = make_tile_view(20, 10, rows=2)
    _, left = tile_view.try_split_tile(0, 2)
    left.orientation = ORIENTATION_HORIZONTAL

    assert widths_of(tile_view) == [10, 9]
    assert left.tiles[0].content.dimensions.width == 10
    assert draw(tile_view) == looks_like("""
1111111111│222222222
1111111111│222222222
          │
          │
          │
──────────┤
          │
          │
          │
          │
""")


def test_three_right_one_down(three_right_one_down, draw, looks_like):
    tile_view = three_right_one_down(border=False)

    assert draw(tile_view) == looks_like("""
111111│222222│333333
111111│222222│333333
111111│222222│333333
111111│222222│333333
111111│222222│333333
111111│222222├──────
111111│222222│444444
111111│222222│444444
111111│222222│444444
111111│222222│444444
""")

    assert [tile.dimensions for tile in tile_view.tiles] == [
        Rect(0, 0, 6, 10), Rect(7, 0, 6, 10), Rect(14, 0, 6, 10)]
    nested = tile_view.tiles[2].content
    assert [tile.dimensions for tile in nested.tiles] == [
        Rect(14, 0, 6, 5), Rect(14, 6, 6, 4)]


def test_three_right_one_down_with_border(three_right_one_down, draw, looks_like):
    tile_view = three_right_one_down(border=True)

    assert draw(tile_view) == looks_like("""
┌─────┬──────┬─────┐
│11111│222222│33333│
│11111│222222│33333│
│11111│222222│33333│
│11111│222222│33333│
│11111│222222├─────┤
│11111│222222│44444│
│11111│222222│44444│
│11111│222222│44444│
└─────┴──────┴─────┘
""")


@pytest.mark.parametrize('visible, expected', [
    ((False, True, True), """
┌────────────┬─────┐
│222222222222│33333│
│222222222222│33333│
│222222222222│33333│
│222222222222│33333│
│222222222222├─────┤
│222222222222│44444│
│222222222222│44444│
│222222222222│44444│
└────────────┴─────┘
"""),
    ((True, False, True), """
┌────────────┬─────┐
│111111111111│33333│
│111111111111│33333│
│111111111111│33333│
│111111111111│33333│
│111111111111├─────┤
│111111111111│44444│
│111111111111│44444│
│111111111111│44444│
└────────────┴─────┘
"""),
    ((True, True, False), """
┌─────┬────────────┐
│11111│222222222222│
│11111│222222222222│
│11111│222222222222│
│11111│222222222222│
│11111│222222222222│
│11111│222222222222│
│11111│222222222222│
│11111│222222222222│
└─────┴────────────┘
"""),
    ((True, False, False), """
┌──────────────────┐
│111111111111111111│
│111111111111111111│
│111111111111111111│
│111111111111111111│
│111111111111111111│
│111111111111111111│
│111111111111111111│
│111111111111111111│
└──────────────────┘
"""),
    ((False, False, True), """
┌──────────────────┐
│333333333333333333│
│333333333333333333│
│333333333333333333│
│333333333333333333│
├──────────────────┤
│444444444444444444│
│444444444444444444│
│444444444444444444│
└──────────────────┘
"""),
    ((False, False, False), """
┌──────────────────┐
│                  │
│                  │
│                  │
│                  │
│                  │
│                  │
│                  │
│                  │
└──────────────────┘
"""),
])
def test_tile_visibility_with_border(three_right_one_down, draw, looks_like, visible, expected):
    tile_view = three_right_one_down(border=True)
    for tile, is_visible in zip(tile_view.tiles, visible):
        tile.visible = is_visible

    assert draw(tile_view) == looks_like(expected)


@pytest.mark.parametrize('visible, expected', [
    ((False, True, True), """
2222222222222│333333
2222222222222│333333
2222222222222│333333
2222222222222│333333
2222222222222│333333
2222222222222├──────
2222222222222│444444
2222222222222│444444
2222222222222│444444
2222222222222│444444
"""),
    ((True, True, False), """
111111│2222222222222
111111│2222222222222
111111│2222222222222
111111│2222222222222
111111│2222222222222
111111│2222222222222
111111│2222222222222
111111│2222222222222
111111│2222222222222
111111│2222222222222
"""),
    ((False, False, True), """
33333333333333333333
33333333333333333333
33333333333333333333
33333333333333333333
33333333333333333333
────────────────────
44444444444444444444
44444444444444444444
44444444444444444444
44444444444444444444
"""),
])
def test_tile_visibility_without_border(three_right_one_down, draw, looks_like, visible, expected):
    tile_view = three_right_one_down(border=False)
    for tile, is_visible in zip(tile_view.tiles, visible):
        tile.visible = is_visible

    assert draw(tile_view) == looks_like(expected)


def test_removing_tiles_of_nested_view(three_right_one_down, draw, looks_like):
    tile_view = three_right_one_down(border=True)
    to_remove = tile_view.tiles[1]

    assert tile_view.remove_tile(1) is to_remove
    assert to_remove not in tile_view.tiles
    assert draw(tile_view) == looks_like("""
┌─────────┬────────┐
│111111111│33333333│
│111111111│33333333│
│111111111│33333333│
│111111111│33333333│
│111111111├────────┤
│111111111│44444444│
│111111111│44444444│
│111111111│44444444│
└─────────┴────────┘
""")

    assert tile_view.remove_tile(2) is None
    tile_view.remove_tile(0)
    assert draw(tile_view) == looks_like("""
┌──────────────────┐
│333333333333333333│
│333333333333333333│
│333333333333333333│
│333333333333333333│
├──────────────────┤
│444444444444444444│
│444444444444444444│
│444444444444444444│
└──────────────────┘
""")

    assert tile_view.remove_tile(0) is not None
    assert draw(tile_view) == looks_like("""
┌──────────────────┐
│                  │
│                  │
│                  │
│                  │
│                  │
│                  │
│                  │
│                  │
└──────────────────┘
""")
    assert tile_view.remove_tile(0) is None


def test_titles_on_border(three_right_one_down, draw, looks_like):
    tile_view = three_right_one_down(border=True, titles=True)

    assert draw(tile_view) == looks_like("""
┌ T1 ─┬ T2 ──┬ T3 ─┐
│11111│222222│33333│
│11111│222222│33333│
│11111│222222│33333│
│11111│222222│33333│
│11111│222222├ T4 ─┤
│11111│222222│44444│
│11111│222222│44444│
│11111│222222│44444│
└─────┴──────┴─────┘
""")


def test_titles_do_not_overspill(three_right_one_down, draw, looks_like):
    tile_view = three_right_one_down(border=True, titles=True, split=1)
    assert draw(tile_view) == looks_like("""
┌ T1 ─┬ T3 ──┬ T2 ─┐
│11111│333333│22222│
│11111│333333│22222│
│11111│333333│22222│
│11111│333333│22222│
│11111├ T4 ──┤22222│
│11111│444444│22222│
│11111│444444│22222│
│11111│444444│22222│
└─────┴──────┴─────┘
""")

    tile_view.tiles[0].title = 'x' * 100
    tile_view.tiles[1].content.tiles[1].title = 'y' * 100
    assert draw(tile_view) == looks_like("""
┌ xxxx┬ T3 ──┬ T2 ─┐
│11111│333333│22222│
│11111│333333│22222│
│11111│333333│22222│
│11111│333333│22222│
│11111├ yyyyy┤22222│
│11111│444444│22222│
│11111│444444│22222│
│11111│444444│22222│
└─────┴──────┴─────┘
""")


def test_titles_need_a_row_above_the_tile(make_tile_view, draw, looks_like):
    tile_view = make_tile_view(11, 3)
    tile_view.tiles[0].title = 'A'
    assert draw(tile_view) == looks_like("""
11111│22222
     │
     │
""")


def test_only_root_draws_border(draw, looks_like):
    tile_view = TileView()
    tile_view.line_style = LINE_STYLE_SINGLE
    _, nested = tile_view.try_split_tile(1, 2)
    nested.line_style = LINE_STYLE_SINGLE
    nested.orientation = ORIENTATION_HORIZONTAL
    tile_view.set_dimensions(Rect(0, 0, 10, 5))

    assert tile_view.is_root_tile_view()
    assert not nested.is_root_tile_view()
    assert draw(tile_view) == looks_like("""
┌────┬───┐
│    │   │
│    ├───┤
│    │   │
└────┴───┘
""")


def test_root_view_as_content_keeps_its_border(draw, looks_like):
    tile_view = TileView()
    tile_view.line_style = LINE_STYLE_SINGLE
    inner = TileView()
    inner.line_style = LINE_STYLE_SINGLE
    inner.orientation = ORIENTATION_HORIZONTAL
    container = View()
    container.add(inner)
    tile_view.tiles[1].content = container
    tile_view.set_dimensions(Rect(0, 0, 10, 5))

    assert inner.is_root_tile_view()
    assert draw(tile_view) == looks_like("""
┌────┬───┐
│    │┌─┐│
│    │├─┤│
│    │└─┘│
└────┴───┘
""")


def test_render_stays_within_view(make_tile_view, looks_like):
    tile_view = make_tile_view(11, 3, border=True)
    tile_view.set_dimensions(Rect(2, 1, 11, 3))
    canvas = Canvas(20, 6)
    canvas.add_string(0, 0, 'x' * 20)
    canvas.add_string(4, 0, 'x' * 20)
    tile_view.render(canvas)

    assert canvas.text() == looks_like("""
xxxxxxxxxxxxxxxxxxxx
  ┌────┬────┐
  │1111│2222│
  └────┴────┘
xxxxxxxxxxxxxxxxxxxx
""")


def test_render_clears_needs_display(make_tile_view, draw):
    tile_view = make_tile_view(11, 3)
    assert tile_view.needs_display
    draw(tile_view)
    assert not tile_view.needs_display
    tile_view.tiles[0].title = 'changed'
    assert tile_view.needs_display


def test_nested_change_marks_root_for_display(make_tile_view, draw):
    tile_view = make_tile_view(20, 10)
    _, nested = tile_view.try_split_tile(0, 2)
    draw(tile_view)
    nested.tiles[0].title = 'changed'
    assert tile_view.needs_display
