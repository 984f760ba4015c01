# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from tileui.core import Core
from tileui.geometry import Rect, ORIENTATION_VERTICAL, LINE_STYLE_NONE, LINE_STYLE_SINGLE
from tileui.term.canvas import Canvas
from tileui.tiles import TileView
from tileui.views import Label


@pytest.fixture(autouse=True)
def core():
    Core.reset()
    yield Core()
    Core.reset()


def digits(digit, rows=1):
    return Label('\n'.join([str(digit) * 100] * rows))


@pytest.fixture()
def make_tile_view():
    """Create a TileView laid out at the origin, each tile showing its number."""
    def _make(width, height, tiles=2, border=False,
              orientation=ORIENTATION_VERTICAL, rows=1):
        tile_view = TileView(tiles)
        tile_view.orientation = orientation
        tile_view.line_style = LINE_STYLE_SINGLE if border else LINE_STYLE_NONE
        for i, tile in enumerate(tile_view.tiles):
            tile.content = digits(i + 1, rows)
        tile_view.set_dimensions(Rect(0, 0, width, height))
        return tile_view
    return _make


@pytest.fixture()
def draw():
    """Render a view into a canvas of its size and return the text."""
    def _draw(view):
        rect = view.dimensions
        canvas = Canvas(rect.right, rect.bottom)
        view.render(canvas)
        return canvas.text()
    return _draw


@pytest.fixture()
def looks_like():
    """Normalize an expected screen written as a triple quoted string."""
    def _looks_like(text):
        return '\n'.join(line.rstrip() for line in text.strip('\n').split('\n'))
    return _looks_like
