# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides the TileView, a view that divides its area into
tiles separated by movable splitter lines.

Each splitter has a distance, which is either a percentage of the
extent of the TileView or an absolute number of cells. Percentages
are resolved again on every layout pass, so that the proportions of
the tiles survive a resize of the terminal, while absolute distances
stay where they are.

Every tile may be split into a nested TileView. The nested views form
a tree that is rooted in a TileView created by the user. Only the root
draws a border; the splitter lines of nested views are merged with the
lines of their parents, so that the whole tree renders as one grid.

The content of a tile is a view owned by the user of the TileView.
Operations that rebuild or remove tiles hand their contents back and
only dispose the splitter lines and nested views they created.
"""

from tileui.tiles.distance import SplitterDistance, Percent, Absolute, InvalidDistance
from tileui.tiles.tile import Tile
from tileui.tiles.tile_view import TileView
