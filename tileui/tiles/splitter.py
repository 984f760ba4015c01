# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Splitter lines are the movable separators between two tiles.  They
are created and disposed by their TileView and translate keyboard and
mouse input into single-cell moves of their splitter.
"""

from tileui import core
from tileui import symbols
from tileui.geometry import ORIENTATION_HORIZONTAL, ORIENTATION_VERTICAL
from tileui.tiles.distance import Absolute, to_percent
from tileui.util import minmax
from tileui.views import View, BUTTON1_PRESSED, BUTTON1_RELEASED, REPORT_POSITION


def _key_move(delta, orientation):
    def _move(line):
        if line.orientation != orientation:
            # Cannot move in this direction
            return False
        if not line.move_splitter(delta):
            core.Core().message('Can not move splitter any further.')
    return _move


class SplitterLine(View):
    __keymap__ = {
        '<left>':  _key_move(-1, ORIENTATION_VERTICAL),
        '<right>': _key_move(1, ORIENTATION_VERTICAL),
        '<up>':    _key_move(-1, ORIENTATION_HORIZONTAL),
        '<down>':  _key_move(1, ORIENTATION_HORIZONTAL),
    }

    def __init__(self, tile_view, index):
        super(SplitterLine, self).__init__()
        self.tile_view = tile_view
        self.index = index
        self.can_focus = False
        self._drag_position = None
        self._marker = None

    def __repr__(self):
        return 'SplitterLine(index=%s, dimensions=%s)' % (self.index, self.dimensions)

    @property
    def orientation(self):
        return self.tile_view.orientation

    @property
    def dragging(self):
        return self._drag_position is not None

    @property
    def length(self):
        if self.orientation == ORIENTATION_VERTICAL:
            return self.dimensions.height
        return self.dimensions.width

    def move_splitter(self, delta):
        """
        Move the splitter by ``delta`` cells, keeping the kind of its
        distance: a percentage stays a percentage of the current
        extent, an absolute offset stays absolute.
        """
        tile_view = self.tile_view
        extent = tile_view.dimensions.main_extent(self.orientation)
        if extent == 0:
            return False
        candidate = tile_view.splitter_offset(self.index) + delta
        if not 0 <= candidate < extent:
            return False
        if tile_view.splitter_distances[self.index].is_percent():
            distance = to_percent(candidate, extent)
        else:
            distance = Absolute(candidate)
        return tile_view.try_set_splitter_pos(self.index, distance)

    def _main_coordinate(self, event):
        return event.x if self.orientation == ORIENTATION_VERTICAL else event.y

    def _cross_coordinate(self, event):
        return event.y - self.dimensions.y if self.orientation == ORIENTATION_VERTICAL \
            else event.x - self.dimensions.x

    def _update_marker(self, event):
        self._marker = minmax(1, self._cross_coordinate(event), max(1, self.length - 2))

    def handle_mouse(self, event):
        if not self.dragging and event.flags == BUTTON1_PRESSED:
            # Start a drag
            self.tile_view.root_tile_view().focus_line(self)
            self._drag_position = self._main_coordinate(event)
            self._update_marker(event)
            return True

        if self.dragging and event.flags == BUTTON1_PRESSED | REPORT_POSITION:
            position = self._main_coordinate(event)
            delta = position - self._drag_position
            step = 1 if delta > 0 else -1
            for _ in range(abs(delta)):
                if not self.move_splitter(step):
                    core.Core().message('Can not move splitter any further.')
                    break
            self._drag_position = position
            self._update_marker(event)
            self.tile_view.set_needs_display()
            return True

        if self.dragging and event.flags & BUTTON1_RELEASED:
            self._drag_position = None
            self._marker = None
            self.tile_view.set_needs_display()
            return True

        return False

    def draw_symbol(self, frame):
        """Draw the move marker while the line is resizable or dragged."""
        if not (self.dragging or self.can_focus) or self.dimensions.is_empty():
            return
        position = self._marker if self._marker is not None else self.length // 2
        if self.orientation == ORIENTATION_VERTICAL:
            frame.add_symbol(self.dimensions.y + position, self.dimensions.x, symbols.SYM_DIAMOND)
        else:
            frame.add_symbol(self.dimensions.y, self.dimensions.x + position, symbols.SYM_DIAMOND)

    def dispose(self):
        self._drag_position = None
        self.can_focus = False
        super(SplitterLine, self).dispose()
