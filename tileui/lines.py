# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Line segments that are drawn into a LineCanvas are merged cell by
cell.  Each cell remembers in which directions a line leaves it, so
that two segments meeting at a cell render as one joined glyph (a
corner, a tee or a cross) instead of one overwriting the other.
"""

from tileui import symbols
from tileui.geometry import ORIENTATION_HORIZONTAL, ORIENTATION_VERTICAL

LEFT = 'left'
RIGHT = 'right'
UP = 'up'
DOWN = 'down'

JUNCTION_MAP = {
    frozenset([LEFT]):                  symbols.SYM_HLINE,
    frozenset([RIGHT]):                 symbols.SYM_HLINE,
    frozenset([LEFT, RIGHT]):           symbols.SYM_HLINE,
    frozenset([UP]):                    symbols.SYM_VLINE,
    frozenset([DOWN]):                  symbols.SYM_VLINE,
    frozenset([UP, DOWN]):              symbols.SYM_VLINE,
    frozenset([RIGHT, DOWN]):           symbols.SYM_ULCORNER,
    frozenset([LEFT, DOWN]):            symbols.SYM_URCORNER,
    frozenset([RIGHT, UP]):             symbols.SYM_LLCORNER,
    frozenset([LEFT, UP]):              symbols.SYM_LRCORNER,
    frozenset([UP, DOWN, RIGHT]):       symbols.SYM_LTEE,
    frozenset([UP, DOWN, LEFT]):        symbols.SYM_RTEE,
    frozenset([LEFT, RIGHT, DOWN]):     symbols.SYM_TTEE,
    frozenset([LEFT, RIGHT, UP]):       symbols.SYM_BTEE,
    frozenset([LEFT, RIGHT, UP, DOWN]): symbols.SYM_PLUS,
}


class LineCanvas(object):
    def __init__(self):
        self._cells = {}

    def __contains__(self, point):
        return point in self._cells

    def add_line(self, x, y, length, orientation):
        """
        Add a straight line starting at ``(x, y)`` running ``length``
        cells to the right (horizontal) or downwards (vertical).
        """
        if length <= 0:
            return
        if orientation == ORIENTATION_HORIZONTAL:
            backward, forward, dx, dy = LEFT, RIGHT, 1, 0
        else:
            backward, forward, dx, dy = UP, DOWN, 0, 1

        for i in range(length):
            cell = self._cells.setdefault((x + i * dx, y + i * dy), set())
            if i > 0 or length == 1:
                cell.add(backward)
            if i < length - 1 or length == 1:
                cell.add(forward)

    def add_rectangle(self, x, y, width, height):
        self.add_line(x, y, width, ORIENTATION_HORIZONTAL)
        self.add_line(x, y + height - 1, width, ORIENTATION_HORIZONTAL)
        self.add_line(x, y, height, ORIENTATION_VERTICAL)
        self.add_line(x + width - 1, y, height, ORIENTATION_VERTICAL)

    def cells(self, clip=None):
        """Yield ``(x, y, symbol)`` for each cell, optionally clipped to a Rect."""
        for (x, y), directions in sorted(self._cells.items(), key=lambda i: (i[0][1], i[0][0])):
            if clip is not None and not clip.contains(x, y):
                continue
            yield x, y, JUNCTION_MAP[frozenset(directions)]

    def render(self, frame, clip=None):
        for x, y, symbol in self.cells(clip):
            frame.add_symbol(y, x, symbol)
