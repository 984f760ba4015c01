# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from tileui import term
from tileui.symbols import UNICODE_SYMBOLS


class Canvas(term.Frame):
    """
    A frame that keeps its cells in memory.  Used for rendering
    without a terminal, e.g. in tests.
    """

    def __init__(self, columns, rows, symbols=UNICODE_SYMBOLS):
        self._rows = rows
        self._columns = columns
        self.symbols = symbols
        self.clear()

    def get_dimensions(self):
        return (self._rows, self._columns)

    def clear(self):
        self._cells = [[' '] * self._columns for _ in range(self._rows)]

    def add_string(self, row, col, value):
        if not 0 <= row < self._rows:
            return
        for offset, char in enumerate(value):
            if 0 <= col + offset < self._columns:
                self._cells[row][col + offset] = char

    def add_symbol(self, row, col, value):
        self.add_string(row, col, self.symbols.get(value, '?'))

    def lines(self):
        """Return the rows of the canvas with trailing whitespace removed."""
        return [''.join(row).rstrip() for row in self._cells]

    def text(self):
        lines = self.lines()
        while lines and not lines[-1]:
            lines.pop()
        return '\n'.join(lines)

    def __str__(self):
        return self.text()
