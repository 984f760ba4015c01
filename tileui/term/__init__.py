# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
A Frame is the character-cell surface views are rendered to. All
coordinates are absolute (row, column) pairs on the frame; writes
that fall outside the frame are discarded by the implementation.
"""


class Frame(object):
    def get_dimensions(self):
        """Return ``(rows, columns)`` of the frame."""
        raise NotImplementedError()

    def add_string(self, row, col, value):
        raise NotImplementedError()

    def add_symbol(self, row, col, value):
        raise NotImplementedError()

    def fill(self, rect, char=' '):
        if rect.is_empty():
            return
        line = char * rect.width
        for row in range(rect.y, rect.bottom):
            self.add_string(row, rect.x, line)

    def update(self):
        pass

    def close(self):
        pass
