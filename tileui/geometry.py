# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from collections import namedtuple

# Tiles side by side, splitters are vertical lines
ORIENTATION_VERTICAL = 'vertical'
# Tiles stacked, splitters are horizontal lines
ORIENTATION_HORIZONTAL = 'horizontal'
ORIENTATIONS = (ORIENTATION_VERTICAL, ORIENTATION_HORIZONTAL)

LINE_STYLE_NONE = 'none'
LINE_STYLE_SINGLE = 'single'
LINE_STYLES = (LINE_STYLE_NONE, LINE_STYLE_SINGLE)


class Rect(namedtuple('Rect', ['x', 'y', 'width', 'height'])):
    __slots__ = ()

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def is_empty(self):
        return self.width <= 0 or self.height <= 0

    def contains(self, x, y):
        return self.x <= x < self.right and self.y <= y < self.bottom

    def main_extent(self, orientation):
        return self.width if orientation == ORIENTATION_VERTICAL else self.height

EMPTY_RECT = Rect(0, 0, 0, 0)


def check_orientation(orientation):
    if orientation not in ORIENTATIONS:
        raise ValueError('Unknown orientation: %s' % orientation)
    return orientation


def check_line_style(line_style):
    if line_style not in LINE_STYLES:
        raise ValueError('Unknown line style: %s' % line_style)
    return line_style
