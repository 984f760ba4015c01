# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from tileui.core import Core, context
from tileui.geometry import Rect, \
    ORIENTATION_VERTICAL, ORIENTATION_HORIZONTAL, LINE_STYLE_NONE, LINE_STYLE_SINGLE
from tileui.tiles import SplitterDistance, Percent, Absolute, InvalidDistance, Tile, TileView
from tileui.views import View, Label, MouseEvent, \
    BUTTON1_PRESSED, BUTTON1_RELEASED, REPORT_POSITION

__all__ = [
    'Core',
    'context',

    'Rect',
    'ORIENTATION_VERTICAL',
    'ORIENTATION_HORIZONTAL',
    'LINE_STYLE_NONE',
    'LINE_STYLE_SINGLE',

    'SplitterDistance',
    'Percent',
    'Absolute',
    'InvalidDistance',
    'Tile',
    'TileView',

    'View',
    'Label',
    'MouseEvent',
    'BUTTON1_PRESSED',
    'BUTTON1_RELEASED',
    'REPORT_POSITION',
]
