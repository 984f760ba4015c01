# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Views are rectangular regions of the frame.  A view is placed by its
owner through ``set_dimensions``, which lays out the view's children
and marks it for redraw.  Coordinates are absolute frame coordinates.
"""

from collections import namedtuple

from tileui.geometry import EMPTY_RECT
from tileui.keymap import WithKeymap
from tileui.util import deep_get, deep_put, truncate_right

BUTTON1_PRESSED = 1
BUTTON1_RELEASED = 2
REPORT_POSITION = 4

MouseEvent = namedtuple('MouseEvent', ['x', 'y', 'flags'])


class View(WithKeymap):
    def __init__(self):
        super(View, self).__init__()
        self.dimensions = EMPTY_RECT
        self.subviews = []
        self.superview = None
        self.needs_display = True
        self.disposed = False
        self._state = {}

    def add(self, view):
        if view.superview is not None:
            view.superview.remove(view)
        view.superview = self
        self.subviews.append(view)
        self.layout()
        self.set_needs_display()
        return view

    def remove(self, view):
        self.subviews.remove(view)
        view.superview = None
        self.set_needs_display()

    def set_dimensions(self, rect):
        """Place the view at ``rect`` and lay out its children."""
        self.dimensions = rect
        self.layout()
        self.set_needs_display()

    def layout(self):
        # Children fill their parent unless a subclass places them
        for view in self.subviews:
            view.set_dimensions(self.dimensions)

    def set_needs_display(self):
        self.needs_display = True

    def render(self, frame):
        for view in self.subviews:
            view.render(frame)
        self.needs_display = False

    def handle_mouse(self, event):
        return False

    def dispose(self):
        self.disposed = True

    # Variables

    def get_variable(self, path):
        return deep_get(self._state, path, return_none=False)

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=False)

    def def_hook(self, path):
        self.def_variable(path, [])

    def add_hook(self, path, fn):
        hooks = self.get_variable(path)
        if fn not in hooks:
            hooks.append(fn)

    def remove_hook(self, path, fn):
        self.get_variable(path).remove(fn)

    def run_hook(self, path, *args, **kwargs):
        for hook in list(self.get_variable(path)):
            hook(*args, **kwargs)


class Label(View):
    """Displays static text, one frame row per line of text."""

    def __init__(self, text=''):
        super(Label, self).__init__()
        self._text = text

    @property
    def text(self):
        return self._text

    @text.setter
    def text(self, text):
        self._text = text
        self.set_needs_display()

    def render(self, frame):
        rect = self.dimensions
        if not rect.is_empty():
            for row, line in enumerate(self._text.split('\n')[:rect.height]):
                frame.add_string(rect.y + row, rect.x, truncate_right(rect.width, line))
        super(Label, self).render(frame)
