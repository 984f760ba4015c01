# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Tile(object):
    """
    One slot of a TileView.

    ``content`` is a view owned by the caller.  The tile only refers
    to it; use ``detach`` to take it back out of the tile.
    ``dimensions`` is the rectangle assigned by the last layout pass,
    or None if the tile is hidden or has not been laid out yet.
    """

    def __init__(self, content=None, min_size=0, title='', visible=True):
        if min_size < 0:
            raise ValueError('min_size must not be negative, got %s' % min_size)
        self._owner = None
        self._content = content
        self._min_size = min_size
        self._title = title
        self._visible = visible
        self.dimensions = None

    def __repr__(self):
        return 'Tile(title=%r, min_size=%s, visible=%s)' % (
            self._title, self._min_size, self._visible)

    def _changed(self, relayout=True):
        if self._owner is not None:
            self._owner.tile_changed(self, relayout)

    @property
    def content(self):
        return self._content

    @content.setter
    def content(self, content):
        self._content = content
        self._changed()

    @property
    def min_size(self):
        return self._min_size

    @min_size.setter
    def min_size(self, min_size):
        if min_size < 0:
            raise ValueError('min_size must not be negative, got %s' % min_size)
        self._min_size = min_size

    @property
    def title(self):
        return self._title

    @title.setter
    def title(self, title):
        self._title = title
        self._changed(relayout=False)

    @property
    def visible(self):
        return self._visible

    @visible.setter
    def visible(self, visible):
        self._visible = visible
        self._changed()

    def detach(self):
        """Remove the content from this tile and return it."""
        content, self._content = self._content, None
        self._changed()
        return content
