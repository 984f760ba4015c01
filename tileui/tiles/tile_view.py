# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from tileui import core
from tileui.geometry import EMPTY_RECT, ORIENTATION_VERTICAL, LINE_STYLE_NONE, \
    check_orientation, check_line_style
from tileui.lines import LineCanvas
from tileui.tiles.distance import coerce_distance, default_distances, resolve, Percent
from tileui.tiles.solver import LayoutSolver
from tileui.tiles.splitter import SplitterLine
from tileui.tiles.tile import Tile
from tileui.util import truncate_right
from tileui.views import View


class TileView(View):
    """
    A view divided into tiles by movable splitter lines.

    Tiles are laid out side by side (vertical orientation) or stacked
    (horizontal orientation).  Any tile can be split into a nested
    TileView with ``try_split_tile``.  Nested views created this way
    are not root views: they never draw a border and their lines are
    joined to the lines of their parent.  A TileView that is placed
    into a tile as ordinary content stays a root view.

    Tile contents belong to the caller.  Structural operations hand
    contents back instead of disposing them.
    """

    __keymap__ = {
        '<tab>': lambda tile_view: tile_view.focus_next_line(),
    }

    def __init__(self, tiles=2, _parent=None):
        super(TileView, self).__init__()
        self._core = core.Core()
        self._parent = _parent
        self._is_root = _parent is None
        self._orientation = ORIENTATION_VERTICAL
        self._line_style = \
            check_line_style(self._core.get_variable(['tile-view', 'line-style'])) \
            if self._is_root else LINE_STYLE_NONE
        self._tiles = []
        self._distances = []
        self._lines = []
        self._layout = None
        self._resizable = False
        self._focused_line = None
        self._grab = None
        self.def_hook(['splitter-moved-hook'])
        self.set_keychord(self._core.get_variable(['tile-view', 'toggle-resizable']),
                          TileView.toggle_resizable)
        self.rebuild_for_tile_count(tiles)

    def __repr__(self):
        return 'TileView(tiles=%s, orientation=%s, root=%s)' % (
            len(self._tiles), self._orientation, self._is_root)

    # Properties

    @property
    def orientation(self):
        return self._orientation

    @orientation.setter
    def orientation(self, orientation):
        self._orientation = check_orientation(orientation)
        self.layout()
        self.set_needs_display()

    @property
    def line_style(self):
        return self._line_style

    @line_style.setter
    def line_style(self, line_style):
        self._line_style = check_line_style(line_style)
        self.layout()
        self.set_needs_display()

    @property
    def tiles(self):
        return tuple(self._tiles)

    @property
    def splitter_distances(self):
        return tuple(self._distances)

    @property
    def splitter_lines(self):
        return tuple(self._lines)

    def is_root_tile_view(self):
        return self._is_root

    def parent_tile_view(self):
        """Return the TileView this one was split from, None for root views."""
        return self._parent

    def root_tile_view(self):
        root = self
        while root._parent is not None:
            root = root._parent
        return root

    def has_border(self):
        return self._is_root and self._line_style != LINE_STYLE_NONE

    def index_of(self, content, recursive=False):
        """
        Return the index of the tile holding ``content``, either directly
        or as one of its subviews, or -1.  With ``recursive`` subviews are
        searched at any depth, including the tiles of nested views.
        """
        for i, tile in enumerate(self._tiles):
            view = tile.content
            if view is None:
                continue
            if view is content:
                return i
            if any(sub is content for sub in view.subviews):
                return i
            if recursive:
                if _contains(view.subviews, content):
                    return i
                if isinstance(view, TileView) and view.index_of(content, True) != -1:
                    return i
        return -1

    # Layout

    def _solver(self):
        return LayoutSolver(self._orientation, self.has_border())

    def _adopt(self, tile):
        tile._owner = self
        return tile

    def _release(self, tile):
        tile._owner = None
        tile.dimensions = None
        return tile

    def tile_changed(self, tile, relayout=True):
        if relayout:
            self.layout()
        self.set_needs_display()

    def set_needs_display(self):
        super(TileView, self).set_needs_display()
        if self._parent is not None:
            self._parent.set_needs_display()

    def layout(self):
        self._layout = self._solver().solve(self._tiles, self._distances, self.dimensions)
        if not self._layout.feasible:
            self._core.logger.log('Tiles do not fit into %s x %s cells.'
                                  % (self.dimensions.width, self.dimensions.height))
        for i, tile in enumerate(self._tiles):
            rect = self._layout.tile_rect(i)
            tile.dimensions = rect
            if rect is not None and tile.content is not None:
                tile.content.set_dimensions(rect)
        for i, line in enumerate(self._lines):
            line.dimensions = self._layout.line_rect(i) or EMPTY_RECT

    def splitter_offset(self, index):
        """Return the resolved cell offset of splitter ``index``."""
        extent = self.dimensions.main_extent(self._orientation)
        return self._solver().resolve_offsets(self._distances, extent)[index]

    def try_set_splitter_pos(self, index, value):
        """
        Move splitter ``index`` to ``value``, a Percent or Absolute
        distance or a plain int that is read as absolute.

        Returns False and leaves the splitter untouched if the new
        position would cross a neighbouring splitter or the border, or
        shrink a tile below its minimum size.
        """
        distance = coerce_distance(value)
        if not 0 <= index < len(self._distances):
            self._core.logger.log('No splitter with index %s.' % index)
            return False
        if distance.value < 0:
            self._core.logger.log('Splitter %s can not be moved to %s.' % (index, distance))
            return False

        extent = self.dimensions.main_extent(self._orientation)
        # Positions of a view that has not been laid out can not be checked
        if extent != 0 and not self._solver().validate_move(
                self._tiles, self._distances, index, resolve(distance, extent), extent):
            self._core.logger.log('Splitter %s can not be moved to %s.' % (index, distance))
            return False

        self._distances[index] = distance
        self.layout()
        self.set_needs_display()
        self.run_hook(['splitter-moved-hook'], self, index, distance)
        self._core.run_hook(['tile-view', 'splitter-moved-hook'], self, index, distance)
        return True

    # Structure

    def _create_line(self, index):
        line = SplitterLine(self, index)
        line.can_focus = self.root_tile_view()._resizable
        return line

    def _dispose_line(self, line):
        root = self.root_tile_view()
        if root._focused_line is line:
            root._focused_line = None
        if root._grab is line:
            root._grab = None
        line.dispose()

    def _redistributed(self, distances, count):
        # Percentages are spread evenly again, absolute offsets are kept
        return [Percent(100 // count * (i + 1)) if distance.is_percent() else distance
                for i, distance in enumerate(distances)]

    def _reindex_lines(self):
        for i, line in enumerate(self._lines):
            line.index = i

    def _accepts(self, tiles, distances):
        """Check a structural change against the current dimensions before committing it."""
        if self.dimensions.main_extent(self._orientation) == 0:
            return True
        return self._solver().solve(tiles, distances, self.dimensions).feasible

    def _hand_back(self, content):
        # Views split off this one become roots when they leave the tree
        if isinstance(content, TileView) and content._parent is self:
            content._detach_from_parent()
        return content

    def _detach_from_parent(self):
        root = self.root_tile_view()
        for view in self._iterate_views():
            for line in view._lines:
                if root._focused_line is line:
                    root._focused_line = None
                if root._grab is line:
                    root._grab = None
                line.can_focus = False
        self._parent = None
        self._is_root = True

    def rebuild_for_tile_count(self, count):
        """
        Replace all tiles with ``count`` empty ones.  The contents of
        the previous tiles are returned in their previous order.
        """
        if count < 0:
            raise ValueError('Tile count must not be negative, got %s' % count)
        contents = []
        for tile in self._tiles:
            self._release(tile)
            contents.append(self._hand_back(tile.detach()))
        for line in self._lines:
            self._dispose_line(line)

        self._tiles = [self._adopt(Tile()) for _ in range(count)]
        self._distances = default_distances(count) if count else []
        self._lines = [self._create_line(i) for i in range(len(self._distances))]
        self.layout()
        self.set_needs_display()
        return contents

    def insert_tile(self, index):
        """Insert an empty tile at ``index`` and return it, None if out of range."""
        if not 0 <= index <= len(self._tiles):
            return None
        count = len(self._tiles)
        tile = Tile()
        tiles = list(self._tiles)
        tiles.insert(index, tile)
        distances = list(self._distances)
        position = min(index, count - 1)
        if count > 0:
            distances.insert(position, Percent(0))
            distances = self._redistributed(distances, len(tiles))
        if not self._accepts(tiles, distances):
            self._core.logger.log('Tile can not be inserted at %s.' % index)
            return None

        self._tiles = tiles
        self._distances = distances
        self._adopt(tile)
        if count > 0:
            self._lines.insert(position, self._create_line(position))
            self._reindex_lines()
        self.layout()
        self.set_needs_display()
        return tile

    def remove_tile(self, index):
        """Remove the tile at ``index`` and return it, None if out of range."""
        if not 0 <= index < len(self._tiles):
            return None
        tiles = list(self._tiles)
        tile = tiles.pop(index)
        distances = list(self._distances)
        position = max(index - 1, 0)
        if distances:
            del distances[position]
            distances = self._redistributed(distances, len(tiles))
        if not self._accepts(tiles, distances):
            self._core.logger.log('Tile %s can not be removed.' % index)
            return None

        self._tiles = tiles
        self._release(tile)
        if self._distances:
            self._dispose_line(self._lines.pop(position))
            self._reindex_lines()
        self._distances = distances
        self.layout()
        self.set_needs_display()
        self._hand_back(tile.content)
        return tile

    def try_split_tile(self, index, count):
        """
        Replace the content of tile ``index`` by a nested TileView with
        ``count`` tiles.  The previous content and title move into the
        first tile of the nested view.

        Returns ``(True, nested)`` on success.  If the tile holds a
        TileView already, ``(False, existing)`` is returned.
        """
        if not 0 <= index < len(self._tiles) or count < 2:
            return False, None
        tile = self._tiles[index]
        if isinstance(tile.content, TileView):
            return False, tile.content

        nested = TileView(count, _parent=self)
        first = nested._tiles[0]
        first.title = tile.title
        first.content = tile.detach()
        tile.title = ''
        tile.content = nested
        return True, nested

    def try_collapse_tile(self, index):
        """
        Undo ``try_split_tile``: the content and title of the first tile
        of the nested view return to tile ``index``.  Returns
        ``(True, contents)`` with the contents of the remaining nested
        tiles, or ``(False, [])`` if the tile holds no nested view.
        """
        if not 0 <= index < len(self._tiles):
            return False, []
        tile = self._tiles[index]
        nested = tile.content
        if not isinstance(nested, TileView) or nested._parent is not self:
            return False, []

        title = nested._tiles[0].title if nested._tiles else ''
        contents = [t.detach() for t in nested._tiles]
        first = contents[0] if contents else None
        if isinstance(first, TileView) and first._parent is nested:
            # Moves up one level and stays part of this tree
            first._parent = self
        rest = [nested._hand_back(content) for content in contents[1:]]
        tile.content = first
        tile.title = title
        nested.dispose()
        return True, rest

    def dispose(self):
        """Dispose the lines and nested views of this view, never tile contents."""
        for line in self._lines:
            self._dispose_line(line)
        self._lines = []
        for tile in self._tiles:
            content = tile.content
            if isinstance(content, TileView) and content._parent is self:
                content.dispose()
        super(TileView, self).dispose()

    # Rendering

    def _iterate_views(self):
        """Yield this view and the views split off it, breadth first."""
        views = [self]
        while views:
            view = views.pop(0)
            yield view
            views.extend(tile.content for tile in view._tiles
                         if isinstance(tile.content, TileView) and tile.content._parent is view)

    def _iterate_lines(self):
        """Yield the visible lines of this view and its nested views, breadth first."""
        views = [self]
        while views:
            view = views.pop(0)
            for line in view._lines:
                if not line.dimensions.is_empty():
                    yield line
            for tile in view._tiles:
                content = tile.content
                if tile.visible and isinstance(content, TileView) and content._parent is view:
                    views.append(content)

    def _iterate_titled_tiles(self):
        for tile in self._tiles:
            if not tile.visible:
                continue
            content = tile.content
            if isinstance(content, TileView) and content._parent is self:
                # Split tiles show the titles of their nested tiles
                yield from content._iterate_titled_tiles()
            elif tile.title:
                yield tile

    def _render_lines(self, frame):
        rect = self.dimensions
        canvas = LineCanvas()
        if self.has_border():
            canvas.add_rectangle(rect.x, rect.y, rect.width, rect.height)

        for line in self._iterate_lines():
            dim = line.dimensions
            vertical = line.orientation == ORIENTATION_VERTICAL
            x, y = dim.x, dim.y
            length = dim.height if vertical else dim.width
            if line.tile_view is not self:
                # Join the ends with lines of the enclosing views
                dx, dy = (0, 1) if vertical else (1, 0)
                if (x - dx, y - dy) in canvas:
                    x, y, length = x - dx, y - dy, length + 1
                if (x + dx * length, y + dy * length) in canvas:
                    length += 1
            canvas.add_line(x, y, length, line.orientation)

        canvas.render(frame, clip=rect)

    def _render_titles(self, frame):
        for tile in self._iterate_titled_tiles():
            dim = tile.dimensions
            if dim is None or dim.y - 1 < self.dimensions.y:
                # Without a border there is no room above the top tiles
                continue
            title = truncate_right(dim.width, ' %s ' % tile.title)
            if title:
                frame.add_string(dim.y - 1, dim.x, title)

    def render(self, frame):
        if self._is_root:
            frame.fill(self.dimensions)
        for tile in self._tiles:
            dim = tile.dimensions
            if tile.content is not None and dim is not None and not dim.is_empty():
                tile.content.render(frame)
        if self._is_root:
            self._render_lines(frame)
            for line in self._iterate_lines():
                line.draw_symbol(frame)
            self._render_titles(frame)
        self.needs_display = False

    # Input

    def toggle_resizable(self):
        """Switch keyboard resizing of all splitters of the view tree."""
        root = self.root_tile_view()
        root._resizable = not root._resizable
        for view in root._iterate_views():
            for line in view._lines:
                line.can_focus = root._resizable
        lines = list(root._iterate_lines())
        root._focused_line = lines[0] if root._resizable and lines else None
        root.set_needs_display()

    def focused_line(self):
        return self.root_tile_view()._focused_line

    def focus_line(self, line):
        self.root_tile_view()._focused_line = line
        self.set_needs_display()

    def focus_next_line(self):
        root = self.root_tile_view()
        if not root._resizable:
            return False
        lines = list(root._iterate_lines())
        if not lines:
            return False
        index = lines.index(root._focused_line) + 1 if root._focused_line in lines else 0
        root.focus_line(lines[index % len(lines)])

    def input_delegate(self):
        if self._is_root and self._resizable:
            return self._focused_line
        return None

    def handle_mouse(self, event):
        if self._is_root:
            if self._grab is not None:
                line = self._grab
                handled = line.handle_mouse(event)
                if not line.dragging:
                    self._grab = None
                return handled
            for line in self._iterate_lines():
                if line.dimensions.contains(event.x, event.y) and line.handle_mouse(event):
                    if line.dragging:
                        self._grab = line
                    return True
        for tile in self._tiles:
            dim = tile.dimensions
            if tile.content is not None and dim is not None and dim.contains(event.x, event.y):
                return tile.content.handle_mouse(event)
        return False


def _contains(views, needle):
    for view in views:
        if view is needle or _contains(view.subviews, needle):
            return True
    return False
