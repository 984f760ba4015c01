# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Conversion of splitter distances into tile and line rectangles.

All offsets are measured along the main axis (columns for vertical
splitters, rows for horizontal ones) from the origin of the
TileView, with the border cells included.  A tile spans from the
cell after the preceding visible line (or border) up to, but not
including, the next visible line (or border).
"""

from tileui.geometry import Rect, ORIENTATION_VERTICAL
from tileui.tiles.distance import resolve
from tileui.util import minmax


class Layout(object):
    def __init__(self, orientation, rect, border, offsets, hidden_splitters, spans, feasible):
        self.orientation = orientation
        self.rect = rect
        self.border = border
        self.offsets = offsets
        self.hidden_splitters = hidden_splitters
        self.spans = spans
        self.feasible = feasible

    def tile_extent(self, index):
        span = self.spans[index]
        return 0 if span is None else span[1] - span[0]

    def tile_rect(self, index):
        """Return the rectangle of tile ``index``, None if it is hidden."""
        span = self.spans[index]
        if span is None:
            return None
        rect, border = self.rect, self.border
        start, end = span
        if self.orientation == ORIENTATION_VERTICAL:
            return Rect(rect.x + start, rect.y + border,
                        end - start, max(0, rect.height - 2 * border))
        return Rect(rect.x + border, rect.y + start,
                    max(0, rect.width - 2 * border), end - start)

    def line_rect(self, index):
        """Return the rectangle of splitter line ``index``, None if it is hidden."""
        if index in self.hidden_splitters:
            return None
        rect, offset = self.rect, self.offsets[index]
        if self.orientation == ORIENTATION_VERTICAL:
            return Rect(rect.x + offset, rect.y, 1, rect.height)
        return Rect(rect.x, rect.y + offset, rect.width, 1)


class LayoutSolver(object):
    def __init__(self, orientation, has_border=False):
        self.orientation = orientation
        self.border = 1 if has_border else 0

    def hidden_splitters(self, tiles):
        """
        Each hidden tile hides the splitter before it, or the one after
        it if that is taken already (e.g. when the first two tiles of
        three are hidden).
        """
        count = len(tiles) - 1
        hidden = set()
        if count <= 0:
            return hidden
        for i, tile in enumerate(tiles):
            if not tile.visible:
                candidate = max(0, i - 1)
                if candidate in hidden:
                    candidate = min(i, count - 1)
                hidden.add(candidate)
        return hidden

    def resolve_offsets(self, distances, extent):
        top = max(0, extent - 1)
        return [minmax(0, resolve(distance, extent), top) for distance in distances]

    def spans(self, tiles, offsets, extent, hidden):
        lines = [offset for i, offset in enumerate(offsets) if i not in hidden]
        visible_count = sum(1 for tile in tiles if tile.visible)
        spans = []
        start = self.border
        k = 0
        for tile in tiles:
            if not tile.visible:
                spans.append(None)
                continue
            k += 1
            if k < visible_count and k - 1 < len(lines):
                end = lines[k - 1]
            else:
                # Last visible tile takes the remainder
                end = extent - self.border
            spans.append((start, max(start, end)))
            start = end + 1
        return spans

    def is_feasible(self, tiles, offsets, spans, extent, hidden):
        lines = [offset for i, offset in enumerate(offsets) if i not in hidden]
        previous = self.border - 1
        for offset in lines:
            if offset <= previous or offset > extent - self.border - 1:
                return False
            previous = offset
        for tile, span in zip(tiles, spans):
            if span is not None and span[1] - span[0] < tile.min_size:
                return False
        return True

    def solve(self, tiles, distances, rect):
        extent = rect.main_extent(self.orientation)
        hidden = self.hidden_splitters(tiles)
        offsets = self.resolve_offsets(distances, extent)
        spans = self.spans(tiles, offsets, extent, hidden)
        feasible = rect.is_empty() or self.is_feasible(tiles, offsets, spans, extent, hidden)
        return Layout(self.orientation, rect, self.border,
                      offsets, frozenset(hidden), spans, feasible)

    def validate_move(self, tiles, distances, index, candidate, extent):
        """
        Check whether splitter ``index`` may be placed at cell
        ``candidate``.  The splitter must stay between its neighbours
        (or the border), and no tile whose extent changes may end up
        below its minimum size unless it grows.
        """
        offsets = self.resolve_offsets(distances, extent)
        low = offsets[index - 1] + 1 if index > 0 else self.border
        high = offsets[index + 1] - 1 if index + 1 < len(offsets) else extent - self.border - 1
        if not low <= candidate <= high:
            return False

        moved = list(offsets)
        moved[index] = candidate
        hidden = self.hidden_splitters(tiles)
        before = self.spans(tiles, offsets, extent, hidden)
        after = self.spans(tiles, moved, extent, hidden)
        for i, tile in enumerate(tiles):
            if after[i] is None:
                continue
            if i not in (index, index + 1) and after[i] == before[i]:
                continue
            before_extent = before[i][1] - before[i][0]
            after_extent = after[i][1] - after[i][0]
            if after_extent < tile.min_size and after_extent <= before_extent:
                return False
        return True
