# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import argparse

from tileui import core
from tileui.geometry import Rect, ORIENTATIONS, ORIENTATION_VERTICAL, ORIENTATION_HORIZONTAL, \
    LINE_STYLE_NONE, LINE_STYLE_SINGLE
from tileui.term.curses import Frame, EVT_RESIZE
from tileui.tiles import TileView
from tileui.util import pad_left
from tileui.views import Label, MouseEvent

QUIT_KEYCHORDS = ('C-q', 'C-c')

HELP_TEXT = 'C-<f10> toggles resizing, <tab> selects a splitter, C-q quits.'


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='tileui-demo',
        description='Display a TileView with resizable splitters in the terminal.')
    parser.add_argument('--tiles', type=int, default=3,
                        help='number of tiles of the root view')
    parser.add_argument('--orientation', choices=ORIENTATIONS, default=ORIENTATION_VERTICAL,
                        help='orientation of the root view')
    parser.add_argument('--border', action='store_true',
                        help='draw a border around the root view')
    parser.add_argument('--split', type=int, metavar='INDEX', default=None,
                        help='split the tile at INDEX into a nested view')
    return parser.parse_args(argv)


def build_view(args):
    tile_view = TileView(args.tiles)
    tile_view.orientation = args.orientation
    tile_view.line_style = LINE_STYLE_SINGLE if args.border else LINE_STYLE_NONE
    for i, tile in enumerate(tile_view.tiles):
        tile.title = 'Tile %s' % (i + 1)
        tile.content = Label('\n'.join([str(i + 1) * 200] * 100))
    if args.split is not None:
        is_split, nested = tile_view.try_split_tile(args.split, 2)
        if is_split:
            nested.orientation = ORIENTATION_HORIZONTAL \
                if args.orientation == ORIENTATION_VERTICAL else ORIENTATION_VERTICAL
            nested.tiles[1].title = 'Nested'
            nested.tiles[1].content = Label('\n'.join(['#' * 200] * 100))
    return tile_view


def run(frame, tile_view):
    c = core.Core()
    c.message(HELP_TEXT, show_log=False)
    while True:
        rows, columns = frame.get_dimensions()
        rect = Rect(0, 0, columns, max(0, rows - 1))
        if tile_view.dimensions != rect:
            tile_view.set_dimensions(rect)
        tile_view.render(frame)
        frame.add_string(rows - 1, 0, pad_left(columns - 1, c.last_message))
        frame.update()

        event = frame.read_input()
        if event is None:
            continue
        elif isinstance(event, MouseEvent):
            tile_view.handle_mouse(event)
        elif event in QUIT_KEYCHORDS:
            break
        elif event == EVT_RESIZE:
            continue
        elif tile_view.handle_input([event]) is None:
            c.message('%s is undefined.' % event, show_log=False)


def main(argv=None):
    args = parse_args(argv)
    with core.context():
        tile_view = build_view(args)
        frame = Frame()
        try:
            run(frame, tile_view)
        except KeyboardInterrupt:
            pass
        finally:
            frame.close()


if __name__ == '__main__':
    main()
