# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import curses
import re

from tileui import symbols
from tileui import term
from tileui.views import MouseEvent, \
    BUTTON1_PRESSED, BUTTON1_RELEASED, REPORT_POSITION

EVT_RESIZE = 'key_resize'
EVT_MOUSE = 'key_mouse'

KEYCHORD_MAP = {
    'C-m':        '<enter>',
    'C-j':        '<enter>',
    'C-i':        '<tab>'
}

KEYNAME_MAP = {
    'KEY_HOME':      '<home>',
    'KEY_END':       '<end>',
    'KEY_NPAGE':     '<pgdown>',
    'KEY_PPAGE':     '<pgup>',
    'KEY_DC':        '<del>',
    'KEY_BTAB':      'S-<tab>',

    'KEY_UP':        '<up>',
    'KEY_SR':        'S-<up>',
    'kUP5':          'C-<up>',
    'KEY_DOWN':      '<down>',
    'KEY_SF':        'S-<down>',
    'kDN5':          'C-<down>',
    'KEY_LEFT':      '<left>',
    'KEY_SLEFT':     'S-<left>',
    'kLFT5':         'C-<left>',
    'KEY_RIGHT':     '<right>',
    'KEY_SRIGHT':    'S-<right>',
    'kRIT5':         'C-<right>',

    'KEY_RESIZE':    EVT_RESIZE,
    'KEY_MOUSE':     EVT_MOUSE,
}

KEY_FN_PATTERN = re.compile(r'KEY_F\((\d+)\)')


def translate_keyname(keyname, meta=False):
    if keyname.startswith('^') and len(keyname) > 1:
        return 'C-' + translate_keyname(keyname[1:].lower(), meta=meta)
    elif meta:
        return 'M-' + translate_keyname(keyname)

    fn_match = KEY_FN_PATTERN.match(keyname)
    if fn_match:
        fn_idx = int(fn_match.group(1))
        return \
            ('<f%s>'     % (fn_idx))      if fn_idx < 13 else \
            ('S-<f%s>'   % (fn_idx - 12)) if fn_idx < 25 else \
            ('C-<f%s>'   % (fn_idx - 24)) if fn_idx < 37 else \
            ('C-S-<f%s>' % (fn_idx - 36))

    return KEYNAME_MAP.get(keyname, keyname)


def translate_keychord(keyname, meta=False):
    mkeys = translate_keyname(keyname, meta)
    return KEYCHORD_MAP.get(mkeys, mkeys)


def read_keychord(screen):
    key = screen.getch()
    if key == -1:
        return None
    if key == 27:
        screen.nodelay(True)
        try:
            key = screen.getch()
        finally:
            screen.nodelay(False)
        if key == -1:
            return '<esc>'
        return translate_keychord(curses.keyname(key).decode('utf-8'), meta=True)
    return translate_keychord(curses.keyname(key).decode('utf-8'))


def read_mouse_event():
    """Translate the pending curses mouse event into a MouseEvent."""
    try:
        _, x, y, _, bstate = curses.getmouse()
    except curses.error:
        return None
    if bstate & curses.BUTTON1_PRESSED:
        return MouseEvent(x, y, BUTTON1_PRESSED)
    if bstate & curses.BUTTON1_RELEASED:
        return MouseEvent(x, y, BUTTON1_RELEASED)
    if bstate & curses.REPORT_MOUSE_POSITION:
        return MouseEvent(x, y, BUTTON1_PRESSED | REPORT_POSITION)
    return None


class Frame(term.Frame):
    def __init__(self):
        self._screen = curses.initscr()
        curses.savetty()
        curses.raw()
        curses.nonl()
        curses.noecho()
        curses.curs_set(0)
        self._screen.keypad(1)
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        # Ask the terminal to report pointer motion while a button is held
        print('\033[?1002h', end='', flush=True)

        self.symbols = {
            symbols.SYM_VLINE:    curses.ACS_VLINE,
            symbols.SYM_HLINE:    curses.ACS_HLINE,
            symbols.SYM_ULCORNER: curses.ACS_ULCORNER,
            symbols.SYM_URCORNER: curses.ACS_URCORNER,
            symbols.SYM_LLCORNER: curses.ACS_LLCORNER,
            symbols.SYM_LRCORNER: curses.ACS_LRCORNER,
            symbols.SYM_LTEE:     curses.ACS_LTEE,
            symbols.SYM_RTEE:     curses.ACS_RTEE,
            symbols.SYM_TTEE:     curses.ACS_TTEE,
            symbols.SYM_BTEE:     curses.ACS_BTEE,
            symbols.SYM_PLUS:     curses.ACS_PLUS,
            symbols.SYM_DIAMOND:  curses.ACS_DIAMOND,
        }

    def close(self):
        print('\033[?1002l', end='', flush=True)
        curses.resetty()
        curses.endwin()

    def read_input(self):
        """
        Block for the next input event. Returns a keychord string, a
        MouseEvent, ``EVT_RESIZE`` or None.
        """
        keychord = read_keychord(self._screen)
        if keychord == EVT_MOUSE:
            return read_mouse_event()
        return keychord

    def get_dimensions(self):
        return self._screen.getmaxyx()

    def add_string(self, row, col, value):
        max_y, max_x = self.get_dimensions()
        if not 0 <= row < max_y or col >= max_x:
            return
        if col < 0:
            value, col = value[-col:], 0
        try:
            self._screen.addstr(row, col, value[:max_x - col])
        except curses.error:
            # Writing the bottom right cell moves the cursor off screen
            pass

    def add_symbol(self, row, col, value):
        max_y, max_x = self.get_dimensions()
        if not (0 <= row < max_y and 0 <= col < max_x):
            return
        try:
            self._screen.addch(row, col, self.symbols.get(value, ord('?')))
        except curses.error:
            pass

    def update(self):
        self._screen.noutrefresh()
        curses.doupdate()
