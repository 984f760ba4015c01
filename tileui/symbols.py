# Copyright (c) 2017-2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

class Symbol(object):
    def __init__(self, name):
        self.name = name

    def __hash__(self):
        return id(self)

    def __eq__(self, other):
        return id(self) == id(other)

    def __repr__(self):
        return '#<symbol %s>' % self.name

SYM_VLINE = Symbol('vline')
SYM_HLINE = Symbol('hline')
SYM_ULCORNER = Symbol('ulcorner')
SYM_URCORNER = Symbol('urcorner')
SYM_LLCORNER = Symbol('llcorner')
SYM_LRCORNER = Symbol('lrcorner')
SYM_LTEE = Symbol('ltee')
SYM_RTEE = Symbol('rtee')
SYM_TTEE = Symbol('ttee')
SYM_BTEE = Symbol('btee')
SYM_PLUS = Symbol('plus')
SYM_DIAMOND = Symbol('diamond')

# Box drawing characters for frames that can render unicode
UNICODE_SYMBOLS = {
    SYM_VLINE:    '│',
    SYM_HLINE:    '─',
    SYM_ULCORNER: '┌',
    SYM_URCORNER: '┐',
    SYM_LLCORNER: '└',
    SYM_LRCORNER: '┘',
    SYM_LTEE:     '├',
    SYM_RTEE:     '┤',
    SYM_TTEE:     '┬',
    SYM_BTEE:     '┴',
    SYM_PLUS:     '┼',
    SYM_DIAMOND:  '◊',
}
