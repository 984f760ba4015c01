# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from tileui.keymap import WithKeymap, parse_keychord_string


class KeymapTest(WithKeymap):
    __keymap__ = {
        'C-i C-M-k': lambda obj: obj.calls.append('chord'),
        '<left>':    lambda obj: obj.calls.append('left'),
        '<right>':   lambda obj: False,
    }

    def __init__(self):
        super(KeymapTest, self).__init__()
        self.calls = []


class KeymapTest1(KeymapTest):
    __keymap__ = {
        '<left>': lambda obj: obj.calls.append('overridden'),
    }


class Delegating(WithKeymap):
    def __init__(self, delegate):
        super(Delegating, self).__init__()
        self.delegate = delegate

    def input_delegate(self):
        return self.delegate


def test_parse_keychord_string():
    assert parse_keychord_string('C-i  M-C-k') == ['C-i', 'C-M-k']
    assert parse_keychord_string('C-<f10>') == ['C-<f10>']


def test_parse_unknown_key():
    with pytest.raises(KeyError):
        parse_keychord_string('<f13>')
    with pytest.raises(KeyError):
        parse_keychord_string('X-a')


def test_complete_and_incomplete_keychords():
    obj = KeymapTest()
    assert obj.handle_input(['C-i']) is False
    assert obj.handle_input(['C-i', 'C-M-k']) is True
    assert obj.calls == ['chord']
    assert obj.handle_input(['C-x']) is None


def test_declined_keychord_is_unhandled():
    assert KeymapTest().handle_input(['<right>']) is None


def test_subclass_inherits_and_overrides():
    obj = KeymapTest1()
    obj.handle_input(['<left>'])
    obj.handle_input(['C-i', 'C-M-k'])
    assert obj.calls == ['overridden', 'chord']


def test_set_keychord_binds_per_instance():
    obj = KeymapTest()
    other = KeymapTest()
    obj.set_keychord('C-<f10>', lambda o: o.calls.append('toggle'))

    assert obj.handle_input(['C-<f10>']) is True
    assert obj.calls == ['toggle']
    assert other.handle_input(['C-<f10>']) is None


def test_delegate_handles_first():
    target = KeymapTest()
    outer = Delegating(target)
    outer.set_keychord('<left>', lambda o: pytest.fail('delegate should handle <left>'))
    outer.set_keychord('<up>', lambda o: target.calls.append('outer'))

    assert outer.handle_input(['<left>']) is True
    assert outer.handle_input(['<up>']) is True
    assert outer.handle_input(['<right>']) is None
    assert target.calls == ['left', 'outer']
