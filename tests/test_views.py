# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from tileui.geometry import Rect, EMPTY_RECT
from tileui.term.canvas import Canvas
from tileui.views import View, Label, MouseEvent, BUTTON1_PRESSED


def test_subviews_fill_parent():
    parent = View()
    parent.set_dimensions(Rect(1, 2, 10, 5))
    child = parent.add(View())

    assert child.superview is parent
    assert child.dimensions == Rect(1, 2, 10, 5)

    parent.set_dimensions(Rect(0, 0, 3, 3))
    assert child.dimensions == Rect(0, 0, 3, 3)


def test_add_moves_view_between_parents():
    first, second = View(), View()
    child = first.add(View())
    second.add(child)

    assert first.subviews == []
    assert second.subviews == [child]
    second.remove(child)
    assert child.superview is None


def test_new_view_is_empty_and_needs_display():
    view = View()
    assert view.dimensions == EMPTY_RECT
    assert view.needs_display
    assert not view.disposed
    assert view.handle_mouse(MouseEvent(0, 0, BUTTON1_PRESSED)) is False


def test_label_is_truncated():
    label = Label('abcd\nefgh\nijkl')
    label.set_dimensions(Rect(1, 1, 3, 2))
    canvas = Canvas(5, 4)
    label.render(canvas)

    assert canvas.text() == '\n abc\n efg'
    assert not label.needs_display


def test_label_text_marks_display():
    label = Label()
    label.render(Canvas(1, 1))
    label.text = 'changed'
    assert label.needs_display
    assert label.text == 'changed'


def test_view_variables_and_hooks():
    view = View()
    calls = []
    view.def_variable(['answer'], 42)
    view.def_hook(['changed-hook'])
    view.add_hook(['changed-hook'], calls.append)
    view.run_hook(['changed-hook'], 'x')

    assert view.get_variable(['answer']) == 42
    assert calls == ['x']
    with pytest.raises(KeyError):
        view.set_variable(['missing'], 1)


def test_dispose():
    view = View()
    view.dispose()
    assert view.disposed
