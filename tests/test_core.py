# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from tileui.core import Core, context
from tileui.logger import Logger


def test_core_is_singleton(core):
    assert Core() is core
    Core.reset()
    assert Core() is not core


def test_context_yields_core(core):
    with context() as c:
        assert c is core


def test_defaults(core):
    assert core.get_variable(['tile-view', 'toggle-resizable']) == 'C-<f10>'
    assert core.get_variable(['tile-view', 'line-style']) == 'none'
    assert core.get_variable(['tile-view', 'splitter-moved-hook']) == []


def test_variables(core):
    with pytest.raises(KeyError):
        core.get_variable(['does', 'not-exist'])
    with pytest.raises(KeyError):
        core.set_variable(['does', 'not-exist'], 1)

    core.def_variable(['demo', 'value'], 1)
    core.set_variable(['demo', 'value'], 2)
    assert core.get_variable(['demo', 'value']) == 2


def test_hooks(core):
    calls = []

    def hook(*args):
        calls.append(args)

    core.def_hook(['demo-hook'])
    core.add_hook(['demo-hook'], hook)
    core.add_hook(['demo-hook'], hook)
    core.run_hook(['demo-hook'], 1, 2)
    core.remove_hook(['demo-hook'], hook)
    core.run_hook(['demo-hook'], 3)

    assert calls == [(1, 2)]


def test_message(core):
    core.message('shown')
    core.message('not logged', show_log=False)
    core.message('short', log_message='long version')

    assert core.last_message == 'short'
    assert core.logger.messages == ['shown', 'long version']


def test_exception(core):
    try:
        raise ValueError('broken')
    except ValueError:
        core.exception()

    assert core.last_message == 'ValueError: broken\n'
    assert core.logger.messages[-1].startswith('Traceback')


def test_logger_is_bounded():
    logger = Logger(max_messages=2)
    for msg in ['a', 'b', 'c']:
        logger.log(msg)
    assert logger.messages == ['b', 'c']
    logger.clear()
    assert logger.messages == []
