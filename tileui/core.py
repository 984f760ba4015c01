# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import contextlib
import sys
import traceback

from tileui.logger import Logger
from tileui.meta import Singleton
from tileui.util import deep_get, deep_put

__all__ = ['Core', 'context']


@contextlib.contextmanager
def context():
    yield Core()


class Core(object, metaclass=Singleton):
    """
    Process-wide state shared by all views: the message log, the
    echo area and the variable store used for configuration.
    """

    def __init__(self):
        super(Core, self).__init__()
        self.logger = Logger()
        self._last_message = ''
        self._init_state()

    def _init_state(self):
        self._state = {}
        self.def_variable(['tile-view', 'toggle-resizable'], 'C-<f10>')
        self.def_variable(['tile-view', 'line-style'], 'none')
        self.def_hook(['tile-view', 'splitter-moved-hook'])

    def message(self, msg, show_log=True, log_message=None):
        """
        Display a message in the echo area and log it.

        :param msg: The message to be displayed
        :param show_log: Set to False, to avoid appending the message to the log
        :param log_message: Provide an alternative text for appending to the log
        """
        self._last_message = msg
        if log_message:
            self.logger.log(log_message)
        elif show_log:
            self.logger.log(msg)

    def exception(self):
        """
        Call to log the last thrown exception.
        """
        exc_type, exc_value, _ = sys.exc_info()
        self.message(traceback.format_exception_only(exc_type, exc_value)[-1],
                     log_message=traceback.format_exc())

    @property
    def last_message(self):
        return self._last_message

    def get_variable(self, path):
        return deep_get(self._state, path, return_none=False)

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=False)

    # Hooks

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
