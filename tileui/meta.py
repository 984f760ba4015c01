# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides metaclass-based utilities.
"""


class Singleton(type):
    """
    Metaclass that implements the singleton pattern.

    Overrides Class Constructor, so that class is only
    created the first time it is called. After that, the
    previously created instance will be returned.
    """

    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls):
        """Drop the instance, so that the next call creates a new one."""
        cls._instances.pop(cls, None)
