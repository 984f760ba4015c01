# Copyright (c) 2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Splitter positions.

A ``SplitterDistance`` is a tagged value: either a percentage of the
extent the splitter lives in, or an absolute number of cells.  Both
kinds are resolved to a cell offset by ``resolve``, which is the only
place that looks at the tag.
"""

from collections import namedtuple

PERCENT = 'percent'
ABSOLUTE = 'absolute'


class InvalidDistance(ValueError):
    pass


class SplitterDistance(namedtuple('SplitterDistance', ['kind', 'value'])):
    __slots__ = ()

    def is_percent(self):
        return self.kind == PERCENT

    def is_absolute(self):
        return self.kind == ABSOLUTE

    def __str__(self):
        if self.kind == PERCENT:
            return '%g%%' % self.value
        return '%d' % self.value


def Percent(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError('Percent requires a number, got %s' % type(value).__name__)
    if not 0 <= value <= 100:
        raise ValueError('Percent must be in range 0..100, got %s' % value)
    return SplitterDistance(PERCENT, value)


def Absolute(cells):
    if isinstance(cells, bool) or not isinstance(cells, int):
        raise ValueError('Absolute requires an integer, got %s' % type(cells).__name__)
    if cells < 0:
        raise ValueError('Absolute must not be negative, got %s' % cells)
    return SplitterDistance(ABSOLUTE, cells)


def default_distances(count):
    """Evenly spaced percentages for ``count`` tiles."""
    return [Percent(100 // count * i) for i in range(1, count)]


def coerce_distance(value):
    """
    Accept a SplitterDistance, or a plain int which is read as an
    absolute cell offset.  Anything else is a programming error.
    """
    if isinstance(value, SplitterDistance) and value.kind in (PERCENT, ABSOLUTE):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return SplitterDistance(ABSOLUTE, value)
    raise InvalidDistance('Only Percent and Absolute values are supported. '
                          'Passed value was %s' % type(value).__name__)


def resolve(distance, extent):
    """Return the cell offset of ``distance`` within ``extent`` cells."""
    if distance.kind == PERCENT:
        return int(extent * distance.value / 100)
    elif distance.kind == ABSOLUTE:
        return distance.value
    raise InvalidDistance('Unknown distance kind: %s' % distance.kind)


def to_percent(offset, extent):
    """
    Express a cell offset as a percentage of ``extent``.  The middle of
    the cell is used, so that resolving the result yields ``offset``
    again.
    """
    return Percent((offset + 0.5) / extent * 100)
