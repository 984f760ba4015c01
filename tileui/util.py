# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


def truncate_right(width, string):
    return string[:max(0, width)]


def pad_left(width, string):
    trunc = string[:width]
    return trunc + ' ' * (width - len(trunc))


def minmax(minimum, value, maximum):
    return max(minimum, min(value, maximum))


def _deep_error(path):
    raise KeyError('Path %s does not exist.' % path)


def deep_put(dict_, key_path, value, create_path=True):
    if len(key_path) == 0:
        raise KeyError('Can not deep_put using empty path.')

    dict_anchor = dict_
    for key in key_path[:-1]:
        if key not in dict_anchor:
            if create_path:
                dict_anchor[key] = {}
            else:
                _deep_error(key_path)
        dict_anchor = dict_anchor[key]
    if not create_path and key_path[-1] not in dict_anchor:
        _deep_error(key_path)
    dict_anchor[key_path[-1]] = value


def deep_get(dict_, key_path, return_none=True):
    if len(key_path) == 0:
        raise KeyError('Can not deep_get using empty path.')

    dict_anchor = dict_
    for key in key_path:
        if not hasattr(dict_anchor, 'get'):
            if return_none:
                return None
            else:
                _deep_error(key_path)
        dict_anchor = dict_anchor.get(key)
        if dict_anchor is None:
            if return_none:
                return None
            else:
                _deep_error(key_path)
    return dict_anchor
