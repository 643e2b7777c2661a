# Copyright © 2015-2018 STRG.AT GmbH, Vienna, Austria
#
# This file is part of the The SCORE Framework.
#
# The SCORE Framework and all its parts are free software: you can redistribute
# them and/or modify them under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation which is in the
# file named COPYING.LESSER.txt.
#
# The SCORE Framework and all its parts are distributed without any WARRANTY;
# without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
# PARTICULAR PURPOSE. For more details see the GNU Lesser General Public
# License.
#
# If you have not received a copy of the GNU Lesser General Public License see
# http://www.gnu.org/licenses/.
#
# The License-Agreement realised between you as Licensee and STRG.AT GmbH as
# Licenser including the issue of its valid conclusion and its pre- and
# post-contractual effects is governed by the laws of Austria. Any disputes
# concerning this License-Agreement including the issue of its valid conclusion
# and its pre- and post-contractual effects are exclusively decided by the
# competent court, in whose district STRG.AT GmbH has its registered seat, at
# the discretion of STRG.AT GmbH also the competent court, in whose district the
# Licensee has his registered seat, an establishment or assets.

import enum
import os


class Group(enum.Enum):
    """
    The :term:`asset group` an asset belongs to. Every group knows the file
    extensions of its members:

    >>> Group.of('css/reset.css')
    <Group.STYLE: 'style'>
    >>> Group.parse('javascripts')
    <Group.SCRIPT: 'script'>
    """

    STYLE = 'style'
    SCRIPT = 'script'

    @property
    def extensions(self):
        return _extensions[self]

    @classmethod
    def parse(cls, value):
        """
        Converts *value* into a :class:`Group`. Accepts group objects as well
        as the usual aliases, like ``stylesheets``, ``css`` or ``js``.
        """
        if isinstance(value, cls):
            return value
        try:
            return _aliases[str(value).strip().lower()]
        except KeyError:
            raise ValueError('Invalid asset group: %r' % (value,))

    @classmethod
    def of(cls, path):
        """
        Determines the group of an asset by the extension of its *path*.
        """
        extension = extension_of(path)
        for group in cls:
            if extension in group.extensions:
                return group
        raise ValueError('Cannot determine asset group of %r' % (path,))


def extension_of(path):
    """
    Returns the lower-case extension of *path* without the leading dot,
    ignoring query strings and fragments of URLs.
    """
    path = path.split('?', 1)[0].split('#', 1)[0]
    return os.path.splitext(path)[1][1:].lower()


_extensions = {
    Group.STYLE: ('css', 'sass', 'scss', 'less', 'styl', 'roo', 'gss'),
    Group.SCRIPT: ('js', 'coffee', 'dart', 'ts'),
}

_aliases = {
    'style': Group.STYLE,
    'styles': Group.STYLE,
    'stylesheet': Group.STYLE,
    'stylesheets': Group.STYLE,
    'css': Group.STYLE,
    'script': Group.SCRIPT,
    'scripts': Group.SCRIPT,
    'javascript': Group.SCRIPT,
    'javascripts': Group.SCRIPT,
    'js': Group.SCRIPT,
}
