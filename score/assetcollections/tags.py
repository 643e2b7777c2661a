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

import abc
from html import escape

from .group import Group, extension_of


class TagFormatter(metaclass=abc.ABCMeta):
    """
    Converts :class:`asset entries
    <score.assetcollections.resolver.AssetEntry>` of a single :term:`group
    <asset group>` into HTML tags.
    """

    group = None

    @abc.abstractmethod
    def render_url(self, url):
        """
        Returns the string to embed in an HTML document to load given *url*.
        """

    def render(self, entry):
        return self.render_url(entry.url)


class StylesheetFormatter(TagFormatter):

    group = Group.STYLE

    def render_url(self, url):
        rel = 'stylesheet'
        if extension_of(url) == 'less':
            rel = 'stylesheet/less'
        return '<link rel="%s" type="text/css" href="%s" />' % (
            rel, escape(url))


class JavascriptFormatter(TagFormatter):

    group = Group.SCRIPT

    def render_url(self, url):
        type_ = 'text/javascript'
        if extension_of(url) == 'coffee':
            type_ = 'text/coffeescript'
        return '<script type="%s" src="%s"></script>' % (type_, escape(url))


formatters = {
    Group.STYLE: StylesheetFormatter(),
    Group.SCRIPT: JavascriptFormatter(),
}


def formatter_for(group):
    return formatters[Group.parse(group)]
