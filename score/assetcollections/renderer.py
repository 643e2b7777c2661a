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

from .group import Group
from .tags import formatter_for


class OutputRenderer:
    """
    Renders :term:`collections <asset collection>` as HTML tags. Collections
    are looked up in the given :class:`CollectionRegistry
    <score.assetcollections.registry.CollectionRegistry>` and resolved by the
    :class:`AssetResolver <score.assetcollections.resolver.AssetResolver>`.

    The renderer itself is stateless; it may be shared between threads, as
    long as collections are not replaced while they are being rendered.
    """

    def __init__(self, registry, resolver):
        self.registry = registry
        self.resolver = resolver

    def render(self, names, group):
        """
        Renders all collections with given *names* in given order and
        returns their tags for *group*, separated by newlines. Any error
        aborts the whole operation, there is no partial output.
        """
        group = Group.parse(group)
        if isinstance(names, str):
            raise TypeError('Expected a sequence of collection names, '
                            'got a string')
        parts = [self.render_collection(name, group) for name in names]
        return '\n'.join(parts)

    def render_collection(self, name, group):
        """
        Returns the tags of a single collection.
        """
        formatter = formatter_for(group)
        collection = self.registry.get(name)
        entries = self.resolver.resolve(collection, formatter.group)
        return '\n'.join(formatter.render(entry) for entry in entries)

    def render_group(self, group, *names):
        return self.render(names, group)

    def styles(self, name):
        return self.render_collection(name, Group.STYLE)

    def scripts(self, name):
        return self.render_collection(name, Group.SCRIPT)
