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


class AssetCollectionError(Exception):
    """
    Base class for all errors raised by this module.
    """


class UnknownCollectionError(AssetCollectionError, KeyError):
    """
    Thrown when a :term:`collection <asset collection>` was requested, that
    was never registered.
    """

    def __init__(self, name):
        self.name = name
        super().__init__(name)

    def __str__(self):
        return 'Unknown asset collection %r' % (self.name,)


class DuplicateCollectionError(AssetCollectionError):
    """
    Thrown when a collection is registered under a name that is already
    taken, and the registry was not configured to overwrite existing
    collections.
    """

    def __init__(self, name):
        self.name = name
        super().__init__('Asset collection %r already registered' % (name,))


class EmptyGroupError(AssetCollectionError):
    """
    Thrown by a strict :class:`AssetResolver
    <score.assetcollections.resolver.AssetResolver>`, if a collection does not
    contain a single asset of the requested :term:`group <asset group>`.
    """

    def __init__(self, collection, group):
        self.collection = collection
        self.group = group
        super().__init__('Asset collection %r has no %s assets' % (
            collection, group.value))


class AssetNotFound(AssetCollectionError):
    """
    Thrown when an asset reference of a collection could not be resolved to
    an existing file.

    Assets are identified by the combination of their collection name and
    the :term:`path <asset path>` as it was registered.
    """

    def __init__(self, collection, path):
        self.collection = collection
        self.path = path
        super().__init__('/%s/%s' % (collection, path))
