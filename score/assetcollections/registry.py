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

import logging
import re
import threading
from collections import OrderedDict, namedtuple

from .errors import UnknownCollectionError, DuplicateCollectionError
from .group import Group
from .resolver import is_remote, magic_regex


log = logging.getLogger(__name__)

group_prefix_regex = re.compile(r'^(\w+):\s+(.+)$')


def _as_tuple(paths):
    if isinstance(paths, str):
        return (paths,)
    return tuple(paths)


class AssetReference(namedtuple('AssetReference', (
        'path', 'group', 'only', 'exclude'))):
    """
    A single :term:`asset path` as it was added to a collection, together
    with the :term:`group <asset group>` it belongs to. The *path* is kept
    verbatim; it is interpreted by the :class:`AssetResolver
    <score.assetcollections.resolver.AssetResolver>` later on.

    References to directories may narrow the files they match: *only* lists
    the file paths to keep, *exclude* those to omit. Both are relative to
    the referenced directory.
    """

    __slots__ = ()

    def __new__(cls, path, group=None, only=None, exclude=()):
        if not path:
            raise ValueError('Empty asset path')
        if group is None:
            group = Group.of(path)
        if only is not None:
            only = _as_tuple(only)
        return super().__new__(
            cls, path, Group.parse(group), only, _as_tuple(exclude))

    @classmethod
    def parse(cls, value):
        """
        Creates a reference from an existing reference, a tuple in field
        order, e.g. ``(path, group)``, or a string. Strings may name the
        group explicitly, which is necessary for paths without a known
        extension:

        >>> AssetReference.parse('style: https://fonts.example.com/css').group
        <Group.STYLE: 'style'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            match = group_prefix_regex.match(value)
            if match:
                try:
                    group = Group.parse(match.group(1))
                except ValueError:
                    # not a group, like the "path: " prefix
                    pass
                else:
                    return cls(match.group(2).strip(), group)
            return cls(value)
        return cls(*value)


def parse_references(values):
    """
    Converts *values* into :class:`AssetReference` objects. A glob pattern
    without a group and without a recognizable extension, like ``css/*``,
    is added once for every group.
    """
    references = []
    for value in values:
        if isinstance(value, str) and magic_regex.search(value) \
                and not is_remote(value):
            try:
                references.append(AssetReference.parse(value))
            except ValueError:
                references.extend(
                    AssetReference(value, group) for group in Group)
        else:
            references.append(AssetReference.parse(value))
    return references


class Collection:
    """
    A named, ordered and immutable sequence of :class:`AssetReference`
    objects.
    """

    def __init__(self, name, references):
        self.name = name
        self._references = tuple(parse_references(references))

    def references(self, group=None):
        """
        Iterates all references of given *group* in registration order. Will
        iterate all references if no *group* is given.
        """
        if group is None:
            return iter(self._references)
        group = Group.parse(group)
        return (ref for ref in self._references if ref.group == group)

    def __len__(self):
        return len(self._references)

    def __repr__(self):
        return '<Collection %r (%d assets)>' % (self.name, len(self))


class CollectionRegistry:
    """
    Holds all known :class:`collections <Collection>` by their name.

    Collections are immutable, so registering a collection only needs to
    swap a reference. Readers never see half-built collections.
    """

    def __init__(self, overwrite=False):
        self.overwrite = overwrite
        self._collections = OrderedDict()
        self._lock = threading.Lock()

    def register(self, name, references):
        """
        Creates a new collection called *name* containing given *references*
        and returns it. Will raise a :class:`DuplicateCollectionError`, if a
        collection with that name exists and this registry does not
        :attr:`overwrite` existing collections.
        """
        if not name:
            raise ValueError('Empty collection name')
        collection = Collection(name, references)
        with self._lock:
            if name in self._collections:
                if not self.overwrite:
                    raise DuplicateCollectionError(name)
                log.debug('Replacing asset collection %s', name)
            else:
                log.debug('Registering asset collection %s', name)
            self._collections[name] = collection
        return collection

    def unregister(self, name):
        with self._lock:
            try:
                del self._collections[name]
            except KeyError:
                raise UnknownCollectionError(name)

    def get(self, name):
        """
        Returns the :class:`Collection` with given *name*.
        """
        try:
            return self._collections[name]
        except KeyError:
            raise UnknownCollectionError(name)

    def collection(self, name):
        """
        Provides a :class:`CollectionBuilder` for conveniently defining a new
        collection:

        >>> with registry.collection('application') as c:
        ...     c.add('css/reset.css')
        ...     c.add_tree('js')
        ...
        """
        return CollectionBuilder(self, name)

    def names(self):
        return list(self._collections.keys())

    def __contains__(self, name):
        return name in self._collections

    def __iter__(self):
        return iter(self.names())

    def __len__(self):
        return len(self._collections)


class CollectionBuilder:
    """
    Gathers references for a collection and registers it with the
    :class:`CollectionRegistry` once the ``with`` block is left without an
    error.
    """

    def __init__(self, registry, name):
        self.registry = registry
        self.name = name
        self.references = []

    def add(self, path, group=None):
        reference = AssetReference(path, group)
        self.references.append(reference)
        return reference

    def add_directory(self, path, group=None, only=None, exclude=()):
        """
        Adds all assets directly beneath the folder *path*. If *group* is
        omitted, the directory is added for both groups.

        The optional *only* and *exclude* lists narrow the added files by
        their path relative to the folder:

        >>> builder.add_directory('css', only=['reset.css', 'grid.css'])
        """
        return self._add_glob(path.rstrip('/') + '/*', group, only, exclude)

    def add_tree(self, path, group=None, only=None, exclude=()):
        """
        Adds all assets beneath the folder *path*, including those in
        sub-folders. Accepts the same filters as :meth:`add_directory`.
        """
        return self._add_glob(
            path.rstrip('/') + '/**/*', group, only, exclude)

    def _add_glob(self, pattern, group, only, exclude):
        if group is None:
            groups = list(Group)
        else:
            groups = [Group.parse(group)]
        added = []
        for group in groups:
            reference = AssetReference(pattern, group, only, exclude)
            self.references.append(reference)
            added.append(reference)
        return added

    def register(self):
        return self.registry.register(self.name, self.references)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.register()
