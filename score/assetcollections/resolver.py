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

"""
Turns the :class:`references <score.assetcollections.registry.AssetReference>`
of a collection into concrete :class:`AssetEntry` objects. A reference is
interpreted as follows:

- URLs starting with ``http://``, ``https://`` or ``//`` are remote assets
  and are used verbatim,
- paths prefixed with ``path: `` are absolute file system paths,
- paths prefixed with ``name:<directory>/`` are searched in the configured
  directory of that name only,
- paths containing glob characters are expanded in every search folder and
- all other paths are looked up in the search folders, the first existing
  file wins.

The search folders are the *rootdir* followed by the named *directories* in
their configured order.
"""

import glob
import logging
import os
import re
from collections import OrderedDict, namedtuple
from urllib.parse import quote

import xxhash

from .errors import AssetNotFound, EmptyGroupError
from .group import Group, extension_of


log = logging.getLogger(__name__)

AssetEntry = namedtuple('AssetEntry', (
    'reference', 'group', 'path', 'url', 'remote', 'extension'))

remote_regex = re.compile(r'^(https?:)?//', re.IGNORECASE)
magic_regex = re.compile(r'[*?[]')


def is_remote(path):
    return bool(remote_regex.match(path))


class AssetResolver:
    """
    Resolves collections to lists of :class:`AssetEntry` objects.

    Local assets receive a URL beneath the *url* prefix, which includes the
    name of the collection and the path of the file relative to the folder
    it was found in. If *versioning* is enabled, a hash of the file content
    is appended to the URL as ``_v`` parameter. The *freeze* parameter
    behaves like the option of the same name in :mod:`score.webassets`:
    `True` will calculate each hash only once, a string will be used as the
    hash of all assets.

    Collections without assets of the requested group resolve to an empty
    list, unless the resolver is *strict*.
    """

    def __init__(self, rootdir=None, directories=None, url='/assets',
                 strict=False, versioning=True, freeze=False):
        self.rootdir = rootdir
        self.directories = OrderedDict(directories or {})
        self.url = url.rstrip('/')
        self.strict = strict
        self.versioning = versioning
        self.freeze = freeze
        self._frozen_versions = {}

    def resolve(self, collection, group):
        """
        Returns all entries of *collection* belonging to *group*, in the
        order their references were registered. Files already resolved by an
        earlier reference of the same collection are not repeated.
        """
        group = Group.parse(group)
        entries = []
        seen = set()
        for reference in collection.references(group):
            for entry in self._resolve_reference(collection, reference):
                key = entry.path or entry.url
                if key in seen:
                    log.debug('Skipping duplicate %s in collection %s',
                              key, collection.name)
                    continue
                seen.add(key)
                entries.append(entry)
        if not entries and self.strict:
            raise EmptyGroupError(collection.name, group)
        return entries

    def search_folders(self):
        """
        Provides the list of folders plain asset paths are looked up in.
        """
        folders = []
        if self.rootdir:
            folders.append(self.rootdir)
        folders.extend(self.directories.values())
        return folders

    def hash(self, entry):
        """
        Provides the :term:`hash <asset hash>` of an entry. Remote assets
        have no hash.
        """
        if entry.remote:
            return None
        if isinstance(self.freeze, str):
            return self.freeze
        elif self.freeze:
            try:
                return self._frozen_versions[entry.path]
            except KeyError:
                hash_ = self._hash_file(entry.path)
                self._frozen_versions[entry.path] = hash_
                return hash_
        return self._hash_file(entry.path)

    def _hash_file(self, file):
        hash_ = xxhash.xxh64()
        with open(file, 'rb') as fp:
            for chunk in iter(lambda: fp.read(4096), b''):
                hash_.update(chunk)
        return hash_.hexdigest()

    def _resolve_reference(self, collection, reference):
        path = reference.path
        if is_remote(path):
            return [AssetEntry(reference, reference.group, None, path, True,
                               extension_of(path))]
        if path.startswith('path: '):
            file = path[len('path: '):].strip()
            if not os.path.isfile(file):
                raise AssetNotFound(collection.name, path)
            return [self._local_entry(
                collection, reference, file, os.path.dirname(file))]
        folders = self.search_folders()
        if path.startswith('name:'):
            name, _, path = path[len('name:'):].partition('/')
            try:
                folders = [self.directories[name.strip()]]
            except KeyError:
                raise AssetNotFound(collection.name, reference.path)
        if magic_regex.search(path):
            return self._expand(collection, reference, path, folders)
        for folder in folders:
            file = os.path.join(folder, path)
            if os.path.isfile(file):
                return [self._local_entry(collection, reference, file, folder)]
        raise AssetNotFound(collection.name, reference.path)

    def _expand(self, collection, reference, pattern, folders):
        matched = False
        entries = []
        for folder in folders:
            basedir = os.path.join(folder, _glob_base(pattern))
            files = glob.glob(os.path.join(glob.escape(folder), pattern),
                              recursive=True)
            for file in sorted(files):
                if not os.path.isfile(file):
                    continue
                matched = True
                if extension_of(file) not in reference.group.extensions:
                    continue
                relpath = os.path.relpath(file, basedir).replace(os.sep, '/')
                if reference.only is not None and \
                        relpath not in reference.only:
                    continue
                if relpath in reference.exclude:
                    continue
                entries.append(
                    self._local_entry(collection, reference, file, folder))
        if not matched:
            raise AssetNotFound(collection.name, reference.path)
        log.debug('Expanded %s/%s to %d %s assets', collection.name,
                  reference.path, len(entries), reference.group.value)
        return entries

    def _local_entry(self, collection, reference, file, folder):
        file = os.path.abspath(file)
        relpath = os.path.relpath(file, os.path.abspath(folder))
        url = '%s/%s/%s' % (self.url, quote(collection.name),
                            quote(relpath.replace(os.sep, '/')))
        entry = AssetEntry(reference, reference.group, file, url, False,
                           extension_of(file))
        if self.versioning:
            hash_ = self.hash(entry)
            if hash_:
                entry = entry._replace(url=url + '?_v=' + hash_)
        return entry


def _glob_base(pattern):
    """
    Returns the leading part of a glob *pattern* without glob characters,
    i.e. the directory the pattern starts matching in.
    """
    parts = []
    for part in pattern.split('/'):
        if magic_regex.search(part):
            break
        parts.append(part)
    return '/'.join(parts)
