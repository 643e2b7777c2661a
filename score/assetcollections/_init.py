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

from score.init import (
    ConfiguredModule, ConfigurationError, extract_conf, parse_list,
    parse_bool)
import os

from .group import Group
from .registry import CollectionRegistry
from .renderer import OutputRenderer
from .resolver import AssetResolver

defaults = {
    'rootdir': None,
    'url': '/assets',
    'overwrite': False,
    'strict': False,
    'versioning': True,
    'freeze': False,
}


def init(confdict, tpl=None):
    """
    Initializes this module according to :ref:`our module initialization
    guidelines <module_initialization>` with the following configuration keys:

    :confkey:`rootdir` :confdefault:`None`
        The public folder containing the assets. Asset paths are looked up
        relative to this folder first.

    :confkey:`url` :confdefault:`/assets`
        The URL prefix of all rendered local assets.

    :confkey:`directory.*`
        Additional named folders to search for assets, in the given order::

            directory.vendor = ${here}/node_modules

        Assets in a named folder can also be addressed explicitly by prefixing
        their path with ``name:<directory>/``.

    :confkey:`collection.*`
        The :term:`collections <asset collection>` to register, as a list of
        :term:`asset paths <asset path>` each::

            collection.application =
                css/reset.css
                css/**/*.css
                js/**/*
                https://code.jquery.com/jquery.min.js
                style: https://fonts.googleapis.com/css?family=Roboto

        The group of each asset is determined by its file extension. Paths
        without a known extension need an explicit group prefix, like
        ``style: `` or ``script: ``. Glob patterns without either, like
        ``css/*``, are added for both groups.

    :confkey:`overwrite` :confdefault:`False`
        Whether registering a collection a second time replaces the existing
        one. Raises a :class:`DuplicateCollectionError
        <score.assetcollections.DuplicateCollectionError>` otherwise.

    :confkey:`strict` :confdefault:`False`
        Whether rendering a collection without any asset of the requested
        :term:`group <asset group>` raises an :class:`EmptyGroupError
        <score.assetcollections.EmptyGroupError>`. Such collections produce
        no output otherwise.

    :confkey:`versioning` :confdefault:`True`
        Whether to append the :term:`hash <asset hash>` of local assets to
        their URLs.

    :confkey:`freeze` :confdefault:`False`
        Option for speeding up :term:`asset hash` calculations. `True` will
        calculate every hash only once, any other string will be used as the
        hash of all assets.

    """
    conf = dict(defaults.items())
    conf.update(confdict)
    if conf['rootdir'] and not os.path.isdir(conf['rootdir']):
        raise ConfigurationError(
            'score.assetcollections', 'Configured rootdir does not exist')
    directories = extract_conf(conf, 'directory.')
    for name, folder in directories.items():
        if not os.path.isdir(folder):
            raise ConfigurationError(
                'score.assetcollections',
                'Configured directory "%s" does not exist' % name)
    try:
        freeze = parse_bool(conf['freeze'])
    except ValueError:
        freeze = conf['freeze']
    registry = CollectionRegistry(parse_bool(conf['overwrite']))
    for name, references in extract_conf(conf, 'collection.').items():
        try:
            registry.register(name, parse_list(references))
        except ValueError as e:
            raise ConfigurationError(
                'score.assetcollections',
                'Invalid collection "%s": %s' % (name, e))
    resolver = AssetResolver(
        rootdir=conf['rootdir'],
        directories=directories,
        url=conf['url'],
        strict=parse_bool(conf['strict']),
        versioning=parse_bool(conf['versioning']),
        freeze=freeze)
    return ConfiguredAssetCollectionsModule(tpl, registry, resolver)


class ConfiguredAssetCollectionsModule(ConfiguredModule):
    """
    This module's :class:`configuration class
    <score.init.ConfiguredModule>`.
    """

    def __init__(self, tpl, registry, resolver):
        super().__init__(__package__)
        self.tpl = tpl
        self.registry = registry
        self.resolver = resolver
        self.renderer = OutputRenderer(registry, resolver)
        if tpl:
            self._register_tpl_globals()

    def _register_tpl_globals(self):
        self.tpl.filetypes['text/html'].add_global(
            'stylesheets', self.stylesheets, escape=False)
        self.tpl.filetypes['text/html'].add_global(
            'javascripts', self.javascripts, escape=False)

    def register(self, name, references):
        """
        Registers a new :term:`collection <asset collection>`. See
        :meth:`CollectionRegistry.register
        <score.assetcollections.registry.CollectionRegistry.register>`.
        """
        return self.registry.register(name, references)

    def collection(self, name):
        return self.registry.collection(name)

    def render_group(self, group, *names):
        """
        Returns the HTML tags of the given :term:`group <asset group>` for
        all collections with given *names*, separated by newlines.
        """
        return self.renderer.render(names, group)

    def stylesheets(self, *names):
        """
        Template helper rendering the stylesheets of given collections.
        """
        return self.renderer.render(names, Group.STYLE)

    def javascripts(self, *names):
        """
        Template helper rendering the javascripts of given collections.
        """
        return self.renderer.render(names, Group.SCRIPT)
