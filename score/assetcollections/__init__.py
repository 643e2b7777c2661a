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
This module manages named :term:`collections <asset collection>` of web
assets, i.e. ordered lists of stylesheets and javascripts, and renders them
as HTML tags for use in templates. Collections may contain local files,
glob patterns and remote URLs.

Templates usually make use of the helpers :meth:`stylesheets
<ConfiguredAssetCollectionsModule.stylesheets>` and :meth:`javascripts
<ConfiguredAssetCollectionsModule.javascripts>`, which are registered with
:mod:`score.tpl` automatically.
"""

from ._init import init, ConfiguredAssetCollectionsModule
from .errors import (
    AssetCollectionError, UnknownCollectionError, DuplicateCollectionError,
    EmptyGroupError, AssetNotFound)
from .group import Group
from .registry import (
    AssetReference, Collection, CollectionBuilder, CollectionRegistry)
from .renderer import OutputRenderer
from .resolver import AssetEntry, AssetResolver


__all__ = (
    'init', 'ConfiguredAssetCollectionsModule', 'AssetCollectionError',
    'UnknownCollectionError', 'DuplicateCollectionError', 'EmptyGroupError',
    'AssetNotFound', 'Group', 'AssetReference', 'Collection',
    'CollectionBuilder', 'CollectionRegistry', 'OutputRenderer',
    'AssetEntry', 'AssetResolver',)
