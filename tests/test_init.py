"""Tests for the module initialization."""

import pytest
from score.init import ConfigurationError

from score.assetcollections import (
    ConfiguredAssetCollectionsModule, DuplicateCollectionError, init)


class FakeFiletype:

    def __init__(self):
        self.globals = {}

    def add_global(self, name, value, escape=True):
        self.globals[name] = (value, escape)


class FakeTpl:

    def __init__(self):
        self.filetypes = {'text/html': FakeFiletype()}


@pytest.fixture
def conf(assetdir):
    return {
        'rootdir': str(assetdir / 'public'),
        'directory.vendor': str(assetdir / 'vendor'),
        'collection.core': ['css/reset.css', 'js/app.js'],
        'collection.vendor': ['css/normalize.css', 'js/jquery.js'],
        'versioning': 'false',
    }


def test_defaults():
    assetcollections = init({})
    assert isinstance(assetcollections, ConfiguredAssetCollectionsModule)
    assert assetcollections.resolver.url == '/assets'
    assert assetcollections.resolver.rootdir is None
    assert not assetcollections.resolver.strict
    assert assetcollections.resolver.versioning
    assert len(assetcollections.registry) == 0


def test_collections_from_conf(conf):
    assetcollections = init(conf)
    assert assetcollections.registry.names() == ['core', 'vendor']
    assert list(assetcollections.resolver.directories) == ['vendor']
    assert assetcollections.stylesheets('core', 'vendor') == '\n'.join([
        '<link rel="stylesheet" type="text/css" '
        'href="/assets/core/css/reset.css" />',
        '<link rel="stylesheet" type="text/css" '
        'href="/assets/vendor/css/normalize.css" />',
    ])
    assert assetcollections.javascripts('vendor') == (
        '<script type="text/javascript" '
        'src="/assets/vendor/js/jquery.js"></script>')
    assert assetcollections.render_group('script', 'core') == (
        '<script type="text/javascript" '
        'src="/assets/core/js/app.js"></script>')


def test_missing_rootdir(tmp_path):
    with pytest.raises(ConfigurationError):
        init({'rootdir': str(tmp_path / 'missing')})


def test_missing_directory(tmp_path):
    with pytest.raises(ConfigurationError):
        init({'directory.vendor': str(tmp_path / 'missing')})


def test_invalid_collection(conf):
    conf['collection.broken'] = ['img/logo.png']
    with pytest.raises(ConfigurationError):
        init(conf)


def test_overwrite(conf):
    assetcollections = init(conf)
    with pytest.raises(DuplicateCollectionError):
        assetcollections.register('core', ['css/reset.css'])
    conf['overwrite'] = 'true'
    assetcollections = init(conf)
    assetcollections.register('core', ['css/theme/dark.css'])
    assert assetcollections.stylesheets('core') == (
        '<link rel="stylesheet" type="text/css" '
        'href="/assets/core/css/theme/dark.css" />')


def test_freeze_string(conf):
    conf['versioning'] = 'true'
    conf['freeze'] = 'deadbeef'
    assetcollections = init(conf)
    assert assetcollections.javascripts('core') == (
        '<script type="text/javascript" '
        'src="/assets/core/js/app.js?_v=deadbeef"></script>')


def test_collection_builder(conf):
    assetcollections = init(conf)
    with assetcollections.collection('themes') as builder:
        builder.add_tree('css/theme', 'style')
    assert assetcollections.stylesheets('themes') == '\n'.join([
        '<link rel="stylesheet" type="text/css" '
        'href="/assets/themes/css/theme/dark.css" />',
        '<link rel="stylesheet/less" type="text/css" '
        'href="/assets/themes/css/theme/light.less" />',
    ])


def test_tpl_globals(conf):
    tpl = FakeTpl()
    assetcollections = init(conf, tpl=tpl)
    globals_ = tpl.filetypes['text/html'].globals
    stylesheets, escape = globals_['stylesheets']
    assert not escape
    assert stylesheets('core') == assetcollections.stylesheets('core')
    javascripts, escape = globals_['javascripts']
    assert not escape
    assert javascripts('core') == assetcollections.javascripts('core')


def test_collection_groups_from_conf(conf):
    conf['collection.site'] = '\n'.join([
        'css/*',
        'js/*',
        'style: https://fonts.example.com/css?family=Roboto',
    ])
    assetcollections = init(conf)
    assert assetcollections.stylesheets('site') == '\n'.join([
        '<link rel="stylesheet" type="text/css" '
        'href="/assets/site/css/reset.css" />',
        '<link rel="stylesheet" type="text/css" '
        'href="/assets/site/css/normalize.css" />',
        '<link rel="stylesheet" type="text/css" '
        'href="https://fonts.example.com/css?family=Roboto" />',
    ])
    assert assetcollections.javascripts('site') == '\n'.join([
        '<script type="text/javascript" '
        'src="/assets/site/js/app.js"></script>',
        '<script type="text/coffeescript" '
        'src="/assets/site/js/widgets.coffee"></script>',
        '<script type="text/javascript" '
        'src="/assets/site/js/jquery.js"></script>',
    ])


def test_extensionless_remote_needs_group(conf):
    conf['collection.fonts'] = [
        'https://fonts.example.com/css?family=Roboto']
    with pytest.raises(ConfigurationError):
        init(conf)
