import pytest

from score.assetcollections import (
    AssetResolver, CollectionRegistry, OutputRenderer)


FILES = {
    'public/css/reset.css': 'html, body { margin: 0 }',
    'public/css/theme/dark.css': 'body { background: black }',
    'public/css/theme/light.less': '@bg: white; body { background: @bg }',
    'public/js/app.js': 'console.log("app");',
    'public/js/widgets.coffee': 'alert "widgets"',
    'public/img/logo.png': 'png',
    'vendor/js/jquery.js': 'var jQuery;',
    'vendor/css/normalize.css': 'article { display: block }',
}


@pytest.fixture
def assetdir(tmp_path):
    """Create a public folder and a vendor folder with some assets."""
    for path, content in FILES.items():
        file = tmp_path / path
        file.parent.mkdir(parents=True, exist_ok=True)
        file.write_text(content)
    return tmp_path


@pytest.fixture
def registry():
    return CollectionRegistry()


@pytest.fixture
def resolver(assetdir):
    """Resolver without versioning to keep URLs predictable."""
    return AssetResolver(
        rootdir=str(assetdir / 'public'),
        directories={'vendor': str(assetdir / 'vendor')},
        versioning=False)


@pytest.fixture
def renderer(registry, resolver):
    return OutputRenderer(registry, resolver)
