import click
from .group import Group


@click.group()
def main():
    """
    Manages asset collections.
    """
    pass


@main.command('list')
@click.argument('name', required=False)
@click.pass_context
def list_(clickctx, name):
    """
    Lists collections and their assets
    """
    assetcollections = clickctx.obj['conf'].load('assetcollections')
    if name:
        names = (name,)
    else:
        names = assetcollections.registry.names()
    for name in names:
        collection = assetcollections.registry.get(name)
        print(name)
        for reference in collection.references():
            print('  %s %s' % (reference.group.value, reference.path))


@main.command()
@click.argument('name')
@click.argument('group')
@click.pass_context
def resolve(clickctx, name, group):
    """
    Provides the files of a collection
    """
    assetcollections = clickctx.obj['conf'].load('assetcollections')
    collection = assetcollections.registry.get(name)
    try:
        group = Group.parse(group)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='group')
    for entry in assetcollections.resolver.resolve(collection, group):
        print('%s %s' % (entry.path or '-', entry.url))


@main.command()
@click.argument('group')
@click.argument('names', nargs=-1)
@click.pass_context
def render(clickctx, group, names):
    """
    Renders the html tags of collections
    """
    assetcollections = clickctx.obj['conf'].load('assetcollections')
    try:
        group = Group.parse(group)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='group')
    if not names:
        names = assetcollections.registry.names()
    output = assetcollections.render_group(group, *names)
    if output:
        print(output)


if __name__ == '__main__':
    main()
