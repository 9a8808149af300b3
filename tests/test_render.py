from schemautils.config import Meta
from schemautils.render import render_outline, render_type
from schemautils.value import (Array, Bool, Date, DateType, Empty, Null, Number,
                               Object, String, Url)


def test_render_type():
    assert render_type(Empty()) == 'Any'
    assert render_type(Null()) == 'Any?'
    assert render_type(Null(String('x'))) == 'String?'
    assert render_type(Bool(True)) == 'Bool'
    assert render_type(Number(1)) == 'Int'
    assert render_type(Number(1.5)) == 'Double'
    assert render_type(String('x')) == 'String'
    assert render_type(Object('repo_owner', [], {})) == 'RepoOwner'
    assert render_type(Array('tags', [String('a')])) == '[String]'
    assert render_type(Array('tags', [])) == '[Any]'
    assert render_type(Url('https://example.com')) == 'URL'
    assert render_type(Date(DateType.DATE_ONLY)) == 'Date'


def test_render_outline():
    owner = Object('owner', ['login'], {'login': String('x')})
    repo = Object('repo', ['full_name', 'owner', 'forks'], {
        'full_name': String('a/b'),
        'owner': owner,
        'forks': Array('forks', [owner]),
    })

    outline = render_outline(repo, Meta(property_map={'full_name': 'name'}))

    assert outline == '\n'.join([
        'Repo',
        '  name: String',
        '  owner: Owner',
        '  forks: [Owner]',
        '',
        'Owner',
        '  login: String',
    ])


def test_render_outline_scalar():
    assert render_outline(Number(1)) == 'Int'
