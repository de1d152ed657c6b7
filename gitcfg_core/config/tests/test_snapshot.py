from collections.abc import Mapping

import pytest

from gitcfg_core.consts import UnsetValue

from ..snapshot import ConfigSnapshot


def test_snapshot():
    snap = ConfigSnapshot({'user.name': 'louise', 'color.branch': UnsetValue})
    assert isinstance(snap, Mapping)
    assert len(snap) == 2  # noqa: PLR2004
    assert list(snap) == ['user.name', 'color.branch']
    assert snap['user.name'] == 'louise'
    assert snap['color.branch'] is UnsetValue
    assert snap.unset == ('color.branch',)
    assert snap == {'user.name': 'louise', 'color.branch': UnsetValue}
    with pytest.raises(KeyError):
        snap['user.email']
    # immutable
    with pytest.raises(TypeError):
        snap['user.name'] = 'other'  # type: ignore[index]
    # hashable
    assert hash(snap) == hash(ConfigSnapshot(snap))


def test_snapshot_decoupled():
    src = {'a.b': 'c'}
    snap = ConfigSnapshot(src)
    src['a.b'] = 'changed'
    src['d.e'] = 'new'
    assert dict(snap) == {'a.b': 'c'}


def test_snapshot_from_pairs():
    snap = ConfigSnapshot([('a.b', 'c'), ('d.e', 'f')])
    assert list(snap.items()) == [('a.b', 'c'), ('d.e', 'f')]


def test_snapshot_str():
    assert str(ConfigSnapshot()) == 'ConfigSnapshot: <no variables>'
    snap = ConfigSnapshot({'user.name': 'louise', 'color.branch': UnsetValue})
    assert str(snap) == (
        'ConfigSnapshot:\n  user.name=louise\n  color.branch=<unset>'
    )
    assert repr(ConfigSnapshot({'a.b': 'c'})) == "ConfigSnapshot({'a.b': 'c'})"
