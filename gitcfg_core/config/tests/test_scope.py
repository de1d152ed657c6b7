import logging

import pytest

from gitcfg_core.constraints import ConstraintError
from gitcfg_core.repo import Repo

from ..git import (
    GlobalGitConfig,
    LocalGitConfig,
)
from ..scope import (
    ConfigScope,
    ScopeSources,
    get_scope,
    get_write_scope,
    resolve_sources,
)


def test_get_scope():
    assert get_scope('de_facto') is ConfigScope.de_facto
    assert get_scope('local') is ConfigScope.local
    assert get_scope('global') is ConfigScope.global_
    for s in ConfigScope:
        assert get_scope(s) is s


@pytest.mark.parametrize('spec', ['Local', 'system', 'worktree', '', None, 5])
def test_get_scope_invalid(spec):
    with pytest.raises(ConstraintError, match='does not match any of 2'):
        get_scope(spec)


def test_get_write_scope(caplog):
    with caplog.at_level(logging.INFO, logger='gitcfg.config'):
        assert get_write_scope('local') is ConfigScope.local
        assert get_write_scope(ConfigScope.global_) is ConfigScope.global_
        assert not caplog.records
        assert get_write_scope('de_facto') is ConfigScope.local
    assert caplog.records[-1].levelno == logging.INFO
    assert caplog.records[-1].getMessage() == 'setting where = "local"'


def test_resolve_sources_repo(gitrepo, global_gitconfig):
    subdir = gitrepo / 'some' / 'dir'
    subdir.mkdir(parents=True)
    # any location in the repo leads to the same repo
    for loc in (gitrepo, subdir, str(subdir), Repo(gitrepo)):
        src = resolve_sources('local', loc)
        assert src.scope is ConfigScope.local
        assert src.repo == Repo(gitrepo)
        assert isinstance(src.local, LocalGitConfig)
        assert src.global_ is None

    src = resolve_sources('de_facto', subdir)
    assert isinstance(src.local, LocalGitConfig)
    assert isinstance(src.global_, GlobalGitConfig)

    src = resolve_sources('global', subdir)
    # no need to look for a repository
    assert src.repo is None
    assert src.local is None
    assert isinstance(src.global_, GlobalGitConfig)
    assert isinstance(src.write_target, GlobalGitConfig)
    assert global_gitconfig.exists()


def test_resolve_sources_default_location(gitrepo, monkeypatch):
    monkeypatch.chdir(gitrepo)
    assert resolve_sources('local').repo == Repo(gitrepo)


def test_resolve_sources_nonrepo(nonrepo):
    # reading is fine, there is just nothing local
    for scope in ('local', 'de_facto'):
        src = resolve_sources(scope, nonrepo)
        assert src.repo is None
        assert src.local is None
    # but local writes need a repository
    with pytest.raises(ValueError, match='no Git repository exists at'):
        resolve_sources('local', nonrepo, for_writing=True)
    # global does not care
    src = resolve_sources('global', nonrepo, for_writing=True)
    assert isinstance(src.write_target, GlobalGitConfig)


def test_resolve_sources_nonexistent(tmp_path):
    src = resolve_sources('local', tmp_path / 'not' / 'here')
    assert src.local is None
    with pytest.raises(ValueError, match='no Git repository exists at'):
        resolve_sources('local', tmp_path / 'not' / 'here', for_writing=True)


def test_scope_sources_load(gitrepo, global_gitconfig):
    src = resolve_sources('de_facto', gitrepo)
    cfg = src.load()
    assert list(cfg) == ['local', 'global']
    assert cfg['local']['core.bare'] == 'false'
    assert 'core.bare' not in cfg['global']
    assert cfg['global']['user.name'] == 'GitCfg Tester'

    cfg = resolve_sources('local', gitrepo).load()
    assert cfg['global'] == {}

    cfg = resolve_sources('global', gitrepo).load()
    assert cfg['local'] == {}
    assert global_gitconfig.exists()


def test_scope_sources_write_target(gitrepo):
    src = resolve_sources('local', gitrepo, for_writing=True)
    assert src.write_target is src.local
    src = ScopeSources(
        scope=ConfigScope.de_facto,
        repo=None,
        local=None,
        global_=GlobalGitConfig(),
    )
    with pytest.raises(TypeError, match='not a writable'):
        src.write_target  # noqa: B018
