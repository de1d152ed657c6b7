import pytest

from ..repo import (
    Repo,
    get_repo,
)


def test_repo(gitrepo):
    repo = Repo(gitrepo)
    assert str(repo) == f'Repo({gitrepo})'
    assert repr(repo) == f'Repo({gitrepo!r})'
    assert repo.path == gitrepo
    assert repo.git_dir == gitrepo / '.git'
    assert repo.is_bare is False

    # resolve to root from a subdirectory
    subdir = gitrepo / 'some' / 'subdir'
    subdir.mkdir(parents=True)
    repo_sub = Repo(subdir)
    assert repo_sub.path == gitrepo
    # not the same instance, but the same repository
    assert repo_sub is not repo
    assert repo_sub == repo
    assert {repo: 'x'}[repo_sub] == 'x'

    # pointing into the GITDIR also works
    assert Repo(gitrepo / '.git') == repo


def test_bare_repo(baregitrepo):
    repo = Repo(baregitrepo)
    assert repo.is_bare is True
    assert repo.path == baregitrepo
    assert repo.git_dir == baregitrepo


def test_repo_error(nonrepo):
    err_match = 'not point to an existing Git'
    with pytest.raises(ValueError, match=err_match):
        Repo(nonrepo)
    with pytest.raises(ValueError, match=err_match):
        Repo(nonrepo / 'notexist')
    test_file = nonrepo / 'afile'
    test_file.touch()
    with pytest.raises(ValueError, match=err_match):
        Repo(test_file)


def test_get_repo(gitrepo, nonrepo):
    repo = get_repo(gitrepo)
    assert repo == Repo(gitrepo)
    # passthrough
    assert get_repo(repo) is repo
    # str-path
    assert get_repo(str(gitrepo)) == repo
    assert get_repo(nonrepo) is None


def test_repo_init_at(nonrepo):
    # only existing directories
    with pytest.raises((FileNotFoundError, NotADirectoryError)):
        Repo.init_at(nonrepo / 'nothere')

    repo = Repo.init_at(nonrepo)
    assert repo.path == nonrepo
    assert repo.is_bare is False

    bare_path = nonrepo / 'bare'
    bare_path.mkdir()
    bare = Repo.init_at(bare_path, bare=True)
    assert bare.is_bare is True
    assert bare.git_dir == bare_path
