"""Collection of fixtures for facilitation test implementations"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path

import pytest

from gitcfg_core.config import GlobalGitConfig
from gitcfg_core.runners import call_git

magic_marker = 'c4d0de12-8008-11ef-86ea-3776083add61'
standard_gitconfig = f"""\
[gitcfg "magic"]
    test-marker = {magic_marker}
[user]
    name = GitCfg Tester
    email = test@example.com
"""


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def global_gitconfig(tmp_path_factory, monkeypatch) -> Generator[Path]:
    """Yield the path of a test-specific global Git config file

    For the duration of the test, Git's ``global`` scope is this file,
    prepopulated with a user name and email, and a magic marker.

    Any test using this fixture will be skipped for Git versions earlier
    than 2.32, because the `GIT_CONFIG_GLOBAL` environment variable used
    here was only introduced with that version.
    """
    cfgfile = tmp_path_factory.mktemp('gitcfg_global') / 'gitconfig'
    cfgfile.write_text(standard_gitconfig)
    with monkeypatch.context() as m:
        m.setenv('GIT_CONFIG_GLOBAL', str(cfgfile))
        if (
            GlobalGitConfig().load().get('gitcfg.magic.test-marker') != magic_marker
        ):  # pragma: no cover
            pytest.skip(
                'Cannot establish isolated global Git config scope '
                '(possibly Git too old (needs v2.32)'
            )
        yield cfgfile


@pytest.fixture(autouse=True, scope='function')  # noqa: PT003
def verify_pristine_gitconfig_global():
    """No test must modify a user's global Git config.

    If such modifications are needed, a custom configuration setup
    limited to the scope of the test requiring it must be arranged.
    """
    pre = GlobalGitConfig().load()
    yield
    if pre != GlobalGitConfig().load():  # pragma: no cover
        # this is hard to test, because we are inside an autoused fixture.
        msg = (
            'Global Git config modification detected. '
            'Test must be modified to use a temporary configuration target. '
            'Hint: use the `global_gitconfig` fixture.'
        )
        raise AssertionError(msg)


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def nonrepo(tmp_path_factory, monkeypatch) -> Path:
    """Yield the path to a directory that is not inside a Git repository

    Git's repository discovery is stopped at the parent directory, such
    that a repository enclosing the temporary directory cannot interfere.
    """
    path = tmp_path_factory.mktemp('nonrepo').resolve()
    monkeypatch.setenv('GIT_CEILING_DIRECTORIES', str(path.parent))
    return path


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def gitrepo(tmp_path_factory) -> Path:
    """Yield the path to an initialized Git repository"""
    # must use the factory to get a unique path even when a concrete
    # test also uses `tmp_path`
    path = tmp_path_factory.mktemp('gitrepo').resolve()
    call_git(
        ['init'],
        cwd=path,
        capture_output=True,
    )
    return path


@pytest.fixture(autouse=False, scope='function')  # noqa: PT003
def baregitrepo(tmp_path_factory) -> Path:
    """Yield the path to an initialized, bare Git repository"""
    path = tmp_path_factory.mktemp('gitrepo').resolve()
    call_git(
        ['init', '--bare'],
        cwd=path,
        capture_output=True,
    )
    return path
