from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from gitcfg_core.runners import (
    CommandError,
    call_git,
    call_git_lines,
    call_git_oneline,
)

lgr = logging.getLogger('gitcfg.repo')


class Repo:
    """An existing Git repository, located from any path inside of it

    The repository can be a non-bare one with a worktree, or a bare one.
    Instances are plain handles that are determined anew on each creation.
    Nothing is cached across instances, so a handle always reflects the
    state of the file system at the time it was created.
    """

    def __init__(self, path: str | PathLike):
        """
        ``path`` can point to a worktree root, any directory inside a
        worktree, a bare repository, or a ``.git`` directory. A
        ``ValueError`` is raised if ``path`` is not located in any
        Git repository.
        """
        path = Path(path)
        try:
            git_dir, is_bare, in_worktree = call_git_lines(
                [
                    '-C',
                    str(path),
                    'rev-parse',
                    '--path-format=absolute',
                    '--git-dir',
                    '--is-bare-repository',
                    '--is-inside-work-tree',
                ],
                force_c_locale=True,
            )
        except CommandError as e:
            msg = f'{path} does not point to an existing Git repository'
            raise ValueError(msg) from e

        self._git_dir = Path(git_dir)
        self._is_bare = is_bare == 'true'
        if in_worktree == 'true':
            self._path = Path(
                call_git_oneline(
                    [
                        '-C',
                        str(path),
                        'rev-parse',
                        '--path-format=absolute',
                        '--show-toplevel',
                    ],
                )
            )
        else:
            # bare repository, or pointed to the inside of a GITDIR
            self._path = self._git_dir

    def __str__(self):
        return f'{self.__class__.__name__}({self._path})'

    def __repr__(self):
        return f'{self.__class__.__name__}({self._path!r})'

    def __eq__(self, other):
        if not isinstance(other, Repo):
            return NotImplemented
        return self._git_dir == other._git_dir

    def __hash__(self):
        return hash((self.__class__.__name__, self._git_dir))

    @property
    def path(self) -> Path:
        """Absolute path of the worktree root, or the bare repository"""
        return self._path

    @property
    def git_dir(self) -> Path:
        """Absolute path of the Git directory, holding the ``config`` file"""
        return self._git_dir

    @property
    def is_bare(self) -> bool:
        return self._is_bare

    @classmethod
    def init_at(cls, path: str | PathLike, *, bare: bool = False) -> Repo:
        """Initialize a repository in an existing directory

        There is no test for an existing repository at ``path``. A
        reinitialization is generally safe, see the ``git init``
        documentation.
        """
        cmd = ['init']
        if bare:
            cmd.append('--bare')
        call_git(
            cmd,
            cwd=Path(path),
            capture_output=True,
        )
        return cls(path)


def get_repo(location: str | PathLike | Repo) -> Repo | None:
    """Return the repository at ``location``, or ``None`` if there is none

    A given :class:`Repo` instance is returned as-is.
    """
    if isinstance(location, Repo):
        return location
    # the constructor tells us, whether there is a repository
    try:
        return Repo(location)
    except ValueError:
        lgr.debug('No Git repository at %s', location)
        return None
