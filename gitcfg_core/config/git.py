from __future__ import annotations

import logging
import os
import re
from abc import (
    ABC,
    abstractmethod,
)
from pathlib import Path
from typing import (
    TYPE_CHECKING,
)

if TYPE_CHECKING:
    from gitcfg_core.repo import Repo

from datasalad.itertools import (
    decode_bytes,
    itemize,
)

from gitcfg_core.consts import GIT_CONFIG_KEY_NOT_SET
from gitcfg_core.runners import (
    CommandError,
    call_git,
    iter_git_subproc,
)

lgr = logging.getLogger('gitcfg.config')

ConfigDict = dict[str, 'str | tuple[str, ...]']


class GitConfig(ABC):
    """Abstract base class for a Git config scope accessed via git-config

    Derived classes implement :meth:`GitConfig._get_git_config_cmd` and
    :meth:`GitConfig._get_git_config_cwd`, which parameterize the generic
    implementations of :meth:`load`, :meth:`set`, and :meth:`unset`.

    Instances hold no configuration content. Each :meth:`load` reads the
    scope anew from Git.
    """

    # There is no known way to tell git to ignore a repository in the
    # working directory. Pointing the git directory to /dev/null (or the
    # Windows equivalent) prevents a repository in the CWD from leaking
    # configuration into the output.
    # See https://lore.kernel.org/git/YscCKuoDPBbs4iPX@lena.dartmouth.edu/T/
    _nul = 'b:\\nul' if os.name == 'nt' else '/dev/null'

    def __init__(self):
        # origins reported by the most recent load()
        self._sources: set[str | Path] = set()

    def __str__(self) -> str:
        if not self._sources:
            return self.__class__.__name__
        return (
            f'{self.__class__.__name__}['
            f'{",".join(sorted(str(s) for s in self._sources))}'
            ']'
        )

    @abstractmethod
    def _get_git_config_cmd(self) -> list[str]:
        """Return git-config base command for a particular config"""

    @abstractmethod
    def _get_git_config_cwd(self) -> Path | None:
        """Return path the git-config command should run in"""

    @abstractmethod
    def _get_git_config_files(self) -> list[Path]:
        """Return the file(s) git-config reads for this scope"""

    def load(self) -> ConfigDict:
        """Return all variables of the scope

        Variables are returned in the order Git reports them. A variable
        with a single value maps to a ``str``; one with multiple values
        maps to a ``tuple`` of them. A scope without a config file reads
        as empty. Any other failure to read the scope, e.g. an unreadable
        or malformed config file, raises ``CommandError``.
        """
        cwd = self._get_git_config_cwd() or Path.cwd()
        dct: ConfigDict = {}
        fileset: set[str] = set()

        try:
            with iter_git_subproc(
                [*self._get_git_config_cmd(), '--show-origin', '--list', '-z'],
                inputs=None,
                cwd=cwd,
            ) as gitcfg:
                for chunk in itemize(
                    decode_bytes(gitcfg),
                    sep='\0',
                    keep_ends=False,
                ):
                    _proc_dump_chunk(chunk, fileset, dct)
        except CommandError:
            # git-config fails when the config file does not exist.
            # That is no different from an empty one. An existing file
            # that cannot be read is an error, not an empty scope
            if any(f.exists() for f in self._get_git_config_files()):
                raise
            lgr.debug('No configuration file exists for %s', self)

        origin_paths = {Path(f[5:]) for f in fileset if f.startswith('file:')}
        self._sources = {p if p.is_absolute() else cwd / p for p in origin_paths}
        lgr.debug('Loaded %i variable(s) from %s', len(dct), self)
        return dct

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``, replacing any existing value(s)"""
        lgr.debug('Set %r=%r in %s', key, value, self)
        call_git(
            [*self._get_git_config_cmd(), '--replace-all', key, value],
            cwd=self._get_git_config_cwd(),
            capture_output=True,
        )

    def unset(self, key: str) -> None:
        """Remove all values of ``key``

        Removing a variable that is not set is not an error.
        """
        lgr.debug('Unset %r in %s', key, self)
        try:
            call_git(
                [*self._get_git_config_cmd(), '--unset-all', key],
                cwd=self._get_git_config_cwd(),
                capture_output=True,
            )
        except CommandError as e:
            if e.returncode != GIT_CONFIG_KEY_NOT_SET:
                raise
            lgr.debug('%r was not set in %s, nothing to unset', key, self)


class GlobalGitConfig(GitConfig):
    """Git's ``global`` (user-level) configuration scope

    This is ``~/.gitconfig`` (or the XDG location), unless Git's
    ``GIT_CONFIG_GLOBAL`` environment variable points elsewhere.
    """

    def _get_git_config_cmd(self) -> list[str]:
        return [f'--git-dir={self._nul}', 'config', '--global']

    def _get_git_config_cwd(self) -> Path | None:
        return Path.cwd()

    def _get_git_config_files(self) -> list[Path]:
        # see FILES in git-config(1)
        if os.environ.get('GIT_CONFIG_GLOBAL'):
            return [Path(os.environ['GIT_CONFIG_GLOBAL'])]
        xdg_home = os.environ.get('XDG_CONFIG_HOME') or Path.home() / '.config'
        return [
            Path(xdg_home) / 'git' / 'config',
            Path.home() / '.gitconfig',
        ]


class LocalGitConfig(GitConfig):
    """Git's ``local`` configuration scope of a particular repository"""

    def __init__(self, repo: Repo):
        super().__init__()
        self._repo = repo

    @property
    def repo(self) -> Repo:
        return self._repo

    def _get_git_config_cmd(self) -> list[str]:
        return ['--git-dir', str(self._repo.git_dir), 'config', '--local']

    def _get_git_config_cwd(self) -> Path | None:
        # we set --git-dir, CWD does not matter
        return None

    def _get_git_config_files(self) -> list[Path]:
        return [self._repo.git_dir / 'config']


def _proc_dump_chunk(
    chunk: str,
    fileset: set[str],
    dct: ConfigDict,
) -> None:
    """Process a null-delimited chunk of a ``git config -z`` dump

    A chunk is either an origin specification (collected in ``fileset``),
    or a key/value record (added to ``dct``).
    """
    k = v = None
    # in anticipation of output contamination, process within a loop
    # where we can reject non syntax compliant pieces
    while chunk:
        if chunk.startswith(('file:', 'blob:')):
            fileset.add(chunk)
            return
        if chunk.startswith('command line:'):
            # no origin that we could as a pathobj
            return
        k, v = _gitcfg_rec_to_keyvalue(chunk)
        if k is not None:
            break
        if '\n' not in chunk:
            lgr.debug('Non-standard git-config output, ignoring: %s', chunk)
            return
        # discard the first line and start over
        ignore, chunk = chunk.split('\n', maxsplit=1)
        lgr.debug('Non-standard git-config output, ignoring: %s', ignore)
    if not k:
        return
    if v is None:
        # man git-config: a name without a value is short-hand for
        # a boolean true
        v = 'true'
    present_v = dct.get(k)
    if present_v is None:
        dct[k] = v
    elif isinstance(present_v, tuple):
        dct[k] = (*present_v, v)
    else:
        dct[k] = (present_v, v)


# git-config key syntax with a section and a subsection
# see git-config(1) for syntax details
cfg_k_regex = re.compile(r'([a-zA-Z0-9-.]+\.[^\0\n]+)$', flags=re.MULTILINE)
# identical to the key regex, but with an additional group for a
# value in a null-delimited git-config dump
cfg_kv_regex = re.compile(
    r'([a-zA-Z0-9-.]+\.[^\0\n]+)\n(.*)$', flags=re.MULTILINE | re.DOTALL
)


def _gitcfg_rec_to_keyvalue(rec: str) -> tuple[str | None, str | None]:
    """Split a key/value record of a git-config dump

    Returns
    -------
    str, str
      Parsed key and value. Key and/or value are None
      if not syntax-compliant (former) or absent (latter).
    """
    kv_match = cfg_kv_regex.match(rec)
    if kv_match:
        k, v = kv_match.groups()
    elif cfg_k_regex.match(rec):
        # a key without `= value`, which git treats as True
        k, v = rec, None
    else:
        k = v = None
    return k, v


def normalize_key(key: str) -> str:
    """Return ``key`` in the form git-config reports it

    Section and variable name are case-insensitive, and reported in lower
    case. The subsection is case-sensitive and kept as-is.
    """
    key_l = key.split('.')
    section = key_l[0]
    name = key_l[-1]
    # length of the component list when we have no subsection(s)
    no_sub_len = 2
    return (
        f"{section.lower()}."
        f"{'.'.join(key_l[1:-1])}{'.' if len(key_l) > no_sub_len else ''}"
        f"{name.lower()}"
    )
