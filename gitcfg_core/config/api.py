"""Caller-facing functions to get and set Git configuration"""

from __future__ import annotations

from os import PathLike
from typing import (
    TYPE_CHECKING,
    Any,
)

from gitcfg_core.config.git import normalize_key
from gitcfg_core.config.normalizer import normalize
from gitcfg_core.config.reader import read
from gitcfg_core.config.scope import (
    ConfigScope,
    get_write_scope,
)
from gitcfg_core.config.writer import write
from gitcfg_core.consts import (
    DEFAULT_SCOPE,
    SCOPE_GLOBAL,
    SCOPE_LOCAL,
)

if TYPE_CHECKING:
    from collections.abc import (
        Iterable,
        Mapping,
        Sequence,
    )

    from gitcfg_core.config.snapshot import ConfigSnapshot
    from gitcfg_core.repo import Repo


def git_config(
    *args: Any,
    where: ConfigScope | str = DEFAULT_SCOPE,
    repo: str | PathLike | Repo = '.',
    **variables: Any,
) -> ConfigSnapshot:
    """Get or set Git configuration variables

    Variables are queried by giving their names as strings, or as a list
    or tuple of strings. Giving nothing queries all variables, matching
    ``git config --list`` for the scope. Variables that are not set are
    reported as ``UnsetValue``.

    Variables are set by giving a mapping of names to values, or keyword
    arguments (``**{'user.name': 'louise'}``). A value of ``None`` (or
    ``UnsetValue``) unsets a variable, like ``git config --unset``.

    When variables are set, their previous values are returned. This
    snapshot can be passed back in to restore the previous configuration.

    ``where`` selects the scope. The default, ``de_facto``, applies to a
    query only and reports the variables in force, i.e., ``local`` ones
    override ``global`` ones. ``local`` or ``global`` narrow the scope to
    the associated configuration file: for ``local``, ``.git/config`` of
    the repository at ``repo``; for ``global``, the user's
    ``~/.gitconfig``. When setting with ``de_facto``, the ``local``
    configuration is modified, and an INFO notice is logged (see
    :func:`~gitcfg_core.config.scope.get_write_scope`).

    Names are matched the way Git matches them. When setting a variable
    given more than once (possibly in different spelling), the last
    occurrence wins, and the returned snapshot reports it in that
    spelling.

    ``repo`` is a path in a repository, or a :class:`~gitcfg_core.repo.Repo`.

    Returns
    -------
    ConfigSnapshot
      For a query, the variables asked for. When setting, the values of all
      given variables before they were set, read from the scope written to.

    Raises
    ------
    ConstraintError
      For malformed arguments, or an unknown scope.
    ValueError
      When setting ``local`` variables where there is no repository.
    AssertionError
      When the scope holds a variable with multiple values.
    """
    vars_, is_query = normalize(args, variables)
    if is_query:
        return read(
            tuple(v.name for v in vars_),
            scope=where,
            location=repo,
        )

    scope = get_write_scope(where)
    # one entry per variable, as Git identifies it. For any variable given
    # more than once, the last occurrence (and spelling) wins
    names = {normalize_key(v.name): v.name for v in vars_}
    changes = {
        normalize_key(v.name): (v.name, v.target_value)
        for v in vars_
        if v.has_value
    }
    previous = read(tuple(names.values()), scope=scope, location=repo)
    write(list(changes.values()), scope=scope, location=repo)
    return previous


def git_config_global(
    *args: Any,
    repo: str | PathLike | Repo = '.',
    **variables: Any,
) -> ConfigSnapshot:
    """Get or set global Git config, a la ``git config --global``"""
    return git_config(*args, where=SCOPE_GLOBAL, repo=repo, **variables)


def git_config_local(
    *args: Any,
    repo: str | PathLike | Repo = '.',
    **variables: Any,
) -> ConfigSnapshot:
    """Get or set local Git config, a la ``git config --local``"""
    return git_config(*args, where=SCOPE_LOCAL, repo=repo, **variables)


def git_config_get(
    names: Sequence[str] = (),
    where: ConfigScope | str = DEFAULT_SCOPE,
    repo: str | PathLike | Repo = '.',
) -> ConfigSnapshot:
    """Get Git config variables named in a list"""
    return read(names, scope=where, location=repo)


def git_config_set(
    variables: Mapping[str, Any] | Iterable[Any],
    where: ConfigScope | str = DEFAULT_SCOPE,
    repo: str | PathLike | Repo = '.',
) -> None:
    """Set Git config variables given as a mapping of names to values"""
    write(variables, scope=where, location=repo)
