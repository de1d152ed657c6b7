from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import TYPE_CHECKING

from gitcfg_core.config.git import (
    ConfigDict,
    GlobalGitConfig,
    LocalGitConfig,
)
from gitcfg_core.constraints import (
    EnsureChoice,
    EnsureInstance,
)
from gitcfg_core.consts import (
    SCOPE_DE_FACTO,
    SCOPE_GLOBAL,
    SCOPE_LOCAL,
)
from gitcfg_core.repo import (
    Repo,
    get_repo,
)

if TYPE_CHECKING:
    from gitcfg_core.config.git import GitConfig

lgr = logging.getLogger('gitcfg.config')


# TODO: Could be `StrEnum`, came with PY3.11
class ConfigScope(Enum):
    """Scopes configuration variables are read from, or written to"""

    de_facto = SCOPE_DE_FACTO
    """Variables in force: ``local`` overriding ``global`` (read-only)"""
    local = SCOPE_LOCAL
    """Repository-specific configuration (``.git/config``)"""
    global_ = SCOPE_GLOBAL
    """User-level configuration (``~/.gitconfig``)"""


_scope_constraint = EnsureInstance(ConfigScope) | EnsureChoice(
    *(s.value for s in ConfigScope)
)


def get_scope(spec: ConfigScope | str) -> ConfigScope:
    """Return the :class:`ConfigScope` for a scope label or instance

    Raises ``ConstraintError`` for anything that is not a known scope.
    """
    return ConfigScope(_scope_constraint(spec))


def get_write_scope(spec: ConfigScope | str) -> ConfigScope:
    """Return the scope a write for ``spec`` must go to

    ``de_facto`` is not a storage location. Writes requested for it are
    redirected to the ``local`` scope, and a notice is logged at INFO level
    on the ``gitcfg.config`` logger. Like any library log message, it is
    only shown when the application configures logging accordingly (e.g.
    ``logging.basicConfig(level=logging.INFO)``).
    """
    scope = get_scope(spec)
    if scope is ConfigScope.de_facto:
        lgr.info('setting where = "%s"', SCOPE_LOCAL)
        scope = ConfigScope.local
    return scope


@dataclass(frozen=True)
class ScopeSources:
    """Configuration stores to consult for a particular scope

    Any store that does not apply to the scope, or does not exist
    (``local`` outside a repository), is ``None``.
    """

    scope: ConfigScope
    repo: Repo | None
    local: LocalGitConfig | None
    global_: GlobalGitConfig | None

    def load(self) -> dict[str, ConfigDict]:
        """Return the content of the ``local`` and ``global`` store

        The content of a store that is ``None`` is reported as empty.
        """
        return {
            SCOPE_LOCAL: self.local.load() if self.local else {},
            SCOPE_GLOBAL: self.global_.load() if self.global_ else {},
        }

    @property
    def write_target(self) -> GitConfig:
        """The single store a write for this scope goes to"""
        if self.scope is ConfigScope.de_facto:
            msg = f'{SCOPE_DE_FACTO!r} is not a writable configuration scope'
            raise TypeError(msg)
        target = self.local if self.scope is ConfigScope.local else self.global_
        if target is None:  # pragma: no cover
            msg = f'no {self.scope.value} configuration store resolved'
            raise RuntimeError(msg)
        return target


def resolve_sources(
    scope: ConfigScope | str,
    location: str | PathLike | Repo = '.',
    *,
    for_writing: bool = False,
) -> ScopeSources:
    """Determine the configuration store(s) for a scope at a location

    ``location`` can be any path, inside a repository or not, or a
    :class:`~gitcfg_core.repo.Repo` instance.

    For reading, a location outside any repository simply has no ``local``
    store. With ``for_writing=True``, this is a ``ValueError`` for the
    ``local`` scope, because local configuration needs a repository.
    The ``global`` scope does not depend on ``location``.
    """
    scope = get_scope(scope)
    needs_local = scope in (ConfigScope.de_facto, ConfigScope.local)
    repo = get_repo(location) if needs_local else None
    if for_writing and scope is ConfigScope.local and repo is None:
        msg = f'no Git repository exists at {location}'
        raise ValueError(msg)
    sources = ScopeSources(
        scope=scope,
        repo=repo,
        local=LocalGitConfig(repo) if repo is not None else None,
        global_=GlobalGitConfig() if scope is not ConfigScope.local else None,
    )
    lgr.debug(
        'Resolved %s scope at %s to %s',
        scope.value,
        location,
        ', '.join(str(s) for s in (sources.local, sources.global_) if s) or 'nothing',
    )
    return sources
