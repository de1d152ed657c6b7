from __future__ import annotations

import logging
from collections.abc import Sequence
from os import PathLike
from typing import TYPE_CHECKING

from gitcfg_core.config.git import (
    ConfigDict,
    normalize_key,
)
from gitcfg_core.config.scope import (
    ConfigScope,
    resolve_sources,
)
from gitcfg_core.config.snapshot import ConfigSnapshot
from gitcfg_core.constraints import EnsureConfigNames
from gitcfg_core.consts import (
    DEFAULT_SCOPE,
    SCOPE_GLOBAL,
    SCOPE_LOCAL,
    UnsetValue,
)

if TYPE_CHECKING:
    from gitcfg_core.repo import Repo

lgr = logging.getLogger('gitcfg.config')

_names_constraint = EnsureConfigNames()


def read(
    names: Sequence[str] = (),
    scope: ConfigScope | str = DEFAULT_SCOPE,
    location: str | PathLike | Repo = '.',
) -> ConfigSnapshot:
    """Read configuration variables from a scope

    With an empty ``names``, all variables of the scope are returned. With
    ``names``, the result has exactly one entry per (unique) name, in the
    order given. A variable that is not set is reported as ``UnsetValue``.

    For the ``de_facto`` scope, ``global`` variables are overridden by
    ``local`` ones. A ``location`` outside any repository has no ``local``
    variables.

    Raises ``AssertionError`` when any variable in the scope has multiple
    values, because this is not supported.
    """
    names = _names_constraint(names)
    sources = resolve_sources(scope, location)
    cfg = merge(sources.scope, sources.load())
    multi = [k for k, v in cfg.items() if isinstance(v, tuple)]
    if multi:
        # we have not planned for this, fail loudly
        msg = (
            f'Unsupported multi-valued variable(s) {multi} '
            f'in {sources.scope.value} Git configuration'
        )
        raise AssertionError(msg)
    snapshot = ConfigSnapshot(screen(cfg, names))
    lgr.debug(
        'Read %i variable(s) from %s scope', len(snapshot), sources.scope.value
    )
    return snapshot


def merge(scope: ConfigScope, cfg: dict[str, ConfigDict]) -> ConfigDict:
    """Select, or merge, the variables of a scope

    ``cfg`` maps ``'local'`` and ``'global'`` to their variables.
    For ``de_facto``, ``local`` variables override ``global`` ones.
    """
    if scope is ConfigScope.local:
        return dict(cfg[SCOPE_LOCAL])
    if scope is ConfigScope.global_:
        return dict(cfg[SCOPE_GLOBAL])
    merged = dict(cfg[SCOPE_GLOBAL])
    merged.update(cfg[SCOPE_LOCAL])
    return merged


def screen(cfg: ConfigDict, names: Sequence[str]) -> dict:
    """Filter ``cfg`` down to ``names``, in the order of ``names``

    Keys are matched the way Git matches them (case-insensitive section
    and variable name), but reported as given in ``names``. Names not in
    ``cfg`` map to ``UnsetValue``. Without ``names``, ``cfg`` is returned
    as-is.
    """
    if not names:
        return cfg
    return {n: cfg.get(normalize_key(n), UnsetValue) for n in names}
