from __future__ import annotations

import logging
from collections.abc import (
    Iterable,
    Mapping,
)
from os import PathLike
from typing import (
    TYPE_CHECKING,
    Any,
)

from gitcfg_core.config.git import normalize_key
from gitcfg_core.config.normalizer import ConfigVariable
from gitcfg_core.config.scope import (
    ConfigScope,
    get_write_scope,
    resolve_sources,
)
from gitcfg_core.constraints import Constraint
from gitcfg_core.consts import (
    SCOPE_LOCAL,
    UnsetValue,
)

if TYPE_CHECKING:
    from gitcfg_core.repo import Repo

lgr = logging.getLogger('gitcfg.config')


class EnsureWriteVariables(Constraint):
    """Ensure a non-empty collection of uniquely named variables to apply

    Accepted are a mapping of names to values, or an iterable of
    ``(name, value)`` pairs or :class:`ConfigVariable` items with a value.
    Names are unique when compared the way Git compares them.

    Returns a list of ``(name, value)`` with ``value`` being a ``str``, or
    ``UnsetValue``.
    """

    input_synopsis = 'non-empty mapping of variable names to values'

    def __call__(self, value: Any) -> list[tuple[str, Any]]:
        if isinstance(value, Mapping):
            items = list(value.items())
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            items = [self._get_pair(v) for v in value]
        else:
            self.raise_for(
                value,
                '{__value__!r} is not a {synopsis}',
                synopsis=self.input_synopsis,
            )
        if not items:
            self.raise_for(value, 'no variables given to set')
        variables = [ConfigVariable.from_item(k, v) for k, v in items]
        seen: set[str] = set()
        for var in variables:
            key = normalize_key(var.name)
            if key in seen:
                self.raise_for(
                    value,
                    'duplicate variable {name!r} in variables to set',
                    name=var.name,
                )
            seen.add(key)
        return [(var.name, var.target_value) for var in variables]

    def _get_pair(self, item: Any) -> tuple[Any, Any]:
        if isinstance(item, ConfigVariable):
            if not item.has_value:
                self.raise_for(
                    item,
                    'variable {name!r} has no value to set',
                    name=item.name,
                )
            return item.name, item.target_value
        if isinstance(item, tuple) and len(item) == 2:  # noqa: PLR2004
            return item
        self.raise_for(item, '{__value__!r} is not a (name, value) pair')
        return item  # pragma: no cover


_variables_constraint = EnsureWriteVariables()


def write(
    variables: Mapping[str, Any] | Iterable[Any],
    scope: ConfigScope | str = SCOPE_LOCAL,
    location: str | PathLike | Repo = '.',
) -> None:
    """Set, or unset, variables in a single scope

    A value of ``None`` or ``UnsetValue`` unsets a variable. Unsetting a
    variable that is not set is not an error.

    A ``de_facto`` scope is redirected to ``local`` (with a logged notice).
    Writing to the ``local`` scope raises ``ValueError`` if there is no
    repository at ``location``.

    All variables are validated (``ConstraintError`` on failure) before any
    is written. They are then applied one after the other, without a
    transaction spanning them: if Git fails on one, the ones before it
    remain applied, and the ``CommandError`` is raised.
    """
    items = _variables_constraint(variables)
    scope = get_write_scope(scope)
    target = resolve_sources(scope, location, for_writing=True).write_target
    for name, value in items:
        if value is UnsetValue:
            target.unset(name)
        else:
            target.set(name, value)
    lgr.debug('Applied %i variable(s) to %s', len(items), target)
