"""Flatten caller arguments into a list of variables to query or set

The caller-facing functions accept variables in a number of forms::

    git_config('user.name', 'user.email')             # query
    git_config(['user.name', 'user.email'])           # query
    git_config({'user.name': 'louise'})               # set
    git_config(**{'user.name': 'louise'})             # set
    git_config({'user.name': None})                   # unset
    git_config(snapshot)                              # restore

This module turns any of these into a flat, ordered list of
:class:`ConfigVariable` items.
"""

from __future__ import annotations

from collections.abc import (
    Iterable,
    Mapping,
)
from dataclasses import dataclass
from enum import Enum
from typing import Any

from gitcfg_core.constraints import (
    Constraint,
    EnsureConfigName,
    EnsureConfigValue,
)
from gitcfg_core.consts import UnsetValue


class VariableMode(Enum):
    """What a caller asks to do with a variable"""

    query = 'query'
    set = 'set'
    unset = 'unset'


@dataclass(frozen=True)
class ConfigVariable:
    """A variable name, with what to do with it"""

    name: str
    """Dotted variable name, in the caller's spelling"""
    mode: VariableMode
    value: str | None = None
    """Value to set, only given for ``VariableMode.set``"""

    @classmethod
    def from_item(cls, name: Any, value: Any) -> ConfigVariable:
        """Create a set/unset variable from a ``name, value`` pair

        Raises ``ConstraintError`` for an invalid name or value.
        """
        name = _name_constraint(name)
        value = _value_constraint(value)
        if value is UnsetValue:
            return cls(name, VariableMode.unset)
        return cls(name, VariableMode.set, value)

    @property
    def has_value(self) -> bool:
        """Whether the variable is to be changed (set or unset)"""
        return self.mode is not VariableMode.query

    @property
    def target_value(self) -> str | type[UnsetValue]:
        """Value to apply, ``UnsetValue`` for an unset"""
        if self.mode is VariableMode.query:
            msg = f'{self.name!r} is a query, it has no value to apply'
            raise TypeError(msg)
        return UnsetValue if self.mode is VariableMode.unset else self.value


_name_constraint = EnsureConfigName()
_value_constraint = EnsureConfigValue()


class _EnsureFlatArgument(Constraint):
    """Expand a single positional argument into variables

    A ``str`` is a query, a ``Mapping`` holds set/unset items, a
    ``list``/``tuple`` can hold any of these, but cannot be nested further.
    """

    input_synopsis = (
        'variable name, mapping of names to values, '
        'or a list/tuple of these'
    )

    def __call__(self, value: Any) -> list[ConfigVariable]:
        return self._expand(value, depth=0)

    def _expand(self, value: Any, depth: int) -> list[ConfigVariable]:
        if isinstance(value, str):
            return [ConfigVariable(_name_constraint(value), VariableMode.query)]
        if isinstance(value, Mapping):
            return [ConfigVariable.from_item(k, v) for k, v in value.items()]
        if isinstance(value, (list, tuple)):
            if depth > 0:
                self.raise_for(
                    value,
                    'nested container {__value__!r} is not supported, '
                    'arguments can be flattened by one level only',
                )
            return [
                var
                for item in value
                for var in self._expand(item, depth=depth + 1)
            ]
        self.raise_for(
            value,
            'cannot interpret {__value__!r} ({type_name}) as a variable '
            'specification, must be a {synopsis}',
            type_name=type(value).__name__,
            synopsis=self.input_synopsis,
        )
        return []  # pragma: no cover


_arg_constraint = _EnsureFlatArgument()


def normalize(
    args: Iterable[Any],
    kwargs: Mapping[str, Any] | None = None,
) -> tuple[list[ConfigVariable], bool]:
    """Flatten variadic arguments into an ordered list of variables

    ``args`` are positional arguments: variable names (queries), mappings
    of names to values (set, or unset with a ``None``/``UnsetValue``
    value), or a list/tuple of these. ``kwargs`` are keyword arguments,
    each a name/value pair, appended after all positional arguments.

    The order of appearance is preserved. Duplicate names are kept.

    Returns the list of variables and a flag whether this is a pure
    query, i.e., no variable is associated with a value. An empty list
    is a query (for all variables).

    Raises ``ConstraintError`` for any malformed argument.
    """
    variables = [var for arg in args for var in _arg_constraint(arg)]
    if kwargs:
        variables.extend(ConfigVariable.from_item(k, v) for k, v in kwargs.items())
    is_query = not any(v.has_value for v in variables)
    return variables, is_query
