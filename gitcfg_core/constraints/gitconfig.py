"""Constraints for Git configuration variable names and values"""

from __future__ import annotations

import re
from collections.abc import (
    Mapping,
    Set,
)
from typing import Any

from gitcfg_core.constraints.constraint import Constraint
from gitcfg_core.consts import UnsetValue

# git-config(1): the section name is alphanumeric, `-`, and `.` (legacy
# subsection syntax); a subsection can contain anything but newline and
# null; the variable name is alphanumeric and `-`, starting with a letter
cfg_name_regex = re.compile(
    r'^[a-zA-Z0-9-]+(\.[^\0\n]+)?\.[a-zA-Z][a-zA-Z0-9-]*$',
)


class EnsureConfigName(Constraint):
    """Ensure an input is a syntactically valid Git config variable name

    A name is a dotted ``section.variable`` or
    ``section.subsection.variable`` string.
    """

    def __call__(self, value: Any) -> str:
        if not isinstance(value, str):
            self.raise_for(
                value,
                'variable name {__value__!r} is not a string',
            )
        if not cfg_name_regex.match(value):
            self.raise_for(
                value,
                '{__value__!r} is not a valid Git config variable name',
            )
        return value

    @property
    def input_synopsis(self) -> str:
        return "'section[.subsection].variable'"


class EnsureConfigValue(Constraint):
    """Ensure an input can be used as the value of a single variable

    Strings are taken as-is. Booleans and integers are converted to the
    string form Git uses for them. ``None`` and ``UnsetValue`` both come
    back as ``UnsetValue``, meaning "unset the variable".

    Any container value is rejected, because multi-valued variables are
    not supported.
    """

    def __call__(self, value: Any) -> str | type[UnsetValue]:
        if value is None or value is UnsetValue:
            return UnsetValue
        if isinstance(value, str):
            return value
        # bool first, it is also an int
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, int):
            return str(value)
        if isinstance(value, (list, tuple, Set, Mapping)):
            self.raise_for(
                value,
                'multi-valued setting {__value__!r} is not supported, '
                'a variable can only have a single value',
            )
        self.raise_for(
            value,
            '{__value__!r} ({type_name}) cannot be used as a Git config value',
            type_name=type(value).__name__,
        )
        # not reached, `raise_for()` raises
        return value  # pragma: no cover

    @property
    def input_synopsis(self) -> str:
        return 'str, bool, int, or None/UnsetValue to unset'


class EnsureConfigNames(Constraint):
    """Ensure an input is a sequence of valid variable names

    A bare ``str`` is rejected, it would be taken apart into characters.
    The sequence is returned as a tuple.
    """

    _name_constraint = EnsureConfigName()

    def __call__(self, value: Any) -> tuple[str, ...]:
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            self.raise_for(
                value,
                'variable names must be given as a list or tuple, '
                'not {__value__!r}',
            )
        return tuple(self._name_constraint(n) for n in value)

    @property
    def input_synopsis(self) -> str:
        return f'list of {self._name_constraint.input_synopsis}'
