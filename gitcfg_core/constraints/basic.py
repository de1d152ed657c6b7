from __future__ import annotations

from typing import Any

from gitcfg_core.constraints.constraint import Constraint


class EnsureChoice(Constraint):
    """Ensure an input is element of a set of possible values"""

    def __init__(self, *values: Any):
        self._choices = tuple(values)
        super().__init__()

    @property
    def choices(self) -> tuple[Any, ...]:
        """Returns the possible choice values"""
        return self._choices

    def __call__(self, value):
        if value not in self.choices:
            self.raise_for(
                value,
                '{__value__!r} is not one of {allowed}',
                allowed=self.choices,
            )
        return value

    @property
    def input_synopsis(self):
        return f"one of {{{','.join([repr(c) for c in self.choices])}}}"


class EnsureInstance(Constraint):
    """Ensure an input is an instance of a given type"""

    def __init__(self, cls: type):
        self._cls = cls
        super().__init__()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._cls.__name__})'

    def __call__(self, value):
        if not isinstance(value, self._cls):
            self.raise_for(
                value,
                '{__value__!r} is not a {cls_name}',
                cls_name=self._cls.__name__,
            )
        return value

    @property
    def input_synopsis(self):
        return f'{self._cls.__name__} instance'
