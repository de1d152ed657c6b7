"""Base class for constraints, and their logical OR"""

from __future__ import annotations

from abc import (
    ABC,
    abstractmethod,
)
from typing import Any

from gitcfg_core.constraints.exceptions import ConstraintError


class Constraint(ABC):
    """Base class for validating (and coercing) caller-supplied values

    A constraint is called with a value, and returns it (possibly coerced
    to a target type), or raises :class:`ConstraintError`.
    """

    def __str__(self) -> str:
        return f'Constraint[{self.input_synopsis}]'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def raise_for(self, value: Any, msg: str, **ctx: Any) -> None:
        """Raise a ``ConstraintError`` for ``value`` with this constraint"""
        if ctx:
            raise ConstraintError(self, value, msg, ctx)
        raise ConstraintError(self, value, msg)

    def __or__(self, other: Constraint) -> Constraint:
        return AnyOf(self, other)

    @property
    @abstractmethod
    def input_synopsis(self) -> str:
        """Brief, single line summary of valid input, for error reporting"""

    @abstractmethod
    def __call__(self, value: Any) -> Any:
        """Return the validated (and possibly coerced) value"""


class AnyOf(Constraint):
    """Logical OR for constraints

    Constraints are tried in the order given. The return value of the
    first constraint that does not raise is the overall return value.
    """

    def __init__(self, *constraints: Constraint):
        self._constraints = constraints

    def __repr__(self) -> str:
        creprs = ', '.join(f'{c!r}' for c in self.constraints)
        return f'{self.__class__.__name__}({creprs})'

    @property
    def constraints(self) -> tuple[Constraint, ...]:
        return self._constraints

    def __or__(self, other: Constraint) -> Constraint:
        others = other.constraints if isinstance(other, AnyOf) else (other,)
        return AnyOf(*self.constraints, *others)

    def __call__(self, value: Any) -> Any:
        e_list = []
        for c in self.constraints:
            try:
                return c(value)
            except ConstraintError as e:
                e_list.append(e)
        self.raise_for(  # noqa: RET503
            value,
            # plural OK, no sense in having 1 "alternative"
            '{__value__!r} does not match any of {n_alternatives} alternatives\n'
            '{__itemized_causes__}',
            n_alternatives=len(self.constraints),
            __caused_by__=e_list,
        )

    @property
    def input_synopsis(self) -> str:
        return ' or '.join(c.input_synopsis for c in self.constraints)
