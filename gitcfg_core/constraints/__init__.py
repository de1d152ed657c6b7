"""Validation of caller-supplied parameters

Each :class:`Constraint` is called with a value and returns it, possibly
coerced to a target type, or raises a :class:`ConstraintError`. This is
how all usage errors are reported: malformed variable names, values that
are not scalar, containers nested too deep, and unknown scopes.

Constraints can be combined with a logical ``or`` (:class:`AnyOf`, or the
``|`` operator).

.. currentmodule:: gitcfg_core.constraints
.. autosummary::
   :toctree: generated

   Constraint
   AnyOf
   ConstraintError
   EnsureChoice
   EnsureConfigName
   EnsureConfigNames
   EnsureConfigValue
   EnsureInstance
"""

__all__ = [
    'Constraint',
    'AnyOf',
    'ConstraintError',
    'EnsureChoice',
    'EnsureConfigName',
    'EnsureConfigNames',
    'EnsureConfigValue',
    'EnsureInstance',
]


from .basic import (
    EnsureChoice,
    EnsureInstance,
)
from .constraint import (
    AnyOf,
    Constraint,
)
from .exceptions import (
    ConstraintError,
)
from .gitconfig import (
    EnsureConfigName,
    EnsureConfigNames,
    EnsureConfigValue,
)
