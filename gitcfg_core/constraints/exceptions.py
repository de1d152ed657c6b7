from __future__ import annotations

from textwrap import indent
from types import MappingProxyType
from typing import (
    Any,
)


class ConstraintError(ValueError):
    """Raised when a caller-supplied value violates a constraint

    This is the exception type for any usage error, e.g. a malformed
    variable name, a non-scalar value, or an unknown scope. It derives
    from ``ValueError``, such that callers need not know about this
    particular type.

    Besides a message, the exception carries the violated constraint,
    the offending value, and a context mapping with any additional
    information. The context can hold a ``'__caused_by__'`` key with
    one exception, or a tuple of exceptions, that led to the error.
    """

    def __init__(
        self,
        constraint,
        value: Any,
        msg: str,
        ctx: dict[str, Any] | None = None,
    ):
        # `msg` goes first into `.args`, where `ValueError` would have it
        super().__init__(msg, constraint, value, ctx)

    @property
    def msg(self) -> str:
        """The error message, interpolated with the error context

        The message template can use any key of :attr:`context` as a
        placeholder in ``format()`` syntax, plus ``__value__`` (the
        offending value) and ``__itemized_causes__`` (an indented bullet
        list of all underlying exceptions).
        """
        ctx = dict(self.context)
        ctx['__value__'] = self.value
        if self.caused_by:
            ctx['__itemized_causes__'] = indent(
                '\n'.join(f'- {c!s}' for c in self.caused_by),
                '  ',
            )
        return self.args[0].format(**ctx)

    @property
    def constraint(self):
        """The constraint instance that was violated"""
        return self.args[1]

    @property
    def value(self):
        """The value that violated the constraint"""
        return self.args[2]

    @property
    def caused_by(self) -> tuple[Exception, ...] | None:
        cb = self.context.get('__caused_by__', None)
        if cb is None:
            return None
        if isinstance(cb, Exception):
            return (cb,)
        return tuple(cb)

    @property
    def context(self) -> MappingProxyType:
        return MappingProxyType(self.args[3] or {})

    def __str__(self) -> str:
        return self.msg

    def __repr__(self) -> str:
        # constructor argument order, `msg` is first in `.args`
        return '{0}({2!r}, {3!r}, {1!r}, {4!r})'.format(
            self.__class__.__name__,
            *self.args,
        )
