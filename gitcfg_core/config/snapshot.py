from __future__ import annotations

from collections.abc import (
    Iterable,
    Iterator,
    Mapping,
)
from types import MappingProxyType
from typing import Union

from gitcfg_core.consts import UnsetValue

SnapshotValue = Union[str, type[UnsetValue]]


class ConfigSnapshot(Mapping):
    """Immutable, ordered mapping of variable names to their values

    A snapshot is the result of any read of Git configuration. Each value
    is a ``str``, or :class:`~gitcfg_core.consts.UnsetValue` for a variable
    that was asked for but not set.

    A snapshot holds no reference to the configuration store. Later changes
    to the store do not affect it. It can be passed as the set of variables
    to apply to a scope, which restores the captured state (variables
    recorded as ``UnsetValue`` get unset).
    """

    def __init__(
        self,
        items: Mapping[str, SnapshotValue]
        | Iterable[tuple[str, SnapshotValue]] = (),
    ):
        self._items = MappingProxyType(dict(items))

    def __getitem__(self, key: str) -> SnapshotValue:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self):
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({dict(self._items)!r})'

    def __str__(self) -> str:
        if not self._items:
            return f'{self.__class__.__name__}: <no variables>'
        return '\n'.join(
            (
                f'{self.__class__.__name__}:',
                *(f'  {k}={_value_str(v)}' for k, v in self._items.items()),
            )
        )

    @property
    def unset(self) -> tuple[str, ...]:
        """Names of all variables without a value"""
        return tuple(k for k, v in self._items.items() if v is UnsetValue)


def _value_str(value: SnapshotValue) -> str:
    return '<unset>' if value is UnsetValue else value
