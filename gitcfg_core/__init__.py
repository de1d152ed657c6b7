"""Get and set Git configuration across the local and global scope

The main entrypoint is :func:`git_config`, with the convenience wrappers
:func:`git_config_local` and :func:`git_config_global`. Variables are
queried by name, and set by passing ``name=value`` pairs (as a mapping, or
as keyword arguments). Setting variables returns their previous values as a
:class:`~gitcfg_core.config.ConfigSnapshot` that can be passed back in to
restore the previous configuration::

    >>> ocfg = git_config_local({'user.name': 'oops'})  # doctest: +SKIP
    >>> git_config_local(ocfg)  # doctest: +SKIP

See :mod:`gitcfg_core.config` for details.
"""

__version__ = '0.1.0'

__all__ = [
    'ConfigScope',
    'ConfigSnapshot',
    'UnsetValue',
    'git_config',
    'git_config_get',
    'git_config_global',
    'git_config_local',
    'git_config_set',
]

from gitcfg_core.config import (
    ConfigScope,
    ConfigSnapshot,
    UnsetValue,
    git_config,
    git_config_get,
    git_config_global,
    git_config_local,
    git_config_set,
)
