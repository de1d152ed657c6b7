"""Get and set Git configuration across scopes

This module provides layered read/write access to Git configuration in two
scopes: ``local`` (a repository's ``.git/config``) and ``global`` (the
user's ``~/.gitconfig``). A third, read-only scope ``de_facto`` is the
merged view with ``local`` variables overriding ``global`` ones, i.e., the
configuration in force.

All parsing, locking, and storage is left to ``git config``. Nothing is
cached: each call determines the repository and reads the configuration
anew.

Usage
-----

The main entrypoint is :func:`git_config`, with the convenience wrappers
:func:`git_config_local` and :func:`git_config_global` that fix the scope.

Variables are queried by name. Variables that are not set are reported
with the :class:`UnsetValue` marker, not an error::

    >>> git_config_local('user.name', 'color.branch')  # doctest: +SKIP
    ConfigSnapshot({'user.name': 'louise', 'color.branch': <class ...UnsetValue'>})

Variables are set by passing a mapping (or keyword arguments, with
``**``). The previous values are returned, and can be passed back in to
restore the previous configuration, like ``os.chdir()`` with a previously
stored ``os.getcwd()``::

    >>> ocfg = git_config_local({'user.name': 'oops'})  # doctest: +SKIP
    >>> git_config_local(ocfg)  # doctest: +SKIP

A ``None`` value unsets a variable. Multi-valued variables are not
supported.

The underlying components are exposed for reuse: :func:`read` and
:func:`write` operate on a single scope with already normalized input,
:func:`normalize` flattens caller arguments, and :func:`resolve_sources`
determines the configuration stores for a scope at a location.

.. currentmodule:: gitcfg_core.config
.. autosummary::
   :toctree: generated

   ConfigScope
   ConfigSnapshot
   ConfigVariable
   GitConfig
   GlobalGitConfig
   LocalGitConfig
   ScopeSources
   UnsetValue
   VariableMode
   git_config
   git_config_get
   git_config_global
   git_config_local
   git_config_set
   get_scope
   get_write_scope
   normalize
   read
   resolve_sources
   write
"""

__all__ = [
    'ConfigScope',
    'ConfigSnapshot',
    'ConfigVariable',
    'GitConfig',
    'GlobalGitConfig',
    'LocalGitConfig',
    'ScopeSources',
    'UnsetValue',
    'VariableMode',
    'git_config',
    'git_config_get',
    'git_config_global',
    'git_config_local',
    'git_config_set',
    'get_scope',
    'get_write_scope',
    'normalize',
    'read',
    'resolve_sources',
    'write',
]

from datasalad.settings import UnsetValue

from .api import (
    git_config,
    git_config_get,
    git_config_global,
    git_config_local,
    git_config_set,
)
from .git import (
    GitConfig,
    GlobalGitConfig,
    LocalGitConfig,
)
from .normalizer import (
    ConfigVariable,
    VariableMode,
    normalize,
)
from .reader import read
from .scope import (
    ConfigScope,
    ScopeSources,
    get_scope,
    get_write_scope,
    resolve_sources,
)
from .snapshot import ConfigSnapshot
from .writer import write
