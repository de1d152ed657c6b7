"""Repository resolution

Configuration in the ``local`` scope is bound to a Git repository. This
module decides whether a location is inside a repository, and provides
a handle for it.

:class:`Repo` can be pointed to any location inside a worktree, or to a
bare repository, and resolves the associated Git directory. A new
repository can be created via its :meth:`Repo.init_at` class method.
:func:`get_repo` is the non-raising variant that reports the absence
of a repository with ``None``.

.. currentmodule:: gitcfg_core.repo
.. autosummary::
   :toctree: generated

   Repo
   get_repo
"""

__all__ = [
    'Repo',
    'get_repo',
]

from .repo import (
    Repo,
    get_repo,
)
