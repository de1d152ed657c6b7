"""Execution of Git subprocesses

Every interaction with Git's configuration store goes through the
functions of this module. One-shot calls are made with
:func:`call_git` and friends. Output of potentially unknown size, like a
full ``git config --list`` dump, is consumed with :func:`iter_git_subproc`,
a context manager built on ``datasalad.runners.iter_subproc()``. Execution
errors are communicated with the :class:`CommandError` exception.

.. currentmodule:: gitcfg_core.runners
.. autosummary::
   :toctree: generated

   call_git
   call_git_lines
   call_git_oneline
   iter_git_subproc
   CommandError
"""

__all__ = [
    'CommandError',
    'call_git',
    'call_git_lines',
    'call_git_oneline',
    'iter_git_subproc',
]


from datasalad.runners import CommandError

from .git import (
    call_git,
    call_git_lines,
    call_git_oneline,
    iter_git_subproc,
)
