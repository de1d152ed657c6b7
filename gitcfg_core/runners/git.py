from __future__ import annotations

import logging
import os
import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

from datasalad.runners import (
    CommandError,
    iter_subproc,
)

lgr = logging.getLogger('gitcfg.runners')

GIT_EXECUTABLE = 'git'


def _run_git(
    args: list[str],
    *,
    cwd: Path | None = None,
    capture_output: bool = False,
    text: bool | None = None,
    force_c_locale: bool = False,
) -> subprocess.CompletedProcess:
    """Run ``git`` with ``args`` and raise ``CommandError`` on failure

    ``args`` must not contain the Git executable, it is prepended here.

    With ``force_c_locale``, the process environment is amended with
    ``LC_ALL=C`` to get locale-invariant output.
    """
    env = dict(os.environ, LC_ALL='C') if force_c_locale else None
    cmd = [GIT_EXECUTABLE, *args]
    lgr.debug('Run %r (cwd=%s)', cmd, cwd)
    try:
        return subprocess.run(
            cmd,
            capture_output=capture_output,
            cwd=cwd,
            check=True,
            text=text,
            env=env,
        )
    except subprocess.CalledProcessError as e:
        # normalize to the exception type used by all runners
        raise CommandError(
            cmd=cmd,
            returncode=e.returncode,
            stdout=e.stdout,
            stderr=e.stderr,
            cwd=cwd,
        ) from e


def call_git(
    args: list[str],
    *,
    cwd: Path | None = None,
    force_c_locale: bool = False,
    capture_output: bool = False,
) -> None:
    """Call Git for its side effects, raises on non-zero exit

    Process output is only captured with ``capture_output=True``. This is
    needed to have any error message reported in a ``CommandError``.
    """
    _run_git(
        args,
        cwd=cwd,
        capture_output=capture_output,
        force_c_locale=force_c_locale,
    )


def call_git_lines(
    args: list[str],
    *,
    cwd: Path | None = None,
    force_c_locale: bool = False,
) -> list[str]:
    """Call Git for a (small) number of lines of output

    Raises
    ------
    CommandError if the call exits with a non-zero status.
    """
    res = _run_git(
        args,
        cwd=cwd,
        capture_output=True,
        text=True,
        force_c_locale=force_c_locale,
    )
    return res.stdout.splitlines()


def call_git_oneline(
    args: list[str],
    *,
    cwd: Path | None = None,
    force_c_locale: bool = False,
) -> str:
    """Call Git for a single line of output

    Raises
    ------
    CommandError if the call exits with a non-zero status.
    AssertionError if there is not exactly one line of output.
    """
    lines = call_git_lines(args, cwd=cwd, force_c_locale=force_c_locale)
    if len(lines) != 1:
        msg = f'Expected Git {args} to return a single line, but got {lines}'
        raise AssertionError(msg)
    return lines[0]


def iter_git_subproc(args: list[str], **kwargs):
    """``iter_subproc()`` for Git commands

    ``args`` are the arguments to Git only, the executable is added here.
    All ``kwargs`` are passed on to ``iter_subproc()`` as-is.
    """
    cmd = [GIT_EXECUTABLE, *args]
    lgr.debug('Iterate %r', cmd)
    return iter_subproc(cmd, **kwargs)
