"""Assorted common constants"""

__all__ = [
    'UnsetValue',
    'DEFAULT_SCOPE',
    'GIT_CONFIG_KEY_NOT_SET',
    'SCOPE_DE_FACTO',
    'SCOPE_GLOBAL',
    'SCOPE_LOCAL',
]

from datasalad.settings import UnsetValue

SCOPE_DE_FACTO = 'de_facto'
"""Label of the merged, read-only view (local overrides global)"""
SCOPE_LOCAL = 'local'
"""Label of the repository-specific scope (``.git/config``)"""
SCOPE_GLOBAL = 'global'
"""Label of the user-level scope (``~/.gitconfig``, or ``GIT_CONFIG_GLOBAL``)"""

DEFAULT_SCOPE = SCOPE_DE_FACTO
"""Scope used when none is specified"""

GIT_CONFIG_KEY_NOT_SET = 5
"""Exit code of ``git config --unset(-all)`` when the variable is not set"""
