"""Fixture setup"""

__all__ = [
    'baregitrepo',
    'gitrepo',
    'global_gitconfig',
    'nonrepo',
    'verify_pristine_gitconfig_global',
]


from gitcfg_core.tests.fixtures import (
    # function-scope temporary, bare Git repo
    baregitrepo,
    # function-scope temporary Git repo
    gitrepo,
    # function-scope temporary global Git config scope
    global_gitconfig,
    # function-scope directory outside any Git repo
    nonrepo,
    # verify no test leave contaminated config behind
    verify_pristine_gitconfig_global,
)
