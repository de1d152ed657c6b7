import pytest

from ..basic import (
    EnsureChoice,
    EnsureInstance,
)
from ..exceptions import ConstraintError


def test_ensurechoice():
    c = EnsureChoice('choice1', 'choice2', None)
    assert c.input_synopsis == "one of {'choice1','choice2',None}"
    assert str(c) == f'Constraint[{c.input_synopsis}]'
    assert c.choices == ('choice1', 'choice2', None)
    # this should always work
    assert c('choice1') == 'choice1'
    assert c(None) is None
    # this should always fail
    with pytest.raises(ValueError, match='is not one of'):
        c('fail')
    with pytest.raises(ValueError, match='is not one of'):
        c('None')


def test_ensureinstance():
    c = EnsureInstance(int)
    assert c.input_synopsis == 'int instance'
    assert repr(c) == 'EnsureInstance(int)'
    assert c(5) == 5  # noqa: PLR2004
    with pytest.raises(ConstraintError, match="'5' is not a int"):
        c('5')
