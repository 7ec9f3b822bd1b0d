import pytest

from modelprint.attributes import ConstraintName
from modelprint.errors import (
    CACHING_HINT,
    AddConstraintNotAllowed,
    AddVariableNotAllowed,
    CannotError,
    SetAttributeNotAllowed,
    UnsupportedAttribute,
    UnsupportedConstraint,
    UnsupportedError,
    error_message,
)
from modelprint.functions import ScalarAffineFunction
from modelprint.sets import LessThan


class AddConstraintUnsupported(UnsupportedError):
    operation_name = 'adding a constraint'


def test_unsupported_message_inserts_gerund_verbatim():
    err = AddConstraintUnsupported()
    assert str(err) == 'AddConstraintUnsupported: adding a constraint is not supported by the model.'


def test_unsupported_attribute():
    err = UnsupportedAttribute(ConstraintName())
    assert str(err) == (
        'UnsupportedAttribute: querying attribute ConstraintName() is not supported by the model.'
    )
    err = UnsupportedAttribute(ConstraintName(), action='setting')
    assert 'setting attribute ConstraintName()' in str(err)


def test_unsupported_constraint():
    err = UnsupportedConstraint(ScalarAffineFunction, LessThan)
    assert str(err) == (
        'UnsupportedConstraint: adding a `ScalarAffineFunction`-in-`LessThan` '
        'constraint is not supported by the model.'
    )


def test_cannot_error_without_message_ends_with_period():
    err = AddVariableNotAllowed()
    assert str(err) == (
        'AddVariableNotAllowed: adding a variable cannot be performed in the current '
        'state of the model even if the operation is supported. ' + CACHING_HINT
    )


def test_cannot_error_with_message():
    err = AddConstraintNotAllowed(ScalarAffineFunction, LessThan, 'the model is frozen')
    assert str(err) == (
        'AddConstraintNotAllowed: adding a `ScalarAffineFunction`-in-`LessThan` constraint '
        'cannot be performed in the current state of the model even if the operation is '
        'supported: the model is frozen ' + CACHING_HINT
    )
    assert err.message == 'the model is frozen'


def test_set_attribute_not_allowed():
    err = SetAttributeNotAllowed(ConstraintName())
    assert str(err).startswith('SetAttributeNotAllowed: setting attribute ConstraintName() cannot')


def test_families_are_distinct_exceptions():
    assert issubclass(UnsupportedAttribute, UnsupportedError)
    assert issubclass(AddVariableNotAllowed, CannotError)
    assert not issubclass(AddVariableNotAllowed, UnsupportedError)
    with pytest.raises(CannotError):
        raise AddVariableNotAllowed('busy')


class Bare(UnsupportedError):
    pass


class BareCannot(CannotError):
    pass


@pytest.mark.parametrize('error_type', [Bare, BareCannot, UnsupportedError, CannotError])
def test_variant_without_operation_name_cannot_be_built(error_type):
    with pytest.raises(TypeError, match='operation_name'):
        error_type()


def test_error_message_rejects_other_exceptions():
    with pytest.raises(TypeError):
        error_message(ValueError('nope'))
