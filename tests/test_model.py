import pytest

from modelprint.attributes import (
    ConstraintFunction,
    ConstraintIndex,
    ConstraintName,
    ConstraintSet,
    FEASIBILITY_SENSE,
    ListOfConstraintIndices,
    ListOfConstraints,
    ListOfVariableIndices,
    MIN_SENSE,
    ModelLike,
    NumberOfVariables,
    ObjectiveFunction,
    ObjectiveFunctionType,
    ObjectiveSense,
    VariableName,
)
from modelprint.errors import (
    AddConstraintNotAllowed,
    AddVariableNotAllowed,
    SetAttributeNotAllowed,
    UnsupportedAttribute,
    UnsupportedConstraint,
)
from modelprint.functions import (
    ScalarAffineFunction,
    SingleVariable,
    VariableIndex,
    VectorOfVariables,
    affine,
)
from modelprint.model import InvalidIndex, Model
from modelprint.sets import EqualTo, LessThan, Nonnegatives, ZeroOne


def test_model_satisfies_protocol():
    assert isinstance(Model(), ModelLike)


def test_variables_are_numbered_from_one():
    model = Model()
    x = model.add_variable('x')
    rest = model.add_variables(2)
    assert x == VariableIndex(1)
    assert rest == [VariableIndex(2), VariableIndex(3)]
    assert model.get(NumberOfVariables()) == 3
    assert model.get(ListOfVariableIndices()) == [x] + rest
    assert model.get(VariableName(), x) == 'x'
    assert model.get(VariableName(), rest[0]) == ''


def test_set_names():
    model = Model()
    x = model.add_variable()
    index = model.add_constraint(SingleVariable(x), ZeroOne())
    model.set(VariableName(), x, 'b')
    model.set(ConstraintName(), index, 'binary_b')
    assert model.get(VariableName(), x) == 'b'
    assert model.get(ConstraintName(), index) == 'binary_b'


def test_constraint_families_keep_insertion_order():
    model = Model()
    x, y = model.add_variables(2)
    first = model.add_constraint(affine([(1.0, x)]), LessThan(1.0))
    second = model.add_constraint(SingleVariable(y), EqualTo(2.0))
    third = model.add_constraint(affine([(1.0, y)]), LessThan(3.0))

    assert model.get(ListOfConstraints()) == [
        (ScalarAffineFunction, LessThan),
        (SingleVariable, EqualTo),
    ]
    assert model.get(ListOfConstraintIndices(ScalarAffineFunction, LessThan)) == [first, third]
    assert model.get(ConstraintSet(), second) == EqualTo(2.0)
    assert model.get(ConstraintFunction(), second) == SingleVariable(y)


def test_objective_defaults_to_feasibility():
    model = Model()
    assert model.get(ObjectiveSense()) == FEASIBILITY_SENSE
    assert model.get(ObjectiveFunctionType()) is ScalarAffineFunction

    x = model.add_variable()
    model.set_objective(MIN_SENSE, SingleVariable(x))
    assert model.get(ObjectiveSense()) == MIN_SENSE
    assert model.get(ObjectiveFunction(SingleVariable)) == SingleVariable(x)
    with pytest.raises(TypeError):
        model.get(ObjectiveFunction(ScalarAffineFunction))


def test_unknown_attribute_is_unsupported():
    model = Model()
    with pytest.raises(UnsupportedAttribute):
        model.get('solve time')
    with pytest.raises(UnsupportedAttribute):
        model.set(ObjectiveSense(), None, MIN_SENSE)
    assert not model.supports('solve time')


def test_model_without_names():
    model = Model(supports_names=False)
    x = model.add_variable('x')
    index = model.add_constraint(SingleVariable(x), LessThan(1.0), 'c')
    assert not model.supports(VariableName(), VariableIndex)
    assert not model.supports(ConstraintName(), ConstraintIndex)
    with pytest.raises(UnsupportedAttribute):
        model.get(VariableName(), x)
    with pytest.raises(UnsupportedAttribute):
        model.get(ConstraintName(), index)
    with pytest.raises(UnsupportedAttribute):
        model.set(VariableName(), x, 'y')


def test_unsupported_constraint_family():
    model = Model()
    x = model.add_variable()
    with pytest.raises(UnsupportedConstraint):
        model.add_constraint(SingleVariable(x), Nonnegatives(1))
    with pytest.raises(UnsupportedConstraint):
        model.add_constraint(VectorOfVariables([x]), LessThan(1.0))


def test_frozen_model_rejects_changes():
    model = Model()
    x = model.add_variable()
    model.freeze()
    with pytest.raises(AddVariableNotAllowed):
        model.add_variable()
    with pytest.raises(AddConstraintNotAllowed) as exc:
        model.add_constraint(SingleVariable(x), LessThan(1.0))
    assert 'the model is frozen' in str(exc.value)
    with pytest.raises(SetAttributeNotAllowed):
        model.set_objective(MIN_SENSE)
    with pytest.raises(SetAttributeNotAllowed):
        model.set(VariableName(), x, 'x')


def test_invalid_indices():
    model = Model()
    with pytest.raises(InvalidIndex):
        model.get(VariableName(), VariableIndex(1))
    with pytest.raises(InvalidIndex):
        model.get(ConstraintFunction(), ConstraintIndex(SingleVariable, LessThan, 1))


def test_repr_summarizes_size():
    model = Model()
    x = model.add_variable()
    model.add_constraint(SingleVariable(x), LessThan(1.0))
    assert repr(model) == '<Model: 1 variable(s), 1 constraint(s)>'
