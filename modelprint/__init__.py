from .attributes import (
    ConstraintFunction,
    ConstraintIndex,
    ConstraintName,
    ConstraintSet,
    FEASIBILITY_SENSE,
    ListOfConstraintIndices,
    ListOfConstraints,
    ListOfVariableIndices,
    MAX_SENSE,
    MIN_SENSE,
    ModelLike,
    NumberOfVariables,
    ObjectiveFunction,
    ObjectiveFunctionType,
    ObjectiveSense,
    OptimizationSense,
    VariableName,
)
from .config import PrintDefaults, get_print_defaults, set_print_defaults
from .errors import (
    AddConstraintNotAllowed,
    AddVariableNotAllowed,
    CannotError,
    SetAttributeNotAllowed,
    UnsupportedAttribute,
    UnsupportedConstraint,
    UnsupportedError,
    error_message,
)
from .functions import (
    ScalarAffineFunction,
    ScalarAffineTerm,
    SingleVariable,
    VariableIndex,
    VectorAffineFunction,
    VectorAffineTerm,
    VectorOfVariables,
    affine,
)
from .loader import ModelFormatError, load_model, load_model_file
from .model import InvalidIndex, Model
from .render import (
    ASCII_TERMINAL,
    MARKUP,
    TERMINAL,
    PrintMode,
    constraint_string,
    constraints_string,
    format_number,
    function_string,
    in_set_string,
    latex_formulation,
    math_symbol,
    model_string,
    objective_function_string,
    print_model,
)
from .sets import (
    EqualTo,
    GreaterThan,
    Integer,
    Interval,
    LessThan,
    Nonnegatives,
    Nonpositives,
    SecondOrderCone,
    ZeroOne,
    Zeros,
)

__all__ = [
    'ConstraintFunction',
    'ConstraintIndex',
    'ConstraintName',
    'ConstraintSet',
    'FEASIBILITY_SENSE',
    'ListOfConstraintIndices',
    'ListOfConstraints',
    'ListOfVariableIndices',
    'MAX_SENSE',
    'MIN_SENSE',
    'ModelLike',
    'NumberOfVariables',
    'ObjectiveFunction',
    'ObjectiveFunctionType',
    'ObjectiveSense',
    'OptimizationSense',
    'VariableName',
    'PrintDefaults',
    'get_print_defaults',
    'set_print_defaults',
    'AddConstraintNotAllowed',
    'AddVariableNotAllowed',
    'CannotError',
    'SetAttributeNotAllowed',
    'UnsupportedAttribute',
    'UnsupportedConstraint',
    'UnsupportedError',
    'error_message',
    'ScalarAffineFunction',
    'ScalarAffineTerm',
    'SingleVariable',
    'VariableIndex',
    'VectorAffineFunction',
    'VectorAffineTerm',
    'VectorOfVariables',
    'affine',
    'ModelFormatError',
    'load_model',
    'load_model_file',
    'InvalidIndex',
    'Model',
    'ASCII_TERMINAL',
    'MARKUP',
    'TERMINAL',
    'PrintMode',
    'constraint_string',
    'constraints_string',
    'format_number',
    'function_string',
    'in_set_string',
    'latex_formulation',
    'math_symbol',
    'model_string',
    'objective_function_string',
    'print_model',
    'EqualTo',
    'GreaterThan',
    'Integer',
    'Interval',
    'LessThan',
    'Nonnegatives',
    'Nonpositives',
    'SecondOrderCone',
    'ZeroOne',
    'Zeros',
]
