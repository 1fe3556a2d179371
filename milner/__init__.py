from .type_inference import (
    compose,
    generalise,
    infer_scheme,
    infer_types,
    instantiate,
    substitute,
    unify,
)
from .scope import BUILTIN_TYPES, Scope
from .asts.base import Apply, ASTNode, Function, Let, Name, Scalar
from .asts.types_ import Type, TypeArrow, TypeName, TypeScheme, TypeVar, TypeVarSupply
from .errors import (
    CircularTypeError,
    MilnerError,
    TypeMismatchError,
    UndefinedNameError,
    UnificationError,
)
from .pprint_ import show_expr, show_type

# NOTE: `type_inference` has to be imported before `scope` since
#  `scope` depends on `type_inference.utils`.

__all__ = (
    "Apply",
    "ASTNode",
    "BUILTIN_TYPES",
    "CircularTypeError",
    "compose",
    "Function",
    "generalise",
    "infer_scheme",
    "infer_types",
    "instantiate",
    "Let",
    "MilnerError",
    "Name",
    "Scalar",
    "Scope",
    "show_expr",
    "show_type",
    "substitute",
    "Type",
    "TypeArrow",
    "TypeMismatchError",
    "TypeName",
    "TypeScheme",
    "TypeVar",
    "TypeVarSupply",
    "UndefinedNameError",
    "UnificationError",
    "unify",
)
