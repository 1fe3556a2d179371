from .utils import (
    bind_var,
    compose,
    find_free_vars,
    generalise,
    instantiate,
    Substitution,
    substitute,
    unify,
)
from .main import infer_scheme, infer_types, TypeInferer

__all__ = (
    "bind_var",
    "compose",
    "find_free_vars",
    "generalise",
    "infer_scheme",
    "infer_types",
    "instantiate",
    "Substitution",
    "substitute",
    "TypeInferer",
    "unify",
)
