from typing import Mapping, Set, TYPE_CHECKING

from ..asts.types_ import Type, TypeArrow, TypeName, TypeScheme, TypeVar, TypeVarSupply
from ..errors import CircularTypeError, TypeMismatchError
from ..log import logger

if TYPE_CHECKING:
    from ..scope import Scope

Substitution = Mapping[TypeVar, Type]


def unify(left: Type, right: Type) -> Substitution:
    """
    Build the most general substitution that makes two types equal or
    fail if it's impossible.

    Parameters
    ----------
    left: Type
        One of the types to be unified.
    right: Type
        The other type to be unified.

    Raises
    ------
    TypeMismatchError
        The error thrown when `left` and `right` can't be unified.
    CircularTypeError
        The error thrown when unifying would need an infinite type.

    Returns
    -------
    Substitution
        The substitution that unifies the given types.
    """
    result = _unify(left, right)
    logger.debug("(%r) ~ (%r) => %r", left, right, result)
    return result


def _unify(left: Type, right: Type) -> Substitution:
    if isinstance(left, TypeVar):
        return bind_var(left, right)
    if isinstance(right, TypeVar):
        return bind_var(right, left)
    if isinstance(left, TypeName) and isinstance(right, TypeName):
        if left == right:
            return {}
        logger.error("Cannot unify: (%r) ~ (%r)", left, right)
        raise TypeMismatchError(left, right)
    if isinstance(left, TypeArrow) and isinstance(right, TypeArrow):
        first = unify(left.left, right.left)
        second = unify(
            substitute(left.right, first), substitute(right.right, first)
        )
        return compose(second, first)
    logger.error("Cannot unify: (%r) ~ (%r)", left, right)
    raise TypeMismatchError(left, right)


def bind_var(type_var: TypeVar, type_: Type) -> Substitution:
    """
    Make a substitution that replaces `type_var` with `type_`.

    Parameters
    ----------
    type_var: TypeVar
        The type var to be replaced.
    type_: Type
        What `type_var` will be replaced with.

    Raises
    ------
    CircularTypeError
        The error thrown when `type_var` occurs inside of `type_` since
        the result would be an infinite type.

    Returns
    -------
    Substitution
        Either the new single-entry substitution or an empty one if
        `type_` is `type_var` itself.
    """
    if type_var == type_:
        return {}
    if type_var in type_:
        logger.error("Circularity detected in (%r) ~ (%r)", type_var, type_)
        raise CircularTypeError(type_var, type_)
    return {type_var: type_}


def compose(left: Substitution, right: Substitution) -> Substitution:
    """
    Combine two substitutions into one that does the same as applying
    `right` first and then `left`.

    Notes
    -----
    - The order matters: `compose(a, b)` and `compose(b, a)` are
      generally different.
    - Entries that would map a type var to itself are left out.

    Parameters
    ----------
    left: Substitution
        The substitution applied second.
    right: Substitution
        The substitution applied first.

    Returns
    -------
    Substitution
        The combined substitution.
    """
    if not left:
        return right
    if not right:
        return left

    result = {key: substitute(value, left) for key, value in right.items()}
    for key, value in left.items():
        result.setdefault(key, value)
    return {key: value for key, value in result.items() if key != value}


def substitute(type_: Type, substitution: Substitution) -> Type:
    """
    Replace free type vars in the object with the types in
    `substitution`.

    Parameters
    ----------
    type_: Type
        The type containing type vars to replace.
    substitution: Substitution
        The mapping used to replace the free type vars. Chains like
        `a -> b, b -> Int` are followed all the way to the end.

    Returns
    -------
    Type
        The same object but with the type vars replaced.
    """
    if isinstance(type_, TypeName):
        return type_
    if isinstance(type_, TypeVar):
        replacement = substitution.get(type_)
        if replacement is None or replacement == type_:
            return type_
        return substitute(replacement, substitution)
    if isinstance(type_, TypeArrow):
        return TypeArrow(
            substitute(type_.left, substitution),
            substitute(type_.right, substitution),
        )
    if isinstance(type_, TypeScheme):
        actual_sub = {
            var: value
            for var, value in substitution.items()
            if var not in type_.bound_types
        }
        return TypeScheme(substitute(type_.actual_type, actual_sub), type_.bound_types)
    raise TypeError(f"{type_} is an invalid subtype of Type.")


def find_free_vars(type_: Type) -> Set[TypeVar]:
    """
    Find all the free vars inside `type_`.

    Parameters
    ----------
    type_: Type
        The type containing free type variables.

    Returns
    -------
    Set[TypeVar]
        All the free type variables found in `type_`.
    """
    if isinstance(type_, TypeArrow):
        return find_free_vars(type_.left) | find_free_vars(type_.right)
    if isinstance(type_, TypeName):
        return set()
    if isinstance(type_, TypeScheme):
        return find_free_vars(type_.actual_type) - type_.bound_types
    if isinstance(type_, TypeVar):
        return {type_}
    raise TypeError(f"{type_} is an invalid subtype of Type.")


def instantiate(scheme: TypeScheme, supply: TypeVarSupply) -> Type:
    """
    Unwrap a type scheme by giving each of its bound type vars a brand
    new type var.

    Parameters
    ----------
    scheme: TypeScheme
        The type scheme to unwrap.
    supply: TypeVarSupply
        Where the new type vars come from.

    Returns
    -------
    Type
        The instantiated type (generated from the `actual_type` attr).
    """
    if not scheme.bound_types:
        return scheme.actual_type
    fresh_vars = {
        var: supply.fresh() for var in sorted(scheme.bound_types, key=_var_key)
    }
    return substitute(scheme.actual_type, fresh_vars)


def generalise(scope: "Scope", type_: Type) -> TypeScheme:
    """
    Turn any old type into a type scheme by closing over the type vars
    that `scope` doesn't already depend on.

    Parameters
    ----------
    scope: Scope
        The surrounding scope. Type vars that are free in it must stay
        free in the result.
    type_: Type
        The type containing free type variables.

    Returns
    -------
    TypeScheme
        The type scheme with the free type variables quantified over
        it.
    """
    return TypeScheme(type_, find_free_vars(type_) - scope.free_vars())


def _var_key(type_var: TypeVar) -> int:
    return type_var.value
