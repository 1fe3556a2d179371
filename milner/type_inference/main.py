from typing import Optional, Tuple

from .. import scope as scopes
from ..asts import base, visitor
from ..asts.types_ import Type, TypeArrow, TypeName, TypeScheme, TypeVarSupply
from ..log import logger
from . import utils

Inferred = Tuple[utils.Substitution, Type]

SCALAR_TYPES = {bool: TypeName("Bool"), int: TypeName("Int")}


def infer_types(tree: base.ASTNode, scope: Optional["scopes.Scope"] = None) -> Type:
    """
    Work out the most general type of an expression.

    Parameters
    ----------
    tree: ASTNode
        The expression to be typed.
    scope: Optional[Scope] = None
        The names that are already defined outside `tree`. If it's
        `None`, the expression starts out with no names at all.

    Raises
    ------
    UndefinedNameError
        The error thrown when `tree` uses a name that isn't in scope.
    TypeMismatchError
        The error thrown when the engine is unable to unify 2 types.
    CircularTypeError
        The error thrown when the expression would need an infinite
        type.

    Returns
    -------
    Type
        The fully resolved type of `tree`.
    """
    _, type_ = _infer(tree, scopes.Scope() if scope is None else scope)
    return type_


def infer_scheme(
    tree: base.ASTNode, scope: Optional["scopes.Scope"] = None
) -> TypeScheme:
    """
    Work out the type of an expression and then close it over all the
    type vars that `scope` doesn't use once the inferred substitution
    has been applied to it.
    """
    scope = scopes.Scope() if scope is None else scope
    substitution, type_ = _infer(tree, scope)
    return utils.generalise(scope.substitute(substitution), type_)


def _infer(tree: base.ASTNode, scope: "scopes.Scope") -> Inferred:
    substitution, type_ = TypeInferer(scope).run(tree)
    logger.debug("final substitution: %r", substitution)
    return substitution, utils.substitute(type_, substitution)


class TypeInferer(visitor.BaseASTVisitor[Inferred]):
    """
    Work out the type of each expression node along with the
    substitution needed to make it agree with the rest of the tree.

    Attributes
    ----------
    current_scope: Scope
        The types of all the names visible at the node currently being
        visited.
    supply: TypeVarSupply
        Where new type vars come from. Each inferer has its own so that
        two runs never share any type vars.

    Notes
    -----
    - A `TypeInferer` should only be run once. Make a new one for each
      expression so that the type var numbering starts again from the
      first number that the starting scope doesn't use (`0` for an
      empty scope).
    """

    def __init__(self, scope: "scopes.Scope") -> None:
        self.current_scope: scopes.Scope = scope
        self.supply: TypeVarSupply = TypeVarSupply(_first_unused_id(scope))

    def _visit_in(self, scope: "scopes.Scope", node: base.ASTNode) -> Inferred:
        outer_scope = self.current_scope
        self.current_scope = scope
        try:
            return node.visit(self)
        finally:
            self.current_scope = outer_scope

    def visit_apply(self, node: base.Apply) -> Inferred:
        func_sub, func_type = node.func.visit(self)
        arg_sub, arg_type = self._visit_in(
            self.current_scope.substitute(func_sub), node.arg
        )
        result_type = self.supply.fresh()
        unify_sub = utils.unify(
            utils.substitute(func_type, arg_sub), TypeArrow(arg_type, result_type)
        )
        full_sub = utils.compose(unify_sub, utils.compose(arg_sub, func_sub))
        return full_sub, utils.substitute(result_type, unify_sub)

    def visit_function(self, node: base.Function) -> Inferred:
        param_type = self.supply.fresh()
        body_scope = self.current_scope.extend(node.param, TypeScheme(param_type, ()))
        body_sub, body_type = self._visit_in(body_scope, node.body)
        return body_sub, TypeArrow(utils.substitute(param_type, body_sub), body_type)

    def visit_let(self, node: base.Let) -> Inferred:
        value_sub, value_type = node.value.visit(self)
        value_scope = self.current_scope.substitute(value_sub)
        scheme = utils.generalise(value_scope, value_type)
        logger.debug("let %s : %r", node.target, scheme)
        body_sub, body_type = self._visit_in(
            value_scope.extend(node.target, scheme), node.body
        )
        return utils.compose(body_sub, value_sub), body_type

    def visit_name(self, node: base.Name) -> Inferred:
        scheme = self.current_scope[node.value]
        return {}, utils.instantiate(scheme, self.supply)

    def visit_scalar(self, node: base.Scalar) -> Inferred:
        return {}, SCALAR_TYPES[type(node.value)]


def _first_unused_id(scope: "scopes.Scope") -> int:
    # NOTE: New type vars have to start after every type var already
    #  used in `scope` (bound ones included) or they could clash.
    used = (
        var.value
        for _, scheme in scope
        for var in utils.find_free_vars(scheme.actual_type)
    )
    return max(used, default=-1) + 1
