from string import ascii_lowercase
from typing import MutableMapping, Optional

from .asts import base, visitor
from .asts.types_ import Type, TypeArrow, TypeName, TypeScheme, TypeVar

VarNames = MutableMapping[TypeVar, str]


def show_type_var(type_var: TypeVar, names: VarNames) -> str:
    """
    Represent a type var as a string (preferably an alphabetic letter).

    The letters are handed out in the order that the type vars are
    first shown, so `@7 -> @3` comes out as `a -> b`. Once all 26
    letters are used, they get numbered suffixes (`a1`, `b1`, ...).

    Parameters
    ----------
    type_var: TypeVar
        The type var to be represented.
    names: VarNames
        The names that have already been handed out. It is updated in
        place when `type_var` hasn't been named yet.

    Returns
    -------
    str
        The string representation of the type var.
    """
    if type_var not in names:
        index = len(names)
        round_, position = divmod(index, len(ascii_lowercase))
        suffix = str(round_) if round_ else ""
        names[type_var] = f"{ascii_lowercase[position]}{suffix}"
    return names[type_var]


def show_type(
    type_: Type, bracket: bool = False, names: Optional[VarNames] = None
) -> str:
    """
    Turn `type_` into a string representation.

    Parameters
    ----------
    type_: Type
        The type to turn into a string.
    bracket: bool = False
        Whether to parenthesise function type and type scheme
        representations.
    names: Optional[VarNames] = None
        The type var names to use. Pass the same mapping to several
        calls when their results will be shown together so that
        different type vars never get the same name.

    Returns
    -------
    str
        The resulting type representation.
    """
    names = {} if names is None else names
    if isinstance(type_, TypeArrow):
        left = show_type(type_.left, True, names)
        result = f"{left} -> {show_type(type_.right, False, names)}"
        return f"({result})" if bracket else result
    if isinstance(type_, TypeName):
        return type_.value
    if isinstance(type_, TypeScheme):
        if not type_.bound_types:
            return show_type(type_.actual_type, bracket, names)
        body = show_type(type_.actual_type, False, names)
        bound = [var for var in names if var in type_.bound_types]
        result = f"∀ {', '.join(names[var] for var in bound)} • {body}"
        return f"({result})" if bracket else result
    if isinstance(type_, TypeVar):
        return show_type_var(type_, names)
    raise TypeError(f"{type(type_)} is an invalid subtype of Type.")


class ASTPrinter(visitor.BaseASTVisitor[str]):
    """This visitor produces a string version of the entire AST."""

    def visit_apply(self, node: base.Apply) -> str:
        func = node.func.visit(self)
        arg = node.arg.visit(self)
        if isinstance(node.func, (base.Function, base.Let)):
            func = f"({func})"
        if isinstance(node.arg, (base.Apply, base.Function, base.Let)):
            arg = f"({arg})"
        return f"{func} {arg}"

    def visit_function(self, node: base.Function) -> str:
        return f"\\{node.param} -> {node.body.visit(self)}"

    def visit_let(self, node: base.Let) -> str:
        return (
            f"let {node.target} = {node.value.visit(self)} in {node.body.visit(self)}"
        )

    def visit_name(self, node: base.Name) -> str:
        return node.value

    def visit_scalar(self, node: base.Scalar) -> str:
        return str(node.value)


def show_expr(node: base.ASTNode) -> str:
    """Turn an expression tree into a string."""
    return ASTPrinter().run(node)
