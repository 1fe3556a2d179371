from abc import ABC, abstractmethod
from typing import Iterable, Union

ValidScalarTypes = Union[bool, int]


class ASTNode(ABC):
    """
    The base of all the nodes used in the expression tree.

    Notes
    -----
    - Nodes are built once (usually by an external parser) and never
      changed afterwards. Every pass over the tree produces new values
      instead of editing the nodes in place.
    """

    __slots__ = ()

    @abstractmethod
    def visit(self, visitor):
        """Run `visitor` on this node by selecting the correct node."""

    def __bool__(self) -> bool:
        return True


class Apply(ASTNode):
    __slots__ = ("arg", "func")

    def __init__(self, func: ASTNode, arg: ASTNode) -> None:
        self.func: ASTNode = func
        self.arg: ASTNode = arg

    @classmethod
    def curried(cls, func: ASTNode, *args: ASTNode) -> ASTNode:
        """
        Apply `func` to several arguments, one at a time.

        Parameters
        ----------
        func: ASTNode
            The function being applied.
        *args: ASTNode
            The arguments, in order. Passing none of them returns
            `func` unchanged.

        Returns
        -------
        ASTNode
            The nested `Apply` nodes.
        """
        result = func
        for arg in args:
            result = cls(result, arg)
        return result

    def visit(self, visitor):
        return visitor.visit_apply(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Apply):
            return self.func == other.func and self.arg == other.arg
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Apply, self.func, self.arg))


class Function(ASTNode):
    __slots__ = ("body", "param")

    def __init__(self, param: str, body: ASTNode) -> None:
        self.param: str = param
        self.body: ASTNode = body

    @classmethod
    def curried(cls, params: Iterable[str], body: ASTNode) -> ASTNode:
        """Build a chain of single-parameter functions around `body`."""
        result = body
        for param in reversed(tuple(params)):
            result = cls(param, result)
        return result

    def visit(self, visitor):
        return visitor.visit_function(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Function):
            return self.param == other.param and self.body == other.body
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Function, self.param, self.body))


class Let(ASTNode):
    """
    A non-recursive binding. `target` is only visible inside `body`, so
    `value` can't refer to it.
    """

    __slots__ = ("body", "target", "value")

    def __init__(self, target: str, value: ASTNode, body: ASTNode) -> None:
        self.target: str = target
        self.value: ASTNode = value
        self.body: ASTNode = body

    def visit(self, visitor):
        return visitor.visit_let(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Let):
            return (
                self.target == other.target
                and self.value == other.value
                and self.body == other.body
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Let, self.target, self.value, self.body))


class Name(ASTNode):
    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value: str = value

    def visit(self, visitor):
        return visitor.visit_name(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Name):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


class Scalar(ASTNode):
    __slots__ = ("value",)

    def __init__(self, value: ValidScalarTypes) -> None:
        if type(value) not in (bool, int):
            raise TypeError(
                f"`Scalar` only accepts `int` and `bool` values, not {type(value)}."
            )
        self.value: ValidScalarTypes = value

    def visit(self, visitor):
        return visitor.visit_scalar(self)

    def __eq__(self, other) -> bool:
        if isinstance(other, Scalar):
            return type(self.value) is type(other.value) and self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))
