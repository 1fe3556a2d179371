from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from . import base

_ReturnType = TypeVar("_ReturnType", covariant=True)


class BaseASTVisitor(Generic[_ReturnType], ABC):
    """
    The base class for the visitors that walk over the expression nodes
    kept in `asts.base`. Every node kind has its own abstract method so
    a subclass that forgets one can't be instantiated.
    """

    def run(self, node: base.ASTNode) -> _ReturnType:
        """
        Run this visitor on the entire tree as if `node` is the root of
        the entire AST.

        Parameters
        ----------
        node: base.ASTNode
            The (assumed) root node for the entire AST.
        """
        return node.visit(self)

    @abstractmethod
    def visit_apply(self, node: base.Apply) -> _ReturnType:
        ...

    @abstractmethod
    def visit_function(self, node: base.Function) -> _ReturnType:
        ...

    @abstractmethod
    def visit_let(self, node: base.Let) -> _ReturnType:
        ...

    @abstractmethod
    def visit_name(self, node: base.Name) -> _ReturnType:
        ...

    @abstractmethod
    def visit_scalar(self, node: base.Scalar) -> _ReturnType:
        ...
