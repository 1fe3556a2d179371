# pylint: disable=R0903, C0115
from abc import ABC, abstractmethod
from typing import AbstractSet, Iterable


class Type(ABC):
    """
    This is the base class for the program's representation of types in
    the type system.

    Warnings
    --------
    - This class should not be used directly, instead use one of its
      subclasses.
    """

    __slots__ = ()

    @abstractmethod
    def __eq__(self, other) -> bool:
        ...

    @abstractmethod
    def __hash__(self) -> int:
        ...

    @abstractmethod
    def __contains__(self, value) -> bool:
        ...


class TypeArrow(Type):
    __slots__ = ("left", "right")

    def __init__(self, left: Type, right: Type) -> None:
        self.left: Type = left
        self.right: Type = right

    @classmethod
    def curried(cls, *types: Type) -> Type:
        """
        Build a function type out of several types where the last one
        is the return type, so `curried(a, b, c)` is `a -> (b -> c)`.
        """
        if not types:
            raise ValueError("A function type needs at least one type.")

        *params, result = types
        for param in reversed(params):
            result = cls(param, result)
        return result

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, TypeArrow)
            and self.left == other.left
            and self.right == other.right
        )

    def __hash__(self) -> int:
        return hash((TypeArrow, self.left, self.right))

    def __contains__(self, value) -> bool:
        return value in self.left or value in self.right

    def __repr__(self) -> str:
        return f"({self.left!r} -> {self.right!r})"


class TypeName(Type):
    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value: str = value

    def __eq__(self, other) -> bool:
        return isinstance(other, TypeName) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __contains__(self, value) -> bool:
        return False

    def __repr__(self) -> str:
        return self.value


class TypeVar(Type):
    """
    A type that hasn't been worked out yet. Two type vars are the same
    only if they have the same `value`.
    """

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value: int = value

    def __eq__(self, other) -> bool:
        return isinstance(other, TypeVar) and self.value == other.value

    def __hash__(self) -> int:
        return hash((TypeVar, self.value))

    def __contains__(self, value) -> bool:
        return isinstance(value, TypeVar) and self.value == value.value

    def __repr__(self) -> str:
        return f"@{self.value}"


class TypeScheme(Type):
    """
    A type that has been closed over some of its type vars, so
    `TypeScheme(a -> a, {a})` stands for `∀ a • a -> a`.
    """

    __slots__ = ("actual_type", "bound_types")

    def __init__(self, actual_type: Type, bound_types: Iterable[TypeVar]) -> None:
        self.actual_type: Type = actual_type
        self.bound_types: AbstractSet[TypeVar] = frozenset(bound_types)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, TypeScheme)
            and self.actual_type == other.actual_type
            and self.bound_types == other.bound_types
        )

    def __hash__(self) -> int:
        return hash((TypeScheme, self.actual_type, self.bound_types))

    def __contains__(self, value) -> bool:
        return value not in self.bound_types and value in self.actual_type

    def __repr__(self) -> str:
        bound = ", ".join(map(repr, sorted(self.bound_types, key=_var_key)))
        return f"{bound} . {self.actual_type!r}"


class TypeVarSupply:
    """
    A source of brand new type vars.

    Every inference run gets its own supply so the numbering always
    starts from `0` and separate runs can never hand out clashing vars.

    Attributes
    ----------
    n_type_vars: int
        How many type vars have been handed out so far.
    """

    __slots__ = ("n_type_vars",)

    def __init__(self, start: int = 0) -> None:
        self.n_type_vars: int = start

    def fresh(self) -> TypeVar:
        """Make a type var that hasn't been used before."""
        type_var = TypeVar(self.n_type_vars)
        self.n_type_vars += 1
        return type_var


def _var_key(type_var: TypeVar) -> int:
    return type_var.value
