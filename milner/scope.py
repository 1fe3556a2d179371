from typing import Dict, Iterator, Mapping, Optional, Set, Tuple

from .asts.types_ import TypeArrow, TypeName, TypeScheme, TypeVar
from .errors import UndefinedNameError
from .type_inference.utils import find_free_vars, Substitution, substitute


class Scope:
    """
    A persistent mapping of all defined names to their type schemes.

    Every scope is a frame of bindings that points at the scope it was
    built from. Extending a scope makes a new frame on top of the old
    one instead of changing it, so the outer scopes (and anything else
    holding on to them) never see the new bindings.

    Attributes
    ----------
    _data: Mapping[str, TypeScheme]
        The bindings made in this frame.
    _parent: Optional[Scope]
        The scope that this one was built on top of, which is asked for
        any names that aren't in `_data`.
    """

    __slots__ = ("_data", "_parent")

    def __init__(self, parent: Optional["Scope"] = None) -> None:
        self._data: Mapping[str, TypeScheme] = {}
        self._parent: Optional[Scope] = parent

    @classmethod
    def from_dict(
        cls, data: Mapping[str, TypeScheme], parent: Optional["Scope"] = None
    ) -> "Scope":
        """Create a new scope based on what is stored in a dict."""
        new_scope = cls(parent)
        new_scope._data = dict(data)
        return new_scope

    def extend(self, name: str, scheme: TypeScheme) -> "Scope":
        """
        Make a new scope where `name` is bound to `scheme`.

        Parameters
        ----------
        name: str
            The name to bind. If it is already bound, the new binding
            shadows the old one inside the new scope only.
        scheme: TypeScheme
            The type scheme of `name`.

        Returns
        -------
        Scope
            The new scope. `self` is left exactly as it was.
        """
        return Scope.from_dict({name: scheme}, self)

    def lookup(self, name: str) -> Optional[TypeScheme]:
        """Get the type scheme bound to `name` or `None` if there isn't one."""
        current: Optional[Scope] = self
        while current is not None:
            if name in current._data:
                return current._data[name]
            current = current._parent
        return None

    def depth(self, name: str) -> int:
        """
        Check how deep a name is in the hierarchy of scopes.

        Parameters
        ----------
        name: str
            The name being searched for.

        Returns
        -------
        int
             How deep `name` is in the hierarchy. It will be `0` if
             `name` is in this object, `1` if it is in the direct
             parent, etc. If `name` isn't there at all, it will be
             `-1`.
        """
        depth = 0
        current: Optional[Scope] = self
        while current is not None:
            if name in current._data:
                return depth
            current = current._parent
            depth += 1
        return -1

    def free_vars(self) -> Set[TypeVar]:
        """
        Find all the type vars that are free in at least one of the
        visible bindings.
        """
        result: Set[TypeVar] = set()
        for _, scheme in self:
            result |= find_free_vars(scheme)
        return result

    def substitute(self, substitution: Substitution) -> "Scope":
        """
        Apply `substitution` to every visible binding.

        Parameters
        ----------
        substitution: Substitution
            The replacements for the free type vars in the scope. The
            type vars bound by each scheme are left alone.

        Returns
        -------
        Scope
            A new, single-frame scope with the updated bindings. If
            `substitution` is empty, `self` is returned.
        """
        if not substitution:
            return self
        return Scope.from_dict(
            {name: substitute(scheme, substitution) for name, scheme in self}
        )

    def __bool__(self) -> bool:
        return bool(self._data) or (self._parent is not None and bool(self._parent))

    def __contains__(self, name: str) -> bool:
        return self.depth(name) != -1

    def __getitem__(self, name: str) -> TypeScheme:
        scheme = self.lookup(name)
        if scheme is None:
            raise UndefinedNameError(name)
        return scheme

    def __iter__(self) -> Iterator[Tuple[str, TypeScheme]]:
        seen: Set[str] = set()
        current: Optional[Scope] = self
        while current is not None:
            for key, value in current._data.items():
                if key not in seen:
                    seen.add(key)
                    yield (key, value)
            current = current._parent

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        bindings = ", ".join(f"{name}: {scheme!r}" for name, scheme in self)
        return f"Scope({{{bindings}}})"


_int = TypeName("Int")
_bool = TypeName("Bool")
_a = TypeVar(0)
_b = TypeVar(1)

_builtins: Dict[str, TypeScheme] = {
    "add": TypeScheme(TypeArrow.curried(_int, _int, _int), ()),
    "sub": TypeScheme(TypeArrow.curried(_int, _int, _int), ()),
    "mul": TypeScheme(TypeArrow.curried(_int, _int, _int), ()),
    "div": TypeScheme(TypeArrow.curried(_int, _int, _int), ()),
    "lt": TypeScheme(TypeArrow.curried(_int, _int, _bool), ()),
    "gt": TypeScheme(TypeArrow.curried(_int, _int, _bool), ()),
    "eq": TypeScheme(TypeArrow.curried(_a, _a, _bool), {_a}),
    "and": TypeScheme(TypeArrow.curried(_bool, _bool, _bool), ()),
    "or": TypeScheme(TypeArrow.curried(_bool, _bool, _bool), ()),
    "not": TypeScheme(TypeArrow(_bool, _bool), ()),
    "if": TypeScheme(TypeArrow.curried(_bool, _a, _a, _a), {_a}),
    "id": TypeScheme(TypeArrow(_a, _a), {_a}),
    "const": TypeScheme(TypeArrow.curried(_a, _b, _a), {_a, _b}),
}

BUILTIN_TYPES: Scope = Scope.from_dict(_builtins)
