# pylint: disable=W0612
from context import pprint_, types

types.Type.__str__ = lambda type_: pprint_.show_type(type_, True)

int_type = types.TypeName("Int")
bool_type = types.TypeName("Bool")


def var(value: int) -> types.TypeVar:
    """Shorthand for making a type var in the test cases."""
    return types.TypeVar(value)


def func(*args: types.Type) -> types.Type:
    """Shorthand for making a (curried) function type in the test cases."""
    return types.TypeArrow.curried(*args)


class FakeNamespace:
    """
    This class is a dummy object for mocking references to attributes
    in the `argparse.namespace` class.
    """
