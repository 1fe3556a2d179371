# pylint: disable=C0116, W0612
from json import loads

from pytest import mark

from context import errors
from utils import bool_type, func, int_type, var

sample_errors = (
    errors.UndefinedNameError("var"),
    errors.CircularTypeError(var(3), func(var(3), bool_type)),
    errors.TypeMismatchError(int_type, func(int_type, var(0))),
    errors.CMDError(errors.CMDErrorReasons.UNKNOWN_SAMPLE, "fake"),
    errors.CMDError(errors.CMDErrorReasons.NO_PERMISSION, "out.txt"),
    errors.FatalInternalError(),
)


@mark.error_handling
@mark.parametrize("exception", sample_errors)
def test_milner_error_to_json(exception):
    json = loads(errors.to_json(exception))
    assert json["error_name"] == exception.name


@mark.error_handling
@mark.parametrize("exception", sample_errors)
def test_milner_error_to_alert_message(exception):
    message = errors.to_alert_message(exception)
    assert isinstance(message, str)
    assert "\n" not in message
    assert message == str(exception)


@mark.error_handling
@mark.parametrize("exception", sample_errors)
def test_milner_error_to_long_message(exception):
    message = errors.to_long_message(exception)
    assert isinstance(message, str)
    assert "Error Encountered" in message


@mark.error_handling
def test_type_mismatch_error_message():
    error = errors.TypeMismatchError(bool_type, func(int_type, var(7)))
    assert str(error) == "Cannot unify Bool with Int -> a."
    assert error.to_json()["expected_type"] == "Int -> a"


@mark.error_handling
def test_circular_type_error_names_type_vars_consistently():
    error = errors.CircularTypeError(var(9), func(var(4), var(9)))
    assert error.to_json()["inner"] == "a"
    assert error.to_json()["outer"] == "b -> a"


@mark.error_handling
def test_unification_errors_share_a_base():
    assert issubclass(errors.TypeMismatchError, errors.UnificationError)
    assert issubclass(errors.CircularTypeError, errors.UnificationError)
    assert not issubclass(errors.UndefinedNameError, errors.UnificationError)


@mark.error_handling
@mark.parametrize(
    "handler",
    (errors.to_json, errors.to_alert_message, errors.to_long_message),
)
def test_handle_other_exceptions(handler):
    message = handler(KeyError("oops"))
    assert "KeyError" in message
