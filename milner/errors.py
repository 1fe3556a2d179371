from enum import auto, Enum
from json import dumps
from textwrap import wrap
from typing import Any, Dict, TypedDict

from .log import logger
from .pprint_ import show_type

LINE_WIDTH = 87
# NOTE: For some reason, this value has to be off by one. So the line
#  width is actually `88` in this case.

wrap_text = lambda string: "\n".join(
    wrap(
        string,
        width=LINE_WIDTH,
        tabsize=4,
        drop_whitespace=False,
        replace_whitespace=False,
    )
)


class ResultTypes(Enum):
    """The different ways that an error message can be formed."""

    ALERT_MESSAGE = auto()
    JSON = auto()
    LONG_MESSAGE = auto()


class CMDErrorReasons(Enum):
    """The reasons that the exception could have been thrown."""

    FILE_NOT_FOUND = auto()
    NO_PERMISSION = auto()
    PATH_IS_FOLDER = auto()
    UNKNOWN_SAMPLE = auto()


class JSONResult(TypedDict, total=False):
    error_name: str


def to_json(error: Exception) -> str:
    """
    Report an error in JSON format.

    Parameters
    ----------
    error: Exception
        The error to be reported on.

    Returns
    -------
    str
        A JSON string containing all the error data.
    """
    return (
        dumps(error.to_json())
        if isinstance(error, MilnerError)
        else handle_other_exceptions(error, ResultTypes.JSON)
    )


def to_alert_message(error: Exception) -> str:
    """
    Report an error by formatting it as a single short line. This is
    the shorter version of the same error message as
    `to_long_message`.

    Parameters
    ----------
    error: Exception
        The error to be reported on.

    Returns
    -------
    str
        A one-line description of the error.
    """
    if isinstance(error, MilnerError):
        return error.to_alert_message()
    return handle_other_exceptions(error, ResultTypes.ALERT_MESSAGE)


def to_long_message(error: Exception) -> str:
    """
    Generate a longer explanation of the error for the user.

    Parameters
    ----------
    error: Exception
        The error to be reported on.

    Returns
    -------
    str
        A beautified string containing all the error data.
    """
    if isinstance(error, MilnerError):
        return beautify(error.to_long_message())
    return handle_other_exceptions(error, ResultTypes.LONG_MESSAGE)


def handle_other_exceptions(error: Exception, result_type: ResultTypes) -> str:
    """
    Generate a user-friendly message for exceptions outside the
    `MilnerError` hierarchy. The message should adhere to the same
    rules as the function corresponding to the `result_type` passed
    in.

    Parameters
    ----------
    error: Exception
        The exception that the message is based on.
    result_type: ResultTypes
        What rules the message should conform to.

    Returns
    -------
    str
        A user-friendly message based on the exception passed in.
    """
    logger.error(
        "Unknown error condition: %s( %s )",
        error.__class__.__name__,
        ", ".join(map(str, error.args)),
        exc_info=error,
    )
    if result_type == ResultTypes.JSON:
        return dumps(
            {
                "error_name": FatalInternalError.name,
                "actual_error": error.__class__.__name__,
            }
        )
    if result_type == ResultTypes.ALERT_MESSAGE:
        return wrap_text(
            f"Internal Error: Encountered unknown error condition: "
            f'"{type(error).__name__}".'
        )
    return beautify(
        wrap_text(
            f"Internal Error: Encountered unknown error condition: "
            f'"{error.__class__.__name__}". Please check the log file for more '
            "details."
        )
    )


def beautify(message: str) -> str:
    """
    Make an error message look good before printing it to the terminal.

    Notes
    -----
    - If `LINE_WIDTH` is less than `24`, the header is left uncentred.

    Parameters
    ----------
    message: str
        The plain error message before formatting.

    Returns
    -------
    str
        The error message after formatting.
    """
    if LINE_WIDTH < 24:
        head = "Error Encountered:"
        tail = "=" * len(head)
    else:
        head = " Error Encountered ".center(LINE_WIDTH, "=")
        tail = "=" * LINE_WIDTH
    return f"\n{head}\n\n{message}\n\n{tail}\n"


class MilnerError(Exception):
    """
    This base exception for the entire program. It should never be
    caught or thrown directly, one of its subclasses should be used
    instead.

    Methods
    -------
    to_alert_message()
        Generate a short description of the error for the user.
    to_long_message()
        Generate a longer explanation of the error for the user.
    to_json()
        Generate an error report in JSON format.
    """

    name = "error"

    def to_alert_message(self) -> str:
        """
        Generate a short description of the error for the user.

        This method prints out a shorter, more direct error message. It
        should be used for editor tooltips and one-line reports rather
        than generating a standalone error message for the user.

        Returns
        -------
        str
            The generated message.
        """
        return "An error occurred."

    def to_long_message(self) -> str:
        """
        Generate a longer explanation of the error for the user.

        If possible, the error message should have some suggestions on
        how to fix the problem.

        Returns
        -------
        str
            The final error message but without any external formatting.
        """
        return wrap_text(self.to_alert_message())

    def to_json(self) -> JSONResult:
        """
        Generate an error report in JSON format.

        In general, the JSON message should contain enough data to
        rebuild the `to_long_message` output.

        Returns
        -------
        JSONResult
            The full error report as a single `dict` object that can
            be converted into a JSON object.
        """
        return {"error_name": self.name}

    def __str__(self) -> str:
        return self.to_alert_message()


class CMDError(MilnerError):
    """
    This is an error where some part of setting up the program using
    arguments from the command line fails.
    """

    name = "command_line_error"

    def __init__(self, reason: CMDErrorReasons, subject: str = "") -> None:
        super().__init__(reason, subject)
        self.reason: CMDErrorReasons = reason
        self.subject: str = subject

    def to_json(self) -> Dict[str, Any]:  # type: ignore[override]
        return {
            "error_name": self.name,
            "specific_error": self.reason.name.lower(),
            "subject": self.subject,
        }

    def to_alert_message(self):
        return {
            CMDErrorReasons.FILE_NOT_FOUND: f'The file "{self.subject}" was not found.',
            CMDErrorReasons.NO_PERMISSION: (
                f'Unable to write to "{self.subject}" since we don\'t have the'
                " necessary permissions."
            ),
            CMDErrorReasons.PATH_IS_FOLDER: (
                f'The path "{self.subject}" is a folder instead of a file.'
            ),
            CMDErrorReasons.UNKNOWN_SAMPLE: (
                f'There is no sample called "{self.subject}".'
            ),
        }[self.reason]

    def to_long_message(self):
        message = {
            CMDErrorReasons.FILE_NOT_FOUND: (
                f'The file "{self.subject}" could not be found, please check if the'
                " path given is correct and if its folder still exists."
            ),
            CMDErrorReasons.NO_PERMISSION: (
                f'We were unable to open the file "{self.subject}" because we'
                " do not have the necessary permissions. Please grant write"
                " permissions then try again."
            ),
            CMDErrorReasons.PATH_IS_FOLDER: (
                f'We were unable to open the file at "{self.subject}" because it is'
                " actually a folder rather than a file."
            ),
            CMDErrorReasons.UNKNOWN_SAMPLE: (
                f'There is no sample called "{self.subject}". Use `--list` to see'
                " the names of all the samples available."
            ),
        }[self.reason]
        return wrap_text(message)


class FatalInternalError(MilnerError):
    """
    This is an error where the program reaches an illegal state, and
    the best way to fix it is to restart.
    """

    name = "internal_error"

    def to_alert_message(self):
        return "A fatal error occurred in the type checker."

    def to_long_message(self):
        return wrap_text(
            "Milner has stopped running due to a fatal error in the type checker. "
            "For more information, check the log file."
        )


class UndefinedNameError(MilnerError):
    """
    This is an error where the program tries to refer to a name that
    has not been defined.
    """

    name = "undefined_name"

    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value: str = value

    def to_json(self) -> Dict[str, Any]:  # type: ignore[override]
        return {"error_name": self.name, "value": self.value}

    def to_alert_message(self):
        return f'The name "{self.value}" has not been defined.'

    def to_long_message(self):
        return wrap_text(
            f'The name "{self.value}" is being used but it has not been defined. '
            "Either bind it with a `let` or a function parameter around this "
            "expression, or add it to the starting scope."
        )


class UnificationError(MilnerError):
    """
    The base for the errors raised when the type inferer can't make 2
    types equal. It should not be thrown directly.
    """

    name = "unification_error"


class CircularTypeError(UnificationError):
    """
    This is an error where 2 types are supposed to be unified but one
    type (`inner`) occurs inside the other (`outer`), leading to an
    infinitely recursive substitution.
    """

    name = "circular_type_error"

    def __init__(self, inner, outer) -> None:
        super().__init__(inner, outer)
        self.inner = inner
        self.outer = outer

    def _show(self):
        names: dict = {}
        return show_type(self.inner, names=names), show_type(self.outer, names=names)

    def to_json(self) -> Dict[str, Any]:  # type: ignore[override]
        inner, outer = self._show()
        return {"error_name": self.name, "inner": inner, "outer": outer}

    def to_alert_message(self):
        inner, outer = self._show()
        return f"Cannot unify the types {inner} and {outer} because they are circular."

    def to_long_message(self):
        inner, outer = self._show()
        return wrap_text(
            "These 2 types are infinitely recursive so they cannot be inferred. They "
            f"are recursive because `{inner}` was found inside `{outer}`. This "
            "usually means that a value is being applied to itself."
        )


class TypeMismatchError(UnificationError):
    """
    This error is caused by the type inferer being unable to unify the
    two sides of a type equation.
    """

    name = "type_mismatch"

    def __init__(self, left, right) -> None:
        super().__init__(left, right)
        self.left = left
        self.right = right

    def _show(self):
        names: dict = {}
        return show_type(self.left, names=names), show_type(self.right, names=names)

    def to_json(self) -> Dict[str, Any]:  # type: ignore[override]
        left, right = self._show()
        return {
            "error_name": self.name,
            "actual_type": left,
            "expected_type": right,
        }

    def to_alert_message(self):
        left, right = self._show()
        return f"Cannot unify {left} with {right}."

    def to_long_message(self):
        left, right = self._show()
        return (
            "A value has an unexpected type. It has the type\n\n"
            f"    {left}\n\n"
            "but the type is supposed to be\n\n"
            f"    {right}"
        )
