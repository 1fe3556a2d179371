from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from pathlib import Path
from sys import stderr, stdout
from typing import Callable, Optional, Tuple, Union

from .errors import (
    CMDError,
    CMDErrorReasons,
    to_alert_message,
    to_json,
    to_long_message,
)

Reporter = Callable[[Exception], str]
Writer = Callable[[str], Optional[int]]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(eq=False, frozen=True, repr=False)
class ConfigData:
    """
    All of the options that the user can pass in at the command line.
    """

    samples: Tuple[str, ...]
    list_samples: bool
    use_builtins: bool
    report_format: str
    out_file: Union[str, Path]
    log_file: Optional[Path]
    log_level: Optional[str]
    show_help: bool
    show_version: bool
    writers: Tuple[Reporter, Writer]
    # NOTE: I have to package them as a pair because otherwise mypy
    #  will think that they are normal methods on the object.

    @property
    def report_error(self) -> Reporter:
        return self.writers[0]

    @property
    def writer(self) -> Writer:
        return self.writers[1]


def get_writer(file_path: Optional[str]) -> Writer:
    """
    Use the given file path to generate a writer function for printing
    messages to the user.

    Parameters
    ----------
    file_path: Optional[str]
        The path to the file or stream where messages to the user are
        supposed to go. If it's `None`, then `stdout.write` will be
        returned.

    Raises
    ------
    errors.CMDError
        In case an actual file path is given and it can't be written
        to.

    Returns
    -------
    Callable[[str], Optional[int]]
        A function which takes a `str` message and (probably) does some
        IO with it and returns either an `int` status or `None`.
    """
    if file_path is None or file_path == "stdout":
        return stdout.write
    if file_path == "stderr":
        return stderr.write

    path = Path(file_path)
    if path.is_dir():
        raise CMDError(CMDErrorReasons.PATH_IS_FOLDER, file_path)
    try:
        path.write_text("")
    except FileNotFoundError as error:
        raise CMDError(CMDErrorReasons.FILE_NOT_FOUND, file_path) from error
    except PermissionError as error:
        raise CMDError(CMDErrorReasons.NO_PERMISSION, file_path) from error

    def write(text: str) -> int:
        with path.open("a", encoding="utf-8") as file:
            return file.write(text)

    return write


def build_config(cmd_args: Namespace) -> ConfigData:
    """
    Convert the argparse namespace into a more usable format.

    Parameters
    ----------
    cmd_args: Namespace
        The arguments directly from argparse.

    Raises
    ------
    errors.CMDError
        In case the output file can't be written to.

    Returns
    -------
    ConfigData
        The config data that is actually needed.
    """
    reporter: Reporter = {
        "json": to_json,
        "short": to_alert_message,
        "long": to_long_message,
    }[cmd_args.report_format]
    out_file = (
        Path(cmd_args.out) if cmd_args.out not in ("stdout", "stderr") else cmd_args.out
    )
    return ConfigData(
        tuple(cmd_args.samples),
        cmd_args.list_samples,
        cmd_args.use_builtins,
        cmd_args.report_format,
        out_file,
        None if cmd_args.log_file is None else Path(cmd_args.log_file),
        cmd_args.log_level,
        cmd_args.show_help,
        cmd_args.show_version,
        (reporter, get_writer(cmd_args.out)),
    )


parser = ArgumentParser(allow_abbrev=False, add_help=False, prog="milner")
parser.add_argument(
    "-?",
    "-h",
    "--help",
    action="store_true",
    dest="show_help",
    help="Show this help message and quit.",
)
parser.add_argument(
    "-v",
    "--version",
    action="store_true",
    dest="show_version",
    help="Show the program version number and quit.",
)
parser.add_argument(
    "samples",
    nargs="*",
    help="The names of the sample expressions to type. Leave out to type them all.",
)
parser.add_argument(
    "-l",
    "--list",
    action="store_true",
    dest="list_samples",
    help="Show the names of the sample expressions and quit.",
)
parser.add_argument(
    "--no-builtins",
    action="store_false",
    dest="use_builtins",
    help="Type the samples in an empty scope instead of the builtin one.",
)
parser.add_argument(
    "-o",
    "--out",
    action="store",
    default="stdout",
    help=(
        "Where to write the results. You can also pass in"
        ' "stdout" and "stderr".'
    ),
)
parser.add_argument(
    "-r",
    "--report-fmt",
    "--report-format",
    action="store",
    choices=("json", "long", "short"),
    default="short",
    dest="report_format",
    help="The format of the results and of any error message that may arise.",
)
parser.add_argument(
    "--log-file",
    action="store",
    default=None,
    help="Where to write the log. The default is `milner.log`.",
)
parser.add_argument(
    "--log-level",
    action="store",
    choices=LOG_LEVELS,
    default=None,
    type=str.upper,
    help="How much detail to write to the log.",
)
