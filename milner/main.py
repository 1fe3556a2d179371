from importlib.metadata import PackageNotFoundError, version
from json import dumps
from sys import exit as sys_exit, stderr
from typing import NoReturn, Tuple

from . import log
from .args import build_config, ConfigData, parser
from .errors import CMDError, CMDErrorReasons, MilnerError, to_alert_message
from .log import logger
from .pprint_ import show_expr, show_type
from .samples import SAMPLES
from .scope import BUILTIN_TYPES, Scope
from .type_inference import infer_scheme


def get_version() -> Tuple[int, str]:
    """Get the exit status along with the version of the installed package."""
    try:
        return 0, version("milner")
    except PackageNotFoundError:
        logger.error("Unable to find the installed version of the package.")
        return 1, "<unknown>"


def list_samples(config: ConfigData) -> int:
    """Write out the name and source of each sample expression."""
    for name, expr in SAMPLES.items():
        if config.report_format == "json":
            config.writer(dumps({"sample": name, "source": show_expr(expr)}) + "\n")
        else:
            config.writer(f"{name} = {show_expr(expr)}\n")
    return 0


def type_samples(config: ConfigData) -> int:
    """
    Run type inference on the samples chosen in `config` and write out
    the results.

    Parameters
    ----------
    config: ConfigData
        Command line options that can change how the function runs.

    Returns
    -------
    int
        The program exit code.
    """
    names = config.samples or tuple(SAMPLES)
    unknown = [name for name in names if name not in SAMPLES]
    if unknown:
        logger.error("Unknown samples requested: %s", ", ".join(unknown))
        error = CMDError(CMDErrorReasons.UNKNOWN_SAMPLE, unknown[0])
        config.writer(f"{config.report_error(error)}\n")
        return 64

    scope = BUILTIN_TYPES if config.use_builtins else Scope()
    status = 0
    for name in names:
        logger.info("Typing the sample: %s", name)
        try:
            result = show_type(infer_scheme(SAMPLES[name], scope))
        except MilnerError as error:
            status = 1
            config.writer(_format_failure(name, error, config))
        else:
            config.writer(_format_success(name, result, config))
    return status


def _format_success(name: str, type_: str, config: ConfigData) -> str:
    if config.report_format == "json":
        return dumps({"sample": name, "type": type_}) + "\n"
    return f"{name} : {type_}\n"


def _format_failure(name: str, error: MilnerError, config: ConfigData) -> str:
    report = config.report_error(error)
    if config.report_format == "json":
        return f'{{"sample": {dumps(name)}, "error": {report}}}\n'
    if config.report_format == "short":
        return f"{name} ! {report}\n"
    return f"{name} !{report}"


def main() -> NoReturn:
    try:
        config = build_config(parser.parse_args())
    except CMDError as error:
        stderr.write(to_alert_message(error) + "\n")
        sys_exit(66)

    log.configure(config.log_file, config.log_level)
    if config.show_help:
        logger.info("Printing the help message.")
        config.writer(parser.format_help())
        sys_exit(0)
    elif config.show_version:
        logger.info("Printing the version.")
        status, version_ = get_version()
        config.writer(f"Milner Version {version_}\n")
        sys_exit(status)
    elif config.list_samples:
        sys_exit(list_samples(config))
    sys_exit(type_samples(config))
