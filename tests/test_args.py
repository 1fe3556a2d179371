# pylint: disable=C0116, W0612
from pathlib import Path

from pytest import mark, raises

from context import args, errors
from utils import FakeNamespace


@mark.cmd
@mark.parametrize(
    "cmd_args,expected",
    (
        ((), {}),
        (("-?",), {"show_help": True}),
        (("--version",), {"show_version": True}),
        (("identity", "compose"), {"samples": ("identity", "compose")}),
        (("--list", "--no-builtins"), {"list_samples": True, "use_builtins": False}),
        (("-r", "json"), {"report_format": "json"}),
        (
            ("--log-file", "out.log", "--log-level", "debug"),
            {"log_file": Path("out.log"), "log_level": "DEBUG"},
        ),
    ),
)
def test_build_config(cmd_args, expected):
    namespace = FakeNamespace()
    args.parser.parse_args(args=cmd_args, namespace=namespace)
    config = args.build_config(namespace)
    defaults = {
        "samples": (),
        "list_samples": False,
        "use_builtins": True,
        "report_format": "short",
        "out_file": "stdout",
        "log_file": None,
        "log_level": None,
        "show_help": False,
        "show_version": False,
    }

    assert callable(config.report_error)
    assert callable(config.writer)
    for key, value in {**defaults, **expected}.items():
        assert value == getattr(config, key)


@mark.cmd
@mark.parametrize(
    "report_format,reporter",
    (
        ("json", errors.to_json),
        ("long", errors.to_long_message),
        ("short", errors.to_alert_message),
    ),
)
def test_build_config_picks_reporter(report_format, reporter):
    namespace = FakeNamespace()
    args.parser.parse_args(args=("-r", report_format), namespace=namespace)
    assert args.build_config(namespace).report_error is reporter


@mark.cmd
def test_get_writer_with_file(tmp_path):
    out_file = tmp_path / "result.txt"
    write = args.get_writer(str(out_file))
    write("first\n")
    write("second\n")
    assert out_file.read_text(encoding="utf-8") == "first\nsecond\n"


@mark.cmd
def test_get_writer_with_folder(tmp_path):
    with raises(errors.CMDError) as info:
        args.get_writer(str(tmp_path))

    assert info.value.reason == errors.CMDErrorReasons.PATH_IS_FOLDER


@mark.cmd
def test_get_writer_with_missing_folder(tmp_path):
    with raises(errors.CMDError) as info:
        args.get_writer(str(tmp_path / "missing" / "result.txt"))

    assert info.value.reason == errors.CMDErrorReasons.FILE_NOT_FOUND
