# pylint: disable=C0116, W0612
from dataclasses import replace
from json import loads
from typing import List

from pytest import mark, raises

from context import args, main, samples
from utils import FakeNamespace

EXPECTED_SHORT = {
    "identity": "identity : ∀ a • a -> a",
    "k_combinator": "k_combinator : ∀ a, b • a -> b -> a",
    "compose": "compose : ∀ a, b, c • (a -> b) -> (c -> a) -> c -> b",
    "let_polymorphism": "let_polymorphism : Int",
    "polymorphic_reuse": "polymorphic_reuse : Int",
    "increment": "increment : Int",
    "monomorphic_param": "monomorphic_param : ∀ a • (Int -> a) -> a",
    "mismatch": "mismatch ! Cannot unify Bool with Int -> a.",
    "self_application": (
        "self_application ! Cannot unify the types a and a -> b because they are "
        "circular."
    ),
    "unbound": 'unbound ! The name "x" has not been defined.',
}


def _make_config(*cmd_args: str):
    output: List[str] = []
    namespace = FakeNamespace()
    args.parser.parse_args(args=cmd_args, namespace=namespace)
    config = args.build_config(namespace)
    return replace(config, writers=(config.report_error, output.append)), output


@mark.cmd
@mark.integration
def test_type_samples_all():
    config, output = _make_config()
    status = main.type_samples(config)
    assert status == 1
    assert "".join(output).splitlines() == list(EXPECTED_SHORT.values())


@mark.cmd
@mark.integration
@mark.parametrize("name", ("identity", "compose", "increment", "polymorphic_reuse"))
def test_type_samples_single(name):
    config, output = _make_config(name)
    assert main.type_samples(config) == 0
    assert output == [f"{EXPECTED_SHORT[name]}\n"]


@mark.cmd
@mark.integration
def test_type_samples_without_builtins():
    config, output = _make_config("--no-builtins", "increment")
    assert main.type_samples(config) == 1
    assert output == ['increment ! The name "add" has not been defined.\n']


@mark.cmd
@mark.integration
def test_type_samples_as_json():
    config, output = _make_config("-r", "json", "identity", "mismatch")
    assert main.type_samples(config) == 1
    success, failure = map(loads, output)
    assert success == {"sample": "identity", "type": "∀ a • a -> a"}
    assert failure["sample"] == "mismatch"
    assert failure["error"]["error_name"] == "type_mismatch"
    assert failure["error"]["actual_type"] == "Bool"


@mark.cmd
@mark.integration
def test_type_samples_long_report():
    config, output = _make_config("-r", "long", "unbound")
    assert main.type_samples(config) == 1
    assert output[0].startswith("unbound !\n")
    assert "Error Encountered" in output[0]


@mark.cmd
def test_type_samples_with_unknown_sample():
    config, output = _make_config("identity", "nope")
    assert main.type_samples(config) == 64
    assert output == ['There is no sample called "nope".\n']


@mark.cmd
def test_list_samples():
    config, output = _make_config("--list")
    assert main.list_samples(config) == 0
    assert len(output) == len(samples.SAMPLES)
    assert output[0] == "identity = \\x -> x\n"


@mark.cmd
def test_get_version():
    status, version = main.get_version()
    assert status in (0, 1)
    assert isinstance(version, str)


@mark.cmd
def test_main_writes_to_out_file(monkeypatch, tmp_path):
    out_file = tmp_path / "result.txt"
    monkeypatch.setattr("sys.argv", ["milner", "-o", str(out_file), "k_combinator"])
    with raises(SystemExit) as info:
        main.main()

    assert info.value.code == 0
    assert out_file.read_text(encoding="utf-8") == f"{EXPECTED_SHORT['k_combinator']}\n"


@mark.cmd
def test_main_with_unwritable_out_file(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.argv", ["milner", "-o", str(tmp_path), "identity"])
    with raises(SystemExit) as info:
        main.main()

    assert info.value.code == 66
