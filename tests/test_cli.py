import io
import json

import pytest

from kv_form.__main__ import main


def _run(capsys: pytest.CaptureFixture[str], *args: str) -> str:
    main(list(args))
    return capsys.readouterr().out.rstrip("\n")


def test_encode_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, "encode", '{"a b": "c&d", "n": 1}') == "a%20b=c%26d&n=1"


def test_encode_command_custom_delimiters(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, "encode", "--item-delim", ";", "--kv-delim", ":", '{"a": 1, "b": 2}') == "a:1;b:2"


def test_decode_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert json.loads(_run(capsys, "decode", "a=1&b")) == {"a": "1", "b": ""}


def test_collapse_and_uncollapse_commands(capsys: pytest.CaptureFixture[str]) -> None:
    collapsed = json.loads(_run(capsys, "collapse", "--prefix", "cfg", '{"a": {"b": 1}}'))
    assert collapsed == {"cfg.a.b": 1}
    assert json.loads(_run(capsys, "uncollapse", '{"a.b": 1, "c": [1]}')) == {"a": {"b": 1}, "c": [1]}


def test_reads_stdin_when_input_omitted(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x=%41\n"))
    assert json.loads(_run(capsys, "decode")) == {"x": "A"}

    monkeypatch.setattr("sys.stdin", io.StringIO('{"k": "v"}'))
    assert _run(capsys, "encode", "-") == "k=v"


@pytest.mark.parametrize(
    "args",
    [
        ("decode", "a=%zz"),
        ("uncollapse", '{"a": 1, "a.b": 2}'),
        ("encode", "[1, 2]"),
        ("encode", "{not json"),
        ("encode", "--item-delim", "", '{"a": 1}'),
    ],
)
def test_errors_exit_with_usage_status(capsys: pytest.CaptureFixture[str], args: tuple[str, ...]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(list(args))
    assert excinfo.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip()


def test_debug_flag_logs_skipped_keys(caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture[str]) -> None:
    with caplog.at_level("DEBUG", logger="kv_form"):
        assert _run(capsys, "--debug", "decode", "=x&a=1") == '{"a": "1"}'
    assert "skipping token with empty key" in caplog.text
