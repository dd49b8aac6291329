"""
End-to-end tests for the command line entry point.
"""

import pytest

from loadpath.__main__ import main


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")


def test_runs_script(tmp_path, capsys):
    script = tmp_path / "hello.lps"
    script.write_text('Print("hello", BaseName("/usr/bin"))')

    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "hello bin\n"


def test_requires_before_script(tmp_path, capsys):
    mods = tmp_path / "mods"
    mods.mkdir()
    (mods / "greet.lps").write_text('Print("greet")')
    script = tmp_path / "main.lps"
    script.write_text("Print(TryRequire('greet))")

    assert main(["-I", str(mods), "-r", "greet", str(script)]) == 0
    assert capsys.readouterr().out == "greet\nnil\n"


def test_missing_module(tmp_path, capsys):
    assert main(["-I", str(tmp_path), "-r", "nowhere"]) == 1
    assert "module not found: nowhere" in capsys.readouterr().err


def test_missing_script(tmp_path, capsys):
    assert main([str(tmp_path / "absent.lps")]) == 1
    assert "not a file" in capsys.readouterr().err


def test_undecodable_script(tmp_path, capsys):
    script = tmp_path / "bad.lps"
    script.write_bytes(b'Print("\xff\xfe")')

    assert main([str(script)]) == 1
    err = capsys.readouterr().err
    assert "cannot read script" in err
    assert "bad.lps" in err


def test_script_loading_an_unreadable_file(tmp_path, capsys):
    script = tmp_path / "main.lps"
    script.write_text(f'Load("{tmp_path}/nope.lps")')

    assert main([str(script)]) == 1
    assert "cannot read script" in capsys.readouterr().err


def test_syntax_error(tmp_path, capsys):
    script = tmp_path / "bad.lps"
    script.write_text("x := @")

    assert main([str(script)]) == 1
    err = capsys.readouterr().err
    assert "error[S0001]" in err
    assert "x := @" in err


def test_runtime_error(tmp_path, capsys):
    script = tmp_path / "bad.lps"
    script.write_text("Nope()")

    assert main([str(script)]) == 1
    assert "undefined function: Nope" in capsys.readouterr().err


def test_no_arguments(capsys):
    assert main([]) == 1
    assert "usage: loadpath" in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
