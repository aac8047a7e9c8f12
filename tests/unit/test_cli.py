"""Command line front end, driven through click's CliRunner."""

import pytest
from click.testing import CliRunner

from scryptlang.cli.main import cli
from scryptlang.config import config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def script(tmp_path):
    def _write(source, name="program.scrypt"):
        path = tmp_path / name
        path.write_text(source)
        return str(path)
    return _write


def test_run_file(runner, script):
    result = runner.invoke(cli, ["run", script("x = [1, 2]\npush(x, 3)\nprint x;\nprint len(x) / 2;")])
    assert result.exit_code == 0
    assert result.output == "[1, 2, 3]\n1.5\n"


def test_run_reads_stdin(runner):
    result = runner.invoke(cli, ["run"], input="print 2 + 3 * 4;\n")
    assert result.exit_code == 0
    assert result.output == "14\n"


def test_run_dash_reads_stdin(runner):
    result = runner.invoke(cli, ["run", "-"], input="print 1 + 1;\n")
    assert result.exit_code == 0
    assert result.output == "2\n"


def test_illegal_token_exits_1(runner):
    result = runner.invoke(cli, ["run"], input="a & b\n")
    assert result.exit_code == 1
    assert "Syntax error on line 1 column 3." in result.output


def test_parse_error_exits_2_without_running(runner):
    result = runner.invoke(cli, ["run"], input="print 1;\nx = ;\n")
    assert result.exit_code == 2
    assert "Unexpected token at line 2 column 5: ;" in result.output
    assert not result.output.startswith("1\n")


@pytest.mark.parametrize("source,code,message", [
    ("print 1 / 0;", 2, "Runtime error: division by zero."),
    ("print missing;", 2, "Runtime error: unknown identifier `missing`."),
    ("a = []\npop(a);", 2, "Runtime error: cannot pop from an empty array."),
    ("if 1 { print 1; }", 3, "Runtime error: condition is not a bool."),
    ("print 1 && true;", 3, "Runtime error: condition is not a bool."),
    ("def f(a) { return a; }\nf(1, 2);", 3, "Runtime error: incorrect argument count."),
    ("x = 1\nx(2);", 3, "Runtime error: not a function."),
])
def test_runtime_error_exit_codes(runner, source, code, message):
    result = runner.invoke(cli, ["run"], input=source)
    assert result.exit_code == code
    assert message in result.output


def test_output_before_runtime_error_is_printed(runner):
    result = runner.invoke(cli, ["run"], input="print 1;\nprint 1 / 0;\n")
    assert result.exit_code == 2
    assert result.output.startswith("1\n")


def test_check(runner, script):
    ok = runner.invoke(cli, ["check", script("print 1;")])
    assert ok.exit_code == 0
    assert "Syntax is valid!" in ok.output

    bad = runner.invoke(cli, ["check", script("print ;", "bad.scrypt")])
    assert bad.exit_code == 2
    assert "Unexpected token at line 1 column 7: ;" in bad.output


def test_tokens(runner, script):
    result = runner.invoke(cli, ["tokens", script("x = 1")])
    assert result.exit_code == 0
    for kind in ("IDENT", "NUMBER", "EOF"):
        assert kind in result.output


def test_tokens_reports_illegal(runner, script):
    result = runner.invoke(cli, ["tokens", script("x = @")])
    assert result.exit_code == 1
    assert "Syntax error on line 1 column 5." in result.output


def test_ast(runner, script):
    result = runner.invoke(cli, ["ast", script("print 1;")])
    assert result.exit_code == 0
    assert "PrintStatement" in result.output


def test_fmt(runner, script):
    result = runner.invoke(cli, ["fmt", script("def f(a){return a*2;}\nprint f(3);")])
    assert result.exit_code == 0
    assert result.output == "def f(a) {\n    return (a * 2);\n}\nprint f(3);\n"


def test_repl_shares_one_scope(runner):
    result = runner.invoke(cli, ["repl"], input="x = 2\nprint x * 3;\nexit\n")
    assert result.exit_code == 0
    assert "6" in result.output


def test_repl_survives_errors(runner):
    result = runner.invoke(cli, ["repl"], input="print 1 / 0;\nprint 5;\n")
    assert result.exit_code == 0
    assert "Runtime error: division by zero." in result.output
    assert "5\n" in result.output


def test_debug_flag_enables_logging(runner, monkeypatch):
    monkeypatch.setattr(config, "enable_debug_logs", False)
    monkeypatch.setattr(config, "debug_level", "normal")
    result = runner.invoke(cli, ["--verbose", "run"], input="print 1;")
    assert result.exit_code == 0
    assert config.enable_debug_logs
    assert config.debug_level == "verbose"


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
