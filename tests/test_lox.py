import io

import pytest

from loxinterp.lox import Lox, main


def make_lox(stdin_text=""):
    out = io.StringIO()
    err = io.StringIO()
    lox = Lox(stdin=io.StringIO(stdin_text), out=out, err=err)
    return lox, out, err


def output_of(source):
    lox, out, _ = make_lox()
    lox.run(source)
    return out.getvalue()


def test_print_number_uses_two_decimals():
    assert output_of("print 1 + 2;") == "3.00\n"


def test_arithmetic_matches_literal():
    assert output_of("print 2 * 3;") == output_of("print 6;")


def test_string_concatenation_matches_literal():
    assert output_of('print "a" + "b";') == output_of('print "ab";')


def test_globals_persist_between_runs():
    lox, out, _ = make_lox()
    lox.run("var a = 5;")
    lox.run("print a;")
    assert out.getvalue() == output_of("print 5;")


def test_block_scope_shadowing():
    source = "var a = 1; { var a = 2; print a; } print a;"
    assert output_of(source) == output_of("print 2; print 1;")


def test_while_loop():
    source = "var i = 0; while (i < 3) i = i + 1; print i;"
    assert output_of(source) == output_of("print 3;")


def test_runtime_error_is_reported():
    lox, out, _ = make_lox()
    lox.run("print y;")
    assert out.getvalue() == "Undefined variable 'y'.\n[line 1]"
    assert lox.reporter.had_runtime_error is True


def test_syntax_error_prevents_execution():
    lox, out, err = make_lox()
    lox.run("print 1; print ;")
    assert out.getvalue() == ""
    assert "Expect expression." in err.getvalue()
    assert lox.reporter.had_error is True


def test_run_after_unreset_error_exits():
    lox, _, _ = make_lox()
    lox.run("print ;")
    with pytest.raises(SystemExit) as info:
        lox.run("print 1;")
    assert info.value.code == 65


def test_prompt_appends_semicolon_and_stops_on_exit():
    lox, out, _ = make_lox("print 1\n.exit\nprint 2;\n")
    lox.run_prompt()
    assert out.getvalue() == "-- lox interpreter interactive shell --\n> 1.00\n> "


def test_prompt_resets_errors_and_stops_on_empty_line():
    lox, out, err = make_lox("print ;\nprint 2;\n\nprint 3;\n")
    lox.run_prompt()
    text = out.getvalue()
    assert output_of("print 2;") in text
    assert output_of("print 3;") not in text
    assert "Expect expression." in err.getvalue()


def test_prompt_stops_at_end_of_input():
    lox, out, _ = make_lox("")
    lox.run_prompt()
    assert out.getvalue().endswith("> ")
    assert out.getvalue().count("> ") == 1


def test_run_file_success(tmp_path):
    script = tmp_path / "ok.lox"
    script.write_text("var a = 4;\nprint a;\n", encoding="utf-8")
    lox, out, _ = make_lox()
    lox.run_file(str(script))
    assert out.getvalue() == output_of("print 4;")


def test_run_file_syntax_error_exits_65(tmp_path):
    script = tmp_path / "bad.lox"
    script.write_text("print ;\n", encoding="utf-8")
    lox, _, _ = make_lox()
    with pytest.raises(SystemExit) as info:
        lox.run_file(str(script))
    assert info.value.code == 65


def test_run_file_runtime_error_exits_75(tmp_path):
    script = tmp_path / "boom.lox"
    script.write_text("print 1 / 0;\n", encoding="utf-8")
    lox, out, _ = make_lox()
    with pytest.raises(SystemExit) as info:
        lox.run_file(str(script))
    assert info.value.code == 75
    assert "Divide by zero error." in out.getvalue()


def test_run_file_missing_exits_1(tmp_path):
    lox, _, _ = make_lox()
    with pytest.raises(SystemExit) as info:
        lox.run_file(str(tmp_path / "missing.lox"))
    assert info.value.code == 1


def test_main_usage(capsys):
    assert main(["one", "two"]) == 64
    assert "Usage:" in capsys.readouterr().out


def test_main_runs_file(tmp_path, capsys):
    script = tmp_path / "hello.lox"
    script.write_text('print "hello";\n', encoding="utf-8")
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_main_returns_error_code(tmp_path):
    script = tmp_path / "bad.lox"
    script.write_text("var = ;\n", encoding="utf-8")
    assert main([str(script)]) == 65