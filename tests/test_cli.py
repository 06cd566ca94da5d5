import sys

import pytest

from minforth.__main__ import main
from conftest import make_forth


@pytest.fixture
def program(tmp_path):
    def _write(text):
        path = tmp_path / "program.fth"
        path.write_text(text, encoding='utf-8')
        return str(path)
    return _write


def test_runs_a_file(program, capsys):
    assert main([program(': double 2 * ;\n5 double . cr ." done "\n')]) == 0
    assert capsys.readouterr().out == "10\ndone"


def test_error_exits_non_zero(program, capsys):
    assert main([program("1 . 1 0 / 2 .")]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1"
    assert "minforth: error: division by zero" in captured.err


def test_undefined_word_diagnostic_names_the_word(program, capsys):
    assert main([program("nosuchword")]) == 1
    assert "nosuchword" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fth")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_missing_argument():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_cell_width_option(program, capsys):
    assert main(["--cell-width", "8", program("2 cells .")]) == 0
    assert capsys.readouterr().out == "16"


def test_flat_control_option(program, capsys):
    source = program("0 if 1 if 100 . then 200 . then")
    assert main([source]) == 0
    assert capsys.readouterr().out == ""
    assert main(["--flat-control", source]) == 0
    assert capsys.readouterr().out == "200"


def test_max_depth_option(program, capsys):
    assert main(["--max-depth", "5", program(": f 1 - dup if f then ; 10 f")]) == 1
    assert "nesting deeper than 5" in capsys.readouterr().err


def feed(*lines):
    pending = list(lines)

    def get_input(prompt):
        if not pending:
            raise EOFError
        return pending.pop(0)
    return get_input


def test_repl_session():
    f = make_forth()
    f.repl(get_input=feed(": sq dup * ;", "4 sq .", "1 2 3", ".s", "1 0 /", ".s", "see sq", "bye", "99"))
    out = f.output.getvalue()
    assert "16 ok\n" in out
    assert "<3> 1 2 3\n" in out
    assert "Error: division by zero" in out
    assert "<0>\n" in out
    assert ": sq dup * ;\n" in out
    assert f.stack == []


def test_repl_ends_at_end_of_input():
    f = make_forth()
    f.repl(get_input=feed("5 constant five", "words"))
    assert "five\n" in f.output.getvalue()


def test_deep_recursion_from_the_command_line(program, capsys):
    limit = sys.getrecursionlimit()
    assert main([program(": cd dup 0 > if 1 - cd then ; 1500 cd .")]) == 0
    assert capsys.readouterr().out == "0"
    assert sys.getrecursionlimit() == limit
