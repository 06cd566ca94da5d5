import pytest

from minforth import NotInLoop, StackUnderflow


@pytest.mark.parametrize("source, expected", [
    ("1 if 10 then 20", [10, 20]),
    ("0 if 10 then 20", [20]),
    ("-1 if 10 else 20 then 30", [10, 30]),
    ("0 if 10 else 20 then 30", [20, 30]),
    ("7 if then", []),
    ("0 if 1 2", []),
])
def test_if_else_then(run, source, expected):
    assert run(source)[1] == expected


def test_if_needs_a_flag(forth):
    with pytest.raises(StackUnderflow):
        forth.execute("if 1 then")


def test_if_stack_is_balanced(forth):
    forth.execute("1 if 2 else 3 then 0 if 4 else 5 then 0 if 6 then")
    assert forth.stack == [2, 5]
    assert forth.if_stack == []


def test_nested_if(run):
    assert run("1 if 0 if 100 else 200 then 300 then 400")[1] == [200, 300, 400]
    assert run("0 if 1 if 100 then 200 then 300")[1] == [300]
    assert run("0 if 1 if 10 else 20 then else 30 then")[1] == [30]


def test_flat_control_matches_first_then(run):
    assert run("0 if 1 if 100 then 200 then 300", nested_control=False)[1] == [200, 300]


def test_counted_loop(run):
    out, stack = run("0 5 do i . loop")
    assert out == "01234"
    assert stack == []


def test_empty_counted_loop(run):
    assert run("5 5 do i . loop 7") == ("", [7])
    assert run("9 2 do i . loop") == ("", [])


def test_loop_index_outside_loop(forth):
    with pytest.raises(NotInLoop):
        forth.execute("i")


def test_loop_context_cleared_after_loop(forth):
    with pytest.raises(NotInLoop):
        forth.execute("0 2 do loop i")
    assert not forth.loop_context.active


def test_loop_index_visible_in_called_words(run):
    assert run(": show i . ; 0 3 do show loop")[0] == "012"


def test_nested_loops(run):
    assert run("0 2 do 0 2 do i . loop loop")[0] == "0101"
    assert run("0 2 do 0 1 do loop i . loop")[0] == "01"


def test_loop_inside_word(run):
    assert run(": stars 0 swap do 42 emit loop ; 3 stars")[0] == "***"


def test_if_inside_loop(run):
    assert run("0 6 do i 2 mod 0 = if i . then loop")[0] == "024"


def test_loop_inside_if(run):
    assert run("1 if 0 3 do i . loop then")[0] == "012"
    assert run("0 if 0 3 do i . loop then")[0] == ""


def test_unterminated_loop_runs_to_end(run):
    assert run("0 2 do i")[1] == [0, 1]


def test_begin_until(run):
    out, stack = run("5 begin dup . 1 - dup 0 = until drop")
    assert out == "54321"
    assert stack == []


def test_begin_until_runs_at_least_once(run):
    assert run("begin 99 -1 until 7")[1] == [99, 7]


def test_begin_until_with_variable(run):
    assert run("variable n begin n +! n @ 5 = until n @")[1] == [5]


def test_nested_begin_until(run):
    source = "3 begin 2 begin 42 emit 1 - dup 0 = until drop 1 - dup 0 = until drop"
    assert run(source) == ("******", [])


def test_until_needs_a_flag(forth):
    with pytest.raises(StackUnderflow):
        forth.execute("begin until")


def test_long_begin_loop_does_not_grow_nesting(run):
    assert run("variable n begin n +! n @ 1000 = until n @")[1] == [1000]


def test_stray_markers_are_ignored(run):
    assert run("1 then 2 loop 3 until 4 else 5")[1] == [1, 2, 3, 4, 5]
