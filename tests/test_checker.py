import io
import random

import pytest

from stackswap.checker import main, parse_instruction, run_checker
from stackswap.parsing import InputError
from stackswap.solver import solve


@pytest.mark.parametrize(
    "name", ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
)
def test_parse_known_instructions(name):
    assert parse_instruction(name + "\n") == name


@pytest.mark.parametrize("line", ["sa", "\n", "xx\n", "rrra\n", "sa \n", "SA\n"])
def test_parse_rejects_bad_lines(line):
    with pytest.raises(InputError):
        parse_instruction(line)


def test_swap_sorts_pair():
    assert run_checker([2, 1], ["sa\n"]) is True


def test_no_instructions_on_unsorted():
    assert run_checker([2, 1], []) is False


def test_no_instructions_on_sorted():
    assert run_checker([1, 2, 3], []) is True


def test_elements_left_in_b_is_failure():
    assert run_checker([1, 2, 3], ["pb\n"]) is False


def test_push_and_return_is_success():
    assert run_checker([1, 2, 3], ["pb\n", "pa\n"]) is True


def test_empty_values_is_error():
    with pytest.raises(InputError):
        run_checker([], ["sa\n"])


def test_unknown_instruction_is_error():
    with pytest.raises(InputError):
        run_checker([2, 1], ["sa\n", "nope\n"])


def test_solver_output_passes_checker():
    values = random.Random(7).sample(range(1, 1000), 40)
    lines = [name + "\n" for name in solve(values)]
    assert run_checker(values, lines) is True


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\n"))
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_bad_instruction(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nfoo\n"))
    assert main(["2 1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_only_whitespace_is_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["   "]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""