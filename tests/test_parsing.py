import pytest

from stackswap.parsing import (
    InputError,
    atoi,
    check_token,
    parse_arguments,
    rank,
    split_whitespace,
)


def test_atoi_leading_zero_negative():
    assert atoi("-01") == -1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  +42abc", 42),
        ("\t\n-7", -7),
        ("abc", 0),
        ("", 0),
        ("+-3", 0),
    ],
)
def test_atoi_prefix_parsing(text, expected):
    assert atoi(text) == expected


def test_split_whitespace_all_separators():
    assert split_whitespace("1 3\t4\n2\v5\f6\r7") == ["1", "3", "4", "2", "5", "6", "7"]


def test_split_whitespace_collapses_runs():
    assert split_whitespace("  1   2  ") == ["1", "2"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_split_whitespace_blank(text):
    assert split_whitespace(text) == []


@pytest.mark.parametrize(
    "token, expected",
    [
        ("5", 5),
        ("+0", 0),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
    ],
)
def test_check_token_valid(token, expected):
    assert check_token(token, set()) == expected


@pytest.mark.parametrize(
    "token", ["+", "-", "1a", "22x2", "2147483648", "-2147483649", "1-", " 1"]
)
def test_check_token_invalid(token):
    with pytest.raises(InputError):
        check_token(token, set())


def test_check_token_duplicate():
    with pytest.raises(InputError):
        check_token("3", {3})


def test_check_token_duplicate_signed_zero():
    with pytest.raises(InputError):
        check_token("-0", {0})


def test_rank_worked_example():
    assert rank([35, 11, 24, 65, 34]) == [4, 1, 2, 5, 3]


def test_rank_is_permutation():
    values = [100, -5, 7, 0, 42, -300]
    ranks = rank(values)
    assert sorted(ranks) == list(range(1, len(values) + 1))
    assert sorted(range(len(values)), key=lambda i: values[i]) == sorted(
        range(len(values)), key=lambda i: ranks[i]
    )


def test_parse_single_string():
    assert parse_arguments(["3 1 2"]) == [3, 1, 2]


def test_parse_separate_arguments():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]


def test_parse_mixed_arguments():
    assert parse_arguments(["1", "3", "2 4"]) == [1, 3, 2, 4]


def test_parse_source_input_with_bad_token():
    with pytest.raises(InputError):
        parse_arguments(["+1 42 -60 200 -2147483648 -10 0 22x2"])


def test_parse_source_input_without_bad_token():
    assert parse_arguments(["+1 42 -60 200 -2147483648 -10 0"]) == [5, 6, 2, 7, 1, 3, 4]


@pytest.mark.parametrize("args", [[""], ["1", ""], ["", "1"]])
def test_parse_empty_argument(args):
    with pytest.raises(InputError):
        parse_arguments(args)


@pytest.mark.parametrize("args", [["1 1"], ["1", "1"], ["2", "+2"]])
def test_parse_duplicates(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_parse_no_arguments():
    assert parse_arguments([]) == []


def test_parse_whitespace_only():
    assert parse_arguments(["   "]) == []


def test_input_error_message():
    with pytest.raises(InputError, match="Error"):
        parse_arguments(["x"])