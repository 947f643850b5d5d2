import pytest

from fractview.libkit.transform import (
    count_lines,
    sort_params,
    strcapitalize,
    striter,
    striteri,
    strjoin,
    strmap,
    strmapi,
    strnew,
    strrev,
    strsplit,
    strsub,
    strtrim,
)


def test_strsub_whole_string():
    assert strsub("fractal", 0, 7) == "fractal"


def test_strsub_pieces_join_back():
    text = "mandelbrot"
    assert strjoin(strsub(text, 0, 6), strsub(text, 6, 4)) == text


def test_strsub_zero_length():
    assert strsub("julia", 2, 0) == ""


def test_strsub_empty_string_rejected():
    with pytest.raises(ValueError):
        strsub("", 0, 0)


def test_strsub_past_end_rejected():
    with pytest.raises(IndexError):
        strsub("leaf", 2, 5)


def test_strsub_negative_rejected():
    with pytest.raises(ValueError):
        strsub("leaf", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("man", "del") == "mandel"
    assert strjoin("", "x") == "x"


def test_strjoin_requires_both():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_removes_blanks_both_ends():
    assert strtrim(" \t\n  hello world \n\t ") == "hello world"


def test_strtrim_only_blanks():
    assert strtrim(" \n\t ") == ""


def test_strtrim_keeps_other_whitespace():
    assert strtrim("\rabc\r") == "\rabc\r"


def test_strsplit_drops_empty_pieces():
    assert strsplit("*hello*fellow***students*", "*") == ["hello", "fellow", "students"]


def test_strsplit_no_separator():
    assert strsplit("word", " ") == ["word"]


def test_strsplit_empty_and_all_separators():
    assert strsplit("", ",") == []
    assert strsplit(",,,", ",") == []


def test_strsplit_accepts_code():
    assert strsplit("a b", ord(" ")) == ["a", "b"]


def test_strrev_round_trip():
    text = "escape time"
    assert strrev(strrev(text)) == text
    assert strrev("ab") == "ba"


def test_strcapitalize_worked_example():
    text = "salut, comment tu vas ? 42mots quarante-deux; cinquante+et+un"
    expected = "Salut, Comment Tu Vas ? 42mots Quarante-Deux; Cinquante+Et+Un"
    assert strcapitalize(text) == expected


def test_strcapitalize_lowers_rest_of_word():
    assert strcapitalize("HELLO") == "Hello"


def test_strcapitalize_is_idempotent():
    once = strcapitalize("ab CD 9ef -gh")
    assert strcapitalize(once) == once


def test_strcapitalize_empty():
    assert strcapitalize("") == ""


def test_strmap_applies_function():
    assert strmap("abc", str.upper) == "ABC"


def test_strmapi_passes_index():
    assert strmapi("aaa", lambda i, ch: str(i)) == "012"


def test_strmap_requires_function():
    with pytest.raises(TypeError):
        strmap("abc", None)


def test_striter_visits_every_character():
    seen = []
    striter("xyz", seen.append)
    assert seen == ["x", "y", "z"]


def test_striteri_visits_with_index():
    seen = []
    striteri("ab", lambda i, ch: seen.append((i, ch)))
    assert seen == [(0, "a"), (1, "b")]


def test_strnew_is_terminators():
    assert strnew(3) == "\0\0\0"
    assert strnew(0) == ""


def test_strnew_negative_rejected():
    with pytest.raises(ValueError):
        strnew(-1)


def test_sort_params_sorted_input_unchanged():
    args = ["prog", "alpha", "beta", "gamma"]
    assert sort_params(args, 1) == args


def test_sort_params_sorts_tail():
    args = ["prog", "c", "b", "a"]
    result = sort_params(args, 1)
    assert result == ["prog", "a", "b", "c"]
    assert args == ["prog", "c", "b", "a"]


def test_sort_params_first_element_checked_once():
    assert sort_params(["b", "c", "a"], 0) == ["b", "a", "c"]


def test_sort_params_is_permutation():
    args = ["d", "a", "c", "b", "e"]
    assert sorted(sort_params(args, 0)) == sorted(args)


def test_sort_params_negative_start_rejected():
    with pytest.raises(ValueError):
        sort_params(["a"], -1)


def test_count_lines_counts_until_none():
    assert count_lines(["a", "b", None, "c"]) == 2
    assert count_lines(["a", "b", "c"]) == 3
    assert count_lines([]) == 0