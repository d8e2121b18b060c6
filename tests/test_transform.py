import pytest

from solong.libft.transform import (
    split,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
)


def test_substr_window_inside_string():
    s = "Doktorskaya Kolbasa"
    part = substr(s, 4, 8)
    assert len(part) == 8
    assert s.startswith(part, 4)


def test_substr_start_past_end():
    assert substr("abc", 10, 5) == ""


def test_substr_length_past_end_gives_tail():
    s = "Doktorskaya Kolbasa"
    part = substr(s, 12, 100)
    assert s.endswith(part)
    assert len(part) == len(s) - 12


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin_concatenates():
    assert strjoin("Wonderful ", "Summer") == "Wonderful Summer"
    assert strjoin("", "x") == "x"


def test_strjoin_length_invariant():
    a, b = "left", "right side"
    joined = strjoin(a, b)
    assert len(joined) == len(a) + len(b)
    assert joined.startswith(a) and joined.endswith(b)


def test_strtrim_spaces():
    assert strtrim("     Hello World!   ", " ") == "Hello World!"


def test_strtrim_empty_set_and_all_trimmed():
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim("xyxyx", "xy") == ""


def test_strtrim_keeps_inner_characters():
    result = strtrim("--a-b--", "-")
    assert result[0] != "-" and result[-1] != "-"
    assert "-" in result


def test_strtrim_rejects_none():
    with pytest.raises(TypeError):
        strtrim(None, " ")


def test_split_map_rows():
    rows = split("111\n1P1\n111\n", "\n")
    assert rows == ["111", "1P1", "111"]


def test_split_skips_repeated_separators():
    rows = split("\n\nab\n\n\ncd\n", "\n")
    assert rows == ["ab", "cd"]
    assert all(rows)


def test_split_empty_and_only_separators():
    assert split("", "\n") == []
    assert split("\n\n\n", "\n") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")
    with pytest.raises(TypeError):
        split(None, ",")


def test_strmapi_receives_indices_in_order():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch

    s = "hello"
    assert strmapi(s, record) == s
    assert seen == list(range(len(s)))


def test_strmapi_uppercases():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"


def test_strmapi_rejects_non_callable():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_modifies_in_place():
    text = "mixed Case"
    chars = list(text)
    striteri(chars, lambda i, c: c.upper())
    assert "".join(chars) == text.upper()


def test_striteri_none_result_leaves_element():
    chars = list("abc")
    indices = []
    striteri(chars, lambda i, c: indices.append(i))
    assert chars == list("abc")
    assert indices == [0, 1, 2]


def test_striteri_selective_replacement():
    chars = list("aaaa")
    striteri(chars, lambda i, c: "b" if i % 2 else None)
    assert chars[0::2] == ["a", "a"]
    assert chars[1::2] == ["b", "b"]