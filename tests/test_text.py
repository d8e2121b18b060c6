import pytest

from solong.libft.text import (
    strchr,
    strcmp,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strnstr,
    strrchr,
)


def test_strlen_empty_and_additive():
    assert strlen("") == 0
    assert strlen("Wonder" + "wall") == strlen("Wonder") + strlen("wall")


def test_strlen_rejects_none():
    with pytest.raises(TypeError):
        strlen(None)


@pytest.mark.parametrize("c", ["W", "o", "w", "l"])
def test_strchr_finds_first(c):
    s = "Wonderwall"
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_and_nul():
    assert strchr("Wonderwall", "i") is None
    assert strchr("Wonderwall", "\0") == strlen("Wonderwall")
    assert strchr("Wonderwall", 0) == strlen("Wonderwall")


def test_strchr_accepts_integer_code():
    assert strchr("Wonderwall", ord("d")) == strchr("Wonderwall", "d")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("c", ["E", "x", "t", "a"])
def test_strrchr_finds_last(c):
    s = "Exorbitant"
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("Exorbitant", "z") is None
    assert strrchr("Exorbitant", "\0") == strlen("Exorbitant")


def test_strnstr_limited_window():
    big = "lorem ipsum dolor sit amet"
    assert strnstr(big, "dolor", 15) is None
    index = strnstr(big, "dolor", strlen(big))
    assert big[index:index + strlen("dolor")] == "dolor"


def test_strnstr_empty_needle_and_no_match():
    assert strnstr("anything", "", 3) == 0
    assert strnstr("", "a", 5) is None
    assert strnstr("abc", "abcd", 10) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strcmp_results():
    assert strcmp("map.ber", "map.ber") == 1
    assert strcmp("Hellolleagsdgd", "Hellulle") == -1
    assert strcmp("abc", "abcd") == -1
    assert strcmp("", "") == 1


def test_strdup_round_trip():
    original = "Alligator"
    copy = strdup(original)
    assert copy == original
    assert strcmp(copy, original) == 1


def test_strlcpy_truncates_and_terminates():
    src = b"Wonderwall"
    dst = bytearray(8)
    result = strlcpy(dst, src, 8)
    assert result == len(src)
    assert dst[:7] == src[:7]
    assert dst[7] == 0


def test_strlcpy_full_copy():
    src = b"abc"
    dst = bytearray(10)
    assert strlcpy(dst, src, 10) == len(src)
    assert bytes(dst[:len(src)]) == src
    assert dst[len(src)] == 0


def test_strlcpy_size_zero_leaves_destination():
    dst = bytearray(b"xyz")
    assert strlcpy(dst, b"source", 0) == len(b"source")
    assert dst == bytearray(b"xyz")


def test_strlcpy_none_destination():
    assert strlcpy(None, b"source", 4) == len(b"source")


def test_strlcpy_size_beyond_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abc", 5)


def test_strlcat_appends_within_size():
    dst = bytearray(b"Hello \0\0\0")
    result = strlcat(dst, b"World", 9)
    assert result == len(b"Hello ") + len(b"World")
    assert dst == bytearray(b"Hello Wo\0")


def test_strlcat_size_zero_returns_source_length():
    dst = bytearray(b"Hi\0")
    assert strlcat(dst, b"there", 0) == len(b"there")
    assert dst == bytearray(b"Hi\0")


def test_strlcat_destination_longer_than_size():
    dst = bytearray(b"Hello\0")
    assert strlcat(dst, b"abc", 3) == len(b"abc") + 3
    assert dst == bytearray(b"Hello\0")


def test_strlcat_both_none():
    assert strlcat(None, None, 0) == 0