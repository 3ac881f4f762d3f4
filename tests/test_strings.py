import pytest

from minishell.strings import (
    memchr,
    memcmp,
    split,
    strchr,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_stops_at_n():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_zero_length_is_equal():
    assert strncmp("x", "y", 0) == 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


def test_strncmp_antisymmetric():
    assert strncmp("hello", "help", 4) == -strncmp("help", "hello", 4)


def test_strncmp_prefix_match_like_builtin_lookup():
    assert strncmp("echo", "ec", len("ec")) == 0


def test_strnstr_finds_needle():
    haystack, needle = "hello world", "world"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index : index + len(needle)] == needle


def test_strnstr_respects_length():
    assert strnstr("hello world", "world", 8) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 3) == 0


def test_strnstr_missing():
    assert strnstr("abc", "z", 3) is None


def test_strchr_first_occurrence():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_nul_is_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


def test_strrchr_last_occurrence():
    s = "hello"
    index = strrchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[index + 1 :]


def test_strrchr_nul_and_missing():
    assert strrchr("abc", "\0") == len("abc")
    assert strrchr("abc", "q") is None


def test_strlcpy_truncates():
    copied, total = strlcpy("hello", 3)
    assert len(copied) == 2
    assert "hello".startswith(copied)
    assert total == len("hello")


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_large_buffer():
    assert strlcpy("hello", 100) == ("hello", len("hello"))


def test_strlcat_fits():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("abcd"))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert ("ab" + "cdef").startswith(result)
    assert total == len("ab") + len("cdef")


def test_strlcat_size_not_larger_than_dst():
    assert strlcat("abc", "de", 2) == ("abc", len("de") + 2)


def test_substr_middle():
    s = "hello"
    part = substr(s, 1, 3)
    assert len(part) == 3
    assert s.find(part) == 1


def test_substr_past_end():
    assert substr("abc", 10, 2) == ""


def test_substr_length_clamped():
    assert substr("abc", 1, 100) == "bc"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset():
    assert strtrim(" keep ", "") == " keep "


def test_strtrim_inner_characters_kept():
    assert strtrim("-a-b-", "-") == "a-b"


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_no_separator():
    assert split("hello", " ") == ["hello"]


def test_split_empty():
    assert split("", ":") == []
    assert split(":::", ":") == []


@pytest.mark.parametrize("text", ["/usr/bin:/bin", ":a::b:", "single", "::"])
def test_split_invariants(text):
    words = split(text, ":")
    assert all(words)
    assert all(":" not in word for word in words)
    assert "".join(words) == text.replace(":", "")


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_strmapi_passes_index():
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strmapi_preserves_length_and_chars():
    s = "Hello"
    assert strmapi(s, lambda i, c: c) == s
    assert strmapi(s, lambda i, c: c.upper()) == s.upper()


def test_memchr_found():
    data = b"abc"
    index = memchr(data, ord("c"), len(data))
    assert data[index : index + 1] == b"c"


def test_memchr_limited_by_n():
    assert memchr(b"abc", ord("c"), 2) is None


def test_memchr_value_wraps():
    assert memchr(b"xa", 256 + ord("a"), 2) == memchr(b"xa", ord("a"), 2)


def test_memchr_n_too_large():
    with pytest.raises(ValueError):
        memchr(b"abc", 0, 4)


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_compares_bytes_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_limited_by_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_n_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)