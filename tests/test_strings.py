import pytest

from drillbook.strings import (
    TriangleType,
    find_index,
    find_replace,
    float_to_str,
    int_to_str,
    is_mirror,
    repeat_words,
    reverse_string,
    reverse_words,
    str_to_int,
    triangle_type,
    unique_chars,
)


def test_is_mirror_source_example():
    assert is_mirror("aataaz") is False


@pytest.mark.parametrize("text", ["", "a", "abba", "abcba"])
def test_is_mirror_palindromes(text):
    assert is_mirror(text) is True


def test_unique_chars_keeps_first_occurrences():
    text = "ahmed selem kamel"
    result = unique_chars(text)
    assert len(result) == len(set(result))
    assert set(result) == set(text)
    positions = [text.index(char) for char in result]
    assert positions == sorted(positions)


def test_unique_chars_idempotent():
    once = unique_chars("mississippi")
    assert unique_chars(once) == once


def test_find_index_locates_pattern():
    text = "ahmed mohamed ayman kamel"
    index = find_index(text, "ayman")
    assert text[index:index + len("ayman")] == "ayman"
    assert text.count("ayman", 0, index) == 0


def test_find_index_missing():
    assert find_index("hello", "xyz") == -1


def test_find_replace_source_example():
    result = find_replace("ahmed mohamed ayman kamel", "mohamed", "Mohsen")
    assert result == "ahmed Mohsen ayman kamel"


def test_find_replace_only_first():
    result = find_replace("ab ab", "ab", "xyz")
    assert result.count("xyz") == 1
    assert result.endswith("ab")


def test_find_replace_absent_is_unchanged():
    assert find_replace("kamel", "zzz", "q") == "kamel"


@pytest.mark.parametrize("n", [0, 7, -7, 120, -311, 2147483647])
def test_int_to_str_matches_decimal(n):
    assert int_to_str(n) == str(n)
    assert str_to_int(int_to_str(n)) == n


@pytest.mark.parametrize("text", ["", "-", "12a", "1.5", " 3"])
def test_str_to_int_rejects(text):
    with pytest.raises(ValueError):
        str_to_int(text)


def test_float_to_str_source_example_truncates():
    assert float_to_str(-311.65, 2) == "-311.64"


def test_float_to_str_whole_number():
    assert float_to_str(25.0, 3) == "25.000"


def test_float_to_str_zero_precision():
    assert float_to_str(9.75, 0) == "9"


def test_float_to_str_negative_precision():
    with pytest.raises(ValueError):
        float_to_str(1.5, -1)


def test_repeat_words_source_example():
    lines = repeat_words("hi,5,hello,17,kj,8")
    assert lines.count("hi") == 5
    assert lines.count("hello") == 17
    assert lines.count("kj") == 8
    assert lines[0] == "hi" and lines[-1] == "kj"


def test_repeat_words_empty():
    assert repeat_words("") == []


@pytest.mark.parametrize("spec", ["hi", "hi,x", "hi,-2", "a,1,b"])
def test_repeat_words_rejects(spec):
    with pytest.raises(ValueError):
        repeat_words(spec)


def test_reverse_words_source_example():
    text = "my name is mohammed mohsen nassar and have 30 years"
    assert reverse_words(text) == "years 30 have and nassar mohsen mohammed is name my"


def test_reverse_words_round_trip():
    text = "one  two three"
    assert reverse_words(reverse_words(text)) == text


def test_reverse_string_round_trip():
    text = "Mohammed Mohsen Nassar"
    reversed_text = reverse_string(text)
    assert reversed_text[0] == text[-1]
    assert reverse_string(reversed_text) == text


def test_triangle_source_example():
    assert triangle_type("5 6 10") == "Scalene triangle"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("3 3 3", TriangleType.EQUILATERAL),
        ("3 3 5", TriangleType.ISOSCELES),
        ("1 2 3", TriangleType.NOT_TRIANGLE),
        ("1 2 10", TriangleType.NOT_TRIANGLE),
    ],
)
def test_triangle_kinds(text, expected):
    assert triangle_type(text) is expected


@pytest.mark.parametrize("text", ["", "5  6 10", " 5 6 10", "5 6 10 ", "5 a 10", "5 6", "1 2 3 4"])
def test_triangle_not_valid(text):
    assert triangle_type(text) == "Not valid"