import pytest

from languages.russian.text import (
    append_end,
    ends_with_word,
    is_mixed_case,
    is_russian_word,
    is_upper_case,
    replace_end,
    to_proper_case,
)


@pytest.mark.parametrize("template, s, expected", [
    ("Иванов", "иванова", "Иванова"),
    ("ИВАНОВ", "иванова", "ИВАНОВА"),
    ("иванов", "иванова", "иванова"),
    ("A", "d", "D"),
    ("Abc", "abdef", "Abdef"),
    ("ПАО", "пао", "ПАО"),
    ("Любовь", "любви", "Любви"),
])
def test_to_proper_case(template, s, expected):
    assert to_proper_case(template, s) == expected


def test_replace_end_keeps_upper_case():
    assert replace_end("рубль", 1, "и") == "рубли"
    assert replace_end("РУБЛЬ", 1, "и") == "РУБЛИ"


def test_append_end_keeps_upper_case():
    assert append_end("доллар", "ы") == "доллары"
    assert append_end("ДОЛЛАР", "ы") == "ДОЛЛАРЫ"


def test_letter_case_checks():
    assert is_upper_case("ПАО")
    assert not is_upper_case("Пао")
    assert is_mixed_case("ПАО 'Финансовая корпорация'")
    assert not is_mixed_case("ПАО")
    assert not is_mixed_case("пао")


def test_ends_with_word():
    assert ends_with_word("сорок два", "два")
    assert ends_with_word("два", "два")
    assert not ends_with_word("двадцать", "два")


@pytest.mark.parametrize("word, expected", [
    ("Иванов", True),
    ("сестра-анестезист", True),
    ("П.П.", True),
    ("John", False),
    ("Ivanов", False),
    ("123", False),
])
def test_is_russian_word(word, expected):
    assert is_russian_word(word) is expected
