from decimal import Decimal

import pytest

from core.errors import AppErrorException, ErrorCode
from languages.russian.spelling import SpellingEngine, to_triple, to_triples
from languages.russian.types import Gender

TOO_BIG = "999" + "0" * 63


@pytest.mark.parametrize("number, expected", [
    (-42, "минус сорок два"),
    (123, "сто двадцать три"),
    (19, "девятнадцать"),
    (111, "сто одиннадцать"),
    (302, "триста два"),
    (520, "пятьсот двадцать"),
    (Decimal(0), "ноль"),
    (25_000, "двадцать пять тысяч"),
    (26_999, "двадцать шесть тысяч девятьсот девяносто девять"),
    (40_000, "сорок тысяч"),
    (900_000, "девятьсот тысяч"),
    (1_024_111, "один миллион двадцать четыре тысячи сто одиннадцать"),
    (121_122_456, "сто двадцать один миллион сто двадцать две тысячи четыреста пятьдесят шесть"),
    (422_000_027_220, "четыреста двадцать два миллиарда двадцать семь тысяч двести двадцать"),
    (1_003_002_000_042_300, "один квадриллион три триллиона два миллиарда сорок две тысячи триста"),
])
def test_spell_integers(speller, number, expected):
    assert speller.spell(number) == expected


@pytest.mark.parametrize("number, expected", [
    (42.42, "сорок две целых сорок две сотых"),
    (-145.3, "минус сто сорок пять целых три десятых"),
    (1.3232356, "одна целая три миллиона двести тридцать две тысячи триста пятьдесят шесть десятимиллионных"),
    (23.000988854, "двадцать три целых девятьсот восемьдесят восемь тысяч восемьсот пятьдесят четыре миллиардных"),
    ("0.1", "ноль целых одна десятая"),
    ("0.0000000000001", "ноль целых одна десятитриллионная"),
    ("0.999000000000000000000", "ноль целых девятьсот девяносто девять тысячных"),
    ("0.000", "ноль"),
    ("0.000000000000000042", "ноль целых сорок две квинтиллионных"),
    ("1,5", "одна целая пять десятых"),
])
def test_spell_fractions(speller, number, expected):
    assert speller.spell(number) == expected


def test_spell_keeps_trailing_zeros_when_configured():
    assert SpellingEngine(strip_trailing_zeros=False).spell("1.50") == "одна целая пятьдесят сотых"


def test_spell_largest_supported_numbers(speller):
    assert speller.spell(TOO_BIG) == "девятьсот девяносто девять вигинтиллионов"
    assert speller.spell("0" + TOO_BIG) == "девятьсот девяносто девять вигинтиллионов"
    assert speller.spell("0." + "0" * 64 + "1") == "ноль целых одна стовигинтиллионная"
    assert speller.spell("00." + "0" * 64 + "100") == "ноль целых одна стовигинтиллионная"


@pytest.mark.parametrize("number, expected", [
    ("1" + "0" * 29 + "1", "один нониллион один"),
    ("-1" + "0" * 29 + "1", "минус один нониллион один"),
    ("1." + "0" * 29 + "1", "одна целая одна нониллионная"),
])
def test_spell_keeps_all_digits_of_long_numbers(speller, number, expected):
    assert speller.spell(number) == expected


@pytest.mark.parametrize("number", [
    TOO_BIG + "0",
    "1" + TOO_BIG,
    "0." + "0" * 65 + "1",
])
def test_spell_out_of_range(speller, number):
    with pytest.raises(AppErrorException) as exc:
        speller.spell(number)
    assert exc.value.error.code is ErrorCode.E2003_OUT_OF_RANGE


def test_spell_rounds_long_fractions(speller):
    number = "42." + "0" * 60 + "123456789"
    assert speller.spell(number) == "сорок две целых двенадцать тысяч триста сорок шесть стовигинтиллионных"


def test_spell_rejects_long_fractions_without_trimming():
    with pytest.raises(AppErrorException):
        SpellingEngine(trim_fraction=False).spell("42." + "0" * 60 + "123456789")


@pytest.mark.parametrize("number, code", [
    ("", ErrorCode.E2001_REQUIRED_FIELD_MISSING),
    (None, ErrorCode.E2001_REQUIRED_FIELD_MISSING),
    ("сорок", ErrorCode.E2002_INVALID_FORMAT),
    ("NaN", ErrorCode.E2002_INVALID_FORMAT),
    (True, ErrorCode.E2002_INVALID_FORMAT),
])
def test_spell_invalid_input(speller, number, code):
    result = speller.spell_result(number)
    assert result.is_err()
    assert result.unwrap_err().code is code


@pytest.mark.parametrize("number, expected", [
    (0, "нулевой"),
    (1, "первый"),
    (9, "девятый"),
    (15, "пятнадцатый"),
    (90, "девяностый"),
    (100, "сотый"),
    (546, "пятьсот сорок шестой"),
    (1254, "одна тысяча двести пятьдесят четвёртый"),
    (146286, "сто сорок шесть тысяч двести восемьдесят шестой"),
    (2000000, "двухмиллионный"),
    (150000704, "сто пятьдесят миллионов семьсот четвёртый"),
    (2000001002, "два миллиарда одна тысяча второй"),
    (2000, "двухтысячный"),
    (1000, "тысячный"),
    (103000, "стотрёхтысячный"),
    (201000, "двухсотоднотысячный"),
    (42000, "сорокадвухтысячный"),
    (40000, "сорокатысячный"),
    (60000, "шестидесятитысячный"),
])
def test_spell_ordinal_male(speller, number, expected):
    assert speller.spell_ordinal(number, Gender.MALE) == expected


@pytest.mark.parametrize("number, expected", [
    (0, "нулевая"),
    (2, "вторая"),
    (4, "четвёртая"),
    (11, "одиннадцатая"),
    (42801, "сорок две тысячи восемьсот первая"),
    (1042000, "один миллион сорокадвухтысячная"),
    (int("42" + "0" * 63), "сорокадвухвигинтиллионная"),
])
def test_spell_ordinal_female(speller, number, expected):
    assert speller.spell_ordinal(number, Gender.FEMALE) == expected


@pytest.mark.parametrize("number, expected", [
    (0, "нулевое"),
    (42, "сорок второе"),
    (171000000000, "стосемидесятиодномиллиардное"),
    (42000042000, "сорок два миллиарда сорокадвухтысячное"),
])
def test_spell_ordinal_neuter(speller, number, expected):
    assert speller.spell_ordinal(number, "neuter") == expected


def test_spell_ordinal_rejects_negative(speller):
    result = speller.spell_ordinal_result(-1)
    assert result.unwrap_err().code is ErrorCode.E2003_OUT_OF_RANGE


def test_spell_ordinal_rejects_fraction(speller):
    result = speller.spell_ordinal_result("1.5")
    assert result.unwrap_err().code is ErrorCode.E2002_INVALID_FORMAT


def test_triples():
    assert to_triples(0) == []
    assert to_triples(1_024_111) == [1, 24, 111]
    assert to_triple(111) == (1, 0, 11)
    assert to_triple(254) == (2, 5, 4)
