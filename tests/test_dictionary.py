import pytest

from conftest import noun_row
from core.errors import AppErrorException, ErrorCode
from languages.russian.dictionary import NounDictionary, parse_row, select_longest
from languages.russian.types import Case, Gender

MOUSE_SINGULAR = ["мышь", "мы'ши", "мы'ши", "мышь", "мы'шью", "мы'ши"]
MOUSE_PLURAL = ["мы'ши", "мыше'й", "мыша'м", "мыше'й", "мыша'ми", "мыша'х"]


def _write(path, rows):
    path.write_text("\n".join("\t".join(r) for r in rows) + "\n", encoding="utf-8")
    return path


def test_select_longest():
    assert select_longest("копейкой") == "копейкой"
    assert select_longest("копейкой,копейкою") == "копейкой"
    assert select_longest("годе, году") == "годе"
    assert select_longest("лет,годов") == "годов"


def test_parse_row_indexes_plural_form():
    pairs = parse_row(noun_row("мышь", "f", "1", MOUSE_SINGULAR, MOUSE_PLURAL))
    assert [key for key, _ in pairs] == ["мышь", "мыши"]
    singular, plural = (record for _, record in pairs)
    assert singular.gender is Gender.FEMALE
    assert singular.animate is True
    assert not singular.is_plural_key
    assert plural.is_plural_key
    assert singular.form(Case.INSTRUMENTAL, False) == "мышью"
    assert singular.form(Case.GENITIVE, True) == "мышей"


def test_parse_row_indeclinable():
    [(key, record)] = parse_row(["кофе", "ко'фе", "coffee", "Kaffee", "m", "", "0", "1"])
    assert key == "кофе"
    assert record.is_indeclinable
    assert record.form(Case.GENITIVE, False) is None


def test_parse_row_skips_blank():
    assert parse_row(["", "", "", "", "m"]) == []
    assert parse_row(["кот"]) == []


def test_lookup_prefers_matching_animacy(tmp_path):
    path = _write(tmp_path / "nouns.tsv", [
        noun_row("мышь", "f", "1", MOUSE_SINGULAR, MOUSE_PLURAL),
        noun_row("мышь", "f", "0", MOUSE_SINGULAR, MOUSE_PLURAL),
    ])
    dictionary = NounDictionary(path)
    assert dictionary.lookup("Мышь", animate=False).animate is False
    assert dictionary.lookup("мышь", animate=True).animate is True
    assert dictionary.lookup("кот") is None
    assert "мыши" in dictionary


def test_inflect_plural_key(dictionary):
    assert dictionary.lookup("директора").is_plural_key
    assert dictionary.inflect("директора", Case.GENITIVE) == "директоров"
    assert dictionary.inflect("директор", Case.GENITIVE) == "директора"


def test_inflect_plural_of_singular_key(dictionary):
    assert dictionary.inflect("рубль", Case.NOMINATIVE, plural=True) == "рубли"
    assert dictionary.inflect("рубль", Case.DATIVE, plural=True) == "рублям"


def test_inflect_unknown_word(dictionary):
    assert dictionary.inflect("термист", Case.GENITIVE) is None


def test_skips_header_and_comments(tmp_path):
    path = _write(tmp_path / "nouns.tsv", [
        ["bare", "accented", "translations_en"],
        ["# local additions"],
        noun_row("мышь", "f", "1", MOUSE_SINGULAR, MOUSE_PLURAL),
    ])
    assert len(NounDictionary(path)) == 2


def test_missing_dictionary(tmp_path):
    dictionary = NounDictionary(tmp_path / "missing.tsv")
    with pytest.raises(AppErrorException) as exc:
        len(dictionary)
    assert exc.value.error.code is ErrorCode.E6001_FILE_NOT_FOUND


def test_unreadable_dictionary(tmp_path):
    path = tmp_path / "nouns.tsv"
    path.write_bytes(b"\xff\xfe\x00broken")
    with pytest.raises(AppErrorException) as exc:
        NounDictionary(path).lookup("кот")
    assert exc.value.error.code is ErrorCode.E6002_FILE_READ_ERROR
