import pytest

from languages.russian.inflection import InflectionEngine
from languages.russian.morph import PymorphyDictionary
from languages.russian.types import Case, Gender, WordType


@pytest.fixture(scope="module")
def morph_dictionary():
    return PymorphyDictionary()


def test_lookup(morph_dictionary):
    record = morph_dictionary.lookup("книга")
    assert record.gender is Gender.FEMALE
    assert record.animate is False
    assert not record.is_plural_key
    assert morph_dictionary.lookup("qwerty") is None


def test_inflect(morph_dictionary):
    assert morph_dictionary.inflect("книга", Case.GENITIVE) == "книги"
    assert morph_dictionary.inflect("книга", Case.DATIVE, plural=True) == "книгам"
    assert morph_dictionary.inflect("кофе", Case.GENITIVE) == "кофе"


def test_engine_with_pymorphy_backend(morph_dictionary):
    engine = InflectionEngine(morph_dictionary)
    assert engine.inflect("Книга", WordType.GENERIC, Case.INSTRUMENTAL) == "Книгой"
