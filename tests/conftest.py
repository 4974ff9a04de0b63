import pytest

from core.logging import configure_logging
from languages.russian.dictionary import NounDictionary
from languages.russian.inflection import InflectionEngine
from languages.russian.spelling import SpellingEngine

configure_logging(level="WARNING")


@pytest.fixture(scope="session")
def dictionary():
    return NounDictionary()


@pytest.fixture(scope="session")
def engine(dictionary):
    return InflectionEngine(dictionary)


@pytest.fixture(scope="session")
def speller():
    return SpellingEngine()


def noun_row(bare, gender, animate, singular=None, plural=None, indeclinable="0"):
    """Build a 22-column OpenRussian ``nouns`` row."""
    row = [bare, bare, "", "", gender, "", animate, indeclinable, "", ""]
    row += list(singular) if singular else [""] * 6
    row += list(plural) if plural else [""] * 6
    return row
