"""Russian case inflection and numeral spelling."""
from .module import RussianModule
from .inflection import InflectionEngine
from .spelling import SpellingEngine
from .dictionary import DictionaryRecord, NounDictionary
from .phrase import Phrase, PhraseAssembler, Token, parse_phrase
from .names import (
    can_be_initials,
    can_be_patronymic,
    can_be_surname,
    guess_gender_by_full_name,
    is_first_name,
)
from .types import Case, Gender, PartOfSpeech, WordType

__all__ = [
    "RussianModule",
    "InflectionEngine",
    "SpellingEngine",
    "DictionaryRecord",
    "NounDictionary",
    "Phrase",
    "PhraseAssembler",
    "Token",
    "parse_phrase",
    "can_be_initials",
    "can_be_patronymic",
    "can_be_surname",
    "guess_gender_by_full_name",
    "is_first_name",
    "Case",
    "Gender",
    "PartOfSpeech",
    "WordType",
]
