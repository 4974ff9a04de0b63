"""Ending-based heuristics for Russian nouns and adjectives.

These are deliberately approximate: gender, number and part of speech
are guessed from a handful of fixed ending classes, with the word lists
from ``library`` covering the known exceptions.
"""
from typing import TypeVar

from . import lexicon
from .library import get_word_lists
from .text import append_end, ends_with_any, is_mixed_case, is_upper_case, normalize, replace_end
from .types import Gender

X = TypeVar("X")


def select(female: X, neuter: X, male: X, gender: Gender | None) -> X:
    """Pick a value by gender; anything but FEMALE/NEUTER picks the male one."""
    if gender is Gender.FEMALE:
        return female
    if gender is Gender.NEUTER:
        return neuter
    return male


def is_preposition(word: str) -> bool:
    return normalize(word) in lexicon.NON_DERIVATIVE_PREPOSITIONS


def is_male_substantive(word: str) -> bool:
    """Masculine noun declined as an adjective ("заведующий")."""
    return normalize(word) in get_word_lists().male_substantives


def is_female_substantive(word: str) -> bool:
    """Feminine noun declined as an adjective ("гостиная")."""
    return normalize(word) in get_word_lists().female_substantives


def _can_be_singular_nominative_adjective(word: str) -> bool:
    nw = normalize(word)
    return len(nw) > 2 and nw not in lexicon.NOT_ADJECTIVES.get(nw[-3:], ())


def can_be_singular_nominative_adjective(word: str, gender: Gender) -> bool:
    match gender:
        case Gender.MALE:
            return ends_with_any(word, lexicon.MALE_ADJECTIVE_ENDINGS) and _can_be_singular_nominative_adjective(word)
        case Gender.FEMALE:
            return ends_with_any(word, lexicon.FEMALE_ADJECTIVE_ENDINGS) and _can_be_singular_nominative_adjective(word)
        case Gender.NEUTER:
            return ends_with_any(word, lexicon.NEUTER_ADJECTIVE_ENDINGS)
    return False


def can_be_adjective(word: str, gender: Gender | None) -> bool:
    """True if the word can agree as an adjective with a noun of the given gender."""
    match gender:
        case Gender.MALE:
            return can_be_singular_nominative_adjective(word, Gender.MALE) and not is_male_substantive(word)
        case Gender.FEMALE:
            return can_be_singular_nominative_adjective(word, Gender.FEMALE) and not is_female_substantive(word)
        case Gender.NEUTER:
            return can_be_singular_nominative_adjective(word, Gender.NEUTER)
    return False


def can_be_feminine_noun(word: str) -> bool:
    # свинья, ладья, свекла, берёза, копейка
    return is_female_substantive(word) or ends_with_any(word, lexicon.FEMALE_NOUN_ENDINGS)


def can_be_neuter_noun(word: str) -> bool:
    # солнце, облако, дерево
    return ends_with_any(word, lexicon.NEUTER_NOUN_ENDINGS)


def can_be_plural(noun: str) -> bool:
    # клиенты, сделки, моряки, доллары
    return ends_with_any(noun, lexicon.PLURAL_ENDINGS)


def guess_gender_of_singular_noun(word: str) -> Gender:
    if can_be_neuter_noun(word):
        return Gender.NEUTER
    if can_be_feminine_noun(word):
        return Gender.FEMALE
    # masculine is the most common gender of job titles
    return Gender.MALE


def guess_gender_of_adjective(word: str) -> Gender | None:
    if ends_with_any(word, lexicon.FEMALE_ADJECTIVE_ENDINGS):
        return Gender.FEMALE
    if ends_with_any(word, lexicon.NEUTER_ADJECTIVE_ENDINGS):
        return Gender.NEUTER
    if ends_with_any(word, lexicon.MALE_ADJECTIVE_ENDINGS):
        return Gender.MALE
    return None


def to_plural_noun(singular: str) -> str:
    """Best-effort nominative plural of a singular noun."""
    if ends_with_any(singular, ("ль", "ья", "ка", "ия")):
        # рубль, свинья, копейка, инвестиция
        return replace_end(singular, 1, "и")
    if ends_with_any(singular, ("ие",)):
        # решение
        return replace_end(singular, 1, "я")
    if ends_with_any(singular, ("ла", "за", "на")):
        # свекла, берёза, старшина
        return replace_end(singular, 1, "ы")
    if ends_with_any(singular, ("т", "р")):
        # цент, клиент, доллар
        return append_end(singular, "ы")
    if ends_with_any(singular, ("к", "г")):
        # моряк, залог
        return append_end(singular, "и")
    return singular


def to_singular(plural: str) -> str:
    """Best-effort nominative singular of a plural noun."""
    if ends_with_any(plural, ("ли",)):
        # корабли, рубли
        return replace_end(plural, 1, "ь")
    if ends_with_any(plural, ("ия",)):
        # состояния
        return replace_end(plural, 1, "е")
    if ends_with_any(plural, ("ьи", "ии")):
        # свиньи, инвестиции
        return replace_end(plural, 1, "я")
    if ends_with_any(plural, ("ки", "лы", "зы")):
        # копейки, свеклы, берёзы
        return replace_end(plural, 1, "а")
    if ends_with_any(plural, ("ты", "ры", "ги")):
        # центы, доллары, залоги
        return plural[:-1]
    return plural


def can_be_abbreviation(word: str, phrase: str | None = None) -> bool:
    nw = normalize(word)
    if nw in get_word_lists().abbreviations:
        return True
    if len(nw) > 1 and all(ch in lexicon.CONSONANTS for ch in nw):
        return True
    if nw and all(ch in lexicon.VOWELS for ch in nw):
        return True
    # uppercase word inside a mixed-case phrase
    return phrase is not None and is_upper_case(word) and is_mixed_case(phrase)


def can_be_human_abbreviation(word: str) -> bool:
    return normalize(word) in lexicon.HUMAN_ABBREVIATIONS
