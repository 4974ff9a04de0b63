"""Recognition of Russian personal names: first names, patronymics, surnames."""
import re

from . import lexicon
from .library import get_word_lists
from .text import normalize
from .types import Gender

_INITIAL_LETTERS = "абвгдеёжзийклмнопрстуфхцчшщыэюя"
_INITIALS = re.compile(f"(?:[{_INITIAL_LETTERS}{_INITIAL_LETTERS.upper()}]\\.){{2}}")


def is_female_first_name(word: str) -> bool:
    return normalize(word) in get_word_lists().female_names


def is_male_first_name(word: str) -> bool:
    return normalize(word) in get_word_lists().male_names


def is_first_name(word: str) -> bool:
    return is_female_first_name(word) or is_male_first_name(word)


def can_be_female_patronymic(word: str) -> bool:
    return normalize(word).endswith(lexicon.FEMALE_PATRONYMIC_ENDINGS)


def can_be_male_patronymic(word: str) -> bool:
    return normalize(word).endswith(lexicon.MALE_PATRONYMIC_ENDINGS)


def can_be_patronymic(word: str) -> bool:
    return can_be_female_patronymic(word) or can_be_male_patronymic(word)


def can_be_female_surname(word: str) -> bool:
    return normalize(word).endswith(lexicon.FEMALE_SURNAME_ENDINGS)


def can_be_male_surname(word: str) -> bool:
    return normalize(word).endswith(lexicon.MALE_SURNAME_ENDINGS)


def can_be_surname(word: str) -> bool:
    return can_be_female_surname(word) or can_be_male_surname(word)


def can_be_initials(word: str) -> bool:
    """True for two dotted initials, e.g. "П.П."."""
    return _INITIALS.fullmatch(word) is not None


def guess_gender_by_first_name(name: str) -> Gender | None:
    if is_female_first_name(name):
        return Gender.FEMALE
    if is_male_first_name(name):
        return Gender.MALE
    return None


def guess_gender_by_patronymic(name: str) -> Gender | None:
    if can_be_female_patronymic(name):
        return Gender.FEMALE
    if can_be_male_patronymic(name):
        return Gender.MALE
    return None


def guess_gender_by_surname(name: str) -> Gender | None:
    if can_be_female_surname(name):
        return Gender.FEMALE
    if can_be_male_surname(name):
        return Gender.MALE
    return None


def guess_gender_by_full_name(parts: list[str]) -> Gender | None:
    """Guess gender from [surname, first name, patronymic]: first name wins, then patronymic, then surname."""
    if len(parts) > 1:
        g = guess_gender_by_first_name(parts[1])
        if g is not None:
            return g
    if len(parts) > 2:
        g = guess_gender_by_patronymic(parts[2])
        if g is not None:
            return g
    return guess_gender_by_surname(parts[0]) if parts else None
