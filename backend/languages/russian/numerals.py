"""Classification and gender agreement of spelled-out numerals."""
from . import lexicon
from .grammar import select
from .text import ends_with_any, ends_with_word, normalize, replace_end, to_proper_case
from .types import Gender


def can_be_fraction(phrase: str) -> bool:
    nw = normalize(phrase)
    return " целых " in nw or "одна целая " in nw


def can_be_ordinal(phrase: str) -> bool:
    return ends_with_any(phrase.strip(), lexicon.ORDINAL_ENDINGS) and not can_be_fraction(phrase)


def is_big_or_zero(word: str) -> bool:
    """True for words after which "целых" stays unchanged ("два миллиона целых")."""
    nw = normalize(word)
    if nw in ("ноль", "тысячи", "тысяч"):
        return True
    return any(nw.startswith(big) for big in lexicon.BIG_NUMERALS)


def guess_gender_of_numeral(word: str) -> Gender:
    nw = normalize(word)
    if nw in lexicon.MALE_NUMERALS or nw.endswith("ый"):
        return Gender.MALE
    if nw in lexicon.FEMALE_NUMERALS or nw.endswith("ая"):
        return Gender.FEMALE
    return Gender.NEUTER


def change_gender_of_cardinal(numeral: str, gender: Gender) -> str:
    match normalize(numeral):
        case "один":
            return to_proper_case(numeral, select("одна", "одно", "один", gender))
        case "два":
            return to_proper_case(numeral, select("две", "два", "два", gender))
    return numeral


def change_gender_of_ordinal(numeral: str, gender: Gender) -> str:
    nw = normalize(numeral)
    if nw == "третий":
        return to_proper_case(numeral, select("третья", "третье", "третий", gender))
    # четвёртый/четвёртое/четвёртая, седьмой/седьмое/седьмая
    ending = select("ая", "ое", "ый" if nw.endswith("ый") else "ой", gender)
    return to_proper_case(numeral, replace_end(nw, 2, ending))


def is_zero(phrase: str) -> bool:
    return normalize(phrase) == "ноль"


def ends_with_cardinal_one(phrase: str) -> bool:
    nw = normalize(phrase)
    return any(ends_with_word(nw, w) for w in ("один", "одна", "одно"))


def ends_with_two_three_four(phrase: str) -> bool:
    nw = normalize(phrase)
    return any(ends_with_word(nw, w) for w in ("два", "две", "три", "четыре"))
