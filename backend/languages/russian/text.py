"""String helpers shared by the inflection and spelling engines."""
from typing import Iterable


def normalize(s: str) -> str:
    """Lowercase key without surrounding whitespace."""
    return s.strip().lower()


def is_upper_case(s: str) -> bool:
    """True if every character is an uppercase letter."""
    return all(ch.isupper() for ch in s)


def is_mixed_case(s: str) -> bool:
    """True if the string has uppercase characters but is not all uppercase."""
    upper = sum(1 for ch in s if ch.isupper())
    return 0 < upper < len(s)


def _equals_ignore_case(a: str, b: str) -> bool:
    return a == b or a.upper() == b.upper()


def to_proper_case(template: str, s: str) -> str:
    """Format ``s`` according to the letter case of ``template``.

    Characters equal (ignoring case) to the template are copied from the
    template. From the first divergence on, the rest takes the case of the
    diverging template character; when ``s`` simply runs past the end of
    the template, the case of the template's last character is used.
    """
    limit = min(len(template), len(s))
    i = 0
    while i < limit and _equals_ignore_case(template[i], s[i]):
        i += 1
    res = template[:i]
    if i == len(s):
        return res
    if i < limit:
        upper = template[i].isupper()
    else:
        upper = bool(template) and template[-1].isupper()
    tail = s[i:]
    return res + (tail.upper() if upper else tail.lower())


def replace_end(orig: str, number_to_trim: int, ending: str) -> str:
    """Replace trailing characters, keeping them uppercase if they were."""
    cut = len(orig) - number_to_trim
    if is_upper_case(orig[cut:]):
        ending = ending.upper()
    return orig[:cut] + ending


def append_end(orig: str, ending: str) -> str:
    return orig + (ending.upper() if is_upper_case(orig) else ending)


def ends_with_any(word: str, endings: Iterable[str]) -> bool:
    w = word.lower()
    return any(w.endswith(e) for e in endings)


def ends_with_word(phrase: str, word: str) -> bool:
    """True if the last whitespace-separated word of ``phrase`` is ``word``."""
    return phrase == word or phrase.endswith(" " + word)


def _is_cyrillic(ch: str) -> bool:
    ch = ch.lower()
    return "а" <= ch <= "я" or ch == "ё"


def is_russian_word(word: str) -> bool:
    """True if the word has Cyrillic letters and no letters of other scripts."""
    letters = [ch for ch in word if ch.isalpha()]
    return bool(letters) and all(_is_cyrillic(ch) for ch in letters)
