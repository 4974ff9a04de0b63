"""Russian Numeral Spelling Engine

Spells decimal numbers as cardinal number-words and non-negative
integers as ordinal number-words, using the short scale (тысяча,
миллион, миллиард, ...) up to вигинтиллион.

    >>> SpellingEngine().spell(1024111)
    'один миллион двадцать четыре тысячи сто одиннадцать'
    >>> SpellingEngine().spell_ordinal(42000, Gender.MALE)
    'сорокадвухтысячный'
"""
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation

from core.errors import AppError, Result, invalid_format, out_of_range, required_field, try_result
from core.logging import engine_logger

from .grammar import select
from .lexicon import BIG_NUMERALS
from .types import Gender, coerce_enum

log = engine_logger()

ORIGIN = "spelling_engine"

HUNDREDS = ("сто", "двести", "триста", "четыреста", "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот")
TENS = ("двадцать", "тридцать", "сорок", "пятьдесят", "шестьдесят", "семьдесят", "восемьдесят", "девяносто")

_TEEN_BASES = (
    "одиннадцат", "двенадцат", "тринадцат", "четырнадцат", "пятнадцат", "шестнадцат", "семнадцат",
    "восемнадцат", "девятнадцат",
)
UNITS = (
    "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять", "десять",
    *(b + "ь" for b in _TEEN_BASES),
)

_ORDINAL_HUNDRED_BASES = (
    "сот", "двухсот", "трёхсот", "четырёхсот", "пятисот", "шестисот", "семисот", "восьмисот", "девятисот",
)
ORDINAL_HUNDREDS = {
    Gender.FEMALE: tuple(b + "ая" for b in _ORDINAL_HUNDRED_BASES),
    Gender.NEUTER: tuple(b + "ое" for b in _ORDINAL_HUNDRED_BASES),
    Gender.MALE: tuple(b + "ый" for b in _ORDINAL_HUNDRED_BASES),
}
ORDINAL_TENS = {
    Gender.FEMALE: (
        "двадцатая", "тридцатая", "сороковая", "пятидесятая", "шестидесятая", "семидесятая", "восьмидесятая",
        "девяностая",
    ),
    Gender.NEUTER: (
        "двадцатое", "тридцатое", "сороковое", "пятидесятое", "шестидесятое", "семидесятое", "восьмидесятое",
        "девяностое",
    ),
    Gender.MALE: (
        "двадцатый", "тридцатый", "сороковой", "пятидесятый", "шестидесятый", "семидесятый", "восьмидесятый",
        "девяностый",
    ),
}
ORDINAL_UNITS = {
    Gender.FEMALE: (
        "первая", "вторая", "третья", "четвёртая", "пятая", "шестая", "седьмая", "восьмая", "девятая", "десятая",
        *(b + "ая" for b in _TEEN_BASES),
    ),
    Gender.NEUTER: (
        "первое", "второе", "третье", "четвёртое", "пятое", "шестое", "седьмое", "восьмое", "девятое", "десятое",
        *(b + "ое" for b in _TEEN_BASES),
    ),
    Gender.MALE: (
        "первый", "второй", "третий", "четвёртый", "пятый", "шестой", "седьмой", "восьмой", "девятый", "десятый",
        *(b + "ый" for b in _TEEN_BASES),
    ),
}

# Stems of fused ordinals: двухсоттысячный, сорокамиллионный, тридцатипятитысячный
HUNDRED_PREFIXES = (
    "сто", "двухсот", "трёхсот", "четырёхсот", "пятисот", "шестисот", "семисот", "восьмисот", "девятисот",
)
TEN_PREFIXES = (
    "двадцати", "тридцати", "сорока", "пятидесяти", "шестидесяти", "семидесяти", "восьмидесяти", "девяносто",
)
UNIT_PREFIXES = (
    "одно", "двух", "трёх", "четырёх", "пяти", "шести", "семи", "восьми", "девяти", "десяти",
    *(b + "и" for b in _TEEN_BASES),
)

ZERO = "ноль"
MINUS = "минус"
ORDINAL_ZERO = ("нулевая", "нулевое", "нулевой")

MAX_TRIPLES = len(BIG_NUMERALS) + 1
MAX_SCALE = len(BIG_NUMERALS) * 3 + 2

_CONTEXT = Context(prec=MAX_TRIPLES * 3 + MAX_SCALE + 10, rounding=ROUND_HALF_EVEN)

Triple = tuple[int, int, int]


def to_triples(n: int) -> list[int]:
    """Base-1000 digits, most significant first; empty for zero."""
    res = []
    while n:
        n, r = divmod(n, 1000)
        res.append(r)
    res.reverse()
    return res


def to_triple(n: int) -> Triple:
    """Split 0..999 into (hundreds, tens, units); 10..19 stay whole in the units slot."""
    hundreds, n = divmod(n, 100)
    if n < 20:
        return hundreds, 0, n
    tens, units = divmod(n, 10)
    return hundreds, tens, units


def _is_two_three_four(n: int) -> bool:
    return n in (2, 3, 4)


def _split_decimal(number: Decimal) -> tuple[int, int, int]:
    """Return (integer part, fraction digits as an integer, fraction digit count)."""
    _, digits, exponent = number.as_tuple()
    s = "".join(map(str, digits))
    if exponent >= 0:
        return int(s) * 10 ** exponent, 0, 0
    scale = -exponent
    s = s.rjust(scale + 1, "0")
    return int(s[:-scale]), int(s[-scale:]), scale


class SpellingEngine:
    """Cardinal and ordinal numeral speller.

    Args:
        strip_trailing_zeros: drop trailing fraction zeros before spelling ("1.50" as "1.5")
        trim_fraction: round fractions deeper than the supported scale instead of failing
    """

    __slots__ = ("strip_trailing_zeros", "trim_fraction")

    def __init__(self, strip_trailing_zeros: bool = True, trim_fraction: bool = True):
        self.strip_trailing_zeros = strip_trailing_zeros
        self.trim_fraction = trim_fraction

    # === Cardinal ===

    def spell(self, number: Decimal | int | float | str) -> str:
        """Spell a number as cardinal words ("минус сорок два", "одна целая пять десятых")."""
        number = self._to_decimal(number)
        if number.is_zero():
            return ZERO
        words = []
        if number.is_signed():
            words.append(MINUS)
        number = number.copy_abs()
        if self.strip_trailing_zeros:
            number = number.normalize(_CONTEXT)

        integer, fraction, scale = _split_decimal(number)
        integer_triples = to_triples(integer) or [0]
        if len(integer_triples) > MAX_TRIPLES:
            out_of_range("number", str(number), max_val=f"{MAX_TRIPLES * 3} integer digits", origin=ORIGIN).unwrap()
        if scale > MAX_SCALE:
            if not self.trim_fraction or integer == 0:
                out_of_range("number", str(number), max_val=f"{MAX_SCALE} fraction digits", origin=ORIGIN).unwrap()
            number = number.quantize(Decimal(1).scaleb(-MAX_SCALE), context=_CONTEXT)
            integer, fraction, scale = _split_decimal(number)
        fraction_triples = to_triples(fraction)

        last = self._spell_triples(words, integer_triples, bool(fraction_triples))
        if fraction_triples:
            if last == (0, 0, 0):
                if len(integer_triples) == 1:
                    words.append(ZERO)
                words.append("целых")
            else:
                words.append("целая" if last[2] == 1 else "целых")
            t = self._spell_triples(words, fraction_triples, True)
            words.append(self._fraction_suffix(t, scale))

        res = " ".join(words)
        log.debug("numeral_spelled", number=str(number), result=res)
        return res

    def _spell_triples(
        self, words: list[str], triples: list[int], has_fraction: bool, stop: int | None = None
    ) -> Triple:
        """Append cardinal words for ``triples[:stop]`` with magnitude words; return the last triple."""
        t: Triple = (0, 0, 0)
        for i in range(len(triples) if stop is None else stop):
            t = to_triple(triples[i])
            if t == (0, 0, 0):
                continue
            big_index = len(triples) - 2 - i
            words.append(self._triple_words(t, big_index == 0 or (big_index < 0 and has_fraction)))
            big = self._magnitude(t, big_index)
            if big:
                words.append(big)
        return t

    @staticmethod
    def _triple_words(t: Triple, feminine: bool) -> str:
        res = []
        if t[0]:
            res.append(HUNDREDS[t[0] - 1])
        if t[1]:
            res.append(TENS[t[1] - 2])
        if t[2]:
            # одна тысяча, две целых; but один миллион, два миллиарда
            if feminine and t[2] == 1:
                res.append("одна")
            elif feminine and t[2] == 2:
                res.append("две")
            else:
                res.append(UNITS[t[2] - 1])
        return " ".join(res)

    @staticmethod
    def _magnitude(t: Triple, index: int) -> str | None:
        if index > 0:
            big = BIG_NUMERALS[index]
            if t[2] != 1:
                big += "а" if _is_two_three_four(t[2]) else "ов"
            return big
        if index == 0:
            if t[2] == 1:
                return "тысяча"
            return "тысячи" if _is_two_three_four(t[2]) else "тысяч"
        return None

    @staticmethod
    def _fraction_suffix(t: Triple, digits: int) -> str:
        index = digits // 3 - 1
        rest = digits % 3
        one = t[2] == 1
        suffix = ""
        if rest == 1:
            suffix = ("десятая" if one else "десятых") if index < 0 else "десяти"
        elif rest == 2:
            suffix = ("сотая" if one else "сотых") if index < 0 else "сто"
        if index == 0:
            suffix += "тысячная" if one else "тысячных"
        elif index > 0:
            suffix += BIG_NUMERALS[index] + ("ная" if one else "ных")
        return suffix

    # === Ordinal ===

    def spell_ordinal(self, number: int | str, gender: Gender | str = Gender.MALE) -> str:
        """Spell a non-negative integer as an ordinal agreeing with ``gender``.

        Compound ordinals are written apart ("сорок второй"); ordinals of
        round thousands, millions, ... are fused ("двухмиллионный").
        """
        number = self._to_int(number)
        gender = coerce_enum(Gender, gender, "gender", ORIGIN)
        if number < 0:
            out_of_range("number", number, min_val=0, origin=ORIGIN).unwrap()
        if number == 0:
            return select(*ORDINAL_ZERO, gender)

        triples = to_triples(number)
        if len(triples) > MAX_TRIPLES:
            out_of_range("number", number, max_val=f"{MAX_TRIPLES * 3} digits", origin=ORIGIN).unwrap()
        words: list[str] = []
        last = len(triples) - 1
        if triples[last]:
            # тысяча девятьсот девяносто первый
            self._spell_triples(words, triples, False, last)
            words.append(self._ordinal_triple(to_triple(triples[last]), gender))
        else:
            # сорокадвухтысячный, пятидесятичетырёхмиллионный
            last = max(i for i, v in enumerate(triples) if v)
            self._spell_triples(words, triples, False, last)
            words.append(self._fused_ordinal(to_triple(triples[last]), gender, len(triples) - last - 1))
        res = " ".join(words)
        log.debug("ordinal_spelled", number=number, gender=gender.value, result=res)
        return res

    @staticmethod
    def _ordinal_triple(t: Triple, gender: Gender) -> str:
        res = []
        if t[0]:
            if not t[1] and not t[2]:
                return ORDINAL_HUNDREDS[gender][t[0] - 1]
            res.append(HUNDREDS[t[0] - 1])
        if t[1]:
            if not t[2]:
                res.append(ORDINAL_TENS[gender][t[1] - 2])
                return " ".join(res)
            res.append(TENS[t[1] - 2])
        res.append(ORDINAL_UNITS[gender][t[2] - 1])
        return " ".join(res)

    @staticmethod
    def _fused_ordinal(t: Triple, gender: Gender, rank: int) -> str:
        res = ""
        if t[0]:
            res += HUNDRED_PREFIXES[t[0] - 1]
        if t[1]:
            res += TEN_PREFIXES[t[1] - 2]
        # a lone one is implied: тысячный, миллионный
        if t[2] and t != (0, 0, 1):
            res += UNIT_PREFIXES[t[2] - 1]
        big = "тысяч" if rank == 1 else BIG_NUMERALS[rank - 1]
        return res + big + select("ная", "ное", "ный", gender)

    # === Input conversion ===

    @staticmethod
    def _to_decimal(number) -> Decimal:
        if number is None or (isinstance(number, str) and not number.strip()):
            required_field("number", origin=ORIGIN).unwrap()
        if isinstance(number, bool):
            invalid_format("number", "a decimal number", str(number), origin=ORIGIN).unwrap()
        if isinstance(number, Decimal):
            res = number
        elif isinstance(number, (int, float, str)):
            try:
                res = Decimal(str(number).strip().replace(",", ".").replace("_", ""))
            except InvalidOperation:
                invalid_format("number", "a decimal number", str(number), origin=ORIGIN).unwrap()
        else:
            invalid_format("number", "a decimal number", repr(number), origin=ORIGIN).unwrap()
        if not res.is_finite():
            invalid_format("number", "a finite decimal number", str(number), origin=ORIGIN).unwrap()
        return res

    @staticmethod
    def _to_int(number) -> int:
        if number is None or (isinstance(number, str) and not number.strip()):
            required_field("number", origin=ORIGIN).unwrap()
        if isinstance(number, int) and not isinstance(number, bool):
            return number
        if isinstance(number, str):
            try:
                return int(number.strip().replace("_", ""))
            except ValueError:
                pass
        invalid_format("number", "an integer", str(number), origin=ORIGIN).unwrap()

    # === Result variants ===

    def spell_result(self, number: Decimal | int | float | str) -> Result[str, AppError]:
        return try_result(lambda: self.spell(number), origin=ORIGIN)

    def spell_ordinal_result(self, number: int | str, gender: Gender | str = Gender.MALE) -> Result[str, AppError]:
        return try_result(lambda: self.spell_ordinal(number, gender), origin=ORIGIN)
