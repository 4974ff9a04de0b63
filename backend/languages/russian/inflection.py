"""Russian Case Inflection Engine

Declines single words, personal names, free-text phrases (job titles,
organization names) and spelled-out numerals with their units.

Generic nouns are looked up in the noun dictionary first; everything
else goes through the petrovich-style suffix rules. The original letter
case of each word is reimposed on the result.
"""
from core.errors import AppError, Result, invalid_format, required_field, try_result
from core.logging import engine_logger

from . import grammar, names, numerals
from .dictionary import Dictionary, NounDictionary
from .library import RuleLibrary, get_rule_library
from .phrase import parse_phrase
from .rules import find_rule
from .text import normalize, to_proper_case
from .types import Case, Gender, PartOfSpeech, WordType, coerce_enum

log = engine_logger()

ORIGIN = "inflection_engine"


def _require(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        required_field(field, origin=ORIGIN).unwrap()
    return value


def _split(phrase: str | None, field: str) -> list[str]:
    return _require(phrase, field).split()


class InflectionEngine:
    """Declines words, names, phrases and numerals into a grammatical case.

    The engine is stateless apart from the read-only rule library and
    dictionary, so one instance can be shared between threads.
    """

    __slots__ = ("_dictionary", "_library")

    def __init__(self, dictionary: Dictionary | None = None, library: RuleLibrary | None = None):
        self._dictionary = dictionary
        self._library = library

    @property
    def dictionary(self) -> Dictionary:
        if self._dictionary is None:
            self._dictionary = NounDictionary()
        return self._dictionary

    @property
    def library(self) -> RuleLibrary:
        if self._library is None:
            self._library = get_rule_library()
        return self._library

    # === Single words ===

    def inflect(
        self,
        word: str,
        word_type: WordType | str,
        case: Case | str,
        gender: Gender | str | None = None,
        animate: bool | None = None,
        plural: bool | None = None,
    ) -> str:
        """Decline one word; unknown words come back unchanged."""
        _require(word, "word")
        case = coerce_enum(Case, case, "case", ORIGIN)
        word_type = coerce_enum(WordType, word_type, "word_type", ORIGIN)
        gender = coerce_enum(Gender, gender, "gender", ORIGIN) if gender is not None else Gender.MALE
        if case is Case.NOMINATIVE:
            return word
        return self._process(word, word_type, case, gender, animate, plural)

    def inflect_first_name(self, name: str, case: Case | str, gender: Gender | str | None = None) -> str:
        return self._inflect_name(name, WordType.FIRST_NAME, case, gender, names.guess_gender_by_first_name)

    def inflect_patronymic(self, name: str, case: Case | str, gender: Gender | str | None = None) -> str:
        return self._inflect_name(name, WordType.PATRONYMIC_NAME, case, gender, names.guess_gender_by_patronymic)

    def inflect_surname(self, name: str, case: Case | str, gender: Gender | str | None = None) -> str:
        return self._inflect_name(name, WordType.FAMILY_NAME, case, gender, names.guess_gender_by_surname)

    def _inflect_name(self, name, word_type, case, gender, guess) -> str:
        _require(name, "name")
        case = coerce_enum(Case, case, "case", ORIGIN)
        if gender is None:
            gender = guess(name) or Gender.MALE
        else:
            gender = coerce_enum(Gender, gender, "gender", ORIGIN)
        if case is Case.NOMINATIVE:
            return name
        return self._process(name, word_type, case, gender, True, False)

    # === Full names ===

    def inflect_full_name(self, spf: str, case: Case | str) -> str:
        """Decline "Surname Firstname Patronymic" (any trailing parts may be missing)."""
        return " ".join(self.inflect_spf(_split(spf, "full_name"), case))

    def inflect_spf(self, spf: list[str], case: Case | str, gender: Gender | str | None = None) -> list[str]:
        """Decline [surname, first name, patronymic]; gender is guessed when not given."""
        case = coerce_enum(Case, case, "case", ORIGIN)
        if not spf or len(spf) > 3:
            invalid_format("full_name", "surname, first name and patronymic", " ".join(spf or []), origin=ORIGIN).unwrap()
        for part in spf:
            _require(part, "full_name")
        if gender is None:
            gender = names.guess_gender_by_full_name(spf) or Gender.MALE
        else:
            gender = coerce_enum(Gender, gender, "gender", ORIGIN)
        if case is Case.NOMINATIVE:
            return list(spf)
        res = []
        for part, word_type in zip(spf, (WordType.FAMILY_NAME, WordType.FIRST_NAME, WordType.PATRONYMIC_NAME)):
            res.append(self._process(part, word_type, case, gender, True, False))
        return res

    # === Phrases ===

    def inflect_name_of_profession(self, profession: str, case: Case | str) -> str:
        return self.inflect_regular_term(profession, case, True)

    def inflect_name_of_organization(self, organization: str, case: Case | str) -> str:
        return self.inflect_regular_term(organization, case, False)

    def inflect_regular_term(self, phrase: str, case: Case | str, animate: bool | None = None) -> str:
        """Decline a free-text phrase: its subject, the adjectives around it, or a personal name in it.

        Only the first noun group declines; words after it (prepositional
        clauses, quoted names) are kept verbatim with their spacing.
        """
        _require(phrase, "phrase")
        case = coerce_enum(Case, case, "case", ORIGIN)
        if case is Case.NOMINATIVE:
            return phrase
        p = parse_phrase(phrase, self.dictionary, None, animate)
        keys = []
        for token in p.tokens:
            if not token.declinable:
                keys.append(token.key)
                continue
            keys.append(self._process(
                token.key, token.word_type, case, token.gender or Gender.MALE,
                token.animate, token.plural, token.part_of_speech,
            ))
        res = p.compose(keys)
        log.debug("phrase_inflected", phrase=phrase, case=case.value, result=res)
        return res

    def inflect_any(self, phrase: str, case: Case | str) -> str:
        """Decline a full name if the phrase looks like one, otherwise a regular term."""
        parts = _split(phrase, "phrase")
        case = coerce_enum(Case, case, "case", ORIGIN)
        if len(parts) < 4 and (
            (len(parts) > 1 and names.is_first_name(parts[1]))
            or (len(parts) == 1 and names.can_be_surname(parts[0]))
            or (len(parts) == 3 and names.can_be_patronymic(parts[2]) and names.can_be_surname(parts[0]))
        ):
            return self.inflect_full_name(phrase, case)
        return self.inflect_regular_term(phrase, case)

    # === Numerals ===

    def inflect_numeral(self, numeral: str, case: Case | str, unit: str | None = None) -> str:
        """Decline a spelled-out numeral, optionally followed by the unit it counts."""
        parts = _split(numeral, "numeral")
        case = coerce_enum(Case, case, "case", ORIGIN)
        if unit is None:
            if case is Case.NOMINATIVE:
                return numeral
            if numerals.can_be_ordinal(numeral):
                gender = grammar.guess_gender_of_adjective(parts[-1]) or Gender.MALE
                return self._inflect_ordinal(parts, case, gender, False)
            return self._inflect_cardinal(parts, case, None)

        _require(unit, "unit")
        record = self.dictionary.lookup(unit)
        gender = record.gender if record is not None and record.gender else grammar.guess_gender_of_singular_noun(unit)
        animate = record.animate if record is not None else None

        if numerals.can_be_ordinal(numeral):
            parts[-1] = numerals.change_gender_of_ordinal(parts[-1], gender)
            if case is Case.NOMINATIVE:
                res = " ".join(parts)
            else:
                res = self._inflect_ordinal(parts, case, gender, animate)
            return res + " " + self.inflect(unit, WordType.GENERIC, case, gender, animate)

        parts[-1] = numerals.change_gender_of_cardinal(parts[-1], gender)
        if case is Case.NOMINATIVE:
            res = " ".join(parts)
        else:
            # fractions never count animate things
            res = self._inflect_cardinal(parts, case, False if numerals.can_be_fraction(numeral) else animate)
        return res + " " + self._inflect_unit(unit, numeral, case, gender, animate)

    def _inflect_unit(self, unit: str, numeral: str, case: Case, gender: Gender, animate: bool | None) -> str:
        if numerals.is_zero(numeral):
            # ноль рублей, ноля рублей, нолю рублей
            return self._process(unit, WordType.GENERIC, Case.GENITIVE, gender, animate, True)
        if numerals.can_be_fraction(numeral):
            # одна целая пять десятых рубля
            return self._process(unit, WordType.GENERIC, Case.GENITIVE, gender, False, False)
        if numerals.ends_with_cardinal_one(numeral):
            # один рубль, одного рубля, одному рублю
            return self._process(unit, WordType.GENERIC, case, gender, animate, False)
        if numerals.ends_with_two_three_four(numeral):
            # сорок два рубля, сорока двух рублей, сорока двум рублям
            if case is Case.NOMINATIVE or (not animate and case is Case.ACCUSATIVE):
                return self._process(unit, WordType.GENERIC, Case.GENITIVE, gender, animate, False)
            return self._process(unit, WordType.GENERIC, case, gender, animate, True)
        # десять рублей, десяти рублей, десяти рублям
        if case in (Case.NOMINATIVE, Case.ACCUSATIVE):
            case = Case.GENITIVE
        return self._process(unit, WordType.GENERIC, case, gender, animate, True)

    def _inflect_cardinal(self, parts: list[str], case: Case, animate: bool | None) -> str:
        res = []
        for i, w in enumerate(parts):
            # ноль целых, два миллиона целых
            if i > 0 and normalize(w) == "целых" and numerals.is_big_or_zero(parts[i - 1]):
                res.append(w)
                continue
            # each word has its own gender: "одна тысяча один"
            res.append(self._process(w, WordType.NUMERAL, case, numerals.guess_gender_of_numeral(w), animate, None))
        return " ".join(res)

    def _inflect_ordinal(self, parts: list[str], case: Case, gender: Gender, animate: bool | None) -> str:
        parts = list(parts)
        parts[-1] = self._process(parts[-1], WordType.GENERIC, case, gender, animate, False)
        return " ".join(parts)

    # === Core ===

    def _process(
        self,
        word: str,
        word_type: WordType,
        case: Case,
        gender: Gender,
        animate: bool | None,
        plural: bool | None,
        part_of_speech: PartOfSpeech | None = None,
    ) -> str:
        word = word.strip()
        if word_type is WordType.GENERIC:
            res = self.dictionary.inflect(word, case, gender, animate, plural)
            if res is not None:
                log.debug("word_inflected", word=word, case=case.value, source="dictionary", result=res)
                return to_proper_case(word, res)

        key = normalize(word)
        if word_type is WordType.GENERIC and plural:
            key = grammar.to_plural_noun(key)
        if case is Case.NOMINATIVE:
            return to_proper_case(word, key)

        rule = find_rule(
            key, gender, self.library.table(word_type),
            animate=animate, plural=plural, part_of_speech=part_of_speech,
        )
        if rule is None:
            log.debug("word_not_inflected", word=word, word_type=word_type.value, case=case.value)
            return word
        res = to_proper_case(word, rule.apply(case, key))
        log.debug("word_inflected", word=word, case=case.value, source="rules", result=res)
        return res

    # === Result variants ===

    def inflect_result(self, word: str, word_type: WordType | str, case: Case | str, **kwargs) -> Result[str, AppError]:
        return try_result(lambda: self.inflect(word, word_type, case, **kwargs), origin=ORIGIN)

    def inflect_full_name_result(self, spf: str, case: Case | str) -> Result[str, AppError]:
        return try_result(lambda: self.inflect_full_name(spf, case), origin=ORIGIN)

    def inflect_regular_term_result(
        self, phrase: str, case: Case | str, animate: bool | None = None
    ) -> Result[str, AppError]:
        return try_result(lambda: self.inflect_regular_term(phrase, case, animate), origin=ORIGIN)

    def inflect_any_result(self, phrase: str, case: Case | str) -> Result[str, AppError]:
        return try_result(lambda: self.inflect_any(phrase, case), origin=ORIGIN)

    def inflect_numeral_result(self, numeral: str, case: Case | str, unit: str | None = None) -> Result[str, AppError]:
        return try_result(lambda: self.inflect_numeral(numeral, case, unit), origin=ORIGIN)
