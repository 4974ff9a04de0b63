"""Noun dictionary backed by pymorphy3 (OpenCorpora).

Implements the same lookup contract as the TSV dictionary, so either can
drive the inflection engine. Records are built on the fly from the
pymorphy3 lexeme of the best noun parse.
"""
import pymorphy3

from core.logging import data_logger

from .dictionary import DictionaryRecord, inflect_from
from .maps import ANIMACY_MAP, CASE_MAP_REV, GENDER_MAP, NUMBER_MAP_REV
from .text import normalize
from .types import Case, Gender

log = data_logger()

NOUN_POS = "NOUN"
INDECLINABLE_TAG = "Fixd"


def _tag_value(tag, mapping: dict):
    for grammeme, value in mapping.items():
        if grammeme in tag:
            return value
    return None


class PymorphyDictionary:
    """Dictionary lookups over pymorphy3 noun parses."""

    __slots__ = ("_morph",)

    def __init__(self, analyzer: pymorphy3.MorphAnalyzer | None = None):
        self._morph = analyzer or pymorphy3.MorphAnalyzer()
        log.info("pymorphy_dictionary_ready")

    def _noun_parses(self, key: str) -> list:
        return [p for p in self._morph.parse(key) if p.tag.POS == NOUN_POS]

    def _cases(self, parse, plural: bool) -> tuple[str, ...] | None:
        number = NUMBER_MAP_REV[plural]
        forms = []
        for case in list(Case)[1:]:
            inflected = parse.inflect({CASE_MAP_REV[case], number})
            if inflected is None:
                return None
            forms.append(inflected.word)
        return tuple(forms)

    def _form(self, parse, grammemes: set[str]) -> str | None:
        inflected = parse.inflect(grammemes)
        return inflected.word if inflected else None

    def _to_record(self, parse) -> DictionaryRecord:
        tag = parse.tag
        gender = _tag_value(tag, GENDER_MAP)
        animate = _tag_value(tag, ANIMACY_MAP)
        if INDECLINABLE_TAG in tag:
            return DictionaryRecord(gender, animate, True)
        is_plural_key = "plur" in tag and "nomn" in tag
        return DictionaryRecord(
            gender=gender,
            animate=animate,
            indeclinable=False,
            singular=self._form(parse, {"nomn", "sing"}),
            plural=self._form(parse, {"nomn", "plur"}),
            singular_cases=self._cases(parse, False),
            plural_cases=self._cases(parse, True),
            is_plural_key=is_plural_key,
        )

    def lookup(
        self,
        key: str,
        gender: Gender | None = None,
        animate: bool | None = None,
        plural: bool | None = None,
    ) -> DictionaryRecord | None:
        parses = [p for p in self._noun_parses(normalize(key)) if "nomn" in p.tag]
        if not parses:
            return None
        records = [self._to_record(p) for p in parses]
        for r in records:
            if (
                (gender is None or r.gender is gender)
                and (animate is None or r.animate == animate)
                and (plural is None or r.is_plural_key == plural)
            ):
                return r
        return records[0]

    def inflect(
        self,
        word: str,
        case: Case,
        gender: Gender | None = None,
        animate: bool | None = None,
        plural: bool | None = None,
    ) -> str | None:
        return inflect_from(self, word, case, gender, animate, plural)
