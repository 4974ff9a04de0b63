"""Suffix rules and the rule matcher.

A rule lists word endings it applies to and, for every case but the
nominative, a modifier in the petrovich mini-language:

    "."      keep the word as is
    "ой"     append the literal text
    "--ой"   strip one trailing character per "-", then append the rest
"""
from dataclasses import dataclass

from core.errors import AppErrorException, assertion_failed
from core.logging import engine_logger

from .types import Case, Gender, PartOfSpeech

log = engine_logger()

KEEP_MOD = "."
REMOVE_CHARACTER = "-"


def apply_mod(word: str, mod: str) -> str:
    """Change the ending of a word according to a modifier.

    >>> apply_mod("xxx", "--z")
    'xz'
    >>> apply_mod("xxx", "z")
    'xxxz'
    """
    if mod == KEEP_MOD:
        return word
    if REMOVE_CHARACTER not in mod:
        return word + mod
    stripped = len(mod) - len(mod.lstrip(REMOVE_CHARACTER))
    base = word[:len(word) - stripped] if stripped < len(word) else ""
    return base + mod[stripped:]


def _match_lenient(requested: bool | PartOfSpeech | None, declared: bool | PartOfSpeech | None) -> bool:
    return requested is None or declared is None or requested == declared


@dataclass(frozen=True, slots=True)
class Rule:
    test: tuple[str, ...]
    mods: tuple[str, ...]
    gender: Gender
    animate: bool | None = None
    plural: bool | None = None
    part_of_speech: PartOfSpeech | None = None

    def apply(self, case: Case, word: str) -> str:
        return apply_mod(word, self.mods[case.mod_index])

    def matches(self, word: str) -> bool:
        return any(word.endswith(suffix) for suffix in self.test)

    def match_gender(self, gender: Gender) -> bool:
        # NEUTER rules apply to every gender
        return self.gender is Gender.NEUTER or self.gender is gender

    def match_gender_strict(self, gender: Gender) -> bool:
        return self.gender is gender

    def accepts(
        self,
        gender: Gender,
        animate: bool | None,
        plural: bool | None,
        part_of_speech: PartOfSpeech | None,
    ) -> bool:
        return (
            self.match_gender(gender)
            and _match_lenient(animate, self.animate)
            and _match_lenient(plural, self.plural)
            and _match_lenient(part_of_speech, self.part_of_speech)
        )


@dataclass(frozen=True, slots=True)
class RuleTable:
    """Ordered exception rules, checked before the ordered suffix rules."""
    exceptions: tuple[Rule, ...]
    suffixes: tuple[Rule, ...]


def _select_rule(
    rules: tuple[Rule, ...],
    word: str,
    gender: Gender,
    animate: bool | None,
    plural: bool | None,
    part_of_speech: PartOfSpeech | None,
) -> Rule | None:
    candidates = [
        r for r in rules
        if r.accepts(gender, animate, plural, part_of_speech) and r.matches(word)
    ]
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]

    by_gender = [r for r in candidates if r.match_gender_strict(gender)]
    if not by_gender:
        by_gender = [r for r in candidates if r.match_gender_strict(Gender.NEUTER)]
    if not by_gender:
        log.error("rule_table_inconsistent", word=word, gender=gender.value, candidates=len(candidates))
        raise AppErrorException(assertion_failed(
            f"no gender-compatible rule among {len(candidates)} candidates for '{word}'",
            origin="rule_matcher",
            word=word,
        ).error)
    if len(by_gender) == 1:
        return by_gender[0]

    # Narrow by attributes the rules declare outright, animate first
    ranked = by_gender
    for requested, attribute in (
        (animate, "animate"),
        (plural, "plural"),
        (part_of_speech, "part_of_speech"),
    ):
        if requested is None:
            continue
        strict = [r for r in ranked if getattr(r, attribute) == requested]
        if len(strict) == 1:
            return strict[0]
        if strict:
            ranked = strict
    return ranked[0]


def find_rule(
    word: str,
    gender: Gender,
    table: RuleTable,
    *,
    animate: bool | None = None,
    plural: bool | None = None,
    part_of_speech: PartOfSpeech | None = None,
) -> Rule | None:
    """Pick the best rule for a normalized word, or None when nothing matches."""
    exception_rule = _select_rule(table.exceptions, word, gender, animate, plural, part_of_speech)
    if exception_rule is not None and exception_rule.match_gender_strict(gender):
        return exception_rule
    suffix_rule = _select_rule(table.suffixes, word, gender, animate, plural, part_of_speech)
    if suffix_rule is not None and suffix_rule.match_gender_strict(gender):
        return suffix_rule
    return exception_rule if exception_rule is not None else suffix_rule
