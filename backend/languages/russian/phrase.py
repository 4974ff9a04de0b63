"""Phrase parsing: tokenization, subject detection and attribute inference.

A phrase such as "Главный инженер по охране труда" is split into tokens
that keep their exact separators. ``PhraseAssembler.compile`` then finds
the grammatical subject, infers gender, animacy and number for it, and
marks which tokens are declinable. Everything after the declinable span
is left as is.
"""
from dataclasses import dataclass, field

from core.logging import engine_logger

from . import grammar, names
from .dictionary import Dictionary, DictionaryRecord
from .text import is_russian_word, normalize, to_proper_case
from .types import Gender, PartOfSpeech, WordType

log = engine_logger()

STOP_SYMBOLS = frozenset("'\"«")


@dataclass(slots=True)
class Token:
    """One word of a phrase and what is known about it."""
    raw: str
    key: str = ""
    space: str = ""
    gender: Gender | None = None
    animate: bool | None = None
    plural: bool | None = None
    indeclinable: bool | None = None
    part_of_speech: PartOfSpeech | None = None
    word_type: WordType = WordType.GENERIC
    record: DictionaryRecord | None = None
    not_found: bool = False

    def __post_init__(self):
        if not self.key:
            self.key = normalize(self.raw)

    @property
    def declinable(self) -> bool:
        return self.indeclinable is False

    def fill_missing(
        self,
        gender: Gender | None,
        part_of_speech: PartOfSpeech | None,
        animate: bool | None,
        indeclinable: bool,
        plural: bool | None = None,
    ) -> None:
        if self.gender is None:
            self.gender = gender
        if self.part_of_speech is None:
            self.part_of_speech = part_of_speech
        if self.animate is None:
            self.animate = animate
        if self.indeclinable is None:
            self.indeclinable = indeclinable
        if self.plural is None:
            self.plural = plural


@dataclass(frozen=True, slots=True)
class Phrase:
    """Compiled phrase. ``separators`` has one more item than ``tokens``."""
    raw: str
    tokens: tuple[Token, ...]
    separators: tuple[str, ...]
    gender: Gender | None = None
    animate: bool | None = None
    plural: bool | None = None

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def words(self) -> list[str]:
        return [t.raw for t in self.tokens]

    @property
    def keys(self) -> list[str]:
        return [t.key for t in self.tokens]

    def compose(self, keys: list[str] | None = None) -> str:
        """Glue the phrase back, imposing each original word's letter case on its key."""
        keys = self.keys if keys is None else keys
        if len(keys) != len(self.tokens) or len(self.separators) != len(self.tokens) + 1:
            raise ValueError("keys do not match phrase tokens")
        res = [self.separators[0]]
        for token, key, sep in zip(self.tokens, keys, self.separators[1:]):
            res.append(to_proper_case(token.raw, key))
            res.append(sep)
        return "".join(res)


@dataclass(slots=True)
class PhraseAssembler:
    """Mutable builder for ``Phrase``; one instance per inflection call."""
    raw: str
    tokens: list[Token] = field(default_factory=list)
    leading_space: str = ""
    trailing_space: str = ""
    gender: Gender | None = None
    animate: bool | None = None
    subject_start: int = 0
    # differs from subject_start for hyphenated nouns ("сестра-анестезист")
    subject_end: int = 0
    end: int = 0
    dictionary: Dictionary | None = None

    @classmethod
    def split(cls, phrase: str) -> "PhraseAssembler":
        """Tokenize on whitespace runs; from a stop symbol on, the rest is one token."""
        res = cls(raw=phrase)
        n = len(phrase)
        i = 0
        sep_start = 0
        while i < n:
            while i < n and phrase[i].isspace():
                i += 1
            if i == n:
                break
            separator = phrase[sep_start:i]
            if res.tokens:
                res.tokens[-1].space = separator
            else:
                res.leading_space = separator
            if phrase[i] in STOP_SYMBOLS:
                j = len(phrase.rstrip())
                res.tokens.append(Token(phrase[i:j], indeclinable=True))
                sep_start = i = j
                break
            start = i
            while i < n and not phrase[i].isspace():
                i += 1
            res.tokens.append(Token(phrase[start:i]))
            sep_start = i
        if res.tokens:
            res.trailing_space = phrase[sep_start:]
        return res

    def is_empty(self) -> bool:
        return not self.tokens

    def compile(
        self,
        dictionary: Dictionary,
        gender: Gender | None = None,
        animate: bool | None = None,
    ) -> "PhraseAssembler":
        """Find the subject and mark the declinable span."""
        self.dictionary = dictionary
        self._fill_missing(gender, animate)

        if grammar.is_preposition(self.tokens[0].key):
            for t in self.tokens:
                t.fill_missing(self.gender, None, self.animate, True)
            return self

        self._process_pre_subject()
        self._process_subject()
        self._process_post_subject()

        plural = self.tokens[self.subject_start].plural
        for i, t in enumerate(self.tokens):
            t.fill_missing(self.gender, None, self.animate, i > self.end, plural if i <= self.end else None)
        log.debug(
            "phrase_compiled",
            phrase=self.raw,
            subject=self.tokens[self.subject_start].raw,
            gender=self.gender.value if self.gender else None,
            animate=self.animate,
            declinable=sum(1 for t in self.tokens if t.declinable),
        )
        return self

    def to_phrase(self) -> Phrase:
        separators = [self.leading_space]
        separators.extend(t.space for t in self.tokens[:-1])
        separators.append(self.trailing_space)
        subject = self.tokens[self.subject_start] if self.tokens else None
        return Phrase(
            raw=self.raw,
            tokens=tuple(self.tokens),
            separators=tuple(separators),
            gender=self.gender,
            animate=self.animate,
            plural=subject.plural if subject else None,
        )

    def _fill_missing(self, gender: Gender | None, animate: bool | None) -> None:
        if self.animate is None:
            self.animate = animate
        if self.gender is None:
            self.gender = gender

    def _gender_open_to(self, gender: Gender) -> bool:
        return self.gender is None or self.gender is gender

    def _process_pre_subject(self) -> None:
        self.subject_start = 0
        for index, token in enumerate(self.tokens):
            if not is_russian_word(token.raw):
                token.indeclinable = True
                continue
            has_next = index + 1 < len(self.tokens)
            if grammar.can_be_abbreviation(token.raw, self.raw):
                token.fill_missing(self.gender, PartOfSpeech.NOUN, self.animate, True)
                # "ИП Иванов"
                if grammar.can_be_human_abbreviation(token.raw) and has_next and self._handle_human_name(index + 1, True):
                    return
                # "ПАО 'Финансовая корпорация'"
                self.subject_start = index
                return
            if self.animate is not False and self._handle_human_name(index, False):
                return
            # "Термист по обработке слюды"
            if has_next and grammar.is_preposition(self.tokens[index + 1].key):
                self.tokens[index + 1].fill_missing(None, PartOfSpeech.PREPOSITION, None, True)
                self.subject_start = index
                return
            # leading adjectives are skipped; a substantivized one is the subject itself
            if self._gender_open_to(Gender.MALE) and grammar.can_be_singular_nominative_adjective(token.raw, Gender.MALE):
                self.gender = Gender.MALE
                if grammar.is_male_substantive(token.raw):
                    self.subject_start = index
                    return
                token.part_of_speech = PartOfSpeech.ADJECTIVE
                continue
            if self._gender_open_to(Gender.FEMALE) and grammar.can_be_singular_nominative_adjective(token.raw, Gender.FEMALE):
                self.gender = Gender.FEMALE
                if grammar.is_female_substantive(token.raw):
                    self.subject_start = index
                    return
                token.part_of_speech = PartOfSpeech.ADJECTIVE
                continue
            if self._gender_open_to(Gender.NEUTER) and grammar.can_be_singular_nominative_adjective(token.raw, Gender.NEUTER):
                self.gender = Gender.NEUTER
                token.part_of_speech = PartOfSpeech.ADJECTIVE
                continue
            self.subject_start = index
            return

    def _process_subject(self) -> None:
        index = self.subject_start
        self.subject_end = index
        subject = self.tokens[index]
        if subject.indeclinable:
            # quoted names stay as written
            return
        self._process_noun(subject, self.gender, self.animate)
        if subject.record is not None or "-" not in subject.key:
            self._fill_missing(subject.gender, subject.animate)
            return

        # "альфа-лучи", "лётчик-наблюдатель", "сестра-анестезист"
        pieces = subject.raw.split("-")
        gender = self.gender
        parts: list[Token] = []
        for i, piece in enumerate(pieces):
            part = Token(piece)
            self._process_noun(part, gender, self.animate)
            if i > 0 and self.gender is not Gender.MALE and part.record is None:
                # the second part is usually masculine
                gender = Gender.MALE
                self._process_noun(part, gender, self.animate)
            part.space = subject.space if i == len(pieces) - 1 else "-"
            parts.append(part)
        self.tokens[index:index + 1] = parts
        self.subject_end = index + len(parts) - 1
        self._fill_missing(parts[0].gender, parts[0].animate)

    def _process_post_subject(self) -> None:
        self.end = self.subject_end
        last = len(self.tokens) - 1
        for i in range(self.subject_end + 1, len(self.tokens)):
            if not grammar.can_be_adjective(self.tokens[i].raw, self.gender):
                break
            self.end = i
        if self.end != self.subject_end and self.end != last:
            # phrases with two nouns: only the first one is declined
            self.end = self.subject_end

    def _process_noun(self, token: Token, gender: Gender | None, animate: bool | None) -> None:
        if self._find_noun(token, gender, animate) is not None:
            return
        if token.indeclinable is None:
            token.indeclinable = False
        elif token.indeclinable:
            return
        if gender is None:
            gender = grammar.guess_gender_of_singular_noun(token.key)
        token.gender = gender
        if token.animate is None:
            token.animate = animate
        # substantivized adjectives keep adjective endings
        if token.part_of_speech is None and not (
            grammar.is_male_substantive(token.key) or grammar.is_female_substantive(token.key)
        ):
            token.part_of_speech = PartOfSpeech.NOUN

    def _find_noun(self, token: Token, gender: Gender | None, animate: bool | None) -> DictionaryRecord | None:
        if token.record is not None:
            return token.record
        if token.not_found:
            return None
        record = self.dictionary.lookup(token.key, gender, animate)
        if record is not None:
            token.plural = record.is_plural_key
        elif grammar.can_be_plural(token.key):
            singular = grammar.to_singular(token.key)
            record = self.dictionary.lookup(singular, gender, animate)
            if record is not None:
                token.key = singular
                token.plural = True
        token.not_found = record is None
        if record is not None:
            token.record = record
            token.fill_missing(
                record.gender or gender,
                PartOfSpeech.NOUN,
                animate if record.animate is None else record.animate,
                record.is_indeclinable,
            )
        return record

    def _handle_human_name(self, index: int, sure_is_name: bool) -> bool:
        """Detect a personal name starting at ``index`` and assign name word types."""
        if index >= len(self.tokens):
            return False
        current = self.tokens[index]
        if index + 1 == len(self.tokens):
            # "ИП Петрова"
            if sure_is_name and names.can_be_surname(current.raw):
                self.subject_start = index
                self._handle_surname(current)
                return True
            return False

        nxt = self.tokens[index + 1]
        # "П.П. Петрова"
        if names.can_be_initials(current.raw) and names.can_be_surname(nxt.raw):
            self.subject_start = index + 1
            self._handle_surname(nxt)
            return True
        # "Петров П.П."
        if names.can_be_initials(nxt.raw) and names.can_be_surname(current.raw):
            self.subject_start = index
            self._handle_surname(current)
            return True

        after = self.tokens[index + 2] if index + 2 < len(self.tokens) else None
        spf: list[Token] = []
        if names.is_first_name(current.raw):
            if after is not None and names.can_be_patronymic(nxt.raw) and names.can_be_surname(after.raw):
                # "Полина Петровна Петрова"
                spf = [after, current, nxt]
            elif names.can_be_surname(nxt.raw):
                # "Полина Петрова"
                spf = [nxt, current]
        elif names.is_first_name(nxt.raw) and names.can_be_surname(current.raw):
            if after is not None and names.can_be_patronymic(after.raw):
                # "Петров Петр Петрович"
                spf = [current, nxt, after]
            else:
                # "Петрова Полина"
                spf = [current, nxt]
        if not spf:
            return False

        gender = names.guess_gender_by_full_name([t.raw for t in spf])
        if gender is None:
            return False
        for token, word_type in zip(spf, (WordType.FAMILY_NAME, WordType.FIRST_NAME, WordType.PATRONYMIC_NAME)):
            token.gender = gender
            token.animate = True
            token.word_type = word_type
        self._fill_missing(gender, True)
        self.subject_start = index + len(spf) - 1
        return True

    def _handle_surname(self, token: Token) -> None:
        token.word_type = WordType.FAMILY_NAME
        token.animate = True
        token.gender = Gender.FEMALE if names.can_be_female_surname(token.raw) else Gender.MALE
        self._fill_missing(token.gender, True)


def parse_phrase(
    phrase: str,
    dictionary: Dictionary,
    gender: Gender | None = None,
    animate: bool | None = None,
) -> Phrase:
    """Split and compile a phrase. The phrase must contain at least one word."""
    assembler = PhraseAssembler.split(phrase)
    if assembler.is_empty():
        raise ValueError("phrase has no words")
    return assembler.compile(dictionary, gender, animate).to_phrase()
