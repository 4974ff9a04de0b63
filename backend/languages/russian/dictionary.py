"""Noun dictionary backed by an OpenRussian ``nouns`` export.

The file is tab-separated; only these columns are read:

    0      bare (lookup key)
    4      gender: m | f | n
    6      animate: 1 | 0
    7      indeclinable: 1 | 0
    10-15  singular nominative .. prepositional
    16-21  plural nominative .. prepositional

Each line is indexed under its bare form and, when present, under its
plural nominative form. The content is read once, on first use.
"""
import csv
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from core.errors import AppErrorException, file_not_found, resource_error
from core.logging import data_logger

from .grammar import to_plural_noun
from .maps import DICTIONARY_GENDER_MAP
from .text import normalize
from .types import Case, Gender

log = data_logger()

BUNDLED_NOUNS = Path(__file__).parent / "data" / "nouns.tsv"

_FLAGS = {"1": True, "0": False}


@dataclass(frozen=True, slots=True)
class DictionaryRecord:
    """One dictionary sense of a noun; case cells may hold comma-separated variants."""
    gender: Gender | None
    animate: bool | None
    indeclinable: bool | None
    singular: str | None = None
    plural: str | None = None
    singular_cases: tuple[str, ...] | None = None
    plural_cases: tuple[str, ...] | None = None
    is_plural_key: bool = False

    @property
    def is_indeclinable(self) -> bool:
        return bool(self.indeclinable)

    @property
    def fullness(self) -> int:
        return sum(1 for v in (
            self.gender, self.animate, self.indeclinable, self.singular,
            self.plural, self.singular_cases, self.plural_cases,
        ) if v is not None)

    def form(self, case: Case, plural: bool) -> str | None:
        """Case form from the record, longest variant first; None if the record lacks it."""
        cases = self.plural_cases if plural and self.plural_cases is not None else self.singular_cases
        if cases is None:
            return None
        return select_longest(cases[case.mod_index])


class Dictionary(Protocol):
    """Lookup contract shared by the TSV and pymorphy3 backends."""

    def lookup(
        self,
        key: str,
        gender: Gender | None = None,
        animate: bool | None = None,
        plural: bool | None = None,
    ) -> DictionaryRecord | None: ...

    def inflect(
        self,
        word: str,
        case: Case,
        gender: Gender | None = None,
        animate: bool | None = None,
        plural: bool | None = None,
    ) -> str | None: ...


def select_longest(cell: str) -> str:
    if "," not in cell:
        return cell
    return max((s.strip() for s in cell.split(",")), key=len)


def _cell(row: list[str], i: int) -> str:
    return normalize(row[i]).replace("'", "")


def parse_row(row: list[str]) -> list[tuple[str, DictionaryRecord]]:
    """Parse one export row into (key, record) pairs; empty for unusable rows."""
    if len(row) < 5 or not row[0].strip():
        return []
    key = _cell(row, 0)
    gender = DICTIONARY_GENDER_MAP.get(row[4].strip())
    animate = _FLAGS.get(row[6].strip()) if len(row) > 6 else None
    indeclinable = _FLAGS.get(row[7].strip()) if len(row) > 7 else None
    if indeclinable or len(row) < 16:
        return [(key, DictionaryRecord(gender, animate, indeclinable))]

    singular = _cell(row, 10) or key
    singular_cases = tuple(_cell(row, i) for i in range(11, 16))
    if len(row) < 22:
        return [(key, DictionaryRecord(gender, animate, indeclinable, singular, None, singular_cases))]

    plural = _cell(row, 16)
    plural_cases = tuple(_cell(row, i) for i in range(17, 22))
    record = DictionaryRecord(gender, animate, indeclinable, singular, plural, singular_cases, plural_cases)
    res = [(key, record)]
    plural_key = select_longest(plural) if plural else ""
    if plural_key and plural_key != key:
        res.append((plural_key, DictionaryRecord(
            gender, animate, indeclinable, singular, plural, singular_cases, plural_cases, is_plural_key=True
        )))
    return res


def _select_record(
    records: list[DictionaryRecord],
    gender: Gender | None,
    animate: bool | None,
    plural: bool | None,
) -> DictionaryRecord:
    ranked = sorted(records, key=lambda r: r.fullness, reverse=True)
    for r in ranked:
        if (
            (gender is None or r.gender is gender)
            and (animate is None or r.animate == animate)
            and (plural is None or r.is_plural_key == plural)
        ):
            return r
    return records[0]


class NounDictionary:
    """Read-only noun dictionary loaded lazily from a TSV file."""

    __slots__ = ("_path", "_content", "_lock")

    def __init__(self, path: Path | str | None = None):
        self._path = Path(path) if path else BUNDLED_NOUNS
        self._content: dict[str, list[DictionaryRecord]] | None = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, list[DictionaryRecord]]:
        if not self._path.exists():
            file_not_found(str(self._path), origin="noun_dictionary").unwrap()
        content: dict[str, list[DictionaryRecord]] = {}
        try:
            with self._path.open(encoding="utf-8", newline="") as f:
                for row in csv.reader(f, delimiter="\t", quoting=csv.QUOTE_NONE):
                    if not row or row[0] == "bare" or row[0].startswith("#"):
                        continue
                    for key, record in parse_row(row):
                        content.setdefault(key, []).append(record)
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise AppErrorException(resource_error(
                f"Cannot read noun dictionary: {e}", path=str(self._path), origin="noun_dictionary", cause=e
            ).error) from e
        log.info("noun_dictionary_loaded", path=str(self._path), keys=len(content))
        return content

    def _content_map(self) -> dict[str, list[DictionaryRecord]]:
        if self._content is None:
            with self._lock:
                if self._content is None:
                    self._content = self._load()
        return self._content

    def __len__(self) -> int:
        return len(self._content_map())

    def __contains__(self, word: str) -> bool:
        return normalize(word) in self._content_map()

    def lookup(
        self,
        key: str,
        gender: Gender | None = None,
        animate: bool | None = None,
        plural: bool | None = None,
    ) -> DictionaryRecord | None:
        """Best record for a key under the given filters, or None if the key is unknown."""
        records = self._content_map().get(normalize(key))
        if not records:
            return None
        return _select_record(records, gender, animate, plural)

    def inflect(
        self,
        word: str,
        case: Case,
        gender: Gender | None = None,
        animate: bool | None = None,
        plural: bool | None = None,
    ) -> str | None:
        return inflect_from(self, word, case, gender, animate, plural)


def inflect_from(
    dictionary: Dictionary,
    word: str,
    case: Case,
    gender: Gender | None = None,
    animate: bool | None = None,
    plural: bool | None = None,
) -> str | None:
    """Dictionary form of a noun in the given case, or None if the dictionary cannot tell.

    A plural request for an unknown key retries once with the heuristic
    plural of the key.
    """
    key = normalize(word)
    record = dictionary.lookup(key, gender, animate)
    if record is None and plural:
        record = dictionary.lookup(to_plural_noun(key), gender, animate, True)
    if record is None:
        return None
    if record.is_indeclinable:
        return word
    as_plural = bool(plural) or (plural is None and record.is_plural_key)
    if case is Case.NOMINATIVE:
        if as_plural and record.plural:
            return select_longest(record.plural)
        return word
    res = record.form(case, as_plural)
    log.debug("dictionary_form", word=key, case=case.value, plural=as_plural, found=res is not None)
    return res
