"""Rule table and word list loading.

Rule tables are petrovich-style YAML documents validated through
pydantic beans. Word lists are plain UTF-8 files, one entry per line.
Both are loaded once and cached for the lifetime of the process.
"""
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.config import settings
from core.errors import AppErrorException, file_not_found, resource_error
from core.logging import data_logger

from .maps import RULE_GENDER_MAP, RULE_POS_MAP
from .rules import Rule, RuleTable
from .types import MOD_COUNT, WordType

log = data_logger()

DATA_DIR = Path(__file__).parent / "data"

NAME_RULES_FILE = "name-rules.yml"
REGULAR_RULES_FILE = "regular-rules.yml"
NUMERAL_RULES_FILE = "numeral-rules.yml"


class RuleBean(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    gender: Literal["male", "female", "androgynous"]
    test: list[str] = Field(min_length=1)
    mods: list[str]
    animate: bool | None = None
    plural: bool | None = None
    part_of_speech: Literal["noun", "adjective", "preposition"] | None = Field(
        default=None, alias="partOfSpeech"
    )

    @field_validator("mods")
    @classmethod
    def _check_mods(cls, v: list[str]) -> list[str]:
        if len(v) != MOD_COUNT:
            raise ValueError(f"expected {MOD_COUNT} mods, got {len(v)}")
        return v

    def to_rule(self) -> Rule:
        return Rule(
            test=tuple(t.lower() for t in self.test),
            mods=tuple(self.mods),
            gender=RULE_GENDER_MAP[self.gender],
            animate=self.animate,
            plural=self.plural,
            part_of_speech=RULE_POS_MAP[self.part_of_speech] if self.part_of_speech else None,
        )


class TableBean(BaseModel):
    model_config = ConfigDict(extra="ignore")

    exceptions: list[RuleBean] = Field(default_factory=list)
    suffixes: list[RuleBean] = Field(default_factory=list)

    def to_table(self) -> RuleTable:
        return RuleTable(
            exceptions=tuple(b.to_rule() for b in self.exceptions),
            suffixes=tuple(b.to_rule() for b in self.suffixes),
        )


class NameRulesBean(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lastname: TableBean
    firstname: TableBean
    middlename: TableBean


@dataclass(frozen=True, slots=True)
class RuleLibrary:
    """Rule tables keyed by word type."""
    tables: dict[WordType, RuleTable]

    def table(self, word_type: WordType) -> RuleTable:
        return self.tables[word_type]


@dataclass(frozen=True, slots=True)
class WordLists:
    male_names: frozenset[str]
    female_names: frozenset[str]
    abbreviations: frozenset[str]
    male_substantives: frozenset[str]
    female_substantives: frozenset[str]


def data_dir() -> Path:
    return Path(settings.GRAMMAR_DATA_DIR) if settings.GRAMMAR_DATA_DIR else DATA_DIR


def _read_text(path: Path) -> str:
    if not path.exists():
        raise AppErrorException(file_not_found(str(path), origin="rule_library").error)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise AppErrorException(resource_error(
            f"Cannot read {path.name}: {e}", path=str(path), origin="rule_library", cause=e
        ).error) from e


def _load_yaml(path: Path, bean: type[BaseModel]) -> BaseModel:
    try:
        return bean.model_validate(yaml.safe_load(_read_text(path)))
    except (yaml.YAMLError, ValidationError) as e:
        raise AppErrorException(resource_error(
            f"Malformed rule table {path.name}", path=str(path), origin="rule_library", cause=e
        ).error) from e


def load_rule_library(directory: Path) -> RuleLibrary:
    """Parse and validate all rule tables in a directory."""
    names = _load_yaml(directory / NAME_RULES_FILE, NameRulesBean)
    regular = _load_yaml(directory / REGULAR_RULES_FILE, TableBean)
    numeral = _load_yaml(directory / NUMERAL_RULES_FILE, TableBean)
    tables = {
        WordType.FAMILY_NAME: names.lastname.to_table(),
        WordType.FIRST_NAME: names.firstname.to_table(),
        WordType.PATRONYMIC_NAME: names.middlename.to_table(),
        WordType.GENERIC: regular.to_table(),
        WordType.NUMERAL: numeral.to_table(),
    }
    log.info(
        "rule_tables_loaded",
        directory=str(directory),
        rules={t.value: len(v.exceptions) + len(v.suffixes) for t, v in tables.items()},
    )
    return RuleLibrary(tables=tables)


def read_word_list(path: Path) -> frozenset[str]:
    """Read a word list, skipping blank lines and '#' comments."""
    words = set()
    for line in _read_text(path).splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            words.add(line.lower())
    return frozenset(words)


def load_word_lists(directory: Path) -> WordLists:
    lists = WordLists(
        male_names=read_word_list(directory / "male-names.txt"),
        female_names=read_word_list(directory / "female-names.txt"),
        abbreviations=read_word_list(directory / "abbreviations.txt"),
        male_substantives=read_word_list(directory / "male-substantives.txt"),
        female_substantives=read_word_list(directory / "female-substantives.txt"),
    )
    log.info(
        "word_lists_loaded",
        directory=str(directory),
        male_names=len(lists.male_names),
        female_names=len(lists.female_names),
        abbreviations=len(lists.abbreviations),
    )
    return lists


@lru_cache
def get_rule_library() -> RuleLibrary:
    return load_rule_library(data_dir())


@lru_cache
def get_word_lists() -> WordLists:
    return load_word_lists(data_dir())
