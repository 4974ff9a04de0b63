"""Grammatical categories used by the Russian inflection engine."""
from enum import Enum
from typing import TypeVar

from core.errors import invalid_format, required_field


class Case(str, Enum):
    """Six grammatical cases in their traditional order, nominative first."""
    NOMINATIVE = "nominative"
    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    PREPOSITIONAL = "prepositional"

    @property
    def mod_index(self) -> int:
        """Index into a rule's modifier list; nominative has none."""
        if self is Case.NOMINATIVE:
            raise ValueError("nominative has no modifier")
        return list(Case).index(self) - 1


class Gender(str, Enum):
    """Grammatical gender. NEUTER doubles as the rule-matching wildcard."""
    MALE = "male"
    FEMALE = "female"
    NEUTER = "neuter"


class WordType(str, Enum):
    """Selects the rule table a word is declined with."""
    FIRST_NAME = "first_name"
    PATRONYMIC_NAME = "patronymic_name"
    FAMILY_NAME = "family_name"
    NUMERAL = "numeral"
    GENERIC = "generic"


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    ADJECTIVE = "adjective"
    PREPOSITION = "preposition"


MOD_COUNT = len(Case) - 1

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: E | str | None, field: str, origin: str = "") -> E:
    """Accept an enum member or its lowercase value."""
    if isinstance(value, enum_cls):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        required_field(field, origin=origin).unwrap()
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        expected = "one of " + ", ".join(m.value for m in enum_cls)
        invalid_format(field, expected, str(value), origin=origin).unwrap()
