"""Abstract base class for language modules."""
from abc import ABC, abstractmethod
from typing import Protocol


class InflectionEngine(Protocol):
    """Protocol for case inflection engines."""
    def inflect(self, word: str, word_type, case, gender=None, animate=None, plural=None) -> str: ...
    def inflect_full_name(self, spf: str, case) -> str: ...
    def inflect_regular_term(self, phrase: str, case, animate: bool | None = None) -> str: ...
    def inflect_any(self, phrase: str, case) -> str: ...
    def inflect_numeral(self, numeral: str, case, unit: str | None = None) -> str: ...


class SpellingEngine(Protocol):
    """Protocol for numeral spellers."""
    def spell(self, number) -> str: ...
    def spell_ordinal(self, number, gender) -> str: ...


class LanguageModule(ABC):
    """Abstract base for language-specific grammar tools."""

    @property
    @abstractmethod
    def code(self) -> str:
        """ISO 639-1 language code (e.g., 'ru')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @abstractmethod
    def get_inflection_engine(self) -> InflectionEngine:
        """Get the case inflection engine for this language."""
        ...

    @abstractmethod
    def get_spelling_engine(self) -> SpellingEngine:
        """Get the numeral speller for this language."""
        ...

    def get_cases(self) -> list[str]:
        """Get ordered list of grammatical cases. Override if language has declension."""
        return []
