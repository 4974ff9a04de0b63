"""Russian language module implementation."""
import threading

from core.config import settings
from core.logging import engine_logger
from languages.base import LanguageModule

from .dictionary import Dictionary, NounDictionary
from .inflection import InflectionEngine
from .maps import CASES
from .spelling import SpellingEngine

log = engine_logger()


def create_dictionary() -> Dictionary:
    """Build the noun dictionary selected by DICTIONARY_BACKEND."""
    match settings.DICTIONARY_BACKEND.lower():
        case "pymorphy":
            from .morph import PymorphyDictionary
            return PymorphyDictionary()
        case "tsv":
            return NounDictionary(settings.NOUN_DICTIONARY_PATH)
        case other:
            raise ValueError(f"Unknown dictionary backend '{other}', expected 'tsv' or 'pymorphy'")


class RussianModule(LanguageModule):
    """Russian language module: case inflection and numeral spelling."""

    __slots__ = ("_dictionary", "_inflection", "_spelling", "_lock")

    def __init__(self):
        self._dictionary: Dictionary | None = None
        self._inflection: InflectionEngine | None = None
        self._spelling: SpellingEngine | None = None
        self._lock = threading.Lock()

    @property
    def code(self) -> str:
        return "ru"

    @property
    def name(self) -> str:
        return "Russian"

    @property
    def native_name(self) -> str:
        return "Русский"

    def get_dictionary(self) -> Dictionary:
        """Get the noun dictionary (lazy-loaded)."""
        with self._lock:
            if self._dictionary is None:
                self._dictionary = create_dictionary()
                log.info("dictionary_backend_selected", backend=settings.DICTIONARY_BACKEND)
            return self._dictionary

    def get_inflection_engine(self) -> InflectionEngine:
        """Get the inflection engine (lazy-loaded)."""
        if self._inflection is None:
            self._inflection = InflectionEngine(self.get_dictionary())
        return self._inflection

    def get_spelling_engine(self) -> SpellingEngine:
        """Get the numeral speller configured from settings (lazy-loaded)."""
        if self._spelling is None:
            self._spelling = SpellingEngine(
                strip_trailing_zeros=settings.SPELLING_STRIP_TRAILING_ZEROS,
                trim_fraction=settings.SPELLING_TRIM_FRACTION,
            )
        return self._spelling

    def get_cases(self) -> list[str]:
        """Get ordered list of grammatical cases."""
        return [c.value for c in CASES]
