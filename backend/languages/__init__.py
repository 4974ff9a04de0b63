"""Language modules, looked up by ISO 639-1 code.

    from languages import get_module

    engine = get_module("ru").get_inflection_engine()
"""
from .registry import ModuleFactory, get_module, register, list_languages
from .base import InflectionEngine, LanguageModule, SpellingEngine

__all__ = [
    "get_module",
    "register",
    "list_languages",
    "ModuleFactory",
    "LanguageModule",
    "InflectionEngine",
    "SpellingEngine",
]
