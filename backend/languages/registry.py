"""Language module registry.

Modules are registered as factories and built on first lookup, so a
language's rule tables and dictionary are only touched once it is used.
"""
import threading
from typing import Callable

from core.logging import engine_logger

from .base import LanguageModule

log = engine_logger()

ModuleFactory = Callable[[], LanguageModule]

_FACTORIES: dict[str, ModuleFactory] = {}
_MODULES: dict[str, LanguageModule] = {}
_lock = threading.Lock()


def register(code: str, factory: ModuleFactory) -> None:
    """Register (or replace) the factory for a language code."""
    key = code.strip().lower()
    with _lock:
        _FACTORIES[key] = factory
        _MODULES.pop(key, None)


def get_module(code: str) -> LanguageModule:
    """Get the module for a language code, building it on first use."""
    key = code.strip().lower()
    with _lock:
        module = _MODULES.get(key)
        if module is None:
            factory = _FACTORIES.get(key)
            if factory is None:
                available = ", ".join(sorted(_FACTORIES)) or "none"
                raise ValueError(f"Language '{code}' not registered. Available: {available}")
            module = _MODULES[key] = factory()
            log.info("language_module_created", code=key, name=module.name)
    return module


def list_languages() -> list[dict]:
    return [
        {"code": m.code, "name": m.name, "nativeName": m.native_name}
        for m in (get_module(code) for code in sorted(_FACTORIES))
    ]


def _auto_register() -> None:
    from .russian import RussianModule
    register("ru", RussianModule)


_auto_register()
