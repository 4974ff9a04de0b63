import pytest

from core.errors import AppErrorException, ErrorCode, Ok, invalid_format, required_field, try_result
from core.logging import MAX_VALUE_LENGTH, _truncate_long_values
from languages import get_module, list_languages, register
from languages.russian import RussianModule


@pytest.mark.parametrize("code, status, category", [
    (ErrorCode.E2001_REQUIRED_FIELD_MISSING, 400, "validation"),
    (ErrorCode.E2003_OUT_OF_RANGE, 400, "validation"),
    (ErrorCode.E5004_INVARIANT_VIOLATED, 500, "grammar"),
    (ErrorCode.E6001_FILE_NOT_FOUND, 500, "resource"),
    (ErrorCode.E9001_UNEXPECTED_ERROR, 500, "internal"),
])
def test_error_code_mapping(code, status, category):
    assert code.http_status == status
    assert code.category == category


def test_error_to_dict():
    error = invalid_format("case", "one of nominative, genitive", "sideways", origin="test").unwrap_err()
    body = error.to_dict()["error"]
    assert body["code"] == "E2002_INVALID_FORMAT"
    assert body["code_num"] == 2002
    assert body["metadata"] == {"field": "case", "value": "sideways", "expected": "one of nominative, genitive"}


def test_builder_unwrap_raises():
    with pytest.raises(AppErrorException) as exc:
        required_field("word").unwrap()
    assert exc.value.error.code is ErrorCode.E2001_REQUIRED_FIELD_MISSING


def test_try_result():
    assert try_result(lambda: 42) == Ok(42)

    def fails():
        required_field("word").unwrap()

    assert try_result(fails).unwrap_err().code is ErrorCode.E2001_REQUIRED_FIELD_MISSING
    unexpected = try_result(lambda: 1 / 0).unwrap_err()
    assert unexpected.code is ErrorCode.E9001_UNEXPECTED_ERROR
    assert unexpected.metadata["error_type"] == "ZeroDivisionError"


def test_truncate_long_values():
    event = {"event": "phrase_inflected", "phrase": "а" * (MAX_VALUE_LENGTH + 50), "case": "genitive"}
    out = _truncate_long_values(None, "debug", event)
    assert out["phrase"].endswith(f"({MAX_VALUE_LENGTH + 50} chars)")
    assert out["case"] == "genitive"


def test_registry_lookup():
    module = get_module("ru")
    assert isinstance(module, RussianModule)
    assert get_module(" RU ") is module
    assert module.get_cases()[0] == "nominative"
    assert {"code": "ru", "name": "Russian", "nativeName": "Русский"} in list_languages()


def test_registry_unknown_language():
    with pytest.raises(ValueError, match="not registered"):
        get_module("xx")


def test_registry_replaces_module():
    original = get_module("ru")
    try:
        register("ru", RussianModule)
        assert get_module("ru") is not original
    finally:
        register("ru", lambda: original)
    assert get_module("ru") is original
