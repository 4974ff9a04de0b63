import pytest

from core.errors import AppErrorException, ErrorCode
from languages.russian.types import Case, Gender, WordType

CASES = [Case.GENITIVE, Case.DATIVE, Case.ACCUSATIVE, Case.INSTRUMENTAL, Case.PREPOSITIONAL]


@pytest.mark.parametrize("phrase, expected", [
    ("Главный инженер", [
        "Главного инженера", "Главному инженеру", "Главного инженера", "Главным инженером", "Главном инженере",
    ]),
    ("Термист по обработке слюды", [
        "Термиста по обработке слюды", "Термисту по обработке слюды", "Термиста по обработке слюды",
        "Термистом по обработке слюды", "Термисте по обработке слюды",
    ]),
    ("Заведующий складом", [
        "Заведующего складом", "Заведующему складом", "Заведующего складом", "Заведующим складом",
        "Заведующем складом",
    ]),
    ("Медицинская сестра", [
        "Медицинской сестры", "Медицинской сестре", "Медицинскую сестру", "Медицинской сестрой",
        "Медицинской сестре",
    ]),
    ("Медицинская сестра-анестезист", [
        "Медицинской сестры-анестезиста", "Медицинской сестре-анестезисту", "Медицинскую сестру-анестезиста",
        "Медицинской сестрой-анестезистом", "Медицинской сестре-анестезисте",
    ]),
])
def test_professions(engine, phrase, expected):
    assert [engine.inflect_name_of_profession(phrase, case) for case in CASES] == expected


@pytest.mark.parametrize("phrase, expected", [
    ("Министерство финансов", [
        "Министерства финансов", "Министерству финансов", "Министерство финансов", "Министерством финансов",
        "Министерстве финансов",
    ]),
    ("Отдел кадров", ["Отдела кадров", "Отделу кадров", "Отдел кадров", "Отделом кадров", "Отделе кадров"]),
    ("ПАО 'Финансовая корпорация'", ["ПАО 'Финансовая корпорация'"] * 5),
    ('"Альфа-Банк"', ['"Альфа-Банк"'] * 5),
    ("«Школа-интернат»", ["«Школа-интернат»"] * 5),
    ("ИП Петрова", ["ИП Петровой", "ИП Петровой", "ИП Петрову", "ИП Петровой", "ИП Петровой"]),
])
def test_organizations(engine, phrase, expected):
    assert [engine.inflect_name_of_organization(phrase, case) for case in CASES] == expected


@pytest.mark.parametrize("phrase, expected", [
    ("П.П. Петрова", "П.П. Петровой"),
    ("Петров П.П.", "Петрова П.П."),
])
def test_surname_with_initials(engine, phrase, expected):
    assert engine.inflect_regular_term(phrase, Case.GENITIVE) == expected


def test_phrase_nominative_is_identity(engine):
    assert engine.inflect_regular_term("  Главный инженер ", Case.NOMINATIVE) == "  Главный инженер "


def test_phrase_keeps_spacing(engine):
    assert engine.inflect_name_of_profession("Главный  инженер\t", Case.DATIVE) == "Главному  инженеру\t"


def test_inflect_any_detects_names(engine):
    assert engine.inflect_any("Петров Петр Петрович", Case.GENITIVE) == "Петрова Петра Петровича"
    assert engine.inflect_any("Уважаемый Иван Иванович", Case.DATIVE) == "Уважаемому Ивану Ивановичу"
    assert engine.inflect_any("Отдел кадров", Case.GENITIVE) == "Отдела кадров"


@pytest.mark.parametrize("word, case, kwargs, expected", [
    ("инженер", Case.GENITIVE, {}, "инженера"),
    ("Инженер", Case.DATIVE, {}, "Инженеру"),
    ("рубль", Case.GENITIVE, {"plural": True}, "рублей"),
    ("кофе", Case.INSTRUMENTAL, {}, "кофе"),
    ("копейка", Case.INSTRUMENTAL, {"gender": Gender.FEMALE}, "копейкой"),
    ("день", Case.INSTRUMENTAL, {}, "днём"),
    ("инженер", Case.NOMINATIVE, {}, "инженер"),
])
def test_generic_words(engine, word, case, kwargs, expected):
    assert engine.inflect(word, WordType.GENERIC, case, **kwargs) == expected


def test_inflect_accepts_string_enums(engine):
    assert engine.inflect("Иванов", "family_name", "genitive", "male") == "Иванова"


@pytest.mark.parametrize("call, code", [
    (lambda e: e.inflect("  ", WordType.GENERIC, Case.GENITIVE), ErrorCode.E2001_REQUIRED_FIELD_MISSING),
    (lambda e: e.inflect("кот", WordType.GENERIC, "sideways"), ErrorCode.E2002_INVALID_FORMAT),
    (lambda e: e.inflect("кот", "verb", Case.GENITIVE), ErrorCode.E2002_INVALID_FORMAT),
    (lambda e: e.inflect_full_name("", Case.GENITIVE), ErrorCode.E2001_REQUIRED_FIELD_MISSING),
    (lambda e: e.inflect_full_name("А Б В Г", Case.GENITIVE), ErrorCode.E2002_INVALID_FORMAT),
    (lambda e: e.inflect_regular_term(None, Case.GENITIVE), ErrorCode.E2001_REQUIRED_FIELD_MISSING),
    (lambda e: e.inflect_numeral("два", Case.GENITIVE, " "), ErrorCode.E2001_REQUIRED_FIELD_MISSING),
])
def test_invalid_input(engine, call, code):
    with pytest.raises(AppErrorException) as exc:
        call(engine)
    assert exc.value.error.code is code


def test_result_variants(engine):
    assert engine.inflect_result("инженер", WordType.GENERIC, Case.GENITIVE).unwrap() == "инженера"
    err = engine.inflect_any_result("", Case.GENITIVE)
    assert err.is_err()
    assert err.unwrap_err().code is ErrorCode.E2001_REQUIRED_FIELD_MISSING
