"""Grammar API Routes

Case inflection of words, names, phrases and numerals, and spelling of
numbers. Engine errors come back as structured AppError responses.
"""
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from core.errors import raise_result, try_result
from core.logging import api_logger
from languages import get_module, list_languages
from languages.russian.types import Case, Gender, WordType

log = api_logger()

router = APIRouter()

ORIGIN = "grammar_api"


def _russian():
    return get_module("ru")


# === Request Models ===

class InflectWordRequest(BaseModel):
    word: str
    word_type: WordType = WordType.GENERIC
    case: Case
    gender: Gender | None = None
    animate: bool | None = None
    plural: bool | None = None


class InflectNameRequest(BaseModel):
    name: str
    part: Literal["first", "patronymic", "surname", "full"] = "full"
    case: Case
    gender: Gender | None = None


class InflectPhraseRequest(BaseModel):
    phrase: str
    kind: Literal["profession", "organization", "regular", "any"] = "any"
    case: Case
    animate: bool | None = None


class InflectNumeralRequest(BaseModel):
    numeral: str
    unit: str | None = None
    case: Case


class SpellRequest(BaseModel):
    number: str = Field(..., description="Decimal number, e.g. '-12.05'")


class SpellOrdinalRequest(BaseModel):
    number: str
    gender: Gender = Gender.MALE


# === Response Models ===

class InflectionResponse(BaseModel):
    result: str


class SplitNameResponse(BaseModel):
    result: list[str]


class LanguageInfoResponse(BaseModel):
    code: str
    name: str
    nativeName: str


# === Endpoints ===

@router.post("/inflect", response_model=InflectionResponse)
async def inflect_word(req: InflectWordRequest):
    """Decline a single word."""
    engine = _russian().get_inflection_engine()
    result = engine.inflect_result(
        req.word, req.word_type, req.case, gender=req.gender, animate=req.animate, plural=req.plural
    )
    raise_result(result)
    log.debug("word_inflection_served", word_type=req.word_type.value, case=req.case.value)
    return InflectionResponse(result=result.unwrap())


@router.post("/inflect/name", response_model=InflectionResponse)
async def inflect_name(req: InflectNameRequest):
    """Decline a first name, patronymic, surname or a full "Surname Name Patronymic"."""
    engine = _russian().get_inflection_engine()
    match req.part:
        case "first":
            result = try_result(lambda: engine.inflect_first_name(req.name, req.case, req.gender), origin=ORIGIN)
        case "patronymic":
            result = try_result(lambda: engine.inflect_patronymic(req.name, req.case, req.gender), origin=ORIGIN)
        case "surname":
            result = try_result(lambda: engine.inflect_surname(req.name, req.case, req.gender), origin=ORIGIN)
        case _:
            if req.gender is None:
                result = engine.inflect_full_name_result(req.name, req.case)
            else:
                result = try_result(
                    lambda: " ".join(engine.inflect_spf(req.name.split(), req.case, req.gender)), origin=ORIGIN
                )
    raise_result(result)
    return InflectionResponse(result=result.unwrap())


@router.post("/inflect/name/split", response_model=SplitNameResponse)
async def inflect_split_name(req: InflectNameRequest):
    """Decline a full name and return its parts separately."""
    engine = _russian().get_inflection_engine()
    result = try_result(lambda: engine.inflect_spf(req.name.split(), req.case, req.gender), origin=ORIGIN)
    raise_result(result)
    return SplitNameResponse(result=result.unwrap())


@router.post("/inflect/phrase", response_model=InflectionResponse)
async def inflect_phrase(req: InflectPhraseRequest):
    """Decline a job title, organization name or any other phrase."""
    engine = _russian().get_inflection_engine()
    match req.kind:
        case "profession":
            result = engine.inflect_regular_term_result(req.phrase, req.case, True)
        case "organization":
            result = engine.inflect_regular_term_result(req.phrase, req.case, False)
        case "regular":
            result = engine.inflect_regular_term_result(req.phrase, req.case, req.animate)
        case _:
            result = engine.inflect_any_result(req.phrase, req.case)
    raise_result(result)
    log.debug("phrase_inflection_served", kind=req.kind, case=req.case.value)
    return InflectionResponse(result=result.unwrap())


@router.post("/inflect/numeral", response_model=InflectionResponse)
async def inflect_numeral(req: InflectNumeralRequest):
    """Decline a spelled-out numeral, optionally together with its unit."""
    engine = _russian().get_inflection_engine()
    result = engine.inflect_numeral_result(req.numeral, req.case, req.unit)
    raise_result(result)
    return InflectionResponse(result=result.unwrap())


@router.post("/spell", response_model=InflectionResponse)
async def spell(req: SpellRequest):
    """Spell a decimal number in Russian words."""
    result = _russian().get_spelling_engine().spell_result(req.number)
    raise_result(result)
    return InflectionResponse(result=result.unwrap())


@router.post("/spell/ordinal", response_model=InflectionResponse)
async def spell_ordinal(req: SpellOrdinalRequest):
    """Spell a non-negative integer as an ordinal of the given gender."""
    result = _russian().get_spelling_engine().spell_ordinal_result(req.number, req.gender)
    raise_result(result)
    return InflectionResponse(result=result.unwrap())


@router.get("/languages", response_model=list[LanguageInfoResponse])
async def get_available_languages():
    """Get list of available languages."""
    return list_languages()
