#!/usr/bin/env python3
"""Decline Russian words and spell numbers from the command line.

Examples:
    python3 -m scripts.inflect word директор --case genitive --animate
    python3 -m scripts.inflect fullname "Петров Петр Петрович" --case dative
    python3 -m scripts.inflect phrase "Главный инженер" --case instrumental --kind profession
    python3 -m scripts.inflect numeral "сорок два" --unit рубль --case genitive
    python3 -m scripts.inflect spell 1234.5
    python3 -m scripts.inflect ordinal 2000000 --gender female
"""
import argparse
import sys

from core.config import settings
from core.errors import AppErrorException
from core.logging import api_logger, configure_logging
from languages import get_module
from languages.russian.types import Case, Gender, WordType

log = api_logger()

EXIT_INVALID = 2

CASE_CHOICES = [c.value for c in Case]
GENDER_CHOICES = [g.value for g in Gender]


def _add_case(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--case", "-c", choices=CASE_CHOICES, required=True, help="Target grammatical case")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inflect",
        description="Russian case inflection and numeral spelling",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    word = sub.add_parser("word", help="Decline a single word")
    word.add_argument("text")
    word.add_argument("--type", "-t", dest="word_type", choices=[t.value for t in WordType], default="generic")
    _add_case(word)
    word.add_argument("--gender", "-g", choices=GENDER_CHOICES)
    animacy = word.add_mutually_exclusive_group()
    animacy.add_argument("--animate", dest="animate", action="store_const", const=True)
    animacy.add_argument("--inanimate", dest="animate", action="store_const", const=False)
    word.add_argument("--plural", action="store_true", default=None)

    name = sub.add_parser("name", help="Decline a first name, patronymic or surname")
    name.add_argument("text")
    name.add_argument("--part", choices=["first", "patronymic", "surname"], default="first")
    _add_case(name)
    name.add_argument("--gender", "-g", choices=GENDER_CHOICES)

    fullname = sub.add_parser("fullname", help='Decline "Surname Name Patronymic"')
    fullname.add_argument("text")
    _add_case(fullname)

    phrase = sub.add_parser("phrase", help="Decline a job title, organization or other phrase")
    phrase.add_argument("text")
    phrase.add_argument("--kind", choices=["profession", "organization", "regular", "any"], default="any")
    _add_case(phrase)

    numeral = sub.add_parser("numeral", help="Decline a spelled-out numeral with an optional unit")
    numeral.add_argument("text")
    numeral.add_argument("--unit", "-u")
    _add_case(numeral)

    spell = sub.add_parser("spell", help="Spell a decimal number")
    spell.add_argument("number")

    ordinal = sub.add_parser("ordinal", help="Spell an ordinal number")
    ordinal.add_argument("number")
    ordinal.add_argument("--gender", "-g", choices=GENDER_CHOICES, default="male")

    return parser


def run(args: argparse.Namespace) -> str:
    module = get_module("ru")
    if args.command in ("spell", "ordinal"):
        speller = module.get_spelling_engine()
        if args.command == "spell":
            return speller.spell(args.number)
        return speller.spell_ordinal(args.number, args.gender)

    engine = module.get_inflection_engine()
    match args.command:
        case "word":
            return engine.inflect(
                args.text, args.word_type, args.case, gender=args.gender, animate=args.animate, plural=args.plural
            )
        case "name":
            inflect = {
                "first": engine.inflect_first_name,
                "patronymic": engine.inflect_patronymic,
                "surname": engine.inflect_surname,
            }[args.part]
            return inflect(args.text, args.case, args.gender)
        case "fullname":
            return engine.inflect_full_name(args.text, args.case)
        case "phrase":
            match args.kind:
                case "profession":
                    return engine.inflect_name_of_profession(args.text, args.case)
                case "organization":
                    return engine.inflect_name_of_organization(args.text, args.case)
                case "regular":
                    return engine.inflect_regular_term(args.text, args.case)
            return engine.inflect_any(args.text, args.case)
        case "numeral":
            return engine.inflect_numeral(args.text, args.case, args.unit)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
    args = build_parser().parse_args(argv)
    try:
        print(run(args))
    except AppErrorException as e:
        log.debug("cli_error", command=args.command, code=e.error.code.name)
        print(f"error: {e.error.message}", file=sys.stderr)
        return EXIT_INVALID
    return 0


if __name__ == "__main__":
    sys.exit(main())
