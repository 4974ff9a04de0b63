import pytest

from languages.russian.phrase import PhraseAssembler, parse_phrase
from languages.russian.types import Gender, PartOfSpeech, WordType


def test_split_keeps_separators():
    phrase = PhraseAssembler.split(" AA BbB \tGggG ").to_phrase()
    assert phrase.words == ["AA", "BbB", "GggG"]
    assert list(phrase.separators) == [" ", " ", " \t", " "]


def test_split_stops_at_quote():
    phrase = PhraseAssembler.split("ааА\tБ\tввв ' Ддд ззз жжж'\n").to_phrase()
    assert len(phrase) == 4
    assert phrase.words[-1] == "' Ддд ззз жжж'"
    assert list(phrase.separators) == ["", "\t", "\t", " ", "\n"]
    assert phrase.tokens[-1].indeclinable is True


def test_split_blank():
    assert PhraseAssembler.split(" \t ").is_empty()


def test_compose_reapplies_letter_case():
    phrase = PhraseAssembler.split("A b C").to_phrase()
    assert phrase.compose(["d", "b", "c"]) == "D b C"
    assert phrase.compose() == "A b C"


def test_compose_rejects_wrong_length():
    phrase = PhraseAssembler.split("A b C").to_phrase()
    with pytest.raises(ValueError):
        phrase.compose(["a"])


def test_parse_requires_words(dictionary):
    with pytest.raises(ValueError):
        parse_phrase("   ", dictionary)


def test_adjective_and_subject(dictionary):
    phrase = parse_phrase("Главный инженер", dictionary, animate=True)
    adjective, subject = phrase.tokens
    assert adjective.part_of_speech is PartOfSpeech.ADJECTIVE
    assert subject.part_of_speech is PartOfSpeech.NOUN
    assert subject.record is not None
    assert phrase.gender is Gender.MALE
    assert all(t.declinable for t in phrase.tokens)


def test_prepositional_clause_is_kept(dictionary):
    phrase = parse_phrase("Термист по обработке слюды", dictionary, animate=True)
    assert [t.declinable for t in phrase.tokens] == [True, False, False, False]
    assert phrase.tokens[1].part_of_speech is PartOfSpeech.PREPOSITION


def test_abbreviation_with_quoted_name(dictionary):
    phrase = parse_phrase("ПАО 'Финансовая корпорация'", dictionary, animate=False)
    assert not any(t.declinable for t in phrase.tokens)


def test_personal_name_inside_phrase(dictionary):
    phrase = parse_phrase("Петров Петр Петрович", dictionary)
    assert [t.word_type for t in phrase.tokens] == [
        WordType.FAMILY_NAME, WordType.FIRST_NAME, WordType.PATRONYMIC_NAME,
    ]
    assert phrase.gender is Gender.MALE
    assert phrase.animate is True


def test_substantivized_adjective_is_subject(dictionary):
    phrase = parse_phrase("Заведующий складом", dictionary, animate=True)
    assert phrase.tokens[0].declinable
    assert phrase.tokens[0].part_of_speech is None
    assert not phrase.tokens[1].declinable


def test_hyphenated_subject_is_split(dictionary):
    phrase = parse_phrase("Медицинская сестра-анестезист", dictionary, animate=True)
    assert phrase.words == ["Медицинская", "сестра", "анестезист"]
    assert list(phrase.separators) == ["", " ", "-", ""]
    assert phrase.tokens[1].gender is Gender.FEMALE
    assert phrase.tokens[2].gender is Gender.MALE
    assert all(t.declinable for t in phrase.tokens)
    assert phrase.compose() == "Медицинская сестра-анестезист"


@pytest.mark.parametrize("raw", ['"Альфа-Банк"', "«Школа-интернат»"])
def test_quoted_hyphenated_name_is_not_split(dictionary, raw):
    phrase = parse_phrase(raw, dictionary, animate=False)
    assert phrase.words == [raw]
    assert not phrase.tokens[0].declinable


@pytest.mark.parametrize("raw, index, gender", [
    ("ИП Петрова", 1, Gender.FEMALE),
    ("П.П. Петрова", 1, Gender.FEMALE),
    ("Петров П.П.", 0, Gender.MALE),
])
def test_surname_with_marker_or_initials(dictionary, raw, index, gender):
    phrase = parse_phrase(raw, dictionary)
    surname = phrase.tokens[index]
    assert surname.word_type is WordType.FAMILY_NAME
    assert surname.gender is gender
    assert surname.animate is True
    assert surname.declinable
    assert phrase.gender is gender
