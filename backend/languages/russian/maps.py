"""Tag mappings between the engine's enums, pymorphy3 and rule tables."""
from .types import Case, Gender, PartOfSpeech

# Case mappings (pymorphy3 tag -> Case)
CASE_MAP = {
    "nomn": Case.NOMINATIVE,
    "gent": Case.GENITIVE,
    "datv": Case.DATIVE,
    "accs": Case.ACCUSATIVE,
    "ablt": Case.INSTRUMENTAL,
    "loct": Case.PREPOSITIONAL,
}
CASE_MAP_REV = {v: k for k, v in CASE_MAP.items()}

# Number mappings (pymorphy3 tag -> plural flag)
NUMBER_MAP = {"sing": False, "plur": True}
NUMBER_MAP_REV = {v: k for k, v in NUMBER_MAP.items()}

# Gender mappings (pymorphy3 tag -> Gender); common gender ("ms-f") counts as male
GENDER_MAP = {"masc": Gender.MALE, "femn": Gender.FEMALE, "neut": Gender.NEUTER, "ms-f": Gender.MALE}

# Animacy mappings (pymorphy3 tag -> animate flag)
ANIMACY_MAP = {"anim": True, "inan": False}

# Rule table gender names; "androgynous" rules match any gender
RULE_GENDER_MAP = {"male": Gender.MALE, "female": Gender.FEMALE, "androgynous": Gender.NEUTER}

RULE_POS_MAP = {
    "noun": PartOfSpeech.NOUN,
    "adjective": PartOfSpeech.ADJECTIVE,
    "preposition": PartOfSpeech.PREPOSITION,
}

# OpenRussian noun export gender column
DICTIONARY_GENDER_MAP = {"m": Gender.MALE, "f": Gender.FEMALE, "n": Gender.NEUTER}

# Russian grammatical cases (ordered)
CASES = list(Case)
