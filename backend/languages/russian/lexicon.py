"""Fixed Russian word tables used by the phrase heuristics and the speller."""

# Short-scale magnitude words, thousand first
BIG_NUMERALS = (
    "тысяча", "миллион", "миллиард", "триллион", "квадриллион", "квинтиллион", "секстиллион", "септиллион",
    "октиллион", "нониллион", "дециллион", "ундециллион", "дуодециллион", "тредециллион", "кваттордециллион",
    "квиндециллион", "седециллион", "септдециллион", "октодециллион", "новемдециллион", "вигинтиллион",
)

# Simple (non-derivative) prepositions
NON_DERIVATIVE_PREPOSITIONS = frozenset({
    "без", "в", "для", "до", "за", "из", "к", "на", "над", "о", "об", "от", "перед", "по", "под", "при",
    "про", "с", "у", "через",
})

VOWELS = frozenset("ауоыиэяюёе")
CONSONANTS = frozenset("бвгджзйклмнпрстфхцчшщ")

# Abbreviations that stand for a person or sole trader ("ИП Иванов")
HUMAN_ABBREVIATIONS = frozenset({"ип", "чп", "пбоюл"})

# Words with adjective-like endings that are not adjectives, keyed by their last three letters
NOT_ADJECTIVES: dict[str, frozenset[str]] = {
    "вая": frozenset({"трамвая"}),
    "пий": frozenset({"фильмокопий"}),
    "рий": frozenset({"аварий", "территорий"}),
    "сий": frozenset({"профессий", "экскурсий", "эмульсий"}),
    "тий": frozenset({"партий", "покрытий", "предприятий"}),
    "ций": frozenset({
        "декораций", "коллекций", "композиций", "конструкций", "лоций", "металлоконструкций",
        "организаций", "секций", "ситуаций", "станций", "электростанций",
    }),
    "бий": frozenset({"пособий"}),
    "зой": frozenset({"базой", "фильмобазой"}),
    "вий": frozenset({"путешествий", "условий"}),
    "дий": frozenset({"орудий"}),
    "кой": frozenset({
        "аптекой", "библиотекой", "видеотекой", "выставкой", "диспетчерской", "клиникой", "корректорской",
        "мастерской", "намоткой", "парикмахерской", "пленкой", "площадкой", "подготовкой", "практикой",
        "свалкой", "смолкой", "техникой", "установкой", "фильмотекой",
    }),
    "мой": frozenset({"платформой"}),
    "ной": frozenset({
        "заправочной", "костюмерной", "котельной", "портной", "прачечной", "приемной", "процедурной",
        "резиной", "турбиной",
    }),
    "пой": frozenset({"группой", "труппой"}),
    "рой": frozenset({
        "аспирантурой", "геокамерой", "докторантурой", "камерой", "кафедрой", "конторой", "ординатурой",
        "физкультурой",
    }),
    "лий": frozenset({"изделий", "металлоизделий", "сетеизделий", "специзделий", "стеклоизделий"}),
    "той": frozenset({"кислотой", "комнатой"}),
    "ний": frozenset({
        "декалькоманий", "зданий", "излучений", "измерений", "испытаний", "исследований", "линий",
        "месторождений", "оснований", "отделений", "отправлений", "подразделений", "помещений", "поручений",
        "приспособлений", "произведений", "расписаний", "растений", "соединений", "сооружений", "строений",
        "термсоединений", "учреждений",
    }),
    "вой": frozenset({
        "буровой", "вентилевой", "верховой", "горновой", "дверевой", "душевой", "кладовой", "люковой",
        "миксеровой", "печевой", "скиповой", "стволовой",
    }),
    "дой": frozenset({"слюдой"}),
}

MALE_ADJECTIVE_ENDINGS = ("ий", "ый", "ой")
FEMALE_ADJECTIVE_ENDINGS = ("ая", "яя", "ка")
NEUTER_ADJECTIVE_ENDINGS = ("ое",)

NEUTER_NOUN_ENDINGS = ("о", "е")
FEMALE_NOUN_ENDINGS = ("ья", "ла", "за", "ка")
PLURAL_ENDINGS = ("ы", "и", "я", "а")

FEMALE_PATRONYMIC_ENDINGS = ("овна", "евна", "ична")
MALE_PATRONYMIC_ENDINGS = ("ович", "евич", "ич")
FEMALE_SURNAME_ENDINGS = ("ова", "ева", "ёва", "ина", "ая", "яя", "цкая")
MALE_SURNAME_ENDINGS = ("ов", "ев", "ёв", "ин", "ын", "ой", "цкий", "ский", "цкой", "ской", "ый")

# Spelled numerals
FEMALE_NUMERALS = frozenset({"одна", "две", "тысяча", "тысяч", "тысячи", "целая"})
MALE_NUMERALS = frozenset({"один"})
ORDINAL_ENDINGS = ("ой", "ый", "ий", "ая", "ое")
