"""
Constants for rumorph: dictionary file layout, record formats and the
closed word lists used by the out-of-vocabulary analyzer.
"""

from typing import Dict, Tuple

# ============================================================================
# Dictionary Files
# ============================================================================

PARADIGM_PREFIXES_FILE = "paradigm-prefixes.json"
SUFFIXES_FILE = "suffixes.json"
GRAMTAB_FILE = "gramtab-opencorpora-int.json"
PARADIGMS_FILE = "paradigms.array"
WORDS_FILE = "words.marisa"
PROBABILITIES_FILE = "p_t_given_w.marisa"
PREDICTION_SUFFIXES_FILE = "prediction-suffixes-{}.marisa"

# Used when the dictionary ships no paradigm-prefixes.json
DEFAULT_PARADIGM_PREFIXES = ("", "по", "наи")

# Environment variable pointing at a compiled dictionary directory
DATA_ENV_VAR = "RUMORPH_DATA"

# ============================================================================
# Record Formats
# ============================================================================
# Big-endian, so that packed records sort the same way as their fields.

WORDS_FORMAT = ">HH"          # paradigm id, form index
PREDICTION_FORMAT = ">HHH"    # match count, paradigm id, form index
PROBABILITY_FORMAT = ">I"     # P(tag | word) * PROBABILITY_MULTIPLIER

PROBABILITY_MULTIPLIER = 1000000

# Letters that may stand for other letters in the input.
# Users type "е" where the dictionary spells "ё".
YO_REPLACES: Dict[str, Tuple[str, ...]] = {
    "е": ("ё",),
}

# ============================================================================
# Out-of-vocabulary Analysis
# ============================================================================

# Particles attached with a hyphen, e.g. смотри-ка
PARTICLES_AFTER_HYPHEN = (
    "-то",
    "-ка",
    "-таки",
    "-де",
    "-тко",
    "-тка",
    "-с",
    "-ста",
)

# Word-formation prefixes, e.g. псевдо|кошка.
# Sorted longest first (then alphabetically) in extended.py.
KNOWN_PREFIXES = (
    "авиа", "авто", "аква", "анти-", "анти", "антропо", "арт-", "арт",
    "архи", "астро", "аудио", "аэро", "без", "бес", "био", "вело",
    "взаимо", "видео", "вице-", "вне", "внутри", "вперед", "впереди",
    "гекто", "гелио", "гео", "гетеро", "гига", "гигро", "гипер", "гипо",
    "гомо", "дву", "двух", "де", "дез", "дека", "деци", "дис", "до",
    "евро", "за", "зоо", "интер", "инфра", "квази-", "квази", "кило",
    "кино", "контр-", "контр", "космо-", "космо", "крипто", "лейб-",
    "лже-", "лже", "макро", "макси-", "макси", "мало", "мега", "медиа-",
    "медиа", "меж", "мета-", "мета", "метео", "метро", "микро", "милли",
    "мини-", "мини", "много", "моно", "мото", "мульти", "нано", "нарко",
    "не", "небез", "недо", "нейро", "нео", "низко", "обер-", "обще",
    "одно", "около", "орто", "палео", "пан", "пара", "пента", "пере",
    "пиро", "поли", "полу", "порно", "после", "пост-", "пост", "пра-",
    "пра", "пред", "пресс-", "противо-", "противо", "прото", "псевдо-",
    "псевдо", "радио", "разно", "ре", "ретро-", "ретро", "само", "санти",
    "сверх-", "сверх", "спец", "суб", "супер-", "супер", "супра", "теле",
    "тетра", "топ-", "транс-", "транс", "ультра", "унтер-", "штаб-",
    "экзо", "эко", "эконом-", "экс-", "экс", "экстра-", "экстра",
    "электро", "эндо", "энерго", "этно",
)

# Closed word classes: heuristics never coin new members of these
NONPRODUCTIVE_GRAMMEMES = (
    "NUMR",
    "NPRO",
    "PRED",
    "PREP",
    "CONJ",
    "PRCL",
    "INTJ",
    "Apro",
)

# Grammemes that must agree between the parts of a hyphenated compound
FEATURE_GRAMMEMES = frozenset([
    # parts of speech
    "NOUN", "ADJF", "ADJS", "COMP", "VERB", "INFN", "PRTF", "PRTS", "GRND",
    "NUMR", "ADVB", "NPRO", "PRED", "PREP", "CONJ", "PRCL", "INTJ",
    # numbers
    "sing", "plur",
    # cases
    "nomn", "gent", "datv", "accs", "ablt", "loct", "voct", "gen2", "acc2",
    "loc2",
    # persons
    "1per", "2per", "3per",
    # tenses
    "pres", "past", "futr",
])

# Case grammemes folded into their main case before comparison
FEATURE_ALIASES = {
    "loc1": "loct",
    "gen1": "gent",
}

ADVERB_PREFIX = "по-"
ADVERB_TAG = "ADVB"

UNKNOWN_PREFIX_MAX_LENGTH = 5
UNKNOWN_PREFIX_MIN_REMAINDER = 3
KNOWN_PREFIX_MIN_REMAINDER = 3
PREDICTION_MIN_WORD_LENGTH = 4
PREDICTION_MAX_SUFFIX_LENGTH = 5

# Guard against pathological inputs; real words stay far below this
MAX_RECURSION_DEPTH = 64
