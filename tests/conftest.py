"""Shared test fixtures: a small dictionary compiled into a temp directory."""

import json
import struct
from pathlib import Path

import pytest

import rumorph
from rumorph.automaton import Automaton
from rumorph.constants import (
    GRAMTAB_FILE,
    PARADIGM_PREFIXES_FILE,
    PARADIGMS_FILE,
    PREDICTION_FORMAT,
    PREDICTION_SUFFIXES_FILE,
    PROBABILITIES_FILE,
    PROBABILITY_FORMAT,
    SUFFIXES_FILE,
    WORDS_FILE,
    WORDS_FORMAT,
)
from rumorph.dictionary import load_dictionary


PREFIXES = ["", "по", "наи"]

SUFFIXES = [
    "",       # 0
    "а",      # 1
    "е",      # 2
    "ой",     # 3
    "ок",     # 4
    "ка",     # 5
    "еть",    # 6
    "и",      # 7
    "ный",    # 8
    "ному",   # 9
    "ь",      # 10
    "ть",     # 11
    "ли",     # 12
    "ать",    # 13
    "ал",     # 14
    "ый",     # 15
    "ейший",  # 16
]

TAGS = [
    "NOUN,inan,femn sing,nomn",             # 0
    "NOUN,inan,femn sing,datv",             # 1
    "NOUN,inan,femn sing,ablt",             # 2
    "NOUN,anim,femn sing,nomn",             # 3
    "NOUN,anim,femn sing,datv",             # 4
    "NOUN,anim,femn sing,ablt",             # 5
    "NOUN,anim,masc sing,nomn",             # 6
    "NOUN,anim,masc sing,gent",             # 7
    "VERB,impf,tran sing,impr,excl",        # 8
    "INFN,impf,tran",                       # 9
    "ADJF,Qual masc,sing,nomn",             # 10
    "ADJF,Qual masc,sing,datv",             # 11
    "NOUN,anim,masc,Name sing,nomn",        # 12
    "NOUN,anim,masc,Name sing,gent",        # 13
    "NOUN,anim,masc,Name sing,accs",        # 14
    "NOUN,inan,masc sing,nomn",             # 15
    "NOUN,inan,masc sing,accs",             # 16
    "NOUN,inan,femn plur,gent",             # 17
    "ADJF,Apro,Subx plur,nomn",             # 18
    "PRCL",                                 # 19
    "NOUN,inan,femn sing,gent",             # 20
    "NOUN,inan,femn plur,nomn",             # 21
    "INFN,perf,intr",                       # 22
    "VERB,perf,intr plur,past,indc",        # 23
    "INFN,impf,intr",                       # 24
    "VERB,impf,intr masc,sing,past,indc",   # 25
    "ADJF,Supr,Qual masc,sing,nomn",        # 26
    "NPRO,femn,3per,Anph sing,datv",        # 27
]

# suffix indices + tag indices + prefix indices
PARADIGMS = [
    [1, 2, 3, 0, 1, 2, 0, 0, 0],        # 0: кошка (inan), гора
    [1, 2, 3, 3, 4, 5, 0, 0, 0],        # 1: кошка (anim)
    [4, 5, 6, 7, 0, 0],                 # 2: котёнок
    [6, 7, 9, 8, 0, 0],                 # 3: смотреть
    [8, 9, 10, 11, 0, 0],               # 4: западный, чёрный
    [0, 6, 0],                          # 5: человек
    [0, 1, 1, 12, 13, 14, 0, 0, 0],     # 6: гор (name)
    [0, 0, 15, 16, 0, 0],               # 7: код
    [1, 2, 0, 0, 1, 17, 0, 0, 0],       # 8: кода
    [0, 18, 0],                         # 9: все
    [0, 19, 0],                         # 10: всё
    [10, 7, 7, 0, 20, 21, 0, 0, 0],     # 11: сталь
    [11, 12, 22, 23, 0, 0],             # 12: стать
    [13, 14, 24, 25, 0, 0],             # 13: гулять-like verbs
    [15, 16, 10, 26, 0, 2],             # 14: старый, наистарейший
    [0, 27, 0],                         # 15: ей
]

WORDS = [
    ("кошка", (0, 0)), ("кошка", (1, 0)),
    ("кошке", (0, 1)), ("кошке", (1, 1)),
    ("кошкой", (0, 2)), ("кошкой", (1, 2)),
    ("котёнок", (2, 0)),
    ("котёнка", (2, 1)),
    ("смотреть", (3, 0)),
    ("смотри", (3, 1)),
    ("западный", (4, 0)),
    ("западному", (4, 1)),
    ("чёрный", (4, 0)),
    ("чёрному", (4, 1)),
    ("человек", (5, 0)),
    ("гора", (0, 0)), ("гора", (6, 1)), ("гора", (6, 2)),
    ("гор", (6, 0)),
    ("код", (7, 0)), ("код", (7, 1)),
    ("кода", (8, 0)),
    ("все", (9, 0)),
    ("всё", (10, 0)),
    ("сталь", (11, 0)),
    ("стали", (11, 1)), ("стали", (11, 2)), ("стали", (12, 1)),
    ("стать", (12, 0)),
    ("старый", (14, 0)),
    ("наистарейший", (14, 1)),
    ("ей", (15, 0)),
]

PROBABILITIES = [
    ("кошка:NOUN,anim,femn sing,nomn", (700000,)),
    ("кошка:NOUN,inan,femn sing,nomn", (300000,)),
    ("стали:VERB,perf,intr plur,past,indc", (900000,)),
    ("стали:NOUN,inan,femn plur,nomn", (50000,)),
]

# One list per paradigm prefix: (ending, (count, paradigm id, form index))
PREDICTION_SUFFIXES = [
    [
        ("код", (2, 7, 0)), ("код", (2, 7, 1)), ("код", (1, 8, 2)),
        ("кать", (1, 13, 0)),
        ("ать", (5, 13, 0)), ("ать", (5, 12, 0)), ("ать", (3, 9, 0)),
        ("ал", (4, 13, 1)),
        ("л", (1, 5, 0)),
    ],
    [
        ("ать", (2, 12, 0)),
    ],
    [
        ("ейший", (3, 14, 1)),
    ],
]


def write_json(path: Path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)


def write_paradigms(path: Path, paradigms):
    with open(path, "wb") as f:
        f.write(struct.pack("<H", len(paradigms)))
        for para in paradigms:
            f.write(struct.pack("<H", len(para)))
            f.write(struct.pack(f"<{len(para)}H", *para))


def build_test_dictionary(path: Path, with_prefixes: bool = True) -> Path:
    """Write the test dictionary into ``path``."""
    path.mkdir(parents=True, exist_ok=True)

    if with_prefixes:
        write_json(path / PARADIGM_PREFIXES_FILE, PREFIXES)
    write_json(path / SUFFIXES_FILE, SUFFIXES)
    write_json(path / GRAMTAB_FILE, TAGS)
    write_paradigms(path / PARADIGMS_FILE, PARADIGMS)

    Automaton.build(WORDS_FORMAT, WORDS).save(path / WORDS_FILE)
    Automaton.build(PROBABILITY_FORMAT, PROBABILITIES).save(path / PROBABILITIES_FILE)
    for prefix_id, items in enumerate(PREDICTION_SUFFIXES):
        Automaton.build(PREDICTION_FORMAT, items).save(
            path / PREDICTION_SUFFIXES_FILE.format(prefix_id)
        )

    return path


@pytest.fixture(scope="session")
def dict_dir(tmp_path_factory) -> Path:
    """Directory with the compiled test dictionary."""
    return build_test_dictionary(tmp_path_factory.mktemp("dictionary"))


@pytest.fixture(scope="session")
def dictionary(dict_dir):
    """The test dictionary, loaded without touching global state."""
    return load_dictionary(dict_dir)


@pytest.fixture
def initialized(dict_dir):
    """Load the test dictionary as the process-wide dictionary."""
    rumorph.init_with(dict_dir)
    yield dict_dir
    rumorph.unload()
