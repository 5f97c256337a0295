"""
Compiled dictionary for rumorph.

A dictionary directory holds the string tables (prefixes, suffixes, tags),
the paradigm array and a set of marisa_trie.RecordTrie files:

- words.marisa: word form -> (paradigm id, form index)
- p_t_given_w.marisa: "word:tag" -> (P(tag | word) * 1000000,)
- prediction-suffixes-<i>.marisa: word ending -> (count, paradigm id,
  form index), one per paradigm prefix

Directories are produced by scripts/build_dictionary.py from the
pymorphy2 Russian dictionary.

Loading gives an immutable MorphDictionary. The module also keeps one
process-wide dictionary for the package-level API; it is loaded once with
init() or init_with() and released with unload_dictionary().
"""

import json
import logging
import os
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from rumorph.automaton import Automaton
from rumorph.constants import (
    DATA_ENV_VAR,
    DEFAULT_PARADIGM_PREFIXES,
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
from rumorph.exceptions import (
    AlreadyInitializedError,
    DictionaryError,
    NotInitializedError,
)
from rumorph.paradigms import ParadigmTable, load_paradigms

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MorphDictionary:
    """
    A loaded dictionary. Never modified after loading.

    Attributes:
        path: Directory the dictionary was loaded from
        paradigms: Paradigm table with its prefix, suffix and tag tables
        words: Word form automaton
        probabilities: Probability index keyed by "word:tag"
        paradigm_prefixes: Prefix of each prediction class ("", "по", "наи")
        prediction_suffixes: Prediction automaton of each prefix class
    """
    path: Path
    paradigms: ParadigmTable
    words: Automaton
    probabilities: Automaton
    paradigm_prefixes: Tuple[str, ...]
    prediction_suffixes: Tuple[Automaton, ...]


# ============================================================================
# Paths
# ============================================================================

def get_default_data_path() -> Path:
    """Get the default dictionary directory inside the package."""
    return Path(__file__).parent / "data"


def get_data_path(path: Optional[Path] = None) -> Path:
    """
    Resolve the dictionary directory.

    Order: explicit path, the RUMORPH_DATA environment variable, the
    package data directory.

    Raises:
        DictionaryError: If the directory doesn't exist
    """
    if path is None:
        env_path = os.environ.get(DATA_ENV_VAR)
        path = Path(env_path) if env_path else get_default_data_path()

    path = Path(path)
    if not path.is_dir():
        raise DictionaryError(
            f"Dictionary not found at {path}. "
            "Run 'python scripts/build_dictionary.py' to build it "
            f"or set {DATA_ENV_VAR}."
        )
    return path


# ============================================================================
# Loading
# ============================================================================

def load_string_list(path: Path) -> List[str]:
    """
    Load a JSON list of strings.

    Raises:
        DictionaryError: If the file is missing or isn't a list of strings
    """
    if not path.exists():
        raise DictionaryError(f"Dictionary file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise DictionaryError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, list) or not all(isinstance(s, str) for s in data):
        raise DictionaryError(f"{path} is not a JSON list of strings")

    return data


def load_dictionary(path: Path) -> MorphDictionary:
    """
    Load a dictionary directory.

    Nothing global is touched; use init_with() to make the dictionary
    available to the package-level API.

    Args:
        path: Dictionary directory

    Returns:
        The loaded MorphDictionary

    Raises:
        DictionaryError: If any resource is missing or malformed
            (paradigm-prefixes.json is optional)
    """
    path = Path(path)
    t0 = time.perf_counter()

    tags = load_string_list(path / GRAMTAB_FILE)

    prefixes_path = path / PARADIGM_PREFIXES_FILE
    if prefixes_path.exists():
        prefixes = load_string_list(prefixes_path)
    else:
        logger.info(f"{prefixes_path} not found, using default paradigm prefixes")
        prefixes = list(DEFAULT_PARADIGM_PREFIXES)

    suffixes = load_string_list(path / SUFFIXES_FILE)
    paradigms = load_paradigms(path / PARADIGMS_FILE)

    words = Automaton.load(WORDS_FORMAT, path / WORDS_FILE)
    probabilities = Automaton.load(PROBABILITY_FORMAT, path / PROBABILITIES_FILE)

    prediction_suffixes = tuple(
        Automaton.load(
            PREDICTION_FORMAT,
            path / PREDICTION_SUFFIXES_FILE.format(prefix_id),
        )
        for prefix_id in range(len(prefixes))
    )

    dictionary = MorphDictionary(
        path=path,
        paradigms=ParadigmTable(paradigms, prefixes, suffixes, tags),
        words=words,
        probabilities=probabilities,
        paradigm_prefixes=tuple(prefixes),
        prediction_suffixes=prediction_suffixes,
    )

    elapsed = (time.perf_counter() - t0) * 1000
    logger.info(
        f"Loaded dictionary from {path} in {elapsed:.1f}ms "
        f"({len(words):,} word forms, {len(paradigms):,} paradigms, "
        f"{len(tags):,} tags)"
    )
    return dictionary


# ============================================================================
# Process-wide Dictionary
# ============================================================================

_DICTIONARY: Optional[MorphDictionary] = None
_LOAD_LOCK = threading.Lock()


def is_dictionary_loaded() -> bool:
    """Check if the process-wide dictionary is loaded."""
    return _DICTIONARY is not None


def get_dictionary() -> MorphDictionary:
    """
    Get the process-wide dictionary.

    Raises:
        NotInitializedError: If init() or init_with() wasn't called
    """
    dictionary = _DICTIONARY
    if dictionary is None:
        raise NotInitializedError("not initialized; call init or init_with")
    return dictionary


def init(path: Optional[Path] = None) -> MorphDictionary:
    """
    Load the process-wide dictionary.

    See get_data_path() for how the location is found when no path is
    given.

    Raises:
        AlreadyInitializedError: If a dictionary is already loaded
        DictionaryError: If the dictionary can't be found or loaded
    """
    return _init(path)


def init_with(path: Path) -> MorphDictionary:
    """
    Load the process-wide dictionary from the given directory.

    Raises:
        AlreadyInitializedError: If a dictionary is already loaded
        DictionaryError: If the dictionary can't be loaded
    """
    return _init(Path(path))


def _init(path: Optional[Path]) -> MorphDictionary:
    global _DICTIONARY

    with _LOAD_LOCK:
        if _DICTIONARY is not None:
            raise AlreadyInitializedError("already initialized")

        # Published only once every resource loaded
        dictionary = load_dictionary(get_data_path(path))
        _DICTIONARY = dictionary

    return dictionary


def unload_dictionary():
    """Release the process-wide dictionary so that it can be loaded again."""
    global _DICTIONARY
    with _LOAD_LOCK:
        _DICTIONARY = None
