"""
rumorph: Russian Morphological Analyzer

Dictionary-based analysis of Russian word forms with heuristics for
words missing from the dictionary. Uses the pymorphy2 Russian dictionary
compiled into marisa-trie automata.

Basic Usage:
    import rumorph

    rumorph.init()  # or rumorph.init_with("/path/to/dictionary")

    words, norms, tags = rumorph.xparse("котенок")
    for word, norm, tag in zip(words, norms, tags):
        print(f"{word} -> {norm} ({tag})")
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from rumorph.exceptions import (
    AlreadyInitializedError,
    DictionaryError,
    MorphError,
    NotInitializedError,
)

__version__ = "0.1.0"


# =============================================================================
# Initialization
# =============================================================================

def init(path: Optional[Union[str, Path]] = None) -> None:
    """
    Load the dictionary.

    Without a path the location is the RUMORPH_DATA environment variable
    if set, otherwise the data directory of the package.

    Raises:
        AlreadyInitializedError: If a dictionary is already loaded
        DictionaryError: If the dictionary can't be found or loaded
    """
    from rumorph.dictionary import init as _init
    _init(Path(path) if path is not None else None)


def init_with(path: Union[str, Path]) -> None:
    """
    Load the dictionary from the given directory.

    Raises:
        AlreadyInitializedError: If a dictionary is already loaded
        DictionaryError: If the dictionary can't be loaded
    """
    from rumorph.dictionary import init_with as _init_with
    _init_with(Path(path))


def is_initialized() -> bool:
    """Check if a dictionary is loaded."""
    from rumorph.dictionary import is_dictionary_loaded
    return is_dictionary_loaded()


def unload() -> None:
    """Unload the dictionary, so that init() can be called again."""
    from rumorph.dictionary import unload_dictionary
    unload_dictionary()


def get_dictionary():
    """
    Get the loaded dictionary, for use with analyzer.parse and
    extended.xparse.

    Raises:
        NotInitializedError: If no dictionary is loaded
    """
    from rumorph.dictionary import get_dictionary as _get_dictionary
    return _get_dictionary()


# =============================================================================
# Main API
# =============================================================================

def parse(word: str) -> Tuple[List[str], List[str], List[str]]:
    """
    Analyze a dictionary word.

    The word is matched as given (it should be lowercase).

    Returns:
        (words, norms, tags) of the same length, where words[i] is the word
        with ё restored, norms[i] its normal form and tags[i] its tag.
        The most probable analysis comes first.

    Raises:
        NotInitializedError: If no dictionary is loaded

    Example:
        >>> rumorph.parse("котенок")
        (['котёнок'], ['котёнок'], ['NOUN,anim,masc sing,nomn'])
    """
    from rumorph.analyzer import parse as _parse
    from rumorph.dictionary import get_dictionary
    return _parse(get_dictionary(), word)


def xparse(word: str) -> Tuple[List[str], List[str], List[str]]:
    """
    Analyze any word, including words missing from the dictionary.

    The word is lowercased first. For dictionary words this is the same
    as parse(); other words are guessed from their prefixes, suffixes
    and hyphenated parts.

    Raises:
        NotInitializedError: If no dictionary is loaded

    Example:
        >>> rumorph.xparse("по-западному")
        (['по-западному'], ['по-западному'], ['ADVB'])
    """
    from rumorph.dictionary import get_dictionary
    from rumorph.extended import xparse as _xparse
    return _xparse(get_dictionary(), word)


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Initialization
    "init",
    "init_with",
    "is_initialized",
    "unload",
    "get_dictionary",
    # Analysis
    "parse",
    "xparse",
    "get_version",
    # Exceptions
    "MorphError",
    "DictionaryError",
    "AlreadyInitializedError",
    "NotInitializedError",
    # Version
    "__version__",
]
