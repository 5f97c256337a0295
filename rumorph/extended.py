"""
Extended analyzer for words missing from the dictionary.

Dictionary analyses always win. For an unknown word the following
strategies are tried in order; each of the first four returns as soon
as it finds anything:

1. particle after a hyphen: смотри-ка -> смотри + -ка
2. adverb with по-: по-западному -> по- + западному (ADJF, sing,datv)
3. known prefix: псевдокошка -> псевдо + кошка
4. hyphenated compound: человек-гора -> человек + гора,
   интернет-магазин -> интернет- + магазин

If all of them fail, the results of the last two are merged:

5. unknown prefix: байткод -> (байт) + код
6. known suffix: бутявкать -> ...вкать, looked up in the prediction
   automata learned from the dictionary

Strategies 1-4 analyze the parts of the word recursively with the whole
cascade, strategy 5 with the dictionary only.
"""

import re
from typing import Callable, Dict, List, Tuple

from rumorph.analyzer import Parses, parse
from rumorph.constants import (
    ADVERB_PREFIX,
    ADVERB_TAG,
    FEATURE_ALIASES,
    FEATURE_GRAMMEMES,
    KNOWN_PREFIX_MIN_REMAINDER,
    KNOWN_PREFIXES,
    MAX_RECURSION_DEPTH,
    NONPRODUCTIVE_GRAMMEMES,
    PARTICLES_AFTER_HYPHEN,
    PREDICTION_MAX_SUFFIX_LENGTH,
    PREDICTION_MIN_WORD_LENGTH,
    UNKNOWN_PREFIX_MAX_LENGTH,
    UNKNOWN_PREFIX_MIN_REMAINDER,
)
from rumorph.dictionary import MorphDictionary

# Longest first, so that e.g. "псевдо-" is tried before "псевдо"
SORTED_KNOWN_PREFIXES = sorted(KNOWN_PREFIXES, key=lambda p: (-len(p), p))

_GRAMMEME_RE = re.compile(r"[^ ,]+")

Recurse = Callable[[str], Parses]


# ============================================================================
# Helpers
# ============================================================================

def is_productive(tag: str) -> bool:
    """
    Check that a tag doesn't belong to a closed word class.

    New pronouns, numerals, prepositions etc. are never guessed.
    """
    return not any(g in tag for g in NONPRODUCTIVE_GRAMMEMES)


def _feature_or_empty(match: re.Match) -> str:
    grammeme = match.group(0)
    grammeme = FEATURE_ALIASES.get(grammeme, grammeme)
    return grammeme if grammeme in FEATURE_GRAMMEMES else ""


def similarity_features(tag: str) -> str:
    """
    Reduce a tag to the grammemes that must agree inside a compound.

    Other grammemes are blanked, separators are kept:
    "NOUN,anim,masc sing,nomn" -> "NOUN,, sing,nomn"
    """
    return _GRAMMEME_RE.sub(_feature_or_empty, tag)


def word_splits(
    word: str,
    min_remainder: int,
    max_prefix_length: int,
) -> List[Tuple[str, str]]:
    """
    Split a word into (prefix, rest) pairs, shortest prefix first.

    Prefixes are 1..max_prefix_length characters long and the rest keeps
    at least min_remainder characters.
    """
    n = min(max_prefix_length, len(word) - min_remainder)
    return [(word[:i], word[i:]) for i in range(1, n + 1)]


def suffix_splits(word: str, max_suffix_length: int) -> List[Tuple[str, str]]:
    """
    Split a word into (start, ending) pairs, longest ending first.

    Endings are 1..max_suffix_length characters long; the start is never
    empty.
    """
    n = min(max_suffix_length, len(word) - 1)
    return [(word[:-i], word[-i:]) for i in range(n, 0, -1)]


# ============================================================================
# Strategies
# ============================================================================

def _strip_particle(word: str, recurse: Recurse) -> Parses:
    if "-" not in word:
        return [], [], []

    for particle in PARTICLES_AFTER_HYPHEN:
        if not word.endswith(particle):
            continue
        words, norms, tags = recurse(word[:-len(particle)])
        if words:
            return (
                [w + particle for w in words],
                [n + particle for n in norms],
                list(tags),
            )

    return [], [], []


def _hyphen_adverb(word: str, recurse: Recurse) -> Parses:
    if len(word) < 5 or not word.startswith(ADVERB_PREFIX):
        return [], [], []

    words, _, tags = recurse(word[len(ADVERB_PREFIX):])
    for w, tag in zip(words, tags):
        if tag.startswith("ADJF") and "sing,datv" in tag:
            adverb = ADVERB_PREFIX + w
            return [adverb], [adverb], [ADVERB_TAG]

    return [], [], []


def _strip_known_prefix(word: str, recurse: Recurse) -> Parses:
    words, norms, tags = [], [], []

    for prefix in SORTED_KNOWN_PREFIXES:
        if not word.startswith(prefix):
            continue
        rest = word[len(prefix):]
        if len(rest) < KNOWN_PREFIX_MIN_REMAINDER:
            continue

        for w, n, tag in zip(*recurse(rest)):
            if not is_productive(tag):
                continue
            words.append(prefix + w)
            norms.append(prefix + n)
            tags.append(tag)

    return words, norms, tags


def _split_hyphenated(word: str, recurse: Recurse) -> Parses:
    if word.count("-") != 1 or word.startswith("-") or word.endswith("-"):
        return [], [], []

    left, right = word.split("-")
    lwords, lnorms, ltags = recurse(left)
    rwords, rnorms, rtags = recurse(right)
    right_features = [similarity_features(tag) for tag in rtags]

    words, norms, tags = [], [], []

    # Both parts inflect and agree: человек-гора, бегает-прыгает
    for lw, ln, tag in zip(lwords, lnorms, ltags):
        left_features = similarity_features(tag)
        for rw, rn, features in zip(rwords, rnorms, right_features):
            if features != left_features:
                continue
            words.append(f"{lw}-{rw}")
            norms.append(f"{ln}-{rn}")
            tags.append(tag)

    # The left part is fixed: интернет-магазин
    for rw, rn, tag in zip(rwords, rnorms, rtags):
        words.append(f"{left}-{rw}")
        norms.append(f"{left}-{rn}")
        tags.append(tag)

    return words, norms, tags


def _guess_unknown_prefix(dictionary: MorphDictionary, word: str) -> Parses:
    words, norms, tags = [], [], []

    for prefix, rest in word_splits(
        word, UNKNOWN_PREFIX_MIN_REMAINDER, UNKNOWN_PREFIX_MAX_LENGTH
    ):
        for w, n, tag in zip(*parse(dictionary, rest)):
            if not is_productive(tag):
                continue
            words.append(prefix + w)
            norms.append(prefix + n)
            tags.append(tag)

    return words, norms, tags


def _predict_by_suffix(
    dictionary: MorphDictionary,
    word: str,
    collected: Parses,
) -> None:
    """Add analyses of words with the same ending to ``collected``."""
    if len(word) < PREDICTION_MIN_WORD_LENGTH:
        return

    table = dictionary.paradigms
    words, norms, tags = collected
    seen = set(zip(words, norms, tags))
    splits = suffix_splits(word, PREDICTION_MAX_SUFFIX_LENGTH)

    for prefix, automaton in zip(
        dictionary.paradigm_prefixes, dictionary.prediction_suffixes
    ):
        if not word.startswith(prefix):
            continue

        total_count = 0
        for start, ending in splits:
            for key, records in automaton.similar_items(ending):
                for count, para_id, form_index in records:
                    tag = table.tag(para_id, form_index)
                    if not is_productive(tag):
                        continue

                    total_count += count

                    form = start + key
                    analysis = (form, table.normal_form(form, para_id, form_index), tag)
                    if analysis in seen:
                        continue
                    seen.add(analysis)

                    words.append(analysis[0])
                    norms.append(analysis[1])
                    tags.append(analysis[2])

            # Enough words share this ending, shorter ones are less reliable
            if total_count > 1:
                break


# ============================================================================
# Main API
# ============================================================================

def xparse(dictionary: MorphDictionary, word: str) -> Parses:
    """
    Analyze a word that might not be in the dictionary.

    Args:
        dictionary: Loaded dictionary
        word: Word to analyze (any case)

    Returns:
        (words, norms, tags) of the same length, see analyzer.parse.
        If the lowercased word is in the dictionary this equals
        parse(dictionary, word.lower()). Empty lists if no strategy
        found anything.
    """
    words, norms, tags = _xparse(dictionary, word.lower(), {}, 0)
    return list(words), list(norms), list(tags)


def _xparse(
    dictionary: MorphDictionary,
    word: str,
    cache: Dict[str, Parses],
    depth: int,
) -> Parses:
    """
    Run the cascade for a lowercase word.

    Results are memoized in ``cache`` for the duration of one xparse()
    call and must not be modified by the callers.
    """
    if word in cache:
        return cache[word]

    result = parse(dictionary, word)
    if not result[0]:
        if depth >= MAX_RECURSION_DEPTH:
            # Cut short by the cap; shallower callers must analyze it again
            return result
        result = _analyze_unknown(dictionary, word, cache, depth)

    cache[word] = result
    return result


def _analyze_unknown(
    dictionary: MorphDictionary,
    word: str,
    cache: Dict[str, Parses],
    depth: int,
) -> Parses:
    def recurse(part: str) -> Parses:
        return _xparse(dictionary, part, cache, depth + 1)

    for strategy in (
        _strip_particle,
        _hyphen_adverb,
        _strip_known_prefix,
        _split_hyphenated,
    ):
        result = strategy(word, recurse)
        if result[0]:
            return result

    result = _guess_unknown_prefix(dictionary, word)
    _predict_by_suffix(dictionary, word, result)
    return result
