"""
Dictionary analyzer.

Looks a word up in the words automaton (tolerating е/ё), expands every
(paradigm, form) record into a (word, normal form, tag) analysis and
ranks the analyses by P(tag | word).
"""

from typing import List, Tuple

from rumorph.constants import PROBABILITY_MULTIPLIER
from rumorph.dictionary import MorphDictionary

# Three aligned lists: words, normal forms, tags
Parses = Tuple[List[str], List[str], List[str]]


def tag_probability(dictionary: MorphDictionary, word: str, tag: str) -> float:
    """
    Estimate P(tag | word) from the probability index.

    Returns 0.0 when the dictionary has no evidence for the pair.
    """
    weight = dictionary.probabilities.exact_value(f"{word}:{tag}")
    return weight / PROBABILITY_MULTIPLIER


def parse(dictionary: MorphDictionary, word: str) -> Parses:
    """
    Analyze a dictionary word.

    The word is matched as given, so it should already be lowercase.

    Args:
        dictionary: Loaded dictionary
        word: Word to analyze

    Returns:
        (words, norms, tags) of the same length, where words[i] is the
        word with ё restored, norms[i] its normal form and tags[i] its
        grammatical tag. The most probable analysis comes first. All
        three lists are empty if the word isn't in the dictionary.
    """
    table = dictionary.paradigms
    words, norms, tags, probs = [], [], [], []

    for key, records in dictionary.words.similar_items(word):
        for para_id, form_index in records:
            tag = table.tag(para_id, form_index)

            words.append(key)
            norms.append(table.normal_form(key, para_id, form_index))
            tags.append(tag)
            probs.append(tag_probability(dictionary, word, tag))

    # Without any probability data the lookup order is kept as is
    if any(p > 0 for p in probs):
        order = sorted(range(len(probs)), key=lambda i: -probs[i])
        words = [words[i] for i in order]
        norms = [norms[i] for i in order]
        tags = [tags[i] for i in order]

    return words, norms, tags
