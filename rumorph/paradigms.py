"""
Paradigm table: decoding of inflectional forms.

A paradigm is stored as a flat uint16 array of length 3*n, one triple per
form: suffix indices in [0:n], tag indices in [n:2n] and prefix indices
in [2n:3n]. Form 0 is the normal (dictionary) form. A word form shares
its stem with every other form of its paradigm, so the normal form is
rebuilt by swapping the form's affixes for those of form 0.
"""

import struct
from array import array
from pathlib import Path
from typing import List, Sequence, Tuple

from rumorph.exceptions import DictionaryError


def load_paradigms(path: Path) -> List[array]:
    """
    Load paradigms from a paradigms.array file.

    Layout: little-endian uint16 paradigm count, then for each paradigm
    a uint16 length followed by that many uint16 values.

    Raises:
        DictionaryError: If the file is missing, truncated or malformed
    """
    if not path.exists():
        raise DictionaryError(f"Dictionary file not found: {path}")

    data = path.read_bytes()
    offset = 0

    def read_uint16s(count: int) -> Tuple[int, ...]:
        nonlocal offset
        end = offset + 2 * count
        if end > len(data):
            raise DictionaryError(f"Unexpected end of {path} at byte {offset}")
        values = struct.unpack_from(f"<{count}H", data, offset)
        offset = end
        return values

    (para_count,) = read_uint16s(1)
    paradigms = []
    for para_id in range(para_count):
        (para_len,) = read_uint16s(1)
        if para_len % 3 != 0:
            raise DictionaryError(
                f"Paradigm {para_id} in {path} has length {para_len}, "
                "not a multiple of 3"
            )
        paradigms.append(array("H", read_uint16s(para_len)))

    return paradigms


class ParadigmTable:
    """
    Paradigms together with the prefix, suffix and tag tables they index.
    """

    def __init__(
        self,
        paradigms: Sequence[Sequence[int]],
        prefixes: Sequence[str],
        suffixes: Sequence[str],
        tags: Sequence[str],
    ):
        self.paradigms = paradigms
        self.prefixes = prefixes
        self.suffixes = suffixes
        self.tags = tags

    def __len__(self) -> int:
        return len(self.paradigms)

    def decode(self, para_id: int, form_index: int) -> Tuple[str, str, str]:
        """
        Decode one form of a paradigm.

        Returns:
            (prefix, suffix, tag) of the form
        """
        para = self.paradigms[para_id]
        n = len(para) // 3
        suffix = self.suffixes[para[form_index]]
        tag = self.tags[para[form_index + n]]
        prefix = self.prefixes[para[form_index + 2 * n]]
        return prefix, suffix, tag

    def tag(self, para_id: int, form_index: int) -> str:
        """Get the tag of one form of a paradigm."""
        para = self.paradigms[para_id]
        return self.tags[para[form_index + len(para) // 3]]

    def normal_form(self, word: str, para_id: int, form_index: int) -> str:
        """
        Rebuild the normal form of a word.

        Args:
            word: The word form (as spelled in the dictionary)
            para_id: Paradigm of the word
            form_index: Index of the word's form inside the paradigm

        Returns:
            The normal form, e.g. "кошка" for "кошкой"
        """
        if form_index == 0:
            return word

        prefix, suffix, _ = self.decode(para_id, form_index)
        stem = word.removeprefix(prefix).removesuffix(suffix)

        norm_prefix, norm_suffix, _ = self.decode(para_id, 0)
        return norm_prefix + stem + norm_suffix
