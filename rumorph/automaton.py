"""
Read-only automata over lowercase Russian text.

Each automaton is a marisa_trie.RecordTrie mapping a key to one or more
fixed-width records. Three kinds are used:

- the words automaton: word form -> (paradigm id, form index)
- the probability index: "word:tag" -> (weight,)
- prediction automata: word ending -> (count, paradigm id, form index)

Besides exact lookup, keys can be matched approximately: a "е" in the
query also matches a "ё" in the key, since dictionaries spell "ё" but
people rarely type it.
"""

from collections import deque
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import marisa_trie

from rumorph.constants import YO_REPLACES
from rumorph.exceptions import DictionaryError

Record = Tuple[int, ...]


class Automaton:
    """
    Immutable key -> records automaton.

    Attributes:
        fmt: struct format of the records (e.g. ">HH")
    """

    def __init__(self, fmt: str, trie: marisa_trie.RecordTrie):
        self.fmt = fmt
        self._trie = trie

    @classmethod
    def build(cls, fmt: str, items: Iterable[Tuple[str, Record]]) -> "Automaton":
        """
        Build an automaton in memory.

        Args:
            fmt: struct format of the records
            items: (key, record) pairs; a key may repeat

        Returns:
            The new Automaton
        """
        return cls(fmt, marisa_trie.RecordTrie(fmt, items))

    @classmethod
    def load(cls, fmt: str, path: Path) -> "Automaton":
        """
        Memory-map a saved automaton.

        Raises:
            DictionaryError: If the file is missing or not a valid trie
        """
        if not path.exists():
            raise DictionaryError(f"Dictionary file not found: {path}")

        trie = marisa_trie.RecordTrie(fmt)
        try:
            trie.mmap(str(path))
        except (RuntimeError, OSError) as e:
            raise DictionaryError(f"Cannot read {path}: {e}") from e

        return cls(fmt, trie)

    def save(self, path: Path) -> None:
        """Save the automaton to a file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        self._trie.save(str(path))

    def __repr__(self) -> str:
        return f"Automaton({self.fmt!r}, {len(self)} records)"

    def __len__(self) -> int:
        return len(self._trie)

    def __contains__(self, key: str) -> bool:
        return key in self._trie

    def get(self, key: str) -> List[Record]:
        """
        Exact lookup.

        Records come back in ascending order of their fields so that
        lookups are deterministic.
        """
        return sorted(self._trie.get(key, []))

    def has_prefix(self, prefix: str) -> bool:
        """Check if any key starts with the given prefix."""
        try:
            next(iter(self._trie.iterkeys(prefix)))
            return True
        except StopIteration:
            return False

    def exact_value(self, key: str) -> int:
        """First field of the key's first record, or 0 if the key is absent."""
        records = self.get(key)
        if not records:
            return 0
        return records[0][0]

    def similar_items(
        self,
        query: str,
        replaces: Dict[str, Tuple[str, ...]] = YO_REPLACES,
    ) -> List[Tuple[str, List[Record]]]:
        """
        Approximate lookup.

        Every character of the query that appears in ``replaces`` may match
        either itself or one of its replacements, independently at each
        position. Branches are explored breadth-first and dropped as soon
        as no key starts with the spelling built so far.

        Args:
            query: Text to look up
            replaces: Map of query character -> alternative key characters

        Returns:
            (matched key, records) pairs in ascending key order. The matched
            key is the stored spelling, e.g. "котёнок" for "котенок".
        """
        results = []
        # (spelling so far, position in query)
        queue = deque([("", 0)])

        while queue:
            prefix, pos = queue.popleft()

            if pos == len(query):
                records = self.get(prefix)
                if records:
                    results.append((prefix, records))
                continue

            char = query[pos]
            for candidate in (char,) + replaces.get(char, ()):
                extended = prefix + candidate
                if self.has_prefix(extended):
                    queue.append((extended, pos + 1))

        return results
