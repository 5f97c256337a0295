#!/usr/bin/env python3
"""
Dictionary Builder for rumorph.

This script converts the pymorphy2 Russian dictionary (as shipped by the
pymorphy3-dicts-ru or pymorphy2-dicts-ru packages) into the rumorph
dictionary layout. The string tables and the paradigm array are copied
as is; the DAWG automata are read with DAWG-Python and saved as
marisa_trie.RecordTrie files.

Usage:
    python scripts/build_dictionary.py [--source PATH] [--output PATH]

Requirements:
    pip install rumorph[build] pymorphy3-dicts-ru
"""

import argparse
import importlib
import logging
import shutil
import sys
import time
from pathlib import Path
from typing import Iterator, Optional, Tuple

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import dawg_python

from rumorph.automaton import Automaton
from rumorph.constants import (
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
from rumorph.dictionary import load_dictionary, load_string_list

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# Paths
# ============================================================================

DEFAULT_OUTPUT = Path(__file__).parent.parent / "rumorph" / "data"

# Packages shipping the pymorphy2 Russian dictionary, newest first
DICT_PACKAGES = ("pymorphy3_dicts_ru", "pymorphy2_dicts_ru")

# pymorphy2 file names
SOURCE_WORDS = "words.dawg"
SOURCE_PROBABILITIES = "p_t_given_w.intdawg"
SOURCE_PREDICTION_SUFFIXES = "prediction-suffixes-{}.dawg"

# Copied without conversion
COPIED_FILES = (GRAMTAB_FILE, SUFFIXES_FILE, PARADIGMS_FILE)


def find_pymorphy_dictionary() -> Optional[Path]:
    """Find the data directory of an installed pymorphy2 Russian dictionary."""
    for name in DICT_PACKAGES:
        try:
            module = importlib.import_module(name)
        except ImportError:
            continue
        path = Path(module.__path__[0]) / "data"
        logger.info(f"Found {name} at {path}")
        return path
    return None


# ============================================================================
# Conversion
# ============================================================================

def iter_record_items(path: Path, fmt: str) -> Iterator[Tuple[str, tuple]]:
    """Read (key, record) pairs from a pymorphy2 RecordDAWG."""
    dawg = dawg_python.RecordDAWG(fmt).load(str(path))
    yield from dawg.items()


def iter_int_items(path: Path) -> Iterator[Tuple[str, tuple]]:
    """Read (key, (value,)) pairs from a pymorphy2 IntCompletionDAWG."""
    dawg = dawg_python.IntCompletionDAWG().load(str(path))
    for key in dawg.keys():
        yield key, (dawg[key],)


def convert(source: Path, output: Path, items: Iterator, fmt: str):
    """Save (key, record) pairs as an automaton."""
    t0 = time.perf_counter()
    automaton = Automaton.build(fmt, items)
    automaton.save(output)

    file_size = output.stat().st_size / (1024 * 1024)
    logger.info(
        f"Converted {source.name} -> {output.name}: {len(automaton):,} records, "
        f"{file_size:.1f} MB in {time.perf_counter() - t0:.1f}s"
    )


def build_dictionary(source: Path, output: Path):
    """Convert a pymorphy2 dictionary directory into a rumorph one."""
    output.mkdir(parents=True, exist_ok=True)

    for name in COPIED_FILES:
        shutil.copyfile(source / name, output / name)
        logger.info(f"Copied {name}")

    prefixes_path = source / PARADIGM_PREFIXES_FILE
    if prefixes_path.exists():
        shutil.copyfile(prefixes_path, output / PARADIGM_PREFIXES_FILE)
        prefix_count = len(load_string_list(prefixes_path))
        logger.info(f"Copied {PARADIGM_PREFIXES_FILE} ({prefix_count} prefixes)")
    else:
        prefix_count = len(DEFAULT_PARADIGM_PREFIXES)
        logger.info(f"No {PARADIGM_PREFIXES_FILE}, default prefixes will be used")

    logger.info("Converting word forms...")
    convert(
        source / SOURCE_WORDS,
        output / WORDS_FILE,
        iter_record_items(source / SOURCE_WORDS, WORDS_FORMAT),
        WORDS_FORMAT,
    )

    logger.info("Converting tag probabilities...")
    convert(
        source / SOURCE_PROBABILITIES,
        output / PROBABILITIES_FILE,
        iter_int_items(source / SOURCE_PROBABILITIES),
        PROBABILITY_FORMAT,
    )

    logger.info("Converting prediction suffixes...")
    for prefix_id in range(prefix_count):
        src = source / SOURCE_PREDICTION_SUFFIXES.format(prefix_id)
        convert(
            src,
            output / PREDICTION_SUFFIXES_FILE.format(prefix_id),
            iter_record_items(src, PREDICTION_FORMAT),
            PREDICTION_FORMAT,
        )


# ============================================================================
# Main
# ============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Build the rumorph dictionary from the pymorphy2 Russian dictionary"
    )
    parser.add_argument(
        '--source', '-s',
        type=Path,
        default=None,
        help="pymorphy2 dictionary directory (default: installed pymorphy3/2-dicts-ru)"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output dictionary directory (default: {DEFAULT_OUTPUT})"
    )

    args = parser.parse_args()

    source = args.source or find_pymorphy_dictionary()
    if source is None:
        logger.error(
            "No pymorphy2 dictionary found; install pymorphy3-dicts-ru "
            "or pass --source"
        )
        sys.exit(1)

    if not (source / SOURCE_WORDS).exists():
        logger.error(f"Not a pymorphy2 dictionary directory: {source}")
        sys.exit(1)

    start_time = time.time()

    build_dictionary(source, args.output)

    # Check that the result loads
    dictionary = load_dictionary(args.output)
    logger.info(f"Dictionary has {len(dictionary.words):,} word forms")

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
