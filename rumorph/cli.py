"""
CLI interface for rumorph.

Usage:
    rumorph котенок
    rumorph --json по-западному псевдокошка
    rumorph --dict-only --data /path/to/dictionary стали
    echo "человек-гора бутявкать" | rumorph
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rumorph import __version__
from rumorph.analyzer import Parses, parse
from rumorph.dictionary import get_data_path, load_dictionary
from rumorph.exceptions import MorphError
from rumorph.extended import xparse


# ============================================================================
# Output Formatting
# ============================================================================

def format_default(results: List[Tuple[str, Parses]]) -> str:
    """
    Default output: one tab-separated analysis per line.

    Each input word is followed by its analyses:
        котенок
            котёнок	котёнок	NOUN,anim,masc sing,nomn
    Words without analyses show "(unknown)".
    """
    lines = []
    for word, (words, norms, tags) in results:
        lines.append(word)
        if not words:
            lines.append("    (unknown)")
        for w, n, tag in zip(words, norms, tags):
            lines.append(f"    {w}\t{n}\t{tag}")
    return "\n".join(lines)


def format_json(results: List[Tuple[str, Parses]]) -> str:
    """Format analyses as JSON."""
    data = []
    for word, (words, norms, tags) in results:
        data.append({
            "input": word,
            "analyses": [
                {"word": w, "normal_form": n, "tag": tag}
                for w, n, tag in zip(words, norms, tags)
            ],
        })
    return json.dumps(data, ensure_ascii=False, indent=2)


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="rumorph",
        description="Russian Morphological Analyzer",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Words to analyze (read from stdin if omitted)",
    )
    parser.add_argument(
        "--dict-only", "-d",
        action="store_true",
        help="Only look words up in the dictionary, don't guess",
    )
    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Dictionary directory (default: $RUMORPH_DATA or the package data)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log dictionary loading",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"rumorph {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s',
        )

    words = args.words
    if not words:
        # Read from stdin
        words = sys.stdin.read().split()

    if not words:
        parser.print_help()
        sys.exit(1)

    try:
        dictionary = load_dictionary(get_data_path(args.data))
    except MorphError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    analyze = parse if args.dict_only else xparse
    results = [(word, analyze(dictionary, word)) for word in words]

    if args.json:
        print(format_json(results))
    else:
        print(format_default(results))


if __name__ == "__main__":
    main()
