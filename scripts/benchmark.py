"""
Dictionary benchmark for the word grid solver.

Usage:
    python -m scripts.benchmark [dictionary_path] [--repeat N] [--grid-size N] [--seed N]

Examples:
    python -m scripts.benchmark
    python -m scripts.benchmark words/fr.txt --repeat 5
    python -m scripts.benchmark words/fr.txt --grid-size 20 --seed 7

This will:
  1. Load the word list into a trie and time it
  2. Check every line of the file is found again
  3. Check that lines with "xx" appended are not found
  4. Check that words of every length add up to the trie size
  5. Optionally solve a random grid of the given size
"""
import argparse
import sys
from pathlib import Path

import numpy as np

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordgrid.settings import settings
from wordgrid.grid import Grid
from wordgrid.lexicon import load_trie, sanitize
from wordgrid.metrics import StageTimer
from wordgrid.solver import WordSearch, rank


def main():
    parser = argparse.ArgumentParser(description="Word Grid Dictionary Benchmark")
    parser.add_argument("dictionary", nargs="?", default=str(settings.DICTIONARY_PATH),
                        help=f"Path to a word list (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--repeat", type=int, default=1,
                        help="Number of passes for each check (default: 1)")
    parser.add_argument("--grid-size", type=int, default=0,
                        help="Solve a random grid of this size after the checks (0 = skip)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random grid")
    args = parser.parse_args()

    dict_path = Path(args.dictionary)
    if not dict_path.exists():
        print(f"Error: {dict_path} does not exist")
        sys.exit(1)

    lines = dict_path.read_text(encoding="utf-8").splitlines()
    timer = StageTimer()

    print("\n--- Loading ---")
    with timer.stage("load"):
        for _ in range(args.repeat):
            trie = load_trie(str(dict_path))
    timer.count("words", trie.size())
    print(f"Number of words: {trie.size()}")

    print("\n--- Existing words ---")
    with timer.stage("search_existing"):
        missing = []
        for _ in range(args.repeat):
            missing = [w for w in lines if sanitize(w) and not trie.contains_word(w)]
    for w in missing:
        print(f"  {w} / {len(w)} -> not found")

    print("\n--- Non-existing words ---")
    with timer.stage("search_absent"):
        hits = []
        for _ in range(args.repeat):
            hits = [w + "xx" for w in lines if trie.contains_word(w + "xx")]
    # A hit is only suspicious if the suffixed word is not itself in the list
    known = {sanitize(w) for w in lines}
    for w in hits:
        if sanitize(w) not in known:
            print(f"  {w} / {len(w)} -> found")

    print("\n--- Words by length ---")
    with timer.stage("by_length"):
        longest = max((len(sanitize(w)) for w in lines), default=0)
        total = sum(len(trie.get_words_of_length(n)) for n in range(longest + 1))
    if total != trie.size():
        print(f"Total mismatch: dict size = {trie.size()} / search total = {total}")
    else:
        print(f"Length partition OK ({total} words)")

    if args.grid_size > 0:
        print(f"\n--- Random {args.grid_size}x{args.grid_size} grid ---")
        grid = Grid.random(args.grid_size, np.random.default_rng(args.seed))
        print(grid.render())
        with timer.stage("solve"):
            found = WordSearch(grid, trie).solve()
        print(f"Number of words found: {len(found)}")
        print(", ".join(rank(found)))

    print("\nTimings (ms):")
    for name, ms in timer.summary().items():
        print(f"  {name}: {ms}")


if __name__ == "__main__":
    main()
