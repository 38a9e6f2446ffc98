import argparse
import time
from colorama import Fore

import path_cache
import utils
from errors import NotFoundError, WordSourceUnavailable
from graph_processor import GraphProcessor
from path_cache import print_cache_summary
from utils import UNREACHABLE, log_with_time, normalize_word


def build_parser():
    parser = argparse.ArgumentParser(description="Word ladder shortest paths")
    parser.add_argument("dictionary", help="Dictionary file path or http(s) URL, one word per line")
    parser.add_argument(
        "--query",
        nargs=2,
        action="append",
        default=[],
        metavar=("FROM", "TO"),
        help="Print the shortest path and distance between two words (repeatable)",
    )
    parser.add_argument("--workers", type=int, default=None, help="Processes used to test word adjacency (default: 1)")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--no-cache", action="store_true", help="Disable caching of reconstructed paths")
    return parser


def print_query(processor, word1, word2):
    """Print one query result; returns False if a word is unknown."""
    try:
        path = processor.shortest_path(word1, word2)
        distance = processor.shortest_distance(word1, word2)
    except NotFoundError as e:
        log_with_time(f"'{e.word}' is not in the dictionary", color=Fore.YELLOW)
        return False
    if distance == UNREACHABLE:
        print(Fore.LIGHTYELLOW_EX + f"{word1} -> {word2}: no path" + Fore.RESET)
    else:
        print(Fore.GREEN + f"{word1} -> {word2} ({distance}): " + " -> ".join(path) + Fore.RESET)
    return True


def run_cli(argv=None):
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    path_cache.CACHE_DISABLED = args.no_cache

    processor = GraphProcessor()
    try:
        count = processor.populate_from_source(args.dictionary, workers=args.workers)
    except WordSourceUnavailable as e:
        log_with_time(str(e), color=Fore.RED)
        return 1
    log_with_time(f"✅ {count} words, {processor.graph.edge_count} edges")

    processor.precompute()

    for word1, word2 in args.query:
        print_query(processor, normalize_word(word1), normalize_word(word2))

    if args.verbose and args.query:
        print_cache_summary(processor.snapshot.path_cache)
    return 0
