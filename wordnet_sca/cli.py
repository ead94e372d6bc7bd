"""
Command-line clients for the ancestor engine, the lexicon and the outcast finder.

Examples:
    wordnet-sca sca digraph1.txt < pairs.txt
    wordnet-sca wordnet synsets.txt hypernyms.txt worm bird
    wordnet-sca outcast synsets.txt hypernyms.txt outcast5.txt outcast8.txt
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .csv_adapter import CSVAdapter
from .digraph import Digraph
from .errors import SCAError
from .outcast import Outcast
from .sca import ShortestCommonAncestor

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='wordnet-sca', description="Shortest common ancestors in WordNet")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("sca", help="Read 'v w' pairs from stdin; print length and ancestor")
    p.add_argument("digraph", help="Digraph file (V, E, then E edges)")

    p = sub.add_parser("wordnet", help="Report on two nouns of a lexicon")
    p.add_argument("synsets", help="Synsets file")
    p.add_argument("hypernyms", help="Hypernyms file")
    p.add_argument("word1")
    p.add_argument("word2")

    p = sub.add_parser("outcast", help="Mark the outcast of each noun list")
    p.add_argument("synsets", help="Synsets file")
    p.add_argument("hypernyms", help="Hypernyms file")
    p.add_argument("files", nargs="+", help="Files of whitespace-separated nouns")

    return parser.parse_args(argv)


def run_sca(digraph_path: str, stdin: TextIO, out: TextIO) -> None:
    sca = ShortestCommonAncestor(Digraph.from_file(digraph_path))
    tokens = stdin.read().split()
    if len(tokens) % 2:
        raise ValueError("Expected pairs of vertices on stdin")
    for i in range(0, len(tokens), 2):
        v, w = int(tokens[i]), int(tokens[i + 1])
        out.write(f"length = {sca.length(v, w)}, ancestor = {sca.ancestor(v, w)}\n")


def run_wordnet(synsets: str, hypernyms: str, word1: str, word2: str, out: TextIO) -> None:
    wordnet = CSVAdapter('cli', synsets_path=synsets, hypernyms_path=hypernyms)
    out.write(f"# of nouns = {len(wordnet.nouns())}\n")
    out.write(f"isNoun({word1})? {wordnet.is_noun(word1)}\n")
    out.write(f"isNoun({word2})? {wordnet.is_noun(word2)}\n")
    out.write(f"isNoun({word1} {word2})? {wordnet.is_noun(word1 + ' ' + word2)}\n")
    out.write(f"sca({word1}, {word2}) = {wordnet.sca(word1, word2)}\n")
    out.write(f"distance({word1}, {word2}) = {wordnet.distance(word1, word2)}\n")


def run_outcast(synsets: str, hypernyms: str, files: List[str], out: TextIO) -> None:
    outcast = Outcast(CSVAdapter('cli', synsets_path=synsets, hypernyms_path=hypernyms))
    for path in files:
        with open(path, encoding='utf-8') as f:
            nouns = f.read().split()
        odd = outcast.outcast(nouns)
        marked = [f"*{noun}*" if noun == odd else noun for noun in nouns]
        out.write(f"{path}: {' '.join(marked)}\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        if args.command == "sca":
            run_sca(args.digraph, sys.stdin, sys.stdout)
        elif args.command == "wordnet":
            run_wordnet(args.synsets, args.hypernyms, args.word1, args.word2, sys.stdout)
        else:
            run_outcast(args.synsets, args.hypernyms, args.files, sys.stdout)
    except (SCAError, ValueError, OSError) as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
