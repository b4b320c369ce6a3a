#!/usr/bin/env python3
"""
Command line entry point: build a chain and print generated text.

Usage:
    literate-randomizer --unit paragraphs --paragraphs 2 --sentences 3-6
    python -m literate_randomizer.markov_chain.generate --source-file corpus.txt --unit sentence
"""

import argparse
import json
import sys

from literate_randomizer.errors import LiterateRandomizerError
from literate_randomizer.markov_chain.analytics import MarkovChainAnalytics
from literate_randomizer.markov_chain.markov_chain import MarkovChain

UNITS = ("word", "first-word", "markov-word", "sentence", "paragraph", "paragraphs")


def parse_count(value):
    """Parse "N" or "MIN-MAX" into an int or a (min, max) pair."""
    try:
        if "-" in value:
            minimum, maximum = value.split("-", 1)
            return (int(minimum), int(maximum))
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected N or MIN-MAX, got '{value}'") from None


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate filler text from a Markov chain built over a corpus")
    parser.add_argument("--source-file",
                        help="Corpus file (.txt or .csv); defaults to the bundled corpus")
    parser.add_argument("--unit", choices=UNITS, default="paragraphs",
                        help="What to generate (default: paragraphs)")
    parser.add_argument("--words", type=parse_count,
                        help="Words per sentence, N or MIN-MAX (default: 3-15)")
    parser.add_argument("--sentences", type=parse_count,
                        help="Sentences per paragraph, N or MIN-MAX (default: 5-15)")
    parser.add_argument("--paragraphs", type=parse_count,
                        help="Paragraphs, N or MIN-MAX (default: 3-5)")
    parser.add_argument("--first-word", help="Start word of the generated text")
    parser.add_argument("--punctuation", help="Punctuation ending the generated text")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    parser.add_argument("--env", default="development",
                        help="Configuration environment (default: development)")
    parser.add_argument("--stats", action="store_true",
                        help="Print chain statistics as JSON instead of text")
    return parser


def generate(chain, args):
    if args.unit == "word":
        return chain.word()
    if args.unit == "first-word":
        return chain.first_word()
    if args.unit == "markov-word":
        return chain.markov_word()
    if args.unit == "sentence":
        return chain.sentence(first_word=args.first_word, words=args.words,
                              punctuation=args.punctuation)
    if args.unit == "paragraph":
        return chain.paragraph(first_word=args.first_word, words=args.words,
                               sentences=args.sentences, punctuation=args.punctuation)
    return chain.paragraphs(first_word=args.first_word, words=args.words,
                            sentences=args.sentences, paragraphs=args.paragraphs,
                            punctuation=args.punctuation)


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        chain = MarkovChain(source_material_file=args.source_file, seed=args.seed,
                            environment=args.env)
        if args.stats:
            output = json.dumps(MarkovChainAnalytics(chain).analyze_model(), indent=2)
        else:
            output = generate(chain, args)
    except LiterateRandomizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
