#!/usr/bin/env python3
"""
Main entry point for CryptoSeek.

This script provides the command-line interface: ``index`` builds the
obfuscated index from the documents directory, ``search <word>`` looks a
word up in it.
"""

import argparse
import logging
import sys

from cryptoseek import CryptoSeek, StorageError
import config


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cryptoseek",
        description="Index text documents into an obfuscated inverted index and search it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cryptoseek index                          # Index documents/*.txt into encrypted.idx
  cryptoseek --docs-dir ./notes index       # Use custom documents directory
  cryptoseek search cat                     # Look up a word
  cryptoseek search ca --similar            # Also show close matches on a miss
        """
    )

    parser.add_argument(
        "--docs-dir",
        type=str,
        default=None,
        help=f"Directory containing text files (default: {config.DOCS_DIR})"
    )

    parser.add_argument(
        "--index-file",
        type=str,
        default=None,
        help=f"Path of the index file (default: {config.INDEX_FILE})"
    )

    parser.add_argument(
        "--key",
        type=int,
        choices=range(256),
        metavar="0-255",
        default=None,
        help=f"XOR obfuscation key byte (default: {config.XOR_KEY})"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command")

    index_parser = subparsers.add_parser("index", help="Build the index")
    index_parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    search_parser = subparsers.add_parser("search", help="Search for a word")
    search_parser.add_argument("word", help="Word to look up")
    search_parser.add_argument(
        "--similar",
        action="store_true",
        help="On a miss, also show terms within a small edit distance"
    )

    return parser


def main(argv=None):
    """Main entry point for CryptoSeek."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_usage(sys.stderr)
        return 1

    config_dict = {}
    if args.key is not None:
        config_dict["XOR_KEY"] = args.key
    engine = CryptoSeek(docs_dir=args.docs_dir, index_file=args.index_file, config_dict=config_dict)

    if args.command == "index":
        try:
            index = engine.build_index()
        except StorageError as e:
            print(f"Error building index: {e}", file=sys.stderr)
            return 1
        print(f"Index built and encrypted to '{engine.index_file}'")
        if args.stats:
            engine.result_formatter.print_stats(engine.get_stats(index))
        return 0

    # search
    index = engine.load_index()
    result = engine.search(args.word, index=index)
    similar = engine.similar_terms(result, index) if args.similar else []
    engine.result_formatter.print_result(result, similar)
    return 0


if __name__ == "__main__":
    sys.exit(main())
