"""Command-line interface for typocheck."""

import argparse

from typocheck.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="typocheck",
        description="Check words against a dictionary and suggest corrections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a few words against words.txt in the current directory
  %(prog)s door dooor dsek

  # Check every line of a file against a custom dictionary
  %(prog)s -D ~/dicts/english.txt essay.txt -v

  # Using JSON config
  %(prog)s --config config.json

Arguments shaped like name.ext are read as files of newline-delimited words;
anything else is checked as a word.

Example config.json:
{
  "dictionary": "words.txt",
  "words": ["essay.txt", "recieve"],
  "threshold": 7,
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "words",
        nargs="*",
        metavar="WORD_OR_FILE",
        help="Words to check, or newline-delimited files of words",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument(
        "-D",
        "--dictionary",
        type=str,
        default=Constants.DEFAULT_DICTIONARY,
        help=f"Newline-delimited dictionary file (default: {Constants.DEFAULT_DICTIONARY})",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=Constants.DEFAULT_THRESHOLD,
        help="Suggest only words scoring strictly below this when no single edit matches",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
