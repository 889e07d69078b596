"""
Command-line harness: run the attack on the configured ciphertexts and print
the XOR table, the key pattern, the stage counts and the solutions.
"""

import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.exceptions import CryptanalysisError
from app.core.logging import configure_logging
from app.services.dictionary.source import FileWordSource
from app.services.xor.orchestrator import AttackOrchestrator
from app.services.xor.types import CiphertextSet

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="xorbreak",
        description="Recover a repeating four-letter XOR key with a dictionary.",
    )
    parser.add_argument(
        "--dictionary",
        default=settings.dictionary_path,
        help="newline-delimited word list (default: %(default)s)",
    )
    parser.add_argument(
        "--encoding",
        default=settings.dictionary_encoding,
        help="word list encoding (default: %(default)s)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="require exactly one dictionary match per ciphertext",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="threads used to verify candidate keys",
    )
    parser.add_argument("--quiet", action="store_true", help="skip the XOR table")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)

    orchestrator = AttackOrchestrator()
    if not args.quiet:
        print(orchestrator.xor_table.render())

    try:
        ciphertexts = CiphertextSet.from_lists(
            settings.default_ciphertexts, settings.key_length
        )
        source = FileWordSource(args.dictionary, args.encoding)
        result = orchestrator.run(
            ciphertexts,
            source.words(),
            {"strict": args.strict, "max_workers": args.workers},
        )
    except CryptanalysisError as e:
        logger.error("%s", e.message)
        return 1

    print(f"the key will have to match this regular expression: {result.pattern}")
    print(f"{result.dictionary_size} words in the complete dictionary")
    print(f"{result.length_matches} words contain {ciphertexts.key_length} characters")
    print(f"{len(result.candidate_keys)} words are plain text/secret key candidates")
    print(f"Found {len(result.solutions)} solutions:")
    for candidate in result.solutions:
        print(f"found candidate:  {candidate.secret} {list(candidate.plaintexts)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
