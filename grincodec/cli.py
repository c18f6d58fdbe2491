"""
cli.py

Command-line driver: grin <encode|decode> <infile> <outfile>
"""


import argparse
import sys
from typing import List, Optional

from .codecs import decode, encode
from .errors import GrinError
from .logger import Log, LogLevel, Logger

OPERATIONS = {
    "encode": (encode, "encoded"),
    "decode": (decode, "decoded"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grin",
        description="Compress and decompress files with Huffman coding.",
    )
    parser.add_argument("operation", choices=sorted(OPERATIONS), help="encode a file to .grin or decode a .grin file")
    parser.add_argument("infile", help="file to read")
    parser.add_argument("outfile", help="file to write")
    parser.add_argument("-v", "--verbose", action="store_true", help="print info log records")
    parser.add_argument("--log-file", default=None, help="save log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    operation, past_tense = OPERATIONS[args.operation]

    logger = Logger()
    logger.display_info = args.verbose
    logger.display_progress = args.verbose
    # errors go to stderr below
    logger.display_error = False

    status = 0
    try:
        operation(args.infile, args.outfile, logger)
    except (GrinError, ValueError, OSError) as e:
        logger.log(Log("Cli_error", LogLevel.ERROR, str(e)))
        print(f"Failed to {args.operation} {args.infile}: {e}", file=sys.stderr)
        status = 1

    if args.log_file is not None:
        try:
            logger.save(args.log_file)
        except OSError as e:
            print(f"Failed to save log file {args.log_file}: {e}", file=sys.stderr)
            status = 1

    if status == 0:
        print(f"Successfully {past_tense} {args.infile} to {args.outfile}")
    return status


if __name__ == "__main__":
    sys.exit(main())
