#!/usr/bin/env python3
"""
Command line entry point: convert one OurAirports table to JSON.

    ourairports-json airport airports.csv -o airports.json --pretty-print
    ourairports-json runway > runways.json
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .errors import ConversionError
from .kinds import RecordKind
from .mapper import convert
from .sources import CachedOurAirportsSource, OurAirportsSource

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ourairports-json',
        description='Convert data from OurAirports (https://ourairports.com/data/) to JSON'
    )

    # Options shared by every table
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('input_file', nargs='?',
                        help='Local CSV file (downloaded from ourairports.com if omitted)')
    common.add_argument('-o', '--output', dest='output_file', help='Output file (standard output if omitted)')
    common.add_argument('-p', '--pretty-print', help='Pretty print output', action='store_true')
    common.add_argument('-c', '--cache-dir', help='Directory to cache downloaded files',
                        default=os.getenv('OURAIRPORTS_CACHE_DIR'))
    common.add_argument('--max-age-days', help='Maximum age of cached files in days', type=int, default=7)
    common.add_argument('--force-refresh', help='Force refresh of cached data', action='store_true')
    common.add_argument('--never-refresh', help='Never refresh cached data if it exists', action='store_true')
    common.add_argument('--timeout', help='Download timeout in seconds', type=int,
                        default=OurAirportsSource.DEFAULT_TIMEOUT)
    common.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    subparsers = parser.add_subparsers(dest='kind', metavar='KIND')
    subparsers.required = True
    for kind in RecordKind:
        subparsers.add_parser(kind.command, parents=[common], help=f'Convert {kind.table} data')
    return parser


def make_source(args) -> OurAirportsSource:
    """Create the source selected by the cache options."""
    if not args.cache_dir:
        return OurAirportsSource(timeout=args.timeout)
    source = CachedOurAirportsSource(args.cache_dir, timeout=args.timeout, max_age_days=args.max_age_days)
    source.set_force_refresh(args.force_refresh)
    source.set_never_refresh(args.never_refresh)
    return source


def write_output(output: str, output_file: Optional[str]) -> None:
    if output_file:
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(output)
        logger.info(f"Wrote {output_file}")
    else:
        print(output)


def log_level() -> int:
    """Level named by LOG_LEVEL, or INFO when unset or unknown."""
    level = logging.getLevelName(os.getenv('LOG_LEVEL', 'INFO').strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    kind = RecordKind.from_command(args.kind)
    try:
        source = make_source(args)
        text = source.read_text(kind, args.input_file)
        output = convert(kind, text, args.pretty_print)
    except ConversionError as e:
        logger.error(str(e))
        return 1
    try:
        write_output(output, args.output_file)
    except OSError as e:
        logger.error(f"Could not write output: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
