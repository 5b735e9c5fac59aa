#!/usr/bin/env python3
from pathlib import Path
import argparse
import sys
from rich_argparse import RawDescriptionRichHelpFormatter

from genocoord.commands import run_locus, run_convert
from genocoord.utils import LocusConfig, ConvertConfig, setup_file_logging
from genocoord.utils.config import FORMATS, VALUE_TYPES


class GenocoordArgumentParser(argparse.ArgumentParser):
    """Custom argument parser that shows program-specific help on error."""

    def error(self, message):
        """Upon error, prints help message and error."""
        self.print_help(sys.stderr)
        self.exit(2, f'\n\033[31mERROR\033[0m: {message}\n')


def _add_logging_arguments(subparser):
    subparser.add_argument("--logging",
                           help="Log directory (default: no log file, or output/logs for convert --output)")
    subparser.add_argument("--debug", action="store_true",
                           help="Enable debug logging")
    subparser.add_argument("--console-output", action="store_true",
                           help="Enable logging to stderr (default: False)")


def build_parser():
    parser = GenocoordArgumentParser(
        prog='genocoord',
        formatter_class=RawDescriptionRichHelpFormatter,
        epilog="""
    - genocoord locus: show a seqid:start-end locus in every coordinate convention.
    - genocoord convert: normalize GFF3, BED6 or BedGraph rows to 0-based half-open ranges.

    View inputs & arguments for each command with genocoord {command} --help.
        """
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # genocoord locus
    locus_parser = subparsers.add_parser('locus',
        help='Show loci in 1-based and 0-based coordinates',
        description='Parse 1-based closed loci (seqid:start-end) and print every coordinate view.',
        formatter_class=parser.formatter_class,
        epilog="""
Examples:
genocoord locus chr1:100-200
genocoord locus chr1:100-200 chr1:150-400 --combine
        """
        )
    locus_parser.add_argument("loci", nargs='+',
                              help="One or more loci in the form <seqid>:<start>-<end>")
    locus_parser.add_argument("--combine", action="store_true",
                              help="Also print the bounding union of all loci (same seqid required)")
    _add_logging_arguments(locus_parser)

    # genocoord convert
    convert_parser = subparsers.add_parser('convert',
        help='Normalize annotation rows to 0-based half-open ranges',
        description='Read GFF3, BED6, BedGraph or extended BedGraph rows and write chrom/start/end (0-based half-open) plus any values.',
        formatter_class=parser.formatter_class,
        epilog="""
Examples:
genocoord convert --format gff3 --input genes.gff3 --output genes.tsv
genocoord convert --format bedgraph-ext --input coverage.bedgraph.gz --sort --value-type int
        """
        )
    convert_parser.add_argument("--input", "-i", required=True,
                                help="Input file, optionally gzip-compressed (required)")
    convert_parser.add_argument("--format", "-f", required=True, choices=FORMATS,
                                help="Input format (required)")
    convert_parser.add_argument("--output", "-o",
                                help="Output TSV file (default: stdout)")
    convert_parser.add_argument("--sort", action="store_true",
                                help="Sort output by seqid, start and end")
    convert_parser.add_argument("--value-type", choices=list(VALUE_TYPES), default='float',
                                help="Numeric type of BedGraph values (default: float)")
    _add_logging_arguments(convert_parser)

    return parser


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == 'convert' and not Path(args.input).exists():
        parser.error(f"File does not exist: {args.input}")

    return args


def main(argv=None):
    args = parse_args(argv)

    try:
        if args.command == 'locus':
            config = LocusConfig.from_args(args)
            logger = setup_file_logging(config.log_dir, 'locus', config.debug, config.console_output)
            run_locus(config, logger)

        elif args.command == 'convert':
            config = ConvertConfig.from_args(args)
            logger = setup_file_logging(config.log_dir, 'convert', config.debug, config.console_output)
            run_convert(config, logger)
    except ValueError as e:  # includes InvalidArguments
        print(f"\033[31mERROR\033[0m: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
