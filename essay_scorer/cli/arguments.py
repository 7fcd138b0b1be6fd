"""Command-line argument parsing for essay analysis."""

import argparse

from ..config.settings import BATCH_PARALLELISM, OUTPUT_DIR


class ArgumentParser:
    """Handles command-line argument parsing for essay analysis tools."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser with analyze, batch and history commands."""
        parser = argparse.ArgumentParser(
            prog='essay-scorer',
            description="Score essays against the five-dimension writing rubric"
        )
        parser.add_argument(
            '--log-level',
            type=str,
            default=None,
            choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            help='Override LOG_LEVEL from the environment'
        )
        parser.add_argument(
            '--store',
            type=str,
            help='Path to the essay store JSON file'
        )

        subparsers = parser.add_subparsers(dest='command', required=True)

        analyze = subparsers.add_parser('analyze', help='Analyze a single essay file')
        analyze.add_argument('file', type=str, help="Essay text file ('-' for stdin)")
        analyze.add_argument('--save', action='store_true', help='Store the analysis for a user')
        analyze.add_argument('--user', type=str, help='User id for --save')
        analyze.add_argument('--title', type=str, help='Essay title for --save')

        batch = subparsers.add_parser('batch', help='Analyze every .txt essay in a directory')
        batch.add_argument('directory', type=str, help='Directory containing essay .txt files')
        batch.add_argument(
            '--output-format',
            type=str,
            default='csv',
            choices=['csv', 'json'],
            help='Output format for results'
        )
        batch.add_argument(
            '--output-dir',
            type=str,
            default=str(OUTPUT_DIR),
            help='Directory for exported results'
        )
        batch.add_argument(
            '--parallelism',
            type=int,
            default=BATCH_PARALLELISM,
            help='Essays analyzed concurrently'
        )
        batch.add_argument('--no-progress', action='store_true', help='Hide the progress bar')

        history = subparsers.add_parser('history', help="Show a user's stored essays")
        history.add_argument('--user', type=str, required=True, help='User id')

        return parser

    @staticmethod
    def validate_args(args: argparse.Namespace) -> argparse.Namespace:
        """Validate and process parsed arguments."""
        if args.command == 'analyze' and args.save and not args.user:
            raise ValueError("--save requires --user")

        if args.command == 'batch' and args.parallelism < 1:
            raise ValueError("--parallelism must be at least 1")

        return args

    @staticmethod
    def parse_args(argv=None) -> argparse.Namespace:
        """Parse and validate arguments."""
        parser = ArgumentParser.create_parser()
        args = parser.parse_args(argv)
        return ArgumentParser.validate_args(args)
