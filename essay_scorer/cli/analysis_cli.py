"""Main CLI interface for essay analysis."""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..analyzer import EssayAnalyzer
from ..config import AnalysisConfig
from ..config.settings import LOG_FORMAT, LOG_LEVEL
from ..models.analysis import EssayAnalysis
from ..storage import EssayStore
from ..utils.output_formatters import OutputFormatter
from .arguments import ArgumentParser

logger = logging.getLogger(__name__)


class AnalysisCLI:
    """Command-line interface for essay analysis."""

    def __init__(self, stdout=None):
        """Initialize the CLI."""
        self.stdout = stdout or sys.stdout
        self.analyzer = None
        self.store = None

    def setup_logging(self, level: Optional[str] = None):
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
            format=LOG_FORMAT
        )

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Parse arguments and dispatch to the requested command."""
        args = ArgumentParser.parse_args(argv)
        self.setup_logging(args.log_level)

        self.store = EssayStore(args.store) if args.store else EssayStore()

        try:
            if args.command == 'analyze':
                self.run_analyze(args)
            elif args.command == 'batch':
                self.run_batch(args)
            elif args.command == 'history':
                self.run_history(args)
        except Exception as e:
            logger.error(f"{args.command} failed: {e}")
            raise

    def run_analyze(self, args) -> None:
        self.analyzer = EssayAnalyzer()
        text = self._read_text(args.file)
        analysis = self.analyzer.analyze(text)

        output = {'analysis': analysis.to_dict()}
        if args.save:
            record = self.store.save_essay(args.user, args.title, text, analysis)
            output['essayId'] = record['id']

        self._print_json(output)

    def run_batch(self, args) -> None:
        directory = Path(args.directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Essay directory not found: {directory}")

        self.analyzer = EssayAnalyzer(AnalysisConfig(
            parallelism=args.parallelism,
            show_progress=not args.no_progress,
        ))

        essay_files = sorted(directory.glob('*.txt'))
        logger.info(f"Found {len(essay_files)} essays in {directory}")

        essays = [
            {'essay_id': path.stem, 'essay_text': path.read_text(encoding='utf-8')}
            for path in essay_files
        ]
        formatter = OutputFormatter(args.output_format, args.output_dir)

        if args.output_format == 'csv':
            df = self.analyzer.analyze_batch(essays)
            exported = [formatter.export_frame(df)]
        else:
            results = {essay['essay_id']: self.analyzer.analyze(essay['essay_text']) for essay in essays}
            exported = formatter.export_results(results)

        self._print_json({'essays': len(essays), 'files': exported})

    def run_history(self, args) -> None:
        essays = self.store.get_user_essays(args.user)
        summary = []
        for record in essays:
            analysis = EssayAnalysis.from_dict(record['analysis'])
            summary.append({
                'id': record['id'],
                'title': record['title'],
                'createdAt': record['createdAt'],
                'totalMarks': analysis.total_marks,
                'improvementAreas': [area.category for area in analysis.improvement_areas],
            })

        self._print_json({
            'essays': summary,
            'stats': self.store.get_user_stats(args.user),
        })

    def _read_text(self, file_arg: str) -> str:
        if file_arg == '-':
            return sys.stdin.read()
        return Path(file_arg).read_text(encoding='utf-8')

    def _print_json(self, data) -> None:
        json.dump(data, self.stdout, indent=2, default=str)
        self.stdout.write('\n')


def main():
    """Main entry point for CLI."""
    cli = AnalysisCLI()
    cli.run()


if __name__ == "__main__":
    main()
