"""Output formatting utilities for different export formats."""

import json
import logging
import pandas as pd
from pathlib import Path
from typing import Dict, List, Any
from datetime import datetime

from ..models.analysis import EssayAnalysis

logger = logging.getLogger(__name__)


def flatten_analysis(analysis: EssayAnalysis) -> Dict[str, Any]:
    """Flatten an analysis into a single table row."""
    row = {f'{name}_score': dim.score for name, dim in analysis.dimensions.items()}
    row.update({
        'total_marks': analysis.total_marks,
        'max_total_marks': analysis.max_total_marks,
        'grammar_error_count': len(analysis.grammar_errors),
        'spelling_error_count': len(analysis.spelling_errors),
        'improvement_areas': '; '.join(
            f"{area.category} ({area.priority})" for area in analysis.improvement_areas
        ),
        'suggestions': ' | '.join(analysis.suggestions),
    })
    return row


class OutputFormatter:
    """Handles formatting and exporting analyses in different formats."""

    def __init__(self, format_type: str = 'json', output_dir: str = './output'):
        """Initialize output formatter."""
        self.format = format_type.lower()
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.supported_formats = ['json', 'csv']
        if self.format not in self.supported_formats:
            logger.warning(f"Unsupported format {self.format}, defaulting to json")
            self.format = 'json'

    def export_results(self, results: Dict[str, EssayAnalysis],
                       filename_prefix: str = 'essay_analysis') -> List[str]:
        """Export analyses keyed by essay id in the configured format."""
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

        try:
            if self.format == 'csv':
                exported_files = self._export_csv(results, filename_prefix, timestamp)
            else:
                exported_files = self._export_json(results, filename_prefix, timestamp)

            logger.info(f"Exported {len(exported_files)} files: {exported_files}")
            return exported_files

        except Exception as e:
            logger.error(f"Error exporting results: {e}")
            raise

    def _export_json(self, results: Dict[str, EssayAnalysis],
                     prefix: str, timestamp: str) -> List[str]:
        """Export full analyses as one JSON file."""
        output_file = self.output_dir / f"{prefix}_{timestamp}.json"
        payload = {essay_id: analysis.to_dict() for essay_id, analysis in results.items()}
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, default=str)
        return [str(output_file)]

    def _export_csv(self, results: Dict[str, EssayAnalysis],
                    prefix: str, timestamp: str) -> List[str]:
        """Export one flattened row per essay."""
        rows = []
        for essay_id, analysis in results.items():
            row = {'essay_id': essay_id}
            row.update(flatten_analysis(analysis))
            rows.append(row)
        return [self.export_frame(pd.DataFrame(rows), prefix, timestamp)]

    def export_frame(self, df: pd.DataFrame, prefix: str = 'essay_analysis',
                     timestamp: str = None) -> str:
        """Export an already flattened analysis frame as CSV."""
        timestamp = timestamp or datetime.now().strftime('%Y%m%d_%H%M%S')
        output_file = self.output_dir / f"{prefix}_{timestamp}.csv"
        df.to_csv(output_file, index=False)
        logger.info(f"Exported {len(df)} rows to {output_file}")
        return str(output_file)
