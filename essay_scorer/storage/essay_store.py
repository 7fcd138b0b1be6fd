"""File-backed store for analyzed essays, keyed by user id."""

import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from ..config.settings import ESSAY_STORE_PATH
from ..models.analysis import EssayAnalysis
from ..models.essay import create_essay_record
from ..utils.json_loader import load_json_file, write_json_file

logger = logging.getLogger(__name__)

RECENT_SCORES_LIMIT = 10
IMPROVEMENT_MIN_ESSAYS = 4


def round_tenths(value: float) -> float:
    """Round to one decimal place with halves going up (7.25 -> 7.3)."""
    return float(np.floor(value * 10 + 0.5) / 10)


class EssayStore:
    """Persists essays with their analyses in a single JSON document.

    Each user's list is kept newest first. An unreadable store file reads as
    empty and is moved aside before the next write replaces it.
    """

    def __init__(self, store_path: Optional[Path] = None):
        self.store_path = Path(store_path or ESSAY_STORE_PATH)
        self._lock = threading.Lock()

    def save_essay(self, user_id: str, title: Optional[str], content: str,
                   analysis: EssayAnalysis) -> Dict[str, Any]:
        """Store an analyzed essay and return the new record."""
        record = create_essay_record(user_id, title, content, analysis)

        with self._lock:
            all_essays = self._load_all(quarantine=True)
            all_essays[user_id] = [record] + all_essays.get(user_id, [])
            try:
                write_json_file(self.store_path, all_essays)
            except OSError as e:
                logger.error(f"Failed to write essay store {self.store_path}: {e}")
                raise

        logger.info(f"Saved essay {record['id']} for user {user_id}")
        return record

    def get_user_essays(self, user_id: str) -> List[Dict[str, Any]]:
        """All essays for a user, newest first."""
        with self._lock:
            return list(self._load_all().get(user_id, []))

    def get_user_stats(self, user_id: str) -> Dict[str, Any]:
        """Summary statistics over a user's stored essays."""
        essays = self.get_user_essays(user_id)
        if not essays:
            return {
                'totalEssays': 0,
                'averageScore': 0,
                'improvementRate': 0,
                'recentScores': [],
            }

        scores = np.array([essay['analysis']['totalMarks'] for essay in essays], dtype=float)

        # Scores are newest first: compare the newer half against the older half.
        improvement_rate = 0.0
        if len(scores) >= IMPROVEMENT_MIN_ESSAYS:
            mid_point = len(scores) // 2
            newer_avg = scores[:mid_point].mean()
            older_avg = scores[mid_point:].mean()
            if older_avg > 0:
                improvement_rate = (newer_avg - older_avg) / older_avg * 100

        return {
            'totalEssays': len(essays),
            'averageScore': round_tenths(scores.mean()),
            'improvementRate': round_tenths(improvement_rate),
            'recentScores': [essay['analysis']['totalMarks'] for essay in essays[:RECENT_SCORES_LIMIT]],
        }

    def _load_all(self, quarantine: bool = False) -> Dict[str, List[Dict[str, Any]]]:
        if not self.store_path.exists():
            return {}
        try:
            data = load_json_file(self.store_path)
        except json.JSONDecodeError as e:
            logger.error(f"Essay store {self.store_path} is corrupt ({e}), treating it as empty")
        else:
            if isinstance(data, dict):
                return data
            logger.error(f"Essay store {self.store_path} has unexpected shape, treating it as empty")

        if quarantine:
            self._move_aside()
        return {}

    def _move_aside(self) -> None:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S_%f')
        target = self.store_path.with_name(f"{self.store_path.name}.{timestamp}.corrupt")
        self.store_path.replace(target)
        logger.error(f"Moved unreadable essay store to {target}")
