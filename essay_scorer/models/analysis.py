"""Analysis record types returned by the essay analyzer.

All records are frozen dataclasses holding tuples, so an analysis cannot be
mutated after it is returned. ``to_dict`` produces the JSON shape consumed by
presentation and storage layers (camelCase keys).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple

MAX_DIMENSION_SCORE = 10
MAX_TOTAL_MARKS = 50

PRIORITY_RANK = {'high': 0, 'medium': 1, 'low': 2}


def half_points_to_score(half_points: int):
    """Convert integer half-points to a score, keeping whole scores integral."""
    if half_points % 2 == 0:
        return half_points // 2
    return half_points / 2


@dataclass(frozen=True)
class DimensionScore:
    """A single rubric dimension, stored as integer half-points."""
    half_points: int
    max_score: int = MAX_DIMENSION_SCORE

    def __post_init__(self):
        bounded = max(0, min(self.max_score * 2, self.half_points))
        object.__setattr__(self, 'half_points', bounded)

    @classmethod
    def from_score(cls, score: int) -> 'DimensionScore':
        return cls(half_points=score * 2)

    @property
    def score(self):
        return half_points_to_score(self.half_points)

    def to_dict(self) -> Dict[str, Any]:
        return {'score': self.score, 'maxScore': self.max_score}


def aggregate_total(dimensions: Iterable[DimensionScore], max_total: int = MAX_TOTAL_MARKS) -> int:
    """Sum dimension scores in half-points, bounded to the rubric maximum."""
    total = sum(d.half_points for d in dimensions)
    return max(0, min(max_total * 2, total))


@dataclass(frozen=True)
class GrammarError:
    """One detected grammar issue at a character offset of the essay."""
    text: str
    position: int
    suggestions: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'position': self.position,
            'suggestions': list(self.suggestions),
        }


@dataclass(frozen=True)
class SpellingError:
    """A dictionary hit: the token as written and its correction."""
    word: str
    position: int
    correction: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'position': self.position,
            'correction': self.correction,
        }


@dataclass(frozen=True)
class ImprovementArea:
    """A remediation recommendation for an underperforming dimension."""
    category: str
    priority: str
    description: str
    tips: Tuple[str, ...]
    current_score: Any
    target_score: Any

    def __post_init__(self):
        if self.priority not in PRIORITY_RANK:
            raise ValueError(f"Unknown priority: {self.priority}")

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self.priority]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'priority': self.priority,
            'description': self.description,
            'tips': list(self.tips),
            'currentScore': self.current_score,
            'targetScore': self.target_score,
        }


@dataclass(frozen=True)
class EssayAnalysis:
    """Complete rubric result for one essay."""
    word_count: DimensionScore
    spelling_accuracy: DimensionScore
    grammar_evaluation: DimensionScore
    backspace_score: DimensionScore
    delete_score: DimensionScore
    grammar_errors: Tuple[GrammarError, ...] = ()
    suggestions: Tuple[str, ...] = ()
    improvement_areas: Tuple[ImprovementArea, ...] = ()
    spelling_errors: Tuple[SpellingError, ...] = ()
    max_total_marks: int = field(default=MAX_TOTAL_MARKS)

    @property
    def dimensions(self) -> Dict[str, DimensionScore]:
        return {
            'wordCount': self.word_count,
            'spellingAccuracy': self.spelling_accuracy,
            'grammarEvaluation': self.grammar_evaluation,
            'backspaceScore': self.backspace_score,
            'deleteScore': self.delete_score,
        }

    @property
    def total_marks(self):
        return half_points_to_score(aggregate_total(self.dimensions.values(), self.max_total_marks))

    def to_dict(self) -> Dict[str, Any]:
        result = {name: dim.to_dict() for name, dim in self.dimensions.items()}
        result.update({
            'totalMarks': self.total_marks,
            'maxTotalMarks': self.max_total_marks,
            'grammarErrors': [e.to_dict() for e in self.grammar_errors],
            'suggestions': list(self.suggestions),
            'improvementAreas': [a.to_dict() for a in self.improvement_areas],
            'spellingErrors': [e.to_dict() for e in self.spelling_errors],
        })
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EssayAnalysis':
        """Rebuild an analysis from its ``to_dict`` form (e.g. a stored record)."""
        def dim(key):
            return DimensionScore(
                half_points=int(round(data[key]['score'] * 2)),
                max_score=data[key].get('maxScore', MAX_DIMENSION_SCORE),
            )

        return cls(
            word_count=dim('wordCount'),
            spelling_accuracy=dim('spellingAccuracy'),
            grammar_evaluation=dim('grammarEvaluation'),
            backspace_score=dim('backspaceScore'),
            delete_score=dim('deleteScore'),
            grammar_errors=tuple(
                GrammarError(e['text'], e['position'], tuple(e['suggestions']))
                for e in data.get('grammarErrors', [])
            ),
            suggestions=tuple(data.get('suggestions', [])),
            improvement_areas=tuple(
                ImprovementArea(
                    category=a['category'],
                    priority=a['priority'],
                    description=a['description'],
                    tips=tuple(a['tips']),
                    current_score=a['currentScore'],
                    target_score=a['targetScore'],
                )
                for a in data.get('improvementAreas', [])
            ),
            spelling_errors=tuple(
                SpellingError(e['word'], e['position'], e['correction'])
                for e in data.get('spellingErrors', [])
            ),
            max_total_marks=data.get('maxTotalMarks', MAX_TOTAL_MARKS),
        )
