"""Essay record utilities for working with stored essay dictionaries."""

import uuid
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from .analysis import EssayAnalysis

TITLE_WORDS = 6


def generate_title(content: str) -> str:
    """Build a title from the first few words of an essay."""
    words = content.split()
    title = ' '.join(words[:TITLE_WORDS])
    if len(words) > TITLE_WORDS:
        title += '...'
    return title or 'Untitled Essay'


def create_essay_record(user_id: str, title: Optional[str], content: str,
                        analysis: EssayAnalysis,
                        created_at: Optional[datetime] = None) -> Dict[str, Any]:
    """Create a stored essay dictionary."""
    if not user_id or not user_id.strip():
        raise ValueError("User id cannot be empty")

    timestamp = (created_at or datetime.now(timezone.utc)).isoformat()
    return {
        "id": uuid.uuid4().hex,
        "userId": user_id,
        "title": title or generate_title(content),
        "content": content,
        "analysis": analysis.to_dict(),
        "createdAt": timestamp,
        "updatedAt": timestamp,
        "wordCount": len(content.split()),
    }
