from __future__ import annotations

from typing import List

QUESTIONS: List[str] = [
    "Is this decision aligned with my long-term goals and values?",
    "Have I considered the possible positive and negative outcomes of this decision?",
    "Am I feeling emotionally calm and clear-headed about this decision?",
    "Is this decision reversible or flexible, or is it a one-time decision?",
    "Have I allowed myself enough time to think through this decision carefully?",
]

SCALE_HINT = "(0 for NO, 1 for Confused, 2 for YES)"


def prompt_for(index: int) -> str:
    """Prompt text for question `index` (1-based)."""
    if not 1 <= index <= len(QUESTIONS):
        raise IndexError(f"no question {index}")
    return f"Question {index}: {QUESTIONS[index - 1]} {SCALE_HINT}: "
