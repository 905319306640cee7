"""Symptom Smart: Symptom tag input"""
from .controller import (
    TagInputController,
    TagInputState,
    SubmitOutcome,
    PendingSuggestion,
    TagsCallback,
)

__all__ = [
    "TagInputController",
    "TagInputState",
    "SubmitOutcome",
    "PendingSuggestion",
    "TagsCallback",
]
