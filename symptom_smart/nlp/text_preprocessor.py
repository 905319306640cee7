"""
Symptom Smart: Text Preprocessor

Normalization of user-typed symptom tokens.
"""

from typing import List, Optional


# Keys that commit the current entry buffer as a tag
SUBMIT_KEYS = frozenset({"Enter", ","})


def normalize_token(text: Optional[str]) -> str:
    """Trim surrounding whitespace and lowercase"""
    if not text:
        return ""
    return text.strip().lower()


def normalize_tags(tags) -> List[str]:
    """
    Normalize a tag sequence, dropping blanks and duplicates.

    First occurrence wins, order is preserved.
    """
    result = []
    seen = set()
    for tag in tags or []:
        tag = normalize_token(tag)
        if tag and tag not in seen:
            seen.add(tag)
            result.append(tag)
    return result
