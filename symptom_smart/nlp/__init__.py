"""
Symptom Smart: NLP module

Lexical spell-checking of symptom names.

Components:
- SymptomDictionary: Fixed reference list of known symptoms
- FuzzyMatcher: Closest-entry search by Levenshtein distance
- normalize_token: Trim + lowercase

Example:
    from symptom_smart.nlp import FuzzyMatcher, SymptomDictionary

    matcher = FuzzyMatcher(SymptomDictionary.default(), max_distance=2)

    match = matcher.suggest("feve")
    print(match.symptom)    # 'fever'
    print(match.distance)   # 1
"""

from .text_preprocessor import (
    SUBMIT_KEYS,
    normalize_token,
    normalize_tags,
)

from .dictionary import (
    COMMON_SYMPTOMS,
    SymptomDictionary,
)

from .fuzzy_matcher import (
    DEFAULT_MAX_DISTANCE,
    FuzzyMatcher,
    MatchResult,
    levenshtein_distance,
)


__all__ = [
    # Preprocessor
    'SUBMIT_KEYS',
    'normalize_token',
    'normalize_tags',

    # Dictionary
    'COMMON_SYMPTOMS',
    'SymptomDictionary',

    # Matcher
    'DEFAULT_MAX_DISTANCE',
    'FuzzyMatcher',
    'MatchResult',
    'levenshtein_distance',
]
