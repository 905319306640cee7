"""
Symptom Smart: Fuzzy Matcher

Spell-checking of symptom tokens against the symptom dictionary.

Methods:
- Exact match (token is a dictionary entry)
- Levenshtein distance (edit distance within a threshold)

Ties between entries at the same distance resolve to the entry that comes
first in dictionary order.
"""

from dataclasses import dataclass
from typing import Optional

from .dictionary import SymptomDictionary
from .text_preprocessor import normalize_token


DEFAULT_MAX_DISTANCE = 2


@dataclass(frozen=True)
class MatchResult:
    """Closest dictionary entry for a token"""
    symptom: str      # Dictionary entry
    query: str        # Normalized token that was looked up
    distance: int     # Edit distance between the two

    @property
    def is_exact(self) -> bool:
        return self.distance == 0


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions turning ``a`` into ``b``.

    Example:
        levenshtein_distance("feve", "fever")   # 1
    """
    # Rows follow b, columns follow a
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],  # substitution
                    matrix[i][j - 1],      # insertion
                    matrix[i - 1][j],      # deletion
                )

    return matrix[len(b)][len(a)]


class FuzzyMatcher:
    """
    Nearest-neighbour search over the symptom dictionary.

    Example:
        matcher = FuzzyMatcher(SymptomDictionary.default())
        matcher.suggest("headahe")
        # MatchResult(symptom='headache', query='headahe', distance=1)
    """

    def __init__(
        self,
        dictionary: Optional[SymptomDictionary] = None,
        max_distance: int = DEFAULT_MAX_DISTANCE
    ):
        """
        Args:
            dictionary: Known symptoms (built-in list if None)
            max_distance: Largest edit distance still accepted as a match
        """
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")

        self.dictionary = dictionary if dictionary is not None else SymptomDictionary.default()
        self.max_distance = max_distance

    def is_known(self, token: str) -> bool:
        """Token is exactly a dictionary entry"""
        return normalize_token(token) in self.dictionary

    def find_closest(self, token: str) -> Optional[MatchResult]:
        """
        Closest dictionary entry within ``max_distance``.

        Returns None when the token is empty or nothing is close enough.
        An exact hit comes back with distance 0.
        """
        query = normalize_token(token)
        if not query:
            return None

        best_symptom = None
        best_distance = None

        for symptom in self.dictionary:
            distance = levenshtein_distance(query, symptom)

            # Strictly smaller only, so earlier entries win ties
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_symptom = symptom

                if distance == 0:
                    break

        if best_symptom is None or best_distance > self.max_distance:
            return None

        return MatchResult(symptom=best_symptom, query=query, distance=best_distance)

    def suggest(self, token: str) -> Optional[MatchResult]:
        """Correction candidate for a misspelled token (never an exact hit)"""
        match = self.find_closest(token)
        if match is None or match.is_exact:
            return None
        return match

    def __repr__(self) -> str:
        return f"FuzzyMatcher(n_symptoms={len(self.dictionary)}, max_distance={self.max_distance})"
