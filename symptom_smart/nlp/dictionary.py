"""
Symptom Smart: Symptom Dictionary

Fixed list of known symptom names used as the reference for spell-checking
symptom tags. Order matters: the matcher resolves ties by position.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

import yaml

from .text_preprocessor import normalize_token


logger = logging.getLogger(__name__)


# Common medical symptoms, in reference order
COMMON_SYMPTOMS: Tuple[str, ...] = (
    "fever", "headache", "cough", "cold", "fatigue", "nausea", "vomiting",
    "diarrhea", "constipation", "dizziness", "pain", "sore throat", "runny nose",
    "chest pain", "shortness of breath", "abdominal pain", "back pain", "joint pain",
    "muscle pain", "weakness", "chills", "sweating", "rash", "itching", "swelling",
    "bleeding", "bruising", "numbness", "tingling", "blurred vision", "loss of appetite",
    "weight loss", "weight gain", "insomnia", "anxiety", "depression", "confusion",
    "memory loss", "difficulty breathing", "wheezing", "sneezing", "congestion",
    "earache", "eye pain", "toothache", "neck pain", "shoulder pain", "leg pain",
    "foot pain", "hand pain", "stomach ache", "heartburn", "bloating", "cramps",
)


class SymptomDictionary:
    """
    Immutable, ordered collection of known symptoms.

    Entries are normalized on construction; duplicates and blanks are
    rejected.

    Example:
        dictionary = SymptomDictionary(["fever", "cough"])
        "fever" in dictionary   # True
        list(dictionary)        # ['fever', 'cough']
    """

    def __init__(self, symptoms: Iterable[str]):
        entries = []
        seen = set()

        for raw in symptoms:
            symptom = normalize_token(raw)
            if not symptom:
                raise ValueError(f"Empty symptom in dictionary: {raw!r}")
            if symptom in seen:
                raise ValueError(f"Duplicate symptom in dictionary: {symptom!r}")
            seen.add(symptom)
            entries.append(symptom)

        self._entries: Tuple[str, ...] = tuple(entries)
        self._lookup = frozenset(entries)

    @classmethod
    def default(cls) -> "SymptomDictionary":
        """Dictionary of the built-in common symptoms"""
        return cls(COMMON_SYMPTOMS)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        extra: Optional[Iterable[str]] = None
    ) -> "SymptomDictionary":
        """
        Load a dictionary from a YAML file.

        The file holds either a plain list of symptoms or a mapping with a
        ``symptoms`` key.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Symptom dictionary not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if isinstance(data, dict):
            data = data.get("symptoms")
        if not isinstance(data, list):
            raise ValueError(f"Symptom dictionary must be a list of strings: {path}")

        symptoms = [str(s) for s in data]
        if extra:
            symptoms.extend(extra)

        dictionary = cls(symptoms)
        logger.info("Loaded %d symptoms from %s", len(dictionary), path)
        return dictionary

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    def __contains__(self, symptom: object) -> bool:
        return symptom in self._lookup

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __repr__(self) -> str:
        return f"SymptomDictionary(n_symptoms={len(self._entries)})"
