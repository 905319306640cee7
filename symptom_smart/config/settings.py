"""
Symptom Smart: Settings

All tunable parameters live in dataclasses for:
- Typed access via config.matcher.max_distance
- Serialization to YAML
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional


# =============================================================================
# MATCHER CONFIGURATION
# =============================================================================

@dataclass
class MatcherConfig:
    """Spell-check parameters"""

    # Largest edit distance still offered as a correction (inclusive)
    max_distance: int = 2

    # YAML file with the symptom list; built-in list if None
    dictionary_path: Optional[str] = None

    # Appended after the base dictionary
    extra_symptoms: List[str] = field(default_factory=list)

    def build_dictionary(self):
        from symptom_smart.nlp import COMMON_SYMPTOMS, SymptomDictionary

        if self.dictionary_path:
            return SymptomDictionary.from_file(self.dictionary_path, extra=self.extra_symptoms)
        return SymptomDictionary(list(COMMON_SYMPTOMS) + list(self.extra_symptoms))

    def build_matcher(self):
        from symptom_smart.nlp import FuzzyMatcher

        return FuzzyMatcher(self.build_dictionary(), max_distance=self.max_distance)


# =============================================================================
# INTAKE FORM CONFIGURATION
# =============================================================================

@dataclass
class IntakeConfig:
    """Limits of the intake form"""
    min_symptoms: int = 2
    min_age: int = 1
    max_age: int = 120
    max_duration_length: int = 100


# =============================================================================
# ROOT CONFIGURATION
# =============================================================================

@dataclass
class SymptomSmartConfig:
    """
    Main Symptom Smart configuration.

    Example:
        config = SymptomSmartConfig()
        print(config.matcher.max_distance)  # 2
        print(config.intake.min_symptoms)   # 2
    """

    # Metadata
    version: str = "1.0.0"
    project_name: str = "Symptom Smart"

    # Components
    matcher: MatcherConfig = field(default_factory=MatcherConfig)
    intake: IntakeConfig = field(default_factory=IntakeConfig)

    def validate(self) -> None:
        """Raise ValueError on inconsistent settings"""
        for section, name in (
            ("matcher", "max_distance"),
            ("intake", "min_symptoms"),
            ("intake", "min_age"),
            ("intake", "max_age"),
            ("intake", "max_duration_length"),
        ):
            value = getattr(getattr(self, section), name)
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{section}.{name} must be an integer, got {value!r}")

        if self.matcher.dictionary_path is not None and not isinstance(self.matcher.dictionary_path, str):
            raise ValueError(f"matcher.dictionary_path must be a string, got {self.matcher.dictionary_path!r}")
        if not isinstance(self.matcher.extra_symptoms, list) or not all(
            isinstance(s, str) for s in self.matcher.extra_symptoms
        ):
            raise ValueError("matcher.extra_symptoms must be a list of strings")

        if self.matcher.max_distance < 0:
            raise ValueError(f"matcher.max_distance must be >= 0, got {self.matcher.max_distance}")
        if self.intake.min_symptoms < 0:
            raise ValueError(f"intake.min_symptoms must be >= 0, got {self.intake.min_symptoms}")
        if not 0 < self.intake.min_age <= self.intake.max_age:
            raise ValueError(
                f"intake age range is invalid: {self.intake.min_age}..{self.intake.max_age}"
            )
        if self.intake.max_duration_length < 1:
            raise ValueError("intake.max_duration_length must be >= 1")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SymptomSmartConfig":
        """Build from a (possibly partial) dict, e.g. parsed YAML"""
        data = dict(_section("configuration", data, cls))
        matcher = MatcherConfig(**_section("matcher", data.pop("matcher", None), MatcherConfig))
        intake = IntakeConfig(**_section("intake", data.pop("intake", None), IntakeConfig))
        config = cls(matcher=matcher, intake=intake, **data)
        config.validate()
        return config


def _section(name: str, data: Any, config_cls: type) -> Dict[str, Any]:
    """Check one YAML mapping against the dataclass it feeds"""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a mapping, got {type(data).__name__}")

    allowed = {f.name for f in fields(config_cls)}
    unknown = sorted(str(key) for key in data if key not in allowed)
    if unknown:
        raise ValueError(f"Unknown {name} option(s): {', '.join(unknown)}")
    return data


def get_default_config() -> SymptomSmartConfig:
    """Default configuration with the built-in symptom dictionary"""
    return SymptomSmartConfig()
