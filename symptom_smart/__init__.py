"""
Symptom Smart: Symptom intake with spell-checked symptom tags

Modules:
- config: System configuration
- nlp: Symptom dictionary and fuzzy matcher
- tag_input: Tag input controller with correction suggestions
- schemas: Intake form validation
- api: Backend API
"""

__version__ = "1.0.0"

from .config import SymptomSmartConfig, get_default_config
