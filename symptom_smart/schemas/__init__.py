"""Symptom Smart: Data schemas"""
from .intake import Gender, IntakeForm, validate_intake

__all__ = [
    "Gender",
    "IntakeForm",
    "validate_intake",
]
