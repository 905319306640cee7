"""
Symptom Smart: Intake form schema

Pydantic models for the form that consumes the finalized symptom tags:
- Gender: patient gender
- IntakeForm: symptoms + demographics + duration
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from symptom_smart.config import IntakeConfig
from symptom_smart.nlp import normalize_tags


class Gender(str, Enum):
    """Patient gender"""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class IntakeForm(BaseModel):
    """
    Completed intake form.

    Example:
        form = IntakeForm(
            symptoms=["Fever", "headache"],
            gender=Gender.FEMALE,
            age=34,
            duration="3 days"
        )
        form.symptoms_text  # 'fever, headache'
    """
    symptoms: List[str] = Field(..., description="Symptom tags (lowercase, unique)")
    gender: Gender
    age: int = Field(..., ge=1, description="Age in years")
    duration: str = Field(..., min_length=1, description="How long symptoms have lasted")

    @field_validator('symptoms')
    @classmethod
    def normalize_symptoms(cls, v: List[str]) -> List[str]:
        return normalize_tags(v)

    @field_validator('duration', mode='before')
    @classmethod
    def strip_duration(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def symptoms_text(self) -> str:
        """Symptoms as a single comma-separated line"""
        return ", ".join(self.symptoms)

    class Config:
        json_schema_extra = {
            "example": {
                "symptoms": ["fever", "headache"],
                "gender": "female",
                "age": 34,
                "duration": "3 days"
            }
        }


def validate_intake(data: Dict[str, Any], config: Optional[IntakeConfig] = None) -> IntakeForm:
    """
    Validate raw form data against the intake limits.

    The age range and duration length come from ``config`` only; the model
    itself just requires a positive age and a non-empty duration.

    Raises:
        ValueError: with the message of the first failing rule
    """
    config = config or IntakeConfig()

    symptoms = normalize_tags(data.get("symptoms") or [])
    if len(symptoms) < config.min_symptoms:
        raise ValueError(f"Please add at least {config.min_symptoms} symptoms for analysis")

    try:
        gender = Gender(data.get("gender"))
    except ValueError:
        raise ValueError("Please select your gender")

    try:
        age = int(data.get("age"))
    except (TypeError, ValueError):
        raise ValueError("Please enter a valid age")
    if not config.min_age <= age <= config.max_age:
        raise ValueError(f"Age must be between {config.min_age} and {config.max_age}")

    duration = str(data.get("duration") or "").strip()
    if not duration:
        raise ValueError("Please describe how long you have had these symptoms")
    if len(duration) > config.max_duration_length:
        raise ValueError(f"Duration must be at most {config.max_duration_length} characters")

    try:
        return IntakeForm(symptoms=symptoms, gender=gender, age=age, duration=duration)
    except ValidationError as e:
        raise ValueError(e.errors()[0]["msg"]) from e
