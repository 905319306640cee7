"""
Symptom Smart: API Models

Pydantic models for API requests and responses.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from symptom_smart.schemas import Gender
from symptom_smart.tag_input import SubmitOutcome, TagInputState


# ============================================================
# Symptom Models
# ============================================================

class SymptomMatchResponse(BaseModel):
    """Closest dictionary entry for a token"""
    query: str
    normalized: str
    match: Optional[str] = None
    distance: Optional[int] = None
    is_known: bool = False
    is_suggestion: bool = False


# ============================================================
# Session Models
# ============================================================

class CreateSessionRequest(BaseModel):
    """Request to start a tag-input session"""
    symptoms: List[str] = Field(default_factory=list, description="Tags the form already holds")


class Suggestion(BaseModel):
    """Pending "Did you mean ...?" prompt"""
    suggested: str
    original: str
    distance: int


class SessionState(BaseModel):
    """Current state of a session"""
    session_id: str
    tags: List[str]
    state: TagInputState
    suggestion: Optional[Suggestion] = None
    created_at: datetime
    updated_at: datetime


class SubmitRequest(BaseModel):
    """Token typed by the user"""
    text: str = Field(..., max_length=200)


class SubmitResponse(BaseModel):
    """Result of a submit"""
    outcome: SubmitOutcome
    session: SessionState


# ============================================================
# Intake Models
# ============================================================

class IntakeRequest(BaseModel):
    """Remaining intake fields; symptoms come from the session"""
    gender: Optional[Gender] = None
    age: Optional[int] = None
    duration: Optional[str] = None


class IntakeResponse(BaseModel):
    """Validated intake form"""
    session_id: str
    symptoms: List[str]
    symptoms_text: str
    gender: Gender
    age: int
    duration: str


# ============================================================
# Health Models
# ============================================================

class HealthResponse(BaseModel):
    """Health check"""
    status: str
    version: str
    matcher_loaded: bool
    dictionary_size: int
    max_distance: Optional[int] = None
    active_sessions: int
