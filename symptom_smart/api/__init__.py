"""
Symptom Smart: API module

REST API over the symptom dictionary and tag-input sessions.

Run:
    uvicorn symptom_smart.api.app:app --reload --port 8000
"""

from .config import APIConfig, config

__all__ = [
    'APIConfig',
    'config',
]
