"""
Symptom Smart: API Routes

Export of all routers.
"""

from .health import router as health_router
from .symptoms import router as symptoms_router
from .sessions import router as sessions_router

__all__ = [
    'health_router',
    'symptoms_router',
    'sessions_router',
]
