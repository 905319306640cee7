"""
Symptom Smart: Health Routes

Health check and service information.
"""

from fastapi import APIRouter, Depends

from symptom_smart import __version__

from ..dependencies import get_manager, get_sessions, MatcherManager, SessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    manager: MatcherManager = Depends(get_manager),
    sessions: SessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Server status.

    Returns:
    - Whether the matcher is loaded
    - Dictionary size and distance threshold
    - Number of active sessions
    """
    return HealthResponse(
        status="ok" if manager.is_loaded else "degraded",
        version=__version__,
        matcher_loaded=manager.is_loaded,
        dictionary_size=len(manager.symptom_list),
        max_distance=manager.matcher.max_distance if manager.matcher else None,
        active_sessions=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """API landing page"""
    return {
        "name": "Symptom Smart API",
        "version": __version__,
        "description": "Symptom intake with spell-checked symptom tags",
        "docs": "/docs",
        "health": "/health",
    }
