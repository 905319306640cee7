"""
Symptom Smart: Sessions Routes

Endpoints for interactive tag-input sessions:
- Session creation
- Submitting tokens
- Resolving spell-check suggestions
- Removing tags
- Validating the intake form
- Closing a session
"""

from fastapi import APIRouter, Depends, HTTPException

from symptom_smart.nlp import FuzzyMatcher
from symptom_smart.schemas import validate_intake

from ..dependencies import (
    get_manager, get_matcher, get_sessions,
    MatcherManager, SessionManager, TagSession,
)
from ..models import (
    CreateSessionRequest,
    SessionState,
    SubmitRequest,
    SubmitResponse,
    IntakeRequest,
    IntakeResponse,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def session_to_response(session: TagSession) -> SessionState:
    """Convert a session to its Pydantic model"""
    return SessionState(**session.to_dict())


def _get_session_or_404(session_id: str, sessions: SessionManager) -> TagSession:
    session = sessions.get_session(session_id)
    if not session:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )
    return session


@router.post("", response_model=SessionState)
async def create_session(
    request: CreateSessionRequest,
    matcher: FuzzyMatcher = Depends(get_matcher),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Start a tag-input session.

    Example:
    ```json
    {
        "symptoms": ["fever"]
    }
    ```
    """
    session = sessions.create_session(matcher=matcher, symptoms=request.symptoms)
    if session is None:
        raise HTTPException(
            status_code=503,
            detail="Too many active sessions, try again later"
        )

    return session_to_response(session)


@router.get("/{session_id}", response_model=SessionState)
async def get_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Current tags and pending suggestion"""
    session = _get_session_or_404(session_id, sessions)
    return session_to_response(session)


@router.post("/{session_id}/submit", response_model=SubmitResponse)
async def submit_symptom(
    session_id: str,
    request: SubmitRequest,
    sessions: SessionManager = Depends(get_sessions)
) -> SubmitResponse:
    """
    Submit a typed symptom.

    `outcome` is one of:
    - **ignored**: empty input
    - **duplicate**: already in the list
    - **added_known**: dictionary symptom added
    - **suggested**: near miss; accept or keep it next
    - **added_unknown**: free-form symptom added
    """
    session = _get_session_or_404(session_id, sessions)

    with session.lock:
        outcome = session.controller.submit(request.text)
        session.touch()

    return SubmitResponse(outcome=outcome, session=session_to_response(session))


@router.post("/{session_id}/accept", response_model=SessionState)
async def accept_suggestion(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Use the suggested dictionary term"""
    session = _get_session_or_404(session_id, sessions)

    with session.lock:
        resolved = session.controller.accept_suggestion()
        if resolved:
            session.touch()

    if not resolved:
        raise HTTPException(status_code=409, detail="No suggestion pending")

    return session_to_response(session)


@router.post("/{session_id}/keep", response_model=SessionState)
async def keep_original(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Keep the symptom as typed"""
    session = _get_session_or_404(session_id, sessions)

    with session.lock:
        resolved = session.controller.keep_original()
        if resolved:
            session.touch()

    if not resolved:
        raise HTTPException(status_code=409, detail="No suggestion pending")

    return session_to_response(session)


@router.delete("/{session_id}/tags/{tag:path}", response_model=SessionState)
async def remove_tag(
    session_id: str,
    tag: str,
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """Remove a tag; removing an absent tag changes nothing"""
    session = _get_session_or_404(session_id, sessions)

    with session.lock:
        before = session.controller.tags
        session.controller.remove(tag)
        if session.controller.tags != before:
            session.touch()

    return session_to_response(session)


@router.post("/{session_id}/intake", response_model=IntakeResponse)
async def validate_session_intake(
    session_id: str,
    request: IntakeRequest,
    manager: MatcherManager = Depends(get_manager),
    sessions: SessionManager = Depends(get_sessions)
) -> IntakeResponse:
    """
    Validate the intake form using this session's tags.

    Returns the normalized form, including the comma-separated
    `symptoms_text` sent on for analysis.
    """
    session = _get_session_or_404(session_id, sessions)

    data = request.model_dump()
    data["symptoms"] = list(session.tags)

    try:
        form = validate_intake(data, manager.settings.intake)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return IntakeResponse(
        session_id=session_id,
        symptoms=form.symptoms,
        symptoms_text=form.symptoms_text,
        gender=form.gender,
        age=form.age,
        duration=form.duration,
    )


@router.delete("/{session_id}")
async def close_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> dict:
    """Close a session"""
    if not sessions.delete_session(session_id):
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return {"status": "closed", "session_id": session_id}
