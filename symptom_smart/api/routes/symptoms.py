"""
Symptom Smart: Symptoms Routes

Endpoints for the symptom dictionary:
- List of known symptoms
- Spell-check lookup for a single token
"""

from typing import List
from fastapi import APIRouter, Depends, Query

from symptom_smart.nlp import FuzzyMatcher, normalize_token

from ..dependencies import get_matcher
from ..models import SymptomMatchResponse

router = APIRouter(prefix="/symptoms", tags=["Symptoms"])


@router.get("", response_model=List[str])
async def list_symptoms(
    matcher: FuzzyMatcher = Depends(get_matcher),
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0)
) -> List[str]:
    """
    Known symptoms, in dictionary order.

    - **limit**: Maximum number of entries (1-1000)
    - **offset**: Pagination offset
    """
    return list(matcher.dictionary.entries[offset:offset + limit])


@router.get("/count")
async def count_symptoms(
    matcher: FuzzyMatcher = Depends(get_matcher)
) -> dict:
    """Number of symptoms in the dictionary"""
    return {
        "total": len(matcher.dictionary)
    }


@router.get("/match", response_model=SymptomMatchResponse)
async def match_symptom(
    q: str = Query(..., min_length=1, max_length=100),
    matcher: FuzzyMatcher = Depends(get_matcher)
) -> SymptomMatchResponse:
    """
    Closest dictionary entry for a token.

    - **q**: Token as typed

    `is_suggestion` is true when the token is a near miss that the tag
    input would offer to correct.
    """
    result = matcher.find_closest(q)

    return SymptomMatchResponse(
        query=q,
        normalized=normalize_token(q),
        match=result.symptom if result else None,
        distance=result.distance if result else None,
        is_known=bool(result and result.is_exact),
        is_suggestion=bool(result and not result.is_exact),
    )
