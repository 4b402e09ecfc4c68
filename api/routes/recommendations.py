from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_current_user_id, get_recommendation_service
from api.schemas.recommendation import RecommendationsResponse, ResearchersResponse
from paperpilot.model.paper import Paper
from paperpilot.service.recommendation_service import RecommendationService

router = APIRouter(tags=["recommendations"])


@router.get("/recommendations", response_model=List[Paper])
def get_recommendations(
    query: Optional[str] = Query(default=None),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Search papers directly with the user's query (no LLM rewrite)."""
    return service.get_recommendations(query)


@router.get("/recommendations/personalized", response_model=RecommendationsResponse)
def get_personalized_recommendations(
    user_id: str = Depends(get_current_user_id),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Papers for the current user's stored interests."""
    papers = service.get_personalized_recommendations(user_id)
    return RecommendationsResponse(recommendations=papers)


@router.get("/researchers", response_model=ResearchersResponse)
def search_researchers(
    query: Optional[str] = Query(default=None),
    service: RecommendationService = Depends(get_recommendation_service),
):
    researchers = service.search_researchers(query)
    return ResearchersResponse(researchers=researchers)
