from fastapi import APIRouter, Depends

from api.deps import get_current_user_id, get_interest_repo
from api.schemas.interests import (
    InterestsResponse,
    UpdateInterestsRequest,
    UpdateInterestsResponse,
)
from paperpilot.database.interest_repository import InterestRepository

router = APIRouter(prefix="/interests", tags=["interests"])


@router.put("", response_model=UpdateInterestsResponse)
def update_interests(
    body: UpdateInterestsRequest,
    user_id: str = Depends(get_current_user_id),
    repo: InterestRepository = Depends(get_interest_repo),
):
    """Replace the current user's interests."""
    interests = repo.set(user_id, body.interests)
    return UpdateInterestsResponse(success=True, interests=interests)


@router.get("", response_model=InterestsResponse)
def get_interests(
    user_id: str = Depends(get_current_user_id),
    repo: InterestRepository = Depends(get_interest_repo),
):
    interests, updated_at = repo.get_with_timestamp(user_id)
    return InterestsResponse(interests=interests, updated_at=updated_at)
