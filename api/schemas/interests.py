from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UpdateInterestsRequest(BaseModel):
    # str or List[str]; shape is checked by validate_interests
    interests: Any = None


class UpdateInterestsResponse(BaseModel):
    success: bool
    interests: List[str]


class InterestsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    interests: List[str]
    updated_at: Optional[datetime] = None
