from __future__ import annotations

from typing import List

from pydantic import BaseModel

from paperpilot.model.paper import Paper, Researcher


class RecommendationsResponse(BaseModel):
    recommendations: List[Paper]


class ResearchersResponse(BaseModel):
    researchers: List[Researcher]
