from __future__ import annotations

import logging
from typing import Sequence, Union

from paperpilot.errors import OptimizationError, ValidationError
from paperpilot.service.llm_service import LLMService

logger = logging.getLogger(__name__)


RAW_QUERY_PROMPT = """
Act as a research assistant. Optimize this raw user query for academic paper search:
"{query}".
Respond ONLY with the improved search phrase, no explanations.
"""

INTERESTS_PROMPT = """
Convert these research interests to an academic paper search query: {interests}.
Respond ONLY with the query, no explanations.
"""


class QueryOptimizer:
    """
    Rewrites a free-text query or a list of interest tags into a search query
    with one LLM call. There is no fallback to the raw input.
    """

    def __init__(self, llm: LLMService):
        self.llm = llm

    def build_prompt(self, raw: Union[str, Sequence[str]]) -> str:
        if isinstance(raw, str):
            query = raw.strip()
            if not query:
                raise ValidationError("Search query is required")
            return RAW_QUERY_PROMPT.format(query=query).strip()

        interests = [i.strip() for i in raw if i and i.strip()]
        if not interests:
            raise ValidationError("No interests found")
        return INTERESTS_PROMPT.format(interests=", ".join(interests)).strip()

    def optimize(self, raw: Union[str, Sequence[str]]) -> str:
        prompt = self.build_prompt(raw)

        try:
            text = self.llm.completion(prompt)
        except Exception as e:
            logger.error(f"❌ Query optimization failed: {e}")
            raise OptimizationError(details=str(e)) from e

        if not isinstance(text, str) or not text.strip():
            logger.error(f"❌ Query optimization returned unusable content: {text!r}")
            raise OptimizationError(details="Empty response from language model")

        optimized = text.strip()
        logger.info(f"🤖 Optimized query: {optimized}")
        return optimized
