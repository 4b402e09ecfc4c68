from __future__ import annotations
from typing import Any, Dict, List, Optional
from pathlib import Path

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated
from pydantic import Field
from dotenv import load_dotenv

load_dotenv()

class ChatLiteLLMConfig(BaseModel):
    model: Annotated[str, Field(default="gemini/gemini-2.0-flash")]
    api_key: Annotated[Optional[str], Field(default=None)]
    api_base: Annotated[Optional[str], Field(default=None)]
    temperature: Annotated[float, Field(default=0.2, ge=0, le=2)]
    timeout: Annotated[int, Field(default=60)]

class SemanticScholarConfig(BaseModel):
    base_url: Annotated[str, Field(default="https://api.semanticscholar.org/graph/v1")]
    # "optional_key" is the placeholder shipped in example env files
    api_key: Annotated[Optional[str], Field(default="optional_key")]
    timeout: Annotated[int, Field(default=30)]

class ArxivConfig(BaseModel):
    page_size: Annotated[int, Field(default=100)]
    delay_seconds: Annotated[float, Field(default=3.0)]
    num_retries: Annotated[int, Field(default=0)]

class SearchConfig(BaseModel):
    provider: Annotated[str, Field(default="semantic_scholar")]  # semantic_scholar | arxiv
    personalized_limit: Annotated[int, Field(default=5)]
    general_limit: Annotated[int, Field(default=10)]
    researcher_limit: Annotated[int, Field(default=10)]


class AuthConfig(BaseModel):
    """JWT 签发配置"""
    jwt_secret: Annotated[str, Field(default="change-me-to-a-long-random-secret-value")]
    jwt_algorithm: Annotated[str, Field(default="HS256")]
    token_expire_minutes: Annotated[int, Field(default=60 * 24 * 7)]


class Settings(BaseSettings):
    app_name: Annotated[str, Field(default="PaperPilot API")]
    api_prefix: Annotated[str, Field(default="")]
    cors_origins: Annotated[List[str], Field(default=["*"])]

    log_level: Annotated[str, Field(default="INFO")]
    log_file: Annotated[str, Field(default="paperpilot.log")]

    database_url: Annotated[str, Field(default="sqlite:///cache/paperpilot.db")]

    max_interests: Annotated[int, Field(default=10)]

    chat_litellm: ChatLiteLLMConfig = Field(default_factory=ChatLiteLLMConfig)
    semantic_scholar: SemanticScholarConfig = Field(default_factory=SemanticScholarConfig)
    arxiv: ArxivConfig = Field(default_factory=ArxivConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,             # kwargs
        env_settings,              # env vars
        dotenv_settings,           # .env file
        file_secret_settings,      # /secrets/*
    ):
        def yaml_settings() -> Dict[str, Any]:
            path = Path("settings.yaml")
            if not path.exists():
                return {}
            return yaml.safe_load(path.read_text(encoding="utf-8")) or {}

        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )


Config = Settings()
