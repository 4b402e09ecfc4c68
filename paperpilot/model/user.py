from typing import List, Optional
from pydantic import BaseModel, Field
from datetime import datetime
import uuid


class User(BaseModel):
    """用户 + 研究兴趣"""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    email: str
    name: Optional[str] = None
    expertise: Optional[str] = None
    password_hash: str

    interests: List[str] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
    interests_updated_at: Optional[datetime] = None

    model_config = {
        "str_strip_whitespace": True,
        "extra": "ignore",
    }
