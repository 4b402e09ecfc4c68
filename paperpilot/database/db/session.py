from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker

from paperpilot.config import Config


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def _ensure_sqlite_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def get_engine() -> Engine:
    """
    获取数据库 engine（单例模式，首次调用时创建）
    """
    global _engine

    if _engine is None:
        _ensure_sqlite_dir(Config.database_url)
        _engine = create_engine(
            Config.database_url,
            pool_pre_ping=True,
        )

    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory

    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
        )

    return _session_factory
