import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.routes.auth import router as auth_router
from api.routes.collab import router as collab_router
from api.routes.interests import router as interests_router
from api.routes.recommendations import router as recommendations_router
from paperpilot.config import Config
from paperpilot.database.db.models import Base
from paperpilot.database.db.session import get_engine
from paperpilot.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(level=Config.log_level, log_file=Config.log_file)
    logger.info(f"🚀 Starting {Config.app_name}")
    logger.info(f"   Search provider: {Config.search.provider}")
    logger.info(f"   LLM Model: {Config.chat_litellm.model}")

    # Create any missing tables on startup
    Base.metadata.create_all(bind=get_engine())
    yield

    logger.info(f"👋 Shutting down {Config.app_name}")


app = FastAPI(title=Config.app_name, lifespan=lifespan)

# "*" cannot be combined with credentials=True
allow_all = "*" in Config.cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.cors_origins,
    allow_credentials=not allow_all,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router, prefix=Config.api_prefix)
app.include_router(interests_router, prefix=Config.api_prefix)
app.include_router(recommendations_router, prefix=Config.api_prefix)
app.include_router(collab_router, prefix=Config.api_prefix)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
