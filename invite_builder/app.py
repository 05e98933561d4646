"""
invite_builder — FastAPI app
Démarrer : uvicorn invite_builder.app:app --reload --port 8002
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import LOG_LEVEL
from .router import router
from .storage.database import init_db

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    log.info("DB initialisée")
    yield


app = FastAPI(title="invite_builder — Éditeur d'invitations", version="0.1.0", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok"}
