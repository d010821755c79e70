"""
EMAIL_BUILDER — FastAPI app
Démarrer : uvicorn email_builder.app:app --reload --port 8001
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .router import router as email_builder_router

logging.basicConfig(
    level=getattr(logging, get_settings().log_level, logging.INFO),
    format="%(asctime)s %(levelname)s — %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="EMAIL_BUILDER — Éditeur d'emails par blocs", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(email_builder_router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "email_builder", "version": __version__}
