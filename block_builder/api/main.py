"""
BLOCK_BUILDER — FastAPI app
Démarrer : uvicorn block_builder.api.main:app --reload --port 8001
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__, config
from ..router import router as builder_router

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="BLOCK_BUILDER — Générateur de pages", version=__version__, docs_url="/docs")

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(builder_router)


@app.get("/health")
def health():
    return {"status": "ok", "service": "block_builder", "version": __version__}
