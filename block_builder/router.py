"""
Router FastAPI — endpoints de l'éditeur de blocs.

GET    /builder/catalog                                → entrées du menu "ajouter" + JSON schemas
POST   /builder/pages                                  → nouvelle page
GET    /builder/pages/{page_id}                        → page JSON
PUT    /builder/pages/{page_id}/title                  → change le titre
POST   /builder/pages/{page_id}/blocks                 → ajoute un bloc {kind}
PUT    /builder/pages/{page_id}/blocks/{block_id}      → remplace le content
DELETE /builder/pages/{page_id}                        → supprime la page
DELETE /builder/pages/{page_id}/blocks/{block_id}      → supprime
POST   /builder/pages/{page_id}/blocks/{block_id}/move → {direction: up|down}
POST   /builder/pages/{page_id}/blocks/{block_id}/suggest → suggestion IA (heading, image)
GET    /builder/pages/{page_id}/preview                → document HTML
GET    /builder/pages/{page_id}/source                 → document en texte brut (copie)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from pydantic import BaseModel, ValidationError

from .blocks import BLOCK_MENU, BLOCK_REGISTRY, BlockKind
from .core.store import BlockStore, Direction
from .registry import PageRegistry, get_registry
from .renderer.html import render_page
from .suggestions import SUGGESTIBLE_KINDS, TextModel, run_suggestion

log = logging.getLogger(__name__)
router = APIRouter(prefix="/builder", tags=["block_builder"])


# ── Schémas de requête ─────────────────────────────────────────────────────────

class CreatePageRequest(BaseModel):
    title: Optional[str] = None


class TitleRequest(BaseModel):
    title: str


class AddBlockRequest(BaseModel):
    kind: BlockKind


class ContentRequest(BaseModel):
    content: Dict[str, Any]


class MoveRequest(BaseModel):
    direction: Direction


# ── Dépendances ────────────────────────────────────────────────────────────────

def get_suggestion_model() -> Optional[TextModel]:
    """None → modèle Gemini par défaut, résolu dans le chemin protégé de la suggestion."""
    return None


def _store(page_id: str, registry: PageRegistry) -> BlockStore:
    store = registry.get(page_id)
    if store is None:
        raise HTTPException(404, f"Page introuvable : {page_id}")
    return store


def _page_json(page_id: str, store: BlockStore) -> dict:
    return {"page_id": page_id, **store.page.model_dump()}


# ── Catalogue ──────────────────────────────────────────────────────────────────

@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> JSONResponse:
    """Entrées du menu d'ajout, dans l'ordre d'affichage, avec le JSON schema du content."""
    catalog_data = []
    for label, kind in BLOCK_MENU:
        cls = BLOCK_REGISTRY[kind]
        catalog_data.append({
            "kind":   kind,
            "label":  label,
            "schema": cls.model_fields["content"].annotation.model_json_schema(),
        })
    return JSONResponse({"blocks": catalog_data})


# ── Pages ──────────────────────────────────────────────────────────────────────

@router.post("/pages", status_code=201)
def create_page(req: CreatePageRequest, registry: PageRegistry = Depends(get_registry)):
    page_id, store = registry.create(req.title)
    return _page_json(page_id, store)


@router.get("/pages/{page_id}")
def get_page(page_id: str, registry: PageRegistry = Depends(get_registry)):
    return _page_json(page_id, _store(page_id, registry))


@router.delete("/pages/{page_id}")
def delete_page(page_id: str, registry: PageRegistry = Depends(get_registry)):
    if not registry.delete(page_id):
        raise HTTPException(404, f"Page introuvable : {page_id}")
    return {"deleted": True, "page_id": page_id}


@router.put("/pages/{page_id}/title")
def set_title(page_id: str, req: TitleRequest, registry: PageRegistry = Depends(get_registry)):
    store = _store(page_id, registry)
    store.set_title(req.title)
    return _page_json(page_id, store)


# ── Blocs ──────────────────────────────────────────────────────────────────────

@router.post("/pages/{page_id}/blocks", status_code=201)
def add_block(page_id: str, req: AddBlockRequest, registry: PageRegistry = Depends(get_registry)):
    block = _store(page_id, registry).add_block(req.kind)
    return block.model_dump()


@router.put("/pages/{page_id}/blocks/{block_id}")
def update_block(page_id: str, block_id: str, req: ContentRequest,
                 registry: PageRegistry = Depends(get_registry)):
    store = _store(page_id, registry)
    try:
        block = store.update_block_content(block_id, req.content)
    except ValidationError as e:
        raise HTTPException(422, e.errors(include_url=False, include_context=False, include_input=False))
    if block is None:
        raise HTTPException(404, f"Bloc introuvable : {block_id}")
    return block.model_dump()


@router.delete("/pages/{page_id}/blocks/{block_id}")
def delete_block(page_id: str, block_id: str, registry: PageRegistry = Depends(get_registry)):
    store = _store(page_id, registry)
    if not store.delete_block(block_id):
        raise HTTPException(404, f"Bloc introuvable : {block_id}")
    return _page_json(page_id, store)


@router.post("/pages/{page_id}/blocks/{block_id}/move")
def move_block(page_id: str, block_id: str, req: MoveRequest,
               registry: PageRegistry = Depends(get_registry)):
    store = _store(page_id, registry)
    if store.get_block(block_id) is None:
        raise HTTPException(404, f"Bloc introuvable : {block_id}")
    moved = store.move_block(block_id, req.direction)
    return {"moved": moved, **_page_json(page_id, store)}


@router.post("/pages/{page_id}/blocks/{block_id}/suggest")
async def suggest(page_id: str, block_id: str,
                  registry: PageRegistry = Depends(get_registry),
                  model: Optional[TextModel] = Depends(get_suggestion_model)):
    """Suggestion IA (niveau de titre ou texte alternatif) appliquée si le bloc n'a pas bougé."""
    store = _store(page_id, registry)
    block = store.get_block(block_id)
    if block is None:
        raise HTTPException(404, f"Bloc introuvable : {block_id}")
    if block.kind not in SUGGESTIBLE_KINDS:
        raise HTTPException(400, f"Aucune suggestion pour le kind {block.kind!r}")

    updated = await run_suggestion(store, block_id, model=model)
    if updated is None:
        return {"applied": False, "block": None}
    return {"applied": True, "block": updated.model_dump()}


# ── Génération ─────────────────────────────────────────────────────────────────

def _render(page_id: str, registry: PageRegistry) -> str:
    store = _store(page_id, registry)
    page = store.snapshot()
    if page.is_blank:
        raise HTTPException(409, "Page vide : ajoutez un bloc ou un titre")
    return render_page(page)


@router.get("/pages/{page_id}/preview", response_class=HTMLResponse, summary="Aperçu du document")
def preview(page_id: str, registry: PageRegistry = Depends(get_registry)) -> HTMLResponse:
    return HTMLResponse(content=_render(page_id, registry))


@router.get("/pages/{page_id}/source", response_class=PlainTextResponse, summary="Code HTML à copier")
def source(page_id: str, registry: PageRegistry = Depends(get_registry)) -> PlainTextResponse:
    return PlainTextResponse(content=_render(page_id, registry))
