from fastapi import APIRouter, Depends, HTTPException, Request

from card_offers.api.views import build_view, card_names
from card_offers.core.catalog import CatalogLoader
from card_offers.core.config import settings
from card_offers.core.controller import SearchController
from card_offers.core.search import NO_RESULTS_MESSAGE, filter_cards
from card_offers.core.sessions import SessionStore
from card_offers.schemas.search import (
    CardSearchResponse,
    QueryRequest,
    SearchView,
    SelectRequest,
)

router = APIRouter(prefix="/v1", tags=["search"])


def get_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_catalog(request: Request) -> CatalogLoader:
    return request.app.state.catalog


def _controller(store: SessionStore, session_id: str) -> SearchController:
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(
            status_code=404,
            detail={"error": "session_not_found", "message": f"Unknown session: {session_id}"},
        )


@router.post("/sessions", response_model=SearchView)
async def create_session(store: SessionStore = Depends(get_store)):
    session_id = store.create()
    return build_view(session_id, store.get(session_id))


@router.get("/sessions/{session_id}", response_model=SearchView)
async def get_session(session_id: str, wait: bool = False, store: SessionStore = Depends(get_store)):
    """
    Current state of a session.
    wait=true blocks until the debounce window has elapsed and offers have loaded.
    """
    controller = _controller(store, session_id)
    if wait:
        await controller.settle()
    return build_view(session_id, controller)


@router.put("/sessions/{session_id}/query", response_model=SearchView)
async def set_query(session_id: str, body: QueryRequest, store: SessionStore = Depends(get_store)):
    controller = _controller(store, session_id)
    controller.set_query(body.text)
    return build_view(session_id, controller)


@router.post("/sessions/{session_id}/select", response_model=SearchView)
async def select_card(session_id: str, body: SelectRequest, store: SessionStore = Depends(get_store)):
    controller = _controller(store, session_id)
    controller.select_card(body.name)
    await controller.settle()
    return build_view(session_id, controller)


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str, store: SessionStore = Depends(get_store)):
    if not store.drop(session_id):
        raise HTTPException(
            status_code=404,
            detail={"error": "session_not_found", "message": f"Unknown session: {session_id}"},
        )
    return {"ok": True}


@router.get("/cards/search", response_model=CardSearchResponse)
async def search_cards(q: str = "", catalog: CatalogLoader = Depends(get_catalog)):
    """
    Stateless, undebounced search: same matching rules as a session.
    """
    await catalog.load()
    matches = filter_cards(catalog.cards, q)
    message = NO_RESULTS_MESSAGE if q and not matches else None
    return CardSearchResponse(
        query=q,
        matches=card_names(matches, limit=settings.MAX_DROPDOWN_MATCHES),
        match_count=len(matches),
        message=message,
    )
