import os
from fastapi import APIRouter, Request

from card_offers.core.config import settings

router = APIRouter(tags=["meta"])


@router.get("/health")
def health(request: Request):
    catalog = request.app.state.catalog
    return {"ok": True, "catalog_loaded": catalog.loaded, "cards": len(catalog.cards)}


@router.get("/version")
def version():
    return {
        "version": settings.APP_VERSION,
        "build": settings.BUILD_ID,
        "git_commit": os.environ.get("GIT_COMMIT"),
    }
