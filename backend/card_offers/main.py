"""
Card Offers API - FastAPI Main Entry

✅ LOCAL:
    cd backend
    python -m uvicorn card_offers.main:app --reload --host 0.0.0.0 --port 8000

✅ TEST:
    curl -i http://127.0.0.1:8000/health
    curl -i http://127.0.0.1:8000/version
    curl -i "http://127.0.0.1:8000/v1/cards/search?q=gold"
    curl -i "http://127.0.0.1:8000/v1/offers?visa_type=Visa%20Gold"

    Browser UI:
        http://127.0.0.1:8000/

✅ DATA:
    Tables are read from card_offers/data/ by default.
    Set DATA_DIR to point somewhere else, or DATA_BASE_URL to fetch them over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

# ✅ Routers
from card_offers.api.routes_meta import router as meta_router
from card_offers.api.routes_offers import router as offers_router
from card_offers.api.routes_search import router as search_router
from card_offers.core.catalog import CatalogLoader
from card_offers.core.config import PACKAGE_DIR, settings
from card_offers.core.resources import load_table
from card_offers.core.sessions import SessionStore

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

INDEX_HTML = PACKAGE_DIR / "static" / "index.html"


def create_app(
    catalog: Optional[CatalogLoader] = None,
    fetch_offers=load_table,
    debounce_seconds: Optional[float] = None,
) -> FastAPI:
    catalog = catalog or CatalogLoader()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Catalog is loaded once, up front; every session searches the same rows
        await catalog.load()
        yield
        app.state.sessions.close_all()

    app = FastAPI(
        title="Card Offers API",
        version=settings.APP_VERSION,
        description="Search credit cards by name and browse offers for the card's Visa tier",
        lifespan=lifespan,
    )
    app.state.catalog = catalog
    app.state.sessions = SessionStore(
        catalog,
        fetch_offers=fetch_offers,
        debounce_seconds=debounce_seconds,
    )

    # ✅ CORS
    # The bundled page is same-origin; this keeps other frontends / Swagger smooth
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ Root (GET /) - the search page
    @app.get("/", include_in_schema=False)
    def root():
        return FileResponse(INDEX_HTML, media_type="text/html")

    # ✅ Mount routers
    app.include_router(meta_router)
    app.include_router(search_router)
    app.include_router(offers_router)

    return app


app = create_app()
