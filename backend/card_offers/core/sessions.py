import logging
import secrets
from typing import Dict, Optional

from card_offers.core.catalog import CatalogLoader
from card_offers.core.controller import SearchController
from card_offers.core.resources import load_table

logger = logging.getLogger(__name__)


class SessionStore:
    """
    In-memory map of session id -> SearchController.
    One controller per browser tab; all share the same catalog.
    Nothing is persisted.
    """

    def __init__(
        self,
        catalog: CatalogLoader,
        fetch_offers=load_table,
        debounce_seconds: Optional[float] = None,
    ):
        self.catalog = catalog
        self._fetch_offers = fetch_offers
        self._debounce_seconds = debounce_seconds
        self._sessions: Dict[str, SearchController] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> str:
        session_id = secrets.token_urlsafe(16)
        self._sessions[session_id] = SearchController(
            self.catalog,
            fetch_offers=self._fetch_offers,
            debounce_seconds=self._debounce_seconds,
        )
        logger.debug("Session created: %s", session_id)
        return session_id

    def get(self, session_id: str) -> SearchController:
        return self._sessions[session_id]

    def drop(self, session_id: str) -> bool:
        controller = self._sessions.pop(session_id, None)
        if controller is None:
            return False
        controller.close()
        return True

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.drop(session_id)
