"""
Search & selection state for one browser session.

Flow:
  set_query(text)  -> raw query updates now, selection/offers dropped,
                      debounce re-armed
  (quiet for DEBOUNCE_SECONDS) -> debounced query := raw query -> recompute matches
  select_card(name) -> selection set, dropdown closed, offers for its
                       "Visa type" loaded in the background

Offers fetches are tagged with the selection generation that started them;
a result that arrives after the selection changed is dropped.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from card_offers.core.catalog import CatalogLoader
from card_offers.core.categories import is_known_category, offers_path_for
from card_offers.core.config import settings
from card_offers.core.debounce import Debouncer
from card_offers.core.errors import DataLoadError
from card_offers.core.resources import load_table
from card_offers.core.search import (
    CATEGORY_FIELD,
    NO_RESULTS_MESSAGE,
    filter_cards,
    find_card,
)
from card_offers.core.tabular import Row

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    IDLE = "idle"
    TYPING = "typing"
    MATCHING = "matching"
    NO_MATCHES = "no_matches"
    MATCHES_SHOWN = "matches_shown"
    SELECTED = "selected"
    OFFERS_LOADING = "offers_loading"
    OFFERS_SHOWN = "offers_shown"


@dataclass
class SearchState:
    raw_query: str = ""
    debounced_query: str = ""
    matches: List[Row] = field(default_factory=list)
    selected: Optional[Row] = None
    offers: List[Row] = field(default_factory=list)
    empty_message: Optional[str] = None


class SearchController:
    def __init__(
        self,
        catalog: CatalogLoader,
        fetch_offers=load_table,
        debounce_seconds: Optional[float] = None,
    ):
        self.catalog = catalog
        self.state = SearchState()
        self._fetch_offers = fetch_offers
        delay = settings.DEBOUNCE_SECONDS if debounce_seconds is None else debounce_seconds
        self._debouncer = Debouncer(delay)
        self._generation = 0
        self._offers_task: Optional[asyncio.Task] = None
        self._offers_tasks: Set[asyncio.Task] = set()
        self._closed = False
        catalog.subscribe(self._on_catalog)

    # ----------------------------
    # Operations
    # ----------------------------
    def set_query(self, text: str) -> None:
        st = self.state
        st.raw_query = text
        # Typing invalidates the selection and anything loaded for it
        st.selected = None
        st.offers = []
        self._generation += 1
        self._offers_task = None
        self._debouncer.schedule(self._apply_debounced)

    def select_card(self, name: str) -> Optional[asyncio.Task]:
        """
        Select the catalog card called `name` (exact match).
        Returns the offers fetch task when one was started.
        """
        st = self.state
        self._debouncer.cancel()
        self._generation += 1
        self._offers_task = None

        selected = find_card(self.catalog.cards, name)
        if selected is None:
            logger.warning("Selected card not in catalog: %r", name)

        st.selected = selected
        st.raw_query = name
        st.matches = []
        # Offers of the previous card must not linger under the new selection
        st.offers = []

        visa_type = (selected or {}).get(CATEGORY_FIELD) or ""
        if selected is None or not visa_type:
            return None
        return self._start_offers(visa_type)

    async def settle(self) -> None:
        """Wait for the pending debounce and the current offers fetch."""
        await self._debouncer.flush()
        task = self._offers_task
        if task is not None and not task.done():
            await asyncio.wait({task})

    def close(self) -> None:
        self._closed = True
        self._debouncer.cancel()
        for task in list(self._offers_tasks):
            task.cancel()
        self._offers_tasks.clear()
        self._offers_task = None
        self.catalog.unsubscribe(self._on_catalog)

    # ----------------------------
    # Derived state
    # ----------------------------
    @property
    def offers_loading(self) -> bool:
        return self._offers_task is not None and not self._offers_task.done()

    @property
    def phase(self) -> Phase:
        st = self.state
        if st.selected is not None:
            if self.offers_loading:
                return Phase.OFFERS_LOADING
            return Phase.OFFERS_SHOWN if st.offers else Phase.SELECTED
        if self._debouncer.pending:
            return Phase.TYPING
        if not st.debounced_query:
            return Phase.IDLE
        if not self.catalog.loaded:
            return Phase.MATCHING
        if st.matches:
            return Phase.MATCHES_SHOWN
        return Phase.NO_MATCHES if st.empty_message else Phase.IDLE

    # ----------------------------
    # Reactions
    # ----------------------------
    def _apply_debounced(self) -> None:
        self.state.debounced_query = self.state.raw_query
        self._recompute()

    def _on_catalog(self, cards: List[Row]) -> None:
        self._recompute()

    def _recompute(self) -> None:
        st = self.state
        if not st.debounced_query:
            st.matches = []
            st.empty_message = None
            return
        st.matches = filter_cards(self.catalog.cards, st.debounced_query)
        # Nothing to say yet while the catalog is still on its way
        no_results = self.catalog.loaded and not st.matches
        st.empty_message = NO_RESULTS_MESSAGE if no_results else None

    def _start_offers(self, visa_type: str) -> asyncio.Task:
        if not is_known_category(visa_type):
            logger.info("Unrecognized category %r, using default offers", visa_type)
        path = offers_path_for(visa_type)
        task = asyncio.get_running_loop().create_task(
            self._resolve_offers(path, self._generation)
        )
        self._offers_task = task
        self._offers_tasks.add(task)
        task.add_done_callback(self._offers_tasks.discard)
        return task

    async def _resolve_offers(self, path: str, generation: int) -> None:
        try:
            rows = await self._fetch_offers(path)
        except DataLoadError as e:
            logger.error("Error fetching offers %s: %s", path, e.message)
            rows = []

        if self._closed or generation != self._generation:
            logger.debug("Dropping stale offers from %s (generation %d)", path, generation)
            return
        self.state.offers = rows
