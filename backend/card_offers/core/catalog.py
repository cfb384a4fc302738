import asyncio
import logging
from typing import Callable, List, Optional

from card_offers.core.config import settings
from card_offers.core.errors import DataLoadError
from card_offers.core.resources import load_table
from card_offers.core.tabular import Row

logger = logging.getLogger(__name__)

Subscriber = Callable[[List[Row]], None]


class CatalogLoader:
    """
    Load-once holder for the card catalog.

    load() fetches + parses the catalog table a single time and publishes the
    rows to every subscriber. Failures are logged and leave the corpus empty
    (search then simply never matches). There is no retry.
    """

    def __init__(self, path: Optional[str] = None, fetch=load_table):
        self.path = path or settings.CATALOG_PATH
        self._fetch = fetch
        self._cards: List[Row] = []
        self._loaded = False
        self._task: Optional[asyncio.Task] = None
        self._subscribers: List[Subscriber] = []

    @property
    def cards(self) -> List[Row]:
        return self._cards

    @property
    def loaded(self) -> bool:
        return self._loaded

    def subscribe(self, callback: Subscriber) -> None:
        """Register for publication. Late subscribers get the corpus right away."""
        self._subscribers.append(callback)
        if self._loaded:
            callback(self._cards)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    async def load(self) -> List[Row]:
        if self._loaded:
            return self._cards
        # Only one in-flight fetch, however many callers are waiting on it
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._load_once())
        await self._task
        return self._cards

    async def _load_once(self) -> None:
        try:
            rows = await self._fetch(self.path)
        except DataLoadError as e:
            logger.error("Error fetching catalog %s: %s", self.path, e.message)
            rows = []

        self._cards = rows
        self._loaded = True
        logger.info("Catalog ready: %d cards", len(rows))
        for callback in list(self._subscribers):
            callback(rows)
