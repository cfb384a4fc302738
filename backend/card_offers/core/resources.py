import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import httpx

from card_offers.core.config import settings
from card_offers.core.errors import ParseFailure, RetrievalFailure
from card_offers.core.tabular import Row, parse_table

logger = logging.getLogger(__name__)


def _relative(path: str) -> str:
    # Resource names are written like "/Visa Gold.csv" (site-root relative)
    return path.lstrip("/")


def _data_dir() -> Path:
    return Path(settings.DATA_DIR)


async def _fetch_http(
    path: str,
    base_url: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    url = f"{base_url.rstrip('/')}/{_relative(path)}"
    try:
        async with httpx.AsyncClient(
            timeout=settings.FETCH_TIMEOUT_SECONDS,
            follow_redirects=True,
            transport=transport,
        ) as client:
            r = await client.get(url)
            r.raise_for_status()
            return r.text
    except httpx.HTTPStatusError as e:
        raise RetrievalFailure(path, f"HTTP {e.response.status_code} from {url}") from e
    except httpx.HTTPError as e:
        raise RetrievalFailure(path, f"{type(e).__name__}: {e}") from e


async def _read_file(path: str) -> str:
    target = _data_dir() / _relative(path)
    try:
        return await asyncio.to_thread(target.read_text, encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseFailure(path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise RetrievalFailure(path, f"cannot read {target}: {e}") from e


async def fetch_text(
    path: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Retrieve one static resource as text.

    DATA_BASE_URL set -> HTTP GET relative to it.
    Otherwise -> read from DATA_DIR.
    Either way, failures become RetrievalFailure. No retries.
    """
    base_url = (settings.DATA_BASE_URL or "").strip()
    if base_url or transport is not None:
        return await _fetch_http(path, base_url or "http://data.local", transport)
    return await _read_file(path)


async def load_table(
    path: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Row]:
    """fetch_text + parse_table. Raises RetrievalFailure / ParseFailure."""
    text = await fetch_text(path, transport=transport)
    rows = parse_table(text, path=path)
    logger.info("Loaded %d rows from %s", len(rows), path)
    return rows
