import io
import logging
from typing import Dict, List

import pandas as pd

from card_offers.core.errors import ParseFailure

logger = logging.getLogger(__name__)

Row = Dict[str, str]


def parse_table(text: str, path: str = "<memory>") -> List[Row]:
    """
    Parse delimited text into one dict per row, keyed by the header row.

    - every value stays a string (no type inference, missing cells -> "")
    - blank lines are skipped
    - no header validation: whatever columns exist are returned
    - all-or-nothing: malformed content raises ParseFailure
    """
    if not text or not text.strip():
        return []

    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            index_col=False,
        )
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, ValueError) as e:
        raise ParseFailure(path, str(e)) from e

    df = df.fillna("")
    rows: List[Row] = df.to_dict(orient="records")
    logger.debug("Parsed %d rows from %s", len(rows), path)
    return rows
