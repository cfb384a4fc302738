from __future__ import annotations

from typing import Iterable, List, Optional

from card_offers.core.tabular import Row

NAME_FIELD = "Credit Card Name"
CATEGORY_FIELD = "Visa type"
RATING_FIELD = "Rating"

NO_RESULTS_MESSAGE = "No Offers Available on this credit card."


def query_terms(query: str) -> List[str]:
    return query.lower().split()


def matches_terms(card: Row, terms: List[str]) -> bool:
    name = card.get(NAME_FIELD) or ""
    if not name:
        return False
    low = name.lower()
    return all(term in low for term in terms)


def filter_cards(catalog: Iterable[Row], query: str) -> List[Row]:
    """
    Cards whose name contains every whitespace-separated query term
    (case-insensitive substring AND, term order irrelevant).
    Catalog order is preserved. Empty query => no matches; a whitespace-only
    query has no terms, so every named card matches.
    """
    if not query:
        return []
    terms = query_terms(query)
    return [card for card in catalog if matches_terms(card, terms)]


def find_card(catalog: Iterable[Row], name: str) -> Optional[Row]:
    """First card whose name equals `name` exactly (case-sensitive)."""
    for card in catalog:
        if card.get(NAME_FIELD) == name:
            return card
    return None
