from typing import Iterable, List, Optional

from card_offers.core.config import settings
from card_offers.core.controller import SearchController
from card_offers.core.search import CATEGORY_FIELD, NAME_FIELD, RATING_FIELD
from card_offers.core.tabular import Row
from card_offers.schemas.search import CardDetails, OfferItem, SearchView


def card_names(cards: Iterable[Row], limit: Optional[int] = None) -> List[str]:
    names = [card.get(NAME_FIELD) or "" for card in cards]
    if limit is not None and limit > 0:
        names = names[:limit]
    return names


def card_details(card: Row) -> CardDetails:
    return CardDetails(
        name=card.get(NAME_FIELD) or "",
        visa_type=card.get(CATEGORY_FIELD) or "No category found",
        rating=card.get(RATING_FIELD) or "No rating available",
    )


def offer_items(rows: Iterable[Row]) -> List[OfferItem]:
    return [
        OfferItem(
            title=row.get("Title") or "",
            image=row.get("Image") or None,
            link=row.get("Link") or None,
        )
        for row in rows
    ]


def build_view(session_id: str, controller: SearchController) -> SearchView:
    """
    Render-ready snapshot of a session:
      - dropdown only lists up to MAX_DROPDOWN_MATCHES names
      - offers only while a card is selected
      - the no-results message only while nothing is selected
    """
    st = controller.state
    selected = card_details(st.selected) if st.selected is not None else None
    show_offers = st.selected is not None and bool(st.offers)

    return SearchView(
        session_id=session_id,
        query=st.raw_query,
        debounced_query=st.debounced_query,
        phase=controller.phase.value,
        matches=card_names(st.matches, limit=settings.MAX_DROPDOWN_MATCHES),
        match_count=len(st.matches),
        selected=selected,
        offers_heading=f"{st.selected.get(CATEGORY_FIELD)} Offers" if show_offers else None,
        offers=offer_items(st.offers) if show_offers else [],
        message=st.empty_message if st.selected is None else None,
    )
