from pydantic import BaseModel
from typing import Optional, List


class CardDetails(BaseModel):
    name: str
    visa_type: str = "No category found"
    rating: str = "No rating available"


class OfferItem(BaseModel):
    title: str = ""
    image: Optional[str] = None   # image URL
    link: Optional[str] = None    # outbound link, opened in a new tab


class SearchView(BaseModel):
    session_id: str
    query: str
    debounced_query: str
    phase: str
    matches: List[str]            # card names for the dropdown
    match_count: int
    selected: Optional[CardDetails] = None
    offers_heading: Optional[str] = None   # e.g. "Visa Gold Offers"
    offers: List[OfferItem]
    message: Optional[str] = None


class CardSearchResponse(BaseModel):
    query: str
    matches: List[str]
    match_count: int
    message: Optional[str] = None


class OffersResponse(BaseModel):
    visa_type: str
    source: str                   # which offers table was used
    offers: List[OfferItem]


class QueryRequest(BaseModel):
    text: str = ""


class SelectRequest(BaseModel):
    name: str
