import logging

from fastapi import APIRouter

from card_offers.api.views import offer_items
from card_offers.core.categories import offers_path_for
from card_offers.core.errors import DataLoadError
from card_offers.core.resources import load_table
from card_offers.schemas.search import OffersResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["offers"])


@router.get("/offers", response_model=OffersResponse)
async def offers(visa_type: str = ""):
    """
    Offers for a card category.
    Unknown / blank categories get the Visa Standard offers.
    A missing or broken offers table yields an empty list (logged, not an error).
    """
    path = offers_path_for(visa_type)
    try:
        rows = await load_table(path)
    except DataLoadError as e:
        logger.error("Error fetching offers %s: %s", path, e.message)
        rows = []

    return OffersResponse(visa_type=visa_type, source=path, offers=offer_items(rows))
